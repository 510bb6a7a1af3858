"""Heuristics that rate cells and shapes on a triangular grid."""

from __future__ import annotations

import math
from collections.abc import Iterable

from hexlogogen.grid import TriangularGrid
from hexlogogen.shape import Shape, ShapeMetrics

__all__ = ["ShapeEvaluator"]


class ShapeEvaluator:
    """Scores candidate cells and finished shapes on one grid."""

    def __init__(self, grid: TriangularGrid) -> None:
        self.grid = grid

    def find_center_cells(self) -> list[int]:
        """All cell ids, ordered from closest to farthest from the hexagon centre."""
        center = self.grid.hex_grid.center
        ranked = sorted(
            enumerate(self.grid.cells),
            key=lambda item: item[1].centroid.distance(center),
        )
        return [cell_id for cell_id, _ in ranked]

    def find_boundary_cells(self, used_cells: Iterable[int]) -> list[int]:
        """Cells adjacent to the used cells but not used themselves."""
        used = set(used_cells)
        boundary: list[int] = []
        seen: set[int] = set()
        for used_cell in sorted(used):
            for adj in self.grid.adjacent_cells(used_cell):
                if adj not in used and adj not in seen:
                    seen.add(adj)
                    boundary.append(adj)
        return boundary

    def _shape_center(self, shape: Shape) -> tuple[float, float]:
        total_x = 0.0
        total_y = 0.0
        for cell_id in shape.cells:
            cell = self.grid.get_cell(cell_id)
            if cell is not None:
                total_x += cell.centroid.x
                total_y += cell.centroid.y
        count = len(shape.cells)
        return total_x / count, total_y / count

    def _boundary_of(self, shape: Shape) -> list[int]:
        return [
            cell_id
            for cell_id in shape.cells
            if any(
                not shape.contains_cell(adj)
                for adj in self.grid.adjacent_cells(cell_id)
            )
        ]

    def score_candidate_cell(self, shape: Shape, cell_id: int) -> float:
        """How well a cell would extend the shape; higher is better."""
        if not shape.cells:
            return 1.0

        cell = self.grid.get_cell(cell_id)
        if cell is None:
            return 0.0

        center_x, center_y = self._shape_center(shape)
        size = len(shape.cells)

        adjacent_in_shape = sum(
            1 for adj in self.grid.adjacent_cells(cell_id) if shape.contains_cell(adj)
        )
        if adjacent_in_shape == 0:
            adjacency_score = 0.0
        elif adjacent_in_shape == 1:
            adjacency_score = 0.7
        elif adjacent_in_shape == 2:
            adjacency_score = 1.0
        else:
            adjacency_score = 0.6

        distance = math.hypot(cell.centroid.x - center_x, cell.centroid.y - center_y)
        expected_radius = math.sqrt(size) * 1.2
        dist_ratio = distance / expected_radius
        distance_score = 1.0 - min(abs(dist_ratio - 1.0), 1.0)

        new_center_x = (center_x * size + cell.centroid.x) / (size + 1)
        new_center_y = (center_y * size + cell.centroid.y) / (size + 1)
        center_shift = math.hypot(new_center_x - center_x, new_center_y - center_y)
        balance_score = 1.0 - min(center_shift / expected_radius, 1.0)

        return adjacency_score * 0.4 + distance_score * 0.4 + balance_score * 0.2

    def evaluate_shape_quality(self, shape: Shape) -> ShapeMetrics:
        """Compactness, smoothness and balance of a shape."""
        if not shape.cells:
            return ShapeMetrics(compactness=0.0, smoothness=0.0, balance=0.0)

        center_x, center_y = self._shape_center(shape)
        area = float(len(shape.cells))

        perimeter = float(
            sum(
                1
                for cell_id in shape.cells
                for adj in self.grid.adjacent_cells(cell_id)
                if not shape.contains_cell(adj)
            )
        )
        if perimeter > 0.0:
            ideal_ratio = math.sqrt(12.56 * area)
            compactness = 1.0 - min(max((perimeter - ideal_ratio) / perimeter, 0.0), 1.0)
        else:
            compactness = 0.0

        smoothness = 1.0
        boundary = self._boundary_of(shape)
        if boundary:
            boundary_set = set(boundary)
            sharp_angles = 0
            for cell_id in boundary:
                adj_boundary = sum(
                    1
                    for adj in self.grid.adjacent_cells(cell_id)
                    if shape.contains_cell(adj) and adj in boundary_set
                )
                if adj_boundary > 2:
                    sharp_angles += 1
            smoothness = 1.0 - min(sharp_angles / len(boundary), 1.0)

        distances = []
        for cell_id in shape.cells:
            cell = self.grid.get_cell(cell_id)
            if cell is not None:
                distances.append(
                    math.hypot(cell.centroid.x - center_x, cell.centroid.y - center_y)
                )
        max_dist = max(distances, default=0.0)
        avg_dist = sum(distances) / area
        variance = sum((d - avg_dist) ** 2 for d in distances) / area

        if max_dist == 0.0:
            # An undefined ratio counts as fully unbalanced.
            balance = 0.0
        else:
            balance = 1.0 - min(variance / max_dist**2, 1.0)

        return ShapeMetrics(
            compactness=compactness, smoothness=smoothness, balance=balance
        )