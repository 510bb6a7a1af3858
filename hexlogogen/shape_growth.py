"""Growing connected shapes outward over a triangular grid."""

from __future__ import annotations

import random
import time
from collections import deque
from collections.abc import Iterable

from hexlogogen.grid import TriangularGrid
from hexlogogen.shape import Shape
from hexlogogen.shape_scoring import ShapeEvaluator

__all__ = ["ShapeGrower"]

_U64 = 2**64


def _make_rng(seed: int | None) -> random.Random:
    """A generator seeded from the seed plus a little clock jitter, or from entropy."""
    if seed is None:
        return random.Random()
    jitter = (time.time_ns() % 1_000_000_000) % 10_000
    return random.Random((seed + jitter) % _U64)


class ShapeGrower:
    """Grows shapes cell by cell from a starting cell, breadth first."""

    def __init__(self, grid: TriangularGrid, seed: int | None = None) -> None:
        self.grid = grid
        self.evaluator = ShapeEvaluator(grid)
        self.rng = _make_rng(seed)

    def _rank(self, shape: Shape, cells: Iterable[int]) -> list[int]:
        """Cells ordered from best to worst candidate for the shape."""
        return sorted(
            cells, key=lambda cell_id: -self.evaluator.score_candidate_cell(shape, cell_id)
        )

    def _grow(
        self,
        shape: Shape,
        start_cell: int,
        target_size: int,
        blocked: frozenset[int] | set[int],
    ) -> Shape:
        shape.add_cell(start_cell)
        max_attempts = target_size * 3
        attempts = 0
        randomness = self.rng.uniform(0.1, 0.4)

        queue = deque([start_cell])
        visited = {start_cell}

        while shape.cell_count() < target_size and attempts < max_attempts and queue:
            attempts += 1
            current = queue.popleft()

            candidates = []
            for adj in self.grid.adjacent_cells(current):
                if (
                    not shape.contains_cell(adj)
                    and adj not in blocked
                    and adj not in visited
                ):
                    candidates.append(adj)
                    visited.add(adj)

            if self.rng.random() < randomness:
                self.rng.shuffle(candidates)
            else:
                candidates = self._rank(shape, candidates)

            for candidate in candidates:
                if shape.cell_count() >= target_size:
                    break
                shape.add_cell(candidate)
                queue.append(candidate)

        if self.rng.random() > randomness:
            self.smooth_shape(shape, target_size)
        return shape

    def generate_center_shape(
        self, color: str, opacity: float, target_size: int
    ) -> Shape:
        """A shape grown outward from a cell at or near the hexagon centre."""
        shape = Shape(color, opacity)
        if self.grid.cell_count() == 0 or target_size == 0:
            return shape

        center_cells = self.evaluator.find_center_cells()
        if not center_cells:
            return shape

        if self.rng.random() < 0.8:
            start_idx = 0
        else:
            start_idx = self.rng.randrange(min(len(center_cells), 3))

        return self._grow(shape, center_cells[start_idx], target_size, frozenset())

    def generate_connected_shape(
        self,
        color: str,
        opacity: float,
        target_size: int,
        used_cells: Iterable[int],
    ) -> Shape:
        """A shape that starts next to the used cells and grows into free cells."""
        used = set(used_cells)
        shape = Shape(color, opacity)
        if self.grid.cell_count() == 0 or target_size == 0:
            return shape

        boundary = self.evaluator.find_boundary_cells(used)
        if not boundary:
            return self.generate_shape_avoiding_cells(color, opacity, target_size, used)

        self.rng.shuffle(boundary)

        if self.rng.random() < 0.7:
            rank = {
                cell_id: position
                for position, cell_id in enumerate(self.evaluator.find_center_cells())
            }
            boundary.sort(key=lambda cell_id: rank.get(cell_id, float("inf")))

        start_idx = self.rng.randrange(min(len(boundary), 3))
        return self._grow(shape, boundary[start_idx], target_size, used)

    def generate_shape_avoiding_cells(
        self,
        color: str,
        opacity: float,
        target_size: int,
        used_cells: Iterable[int],
    ) -> Shape:
        """A shape grown from the free cell closest to the centre, avoiding used cells."""
        used = set(used_cells)
        shape = Shape(color, opacity)
        if self.grid.cell_count() == 0 or target_size == 0:
            return shape

        start_cell = next(
            (
                cell_id
                for cell_id in self.evaluator.find_center_cells()
                if cell_id not in used
            ),
            None,
        )
        if start_cell is None:
            return shape

        return self._grow(shape, start_cell, target_size, used)

    def smooth_shape(self, shape: Shape, target_size: int) -> None:
        """Fill some concave notches of the shape, never beyond the target size."""
        if shape.cell_count() < 3 or shape.cell_count() >= target_size:
            return

        boundary = [
            cell_id
            for cell_id in shape.cells
            if any(
                not shape.contains_cell(adj)
                for adj in self.grid.adjacent_cells(cell_id)
            )
        ]
        boundary_set = set(boundary)

        def on_boundary(cell_id: int) -> bool:
            return shape.contains_cell(cell_id) and cell_id in boundary_set

        candidates: list[int] = []
        for cell_id in boundary:
            boundary_neighbours = [
                adj for adj in self.grid.adjacent_cells(cell_id) if on_boundary(adj)
            ]
            if len(boundary_neighbours) < 2:
                continue

            external: dict[int, None] = {}
            for neighbour in boundary_neighbours:
                for ext in self.grid.adjacent_cells(neighbour):
                    if not shape.contains_cell(ext):
                        external[ext] = None

            for ext in external:
                connected = sum(
                    1 for adj in self.grid.adjacent_cells(ext) if on_boundary(adj)
                )
                if connected >= 2:
                    candidates.append(ext)

        candidates = self._rank(shape, candidates)
        fill_count = self.rng.randint(0, len(candidates)) if candidates else 0

        for i, cell_id in enumerate(candidates):
            if (
                i < fill_count
                and shape.cell_count() < target_size
                and not shape.contains_cell(cell_id)
            ):
                shape.add_cell(cell_id)
            else:
                break