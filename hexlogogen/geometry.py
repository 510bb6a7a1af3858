"""Planar geometry for the hexagonal grid: points, triangular cells and the hexagon."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_EPSILON = 1e-6


@dataclass(frozen=True)
class Point:
    """A 2D point with floating point coordinates."""

    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def _close_to(self, other: Point) -> bool:
        return abs(self.x - other.x) < _EPSILON and abs(self.y - other.y) < _EPSILON


@dataclass
class Cell:
    """A triangular cell within the hexagonal grid."""

    id: int
    vertices: tuple[Point, Point, Point]
    centroid: Point = field(init=False)

    def __post_init__(self) -> None:
        self.vertices = tuple(self.vertices)
        if len(self.vertices) != 3:
            raise ValueError("a cell needs exactly three vertices")
        self.centroid = Point(
            sum(v.x for v in self.vertices) / 3.0,
            sum(v.y for v in self.vertices) / 3.0,
        )

    def contains_point(self, point: Point) -> bool:
        """Whether the point lies inside or on the edge of the triangle."""
        p1, p2, p3 = self.vertices
        area = 0.5 * (
            -p2.y * p3.x + p1.y * (-p2.x + p3.x) + p1.x * (p2.y - p3.y) + p2.x * p3.y
        )
        if area == 0.0:
            return False
        factor = 1.0 / (2.0 * area)
        s = factor * (
            p1.y * p3.x - p1.x * p3.y + (p3.y - p1.y) * point.x + (p1.x - p3.x) * point.y
        )
        t = factor * (
            p1.x * p2.y - p1.y * p2.x + (p1.y - p2.y) * point.x + (p2.x - p1.x) * point.y
        )
        return s >= 0.0 and t >= 0.0 and (1.0 - s - t) >= 0.0

    def is_adjacent(self, other: Cell) -> bool:
        """Two cells are adjacent when they share exactly two vertices."""
        shared = sum(
            1 for v1 in self.vertices for v2 in other.vertices if v1._close_to(v2)
        )
        return shared == 2


class HexGrid:
    """A regular hexagon together with the cells that subdivide it."""

    def __init__(
        self, size: float, grid_density: int, center: Point = Point(0.0, 0.0)
    ) -> None:
        self.size = size
        self.grid_density = min(max(grid_density, 2), 8)
        self.center = center
        self.vertices: list[Point] = [
            Point(
                center.x + size * math.cos(i * math.pi / 3.0),
                center.y + size * math.sin(i * math.pi / 3.0),
            )
            for i in range(6)
        ]
        self.cells: list[Cell] = []

    def expected_cell_count(self) -> int:
        """Number of triangular cells a hexagon of this density holds: 6n²."""
        return 6 * self.grid_density**2

    def get_cell(self, cell_id: int) -> Cell | None:
        """The cell with the given index, or None if there is none."""
        if 0 <= cell_id < len(self.cells):
            return self.cells[cell_id]
        return None

    def adjacent_cells(self, cell_id: int) -> list[int]:
        """Indices of all cells sharing an edge with the given cell."""
        cell = self.get_cell(cell_id)
        if cell is None:
            return []
        return [
            i
            for i, other in enumerate(self.cells)
            if i != cell_id and cell.is_adjacent(other)
        ]

    def contains_point(self, point: Point) -> bool:
        """Whether the point lies inside the hexagon or on its boundary."""
        if any(vertex._close_to(point) for vertex in self.vertices):
            return True

        edges = list(zip(self.vertices, self.vertices[-1:] + self.vertices[:-1]))

        for vi, vj in edges:
            if abs(point.distance(vi) + point.distance(vj) - vj.distance(vi)) < _EPSILON:
                return True

        inside = False
        for vi, vj in edges:
            if (vi.y > point.y) != (vj.y > point.y) and point.x < (vj.x - vi.x) * (
                point.y - vi.y
            ) / (vj.y - vi.y) + vi.x:
                inside = not inside
        return inside