"""A hexagon subdivided into a grid of triangular cells."""

from __future__ import annotations

import math

from hexlogogen.geometry import Cell, HexGrid, Point

__all__ = ["Cell", "HexGrid", "Point", "TriangularGrid"]


class TriangularGrid:
    """A hexagon centred on the origin, filled with triangular cells."""

    def __init__(self, size: float, grid_density: int) -> None:
        self.hex_grid = HexGrid(size, grid_density, Point(0.0, 0.0))
        self.hex_grid.cells = self._generate_cells(self.hex_grid)
        self._adjacency: dict[int, list[int]] = {}

    @property
    def cells(self) -> list[Cell]:
        """All cells of the grid, indexed by id."""
        return self.hex_grid.cells

    def get_cell(self, index: int) -> Cell | None:
        """The cell at the given index, or None if there is none."""
        return self.hex_grid.get_cell(index)

    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return len(self.hex_grid.cells)

    def adjacent_cells(self, cell_id: int) -> list[int]:
        """Indices of all cells sharing an edge with the given cell."""
        if cell_id not in self._adjacency:
            self._adjacency[cell_id] = self.hex_grid.adjacent_cells(cell_id)
        return list(self._adjacency[cell_id])

    def get_cell_centroid(self, cell_id: int) -> Point | None:
        """The centroid of the given cell, or None if there is none."""
        cell = self.get_cell(cell_id)
        return cell.centroid if cell is not None else None

    @classmethod
    def _generate_cells(cls, hex_grid: HexGrid) -> list[Cell]:
        n = hex_grid.grid_density
        if n == 2:
            return cls._original_style_cells(hex_grid)

        cells: list[Cell] = []
        vertices = hex_grid.vertices
        for sector in range(6):
            cls._subdivide_triangle(
                cells,
                hex_grid.center,
                vertices[sector],
                vertices[(sector + 1) % 6],
                n,
            )
        return cells

    @staticmethod
    def _subdivide_triangle(
        cells: list[Cell], p1: Point, p2: Point, p3: Point, divisions: int
    ) -> None:
        """Split a triangle into divisions² equiangular cells, appended to cells."""
        if divisions <= 1:
            cells.append(Cell(len(cells), (p1, p2, p3)))
            return

        rows: list[list[Point]] = []
        for i in range(divisions + 1):
            u = i / divisions
            row = []
            for j in range(divisions + 1 - i):
                v = j / divisions
                w = 1.0 - u - v
                row.append(
                    Point(p1.x * w + p2.x * u + p3.x * v, p1.y * w + p2.y * u + p3.y * v)
                )
            rows.append(row)

        for i in range(divisions):
            for j in range(divisions - i):
                cells.append(
                    Cell(len(cells), (rows[i][j], rows[i + 1][j], rows[i][j + 1]))
                )
                if j < divisions - i - 1:
                    cells.append(
                        Cell(
                            len(cells),
                            (rows[i + 1][j], rows[i + 1][j + 1], rows[i][j + 1]),
                        )
                    )

    @staticmethod
    def _original_style_cells(hex_grid: HexGrid) -> list[Cell]:
        """The classic 24-triangle layout: four triangles per sector."""
        center = hex_grid.center

        def point_at(angle_degrees: float, distance: float) -> Point:
            rad = math.radians(angle_degrees)
            return Point(
                center.x + distance * math.cos(rad), center.y + distance * math.sin(rad)
            )

        inner1 = [point_at(i * 60.0, hex_grid.size / 3.0) for i in range(6)]
        inner2 = [point_at(i * 60.0, hex_grid.size * 2.0 / 3.0) for i in range(6)]

        triangles: list[tuple[Point, Point, Point]] = []
        for sector in range(6):
            nxt = (sector + 1) % 6
            outer = hex_grid.vertices[sector]
            p1, p1_next = inner1[sector], inner1[nxt]
            p2, p2_next = inner2[sector], inner2[nxt]
            triangles.extend(
                [
                    (center, p1, p1_next),
                    (p1, p2, p1_next),
                    (p1_next, p2, p2_next),
                    (p2, outer, p2_next),
                ]
            )
        return [Cell(i, vertices) for i, vertices in enumerate(triangles)]