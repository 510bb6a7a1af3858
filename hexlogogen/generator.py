"""The logo generator: a grid, a theme and a set of coloured shapes."""

from __future__ import annotations

import math

from hexlogogen.color import ColorManager
from hexlogogen.colorutil import average_colors, color_contrast
from hexlogogen.grid import TriangularGrid
from hexlogogen.palette import Theme, available_themes
from hexlogogen.shape import Shape
from hexlogogen.shape_generator import ShapeGenerator

__all__ = ["Generator"]

_GRID_SIZE = 100.0


def _clamp(value, low, high):
    return min(max(value, low), high)


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


class Generator:
    """Generates the shapes of a hexagonal logo."""

    def __init__(
        self,
        grid_size: int,
        shapes_count: int,
        opacity: float,
        seed: int | None = None,
    ) -> None:
        self.grid_size = _clamp(grid_size, 2, 8)
        self.shapes_count = _clamp(shapes_count, 1, 10)
        self.opacity = _clamp(opacity, 0.0, 1.0)
        self.seed = seed
        self.theme = Theme.MESOS
        self.allow_overlap = False
        self._grid: TriangularGrid | None = None
        self._shapes: list[Shape] = []

    @property
    def grid(self) -> TriangularGrid | None:
        """The grid of the last generation, or None before the first."""
        return self._grid

    @property
    def shapes(self) -> list[Shape]:
        """The shapes of the last generation."""
        return list(self._shapes)

    def set_theme(self, theme: Theme) -> Generator:
        """Use the given theme."""
        self.theme = theme
        return self

    def set_color_scheme(self, color_scheme: str) -> Generator:
        """Use the named theme; unknown names give the Mesos theme."""
        self.theme = Theme.from_name(color_scheme)
        return self

    def set_allow_overlap(self, allow_overlap: bool) -> Generator:
        """Whether the first two shapes may overlap, with a blended overlap."""
        self.allow_overlap = allow_overlap
        return self

    @staticmethod
    def available_themes() -> list[str]:
        """Names of all available themes."""
        return available_themes()

    def _palette_size(self) -> int:
        base = self.shapes_count + 2
        return base + 2 if self.grid_size >= 4 else base

    def _size_range(self, total_cells: int) -> tuple[int, int]:
        if self.grid_size <= 2:
            min_size = 2
            max_size = min(5, total_cells // self.shapes_count)
        else:
            min_size = _round(total_cells * 0.01)
            max_size = _round(total_cells * 0.05)
        return min_size, max(max_size, min_size + 1)

    def generate(self) -> None:
        """Build the grid and generate a fresh set of coloured shapes."""
        grid = TriangularGrid(_GRID_SIZE, self.grid_size)
        self._grid = grid
        self._shapes = []

        color_manager = ColorManager.with_theme(self.theme, self.seed)
        size_range = self._size_range(grid.cell_count())
        shape_generator = ShapeGenerator(grid, self.seed)

        if self.allow_overlap and self.shapes_count >= 2:
            self._generate_overlapping(color_manager, shape_generator, size_range[1])
        else:
            shapes = shape_generator.generate_shapes(
                [], self.opacity, self.shapes_count, size_range
            )
            color_manager.assign_harmonious_colors(grid, shapes)
            self._shapes = shapes

    def _generate_overlapping(
        self,
        color_manager: ColorManager,
        shape_generator: ShapeGenerator,
        size: int,
    ) -> None:
        available = color_manager.get_random_colors(self._palette_size())
        color1 = available[0]
        color2 = max(available[1:], key=lambda c: color_contrast(color1, c))
        blend = average_colors(color1, color2)

        shape1 = shape_generator.generate_balanced_shape(color1, self.opacity, size)
        shape2 = shape_generator.generate_balanced_shape(color2, self.opacity, size)

        overlap = Shape(blend, self.opacity)
        for cell in shape1.cells:
            if shape2.contains_cell(cell):
                overlap.add_cell(cell)

        first = Shape(color1, self.opacity)
        second = Shape(color2, self.opacity)
        for source, target in ((shape1, first), (shape2, second)):
            for cell in source.cells:
                if not overlap.contains_cell(cell):
                    target.add_cell(cell)

        self._shapes.extend([first, second])
        if overlap.cells:
            self._shapes.append(overlap)

        used_cells = {cell for shape in self._shapes for cell in shape.cells}

        if self.shapes_count <= 2:
            return

        needed = self.shapes_count - 2
        used_colors = (color1, color2)
        extra_colors: list[str] = []
        for color in available:
            if color not in used_colors and color not in extra_colors:
                extra_colors.append(color)
                if len(extra_colors) >= needed:
                    break

        while len(extra_colors) < needed:
            current = [shape.color for shape in self._shapes]
            extra_colors.append(color_manager.get_different_color(current))

        for color in extra_colors:
            shape = shape_generator.generate_shape_avoiding_cells(
                color, self.opacity, size, used_cells
            )
            used_cells.update(shape.cells)
            self._shapes.append(shape)