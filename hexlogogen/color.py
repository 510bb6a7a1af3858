"""Random colour selection and colour assignment for shapes."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence

from hexlogogen.colorutil import average_colors
from hexlogogen.grid import TriangularGrid
from hexlogogen.palette import Theme
from hexlogogen.shape import Shape

__all__ = ["ColorManager"]

_U64 = 2**64
_MAX_ATTEMPTS = 20


def _make_rng(seed: int | None) -> random.Random:
    """A generator seeded from the seed plus a little clock jitter, or from entropy."""
    if seed is None:
        return random.Random()
    jitter = (time.time_ns() % 1_000_000_000) % 10_000
    return random.Random((seed + jitter) % _U64)


class ColorManager:
    """Picks colours from a palette and assigns them to shapes."""

    def __init__(self, palette: Iterable[str], seed: int | None = None) -> None:
        self._palette = list(palette)
        self._rng = _make_rng(seed)

    @property
    def palette(self) -> list[str]:
        """The colours this manager picks from."""
        return list(self._palette)

    @classmethod
    def with_theme(cls, theme: Theme, seed: int | None = None) -> ColorManager:
        """A manager using the palette of the given theme."""
        return cls(theme.palette(), seed)

    @classmethod
    def with_theme_name(cls, theme_name: str, seed: int | None = None) -> ColorManager:
        """A manager using the named theme; unknown names give the Mesos theme."""
        return cls.with_theme(Theme.from_name(theme_name), seed)

    @classmethod
    def default(cls, seed: int | None = None) -> ColorManager:
        """A manager using the Mesos theme."""
        return cls.with_theme(Theme.MESOS, seed)

    def get_random_color(self) -> str:
        """A random colour from the palette."""
        if not self._palette:
            raise ValueError("the palette is empty")
        return self._rng.choice(self._palette)

    def get_random_colors(self, count: int) -> list[str]:
        """count random colours from the palette; repeats are possible."""
        return [self.get_random_color() for _ in range(count)]

    def get_different_color(self, existing_colors: Sequence[str]) -> str:
        """A random colour not among existing_colors, if one turns up within 20 tries."""
        color = self.get_random_color()
        if not existing_colors:
            return color
        attempts = 0
        while color in existing_colors and attempts < _MAX_ATTEMPTS:
            color = self.get_random_color()
            attempts += 1
        return color

    def get_color_avoiding_adjacency(
        self,
        grid: TriangularGrid,
        shape_cells: Iterable[int],
        existing_shapes: Sequence[Shape],
    ) -> str:
        """A colour unlike those of the existing shapes bordering the given cells."""
        if not existing_shapes:
            return self.get_random_color()

        adjacent_colors: set[str] = set()
        for cell_id in shape_cells:
            for adj in grid.adjacent_cells(cell_id):
                owner = next(
                    (shape for shape in existing_shapes if shape.contains_cell(adj)),
                    None,
                )
                if owner is not None:
                    adjacent_colors.add(owner.color)

        return self.get_different_color(sorted(adjacent_colors))

    def assign_harmonious_colors(
        self, grid: TriangularGrid, shapes: Sequence[Shape]
    ) -> None:
        """Recolour the shapes so that bordering shapes get different colours."""
        adjacency: dict[int, list[int]] = {}
        for i, shape in enumerate(shapes):
            neighbours: list[int] = []
            for cell_id in shape.cells:
                for adj in grid.adjacent_cells(cell_id):
                    for j, other in enumerate(shapes):
                        if i != j and other.contains_cell(adj) and j not in neighbours:
                            neighbours.append(j)
                            break
            adjacency[i] = neighbours

        available = self.get_random_colors(min(len(self._palette), len(shapes) + 3))
        assigned: dict[int, str] = {}

        order = sorted(range(len(shapes)), key=lambda i: -len(adjacency[i]))
        for index in order:
            neighbour_colors = [
                assigned[adj] for adj in adjacency[index] if adj in assigned
            ]
            color = next((c for c in available if c not in neighbour_colors), None)
            if color is None:
                color = self.get_different_color(neighbour_colors)
                available.append(color)
            assigned[index] = color

        for index, shape in enumerate(shapes):
            shape.color = assigned[index]

    def get_colors_with_blend(self) -> tuple[str, str, str]:
        """Two distinct palette colours and their component-wise average."""
        if len(set(self._palette)) < 2:
            raise ValueError("the palette needs at least two distinct colours")
        color1 = self.get_random_color()
        color2 = self.get_random_color()
        while color2 == color1:
            color2 = self.get_random_color()
        return color1, color2, average_colors(color1, color2)