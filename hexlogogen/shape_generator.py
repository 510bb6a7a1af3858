"""Generating whole shapes, and sets of shapes, on a triangular grid."""

from __future__ import annotations

from collections.abc import Sequence

from hexlogogen.shape import Shape
from hexlogogen.shape_growth import ShapeGrower

__all__ = ["ShapeGenerator"]

_CANDIDATES = 3
_FALLBACK_COLOR = "#FF0000"


class ShapeGenerator(ShapeGrower):
    """Generates balanced, angular and connected shapes on one grid."""

    def _pick_best(self, shapes: list[Shape], color: str, opacity: float) -> Shape:
        """The best-scoring shape, with a little noise so ties vary."""
        if not shapes:
            return Shape(color, opacity)
        return max(
            shapes,
            key=lambda shape: self.evaluator.evaluate_shape_quality(shape).total_score()
            + self.rng.uniform(-0.1, 0.1),
        )

    def generate_angular_shape(
        self, color: str, opacity: float, target_size: int
    ) -> Shape:
        """The best of several angular shapes grown from near the centre."""
        shapes = [
            self._angular_candidate(color, opacity, target_size)
            for _ in range(_CANDIDATES)
        ]
        return self._pick_best(shapes, color, opacity)

    def _angular_candidate(
        self, color: str, opacity: float, target_size: int
    ) -> Shape:
        shape = Shape(color, opacity)
        if self.grid.cell_count() == 0 or target_size == 0:
            return shape

        center_cells = self.evaluator.find_center_cells()
        if self.rng.random() < 0.7:
            start_idx = 0
        else:
            start_idx = self.rng.randrange(min(len(center_cells), 3))
        start_cell = center_cells[start_idx]
        shape.add_cell(start_cell)

        max_attempts = target_size * 3
        attempts = 0
        current_layer = [start_cell]
        next_layer: list[int] = []
        frontier: list[int] = []
        randomness = self.rng.uniform(0.2, 0.5)

        while shape.cell_count() < target_size and attempts < max_attempts:
            attempts += 1

            if not frontier:
                if not current_layer:
                    current_layer, next_layer = next_layer, []
                    if not current_layer:
                        break
                cell = current_layer.pop(0)
                for adj in self.grid.adjacent_cells(cell):
                    if not shape.contains_cell(adj) and adj not in frontier:
                        frontier.append(adj)
                if not frontier:
                    continue

            frontier = self._rank(shape, frontier)
            if self.rng.random() < randomness:
                selected = self.rng.randrange(len(frontier))
            else:
                top = min(max(len(frontier) // 2, 1), len(frontier))
                selected = self.rng.randrange(top)

            next_cell = frontier.pop(selected)
            shape.add_cell(next_cell)
            next_layer.append(next_cell)

            for adj in self.grid.adjacent_cells(next_cell):
                if not shape.contains_cell(adj) and adj not in frontier:
                    frontier.append(adj)

            if self.rng.random() < 0.1 + randomness and len(frontier) > 2:
                worst = min(
                    frontier,
                    key=lambda cell_id: self.evaluator.score_candidate_cell(
                        shape, cell_id
                    ),
                )
                frontier.remove(worst)

        if self.rng.random() > randomness:
            self.smooth_shape(shape, target_size)
        return shape

    def generate_random_shape(
        self, color: str, opacity: float, target_size: int
    ) -> Shape:
        """Either a centre shape or an angular shape, with equal chance."""
        if self.rng.random() < 0.5:
            return self.generate_center_shape(color, opacity, target_size)
        return self.generate_angular_shape(color, opacity, target_size)

    def generate_shapes(
        self,
        colors: Sequence[str],
        opacity: float,
        count: int,
        size_range: tuple[int, int],
    ) -> list[Shape]:
        """count shapes: the first from the centre, the rest beside or apart from it.

        Shapes without a colour from colors get a placeholder colour.
        """
        min_size, max_size = size_range
        shapes: list[Shape] = []
        used_cells: set[int] = set()

        if count > 0:
            size = self.rng.randint(min_size, max_size)
            color = colors[0] if colors else _FALLBACK_COLOR
            if self.rng.random() < 0.5:
                first = self.generate_balanced_shape(color, opacity, size)
            else:
                first = self.generate_angular_shape(color, opacity, size)
            used_cells.update(first.cells)
            shapes.append(first)

        for i in range(1, count):
            color = colors[i] if i < len(colors) else f"#PLACEHOLDER{i}"
            size = self.rng.randint(min_size, max_size)
            if self.rng.random() < 0.3:
                shape = self.generate_shape_avoiding_cells(
                    color, opacity, size, used_cells
                )
            else:
                shape = self.generate_connected_shape(color, opacity, size, used_cells)
            used_cells.update(shape.cells)
            shapes.append(shape)

        return shapes

    def generate_balanced_shape(
        self, color: str, opacity: float, target_size: int
    ) -> Shape:
        """The best of several centre shapes."""
        shapes = [
            self.generate_center_shape(color, opacity, target_size)
            for _ in range(_CANDIDATES)
        ]
        return self._pick_best(shapes, color, opacity)