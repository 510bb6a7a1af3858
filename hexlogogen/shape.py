"""Shapes made of triangular grid cells, and the metrics used to rate them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Shape:
    """A shape: an ordered set of grid cell ids drawn in one colour."""

    color: str
    opacity: float
    cells: list[int] = field(default_factory=list)

    def add_cell(self, cell_id: int) -> None:
        """Add a cell to the shape unless it is already part of it."""
        if cell_id not in self.cells:
            self.cells.append(cell_id)

    def contains_cell(self, cell_id: int) -> bool:
        """Whether the cell belongs to the shape."""
        return cell_id in self.cells

    def cell_count(self) -> int:
        """Number of cells in the shape."""
        return len(self.cells)


@dataclass(frozen=True)
class ShapeMetrics:
    """Quality measures of a shape; each is higher for a better shape."""

    compactness: float
    smoothness: float
    balance: float

    def total_score(self) -> float:
        """Weighted combination of the metrics."""
        return self.compactness * 0.4 + self.smoothness * 0.4 + self.balance * 0.2