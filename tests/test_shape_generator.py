from collections import deque

import pytest

from hexlogogen.grid import TriangularGrid
from hexlogogen.shape_generator import ShapeGenerator


@pytest.fixture
def grid():
    return TriangularGrid(100.0, 4)


def _is_connected(grid, cells):
    if not cells:
        return True
    members = set(cells)
    seen = {cells[0]}
    queue = deque([cells[0]])
    while queue:
        current = queue.popleft()
        for adj in grid.adjacent_cells(current):
            if adj in members and adj not in seen:
                seen.add(adj)
                queue.append(adj)
    return seen == members


def test_shape_generator_random_shape(grid):
    generator = ShapeGenerator(grid, 42)
    shape = generator.generate_random_shape("#FF0000", 0.8, 10)
    assert shape.cells
    assert shape.cell_count() <= 10


def test_generate_multiple_shapes(grid):
    generator = ShapeGenerator(grid, 42)
    colors = ["#FF0000", "#00FF00", "#0000FF"]
    shapes = generator.generate_shapes(colors, 0.8, 3, (5, 10))
    assert len(shapes) == 3
    assert [shape.color for shape in shapes] == colors
    for shape in shapes:
        assert shape.cell_count() <= 10


def test_generate_shapes_placeholder_colors(grid):
    generator = ShapeGenerator(grid, 7)
    shapes = generator.generate_shapes([], 0.5, 3, (3, 6))
    assert [shape.color for shape in shapes] == [
        "#FF0000",
        "#PLACEHOLDER1",
        "#PLACEHOLDER2",
    ]
    assert all(shape.opacity == 0.5 for shape in shapes)


def test_generate_shapes_zero_count(grid):
    generator = ShapeGenerator(grid, 1)
    assert generator.generate_shapes(["#FF0000"], 0.8, 0, (2, 4)) == []


def test_generate_shapes_rejects_inverted_range(grid):
    generator = ShapeGenerator(grid, 1)
    with pytest.raises(ValueError):
        generator.generate_shapes([], 0.8, 2, (10, 5))


def test_evaluate_shape_quality(grid):
    generator = ShapeGenerator(grid, 42)
    shape = generator.generate_balanced_shape("#FF0000", 0.8, 12)
    metrics = generator.evaluator.evaluate_shape_quality(shape)
    assert 0.0 <= metrics.compactness <= 1.0
    assert 0.0 <= metrics.smoothness <= 1.0
    assert 0.0 <= metrics.balance <= 1.0
    assert 0.0 <= metrics.total_score() <= 1.0


def test_angular_shape(grid):
    generator = ShapeGenerator(grid, 42)
    shape = generator.generate_angular_shape("#FF0000", 0.8, 10)
    assert shape.cells
    assert shape.cell_count() <= 10

    empty = generator.generate_angular_shape("#00FF00", 0.5, 0)
    assert empty.cell_count() == 0


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_angular_shape_is_connected_without_duplicates(grid, seed):
    generator = ShapeGenerator(grid, seed)
    shape = generator.generate_angular_shape("#123456", 0.8, 12)
    assert len(set(shape.cells)) == len(shape.cells)
    assert _is_connected(grid, shape.cells)
    assert shape.color == "#123456"


def test_balanced_shape(grid):
    generator = ShapeGenerator(grid, 42)
    shape = generator.generate_balanced_shape("#FF0000", 0.8, 10)
    assert shape.cells
    assert shape.cell_count() <= 10

    unseeded = ShapeGenerator(grid, None)
    other = unseeded.generate_balanced_shape("#00FF00", 0.5, 8)
    assert other.cells


@pytest.mark.parametrize("seed", [10, 20, 30])
def test_balanced_shape_is_connected(grid, seed):
    generator = ShapeGenerator(grid, seed)
    shape = generator.generate_balanced_shape("#ABCDEF", 0.3, 9)
    assert _is_connected(grid, shape.cells)
    assert 0 < shape.cell_count() <= 9