import pytest

from hexlogogen.grid import TriangularGrid
from hexlogogen.shape import Shape
from hexlogogen.shape_scoring import ShapeEvaluator


@pytest.fixture
def grid():
    return TriangularGrid(100.0, 4)


@pytest.fixture
def evaluator(grid):
    return ShapeEvaluator(grid)


def test_find_center_cells_covers_all_cells(evaluator, grid):
    center_cells = evaluator.find_center_cells()
    assert len(center_cells) > 0
    assert sorted(center_cells) == list(range(grid.cell_count()))


def test_find_center_cells_sorted_by_distance(evaluator, grid):
    center = grid.hex_grid.center
    distances = [
        grid.get_cell(cell_id).centroid.distance(center)
        for cell_id in evaluator.find_center_cells()
    ]
    assert distances == sorted(distances)


def test_boundary_cells(evaluator, grid):
    used = {0, 1, 2}
    boundary = evaluator.find_boundary_cells(used)
    assert len(boundary) > 0
    assert all(cell_id not in used for cell_id in boundary)
    assert len(boundary) == len(set(boundary))
    for cell_id in boundary:
        assert any(adj in used for adj in grid.adjacent_cells(cell_id))


def test_boundary_of_nothing_is_empty(evaluator):
    assert evaluator.find_boundary_cells(set()) == []


def test_score_for_empty_shape_is_one(evaluator):
    assert evaluator.score_candidate_cell(Shape("#FF0000", 0.8), 5) == 1.0


def test_score_for_missing_cell_is_zero(evaluator):
    shape = Shape("#FF0000", 0.8)
    shape.add_cell(0)
    assert evaluator.score_candidate_cell(shape, 10_000) == 0.0


def test_adjacent_cell_scores_higher_than_detached(evaluator, grid):
    start = evaluator.find_center_cells()[0]
    shape = Shape("#FF0000", 0.8)
    shape.add_cell(start)
    neighbour = grid.adjacent_cells(start)[0]
    far = evaluator.find_center_cells()[-1]
    near_score = evaluator.score_candidate_cell(shape, neighbour)
    far_score = evaluator.score_candidate_cell(shape, far)
    assert 0.0 <= far_score <= 0.6
    assert near_score > far_score


def test_empty_shape_metrics_are_zero(evaluator):
    metrics = evaluator.evaluate_shape_quality(Shape("#FF0000", 0.8))
    assert (metrics.compactness, metrics.smoothness, metrics.balance) == (0.0, 0.0, 0.0)
    assert metrics.total_score() == 0.0


def test_single_cell_metrics(evaluator):
    shape = Shape("#FF0000", 0.8)
    shape.add_cell(evaluator.find_center_cells()[0])
    metrics = evaluator.evaluate_shape_quality(shape)
    assert metrics.smoothness == 1.0
    assert metrics.balance == 0.0
    assert 0.0 <= metrics.compactness <= 1.0


def test_metrics_in_range_for_grown_shape(evaluator, grid):
    start = evaluator.find_center_cells()[0]
    shape = Shape("#FF0000", 0.8)
    shape.add_cell(start)
    for adj in grid.adjacent_cells(start):
        shape.add_cell(adj)
        for adj2 in grid.adjacent_cells(adj):
            if shape.cell_count() < 12:
                shape.add_cell(adj2)
    metrics = evaluator.evaluate_shape_quality(shape)
    assert 0.0 <= metrics.compactness <= 1.0
    assert 0.0 <= metrics.smoothness <= 1.0
    assert 0.0 <= metrics.balance <= 1.0
    assert 0.0 <= metrics.total_score() <= 1.0