import pytest

from roadgraph.grid import GRID_MARGIN, GridGenerationError, gen_nodes
from roadgraph.types import Point2D

BOX = [Point2D(0, 0), Point2D(107, 0), Point2D(107, 57), Point2D(0, 57)]


def test_default_margin_is_seven():
    assert GRID_MARGIN == 7


def test_grid_spans_inset_box_column_by_column():
    nodes = gen_nodes(BOX, 3, 2)
    assert nodes == [
        Point2D(7.0, 7.0),
        Point2D(7.0, 50.0),
        Point2D(53.5, 7.0),
        Point2D(53.5, 50.0),
        Point2D(100.0, 7.0),
        Point2D(100.0, 50.0),
    ]


def test_num_y_defaults_to_num_x():
    assert len(gen_nodes(BOX, 4)) == 16


def test_single_column_and_row_sit_at_the_minimum():
    assert gen_nodes(BOX, 1) == [Point2D(7.0, 7.0)]


@pytest.mark.parametrize('num_x, num_y', [(1, 1), (2, 5), (7, 3), (15, 15)])
def test_grid_size_and_coverage(num_x, num_y):
    nodes = gen_nodes(BOX, num_x, num_y)

    assert len(nodes) == num_x * num_y
    for node in nodes:
        assert 7 <= node.x <= 100
        assert 7 <= node.y <= 50


def test_coordinates_are_rounded_to_two_decimals():
    nodes = gen_nodes([Point2D(0, 0), Point2D(24, 24)], 4)
    xs = sorted({node.x for node in nodes})
    assert xs == [7.0, 10.33, 13.67, 17.0]


def test_accepts_tuples_and_mappings():
    nodes = gen_nodes([(0, 0), {'x': 30, 'y': 30}], 2)
    assert nodes[-1] == Point2D(23.0, 23.0)


@pytest.mark.parametrize('num_x, num_y', [(0, None), (-2, None), (3, 0), (2.5, None), (True, None)])
def test_rejects_invalid_counts(num_x, num_y):
    with pytest.raises(GridGenerationError) as exc:
        gen_nodes(BOX, num_x, num_y)

    assert 'must be a positive integer' in str(exc.value)


def test_rejects_box_without_room():
    small = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)]
    with pytest.raises(GridGenerationError) as exc:
        gen_nodes(small, 3)

    assert 'Not enough space' in str(exc.value)


def test_rejects_flat_box():
    with pytest.raises(GridGenerationError):
        gen_nodes([Point2D(0, 0), Point2D(100, 10)], 3)


def test_rejects_empty_node_list():
    with pytest.raises(GridGenerationError):
        gen_nodes([], 3)


def test_custom_margin():
    nodes = gen_nodes([Point2D(0, 0), Point2D(10, 10)], 2, margin=2)
    assert nodes[0] == Point2D(2.0, 2.0)
    assert nodes[-1] == Point2D(8.0, 8.0)


def test_grid_generation_error_is_value_error():
    assert issubclass(GridGenerationError, ValueError)


def test_fractional_bounds_keep_rounded_nodes_inside_the_inset_box():
    nodes = gen_nodes([Point2D(0.125, 0.125), Point2D(50, 50)], 3)

    assert nodes[0] == Point2D(7.13, 7.13)
    assert nodes[-1] == Point2D(43.0, 43.0)
    for node in nodes:
        assert 7.125 <= node.x <= 43
        assert 7.125 <= node.y <= 43
