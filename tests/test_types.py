import numpy as np
import pytest

from roadgraph.types import GraphData, Point2D, as_point, distance, segment_coords


def test_point_helpers():
    point = Point2D(3.5, -2)
    assert point.as_tuple() == (3.5, -2)
    assert point.as_dict() == {'x': 3.5, 'y': -2}
    assert Point2D.from_tuple((3.5, -2)) == point


@pytest.mark.parametrize('value', [Point2D(1, 2), {'x': 1, 'y': 2}, (1, 2), [1, 2]])
def test_as_point_accepts_common_shapes(value):
    assert as_point(value) == Point2D(1, 2)


@pytest.mark.parametrize('value', [{'x': 1}, (1, 2, 3), 'xy', 4])
def test_as_point_rejects_other_values(value):
    with pytest.raises(ValueError):
        as_point(value)


@pytest.mark.parametrize(
    'line',
    [
        (1, 2, 3, 4),
        [1, 2, 3, 4],
        [[1, 2, 3, 4]],
        ((1.0, 2.0, 3.0, 4.0),),
        np.array([[1, 2, 3, 4]], dtype=np.int32),
        np.array([1.0, 2.0, 3.0, 4.0]),
    ],
)
def test_segment_coords_flat_and_nested(line):
    assert segment_coords(line) == (1.0, 2.0, 3.0, 4.0)


@pytest.mark.parametrize('line', [(1, 2, 3), [[1, 2], [3, 4]], None])
def test_segment_coords_rejects_malformed(line):
    with pytest.raises(ValueError):
        segment_coords(line)


def test_distance():
    assert distance((0, 0), (3, 4)) == 5


def test_graph_data_to_dict():
    graph = GraphData(
        nodes=[Point2D(0, 0), Point2D(10, 0), Point2D(5, 5)],
        lines=[(0, 1)],
        nodes_list=[Point2D(0, 0), Point2D(10, 0)],
    )

    assert graph.to_dict() == {
        'nodesList': [{'x': 0, 'y': 0}, {'x': 10, 'y': 0}],
        'nodes': [{'x': 0, 'y': 0}, {'x': 10, 'y': 0}, {'x': 5, 'y': 5}],
        'lines': [[0, 1]],
    }
    assert 'nodesList' not in graph.to_dict(include_nodes_list=False)
    assert GraphData.from_dict(graph.to_dict()) == graph


def test_graph_data_without_nodes_list():
    graph = GraphData.from_dict({'nodes': [{'x': 1, 'y': 1}], 'lines': []})
    assert graph.nodes_list is None
    assert 'nodesList' not in graph.to_dict()


@pytest.mark.parametrize('lines', [[[0]], [[0, 1, 2]], [[0, 'a']], [[0.5, 1]]])
def test_graph_data_rejects_bad_edges(lines):
    with pytest.raises(ValueError):
        GraphData.from_dict({'nodes': [], 'lines': lines})


def test_segment_endpoints():
    graph = GraphData(nodes=[Point2D(0, 0), Point2D(4, 0)], lines=[(1, 0)])
    assert graph.segment_endpoints() == [(Point2D(4, 0), Point2D(0, 0))]
