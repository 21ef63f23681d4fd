import json

import pytest

import roadgraph.__main__ as cli
from roadgraph import GraphData, GridGenerationError, Point2D

TWO_BLOCKS = [
    [0, 0, 40, 0],
    [40, 0, 40, 100],
    [40, 100, 0, 100],
    [0, 100, 0, 0],
    [60, 0, 100, 0],
    [100, 0, 100, 100],
    [100, 100, 60, 100],
    [60, 100, 60, 0],
]


def _write_segments(tmp_path, payload):
    path = tmp_path / "segments.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_main_writes_graph_document(tmp_path, capsys):
    segments_path = _write_segments(tmp_path, TWO_BLOCKS)
    output_path = tmp_path / "out" / "graph.json"

    cli.main([str(segments_path), "--num-x", "3", "--output", str(output_path)])

    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(document["nodesList"]) == 8
    assert len(document["nodes"]) == 11
    assert document["nodes"][8:] == [{"x": 50.0, "y": 7.0}, {"x": 50.0, "y": 50.0}, {"x": 50.0, "y": 93.0}]
    assert len(document["lines"]) == 8

    captured = capsys.readouterr()
    assert f"Graph written to {output_path}" in captured.out
    assert "Nodes: 11" in captured.err
    assert "Lines: 8" in captured.err


def test_main_prints_road_graph(tmp_path, capsys):
    segments_path = _write_segments(tmp_path, {"lines": TWO_BLOCKS})

    cli.main([str(segments_path), "--num-x", "3", "--road", "--omit-nodes-list"])

    document = json.loads(capsys.readouterr().out)
    assert "nodesList" not in document
    assert document["lines"] == [[0, 1], [1, 2]]


def test_main_forwards_options(tmp_path, monkeypatch):
    segments_path = _write_segments(tmp_path, TWO_BLOCKS)
    seen = []

    def _extract(segments, options):
        seen.append((segments, options))
        return GraphData(nodes=[Point2D(0, 0)], lines=[], nodes_list=[Point2D(0, 0)])

    monkeypatch.setattr(cli, "extract_graph", _extract)

    cli.main(
        [
            str(segments_path),
            "--distance-threshold", "4",
            "--line-distance-threshold", "2",
            "--angle-threshold", "5",
            "--max-contain", "1",
            "--num-x", "6",
            "--num-y", "9",
            "--spacing-reference", "grid",
        ]
    )

    (segments, options), = seen
    assert segments == TWO_BLOCKS
    assert options.distance_threshold == 4
    assert options.line_distance_threshold == 2
    assert options.angle_threshold_degrees == pytest.approx(5)
    assert options.max_contain_count == 1
    assert (options.num_x, options.num_y) == (6, 9)
    assert options.spacing_reference == "grid"


def test_main_exits_when_grid_has_no_room(tmp_path, monkeypatch):
    segments_path = _write_segments(tmp_path, [[0, 0, 10, 0], [10, 0, 10, 10]])

    def _fail(segments, options):
        raise GridGenerationError("Not enough space to add new nodes.")

    monkeypatch.setattr(cli, "extract_graph", _fail)

    with pytest.raises(SystemExit) as exc:
        cli.main([str(segments_path)])

    assert exc.value.code == 1


def test_main_rejects_non_list_input(tmp_path):
    segments_path = _write_segments(tmp_path, {"segments": "nope"})

    with pytest.raises(SystemExit) as exc:
        cli.main([str(segments_path)])

    assert exc.value.code == 1


def test_main_rejects_invalid_thresholds(tmp_path):
    segments_path = _write_segments(tmp_path, TWO_BLOCKS)

    with pytest.raises(SystemExit) as exc:
        cli.main([str(segments_path), "--max-contain", "-1"])

    assert exc.value.code == 1
