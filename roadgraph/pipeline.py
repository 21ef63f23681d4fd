"""Segment-to-graph pipeline and road graph construction."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .config import get_pipeline_options
from .filters import filter_road_nodes
from .grid import gen_nodes
from .lines import deduplicate_lines
from .logging_utils import apply_debug_logging
from .options import PipelineOptions
from .points import merge_close_points
from .roads import gen_lines
from .types import Edge, GraphData, Point2D, PointTuple, segment_coords
from .validate import validate_options

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[PipelineOptions]) -> PipelineOptions:
    resolved = get_pipeline_options() if options is None else options
    validate_options(resolved)
    return resolved


def segments_to_graph(
    segments: Sequence[object], distance_threshold: float
) -> Tuple[List[Point2D], List[Edge]]:
    """Turn segments into merged nodes and node-index edges, one edge per segment."""

    points: List[PointTuple] = []
    for line in segments:
        x1, y1, x2, y2 = segment_coords(line)
        points.append((x1, y1))
        points.append((x2, y2))

    merged = merge_close_points(points, distance_threshold)
    edges = [(merged.index_of(points[i]), merged.index_of(points[i + 1])) for i in range(0, len(points), 2)]
    return merged.as_nodes(), edges


def extract_graph(segments: Sequence[object], options: Optional[PipelineOptions] = None) -> GraphData:
    """Build the densified graph for a set of detected line segments.

    Duplicate detections are dropped, endpoints merged into nodes, and the
    grid candidates that are not enclosed by the resulting quadrilaterals are
    appended after the merged nodes. :class:`~roadgraph.grid.GridGenerationError`
    propagates when the merged nodes leave no room for a grid.
    """

    opts = _resolve_options(options)
    logger.info("Extracting graph from %d segment(s)", len(segments))

    unique = deduplicate_lines(segments, opts.line_distance_threshold, opts.angle_threshold)
    nodes_list, edges = segments_to_graph(unique, opts.distance_threshold)
    logger.info("Graph has %d node(s) and %d edge(s) before densification", len(nodes_list), len(edges))

    candidates = gen_nodes(nodes_list, opts.num_x, opts.num_y, margin=opts.grid_margin)
    filtered = filter_road_nodes(candidates, nodes_list, edges, opts.max_contain_count)

    return GraphData(nodes=nodes_list + filtered, lines=edges, nodes_list=nodes_list)


def build_road_graph(graph: GraphData, options: Optional[PipelineOptions] = None) -> GraphData:
    """Connect the unenclosed grid candidates of ``graph`` into road lines.

    The result's ``nodes`` are the surviving candidates and its ``lines``
    index into them. Spacing statistics come from ``graph.nodes_list`` plus
    the survivors, or from the whole candidate grid when
    ``options.spacing_reference == "grid"``.
    """

    opts = _resolve_options(options)
    if graph.nodes_list is None:
        raise ValueError("road graph requires the pre-densification nodes_list")

    nodes_list = graph.nodes_list
    candidates = gen_nodes(nodes_list, opts.num_x, opts.num_y, margin=opts.grid_margin)
    filtered = filter_road_nodes(candidates, nodes_list, graph.lines, opts.max_contain_count)

    reference = candidates if opts.spacing_reference == "grid" else nodes_list + filtered
    lines = gen_lines(filtered, reference, gap_factor=opts.gap_factor)
    logger.info("Road graph has %d node(s) and %d line(s)", len(filtered), len(lines))
    return GraphData(nodes=filtered, lines=lines, nodes_list=nodes_list)


def extract_road_graph(segments: Sequence[object], options: Optional[PipelineOptions] = None) -> GraphData:
    """Run :func:`extract_graph` followed by :func:`build_road_graph`."""

    opts = _resolve_options(options)
    return build_road_graph(extract_graph(segments, opts), opts)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "build_road_graph",
    "extract_graph",
    "extract_road_graph",
    "segments_to_graph",
]
