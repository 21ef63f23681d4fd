from .types import Edge, GraphData, Point2D, Polygon, as_point
from .lines import deduplicate_lines
from .points import MergeResult, merge_close_points
from .polygons import build_adjacency, find_closed_polygons, find_closed_quadrilaterals, standardize_polygon
from .containment import ContainmentOracle, is_point_enclosed_by_edges
from .grid import GridGenerationError, gen_nodes
from .filters import filter_road_nodes
from .roads import average_spacing, gen_lines
from .options import PipelineOptions
from .config import get_pipeline_options, reset_pipeline_options, set_pipeline_options
from .validate import OptionsError, validate_options
from .pipeline import build_road_graph, extract_graph, extract_road_graph, segments_to_graph

__all__ = [
    'Edge',
    'GraphData',
    'Point2D',
    'Polygon',
    'as_point',
    'deduplicate_lines',
    'MergeResult',
    'merge_close_points',
    'build_adjacency',
    'find_closed_polygons',
    'find_closed_quadrilaterals',
    'standardize_polygon',
    'ContainmentOracle',
    'is_point_enclosed_by_edges',
    'GridGenerationError',
    'gen_nodes',
    'filter_road_nodes',
    'average_spacing',
    'gen_lines',
    'PipelineOptions',
    'get_pipeline_options',
    'set_pipeline_options',
    'reset_pipeline_options',
    'OptionsError',
    'validate_options',
    'build_road_graph',
    'extract_graph',
    'extract_road_graph',
    'segments_to_graph',
]
