"""Point-in-polygon checks against the quadrilaterals formed by a graph."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from shapely.geometry import Point, Polygon as ShapelyPolygon
from shapely.prepared import PreparedGeometry, prep

from .logging_utils import apply_debug_logging
from .polygons import build_adjacency, find_closed_quadrilaterals
from .types import Edge, Point2D, Polygon, as_point

logger = logging.getLogger(__name__)

_AREA_EPS = 1e-12


def _ring(polygon: Polygon, nodes: Sequence[Point2D]) -> List[Tuple[float, float]]:
    coords = [nodes[idx].as_tuple() for idx in polygon]
    coords.append(coords[0])
    return coords


def _check_edges(edges: Sequence[Edge], node_count: int) -> None:
    for start, end in edges:
        for idx in (start, end):
            if not 0 <= idx < node_count:
                raise ValueError(f"edge ({start}, {end}) references node {idx} but only {node_count} node(s) exist")


class ContainmentOracle:
    """Counts how many quadrilaterals of a fixed graph enclose a point.

    The quadrilaterals are enumerated once on construction, so one oracle can
    answer many queries against the same graph. Rings that are degenerate
    (zero area or self-intersecting) are kept in :attr:`polygons` but never
    contain any point. Points on a ring boundary count as inside.
    """

    def __init__(self, nodes: Sequence[object], edges: Sequence[Edge]):
        self.nodes: List[Point2D] = [as_point(node) for node in nodes]
        self.edges: List[Edge] = [(int(a), int(b)) for a, b in edges]
        _check_edges(self.edges, len(self.nodes))

        self.polygons: List[Polygon] = find_closed_quadrilaterals(build_adjacency(self.edges))
        self._shapes: List[PreparedGeometry] = []
        degenerate = 0
        for polygon in self.polygons:
            shape = ShapelyPolygon(_ring(polygon, self.nodes))
            if shape.area <= _AREA_EPS or not shape.is_valid:
                degenerate += 1
                continue
            self._shapes.append(prep(shape))

        logger.info(
            "Containment oracle ready: %d quadrilateral(s), %d degenerate",
            len(self.polygons),
            degenerate,
        )

    def containing_count(self, point: object, limit: Optional[int] = None) -> int:
        """Count enclosing quadrilaterals, stopping early once ``limit`` is exceeded."""

        target = Point(as_point(point).as_tuple())
        count = 0
        for shape in self._shapes:
            if shape.covers(target):
                count += 1
                if limit is not None and count > limit:
                    break
        return count

    def is_enclosed(self, point: object, max_contain_count: int = 0) -> bool:
        """Return True when more than ``max_contain_count`` quadrilaterals enclose ``point``."""

        return self.containing_count(point, limit=max_contain_count) > max_contain_count


def is_point_enclosed_by_edges(
    point: object,
    nodes: Sequence[object],
    edges: Sequence[Edge],
    max_contain_count: int = 0,
) -> bool:
    """Check ``point`` against the quadrilaterals formed by ``edges`` over ``nodes``.

    Recomputes the quadrilaterals on every call; build a
    :class:`ContainmentOracle` to answer repeated queries on one graph.
    """

    return ContainmentOracle(nodes, edges).is_enclosed(point, max_contain_count)


apply_debug_logging(globals(), logger=logger)


__all__ = ["ContainmentOracle", "is_point_enclosed_by_edges"]
