"""Greedy clustering of segment endpoints into canonical nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .types import NodeIndex, Point2D, PointTuple, distance

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    merged_points: List[PointTuple] = field(default_factory=list)
    point_mapping: Dict[PointTuple, PointTuple] = field(default_factory=dict)
    _index: Dict[PointTuple, NodeIndex] = field(default_factory=dict, repr=False)

    def representative(self, point: Sequence[float]) -> PointTuple:
        return self.point_mapping[_key(point)]

    def index_of(self, point: Sequence[float]) -> NodeIndex:
        """Return the node index of the representative ``point`` was merged into."""

        return self._index[self.representative(point)]

    def as_nodes(self) -> List[Point2D]:
        return [Point2D.from_tuple(p) for p in self.merged_points]


def _key(point: Sequence[float]) -> PointTuple:
    return (point[0], point[1])


def merge_close_points(points: Iterable[Sequence[float]], distance_threshold: float) -> MergeResult:
    """Merge points closer than ``distance_threshold`` into representatives.

    Each point is compared with the representatives accepted so far, in
    insertion order, and joins the first one strictly closer than the
    threshold. Otherwise it becomes a new representative. The result depends on
    input order when points chain into each other.
    """

    result = MergeResult()
    for raw in points:
        point = _key(raw)
        if point in result.point_mapping:
            continue
        target = None
        for rep in result.merged_points:
            if distance(point, rep) < distance_threshold:
                target = rep
                break
        if target is None:
            result._index[point] = len(result.merged_points)
            result.merged_points.append(point)
            result.point_mapping[point] = point
        else:
            result.point_mapping[point] = target

    logger.info(
        "Merged %d distinct point(s) into %d node(s) (threshold=%.3g)",
        len(result.point_mapping),
        len(result.merged_points),
        distance_threshold,
    )
    return result


__all__ = ["MergeResult", "merge_close_points"]
