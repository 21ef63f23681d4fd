from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

NodeIndex = int
Edge = Tuple[NodeIndex, NodeIndex]
Polygon = Tuple[NodeIndex, ...]
AdjacencyList = Dict[NodeIndex, List[NodeIndex]]
PointTuple = Tuple[float, float]
Segment = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Point2D:
    """Pixel-space point used for nodes and grid candidates."""

    x: float
    y: float

    def as_tuple(self) -> PointTuple:
        return (self.x, self.y)

    def as_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_tuple(cls, value: Sequence[float]) -> "Point2D":
        return cls(value[0], value[1])


def as_point(value: object) -> Point2D:
    """Coerce ``value`` into a :class:`Point2D`.

    Accepts a ``Point2D``, a mapping with ``x``/``y`` keys or a 2-sequence.
    """

    if isinstance(value, Point2D):
        return value
    if isinstance(value, Mapping):
        try:
            return Point2D(value["x"], value["y"])
        except KeyError as exc:
            raise ValueError(f"point mapping is missing key {exc.args[0]!r}") from exc
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Point2D.from_tuple(value)
    raise ValueError(f"cannot interpret {value!r} as a point")


def segment_coords(line: Any) -> Segment:
    """Return ``(x1, y1, x2, y2)`` for a flat or detector-nested segment.

    The nested shape is a single row of four values, as in the ``(N, 1, 4)``
    arrays returned by probabilistic Hough detection.
    """

    try:
        coords = np.asarray(line, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot interpret {line!r} as a line segment") from exc
    if coords.ndim == 2 and coords.shape[0] == 1:
        coords = coords[0]
    if coords.shape != (4,):
        raise ValueError(f"line segment needs 4 coordinates, got shape {coords.shape}")
    x1, y1, x2, y2 = (float(v) for v in coords)
    return x1, y1, x2, y2


def _edge_pair(value: Sequence[Any]) -> Edge:
    if len(value) != 2:
        raise ValueError(f"edge needs two node indices, got {value!r}")
    a, b = value
    if not isinstance(a, numbers.Integral) or not isinstance(b, numbers.Integral):
        raise ValueError(f"edge indices must be integers, got {value!r}")
    return int(a), int(b)


@dataclass
class GraphData:
    """Nodes plus index-pair edges produced by the pipeline.

    ``nodes_list`` holds the merged pre-densification nodes when present;
    ``nodes`` is what ``lines`` indexes into.
    """

    nodes: List[Point2D] = field(default_factory=list)
    lines: List[Edge] = field(default_factory=list)
    nodes_list: Optional[List[Point2D]] = None

    def to_dict(self, include_nodes_list: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if include_nodes_list and self.nodes_list is not None:
            data["nodesList"] = [node.as_dict() for node in self.nodes_list]
        data["nodes"] = [node.as_dict() for node in self.nodes]
        data["lines"] = [[a, b] for a, b in self.lines]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphData":
        nodes_list = data.get("nodesList")
        return cls(
            nodes=[as_point(node) for node in data.get("nodes", [])],
            lines=[_edge_pair(pair) for pair in data.get("lines", [])],
            nodes_list=None if nodes_list is None else [as_point(node) for node in nodes_list],
        )

    def segment_endpoints(self) -> List[Tuple[Point2D, Point2D]]:
        """Return the coordinate pair behind every edge, for drawing collaborators."""

        return [(self.nodes[a], self.nodes[b]) for a, b in self.lines]


def distance(a: PointTuple, b: PointTuple) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


__all__ = [
    "AdjacencyList",
    "Edge",
    "GraphData",
    "NodeIndex",
    "Point2D",
    "PointTuple",
    "Polygon",
    "Segment",
    "as_point",
    "distance",
    "segment_coords",
]
