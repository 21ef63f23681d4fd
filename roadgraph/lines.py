"""Near-duplicate removal for detected line segments."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from .types import Segment, distance, segment_coords

logger = logging.getLogger(__name__)

L = TypeVar("L")

DEFAULT_DISTANCE_THRESHOLD = 5.0
DEFAULT_ANGLE_THRESHOLD = math.pi / 72  # 2.5 degrees
_ENDPOINT_TOLERANCE = 1.0
_MAX_LENGTH_RATIO = 1.2


@dataclass(frozen=True)
class _LineProps:
    coords: Segment
    length: float
    midpoint: tuple
    angle: float
    is_vertical: bool
    is_horizontal: bool


def _line_props(coords: Segment, distance_threshold: float) -> _LineProps:
    x1, y1, x2, y2 = coords
    dx = x2 - x1
    dy = y2 - y1
    return _LineProps(
        coords=coords,
        length=math.hypot(dx, dy),
        midpoint=((x1 + x2) * 0.5, (y1 + y2) * 0.5),
        angle=math.atan2(dy, dx),
        is_vertical=abs(dx) < distance_threshold,
        is_horizontal=abs(dy) < distance_threshold,
    )


def _endpoints_match(a: Segment, b: Segment) -> bool:
    x1, y1, x2, y2 = a
    x3, y3, x4, y4 = b
    tol = _ENDPOINT_TOLERANCE
    same_order = abs(x1 - x3) < tol and abs(y1 - y3) < tol and abs(x2 - x4) < tol and abs(y2 - y4) < tol
    swapped = abs(x1 - x4) < tol and abs(y1 - y4) < tol and abs(x2 - x3) < tol and abs(y2 - y3) < tol
    return same_order or swapped


def _normalized_angle_diff(a: float, b: float) -> float:
    diff = abs(a - b)
    return min(diff, math.pi - diff)


def _is_near_duplicate(
    new: _LineProps,
    kept: _LineProps,
    distance_threshold: float,
    angle_threshold: float,
) -> bool:
    same_orientation = (new.is_vertical and kept.is_vertical) or (new.is_horizontal and kept.is_horizontal)
    if not same_orientation:
        return False
    if _normalized_angle_diff(new.angle, kept.angle) >= angle_threshold:
        return False
    mid_dist = distance(new.midpoint, kept.midpoint)
    if mid_dist >= distance_threshold:
        return False
    shorter = min(new.length, kept.length)
    if shorter <= 0.0:
        return False
    return max(new.length, kept.length) / shorter < _MAX_LENGTH_RATIO


def deduplicate_lines(
    lines: Sequence[L],
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
    angle_threshold: float = DEFAULT_ANGLE_THRESHOLD,
) -> List[L]:
    """Drop segments that repeat or nearly repeat an earlier kept segment.

    Segments are visited in input order and compared against the segments
    kept so far, so the earliest detection always wins. A segment is dropped
    when its endpoints match a kept segment within one pixel (in either
    direction), or when it is parallel within ``angle_threshold``, has a
    midpoint closer than ``distance_threshold``, a length within 20% and the
    same vertical/horizontal classification as a kept segment.

    Items are returned unchanged, so the detector's nested
    ``[[x1, y1, x2, y2]]`` shape survives.
    """

    kept: List[L] = []
    kept_props: List[_LineProps] = []

    for line in lines:
        props = _line_props(segment_coords(line), distance_threshold)
        keep = True
        for other in kept_props:
            if _endpoints_match(props.coords, other.coords):
                logger.debug("Dropping %s: endpoints overlap %s", props.coords, other.coords)
                keep = False
                break
            if _is_near_duplicate(props, other, distance_threshold, angle_threshold):
                logger.debug("Dropping %s: near duplicate of %s", props.coords, other.coords)
                keep = False
                break
        if keep:
            kept.append(line)
            kept_props.append(props)

    logger.info("Deduplicated %d line(s) down to %d", len(lines), len(kept))
    return kept


__all__ = [
    "DEFAULT_ANGLE_THRESHOLD",
    "DEFAULT_DISTANCE_THRESHOLD",
    "deduplicate_lines",
]
