"""Orthogonal connector lines between grid nodes."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

import numpy as np

from .types import Edge, NodeIndex, Point2D, as_point

logger = logging.getLogger(__name__)

GAP_FACTOR = 1.9


def average_spacing(values: Iterable[float]) -> float:
    """Mean positive gap between sorted distinct ``values`` (0 when there is none)."""

    distinct = np.unique(np.asarray(list(values), dtype=float))
    if distinct.size < 2:
        return 0.0
    gaps = np.diff(distinct)
    gaps = gaps[gaps > 0]
    if gaps.size == 0:
        return 0.0
    return float(gaps.mean())


def _chain(
    groups: Dict[float, List[NodeIndex]],
    nodes: Sequence[Point2D],
    axis: str,
    max_gap: float,
) -> List[Edge]:
    edges: List[Edge] = []
    for indices in groups.values():
        ordered = sorted(indices, key=lambda idx: getattr(nodes[idx], axis))
        for current, following in zip(ordered, ordered[1:]):
            if getattr(nodes[following], axis) - getattr(nodes[current], axis) <= max_gap:
                edges.append((current, following))
    return edges


def gen_lines(
    filtered_nodes: Sequence[object],
    reference_nodes: Sequence[object],
    gap_factor: float = GAP_FACTOR,
) -> List[Edge]:
    """Connect nodes that share an x or y coordinate and are not too far apart.

    The allowed gap along each axis is ``gap_factor`` times the typical
    spacing of ``reference_nodes`` on that axis. Returned pairs index into
    ``filtered_nodes``; vertical connections come first, then horizontal ones.
    """

    nodes = [as_point(node) for node in filtered_nodes]
    reference = [as_point(node) for node in reference_nodes]

    max_x_gap = average_spacing(node.x for node in reference) * gap_factor
    max_y_gap = average_spacing(node.y for node in reference) * gap_factor

    by_x: Dict[float, List[NodeIndex]] = {}
    by_y: Dict[float, List[NodeIndex]] = {}
    for idx, node in enumerate(nodes):
        by_x.setdefault(node.x, []).append(idx)
        by_y.setdefault(node.y, []).append(idx)

    vertical = _chain(by_x, nodes, "y", max_y_gap)
    horizontal = _chain(by_y, nodes, "x", max_x_gap)
    logger.info(
        "Generated %d vertical and %d horizontal line(s) (max gap x=%.3g, y=%.3g)",
        len(vertical),
        len(horizontal),
        max_x_gap,
        max_y_gap,
    )
    return vertical + horizontal


__all__ = ["GAP_FACTOR", "average_spacing", "gen_lines"]
