from __future__ import annotations

import logging
from typing import List, Sequence

from .containment import ContainmentOracle
from .types import Edge, Point2D, as_point

logger = logging.getLogger(__name__)


def filter_road_nodes(
    new_nodes: Sequence[object],
    nodes: Sequence[object],
    edges: Sequence[Edge],
    max_contain_count: int = 0,
) -> List[Point2D]:
    """Keep the candidates that sit inside at most ``max_contain_count`` quadrilaterals."""

    oracle = ContainmentOracle(nodes, edges)
    kept = [
        candidate
        for candidate in (as_point(node) for node in new_nodes)
        if not oracle.is_enclosed(candidate, max_contain_count)
    ]
    logger.info(
        "Kept %d of %d candidate node(s) (max_contain_count=%d)",
        len(kept),
        len(new_nodes),
        max_contain_count,
    )
    return kept


__all__ = ["filter_road_nodes"]
