"""Cycle enumeration over undirected adjacency lists.

Two finders share one depth-first search: :func:`find_closed_polygons` accepts
cycles of any length >= 3, :func:`find_closed_quadrilaterals` only 4-cycles
without a diagonal edge. Every cycle is reported once, in the canonical form
produced by :func:`standardize_polygon`.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Iterable, List, Optional, Sequence, Set

from .types import AdjacencyList, Edge, NodeIndex, Polygon

logger = logging.getLogger(__name__)


def build_adjacency(edges: Iterable[Edge]) -> AdjacencyList:
    """Return an adjacency list with each edge recorded in both directions.

    Duplicate edges and self-loops are kept as given.
    """

    adjacency: AdjacencyList = defaultdict(list)
    for start, end in edges:
        adjacency[start].append(end)
        adjacency[end].append(start)
    return dict(adjacency)


def standardize_polygon(polygon: Sequence[NodeIndex]) -> Polygon:
    """Return the lexicographically smallest rotation or reflection of ``polygon``."""

    seq = tuple(polygon)
    if len(seq) <= 1:
        return seq
    reversed_seq = seq[::-1]
    candidates = [seq[i:] + seq[:i] for i in range(len(seq))]
    candidates.extend(reversed_seq[i:] + reversed_seq[:i] for i in range(len(seq)))
    return min(candidates)


def _neighbors_in_path(adjacency: AdjacencyList, vertex: NodeIndex, members: Set[NodeIndex]) -> int:
    return sum(1 for n in set(adjacency.get(vertex, ())) if n != vertex and n in members)


def _is_closed_cycle(adjacency: AdjacencyList, path: Sequence[NodeIndex]) -> bool:
    if len(path) < 3:
        return False
    members = set(path)
    for vertex in path:
        if _neighbors_in_path(adjacency, vertex, members) != 2:
            return False
    for i, vertex in enumerate(path):
        if path[(i + 1) % len(path)] not in adjacency.get(vertex, ()):
            return False
    return True


def _is_simple_quadrilateral(adjacency: AdjacencyList, path: Sequence[NodeIndex]) -> bool:
    if len(path) != 4 or not _is_closed_cycle(adjacency, path):
        return False
    # a diagonal edge splits the quad into two triangles
    for i in range(4):
        if path[(i + 2) % 4] in adjacency.get(path[i], ()):
            return False
    return True


def _search_cycles(
    adjacency: AdjacencyList,
    accept: Callable[[Sequence[NodeIndex]], bool],
    max_length: Optional[int] = None,
) -> List[Polygon]:
    found: List[Polygon] = []
    seen: Set[Polygon] = set()
    rejected = 0

    def record(path: List[NodeIndex]) -> None:
        nonlocal rejected
        if not accept(path):
            rejected += 1
            return
        canonical = standardize_polygon(path)
        if canonical not in seen:
            seen.add(canonical)
            found.append(canonical)

    def dfs(current: NodeIndex, start: NodeIndex, path: List[NodeIndex], visited: Set[NodeIndex]) -> None:
        neighbors = adjacency.get(current, ())
        if max_length is not None and len(path) == max_length:
            if start in neighbors:
                record(path)
            return
        if max_length is None and len(path) > 2 and start in neighbors:
            record(path)
            return
        for neighbor in neighbors:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            path.append(neighbor)
            dfs(neighbor, start, path, visited)
            path.pop()
            visited.discard(neighbor)

    for vertex in adjacency:
        dfs(vertex, vertex, [vertex], {vertex})

    logger.debug("Cycle search rejected %d candidate(s)", rejected)
    return found


def find_closed_polygons(adjacency: AdjacencyList) -> List[Polygon]:
    """Find every distinct simple cycle whose vertices have no chord inside it."""

    polygons = _search_cycles(adjacency, lambda path: _is_closed_cycle(adjacency, path))
    logger.info("Found %d closed polygon(s) over %d vertices", len(polygons), len(adjacency))
    return polygons


def find_closed_quadrilaterals(adjacency: AdjacencyList) -> List[Polygon]:
    """Find every distinct 4-cycle with no diagonal edge."""

    quads = _search_cycles(
        adjacency,
        lambda path: _is_simple_quadrilateral(adjacency, path),
        max_length=4,
    )
    logger.info("Found %d closed quadrilateral(s) over %d vertices", len(quads), len(adjacency))
    return quads


__all__ = [
    "build_adjacency",
    "find_closed_polygons",
    "find_closed_quadrilaterals",
    "standardize_polygon",
]
