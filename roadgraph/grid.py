from __future__ import annotations

import logging
import numbers
from typing import List, Optional, Sequence

import numpy as np

from .types import Point2D, as_point

logger = logging.getLogger(__name__)

GRID_MARGIN = 7.0


class GridGenerationError(ValueError):
    """Raised when a candidate grid cannot be laid out."""


def _check_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise GridGenerationError(f"{name} must be a positive integer (got {value!r})")
    return int(value)


def _axis(low: float, high: float, count: int) -> np.ndarray:
    if count == 1:
        return np.array([low], dtype=float)
    return low + np.arange(count, dtype=float) * ((high - low) / (count - 1))


def gen_nodes(
    nodes: Sequence[object],
    num_x: int,
    num_y: Optional[int] = None,
    margin: float = GRID_MARGIN,
) -> List[Point2D]:
    """Lay out ``num_x * num_y`` evenly spaced nodes inside the bounds of ``nodes``.

    The bounding box of ``nodes`` is shrunk by ``margin`` on every side and the
    grid spans it end to end, column by column. Coordinates are rounded to two
    decimals.

    Raises :class:`GridGenerationError` for non-positive counts or when the
    shrunken box has no room left.
    """

    num_x = _check_count("num_x", num_x)
    num_y = num_x if num_y is None else _check_count("num_y", num_y)

    if len(nodes) == 0:
        raise GridGenerationError("Not enough space to add new nodes: no existing nodes to bound the grid.")

    coords = np.array([as_point(node).as_tuple() for node in nodes], dtype=float)
    # snap inward to the 2-decimal lattice so rounded nodes stay inside the box
    min_x, min_y = np.ceil(np.round((coords.min(axis=0) + margin) * 100, 6)) / 100
    max_x, max_y = np.floor(np.round((coords.max(axis=0) - margin) * 100, 6)) / 100
    if min_x >= max_x or min_y >= max_y:
        raise GridGenerationError(
            "Not enough space to add new nodes. Check the bounds of the existing nodes "
            f"(x: {min_x:.2f}..{max_x:.2f}, y: {min_y:.2f}..{max_y:.2f} after a {margin:g} margin)."
        )

    xs = np.round(_axis(min_x, max_x, num_x), 2)
    ys = np.round(_axis(min_y, max_y, num_y), 2)
    grid_x, grid_y = np.meshgrid(xs, ys, indexing="ij")

    generated = [Point2D(float(x), float(y)) for x, y in zip(grid_x.ravel(), grid_y.ravel())]
    logger.info(
        "Generated %dx%d grid over x=[%.2f, %.2f] y=[%.2f, %.2f]",
        num_x,
        num_y,
        min_x,
        max_x,
        min_y,
        max_y,
    )
    return generated


__all__ = ["GRID_MARGIN", "GridGenerationError", "gen_nodes"]
