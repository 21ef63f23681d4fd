from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

from .grid import GRID_MARGIN
from .lines import DEFAULT_ANGLE_THRESHOLD, DEFAULT_DISTANCE_THRESHOLD
from .roads import GAP_FACTOR

SpacingReference = Literal["graph", "grid"]


@dataclass
class PipelineOptions:
    """Tunable thresholds for graph extraction and road building."""

    distance_threshold: float = 10.0
    line_distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD
    angle_threshold: float = DEFAULT_ANGLE_THRESHOLD
    max_contain_count: int = 0
    num_x: int = 15
    num_y: Optional[int] = None
    grid_margin: float = GRID_MARGIN
    gap_factor: float = GAP_FACTOR
    spacing_reference: SpacingReference = "graph"

    @property
    def angle_threshold_degrees(self) -> float:
        return math.degrees(self.angle_threshold)


__all__ = ["PipelineOptions", "SpacingReference"]
