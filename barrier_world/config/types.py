"""Configuration enum and frozen dataclass for barrier generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from barrier_world.config.constants import GRID_HEIGHT, GRID_WIDTH, MAX_PLACEMENT_ATTEMPTS

__all__ = [
    "BarrierType",
    "GridConfig",
]


class BarrierType(Enum):
    """Closed set of barrier layout variants, keyed by selector code."""

    NONE = 0
    VERTICAL_BAR_FIXED = 1
    VERTICAL_BAR_RANDOM = 2
    FIVE_BLOCKS_STAGGERED = 3
    HORIZONTAL_BAR_FIXED = 4
    FLOATING_ISLANDS = 5
    SPOTS = 6


@dataclass(frozen=True)
class GridConfig:
    """World parameters read by the barrier generator."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    barrier_type: BarrierType = BarrierType.NONE
    sim_seed: int = 0
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    """Rejection-sampling batches allowed before placement fails."""

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be >= 1")
        if not isinstance(self.barrier_type, BarrierType):
            raise ValueError("barrier_type must be a BarrierType")
