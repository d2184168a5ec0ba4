"""Configuration layer: constants and typed config dataclasses."""

from barrier_world.config.constants import (
    BARRIER,
    EMPTY,
    GRID_HEIGHT,
    GRID_WIDTH,
    ISLAND_COUNT,
    ISLAND_MARGIN,
    ISLAND_RADIUS,
    MAX_PLACEMENT_ATTEMPTS,
    SPOT_COUNT,
    SPOT_RADIUS,
    STAGGERED_BLOCK_WIDTH,
)
from barrier_world.config.types import BarrierType, GridConfig

__all__ = [
    "BARRIER",
    "BarrierType",
    "EMPTY",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GridConfig",
    "ISLAND_COUNT",
    "ISLAND_MARGIN",
    "ISLAND_RADIUS",
    "MAX_PLACEMENT_ATTEMPTS",
    "SPOT_COUNT",
    "SPOT_RADIUS",
    "STAGGERED_BLOCK_WIDTH",
]
