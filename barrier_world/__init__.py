"""Procedural barrier layouts for a 2D cellular simulation world."""

from barrier_world.config.types import BarrierType, GridConfig
from barrier_world.domain.barriers import (
    BarrierLayout,
    PlacementInfeasibleError,
    UnknownBarrierTypeError,
    create_barrier,
)
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid

__all__ = [
    "BarrierLayout",
    "BarrierType",
    "Coord",
    "Grid",
    "GridConfig",
    "PlacementInfeasibleError",
    "UnknownBarrierTypeError",
    "create_barrier",
]
