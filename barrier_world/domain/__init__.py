"""Domain layer: coordinates, grid cell store, and barrier generation."""

from barrier_world.domain.barriers import (
    LAYOUT_BUILDERS,
    BarrierLayout,
    PlacementInfeasibleError,
    UnknownBarrierTypeError,
    create_barrier,
    parse_barrier_type,
    place_island_centers,
)
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid
from barrier_world.domain.neighborhood import neighborhood_coords, visit_neighborhood

__all__ = [
    "BarrierLayout",
    "Coord",
    "Grid",
    "LAYOUT_BUILDERS",
    "PlacementInfeasibleError",
    "UnknownBarrierTypeError",
    "create_barrier",
    "neighborhood_coords",
    "parse_barrier_type",
    "place_island_centers",
    "visit_neighborhood",
]
