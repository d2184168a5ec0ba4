"""Bounded circular neighborhood enumeration.

Coordinates are produced column by column (outer x, inner y) so callers that
record visited cells get a deterministic insertion order.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

from barrier_world.domain.coord import Coord

NeighborhoodCallback = Callable[[Coord], None]
NeighborhoodVisitor = Callable[[Coord, float, NeighborhoodCallback], None]


def neighborhood_coords(center: Coord, radius: float, width: int, height: int) -> Iterator[Coord]:
    """Yield every in-bounds cell within Euclidean distance `radius` of center.

    The center itself is included. Cells outside [0, width) x [0, height) are
    clipped rather than wrapped.
    """
    if radius < 0:
        raise ValueError("radius must be >= 0")
    reach = int(radius)
    for dx in range(-reach, reach + 1):
        x = center.x + dx
        if not 0 <= x < width:
            continue
        extent_y = int(math.sqrt(radius * radius - dx * dx))
        for dy in range(-extent_y, extent_y + 1):
            y = center.y + dy
            if 0 <= y < height:
                yield Coord(x, y)


def visit_neighborhood(
    center: Coord,
    radius: float,
    width: int,
    height: int,
    callback: NeighborhoodCallback,
) -> None:
    """Invoke callback once per cell of the bounded neighborhood."""
    for loc in neighborhood_coords(center, radius, width, height):
        callback(loc)
