"""Integer grid coordinate value type."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """A signed (x, y) cell address."""

    x: int
    y: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean length of the coordinate treated as a vector."""
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
