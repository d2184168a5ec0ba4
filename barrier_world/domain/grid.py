"""Bounded 2D cell store that owns the barrier bookkeeping lists.

Cells hold ``EMPTY``, ``BARRIER`` or an agent index. The two barrier lists
are rebuilt by the barrier generator and exposed to the rest of the
simulation as read-only tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from barrier_world.config.constants import BARRIER, CELL_DTYPE, EMPTY
from barrier_world.domain.coord import Coord
from barrier_world.domain.neighborhood import NeighborhoodCallback
from barrier_world.domain.neighborhood import visit_neighborhood as _visit_neighborhood

if TYPE_CHECKING:
    from barrier_world.config.types import GridConfig


@dataclass(eq=False)
class Grid:
    """Non-toroidal grid of ``width x height`` cells, indexed ``cells[y, x]``."""

    width: int
    height: int
    cells: np.ndarray = field(init=False, repr=False)
    _barrier_locations: list[Coord] = field(default_factory=list, init=False, repr=False)
    _barrier_centers: list[Coord] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.cells = np.full((self.height, self.width), EMPTY, dtype=CELL_DTYPE)

    @classmethod
    def create(cls, config: GridConfig) -> Grid:
        """Allocate an empty grid sized from config."""
        return cls(width=config.grid_width, height=config.grid_height)

    # -- cell access --------------------------------------------------------

    def in_bounds(self, loc: Coord) -> bool:
        return 0 <= loc.x < self.width and 0 <= loc.y < self.height

    def _check(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def set(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        self.cells[y, x] = value

    def set_at(self, loc: Coord, value: int) -> None:
        self.set(loc.x, loc.y, value)

    def at(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.cells[y, x])

    def at_coord(self, loc: Coord) -> int:
        return self.at(loc.x, loc.y)

    def is_empty_at(self, loc: Coord) -> bool:
        return self.at_coord(loc) == EMPTY

    def is_barrier_at(self, loc: Coord) -> bool:
        return self.at_coord(loc) == BARRIER

    def zero_fill(self) -> None:
        """Reset every cell to EMPTY. Barrier lists are left untouched."""
        self.cells.fill(EMPTY)

    def visit_neighborhood(
        self, center: Coord, radius: float, callback: NeighborhoodCallback
    ) -> None:
        """Visit every in-bounds cell within `radius` of center."""
        _visit_neighborhood(center, radius, self.width, self.height, callback)

    # -- barrier bookkeeping -------------------------------------------------

    @property
    def barrier_locations(self) -> tuple[Coord, ...]:
        """Every cell stamped by the last generation, in stamp order."""
        return tuple(self._barrier_locations)

    @property
    def barrier_centers(self) -> tuple[Coord, ...]:
        """Anchor centers recorded by radius-based layouts."""
        return tuple(self._barrier_centers)

    def clear_barriers(self) -> None:
        self._barrier_locations.clear()
        self._barrier_centers.clear()

    def add_barrier(self, loc: Coord) -> None:
        """Stamp one barrier cell and record it."""
        self.set_at(loc, BARRIER)
        self._barrier_locations.append(loc)

    def add_barrier_center(self, loc: Coord) -> None:
        self._barrier_centers.append(loc)
