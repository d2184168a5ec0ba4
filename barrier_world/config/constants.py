"""Centralized constants for barrier layout generation.

Cell values, default world size and the per-variant geometry live here so
the generator, metrics and renderers agree on a single source of truth.
"""

from __future__ import annotations

GRID_WIDTH = 128
"""Default grid width in cells."""

GRID_HEIGHT = 128
"""Default grid height in cells."""

EMPTY = 0
"""Cell value of an unoccupied cell."""

BARRIER = 0xFFFF
"""Cell value of an impassable barrier cell."""

CELL_DTYPE = "uint16"
"""numpy dtype of grid cells; agent indices occupy 1..0xFFFE."""

# ---------------------------------------------------------------------------
# Per-variant geometry
# ---------------------------------------------------------------------------

STAGGERED_BLOCK_WIDTH = 2
"""Inclusive-bound width of each staggered block (3 columns are stamped)."""

ISLAND_COUNT = 12
"""Number of floating islands placed by the random cluster layout."""

ISLAND_RADIUS = 3.0
"""Radius of each floating island."""

ISLAND_MARGIN = int(ISLAND_RADIUS * 4)
"""Border inset and minimum center spacing for floating islands."""

SPOT_COUNT = 5
"""Number of evenly spaced spots in the spot layout."""

SPOT_RADIUS = 5.0
"""Radius of each spot."""

MAX_PLACEMENT_ATTEMPTS = 10_000
"""Cap on rejection-sampling batches before placement is declared infeasible."""
