"""Barrier layout generation.

Stamps barrier cells into a grid for one of a closed set of layout variants
and records every stamped cell (and, for radius-based layouts, the anchor
centers) on the grid. The grid is expected to be free of barriers on entry;
callers normally run this once per epoch right after ``Grid.zero_fill``.

Two layouts are randomized: the random vertical bar and the floating
islands. Island placement is rejection-sampled and capped by
``GridConfig.max_placement_attempts``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from barrier_world.config.constants import (
    ISLAND_COUNT,
    ISLAND_MARGIN,
    ISLAND_RADIUS,
    SPOT_COUNT,
    SPOT_RADIUS,
    STAGGERED_BLOCK_WIDTH,
)
from barrier_world.config.types import BarrierType, GridConfig
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid
from barrier_world.domain.neighborhood import NeighborhoodVisitor


class UnknownBarrierTypeError(ValueError):
    """Selector does not name any barrier layout variant."""


class PlacementInfeasibleError(RuntimeError):
    """Layout geometry does not fit the grid or its spacing cannot be met."""


class RandomIntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class BarrierLayout:
    """Snapshot of the barrier lists produced by one generation call."""

    barrier_type: BarrierType
    locations: tuple[Coord, ...]
    centers: tuple[Coord, ...]


def parse_barrier_type(raw: BarrierType | int) -> BarrierType:
    """Map a selector code onto its BarrierType."""
    if isinstance(raw, BarrierType):
        return raw
    if isinstance(raw, bool):
        raise UnknownBarrierTypeError(f"unknown barrier type: {raw!r}")
    try:
        return BarrierType(raw)
    except ValueError as exc:
        valid = ", ".join(str(t.value) for t in BarrierType)
        raise UnknownBarrierTypeError(
            f"unknown barrier type {raw!r}; must be one of {valid}"
        ) from exc


# ---------------------------------------------------------------------------
# Stamping helpers
# ---------------------------------------------------------------------------


_Box = tuple[int, int, int, int]


def _draw_box(grid: Grid, min_x: int, min_y: int, max_x: int, max_y: int) -> None:
    """Stamp the inclusive box, x-major."""
    for x in range(min_x, max_x + 1):
        for y in range(min_y, max_y + 1):
            grid.add_barrier(Coord(x, y))


def _draw_boxes(grid: Grid, config: GridConfig, boxes: list[_Box]) -> None:
    """Stamp every box, or none of them if any box leaves the configured world."""
    w, h = config.grid_width, config.grid_height
    for min_x, min_y, max_x, max_y in boxes:
        if min_x < 0 or min_y < 0 or max_x >= w or max_y >= h:
            raise PlacementInfeasibleError(
                f"box ({min_x}, {min_y})-({max_x}, {max_y}) does not fit a {w}x{h} grid"
            )
    for box in boxes:
        _draw_box(grid, *box)


def _draw_disk(grid: Grid, center: Coord, radius: float, visit: NeighborhoodVisitor) -> None:
    visit(center, radius, grid.add_barrier)


# ---------------------------------------------------------------------------
# Layout builders
# ---------------------------------------------------------------------------

_Builder = Callable[[Grid, GridConfig, RandomIntSource, NeighborhoodVisitor], None]


def _build_none(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    return


def _build_vertical_bar_fixed(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    w, h = config.grid_width, config.grid_height
    min_x = w // 2
    min_y = h // 4
    _draw_boxes(grid, config, [(min_x, min_y, min_x + 1, min_y + h // 2)])


def _build_vertical_bar_random(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    w, h = config.grid_width, config.grid_height
    if w < 3:
        raise PlacementInfeasibleError(f"a 3-wide bar does not fit a {w}x{h} grid")
    half_height = h // 4
    # Draw ranges keep the 3-wide bar and its full height inside the grid.
    mid_x = rng.randint(max(1, w // 10), min(w - w // 10, w - 2))
    mid_y = rng.randint(half_height, h - half_height - 1)
    center = Coord(mid_x, mid_y)
    grid.add_barrier_center(center)
    _draw_box(grid, mid_x - 1, mid_y - half_height, mid_x + 1, mid_y + half_height)


def _build_five_blocks_staggered(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    w, h = config.grid_width, config.grid_height
    block_w = STAGGERED_BLOCK_WIDTH
    block_h = w // 3

    x0 = w // 4 - block_w // 2
    y0 = h // 4 - block_h // 2
    origins = [
        (x0, y0),
        (x0 + w // 2, y0),
        (x0 + w // 2, y0 + h // 2),
        (x0, y0 + h // 2),
        (w // 2 - block_w // 2, h // 2 - block_h // 2),
    ]
    _draw_boxes(grid, config, [(x, y, x + block_w, y + block_h) for x, y in origins])


def _build_horizontal_bar_fixed(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    w, h = config.grid_width, config.grid_height
    min_x = w // 4
    min_y = h // 2 + h // 4
    _draw_boxes(grid, config, [(min_x, min_y, min_x + w // 2, min_y + 2)])


def place_island_centers(
    width: int,
    height: int,
    rng: RandomIntSource,
    *,
    count: int = ISLAND_COUNT,
    margin: int = ISLAND_MARGIN,
    max_attempts: int,
) -> list[Coord]:
    """Rejection-sample `count` centers at least `margin` apart.

    Centers are drawn inside the region inset by `margin` on every side. A
    batch with any pair closer than `margin` is discarded whole.

    Raises:
        PlacementInfeasibleError: the inset region is empty or no valid
            batch was drawn within `max_attempts` batches.
    """
    if width - margin < margin or height - margin < margin:
        raise PlacementInfeasibleError(
            f"margin {margin} leaves no room for centers in a {width}x{height} grid"
        )
    for _ in range(max_attempts):
        centers = [
            Coord(rng.randint(margin, width - margin), rng.randint(margin, height - margin))
            for _ in range(count)
        ]
        if all(
            (centers[a] - centers[b]).length() >= margin
            for a in range(count - 1)
            for b in range(a + 1, count)
        ):
            return centers
    raise PlacementInfeasibleError(
        f"could not place {count} centers {margin} apart in a {width}x{height} grid "
        f"after {max_attempts} attempts"
    )


def _build_floating_islands(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    centers = place_island_centers(
        config.grid_width,
        config.grid_height,
        rng,
        max_attempts=config.max_placement_attempts,
    )
    for center in centers:
        grid.add_barrier_center(center)
        _draw_disk(grid, center, ISLAND_RADIUS, visit)


def _build_spots(
    grid: Grid, config: GridConfig, rng: RandomIntSource, visit: NeighborhoodVisitor
) -> None:
    """Five spots on the vertical center line, one per sixth of the height.

    Grids shorter than six cells would stack every spot on row 0, so they are
    rejected.
    """
    if config.grid_height < SPOT_COUNT + 1:
        raise PlacementInfeasibleError(
            f"{SPOT_COUNT} spots need a grid at least {SPOT_COUNT + 1} cells tall, "
            f"got {config.grid_height}"
        )
    slice_height = config.grid_height // (SPOT_COUNT + 1)
    for n in range(1, SPOT_COUNT + 1):
        center = Coord(config.grid_width // 2, n * slice_height)
        _draw_disk(grid, center, SPOT_RADIUS, visit)
        grid.add_barrier_center(center)


LAYOUT_BUILDERS: dict[BarrierType, _Builder] = {
    BarrierType.NONE: _build_none,
    BarrierType.VERTICAL_BAR_FIXED: _build_vertical_bar_fixed,
    BarrierType.VERTICAL_BAR_RANDOM: _build_vertical_bar_random,
    BarrierType.FIVE_BLOCKS_STAGGERED: _build_five_blocks_staggered,
    BarrierType.HORIZONTAL_BAR_FIXED: _build_horizontal_bar_fixed,
    BarrierType.FLOATING_ISLANDS: _build_floating_islands,
    BarrierType.SPOTS: _build_spots,
}


def create_barrier(
    grid: Grid,
    barrier_type: BarrierType | int,
    config: GridConfig,
    rng: RandomIntSource,
    visit_neighborhood: NeighborhoodVisitor | None = None,
) -> BarrierLayout:
    """Stamp the selected barrier layout into grid.

    The grid's barrier lists are cleared and rebuilt. The grid is borrowed for
    the duration of the call only.

    Raises:
        UnknownBarrierTypeError: barrier_type is not a known selector.
        PlacementInfeasibleError: the layout does not fit the configured world,
            or floating islands could not be placed.
        ValueError: config describes a larger world than grid holds.
    """
    layout_type = parse_barrier_type(barrier_type)
    if config.grid_width > grid.width or config.grid_height > grid.height:
        raise ValueError(
            f"config {config.grid_width}x{config.grid_height} exceeds grid "
            f"{grid.width}x{grid.height}"
        )
    visit = visit_neighborhood if visit_neighborhood is not None else grid.visit_neighborhood

    grid.clear_barriers()
    LAYOUT_BUILDERS[layout_type](grid, config, rng, visit)
    return BarrierLayout(
        barrier_type=layout_type,
        locations=grid.barrier_locations,
        centers=grid.barrier_centers,
    )
