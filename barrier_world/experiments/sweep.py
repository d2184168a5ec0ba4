"""Multi-seed barrier layout generation."""

from __future__ import annotations

from dataclasses import replace
from random import Random

from barrier_world.config.types import GridConfig
from barrier_world.domain.barriers import BarrierLayout, create_barrier
from barrier_world.domain.grid import Grid
from barrier_world.metrics.spatial import (
    barrier_cluster_count,
    barrier_coverage,
    min_center_separation,
)


def summarize_layout(grid: Grid, layout: BarrierLayout) -> dict[str, int | float | str]:
    """Build one summary row for a generated layout."""
    separation = min_center_separation(layout.centers)
    return {
        "barrier_type": layout.barrier_type.name.lower(),
        "barrier_cells": len(layout.locations),
        "unique_barrier_cells": len(set(layout.locations)),
        "center_count": len(layout.centers),
        "coverage": barrier_coverage(grid),
        "cluster_count": barrier_cluster_count(grid),
        # JSON has no NaN; report missing spacing as -1.0
        "min_center_separation": separation if separation == separation else -1.0,
    }


def generate_layout(config: GridConfig) -> tuple[Grid, BarrierLayout]:
    """Generate config.barrier_type on a fresh grid seeded by config.sim_seed."""
    grid = Grid.create(config)
    layout = create_barrier(grid, config.barrier_type, config, Random(config.sim_seed))
    return grid, layout


def run_layout_sweep(config: GridConfig, n_seeds: int) -> list[dict[str, int | float | str]]:
    """Generate the configured layout for consecutive seeds and summarize each."""
    if n_seeds < 1:
        raise ValueError("n_seeds must be >= 1")
    rows: list[dict[str, int | float | str]] = []
    for i in range(n_seeds):
        seed_config = replace(config, sim_seed=config.sim_seed + i)
        grid, layout = generate_layout(seed_config)
        row: dict[str, int | float | str] = {"sim_seed": seed_config.sim_seed}
        row.update(summarize_layout(grid, layout))
        rows.append(row)
    return rows
