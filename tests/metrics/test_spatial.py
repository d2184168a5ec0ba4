"""Tests for barrier_world.metrics.spatial."""

from __future__ import annotations

import math
from random import Random

from barrier_world.config.types import BarrierType, GridConfig
from barrier_world.domain.barriers import create_barrier
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid
from barrier_world.metrics.spatial import (
    barrier_cluster_count,
    barrier_coverage,
    min_center_separation,
)


def _grid_with(barrier_type: BarrierType, seed: int = 0) -> Grid:
    config = GridConfig()
    grid = Grid.create(config)
    create_barrier(grid, barrier_type, config, Random(seed))
    return grid


class TestBarrierCoverage:
    def test_empty_grid(self) -> None:
        assert barrier_coverage(Grid(10, 10)) == 0.0

    def test_vertical_bar(self) -> None:
        grid = _grid_with(BarrierType.VERTICAL_BAR_FIXED)
        assert math.isclose(barrier_coverage(grid), 130 / (128 * 128))

    def test_full_grid(self) -> None:
        grid = Grid(2, 2)
        for x in range(2):
            for y in range(2):
                grid.add_barrier(Coord(x, y))
        assert barrier_coverage(grid) == 1.0


class TestBarrierClusterCount:
    def test_empty_grid(self) -> None:
        assert barrier_cluster_count(Grid(10, 10)) == 0

    def test_diagonal_cells_are_separate(self) -> None:
        grid = Grid(4, 4)
        grid.add_barrier(Coord(0, 0))
        grid.add_barrier(Coord(1, 1))
        assert barrier_cluster_count(grid) == 2

    def test_no_wraparound(self) -> None:
        grid = Grid(4, 4)
        grid.add_barrier(Coord(0, 2))
        grid.add_barrier(Coord(3, 2))
        assert barrier_cluster_count(grid) == 2

    def test_layout_cluster_counts(self) -> None:
        assert barrier_cluster_count(_grid_with(BarrierType.VERTICAL_BAR_FIXED)) == 1
        assert barrier_cluster_count(_grid_with(BarrierType.FIVE_BLOCKS_STAGGERED)) == 5
        assert barrier_cluster_count(_grid_with(BarrierType.FLOATING_ISLANDS)) == 12
        assert barrier_cluster_count(_grid_with(BarrierType.SPOTS)) == 5


class TestMinCenterSeparation:
    def test_fewer_than_two_is_nan(self) -> None:
        assert math.isnan(min_center_separation([]))
        assert math.isnan(min_center_separation([Coord(1, 1)]))

    def test_pairwise_minimum(self) -> None:
        centers = [Coord(0, 0), Coord(10, 0), Coord(13, 4)]
        assert min_center_separation(centers) == 5.0

    def test_spots_spacing(self) -> None:
        grid = _grid_with(BarrierType.SPOTS)
        assert min_center_separation(grid.barrier_centers) == 21.0
