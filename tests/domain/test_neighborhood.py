"""Tests for barrier_world.domain.neighborhood."""

from __future__ import annotations

import pytest

from barrier_world.domain.coord import Coord
from barrier_world.domain.neighborhood import neighborhood_coords, visit_neighborhood


def test_radius_zero_is_center_only() -> None:
    assert list(neighborhood_coords(Coord(3, 3), 0.0, 10, 10)) == [Coord(3, 3)]


def test_radius_one_is_plus_shape() -> None:
    cells = list(neighborhood_coords(Coord(3, 3), 1.0, 10, 10))
    assert cells == [Coord(2, 3), Coord(3, 2), Coord(3, 3), Coord(3, 4), Coord(4, 3)]


@pytest.mark.parametrize(("radius", "expected"), [(3.0, 29), (5.0, 81)])
def test_disk_cell_counts(radius: float, expected: int) -> None:
    assert len(list(neighborhood_coords(Coord(50, 50), radius, 100, 100))) == expected


def test_every_cell_within_radius() -> None:
    center = Coord(20, 20)
    for loc in neighborhood_coords(center, 4.5, 40, 40):
        assert (loc - center).length() <= 4.5


def test_no_duplicates() -> None:
    cells = list(neighborhood_coords(Coord(5, 5), 3.0, 10, 10))
    assert len(cells) == len(set(cells))


def test_clipped_at_edges() -> None:
    cells = list(neighborhood_coords(Coord(0, 9), 2.0, 10, 10))
    assert cells
    assert all(0 <= c.x < 10 and 0 <= c.y < 10 for c in cells)


def test_x_major_order() -> None:
    cells = list(neighborhood_coords(Coord(5, 5), 2.0, 10, 10))
    xs = [c.x for c in cells]
    assert xs == sorted(xs)


def test_negative_radius_rejected() -> None:
    with pytest.raises(ValueError):
        list(neighborhood_coords(Coord(0, 0), -1.0, 5, 5))


def test_visit_calls_callback_once_per_cell() -> None:
    seen: list[Coord] = []
    visit_neighborhood(Coord(4, 4), 2.0, 10, 10, seen.append)
    assert seen == list(neighborhood_coords(Coord(4, 4), 2.0, 10, 10))
