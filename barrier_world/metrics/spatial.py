"""Spatial summaries of a generated barrier layout."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from barrier_world.config.constants import BARRIER
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid


def barrier_coverage(grid: Grid) -> float:
    """Fraction of grid cells holding the barrier value."""
    return float(np.count_nonzero(grid.cells == BARRIER)) / grid.cells.size


def barrier_cluster_count(grid: Grid) -> int:
    """Count 4-connected components of barrier cells (bounded, no wrap)."""
    mask = grid.cells == BARRIER
    h, w = mask.shape
    seen = np.zeros_like(mask, dtype=bool)
    clusters = 0

    for start_y, start_x in zip(*np.nonzero(mask), strict=True):
        if seen[start_y, start_x]:
            continue
        clusters += 1
        seen[start_y, start_x] = True
        stack = [(int(start_x), int(start_y))]
        while stack:
            x, y = stack.pop()
            for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                if not (0 <= nx < w and 0 <= ny < h):
                    continue
                if seen[ny, nx] or not mask[ny, nx]:
                    continue
                seen[ny, nx] = True
                stack.append((nx, ny))

    return clusters


def min_center_separation(centers: Sequence[Coord]) -> float:
    """Smallest pairwise Euclidean distance between centers.

    Returns NaN when fewer than two centers exist.
    """
    if len(centers) < 2:
        return float("nan")
    return min(
        (centers[a] - centers[b]).length()
        for a in range(len(centers) - 1)
        for b in range(a + 1, len(centers))
    )
