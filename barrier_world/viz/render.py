"""Matplotlib rendering of barrier layouts."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from barrier_world.config.constants import BARRIER
from barrier_world.domain.coord import Coord
from barrier_world.domain.grid import Grid
from barrier_world.viz.theme import DEFAULT_THEME, Theme

# Grid lines are skipped above this many cells per axis.
_MAX_GRID_LINE_CELLS = 64


def _build_barrier_array(grid: Grid) -> np.ndarray:
    """Return (H, W) int array: 1 for barrier cells, 0 otherwise."""
    return (grid.cells == BARRIER).astype(int)


def _barrier_cmap(
    dark: bool = False, theme: Theme = DEFAULT_THEME
) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (empty, barrier)."""
    if dark:
        colors = [theme.empty_cell_color_dark, theme.barrier_color_dark]
    else:
        colors = [theme.empty_cell_color, theme.barrier_color]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _build_legend_handles(
    dark: bool = False, theme: Theme = DEFAULT_THEME, with_centers: bool = False
) -> list[Patch]:
    empty = theme.empty_cell_color_dark if dark else theme.empty_cell_color
    barrier = theme.barrier_color_dark if dark else theme.barrier_color
    handles = [
        Patch(facecolor=empty, edgecolor="gray", label="Empty"),
        Patch(facecolor=barrier, edgecolor="gray", label="Barrier"),
    ]
    if with_centers:
        handles.append(Patch(facecolor=theme.center_color, edgecolor="gray", label="Center"))
    return handles


def _draw_cell_grid(
    ax: plt.Axes,
    cells: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    dark: bool = False,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """imshow with subtle grid lines on *ax*."""
    img = ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = cells.shape
    if max(h, w) <= _MAX_GRID_LINE_CELLS:
        line_color = theme.grid_line_color_dark if dark else theme.grid_line_color
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    if dark:
        ax.set_facecolor(theme.empty_cell_color_dark)
    return img


def render_barrier_layout(
    grid: Grid,
    output_path: Path,
    *,
    centers: Sequence[Coord] | None = None,
    title: str | None = None,
    dark: bool = False,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 150,
) -> None:
    """Write a PNG of the grid's barrier cells.

    Anchor centers default to the grid's recorded barrier centers and are
    drawn as markers on top of the cells.
    """
    if dpi < 1:
        raise ValueError("dpi must be >= 1")
    marks = grid.barrier_centers if centers is None else tuple(centers)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmap, norm = _barrier_cmap(dark=dark, theme=theme)
    fig, ax = plt.subplots(figsize=(6, 6 * grid.height / grid.width))
    if dark:
        fig.patch.set_facecolor(theme.empty_cell_color_dark)
    _draw_cell_grid(ax, _build_barrier_array(grid), cmap, norm, dark=dark, theme=theme)
    if marks:
        ax.scatter(
            [c.x for c in marks],
            [c.y for c in marks],
            marker="x",
            s=24,
            color=theme.center_color,
        )
    ax.legend(
        handles=_build_legend_handles(dark=dark, theme=theme, with_centers=bool(marks)),
        loc="upper right",
        fontsize="small",
    )
    if title:
        ax.set_title(title, color="white" if dark else "black")
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
