"""Visualization layer: themes and barrier layout rendering."""

from barrier_world.viz.render import render_barrier_layout
from barrier_world.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_barrier_layout",
]
