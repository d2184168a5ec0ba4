"""Visualization theme presets for barrier layout renders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Color tokens for barrier layout images."""

    empty_cell_color: str = "#F0F0F0"
    empty_cell_color_dark: str = "#1A1A1A"
    barrier_color: str = "#37474F"
    barrier_color_dark: str = "#B0BEC5"
    center_color: str = "#FF5722"
    grid_line_color: str = "#CCCCCC"
    grid_line_color_dark: str = "#333333"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    empty_cell_color="#FFFFFF",
    barrier_color="#000000",
    center_color="#D62728",
    grid_line_color="#E0E0E0",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
