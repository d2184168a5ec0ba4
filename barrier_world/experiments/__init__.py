"""Layout generation runs over one or more seeds."""

from barrier_world.experiments.sweep import generate_layout, run_layout_sweep, summarize_layout

__all__ = [
    "generate_layout",
    "run_layout_sweep",
    "summarize_layout",
]
