"""CLI entrypoint for barrier layout generation.

Generates one barrier layout per seed on a fresh grid and prints a JSON
summary. Supports ``--config path/to/config.json``; CLI arguments override
config-file values, which override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from barrier_world.config.constants import GRID_HEIGHT, GRID_WIDTH, MAX_PLACEMENT_ATTEMPTS
from barrier_world.config.types import BarrierType, GridConfig
from barrier_world.domain.barriers import PlacementInfeasibleError, parse_barrier_type
from barrier_world.experiments.sweep import generate_layout, run_layout_sweep
from barrier_world.viz.render import render_barrier_layout
from barrier_world.viz.theme import REGISTERED_THEMES, get_theme

# ---------------------------------------------------------------------------
# Config value helpers
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_path(
    cli_val: Path | None, key: str, file_cfg: dict[str, object]
) -> Path | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    if raw is None:
        return None
    return Path(_coerce_str(raw, key))


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Generate barrier layouts for a grid world")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    valid = ", ".join(f"{t.value}={t.name.lower()}" for t in BarrierType)
    parser.add_argument("--barrier-type", type=int, default=None, help=f"One of {valid}")
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--n-seeds", type=int, default=None)
    parser.add_argument("--max-placement-attempts", type=int, default=None)
    parser.add_argument(
        "--render",
        type=Path,
        default=None,
        help="Write a PNG of the first seed's layout to this path",
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=sorted(REGISTERED_THEMES),
        default="default",
    )
    parser.add_argument("--dark", action="store_true")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for barrier layout generation."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        barrier_type_raw = _get_int(args.barrier_type, "barrier_type", file_cfg, 0)
        barrier_type = parse_barrier_type(barrier_type_raw)
        config = GridConfig(
            grid_width=_get_int(args.grid_width, "grid_width", file_cfg, GRID_WIDTH),
            grid_height=_get_int(args.grid_height, "grid_height", file_cfg, GRID_HEIGHT),
            barrier_type=barrier_type,
            sim_seed=_get_int(args.sim_seed, "sim_seed", file_cfg, 0),
            max_placement_attempts=_get_int(
                args.max_placement_attempts,
                "max_placement_attempts",
                file_cfg,
                MAX_PLACEMENT_ATTEMPTS,
            ),
        )
        n_seeds = _get_int(args.n_seeds, "n_seeds", file_cfg, 1)
        if n_seeds < 1:
            raise ValueError("n_seeds must be >= 1")
        render_path = _get_optional_path(args.render, "render", file_cfg)
    except ValueError as exc:
        # Includes UnknownBarrierTypeError: a world with an unknown layout never starts.
        parser.error(str(exc))

    try:
        rows = run_layout_sweep(config, n_seeds)
        if render_path is not None:
            grid, layout = generate_layout(config)
    except PlacementInfeasibleError as exc:
        parser.error(str(exc))

    if render_path is not None:
        render_barrier_layout(
            grid,
            render_path,
            title=f"{layout.barrier_type.name.lower()} (seed {config.sim_seed})",
            dark=args.dark,
            theme=get_theme(args.theme),
        )

    summary = {
        "barrier_type": barrier_type.value,
        "grid_width": config.grid_width,
        "grid_height": config.grid_height,
        "n_seeds": n_seeds,
        "rendered": str(render_path) if render_path is not None else None,
        "layouts": rows,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
