"""Tests for barrier_world.cli: argument parsing and JSON summary."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from barrier_world.cli import _coerce_int, _get_int, main


def _run(capsys: pytest.CaptureFixture[str], argv: list[str]) -> dict[str, object]:
    main(argv)
    return json.loads(capsys.readouterr().out)


def test_coerce_int_rejects_bool() -> None:
    with pytest.raises(ValueError, match="integer"):
        _coerce_int(True, "grid_width")


def test_coerce_int_rejects_fractional_float() -> None:
    with pytest.raises(ValueError, match="integer"):
        _coerce_int(2.5, "grid_width")


def test_coerce_int_accepts_numeric_string() -> None:
    assert _coerce_int("64", "grid_width") == 64


def test_get_int_precedence() -> None:
    file_cfg: dict[str, object] = {"sim_seed": 4}
    assert _get_int(9, "sim_seed", file_cfg, 0) == 9
    assert _get_int(None, "sim_seed", file_cfg, 0) == 4
    assert _get_int(None, "sim_seed", {}, 0) == 0


def test_default_run_has_no_barriers(capsys: pytest.CaptureFixture[str]) -> None:
    summary = _run(capsys, [])
    assert summary["barrier_type"] == 0
    assert summary["n_seeds"] == 1
    layouts = summary["layouts"]
    assert isinstance(layouts, list)
    assert layouts[0]["barrier_cells"] == 0


def test_spots_summary(capsys: pytest.CaptureFixture[str]) -> None:
    summary = _run(capsys, ["--barrier-type", "6"])
    layouts = summary["layouts"]
    assert isinstance(layouts, list)
    assert layouts[0]["barrier_type"] == "spots"
    assert layouts[0]["center_count"] == 5


def test_multiple_seeds(capsys: pytest.CaptureFixture[str]) -> None:
    summary = _run(capsys, ["--barrier-type", "5", "--n-seeds", "2", "--sim-seed", "3"])
    layouts = summary["layouts"]
    assert isinstance(layouts, list)
    assert [row["sim_seed"] for row in layouts] == [3, 4]


def test_unknown_barrier_type_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--barrier-type", "99"])
    assert excinfo.value.code == 2
    assert "unknown barrier type" in capsys.readouterr().err


def test_infeasible_placement_exits(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--barrier-type", "5", "--grid-width", "30", "--grid-height", "30"]
    with pytest.raises(SystemExit) as excinfo:
        main([*argv, "--max-placement-attempts", "3"])
    assert excinfo.value.code == 2
    assert "after 3 attempts" in capsys.readouterr().err


def test_layout_too_large_for_grid_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--barrier-type", "3", "--grid-width", "128", "--grid-height", "32"])
    assert excinfo.value.code == 2
    assert "does not fit" in capsys.readouterr().err



def test_invalid_grid_size_exits() -> None:
    with pytest.raises(SystemExit):
        main(["--grid-width", "0"])


def test_zero_seeds_exits() -> None:
    with pytest.raises(SystemExit):
        main(["--n-seeds", "0"])


def test_config_file_values(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"barrier_type": 1, "grid_width": 64, "grid_height": 64}))
    summary = _run(capsys, ["--config", str(config_path)])
    assert summary["barrier_type"] == 1
    assert summary["grid_width"] == 64
    layouts = summary["layouts"]
    assert isinstance(layouts, list)
    assert layouts[0]["barrier_cells"] == 2 * 33


def test_cli_overrides_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"barrier_type": 1}))
    summary = _run(capsys, ["--config", str(config_path), "--barrier-type", "4"])
    assert summary["barrier_type"] == 4


def test_config_file_unknown_barrier_type_exits(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"barrier_type": 42}))
    with pytest.raises(SystemExit):
        main(["--config", str(config_path)])


def test_missing_config_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])


def test_invalid_json_config_exits(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")
    with pytest.raises(SystemExit):
        main(["--config", str(config_path)])


def test_render_option(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "layout.png"
    summary = _run(capsys, ["--barrier-type", "3", "--render", str(output)])
    assert output.exists()
    assert summary["rendered"] == str(output)
