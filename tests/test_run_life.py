from __future__ import annotations

import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from viv.run_life import _coerce_bool, _coerce_int, main


def test_main_prints_summary_and_writes_log(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(
        [
            "--n-runs",
            "2",
            "--generations",
            "5",
            "--seed-width",
            "8",
            "--seed-height",
            "8",
            "--out-dir",
            str(tmp_path),
        ]
    )
    summary = json.loads(capsys.readouterr().out)
    assert summary["total_runs"] == 2
    assert summary["survived"] + summary["terminated"] == 2
    assert set(summary["final_populations"]) == {"seed0", "seed1"}

    table = pq.read_table(tmp_path / "logs" / "generation_log.parquet")
    assert set(table.column("run_id").to_pylist()) == {"seed0", "seed1"}


def test_main_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "generations": 3,
                "seed": 9,
                "seed_width": 6,
                "seed_height": 6,
                "enable_termination": "no",
                "out_dir": str(tmp_path / "out"),
            }
        )
    )
    main(["--config", str(config_path)])
    summary = json.loads(capsys.readouterr().out)
    assert list(summary["final_populations"]) == ["seed9"]
    assert summary["survived"] == 1

    payload = json.loads((tmp_path / "out" / "runs" / "seed9.json").read_text())
    assert payload["generations_run"] == 3
    assert payload["metadata"]["enable_termination"] is False


def test_cli_overrides_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"seed": 9, "out_dir": str(tmp_path)}))
    main(["--config", str(config_path), "--seed", "2", "--generations", "2"])
    summary = json.loads(capsys.readouterr().out)
    assert list(summary["final_populations"]) == ["seed2"]


def test_missing_config_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])


def test_invalid_json_config_exits(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")
    with pytest.raises(SystemExit):
        main(["--config", str(config_path)])


def test_invalid_value_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--generations", "0", "--out-dir", str(tmp_path)])


def test_invalid_n_runs_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--n-runs", "0", "--out-dir", str(tmp_path)])
    assert not (tmp_path / "logs").exists()


def test_invalid_density_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--density", "2.0", "--out-dir", str(tmp_path)])


def test_coerce_bool_strings() -> None:
    assert _coerce_bool("yes", "flag") is True
    assert _coerce_bool("Off", "flag") is False
    with pytest.raises(ValueError, match="flag must be a boolean value"):
        _coerce_bool("maybe", "flag")


def test_coerce_int_rejects_bool_and_fractions() -> None:
    assert _coerce_int("12", "n") == 12
    assert _coerce_int(3.0, "n") == 3
    with pytest.raises(ValueError):
        _coerce_int(True, "n")
    with pytest.raises(ValueError):
        _coerce_int(2.5, "n")
