"""Tests for the simulation runner (run_simulation, run_batch, iterate)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pyarrow.parquet as pq
import pytest

from viv.config.types import RunConfig, SeedConfig
from viv.domain.grid import Grid
from viv.domain.index import Index
from viv.io.schemas import GENERATION_LOG_SCHEMA
from viv.simulation.engine import iterate, run_batch, run_simulation

BLOCK = [Index(0, 0), Index(1, 0), Index(0, 1), Index(1, 1)]
BLINKER = [Index(-1, 0), Index(0, 0), Index(1, 0)]


def _log_rows(out_dir: Path) -> list[dict[str, object]]:
    return pq.read_table(out_dir / "logs" / "generation_log.parquet").to_pylist()


class TestIterate:
    def test_yields_seed_then_successors(self) -> None:
        grids = list(iterate(Grid.new(BLINKER), 2))
        assert len(grids) == 3
        assert grids[0] == grids[2]
        assert grids[0] != grids[1]

    def test_zero_generations(self) -> None:
        grid = Grid.new(BLOCK)
        assert list(iterate(grid, 0)) == [grid]

    def test_negative_generations_raise(self) -> None:
        with pytest.raises(ValueError, match="generations must be >= 0"):
            list(iterate(Grid(), -1))


class TestRunSimulation:
    def test_log_has_schema_columns(self, tmp_path: Path) -> None:
        run_simulation(Grid.new(BLOCK), tmp_path, RunConfig(generations=3))
        table = pq.read_table(tmp_path / "logs" / "generation_log.parquet")
        assert set(table.column_names) == set(GENERATION_LOG_SCHEMA.names)

    def test_single_cell_goes_extinct(self, tmp_path: Path) -> None:
        result, final = run_simulation(Grid.new([Index(0, 0)]), tmp_path, run_id="lonely")
        assert result.termination_reason == "extinct"
        assert result.terminated_at == 1
        assert result.final_population == 0
        assert final.population == 0

        rows = _log_rows(tmp_path)
        assert [r["generation"] for r in rows] == [0, 1]
        assert rows[0]["population"] == 1
        assert (rows[0]["min_x"], rows[0]["max_x"], rows[0]["min_y"], rows[0]["max_y"]) == (
            0,
            0,
            0,
            0,
        )
        assert rows[1]["deaths"] == 1
        assert rows[1]["min_x"] is None

    def test_block_halts(self, tmp_path: Path) -> None:
        result, _ = run_simulation(Grid.new(BLOCK), tmp_path, RunConfig(halt_window=2))
        assert result.termination_reason == "halt"
        assert result.terminated_at == 3
        assert result.final_population == 4

    def test_blinker_detected_as_short_period(self, tmp_path: Path) -> None:
        result, _ = run_simulation(Grid.new(BLINKER), tmp_path, RunConfig(halt_window=50))
        assert result.termination_reason == "short_period"
        assert result.terminated_at == 4

    def test_termination_disabled_runs_all_generations(self, tmp_path: Path) -> None:
        config = RunConfig(generations=5, enable_termination=False)
        result, _ = run_simulation(Grid.new([Index(0, 0)]), tmp_path, config)
        assert result.survived
        assert result.generations_run == 5
        assert len(_log_rows(tmp_path)) == 6

    def test_blinker_turnover_logged(self, tmp_path: Path) -> None:
        config = RunConfig(generations=2, enable_termination=False)
        run_simulation(Grid.new(BLINKER), tmp_path, config)
        rows = _log_rows(tmp_path)
        assert [(r["births"], r["deaths"]) for r in rows] == [(3, 0), (2, 2), (2, 2)]
        assert all(r["population"] == 3 for r in rows)
        assert all(r["cluster_count"] == 1 for r in rows)

    def test_does_not_mutate_seed_grid(self, tmp_path: Path) -> None:
        grid = Grid.new(BLINKER)
        run_simulation(grid, tmp_path, RunConfig(generations=3, enable_termination=False))
        assert grid.living() == frozenset(BLINKER)

    def test_writes_run_summary(self, tmp_path: Path) -> None:
        run_simulation(Grid.new(BLOCK), tmp_path, RunConfig(halt_window=1), run_id="block")
        payload = json.loads((tmp_path / "runs" / "block.json").read_text())
        assert payload["run_id"] == "block"
        assert payload["survived"] is False
        assert payload["metadata"]["termination_reason"] == "halt"
        assert payload["bounding_box"] == [0, 1, 0, 1]

    def test_flushes_in_chunks(self, tmp_path: Path) -> None:
        config = RunConfig(generations=10, enable_termination=False)
        with patch("viv.simulation.engine.FLUSH_THRESHOLD", 3):
            run_simulation(Grid.new(BLINKER), tmp_path, config, run_id="blinker")
        rows = _log_rows(tmp_path)
        assert [r["generation"] for r in rows] == list(range(11))
        assert pq.ParquetFile(tmp_path / "logs" / "generation_log.parquet").num_row_groups > 1


class TestRunBatch:
    def test_runs_share_one_log(self, tmp_path: Path) -> None:
        results = run_batch(
            n_runs=2,
            out_dir=tmp_path,
            config=RunConfig(generations=5),
            seed_config=SeedConfig.centered(10, 10),
            base_seed=3,
        )
        assert [r.run_id for r in results] == ["seed3", "seed4"]
        run_ids = {r["run_id"] for r in _log_rows(tmp_path)}
        assert run_ids == {"seed3", "seed4"}
        assert sorted(p.stem for p in (tmp_path / "runs").glob("*.json")) == ["seed3", "seed4"]

    def test_deterministic(self, tmp_path: Path) -> None:
        kwargs = {
            "n_runs": 2,
            "config": RunConfig(generations=8),
            "seed_config": SeedConfig.centered(12, 12),
            "base_seed": 11,
        }
        run_batch(out_dir=tmp_path / "a", **kwargs)  # type: ignore[arg-type]
        run_batch(out_dir=tmp_path / "b", **kwargs)  # type: ignore[arg-type]
        assert _log_rows(tmp_path / "a") == _log_rows(tmp_path / "b")

    def test_shared_writer_flushes_in_chunks(self, tmp_path: Path) -> None:
        with patch("viv.simulation.engine.FLUSH_THRESHOLD", 3):
            run_batch(
                n_runs=2,
                out_dir=tmp_path,
                config=RunConfig(generations=7, enable_termination=False),
                seed_config=SeedConfig.centered(6, 6),
            )
        rows = _log_rows(tmp_path)
        assert len(rows) == 16
        assert [r["run_id"] for r in rows] == ["seed0"] * 8 + ["seed1"] * 8

    def test_rejects_zero_runs(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="n_runs must be >= 1"):
            run_batch(n_runs=0, out_dir=tmp_path)
