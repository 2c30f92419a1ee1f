"""Simulation runner: advance a grid, measure each generation, persist the log."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from viv.config.constants import FLUSH_THRESHOLD
from viv.config.types import RunConfig, SeedConfig, SimulationResult
from viv.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from viv.domain.grid import Grid
from viv.io.paths import generation_log_path, logs_dir, run_summary_path, runs_dir
from viv.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION
from viv.metrics.spatial import births_and_deaths, cluster_count
from viv.simulation.persistence import flush_generation_columns, new_generation_columns

logger = logging.getLogger(__name__)


def iterate(grid: Grid, generations: int) -> Iterator[Grid]:
    """Yield ``grid`` followed by its next ``generations`` successors."""
    if generations < 0:
        raise ValueError("generations must be >= 0")
    yield grid
    for _ in range(generations):
        grid = grid.tick()
        yield grid


def _append_generation(
    columns: dict[str, list[int | str | None]],
    run_id: str,
    generation: int,
    grid: Grid,
    births: int,
    deaths: int,
) -> None:
    living = grid.living()
    box = grid.bounding_box()
    min_x, max_x, min_y, max_y = box if box is not None else (None, None, None, None)
    columns["run_id"].append(run_id)
    columns["generation"].append(generation)
    columns["population"].append(len(living))
    columns["births"].append(births)
    columns["deaths"].append(deaths)
    columns["cluster_count"].append(cluster_count(living))
    columns["min_x"].append(min_x)
    columns["max_x"].append(max_x)
    columns["min_y"].append(min_y)
    columns["max_y"].append(max_y)


def run_simulation(
    grid: Grid,
    out_dir: Path,
    config: RunConfig | None = None,
    run_id: str = "run",
    writer: pq.ParquetWriter | None = None,
) -> tuple[SimulationResult, Grid]:
    """Advance ``grid`` and persist one generation-log row per generation.

    Generation 0 is the seed itself. When ``config.enable_termination`` is
    set the run stops at the first generation that is extinct, has been
    unchanged for ``halt_window`` generations, or repeats with a short period.

    A caller-owned ``writer`` lets several runs share one Parquet file; it is
    left open. Otherwise the log is written to ``logs/generation_log.parquet``
    under ``out_dir`` and closed before returning.
    """
    run_config = config or RunConfig()
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    extinction_detector = ExtinctionDetector()
    halt_detector = HaltDetector(window=run_config.halt_window)
    short_period_detector = ShortPeriodDetector(
        max_period=run_config.short_period_max,
        history_size=run_config.short_period_history_size,
    )

    owns_writer = writer is None
    columns = new_generation_columns()
    terminated_at: int | None = None
    termination_reason: str | None = None
    generation = 0

    _append_generation(columns, run_id, 0, grid, births=grid.population, deaths=0)
    previous = grid.living()
    try:
        for generation in range(1, run_config.generations + 1):
            grid = grid.tick()
            current = grid.living()
            births, deaths = births_and_deaths(previous, current)
            _append_generation(columns, run_id, generation, grid, births, deaths)
            logger.debug(
                "%s generation %d: population=%d births=%d deaths=%d",
                run_id,
                generation,
                len(current),
                births,
                deaths,
            )
            if len(columns["run_id"]) >= FLUSH_THRESHOLD:
                writer = flush_generation_columns(
                    columns=columns,
                    generation_log_path=generation_log_path(out_dir),
                    writer=writer,
                )

            extinct = extinction_detector.observe(current)
            halted = halt_detector.observe(current)
            oscillating = short_period_detector.observe(current)
            previous = current
            if run_config.enable_termination:
                if extinct:
                    termination_reason = TerminationReason.EXTINCT.value
                elif halted:
                    termination_reason = TerminationReason.HALT.value
                elif oscillating:
                    termination_reason = TerminationReason.SHORT_PERIOD.value
                if termination_reason is not None:
                    terminated_at = generation
                    logger.info(
                        "%s terminated at generation %d: %s",
                        run_id,
                        generation,
                        termination_reason,
                    )
                    break

        writer = flush_generation_columns(
            columns=columns,
            generation_log_path=generation_log_path(out_dir),
            writer=writer,
        )
    finally:
        if owns_writer and writer is not None:
            writer.close()

    result = SimulationResult(
        run_id=run_id,
        generations_run=generation,
        final_population=grid.population,
        terminated_at=terminated_at,
        termination_reason=termination_reason,
    )
    summary = {
        "run_id": run_id,
        "survived": result.survived,
        "generations_run": result.generations_run,
        "final_population": result.final_population,
        "bounding_box": grid.bounding_box(),
        "metadata": {
            "generations": run_config.generations,
            "halt_window": run_config.halt_window,
            "short_period_max": run_config.short_period_max,
            "enable_termination": run_config.enable_termination,
            "terminated_at": terminated_at,
            "termination_reason": termination_reason,
            "schema_version": GENERATION_LOG_SCHEMA_VERSION,
        },
    }
    run_summary_path(out_dir, run_id).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    logger.info(
        "%s finished after %d generations with population %d",
        run_id,
        result.generations_run,
        result.final_population,
    )
    return result, grid


def _deterministic_run_id(seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"seed{seed}"


def run_batch(
    n_runs: int,
    out_dir: Path,
    config: RunConfig | None = None,
    seed_config: SeedConfig | None = None,
    base_seed: int = 0,
) -> list[SimulationResult]:
    """Run ``n_runs`` randomly seeded simulations into one generation log.

    Run ``i`` is seeded with ``Random(base_seed + i)``, so identical
    arguments reproduce identical logs.
    """
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1")

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    writer = pq.ParquetWriter(generation_log_path(out_dir), GENERATION_LOG_SCHEMA)
    results: list[SimulationResult] = []
    try:
        for i in range(n_runs):
            seed = base_seed + i
            grid = Grid.generate(rng=Random(seed), config=seed_config)
            result, _ = run_simulation(
                grid,
                out_dir,
                config=config,
                run_id=_deterministic_run_id(seed),
                writer=writer,
            )
            results.append(result)
    finally:
        writer.close()
    return results
