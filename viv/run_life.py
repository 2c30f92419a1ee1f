"""CLI entrypoint for simulation runs.

This module owns CLI argument parsing and config resolution. All domain logic
lives in the extracted modules:

- ``viv.config``             – configuration dataclasses and constants
- ``viv.domain``             – ``Index``, ``Grid`` and termination detectors
- ``viv.simulation.engine``  – ``run_batch`` / ``run_simulation``
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from viv.config.constants import (
    HALT_WINDOW,
    NUM_GENERATIONS,
    SEED_DENSITY,
    SEED_X_RANGE,
    SEED_Y_RANGE,
    SHORT_PERIOD_MAX,
)
from viv.config.types import RunConfig, SeedConfig
from viv.simulation.engine import run_batch

DEFAULT_SEED_WIDTH = SEED_X_RANGE[1] - SEED_X_RANGE[0]
DEFAULT_SEED_HEIGHT = SEED_Y_RANGE[1] - SEED_Y_RANGE[0]

# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


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


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


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


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    """CLI > file > default resolution for float values."""
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run Game of Life simulations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument("--halt-window", type=int, default=None)
    parser.add_argument("--short-period-max", type=int, default=None)
    parser.add_argument(
        "--enable-termination",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Stop a run early on extinction, still life or short-period oscillation",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed of the first run")
    parser.add_argument("--seed-width", type=int, default=None)
    parser.add_argument("--seed-height", type=int, default=None)
    parser.add_argument("--density", type=float, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for simulation runs.

    Supports ``--config path/to/config.json`` for reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
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
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING")
        n_runs = _get_int(args.n_runs, "n_runs", file_cfg, 1)
        if n_runs < 1:
            raise ValueError("n_runs must be >= 1")
        generations = _get_int(args.generations, "generations", file_cfg, NUM_GENERATIONS)
        halt_window = _get_int(args.halt_window, "halt_window", file_cfg, HALT_WINDOW)
        short_period_max = _get_int(
            args.short_period_max, "short_period_max", file_cfg, SHORT_PERIOD_MAX
        )
        enable_termination = _get_bool(
            args.enable_termination, "enable_termination", file_cfg, True
        )
        seed = _get_int(args.seed, "seed", file_cfg, 0)
        seed_width = _get_int(args.seed_width, "seed_width", file_cfg, DEFAULT_SEED_WIDTH)
        seed_height = _get_int(args.seed_height, "seed_height", file_cfg, DEFAULT_SEED_HEIGHT)
        density = _get_float(args.density, "density", file_cfg, SEED_DENSITY)
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))

        run_config = RunConfig(
            generations=generations,
            halt_window=halt_window,
            short_period_max=short_period_max,
            enable_termination=enable_termination,
        )
        seed_config = SeedConfig.centered(seed_width, seed_height, density=density)
        logging.basicConfig(level=log_level.upper())
    except ValueError as exc:
        parser.error(str(exc))

    results = run_batch(
        n_runs=n_runs,
        out_dir=out_dir,
        config=run_config,
        seed_config=seed_config,
        base_seed=seed,
    )

    summary = {
        "total_runs": len(results),
        "survived": sum(1 for r in results if r.survived),
        "terminated": sum(1 for r in results if not r.survived),
        "termination_reasons": {
            reason: sum(1 for r in results if r.termination_reason == reason)
            for reason in sorted({r.termination_reason for r in results if r.termination_reason})
        },
        "final_populations": {r.run_id: r.final_population for r in results},
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
