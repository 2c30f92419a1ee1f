"""Simulation runner: generation loop, termination detection, Parquet persistence."""

from viv.simulation.engine import iterate, run_batch, run_simulation
from viv.simulation.persistence import flush_generation_columns, new_generation_columns

__all__ = [
    "flush_generation_columns",
    "iterate",
    "new_generation_columns",
    "run_batch",
    "run_simulation",
]
