"""Parquet persistence helpers for the generation log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from viv.io.schemas import GENERATION_LOG_SCHEMA


def new_generation_columns() -> dict[str, list[int | str | None]]:
    """Return empty column buffers keyed by generation-log column name."""
    return {field.name: [] for field in GENERATION_LOG_SCHEMA}


def flush_generation_columns(
    columns: dict[str, list[int | str | None]],
    generation_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated generation rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(generation_log_path, GENERATION_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
