"""Parquet schema definitions for simulation artifacts.

Every module that writes or reads the generation log works against the
column contract defined here.
"""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
        ("cluster_count", pa.int64()),
        ("min_x", pa.int64()),
        ("max_x", pa.int64()),
        ("min_y", pa.int64()),
        ("max_y", pa.int64()),
    ],
    metadata={"schema_version": str(GENERATION_LOG_SCHEMA_VERSION)},
)

GENERATION_METRIC_NAMES = [
    "population",
    "births",
    "deaths",
    "cluster_count",
]
"""Numeric per-generation metrics that renderers may plot."""
