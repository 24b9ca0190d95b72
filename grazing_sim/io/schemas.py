"""Parquet schema definitions for simulation run artifacts.

All Arrow schemas used for persisting per-tick counters and grazer position
samples are centralised here so that writers and readers work against the
same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

TICK_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("n_grazers", pa.int64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
        ("total_births", pa.int64()),
        ("total_deaths", pa.int64()),
        ("total_biomass", pa.int64()),
        ("min_biomass", pa.int64()),
        ("max_biomass", pa.int64()),
    ]
)

GRAZER_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("grazer_index", pa.int64()),
        ("x", pa.float64()),
        ("y", pa.float64()),
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("size", pa.int64()),
        ("store", pa.int64()),
    ]
)

TICK_LOG_COLUMNS = [field.name for field in TICK_LOG_SCHEMA]
GRAZER_LOG_COLUMNS = [field.name for field in GRAZER_LOG_SCHEMA]
