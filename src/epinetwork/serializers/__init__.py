"""Serialization helpers."""

from .csv import save_table_csv, table_to_csv
from .json import (
    load_trace_json,
    save_table_json,
    save_trace_json,
    table_from_json,
    table_to_json,
    trace_from_json,
    trace_to_json,
)

__all__ = [
    "load_trace_json",
    "save_table_csv",
    "save_table_json",
    "save_trace_json",
    "table_from_json",
    "table_to_csv",
    "table_to_json",
    "trace_from_json",
    "trace_to_json",
]
