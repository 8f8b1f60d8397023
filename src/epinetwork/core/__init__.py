"""Network structure flattening."""

from .dedup import drop_adjacent_duplicates
from .flatten import NetworkFlattener, TraceInput
from .flatten_config import FlattenConfig
from .window import WindowColumns, reconcile_window

__all__ = [
    "FlattenConfig",
    "NetworkFlattener",
    "TraceInput",
    "WindowColumns",
    "drop_adjacent_duplicates",
    "reconcile_window",
]
