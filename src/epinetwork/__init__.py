"""epinetwork: network structure of livestock contact traces.

Convenience API (delegates to a default NetworkFlattener instance):
    epinetwork.configure(...)          -> set up default flattener
    epinetwork.network_structure(...)  -> flatten contacts, a contact trace or a collection

DI API (construct your own NetworkFlattener):
    from epinetwork.core import FlattenConfig, NetworkFlattener
    flattener = NetworkFlattener(config=FlattenConfig(max_workers=4))
    table = flattener.flatten(traces)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .core import FlattenConfig, NetworkFlattener, TraceInput
from .exceptions import (
    EpinetworkError,
    EpinetworkLoadError,
    TraceCollectionError,
    TraceCollectionShapeError,
    TraceCollectionTypeError,
    TraceDirectionError,
)
from .models import (
    ContactTrace,
    Contacts,
    Direction,
    NetworkRow,
    NetworkTable,
    TraceCollection,
    TracedEdge,
)

_default_flattener: NetworkFlattener | None = None


def configure(*, max_workers: int = 1) -> NetworkFlattener:
    """Configure and return the default global NetworkFlattener instance."""
    global _default_flattener
    _default_flattener = NetworkFlattener(config=FlattenConfig(max_workers=max_workers))
    return _default_flattener


def network_structure(trace: TraceInput | Sequence[Any] | Mapping[str, Any]) -> NetworkTable:
    """Flatten ``trace`` using the default NetworkFlattener."""
    global _default_flattener
    if _default_flattener is None:
        _default_flattener = NetworkFlattener()
    return _default_flattener.flatten(trace)


def _reset_default_flattener() -> None:
    """Reset the default flattener. Used by test fixtures."""
    global _default_flattener
    _default_flattener = None


__all__ = [
    "ContactTrace",
    "Contacts",
    "Direction",
    "EpinetworkError",
    "EpinetworkLoadError",
    "FlattenConfig",
    "NetworkFlattener",
    "NetworkRow",
    "NetworkTable",
    "TraceCollection",
    "TraceCollectionError",
    "TraceCollectionShapeError",
    "TraceCollectionTypeError",
    "TraceDirectionError",
    "TracedEdge",
    "configure",
    "network_structure",
]
