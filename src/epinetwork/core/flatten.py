"""Flatten contact traces into network structure tables."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..exceptions import TraceCollectionShapeError, TraceCollectionTypeError
from ..models import ContactTrace, Contacts, NetworkRow, NetworkTable, TraceCollection
from .dedup import drop_adjacent_duplicates
from .flatten_config import FlattenConfig
from .window import reconcile_window

logger = logging.getLogger(__name__)

TraceInput = Contacts | ContactTrace | TraceCollection


class NetworkFlattener:
    """Owns its config. Construct via DI or use the convenience layer.

    Error-handling contract
    ----------------------
    - Well-formed ``Contacts`` and ``ContactTrace`` values always flatten,
      including when they hold no contacts.
    - A malformed collection raises ``TraceCollectionShapeError`` or
      ``TraceCollectionTypeError`` before any element is flattened.
    - A direction other than ``in``/``out`` raises ``TraceDirectionError``.
    """

    def __init__(self, config: FlattenConfig | None = None) -> None:
        self.config = config or FlattenConfig()

    def flatten(self, trace: TraceInput | Sequence[Any] | Mapping[str, Any]) -> NetworkTable:
        if isinstance(trace, (list, tuple, Mapping)):
            trace = TraceCollection.of(trace)
        kind = getattr(trace, "kind", None)
        if kind == "contacts":
            return self.flatten_contacts(trace)
        if kind == "contact_trace":
            return self.flatten_contact_trace(trace)
        if kind == "collection":
            return self.flatten_collection(trace)
        raise TypeError(f"Cannot get network structure of {type(trace).__name__}")

    def flatten_contacts(self, contacts: Contacts) -> NetworkTable:
        if not contacts.edges:
            return NetworkTable()

        edges = drop_adjacent_duplicates(contacts.edges)
        window = reconcile_window(contacts.direction, contacts.t_begin, contacts.t_end)
        rows = tuple(
            NetworkRow(
                root=contacts.root,
                in_begin=window.in_begin,
                in_end=window.in_end,
                out_begin=window.out_begin,
                out_end=window.out_end,
                direction=contacts.direction,
                source=edge.source,
                destination=edge.destination,
                distance=edge.distance,
            )
            for edge in edges
        )
        logger.debug(
            "root %s (%s): kept %d of %d traced edges",
            contacts.root,
            contacts.direction,
            len(rows),
            len(contacts.edges),
        )
        return NetworkTable(rows=rows)

    def flatten_contact_trace(self, trace: ContactTrace) -> NetworkTable:
        ingoing = self.flatten_contacts(trace.ingoing)
        outgoing = self.flatten_contacts(trace.outgoing)
        return NetworkTable.concat([ingoing, outgoing])

    def flatten_collection(self, collection: TraceCollection) -> NetworkTable:
        keys = collection.keys()
        _check_shapes(keys, collection.items)
        _check_types(keys, collection.items)

        workers = min(self.config.max_workers, len(collection))
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                tables = list(executor.map(self.flatten_contact_trace, collection.items))
        else:
            tables = [self.flatten_contact_trace(item) for item in collection.items]

        # Tables are in collection order; the collection keys are not carried into the rows.
        logger.debug("flattened %d contact traces using %d worker(s)", len(tables), max(workers, 1))
        return NetworkTable.concat(tables)


def _is_bundle(item: object) -> bool:
    return isinstance(item, (Sequence, Mapping)) and not isinstance(item, (str, bytes))


def _unit_count(item: object) -> int | None:
    if item is None:
        return 0
    if _is_bundle(item):
        return len(item)  # type: ignore[arg-type]
    return None


def _check_shapes(keys: list[str], items: list[Any]) -> None:
    for key, item in zip(keys, items, strict=True):
        count = _unit_count(item)
        if count is not None and count != 1:
            raise TraceCollectionShapeError(
                f"Unexpected length of collection item {key!r}: expected 1, got {count}"
            )


def _check_types(keys: list[str], items: list[Any]) -> None:
    for key, item in zip(keys, items, strict=True):
        kind = getattr(item, "kind", None)
        if kind != "contact_trace":
            found = kind if isinstance(kind, str) else type(item).__name__
            raise TraceCollectionTypeError(
                f"Unexpected object in collection item {key!r}: expected contact_trace, got {found}"
            )
