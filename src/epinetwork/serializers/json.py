"""JSON serialization helpers for contact traces and network tables."""

from __future__ import annotations

import json
import warnings
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..core import TraceInput
from ..exceptions import EpinetworkLoadError
from ..models import CURRENT_SCHEMA_VERSION, ContactTrace, Contacts, NetworkTable, TraceCollection

_TRACE_ADAPTER: TypeAdapter[Contacts | ContactTrace] = TypeAdapter(
    Annotated[Contacts | ContactTrace, Field(discriminator="kind")]
)


class _CollectionEnvelope(BaseModel):
    """Outer shape of a collection payload; items are parsed one by one."""

    model_config = ConfigDict(strict=True, extra="ignore")

    kind: Literal["collection"]
    items: list[Any] = Field(default_factory=list)
    names: list[str] | None = None


def trace_to_json(trace: TraceInput, *, indent: int | None = 2) -> str:
    if isinstance(trace, TraceCollection):
        payload = {
            "kind": trace.kind,
            "items": [_item_to_python(item) for item in trace.items],
            "names": trace.names,
        }
        return json.dumps(payload, indent=indent)
    return trace.model_dump_json(indent=indent)


def trace_from_json(payload: str) -> TraceInput:
    """Parse a JSON string into contacts, a contact trace or a collection.

    A bare JSON array is read as a positional collection. Collection items that
    are arrays are kept as they are so that flattening reports them.
    Raises ``EpinetworkLoadError`` on invalid or unparseable input.
    """
    try:
        data = json.loads(payload)
        if isinstance(data, list):
            return TraceCollection(items=[_item_from_python(item) for item in data])
        if isinstance(data, dict) and data.get("kind") == "collection":
            envelope = _CollectionEnvelope.model_validate(data)
            return TraceCollection(
                items=[_item_from_python(item) for item in envelope.items],
                names=envelope.names,
            )
        return _TRACE_ADAPTER.validate_json(payload)
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        raise EpinetworkLoadError(f"Failed to parse trace JSON: {exc}") from exc


def save_trace_json(trace: TraceInput, path: str | Path, *, indent: int | None = 2) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(trace_to_json(trace, indent=indent), encoding="utf-8")
    return output_path


def load_trace_json(path: str | Path) -> TraceInput:
    """Load contacts, a contact trace or a collection from a JSON file.

    Raises ``EpinetworkLoadError`` on invalid content,
    or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    payload = Path(path).read_text(encoding="utf-8")
    return trace_from_json(payload)


def table_to_json(table: NetworkTable, *, indent: int | None = 2) -> str:
    return table.model_dump_json(indent=indent, by_alias=True)


def table_from_json(payload: str) -> NetworkTable:
    """Parse a JSON string into a NetworkTable.

    Raises ``EpinetworkLoadError`` on invalid or unparseable input.
    Emits a warning if the table's schema version differs from the current one.
    """
    try:
        table = NetworkTable.model_validate_json(payload)
    except ValidationError as exc:
        raise EpinetworkLoadError(f"Failed to parse network table JSON: {exc}") from exc
    if table.schema_version != CURRENT_SCHEMA_VERSION:
        warnings.warn(
            f"Network table schema version {table.schema_version!r} differs from "
            f"current {CURRENT_SCHEMA_VERSION!r}. "
            "Some fields may be missing or ignored.",
            stacklevel=2,
        )
    return table


def save_table_json(table: NetworkTable, path: str | Path, *, indent: int | None = 2) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(table_to_json(table, indent=indent), encoding="utf-8")
    return output_path


def _item_from_python(item: Any) -> Any:
    if isinstance(item, dict) and "kind" in item:
        return _TRACE_ADAPTER.validate_json(json.dumps(item))
    if isinstance(item, dict):
        return {key: _item_from_python(inner) for key, inner in item.items()}
    if isinstance(item, list):
        return [_item_from_python(inner) for inner in item]
    return item


def _item_to_python(item: Any) -> Any:
    if isinstance(item, (Contacts, ContactTrace)):
        return item.model_dump(mode="json")
    if isinstance(item, Mapping):
        return {str(key): _item_to_python(inner) for key, inner in item.items()}
    if isinstance(item, (list, tuple)):
        return [_item_to_python(inner) for inner in item]
    return item
