"""Flat network structure rows produced from contact traces."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import pandas as pd
from pydantic import BaseModel, ConfigDict, PositiveInt, model_validator
from pydantic.alias_generators import to_camel

from .contacts import Direction, HoldingId

CURRENT_SCHEMA_VERSION = "0.1.0"

COLUMNS: tuple[str, ...] = (
    "root",
    "inBegin",
    "inEnd",
    "outBegin",
    "outEnd",
    "direction",
    "source",
    "destination",
    "distance",
)

_DATE_COLUMNS = ("inBegin", "inEnd", "outBegin", "outEnd")
_DTYPES = {
    "root": "object",
    "direction": "object",
    "source": "object",
    "destination": "object",
    "distance": "int64",
}


class NetworkRow(BaseModel):
    """One traced contact together with its root, direction and time window."""

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    root: HoldingId
    in_begin: date | None = None
    in_end: date | None = None
    out_begin: date | None = None
    out_end: date | None = None
    direction: Direction
    source: HoldingId
    destination: HoldingId
    distance: PositiveInt

    @model_validator(mode="after")
    def validate_window(self) -> NetworkRow:
        ingoing = (self.in_begin, self.in_end)
        outgoing = (self.out_begin, self.out_end)
        if self.direction == Direction.INGOING:
            used, unused = ingoing, outgoing
        else:
            used, unused = outgoing, ingoing
        if any(value is None for value in used):
            raise ValueError(f"Row with direction {self.direction.value!r} is missing its window")
        if any(value is not None for value in unused):
            raise ValueError(
                f"Row with direction {self.direction.value!r} has a window for the other direction"
            )
        return self


class NetworkTable(BaseModel):
    """Ordered rows of a network structure. The column set is fixed, even when empty."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    schema_version: str = CURRENT_SCHEMA_VERSION
    rows: tuple[NetworkRow, ...] = ()

    @classmethod
    def concat(cls, tables: Iterable[NetworkTable]) -> NetworkTable:
        rows: list[NetworkRow] = []
        for table in tables:
            rows.extend(table.rows)
        return cls(rows=tuple(rows))

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def to_records(self) -> list[dict[str, object]]:
        return [row.model_dump(by_alias=True) for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a DataFrame with ``COLUMNS``.

        Date columns are ``datetime64[ns]`` with ``NaT`` for the unused
        direction. The dtypes are the same for an empty table.
        """
        frame = pd.DataFrame.from_records(self.to_records(), columns=list(COLUMNS))
        for column in _DATE_COLUMNS:
            frame[column] = pd.to_datetime(frame[column]).astype("datetime64[ns]")
        return frame.astype(_DTYPES)
