"""Contact tracing input structures produced by the tracer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PositiveInt,
    field_validator,
    model_validator,
)


def _holding_to_str(value: object) -> object:
    # Holding identifiers are numeric in most movement databases.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


HoldingId = Annotated[str, BeforeValidator(_holding_to_str), Field(min_length=1)]


class Direction(StrEnum):
    INGOING = "in"
    OUTGOING = "out"


class TracedEdge(BaseModel):
    """One contact visited by the depth first search."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    source: HoldingId
    destination: HoldingId
    distance: PositiveInt


class Contacts(BaseModel):
    """Contacts traced in one direction from one root.

    ``edges`` are kept in depth first visitation order. ``distance`` on each
    edge is the number of hops from the root along the path that found it.
    The tracer guarantees ``t_begin <= t_end``.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    kind: Literal["contacts"] = "contacts"
    root: HoldingId
    direction: Direction
    t_begin: date
    t_end: date
    edges: tuple[TracedEdge, ...] = ()

    @field_validator("edges", mode="before")
    @classmethod
    def _edges_as_tuple(cls, value: object) -> object:
        if isinstance(value, list):
            return tuple(value)
        return value

    @classmethod
    def empty(cls, root: str | int, direction: Direction, t_begin: date, t_end: date) -> Contacts:
        return cls(root=root, direction=direction, t_begin=t_begin, t_end=t_end)

    @classmethod
    def from_pool(
        cls,
        root: str | int,
        direction: Direction,
        t_begin: date,
        t_end: date,
        *,
        source: Sequence[str | int],
        destination: Sequence[str | int],
        index: Sequence[int],
        distance: Sequence[int],
    ) -> Contacts:
        """Build contacts from a shared pool of movement endpoints.

        ``source`` and ``destination`` hold each movement once. ``index`` lists
        the pool positions in visitation order and ``distance`` is parallel to
        ``index``.
        """
        if len(source) != len(destination):
            raise ValueError(
                f"source and destination pools differ in length: {len(source)} != {len(destination)}"
            )
        if len(index) != len(distance):
            raise ValueError(
                f"index and distance differ in length: {len(index)} != {len(distance)}"
            )
        edges: list[TracedEdge] = []
        for position, hops in zip(index, distance, strict=True):
            if not 0 <= position < len(source):
                raise ValueError(f"Edge pool index out of range: {position}")
            edges.append(
                TracedEdge(source=source[position], destination=destination[position], distance=hops)
            )
        return cls(
            root=root,
            direction=direction,
            t_begin=t_begin,
            t_end=t_end,
            edges=tuple(edges),
        )


class ContactTrace(BaseModel):
    """Ingoing and outgoing contacts of one root holding."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    kind: Literal["contact_trace"] = "contact_trace"
    root: HoldingId
    ingoing: Contacts
    outgoing: Contacts

    @model_validator(mode="after")
    def validate_directions(self) -> ContactTrace:
        if self.ingoing.direction != Direction.INGOING:
            raise ValueError(f"ingoing contacts have direction {self.ingoing.direction!r}")
        if self.outgoing.direction != Direction.OUTGOING:
            raise ValueError(f"outgoing contacts have direction {self.outgoing.direction!r}")
        for side in (self.ingoing, self.outgoing):
            if side.root != self.root:
                raise ValueError(f"Contacts root {side.root!r} differs from trace root {self.root!r}")
        return self


class TraceCollection(BaseModel):
    """Named or positional collection of contact traces.

    Items are held as given. Whether each one is a single ContactTrace is
    checked when the collection is flattened.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, arbitrary_types_allowed=True)

    kind: Literal["collection"] = "collection"
    items: list[Any] = Field(default_factory=list)
    names: list[str] | None = None

    @classmethod
    def of(cls, traces: Sequence[Any] | Mapping[str, Any]) -> TraceCollection:
        if isinstance(traces, Mapping):
            return cls(items=list(traces.values()), names=[str(key) for key in traces])
        return cls(items=list(traces))

    @model_validator(mode="after")
    def validate_names(self) -> TraceCollection:
        if self.names is not None and len(self.names) != len(self.items):
            raise ValueError(
                f"Collection has {len(self.items)} items but {len(self.names)} names"
            )
        return self

    def keys(self) -> list[str]:
        if self.names is not None:
            return list(self.names)
        return [str(position) for position in range(1, len(self.items) + 1)]

    def __len__(self) -> int:
        return len(self.items)
