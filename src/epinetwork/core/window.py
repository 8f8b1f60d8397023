"""Map a trace direction and time window onto the in/out window columns."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

from ..exceptions import TraceDirectionError
from ..models import Direction


class WindowColumns(NamedTuple):
    in_begin: date | None
    in_end: date | None
    out_begin: date | None
    out_end: date | None


def reconcile_window(direction: Direction, t_begin: date, t_end: date) -> WindowColumns:
    if direction == Direction.INGOING:
        return WindowColumns(in_begin=t_begin, in_end=t_end, out_begin=None, out_end=None)
    if direction == Direction.OUTGOING:
        return WindowColumns(in_begin=None, in_end=None, out_begin=t_begin, out_end=t_end)
    raise TraceDirectionError(f"Unknown trace direction: {direction!r}")
