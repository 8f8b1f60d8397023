"""Adjacent duplicate removal for traced edges."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import TracedEdge


def drop_adjacent_duplicates(edges: Iterable[TracedEdge]) -> list[TracedEdge]:
    """Drop every edge equal to the edge right before it.

    The depth first search visits all movements from one parent together, so
    repeated movements between the same pair at the same distance are
    adjacent. A repeat further down the sequence was reached through another
    path and is kept.
    """
    kept: list[TracedEdge] = []
    for edge in edges:
        if kept and kept[-1] == edge:
            continue
        kept.append(edge)
    return kept
