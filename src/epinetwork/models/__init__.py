"""Data models for contact traces and their network structure."""

from .contacts import ContactTrace, Contacts, Direction, HoldingId, TraceCollection, TracedEdge
from .network import COLUMNS, CURRENT_SCHEMA_VERSION, NetworkRow, NetworkTable

__all__ = [
    "COLUMNS",
    "CURRENT_SCHEMA_VERSION",
    "ContactTrace",
    "Contacts",
    "Direction",
    "HoldingId",
    "NetworkRow",
    "NetworkTable",
    "TraceCollection",
    "TracedEdge",
]
