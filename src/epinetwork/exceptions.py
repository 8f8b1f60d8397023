"""Public exception types for epinetwork."""

from __future__ import annotations


class EpinetworkError(Exception):
    """Base class for all epinetwork exceptions."""


class EpinetworkLoadError(EpinetworkError):
    """Raised when a trace or network table file cannot be loaded or parsed."""


class TraceCollectionError(EpinetworkError):
    """Raised when a collection of contact traces is malformed."""


class TraceCollectionShapeError(TraceCollectionError):
    """Raised when a collection element bundles more or less than one trace."""


class TraceCollectionTypeError(TraceCollectionError):
    """Raised when a collection element is not a ContactTrace."""


class TraceDirectionError(EpinetworkError):
    """Raised when a trace carries a direction other than 'in' or 'out'."""
