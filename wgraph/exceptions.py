"""Custom exception types used across :mod:`wgraph`."""

from __future__ import annotations


class WGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(WGraphError, ValueError):
    """Raised for invalid user input such as a non-positive vertex count."""


class VertexIndexError(WGraphError, IndexError):
    """Raised when a vertex id lies outside ``[0, vertex_count)``."""


class NegativeWeightError(InputError):
    """Raised in debug mode when a search meets a negative edge weight."""


__all__ = [
    "WGraphError",
    "InputError",
    "VertexIndexError",
    "NegativeWeightError",
]
