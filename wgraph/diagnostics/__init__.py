"""Diagnostics and debugging utilities for wgraph."""

from .core import assert_non_negative_weights, find_negative_edge
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_negative_edge",
    "assert_non_negative_weights",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
