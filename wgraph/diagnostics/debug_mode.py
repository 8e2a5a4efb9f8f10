"""
Debug mode for wgraph.

Debug mode turns on checks that the algorithms skip by default:

- dijkstra / astar verify that no negative edge is reachable from the start
  vertex and raise NegativeWeightError otherwise;
- floyd_warshall / bellman_ford log a WARNING when their baseline result is
  undefined because of a negative cycle.

The initial state comes from the WGRAPH_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "WGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.environ.get(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True if the graph algorithms currently run their debug checks."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally switch the debug checks on or off.

    Args:
        enabled: Whether algorithms should validate preconditions and warn
            about negative cycles.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous state on exit.

    Args:
        enabled: Debug state inside the block.

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, -1.0)])
        >>> with debug_context(True):
        ...     dijkstra(G, 0, 2)
        Traceback (most recent call last):
            ...
        wgraph.exceptions.NegativeWeightError: Dijkstra requires non-negative weights. ...
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
