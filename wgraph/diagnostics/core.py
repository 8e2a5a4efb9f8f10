"""Precondition checks for the graph algorithms."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Optional, Tuple

from ..exceptions import NegativeWeightError

if TYPE_CHECKING:
    from ..graphs.core import WeightedGraph


def find_negative_edge(graph: WeightedGraph, start: int) -> Optional[Tuple[int, int, float]]:
    """
    Return the first negative-weight edge reachable from ``start``.

    Vertices are explored breadth-first, so the reported edge is one of the
    closest offending edges to ``start``.

    Args:
        graph: Graph to inspect.
        start: Vertex the search would start from.

    Returns:
        ``(u, v, weight)`` of a reachable negative edge, or None.
    """
    seen = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v in sorted(graph.neighbors(u)):
            weight = graph.weight(u, v)
            if weight < 0:
                return u, v, weight
            if v not in seen:
                seen.add(v)
                queue.append(v)

    return None


def assert_non_negative_weights(graph: WeightedGraph, start: int) -> None:
    """
    Raise if any edge reachable from ``start`` has a negative weight.

    Raises:
        NegativeWeightError: With the offending edge in the message.
    """
    found = find_negative_edge(graph, start)
    if found is not None:
        u, v, weight = found
        raise NegativeWeightError(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {weight} on edge ({u}, {v}) reachable from {start}"
        )
