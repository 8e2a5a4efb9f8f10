"""
Utility functions for graph algorithms.

Provides helpers for turning predecessor sequences into paths and for
pricing a path against a graph.
"""

from typing import List, Optional, Sequence

from .core import WeightedGraph


def reconstruct_path(parent: Sequence[int], target: int) -> Optional[List[int]]:
    """
    Reconstruct the path ending at target from a predecessor sequence.

    ``parent[v]`` is the previous vertex on the path to v, or -1 where the
    path starts (the source, or an unreached vertex). The walk follows
    parents back from target until it meets -1.

    Args:
        parent: Predecessor sequence, e.g. from bellman_ford.
        target: Vertex to reconstruct the path to.

    Returns:
        Vertices from the path root to target (inclusive), or None if the
        parent chain loops.

    Example:
        >>> reconstruct_path([-1, 0, 1, 2], 3)
        [0, 1, 2, 3]
        >>> reconstruct_path([-1, 0, 1, 2], 0)
        [0]
    """
    if not 0 <= target < len(parent):
        raise IndexError(f"Vertex {target} out of range for {len(parent)} vertices")

    path = []
    current = target
    visited = set()
    while current != -1:
        if current in visited:
            # Parent chains can loop when negative cycles are present
            return None
        visited.add(current)
        path.append(current)
        current = parent[current]

    path.reverse()
    return path


def path_weight(graph: WeightedGraph, path: Sequence[int]) -> float:
    """
    Return the total weight of consecutive edges along path.

    A missing edge contributes ``+inf``. Paths of zero or one vertex weigh 0.

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0)])
        >>> path_weight(G, [0, 1, 2])
        3.0
    """
    return sum((graph.weight(u, v) for u, v in zip(path, path[1:])), 0.0)
