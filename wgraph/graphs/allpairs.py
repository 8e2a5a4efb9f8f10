"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest distances between all pairs of vertices of a WeightedGraph
as a dense matrix.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import List

import numpy as np

from ..diagnostics import is_debug_enabled
from ..logging import get_logger
from .core import WeightedGraph

logger = get_logger(__name__)


def floyd_warshall(graph: WeightedGraph, detect_negative_cycles: bool = False) -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Starts from ``graph.adjacency_matrix()`` and, for each intermediate
    vertex ``k`` in turn, relaxes every pair ``(i, j)`` through ``k``. The
    ``(i, j)`` sweep for a fixed ``k`` is vectorized with numpy.

    The diagonal is 0 unless a negative cycle (a negative self-loop
    included) passes through the vertex; positive self-loops are ignored.

    Handles negative edge weights. Negative cycles are not detected unless
    ``detect_negative_cycles`` is set; without it distances touching a
    negative cycle are undefined. With it, every pair ``(i, j)`` that can be
    joined through a vertex on a negative cycle is set to ``-inf``.

    Args:
        graph: WeightedGraph (may have negative weights).
        detect_negative_cycles: Mark pairs affected by negative cycles.

    Returns:
        ``vertex_count x vertex_count`` float64 matrix where ``f[i][j]`` is
        the shortest distance from i to j, ``+inf`` if j is unreachable.

    Complexity: O(V^3) time, O(V^2) space.

    Example:
        >>> G = WeightedGraph(3)
        >>> G.set_edge(0, 1, 1.0)
        >>> G.set_edge(1, 2, 2.0)
        >>> floyd_warshall(G)[0][2]
        3.0
    """
    f = graph.adjacency_matrix()
    n = graph.vertex_count
    # Staying put costs 0, so a positive self-loop never shortens i -> i
    np.fill_diagonal(f, np.minimum(np.diagonal(f), 0.0))

    for k in range(n):
        np.minimum(f, f[:, k, np.newaxis] + f[np.newaxis, k, :], out=f)

    on_cycle = negative_cycle_vertices(f)
    if on_cycle:
        if detect_negative_cycles:
            reach = (f < np.inf).astype(np.int64)
            through = (reach[:, on_cycle] @ reach[on_cycle, :]) > 0
            f[through] = -np.inf
        elif is_debug_enabled():
            logger.warning(
                "floyd_warshall: vertices %s lie on negative cycles, distances are undefined",
                on_cycle,
            )

    logger.debug("floyd_warshall over %d vertices", n)
    return f


def negative_cycle_vertices(matrix: np.ndarray) -> List[int]:
    """
    Return the vertices lying on a negative cycle.

    Args:
        matrix: Distance matrix produced by floyd_warshall.

    Returns:
        Sorted vertex ids ``k`` with ``matrix[k][k] < 0``.
    """
    return [int(k) for k in np.flatnonzero(np.diagonal(matrix) < 0)]
