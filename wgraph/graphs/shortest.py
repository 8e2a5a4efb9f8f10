"""
Single-source shortest path algorithms: Dijkstra (via A*) and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights, run as A* with a zero
heuristic. Bellman-Ford for graphs that may carry negative edge weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import math
from typing import Callable, List, NamedTuple

from ..diagnostics import assert_non_negative_weights, is_debug_enabled
from ..logging import get_logger
from .core import WeightedGraph
from .search import FunctionalSearch, SearchResult, zero_heuristic

logger = get_logger(__name__)


class ShortestPaths(NamedTuple):
    """Distances and predecessors from a single source.

    ``parent[v]`` is the previous vertex on the best known path to ``v``, or
    -1 for the source and for unreached vertices.
    """

    distance: List[float]
    parent: List[int]


def astar(
    graph: WeightedGraph,
    start: int,
    goal: int,
    heuristic: Callable[[int], float],
) -> SearchResult:
    """
    A* search from start to goal over a WeightedGraph.

    Args:
        graph: WeightedGraph whose edges reachable from start are non-negative.
        start: Start vertex.
        goal: Goal vertex.
        heuristic: Admissible estimate of the remaining cost to goal. It need
            not be consistent; a vertex closed too early is re-opened when a
            cheaper route to it is found.

    Returns:
        SearchResult with the cost (``+inf`` if unreachable) and path.

    Raises:
        VertexIndexError: If start or goal is not a vertex of the graph.
        NegativeWeightError: In debug mode, if a negative edge is reachable
            from start.
    """
    # Validate both endpoints up front; the goal may never be touched otherwise
    graph.weight(start, goal)

    if is_debug_enabled():
        assert_non_negative_weights(graph, start)

    search = FunctionalSearch(graph.neighbors, graph.weight, heuristic)
    result = search.run(start, lambda node: node == goal)
    logger.debug(
        "search %d -> %d: cost=%s, expanded=%d", start, goal, result.cost, result.expanded
    )
    return result


def dijkstra(graph: WeightedGraph, start: int, goal: int) -> SearchResult:
    """
    Dijkstra's algorithm from start to goal.

    Runs A* with a zero heuristic, so nodes are expanded in non-decreasing
    order of accumulated cost and the search stops as soon as goal is
    expanded.

    Edge weights reachable from start must be non-negative. This is only
    checked when debug mode is enabled; otherwise a negative weight yields an
    unspecified result.

    Args:
        graph: WeightedGraph with non-negative reachable edge weights.
        start: Start vertex.
        goal: Goal vertex.

    Returns:
        SearchResult with the shortest-path cost (``+inf`` if unreachable)
        and the path from start to goal.

    Complexity: O(E log V) using a binary heap priority queue.

    Example:
        >>> G = WeightedGraph(4)
        >>> G.set_edge(0, 1, 1.0)
        >>> G.set_edge(1, 2, 2.0)
        >>> G.set_edge(0, 2, 5.0)
        >>> G.set_edge(2, 3, 1.0)
        >>> result = dijkstra(G, 0, 3)
        >>> result.cost, result.path
        (4.0, [0, 1, 2, 3])
    """
    return astar(graph, start, goal, zero_heuristic)


def bellman_ford(
    graph: WeightedGraph, source: int, detect_negative_cycles: bool = False
) -> ShortestPaths:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Distances start from the direct edge weights out of source (the source
    itself starts at 0.0 and unreached vertices at ``+inf``) and every
    edge is relaxed ``vertex_count - 1`` times. Vertices seeded from a direct
    edge start with source as their parent. Only strict improvements are
    taken, so among equal-cost routes the first one found is kept and the
    parent chains stay acyclic when there is no negative cycle.

    Negative cycles are not detected unless ``detect_negative_cycles`` is
    set; without it their presence leaves the distances undefined. With it,
    every vertex reachable through a negative cycle gets distance ``-inf``.

    Args:
        graph: WeightedGraph (may have negative weights).
        source: Source vertex.
        detect_negative_cycles: Mark vertices affected by negative cycles.

    Returns:
        ShortestPaths(distance, parent); unpacks as a ``(distance, parent)``
        pair.

    Raises:
        VertexIndexError: If source is not a vertex of the graph.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> G = WeightedGraph(3)
        >>> G.set_edge(0, 1, 1.0)
        >>> G.set_edge(1, 2, -2.0)
        >>> distance, parent = bellman_ford(G, 0)
        >>> distance
        [0.0, 1.0, -1.0]
        >>> parent
        [-1, 0, 1]
    """
    n = graph.vertex_count
    distance = [graph.weight(source, i) for i in graph.vertices()]
    # An explicit self-loop on source does not seed its own distance
    distance[source] = 0.0
    parent = [
        source if i != source and graph.has_edge(source, i) else -1 for i in graph.vertices()
    ]

    for _ in range(n - 1):
        for u, v in graph.edges():
            candidate = distance[u] + graph.weight(u, v)
            if candidate < distance[v]:
                distance[v] = candidate
                parent[v] = u

    if detect_negative_cycles:
        _mark_negative_cycles(graph, distance)
    elif is_debug_enabled() and _has_relaxable_edge(graph, distance):
        logger.warning(
            "bellman_ford from %d: negative cycle reachable, distances are undefined", source
        )

    logger.debug("bellman_ford from %d over %d vertices", source, n)
    return ShortestPaths(distance, parent)


def _has_relaxable_edge(graph: WeightedGraph, distance: List[float]) -> bool:
    return any(distance[u] + graph.weight(u, v) < distance[v] for u, v in graph.edges())


def _mark_negative_cycles(graph: WeightedGraph, distance: List[float]) -> None:
    # Anything still relaxable after V - 1 passes sits on or behind a negative
    # cycle; V more passes spread -inf to everything reachable from those.
    for _ in range(graph.vertex_count):
        changed = False
        for u, v in graph.edges():
            if distance[u] + graph.weight(u, v) < distance[v]:
                distance[v] = -math.inf
                changed = True
        if not changed:
            break
