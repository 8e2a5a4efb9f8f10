"""
Strongly connected components: Tarjan's algorithm.

The depth-first search keeps its own stack of ``(vertex, neighbor iterator)``
frames instead of recursing, so traversal depth is limited by memory rather
than by the interpreter's recursion limit.

References:
    - Tarjan. "Depth-First Search and Linear Graph Algorithms", 1972.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.5 (Strongly connected components).
"""

from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Set, Tuple

from ..logging import get_logger
from .core import WeightedGraph

logger = get_logger(__name__)

_UNVISITED = -1


def strongly_connected_components(graph: WeightedGraph) -> List[FrozenSet[int]]:
    """
    Tarjan's strongly connected components algorithm.

    Every vertex gets a discovery index and a low-link value, the smallest
    index reachable through its DFS subtree plus at most one edge to a
    vertex still on the component stack. A vertex whose low-link equals its
    own index is the root of a finished component, which is popped off the
    stack.

    Args:
        graph: WeightedGraph; edge weights are ignored.

    Returns:
        Components in order of completion, i.e. reverse topological order of
        the condensation. Every vertex, isolated ones included, belongs to
        exactly one component.

    Complexity: O(V + E); each vertex is pushed and popped once and each
    edge examined once.

    Example:
        >>> G = WeightedGraph(3)
        >>> G.set_edge(0, 1, 1.0)
        >>> G.set_edge(1, 2, 1.0)
        >>> G.set_edge(2, 0, 1.0)
        >>> strongly_connected_components(G)
        [frozenset({0, 1, 2})]
    """
    n = graph.vertex_count
    index = [_UNVISITED] * n
    low_link = [_UNVISITED] * n
    stack: List[int] = []
    in_process: Set[int] = set()
    components: List[FrozenSet[int]] = []
    count = 0

    for root in graph.vertices():
        if index[root] != _UNVISITED:
            continue

        work: List[Tuple[int, Iterator[int]]] = []

        # Enter root
        index[root] = low_link[root] = count
        count += 1
        stack.append(root)
        in_process.add(root)
        work.append((root, iter(graph.neighbors(root))))

        while work:
            u, cursor = work[-1]
            descended = False

            for v in cursor:
                if index[v] == _UNVISITED:
                    index[v] = low_link[v] = count
                    count += 1
                    stack.append(v)
                    in_process.add(v)
                    work.append((v, iter(graph.neighbors(v))))
                    descended = True
                    break
                if v in in_process:
                    low_link[u] = min(low_link[u], index[v])

            if descended:
                continue

            # All neighbors of u are done
            work.pop()

            if low_link[u] == index[u]:
                component = set()
                while True:
                    w = stack.pop()
                    in_process.discard(w)
                    component.add(w)
                    if w == u:
                        break
                components.append(frozenset(component))

            if work:
                caller = work[-1][0]
                low_link[caller] = min(low_link[caller], low_link[u])

    logger.debug("tarjan: %d components over %d vertices", len(components), n)
    return components


def is_strongly_connected(graph: WeightedGraph) -> bool:
    """Return True iff every vertex can reach every other vertex."""
    return len(strongly_connected_components(graph)) == 1


def condensation(
    graph: WeightedGraph,
    components: Optional[Sequence[FrozenSet[int]]] = None,
) -> Tuple[WeightedGraph, Dict[int, int]]:
    """
    Collapse each strongly connected component into a single vertex.

    Component ``c`` of the result is ``components[c]``. An edge ``a -> b``
    exists between distinct components when some original edge crosses from
    a to b; its weight is the smallest such crossing weight.

    Args:
        graph: WeightedGraph to condense.
        components: Precomputed components of graph. Computed if None.

    Returns:
        Tuple of:
        - dag: Directed acyclic WeightedGraph over component ids
        - membership: Dictionary mapping vertex -> component id

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 0, 1.0), (1, 2, 4.0)])
        >>> dag, membership = condensation(G)
        >>> membership
        {2: 0, 0: 1, 1: 1}
    """
    if components is None:
        components = strongly_connected_components(graph)

    membership: Dict[int, int] = {}
    for c, component in enumerate(components):
        for u in sorted(component):
            membership[u] = c

    dag = WeightedGraph(len(components), directed=True)
    for u, v in graph.edges():
        a, b = membership[u], membership[v]
        if a == b:
            continue
        weight = graph.weight(u, v)
        if not dag.has_edge(a, b) or weight < dag.weight(a, b):
            dag.set_edge(a, b, weight)

    return dag, membership
