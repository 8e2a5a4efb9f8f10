"""
Core graph data structure.

Provides WeightedGraph, a fixed-size adjacency-list graph over the integer
vertices ``0 .. vertex_count - 1``. Edges can be added, updated and removed;
vertices cannot. Each vertex owns a dict mapping neighbor id to weight, and the
dicts are stored in a list indexed by vertex id.
"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple

import numpy as np

from ..exceptions import InputError, VertexIndexError


class EdgeView:
    """
    Lazy, restartable view over the present edges of a WeightedGraph.

    Every iteration walks the graph afresh in ``u``-major, then neighbor
    order, so it reflects the graph state at iteration time.
    """

    def __init__(self, graph: "WeightedGraph"):
        self._graph = graph

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for u in self._graph.vertices():
            for v in self._graph.neighbors(u):
                yield u, v

    def __len__(self) -> int:
        return self._graph.edge_count()

    def __contains__(self, edge: object) -> bool:
        try:
            u, v = edge  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        try:
            return self._graph.has_edge(u, v)
        except VertexIndexError:
            return False

    def __repr__(self) -> str:
        return f"EdgeView({list(self)!r})"


class WeightedGraph:
    """
    Semi-mutable weighted graph with adjacency-list representation.

    Edges can be upserted and deleted but the vertex set is fixed at
    construction. Querying an absent edge yields ``0.0`` on the diagonal and
    ``+inf`` elsewhere; use has_edge to test presence.

    For undirected graphs every mutation updates both ``(u, v)`` and
    ``(v, u)`` before returning.

    Attributes:
        vertex_count: Number of vertices.
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - weight / has_edge / set_edge / remove_edge: O(1) average
        - neighbors: O(deg(u))
        - edges: O(V + E) per full iteration
        - adjacency_matrix: O(V^2)
    """

    def __init__(self, vertex_count: int, directed: bool = True):
        """
        Initialize a graph with no edges.

        Args:
            vertex_count: Number of vertices, must be a positive integer.
            directed: If True, graph is directed; otherwise undirected.

        Raises:
            InputError: If vertex_count is not a positive integer.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, (int, np.integer)):
            raise InputError(f"vertex_count must be an integer, got {vertex_count!r}")
        if vertex_count <= 0:
            raise InputError(f"vertex_count must be positive, got {vertex_count}")

        self._vertex_count = int(vertex_count)
        self._directed = bool(directed)
        self._adj: List[Dict[int, float]] = [{} for _ in range(self._vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Tuple[int, int, float]],
        directed: bool = True,
    ) -> "WeightedGraph":
        """
        Construct a graph from an iterable of ``(u, v, weight)`` edges.

        Later duplicates of the same edge overwrite earlier ones.

        Example:
            >>> G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0)])
            >>> G.weight(0, 1)
            1.0
        """
        graph = cls(vertex_count, directed=directed)
        for u, v, weight in edges:
            graph.set_edge(u, v, weight)
        return graph

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def directed(self) -> bool:
        return self._directed

    def _check_vertex(self, u: int) -> None:
        if isinstance(u, bool) or not isinstance(u, (int, np.integer)):
            raise VertexIndexError(f"Vertex ids must be integers, got {u!r}")
        if not 0 <= u < self._vertex_count:
            raise VertexIndexError(
                f"Vertex {u} out of range for graph with {self._vertex_count} vertices"
            )

    def weight(self, u: int, v: int) -> float:
        """
        Return the weight of edge ``u -> v``.

        Args:
            u: Source vertex.
            v: Target vertex.

        Returns:
            The stored weight, else 0.0 if ``u == v``, else ``+inf``.

        Raises:
            VertexIndexError: If u or v is not a vertex of this graph.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        default = 0.0 if u == v else float("inf")
        return self._adj[u].get(v, default)

    def has_edge(self, u: int, v: int) -> bool:
        """Return True iff an explicit ``u -> v`` edge is stored."""
        self._check_vertex(u)
        self._check_vertex(v)
        return v in self._adj[u]

    def neighbors(self, u: int) -> Set[int]:
        """
        Return the vertices ``v`` with an explicit ``u -> v`` edge.

        The set is a copy; mutating it does not affect the graph.

        Raises:
            VertexIndexError: If u is not a vertex of this graph.
        """
        self._check_vertex(u)
        return set(self._adj[u])

    def set_edge(self, u: int, v: int, weight: float) -> None:
        """
        Insert or update edge ``u -> v``.

        For undirected graphs, also sets ``v -> u`` to the same weight.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (may be negative).

        Raises:
            VertexIndexError: If u or v is not a vertex of this graph.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        weight = float(weight)

        self._adj[u][v] = weight
        if not self._directed:
            self._adj[v][u] = weight

    def remove_edge(self, u: int, v: int) -> None:
        """
        Delete edge ``u -> v`` if present.

        For undirected graphs the mirrored ``v -> u`` entry is deleted too.
        Removing an absent edge is a no-op.

        Raises:
            VertexIndexError: If u or v is not a vertex of this graph.
        """
        self._check_vertex(u)
        self._check_vertex(v)

        self._adj[u].pop(v, None)
        if not self._directed:
            self._adj[v].pop(u, None)

    def vertices(self) -> range:
        """Return the vertices ``0 .. vertex_count - 1`` in order."""
        return range(self._vertex_count)

    def edges(self) -> EdgeView:
        """
        Return a lazy view of all ``(u, v)`` pairs with a stored edge.

        For undirected graphs both directions of every edge are included.
        """
        return EdgeView(self)

    def edge_count(self) -> int:
        """Return the number of stored directed entries."""
        return sum(len(targets) for targets in self._adj)

    def adjacency_matrix(self) -> np.ndarray:
        """
        Return the adjacency matrix of this graph.

        Cell ``(u, v)`` equals ``weight(u, v)``, so absent edges read ``+inf``
        off the diagonal and ``0.0`` on it. The array is a fresh copy.

        Returns:
            ``vertex_count x vertex_count`` float64 array.

        Example:
            >>> G = WeightedGraph(2)
            >>> G.set_edge(0, 1, 3.0)
            >>> G.adjacency_matrix()
            array([[ 0.,  3.],
                   [inf,  0.]])
        """
        n = self._vertex_count
        matrix = np.full((n, n), np.inf, dtype=np.float64)
        np.fill_diagonal(matrix, 0.0)
        for u, targets in enumerate(self._adj):
            for v, weight in targets.items():
                matrix[u, v] = weight
        return matrix

    def __getitem__(self, edge: Tuple[int, int]) -> float:
        u, v = edge
        return self.weight(u, v)

    def __setitem__(self, edge: Tuple[int, int], weight: float) -> None:
        u, v = edge
        self.set_edge(u, v, weight)

    def __delitem__(self, edge: Tuple[int, int]) -> None:
        u, v = edge
        self.remove_edge(u, v)

    def __contains__(self, edge: object) -> bool:
        return edge in self.edges()

    def __len__(self) -> int:
        return self._vertex_count

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(vertex_count={self._vertex_count}, "
            f"directed={self._directed}, edges={self.edge_count()})"
        )
