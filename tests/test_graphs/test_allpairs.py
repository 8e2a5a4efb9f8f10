"""Tests for all-pairs shortest path algorithms."""

import logging
import math

import numpy as np
import pytest

from wgraph import debug_context
from wgraph.graphs import (
    WeightedGraph,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    negative_cycle_vertices,
)


class TestFloydWarshall:
    """Tests for Floyd-Warshall algorithm."""

    def test_floyd_warshall_scenario(self, diamond_graph):
        """Test the reference graph."""
        f = floyd_warshall(diamond_graph)

        assert f[0][3] == 4
        assert f[0][2] == 3
        assert f[1][3] == 3
        assert f[3][0] == math.inf  # No path back

    def test_floyd_warshall_shape_and_diagonal(self, diamond_graph):
        """Test the result is a square matrix with a zero diagonal."""
        f = floyd_warshall(diamond_graph)
        assert isinstance(f, np.ndarray)
        assert f.shape == (4, 4)
        np.testing.assert_array_equal(np.diagonal(f), np.zeros(4))

    def test_floyd_warshall_negative_weights(self):
        """Test Floyd-Warshall with negative weights (no cycle)."""
        G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, -2.0)])

        f = floyd_warshall(G)

        assert f[0][2] == -1.0
        assert f[2][0] == math.inf

    def test_floyd_warshall_undirected(self):
        """Test an undirected graph yields a symmetric matrix."""
        G = WeightedGraph.from_edges(4, [(0, 1, 2.0), (1, 2, 3.0), (0, 3, 10.0)], directed=False)
        f = floyd_warshall(G)
        np.testing.assert_array_equal(f, f.T)
        assert f[2][3] == 15.0

    def test_floyd_warshall_single_vertex(self):
        """Test Floyd-Warshall on a single vertex."""
        f = floyd_warshall(WeightedGraph(1))
        np.testing.assert_array_equal(f, np.array([[0.0]]))

    def test_floyd_warshall_does_not_touch_graph(self, diamond_graph):
        """Test the graph is unchanged and the result is independent of it."""
        before = diamond_graph.adjacency_matrix()
        f = floyd_warshall(diamond_graph)
        np.testing.assert_array_equal(diamond_graph.adjacency_matrix(), before)
        f[0][1] = 99.0
        assert diamond_graph.weight(0, 1) == 1.0

    def test_floyd_warshall_idempotent(self, random_graph):
        """Test repeated runs on an unmutated graph agree."""
        G = random_graph(8, density=0.35, low=-2, high=9)
        # Keep the graph free of negative cycles by making it acyclic
        for u, v in list(G.edges()):
            if v < u:
                G.remove_edge(u, v)
        np.testing.assert_array_equal(floyd_warshall(G), floyd_warshall(G))

    def test_floyd_warshall_matches_bellman_ford(self, random_graph):
        """Test every row equals Bellman-Ford from that vertex."""
        G = random_graph(9, density=0.3, low=-4, high=10)
        for u, v in list(G.edges()):
            if v < u:
                G.remove_edge(u, v)
        # Positive self-loops never shorten a distance
        G.set_edge(0, 0, 7.0)
        G.set_edge(4, 4, 1.0)
        f = floyd_warshall(G)
        for source in G.vertices():
            distance, _ = bellman_ford(G, source)
            np.testing.assert_array_equal(f[source], np.array(distance))

    def test_floyd_warshall_positive_self_loop(self):
        """Test a positive self-loop leaves the diagonal at 0."""
        G = WeightedGraph.from_edges(2, [(0, 0, 5.0), (0, 1, 1.0)])
        f = floyd_warshall(G)

        assert f[0][0] == 0.0
        assert f[0][1] == 1.0
        assert f[0][0] == bellman_ford(G, 0).distance[0] == dijkstra(G, 0, 0).cost
        assert negative_cycle_vertices(f) == []

    def test_floyd_warshall_negative_self_loop(self):
        """Test a negative self-loop is a negative cycle through its vertex."""
        G = WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 1, -1.0), (1, 2, 1.0)])
        assert negative_cycle_vertices(floyd_warshall(G)) == [1]

        f = floyd_warshall(G, detect_negative_cycles=True)
        assert f[0][2] == -math.inf
        assert f[0][0] == 0.0

    def test_floyd_warshall_negative_cycle_detection(self):
        """Test opt-in detection marks pairs joined through a negative cycle."""
        G = WeightedGraph.from_edges(
            4,
            [(0, 1, 1.0), (1, 2, -3.0), (2, 1, 1.0), (2, 3, 1.0)],
        )
        f = floyd_warshall(G, detect_negative_cycles=True)

        assert negative_cycle_vertices(floyd_warshall(G)) == [1, 2]
        assert f[0][1] == -math.inf
        assert f[0][3] == -math.inf
        assert f[1][1] == -math.inf
        assert f[0][0] == 0.0  # 0 cannot be reached from the cycle
        assert f[3][1] == math.inf

    def test_negative_cycle_vertices_none(self, diamond_graph):
        """Test a graph without negative cycles reports none."""
        assert negative_cycle_vertices(floyd_warshall(diamond_graph)) == []

    def test_floyd_warshall_negative_cycle_debug_warning(self, caplog):
        """Test baseline mode warns about negative cycles in debug mode."""
        G = WeightedGraph.from_edges(2, [(0, 1, 1.0), (1, 0, -2.0)])
        logger = logging.getLogger("wgraph.graphs.allpairs")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.WARNING, logger="wgraph.graphs.allpairs"):
                with debug_context(True):
                    f = floyd_warshall(G)
        finally:
            logger.removeHandler(caplog.handler)
        assert np.isfinite(f).all()
        assert "negative cycles" in caplog.text
