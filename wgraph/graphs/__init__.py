"""
Graph algorithms package for wgraph.

This package provides a fixed-size weighted graph and classical algorithms
built on it:
- Graph data structure (WeightedGraph)
- Best-first search engine (A*, Dijkstra)
- Single-source shortest paths with negative weights (Bellman-Ford)
- All-pairs shortest paths (Floyd-Warshall)
- Strongly connected components (Tarjan)

All algorithms read the graph through its public methods and return fresh
results that do not alias graph state.
"""

from .allpairs import floyd_warshall, negative_cycle_vertices
from .components import condensation, is_strongly_connected, strongly_connected_components
from .core import EdgeView, WeightedGraph
from .search import BestFirstSearch, FunctionalSearch, SearchResult, zero_heuristic
from .shortest import ShortestPaths, astar, bellman_ford, dijkstra
from .utils import path_weight, reconstruct_path

shortest_path = dijkstra
all_pairs_shortest_path = floyd_warshall
single_source_shortest_path_with_negatives = bellman_ford

__all__ = [
    "WeightedGraph",
    "EdgeView",
    "BestFirstSearch",
    "FunctionalSearch",
    "SearchResult",
    "zero_heuristic",
    "ShortestPaths",
    "astar",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "negative_cycle_vertices",
    "strongly_connected_components",
    "is_strongly_connected",
    "condensation",
    "reconstruct_path",
    "path_weight",
    "shortest_path",
    "all_pairs_shortest_path",
    "single_source_shortest_path_with_negatives",
]

# Example usage:
# from wgraph.graphs import WeightedGraph, bellman_ford, reconstruct_path
#
# G = WeightedGraph(3)
# G.set_edge(0, 1, 1.0)
# G.set_edge(1, 2, -2.0)
# distance, parent = bellman_ford(G, 0)
# path = reconstruct_path(parent, 2)  # [0, 1, 2]
