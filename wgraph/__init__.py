"""wgraph - a fixed-size weighted graph with classical shortest-path and SCC algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    InputError,
    NegativeWeightError,
    VertexIndexError,
    WGraphError,
)

# Graph algorithms
from .graphs import (
    BestFirstSearch,
    EdgeView,
    FunctionalSearch,
    SearchResult,
    ShortestPaths,
    WeightedGraph,
    all_pairs_shortest_path,
    astar,
    bellman_ford,
    condensation,
    dijkstra,
    floyd_warshall,
    is_strongly_connected,
    negative_cycle_vertices,
    path_weight,
    reconstruct_path,
    shortest_path,
    single_source_shortest_path_with_negatives,
    strongly_connected_components,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "WeightedGraph",
    "EdgeView",
    "BestFirstSearch",
    "FunctionalSearch",
    "SearchResult",
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
    # Errors
    "WGraphError",
    "InputError",
    "VertexIndexError",
    "NegativeWeightError",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
