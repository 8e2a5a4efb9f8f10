"""Pytest configuration and shared fixtures for wgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized property tests
- Small reference graphs used across the algorithm tests
- A factory for random weighted graphs
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from wgraph import WeightedGraph, set_debug_enabled, is_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Auto-use fixture that restores the global debug flag after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def diamond_graph() -> WeightedGraph:
    """Directed graph 0->1=1, 1->2=2, 0->2=5, 2->3=1 (shortest 0->3 costs 4)."""
    G = WeightedGraph(4)
    G.set_edge(0, 1, 1.0)
    G.set_edge(1, 2, 2.0)
    G.set_edge(0, 2, 5.0)
    G.set_edge(2, 3, 1.0)
    return G


@pytest.fixture
def triangle_cycle() -> WeightedGraph:
    """Directed 3-cycle 0->1->2->0 with unit weights."""
    return WeightedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0)])


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., WeightedGraph]:
    """Return a factory for random weighted graphs.

    The factory takes ``n``, ``density`` (edge probability), ``low``/``high``
    weight bounds and ``directed``. Weights are integers so that sums compare
    exactly.
    """

    def build(
        n: int,
        density: float = 0.3,
        low: int = 0,
        high: int = 10,
        directed: bool = True,
    ) -> WeightedGraph:
        G = WeightedGraph(n, directed=directed)
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < density:
                    G.set_edge(u, v, float(rng.integers(low, high + 1)))
        return G

    return build
