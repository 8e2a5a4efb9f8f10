"""
Generalized best-first search.

BestFirstSearch is an A* engine parameterized by four capabilities: neighbor
enumeration, edge cost, heuristic estimate and a goal test. With the constant
zero heuristic it expands nodes in non-decreasing order of accumulated cost,
which is exactly Dijkstra's algorithm.

References:
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic Determination
      of Minimum Cost Paths", 1968.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple

Node = Hashable


def zero_heuristic(node: Node) -> float:
    """Heuristic that always estimates 0, turning A* into Dijkstra."""
    return 0.0


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a best-first search.

    Attributes:
        cost: Total cost from start to the goal, ``+inf`` if no goal was reached.
        path: Nodes from start to goal inclusive, or None if no goal was reached.
        expanded: Number of nodes popped and expanded before termination.
    """

    cost: float
    path: Optional[List[Node]]
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None


class BestFirstSearch(ABC):
    """
    Abstract A* search over an implicit graph.

    Subclasses provide neighbors; distance and heuristic default to unit
    cost and zero. The heuristic must be admissible for the returned cost to
    be optimal, and edge costs must be non-negative.

    An admissible but inconsistent heuristic can close a node before its
    cheapest route is known, so a closed node is re-opened whenever a
    strictly cheaper route to it turns up. Set ``consistent`` to True when
    the heuristic is known to be consistent (monotone); closed nodes are then
    final, which is the classic Dijkstra behaviour.
    """

    consistent: bool = False

    @abstractmethod
    def neighbors(self, node: Node) -> Iterable[Node]:
        """Return the nodes adjacent to ``node``."""

    def distance(self, from_node: Node, to_node: Node) -> float:
        """Return the cost of moving from ``from_node`` to adjacent ``to_node``."""
        return 1.0

    def heuristic(self, node: Node) -> float:
        """Return an estimate of the remaining cost from ``node`` to the goal."""
        return 0.0

    def run(self, start: Node, is_goal: Callable[[Node], bool]) -> SearchResult:
        """
        Search from ``start`` until a node satisfying ``is_goal`` is expanded.

        Args:
            start: Start node.
            is_goal: Goal predicate.

        Returns:
            SearchResult with the cost and path to the first expanded goal.

        Complexity: O(E log V) with a binary heap.
        """
        # Heap entries: (g + h, insertion counter, node). The counter breaks
        # ties in FIFO order so nodes never need to be comparable.
        counter = itertools.count()
        best: Dict[Node, float] = {start: 0.0}
        parent: Dict[Node, Optional[Node]] = {start: None}
        closed: set = set()
        frontier: List[Tuple[float, int, Node]] = [
            (self.heuristic(start), next(counter), start)
        ]
        expanded = 0

        while frontier:
            _, _, u = heapq.heappop(frontier)
            if u in closed:
                continue
            closed.add(u)
            expanded += 1

            if is_goal(u):
                return SearchResult(best[u], self._trace(parent, u), expanded)

            g = best[u]
            for v in self.neighbors(u):
                if self.consistent and v in closed:
                    continue
                candidate = g + self.distance(u, v)
                if candidate < best.get(v, float("inf")):
                    best[v] = candidate
                    parent[v] = u
                    closed.discard(v)
                    heapq.heappush(frontier, (candidate + self.heuristic(v), next(counter), v))

        return SearchResult(float("inf"), None, expanded)

    @staticmethod
    def _trace(parent: Dict[Node, Optional[Node]], goal: Node) -> List[Node]:
        path = [goal]
        while parent[path[-1]] is not None:
            path.append(parent[path[-1]])
        path.reverse()
        return path


class FunctionalSearch(BestFirstSearch):
    """
    BestFirstSearch assembled from plain callables.

    Example:
        >>> search = FunctionalSearch(graph.neighbors, graph.weight)
        >>> search.run(0, lambda node: node == 3).cost
        4.0
    """

    def __init__(
        self,
        neighbors: Callable[[Node], Iterable[Node]],
        distance: Callable[[Node, Node], float],
        heuristic: Callable[[Node], float] = zero_heuristic,
        consistent: Optional[bool] = None,
    ):
        self._neighbors = neighbors
        self._distance = distance
        self._heuristic = heuristic
        # The zero heuristic is trivially consistent
        self.consistent = heuristic is zero_heuristic if consistent is None else bool(consistent)

    def neighbors(self, node: Node) -> Iterable[Node]:
        return self._neighbors(node)

    def distance(self, from_node: Node, to_node: Node) -> float:
        return self._distance(from_node, to_node)

    def heuristic(self, node: Node) -> float:
        return self._heuristic(node)
