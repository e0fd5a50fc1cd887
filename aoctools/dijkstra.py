"""Shortest path search with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar

__all__ = ["DijkstraError", "DijkstraResult", "dijkstra"]

N = TypeVar("N", bound=Hashable)
C = TypeVar("C")


class DijkstraError(LookupError):
    """Raised when path information is requested from a failed search."""

    def __init__(self, message: str = "No path found") -> None:
        super().__init__(message)


@dataclass
class DijkstraResult(Generic[N, C]):
    """The outcome of a Dijkstra search.

    ``examined_nodes`` maps every node seen to ``(parent_index, cost)``, in
    the order the nodes were first discovered; the start node has parent
    ``None``. ``goal_index`` is ``None`` when no path was found.
    """

    examined_nodes: dict[N, tuple[int | None, C]]
    goal_index: int | None = None
    goal_cost: C | None = None

    @property
    def found(self) -> bool:
        """Whether the search reached a goal."""
        return self.goal_index is not None

    def _chain(self) -> list[N]:
        if self.goal_index is None:
            raise DijkstraError()
        nodes = list(self.examined_nodes)
        chain: list[N] = []
        index: int | None = self.goal_index
        while index is not None:
            node = nodes[index]
            chain.append(node)
            index = self.examined_nodes[node][0]
        return chain

    def cost(self) -> C:
        """Return the total cost of the path to the goal."""
        if self.goal_index is None:
            raise DijkstraError()
        return self.goal_cost  # type: ignore[return-value]

    def path_len(self) -> int:
        """Return the number of steps from the start to the goal."""
        return len(self._chain()) - 1

    def path(self) -> list[N]:
        """Return the nodes from the start to the goal, inclusive."""
        chain = self._chain()
        chain.reverse()
        return chain


def dijkstra(
    start: N,
    edges: Callable[[N], Iterable[tuple[N, C]]],
    stop: Callable[[N], bool],
) -> DijkstraResult[N, C]:
    """Find the shortest path from ``start`` using Dijkstra's algorithm.

    ``edges`` yields ``(neighbour, move_cost)`` for a node, and ``stop``
    returns true for a node that ends the search. The search runs until
    ``stop`` accepts a node or every reachable node is exhausted.
    """
    zero = 0
    cache: dict[N, tuple[int | None, C]] = {start: (None, zero)}  # type: ignore[dict-item]
    nodes: list[N] = [start]
    positions: dict[N, int] = {start: 0}
    # Smallest cost first; ties go to the larger index.
    heap: list[tuple[C, int]] = [(zero, 0)]  # type: ignore[list-item]

    while heap:
        cost, neg_index = heapq.heappop(heap)
        index = -neg_index
        node = nodes[index]

        if stop(node):
            return DijkstraResult(cache, index, cost)

        if cost > cache[node][1]:
            continue

        for edge, move_cost in edges(node):
            new_cost = cost + move_cost
            known = cache.get(edge)
            if known is None:
                next_index = len(nodes)
                nodes.append(edge)
                positions[edge] = next_index
            elif known[1] > new_cost:
                next_index = positions[edge]
            else:
                continue
            cache[edge] = (index, new_cost)
            heapq.heappush(heap, (new_cost, -next_index))

    return DijkstraResult(cache)