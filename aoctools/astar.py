"""Shortest path search with A* over integer-like costs."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar

__all__ = ["AStarError", "AStarResult", "astar"]

N = TypeVar("N", bound=Hashable)
C = TypeVar("C")


class AStarError(LookupError):
    """Raised when path information is requested from a failed search."""

    def __init__(self, message: str = "No path found") -> None:
        super().__init__(message)


@dataclass
class AStarResult(Generic[N, C]):
    """The outcome of an A* search.

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
            raise AStarError()
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
            raise AStarError()
        return self.goal_cost  # type: ignore[return-value]

    def path_len(self) -> int:
        """Return the number of steps from the start to the goal."""
        return len(self._chain()) - 1

    def path(self) -> list[N]:
        """Return the nodes from the start to the goal, inclusive."""
        chain = self._chain()
        chain.reverse()
        return chain


def astar(
    start: N,
    edges: Callable[[N], Iterable[tuple[N, C, C]]],
    stop: Callable[[N], bool],
) -> AStarResult[N, C]:
    """Find the shortest path from ``start`` using A*.

    ``edges`` yields ``(neighbour, move_cost, heuristic)`` for a node, and
    ``stop`` returns true for a node that ends the search. The search runs
    until ``stop`` accepts a node or every reachable node is exhausted.
    """
    zero = 0
    cache: dict[N, tuple[int | None, C]] = {start: (None, zero)}  # type: ignore[dict-item]
    nodes: list[N] = [start]
    positions: dict[N, int] = {start: 0}
    # Smallest estimate first; ties go to the larger cost, then the larger index.
    heap: list[tuple[C, C, int]] = [(zero, zero, 0)]  # type: ignore[list-item]

    while heap:
        _, neg_cost, index = heapq.heappop(heap)
        cost = -neg_cost
        index = -index
        node = nodes[index]

        if stop(node):
            return AStarResult(cache, index, cost)

        if cost > cache[node][1]:
            continue

        for edge, move_cost, heuristic in edges(node):
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
            heapq.heappush(heap, (new_cost + heuristic, -new_cost, -next_index))

    return AStarResult(cache)