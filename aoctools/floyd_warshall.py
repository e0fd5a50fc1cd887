"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

from collections import deque

__all__ = [
    "make_fw_dist_matrix",
    "make_fw_vertex_matrix",
    "floyd_warshall",
    "floyd_warshall_with_path",
    "reconstruct_path",
]

_DEFAULT_INF = (2**63 - 1) // 3


def make_fw_dist_matrix(size: int, inf: int = _DEFAULT_INF) -> list[list[int]]:
    """Return a ``size`` x ``size`` distance matrix.

    The diagonal is zero and every other cell holds ``inf``.
    """
    return [[0 if i == j else inf for j in range(size)] for i in range(size)]


def make_fw_vertex_matrix(size: int) -> list[list[int | None]]:
    """Return a ``size`` x ``size`` vertex matrix.

    The diagonal holds the node's own index and every other cell ``None``.
    Assign ``matrix[u][v] = u`` for every edge ``(u, v)`` before use.
    """
    return [[i if i == j else None for j in range(size)] for i in range(size)]


def floyd_warshall(path_matrix: list[list[int]]) -> None:
    """Replace the distances in ``path_matrix`` with shortest distances."""
    size = len(path_matrix[0])
    for k in range(size):
        row_k = path_matrix[k]
        for row in path_matrix:
            via = row[k]
            for j, dist in enumerate(row_k):
                candidate = via + dist
                if candidate < row[j]:
                    row[j] = candidate


def floyd_warshall_with_path(
    path_matrix: list[list[int]], vertex_matrix: list[list[int | None]]
) -> None:
    """Compute shortest distances and update ``vertex_matrix`` for path lookup."""
    size = len(path_matrix[0])
    for k in range(size):
        row_k = path_matrix[k]
        vertex_k = vertex_matrix[k]
        for row, vertex_row in zip(path_matrix, vertex_matrix):
            via = row[k]
            for j, dist in enumerate(row_k):
                candidate = via + dist
                if row[j] > candidate:
                    row[j] = candidate
                    vertex_row[j] = vertex_k[j]


def reconstruct_path(
    start: int, end: int, vertex_matrix: list[list[int | None]]
) -> list[int] | None:
    """Return the node indices from ``start`` to ``end``, or ``None`` if unreachable."""
    step = vertex_matrix[start][end]
    if step is None or step > len(vertex_matrix[0]):
        return None

    path: deque[int] = deque([end])
    node = end
    while node != start:
        node = vertex_matrix[start][node]
        if node is None:
            return None
        path.appendleft(node)
    return list(path)