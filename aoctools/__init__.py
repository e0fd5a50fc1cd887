"""Puzzle-solving helpers: validated ASCII letters, VM registers and operands, and shortest-path search."""

__version__ = "0.1.0"
__all__ = ["chars", "registers", "values", "astar", "dijkstra", "floyd_warshall"]