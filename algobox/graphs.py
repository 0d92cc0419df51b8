"""Directed graphs: breadth-first traversal and all-pairs shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["INF", "Graph", "floyd_warshall", "format_distances"]

INF = 99999
"""Distance used for a pair of vertices with no path between them."""


class Graph:
    """A directed graph on vertices 0..vertex_count-1 stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is not in the graph")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from v to w."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from start."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def _square(dist: Sequence[Sequence[int]]) -> list[list[int]]:
    matrix = [list(row) for row in dist]
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("distance matrix must be square")
    return matrix


def floyd_warshall(dist: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the shortest distances between every pair of vertices.

    dist[i][j] is the weight of the edge from i to j, or INF where there is
    none. The input is left unchanged.
    """
    matrix = _square(dist)
    size = len(matrix)
    for k in range(size):
        row_k = matrix[k]
        for row in matrix:
            via = row[k]
            if via == INF:
                continue
            for j in range(size):
                if row_k[j] != INF and row[j] > via + row_k[j]:
                    row[j] = via + row_k[j]
    return matrix


def format_distances(dist: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix one row per line, writing INF for no path."""
    matrix = _square(dist)
    return "\n".join(
        " ".join("INF" if value == INF else str(value) for value in row)
        for row in matrix
    )