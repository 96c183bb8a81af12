"""Directed graphs, traversals, colouring and shortest paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "NegativeCycleError",
    "DirectedGraph",
    "adjacency_from_edges",
    "can_color",
    "dfs",
    "dijkstra",
    "bellman_ford",
]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range 0..{vertex_count - 1}")


class DirectedGraph:
    """Directed graph on vertices ``0 .. vertex_count - 1`` kept as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        _check_vertex(source, len(self))
        _check_vertex(target, len(self))
        self._adjacency[source].append(target)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the targets of ``vertex``'s edges, in the order they were added."""
        _check_vertex(vertex, len(self))
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, len(self))
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for target in self._adjacency[vertex]:
                if target not in visited:
                    visited.add(target)
                    pending.append(target)
        return order


def adjacency_from_edges(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Build adjacency lists where each new edge goes to the front of its list."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for source, target in edges:
        _check_vertex(source, vertex_count)
        _check_vertex(target, vertex_count)
        adjacency[source].insert(0, target)
    return adjacency


def can_color(matrix: Sequence[Sequence[int]], colors: int) -> bool:
    """Return True if the graph can be coloured with at most ``colors`` colours
    so that no two adjacent vertices share a colour."""
    n = len(matrix)
    assigned = [0] * n

    def is_safe(node: int, color: int) -> bool:
        return not any(
            other != node and matrix[other][node] and assigned[other] == color
            for other in range(n)
        )

    def solve(node: int) -> bool:
        if node == n:
            return True
        for color in range(1, colors + 1):
            if is_safe(node, color):
                assigned[node] = color
                if solve(node + 1):
                    return True
                assigned[node] = 0
        return False

    return solve(0)


def dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    ``matrix[a][b] == 1`` means an edge from ``a`` to ``b``.
    """
    n = len(matrix)
    _check_vertex(start, n)
    visited = [False] * n
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        order.append(vertex)
        for target, edge in enumerate(matrix[vertex]):
            if edge == 1 and not visited[target]:
                visit(target)

    visit(start)
    return order


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Shortest distances from ``source`` over a weight matrix.

    A weight of 0 means no edge; unreachable vertices get ``math.inf``.
    """
    n = len(matrix)
    _check_vertex(source, n)
    dist = [math.inf] * n
    visited = [False] * n
    dist[source] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not visited[v]]
        u = min(reversed(candidates), key=lambda v: dist[v])
        visited[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int
) -> list[float]:
    """Shortest distances from ``source`` over weighted directed edges.

    Unreachable vertices get ``math.inf``. Raise NegativeCycleError if a
    negative cycle is reachable from ``source``.
    """
    _check_vertex(source, vertex_count)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    dist = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edge_list:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains a negative cycle")
    return dist