"""Graph traversals, shortest paths and minimum spanning trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from typing import NamedTuple


class Edge(NamedTuple):
    """A weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range for {vertex_count} vertices")


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")


class Graph:
    """An undirected graph stored as adjacency lists in insertion order."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        _check_vertex(src, self.vertex_count)
        _check_vertex(dest, self.vertex_count)
        self._adjacent[src].append(dest)
        self._adjacent[dest].append(src)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacent[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


class DirectedGraph:
    """A directed graph whose newest edge from a vertex is explored first."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacent: list[deque[int]] = [deque() for _ in range(vertex_count)]

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge from ``src`` to ``dest``."""
        _check_vertex(src, self.vertex_count)
        _check_vertex(dest, self.vertex_count)
        self._adjacent[src].appendleft(dest)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = {start}
        order = [start]
        pending = [iter(self._adjacent[start])]
        while pending:
            for neighbour in pending[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(iter(self._adjacent[neighbour]))
                    break
            else:
                pending.pop()
        return order


def adjacency_lists(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return each vertex's neighbours for an undirected graph, in edge order."""
    _check_count(vertex_count)
    lists: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        _check_vertex(src, vertex_count)
        _check_vertex(dest, vertex_count)
        lists[src].append(dest)
        lists[dest].append(src)
    return lists


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices get ``math.inf``.

    Raises NegativeCycleError when a negative cycle is reachable from ``source``.
    """
    _check_count(vertex_count)
    _check_vertex(source, vertex_count)
    edge_list = [Edge(*edge) for edge in edges]
    for edge in edge_list:
        _check_vertex(edge.u, vertex_count)
        _check_vertex(edge.v, vertex_count)

    distances: list[float] = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, weight in edge_list:
            if distances[u] != math.inf and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight

    for u, v, weight in edge_list:
        if distances[u] != math.inf and distances[u] + weight < distances[v]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distances


def prim_mst(weights: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown from vertex 0.

    ``weights`` is a square adjacency matrix where 0 means no edge. Edges come
    in the order they are chosen; ties go to the first one found scanning rows
    then columns. Raises ValueError when the graph is not connected.
    """
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("weights must be a square matrix")
    if size == 0:
        return []
    selected = [False] * size
    selected[0] = True
    tree: list[Edge] = []
    for _ in range(size - 1):
        best: Edge | None = None
        for i, row in enumerate(weights):
            if not selected[i]:
                continue
            for j, weight in enumerate(row):
                if not selected[j] and weight and (best is None or weight < best.weight):
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        selected[best.v] = True
        tree.append(best)
    return tree