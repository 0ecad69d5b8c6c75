"""Undirected graphs on an adjacency matrix: traversals, shortest paths, spanning trees.

Vertices are numbered from 0. A weight of 0 in the matrix means "no edge", so
every edge carries a non-zero weight (1 for unweighted graphs).
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``source`` and ``dest``."""

    source: int
    dest: int
    weight: int

    def normalized(self) -> Edge:
        """Return the same edge with the smaller vertex first."""
        low, high = sorted((self.source, self.dest))
        return Edge(low, high, self.weight)


class Graph:
    """An undirected graph with a fixed number of vertices."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._weights = [[0] * vertex_count for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._weights)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(
                f"vertex {vertex} out of range for {self.vertex_count} vertices"
            )

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Connect ``u`` and ``v`` with an edge of the given non-zero weight."""
        self._check_vertex(u)
        self._check_vertex(v)
        if weight == 0:
            raise ValueError("edge weight must be non-zero")
        self._weights[u][v] = weight
        self._weights[v][u] = weight

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return (
            other
            for other, weight in enumerate(self._weights[vertex])
            if weight != 0 and other != vertex
        )

    def _bfs(self, start: int, visited: list[bool]) -> list[int]:
        order: list[int] = []
        pending = deque([start])
        visited[start] = True
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for other in self._neighbours(vertex):
                if not visited[other]:
                    visited[other] = True
                    pending.append(other)
        return order

    def _dfs(self, start: int, visited: list[bool]) -> list[int]:
        order = [start]
        visited[start] = True
        stack = [self._neighbours(start)]
        while stack:
            for other in stack[-1]:
                if not visited[other]:
                    visited[other] = True
                    order.append(other)
                    stack.append(self._neighbours(other))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check_vertex(start)
        return self._bfs(start, [False] * self.vertex_count)

    def dfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check_vertex(start)
        return self._dfs(start, [False] * self.vertex_count)

    def bfs_all(self) -> list[int]:
        """Breadth-first order over every component, lowest unvisited vertex first."""
        visited = [False] * self.vertex_count
        order: list[int] = []
        for vertex in range(self.vertex_count):
            if not visited[vertex]:
                order.extend(self._bfs(vertex, visited))
        return order

    def dfs_all(self) -> list[int]:
        """Depth-first order over every component, lowest unvisited vertex first."""
        visited = [False] * self.vertex_count
        order: list[int] = []
        for vertex in range(self.vertex_count):
            if not visited[vertex]:
                order.extend(self._dfs(vertex, visited))
        return order

    @staticmethod
    def _closest(keys: list[float], visited: list[bool]) -> int:
        unvisited = (vertex for vertex, done in enumerate(visited) if not done)
        return min(unvisited, key=keys.__getitem__)

    def dijkstra(self, source: int = 0) -> list[float]:
        """Return the shortest distance from ``source`` to each vertex.

        Unreachable vertices get ``math.inf``.
        """
        self._check_vertex(source)
        count = self.vertex_count
        distances: list[float] = [math.inf] * count
        visited = [False] * count
        distances[source] = 0
        for _ in range(count - 1):
            vertex = self._closest(distances, visited)
            visited[vertex] = True
            for other, weight in enumerate(self._weights[vertex]):
                if weight != 0 and not visited[other]:
                    distances[other] = min(distances[other], distances[vertex] + weight)
        return distances

    def prim(self) -> list[Edge]:
        """Return a minimum spanning tree grown from vertex 0.

        Edges are listed by their higher-numbered tree vertex 1, 2, ...; each
        edge has its smaller vertex first. Raises ValueError if the graph is
        not connected.
        """
        count = self.vertex_count
        keys: list[float] = [math.inf] * count
        parents: list[int | None] = [None] * count
        visited = [False] * count
        if count:
            keys[0] = 0
        for _ in range(count):
            vertex = self._closest(keys, visited)
            visited[vertex] = True
            for other, weight in enumerate(self._weights[vertex]):
                if weight != 0 and not visited[other] and weight < keys[other]:
                    keys[other] = weight
                    parents[other] = vertex
        if any(key == math.inf for key in keys):
            raise ValueError("graph is not connected")
        return [
            Edge(parent, vertex, self._weights[parent][vertex]).normalized()
            for vertex, parent in enumerate(parents)
            if parent is not None
        ]


def _find_root(vertex: int, parents: list[int]) -> int:
    while parents[vertex] != vertex:
        vertex = parents[vertex]
    return vertex


def kruskal(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> list[Edge]:
    """Return a minimum spanning tree built by Kruskal's algorithm.

    Edges are taken in order of weight, ties in input order, and returned in
    the order they join the tree, smaller vertex first. Raises ValueError if
    the edges do not connect all vertices.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        for vertex in (edge.source, edge.dest):
            if not 0 <= vertex < vertex_count:
                raise IndexError(
                    f"vertex {vertex} out of range for {vertex_count} vertices"
                )
    candidates.sort(key=lambda edge: edge.weight)

    needed = max(vertex_count - 1, 0)
    parents = list(range(vertex_count))
    tree: list[Edge] = []
    for edge in candidates:
        if len(tree) == needed:
            break
        source_root = _find_root(edge.source, parents)
        dest_root = _find_root(edge.dest, parents)
        if source_root != dest_root:
            tree.append(edge.normalized())
            parents[source_root] = dest_root
    if len(tree) != needed:
        raise ValueError("graph is not connected")
    return tree