"""Graphs with traversal, unweighted shortest distances and topological ordering."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from dsalgo.queues import LinkedQueue
from dsalgo.stack import LinkedStack

MAX_VERTEX_NUM = 100


class Graph:
    """Directed or undirected graph over vertices numbered from 0.

    Neighbours are reported in ascending order, as a scan of an adjacency
    matrix row would find them.
    """

    def __init__(self, vertices: Iterable[Any] = (), directed: bool = False) -> None:
        self.vertices = list(vertices)
        if len(self.vertices) > MAX_VERTEX_NUM:
            raise ValueError(f"at most {MAX_VERTEX_NUM} vertices are supported")
        self.directed = directed
        self._adjacent: list[set[int]] = [set() for _ in self.vertices]

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Graph({self.vertices!r}, directed={self.directed})"

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self.vertices):
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add the arc <u, v>, or the edge (u, v) in an undirected graph."""
        self._check(u)
        self._check(v)
        self._adjacent[u].add(v)
        if not self.directed:
            self._adjacent[v].add(u)

    def has_edge(self, u: int, v: int) -> bool:
        """Return whether the arc <u, v> or edge (u, v) exists."""
        self._check(u)
        self._check(v)
        return v in self._adjacent[u]

    def neighbors(self, v: int) -> list[int]:
        """Return the vertices adjacent from *v*, in ascending order."""
        self._check(v)
        return sorted(self._adjacent[v])

    def out_degree(self, v: int) -> int:
        self._check(v)
        return len(self._adjacent[v])

    def in_degree(self, v: int) -> int:
        self._check(v)
        if not self.directed:
            return len(self._adjacent[v])
        return sum(v in adjacent for adjacent in self._adjacent)

    def degree(self, v: int) -> int:
        """Return in + out degree for a directed graph, the degree otherwise."""
        if self.directed:
            return self.in_degree(v) + self.out_degree(v)
        return self.out_degree(v)


def _bfs(graph: Graph, start: int, visited: list[bool], order: list[int]) -> None:
    pending = LinkedQueue()
    order.append(start)
    visited[start] = True
    pending.enqueue(start)
    while not pending.is_empty():
        v = pending.dequeue()
        for w in graph.neighbors(v):
            if not visited[w]:
                order.append(w)
                visited[w] = True
                pending.enqueue(w)


def bfs_traverse(graph: Graph) -> list[int]:
    """Return the vertices in breadth-first order, covering every component."""
    visited = [False] * len(graph)
    order: list[int] = []
    for start in range(len(graph)):
        if not visited[start]:
            _bfs(graph, start, visited, order)
    return order


def _dfs(graph: Graph, v: int, visited: list[bool], order: list[int]) -> None:
    order.append(v)
    visited[v] = True
    for w in graph.neighbors(v):
        if not visited[w]:
            _dfs(graph, w, visited, order)


def dfs_traverse(graph: Graph) -> list[int]:
    """Return the vertices in depth-first order, covering every component."""
    visited = [False] * len(graph)
    order: list[int] = []
    for start in range(len(graph)):
        if not visited[start]:
            _dfs(graph, start, visited, order)
    return order


def bfs_min_distance(graph: Graph, source: int) -> tuple[list[float], list[int]]:
    """Return edge-count distances from *source* and each vertex's predecessor.

    Unreachable vertices have distance ``math.inf`` and predecessor -1.
    """
    graph._check(source)
    distances: list[float] = [math.inf] * len(graph)
    predecessors = [-1] * len(graph)
    visited = [False] * len(graph)
    distances[source] = 0
    visited[source] = True
    pending = LinkedQueue()
    pending.enqueue(source)
    while not pending.is_empty():
        u = pending.dequeue()
        for w in graph.neighbors(u):
            if not visited[w]:
                distances[w] = distances[u] + 1
                predecessors[w] = u
                visited[w] = True
                pending.enqueue(w)
    return distances, predecessors


def topological_sort(graph: Graph) -> list[int]:
    """Return a topological order of a directed graph.

    Raises ValueError if the graph is undirected or has a cycle.
    """
    if not graph.directed:
        raise ValueError("topological sort needs a directed graph")
    indegree = [graph.in_degree(v) for v in range(len(graph))]
    ready = LinkedStack()
    for v, count in enumerate(indegree):
        if count == 0:
            ready.push(v)
    order: list[int] = []
    while not ready.is_empty():
        v = ready.pop()
        order.append(v)
        for w in graph.neighbors(v):
            indegree[w] -= 1
            if indegree[w] == 0:
                ready.push(w)
    if len(order) < len(graph):
        raise ValueError("graph has a cycle")
    return order