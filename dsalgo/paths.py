"""Weighted shortest paths and minimum spanning trees over adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INF = 99999

Matrix = Sequence[Sequence[int]]
Edge = tuple[int, int, int]


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range")


def dijkstra(matrix: Matrix, source: int) -> tuple[list[int], list[int]]:
    """Return shortest distances from *source* and each vertex's predecessor.

    ``INF`` in the matrix means no edge; unreachable vertices keep ``INF``
    and predecessor -1.
    """
    n = _size(matrix)
    _check_vertex(source, n)
    row = matrix[source]
    dist = list(row)
    path = [source if weight < INF and v != source else -1 for v, weight in enumerate(row)]
    final = [False] * n
    final[source] = True
    dist[source] = 0
    for _ in range(n - 1):
        k = min(
            (v for v in range(n) if not final[v] and dist[v] < INF),
            key=dist.__getitem__,
            default=None,
        )
        if k is None:
            break
        final[k] = True
        for w, weight in enumerate(matrix[k]):
            if not final[w] and weight < INF and dist[k] + weight < dist[w]:
                dist[w] = dist[k] + weight
                path[w] = k
    return dist, path


def trace_path(predecessors: Sequence[int], target: int) -> list[int]:
    """Follow predecessors back from *target*; return the path start first."""
    _check_vertex(target, len(predecessors))
    route = [target]
    while predecessors[target] != -1:
        target = predecessors[target]
        route.append(target)
        if len(route) > len(predecessors):
            raise ValueError("predecessor chain contains a cycle")
    route.reverse()
    return route


def floyd(matrix: Matrix) -> tuple[list[list[int]], list[list[int]]]:
    """Return all-pairs shortest distances and predecessor matrix.

    ``predecessors[i][j]`` is the vertex before *j* on the path from *i*,
    or -1 where there is none.
    """
    n = _size(matrix)
    dist = [list(row) for row in matrix]
    path = [
        [i if weight != INF and i != j else -1 for j, weight in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for k in range(n):
        for i in range(n):
            through = dist[i][k]
            if through == INF:
                continue
            for j in range(n):
                onward = dist[k][j]
                if onward != INF and through + onward < dist[i][j]:
                    dist[i][j] = through + onward
                    path[i][j] = path[k][j]
    return dist, path


def floyd_path(predecessors: Sequence[Sequence[int]], u: int, v: int) -> list[int]:
    """Return the path from *u* to *v*; raise ValueError if there is none."""
    n = len(predecessors)
    _check_vertex(u, n)
    _check_vertex(v, n)
    if predecessors[u][v] == -1:
        raise ValueError(f"no path from {u} to {v}")
    route = [v]
    current = v
    while current != u:
        current = predecessors[u][current]
        if current == -1 or len(route) > n:
            raise ValueError(f"broken predecessor chain from {u} to {v}")
        route.append(current)
    route.reverse()
    return route


def prim(matrix: Matrix, start: int = 0) -> list[Edge]:
    """Return the edges (u, v, weight) of a minimum spanning tree grown from *start*.

    Raises ValueError if the graph is not connected.
    """
    n = _size(matrix)
    _check_vertex(start, n)
    in_tree = [False] * n
    in_tree[start] = True
    cost = list(matrix[start])
    nearest = [start] * n
    tree: list[Edge] = []
    for _ in range(n - 1):
        v = min(
            (w for w in range(n) if not in_tree[w] and cost[w] < INF),
            key=cost.__getitem__,
            default=None,
        )
        if v is None:
            raise ValueError("graph is not connected")
        tree.append((nearest[v], v, cost[v]))
        in_tree[v] = True
        for w, weight in enumerate(matrix[v]):
            if not in_tree[w] and weight < cost[w]:
                cost[w] = weight
                nearest[w] = v
    return tree


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, cheapest first.

    Raises ValueError if the edges do not connect every vertex.
    """
    parent = list(range(vertex_count))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    tree: list[Edge] = []
    components = vertex_count
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if components <= 1:
            break
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_u] = root_v
            tree.append((u, v, weight))
            components -= 1
    if components > 1:
        raise ValueError("graph is not connected")
    return tree