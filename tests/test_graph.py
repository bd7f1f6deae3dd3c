import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.graph import (
    MAX_VERTEX_NUM,
    Graph,
    bfs_min_distance,
    bfs_traverse,
    dfs_traverse,
    topological_sort,
)


@st.composite
def edge_sets(draw, directed):
    n = draw(st.integers(min_value=1, max_value=8))
    pairs = draw(
        st.sets(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)).filter(
                lambda e: e[0] != e[1]
            ),
            max_size=20,
        )
    )
    if not directed:
        pairs = {(min(u, v), max(u, v)) for u, v in pairs}
    return n, pairs


def build(n, edges, directed):
    graph = Graph(range(n), directed=directed)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_undirected_edges_are_symmetric():
    graph = build(3, [(0, 2)], directed=False)
    assert graph.has_edge(0, 2)
    assert graph.has_edge(2, 0)
    assert not graph.has_edge(0, 1)


def test_directed_edges_are_one_way():
    graph = build(3, [(0, 2)], directed=True)
    assert graph.has_edge(0, 2)
    assert not graph.has_edge(2, 0)


def test_neighbors_sorted():
    graph = build(5, [(0, 4), (0, 1), (0, 3)], directed=True)
    assert graph.neighbors(0) == sorted([4, 1, 3])


@given(edge_sets(directed=True))
def test_directed_degree_sums(data):
    n, edges = data
    graph = build(n, edges, directed=True)
    assert sum(graph.out_degree(v) for v in range(n)) == len(edges)
    assert sum(graph.in_degree(v) for v in range(n)) == len(edges)
    assert all(
        graph.degree(v) == graph.in_degree(v) + graph.out_degree(v) for v in range(n)
    )


@given(edge_sets(directed=False))
def test_undirected_degree_sums(data):
    n, edges = data
    graph = build(n, edges, directed=False)
    assert sum(graph.degree(v) for v in range(n)) == 2 * len(edges)
    assert all(
        graph.in_degree(v) == graph.out_degree(v) == graph.degree(v) for v in range(n)
    )


def test_degree_out_of_range():
    graph = Graph(range(2))
    with pytest.raises(IndexError):
        graph.degree(2)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)


def test_too_many_vertices():
    with pytest.raises(ValueError):
        Graph(range(MAX_VERTEX_NUM + 1))


def test_bfs_and_dfs_orders_on_small_tree():
    graph = build(4, [(0, 1), (0, 2), (1, 3)], directed=False)
    assert bfs_traverse(graph) == [0, 1, 2, 3]
    assert dfs_traverse(graph) == [0, 1, 3, 2]


@given(edge_sets(directed=False))
def test_traversals_visit_every_vertex_once(data):
    n, edges = data
    graph = build(n, edges, directed=False)
    for order in (bfs_traverse(graph), dfs_traverse(graph)):
        assert sorted(order) == list(range(n))
        assert order[0] == 0


@given(edge_sets(directed=False))
def test_bfs_min_distance_invariants(data):
    n, edges = data
    graph = build(n, edges, directed=False)
    distances, predecessors = bfs_min_distance(graph, 0)
    assert distances[0] == 0
    assert predecessors[0] == -1
    for u, v in edges:
        assert math.isinf(distances[u]) == math.isinf(distances[v])
        if not math.isinf(distances[u]):
            assert abs(distances[u] - distances[v]) <= 1
    for v in range(1, n):
        if math.isinf(distances[v]):
            assert predecessors[v] == -1
        else:
            p = predecessors[v]
            assert graph.has_edge(p, v)
            assert distances[p] == distances[v] - 1


def test_bfs_min_distance_bad_source():
    with pytest.raises(IndexError):
        bfs_min_distance(Graph(range(3)), 3)


@given(edge_sets(directed=True))
def test_topological_sort_respects_arcs(data):
    n, edges = data
    acyclic = {(min(u, v), max(u, v)) for u, v in edges}
    graph = build(n, acyclic, directed=True)
    order = topological_sort(graph)
    assert sorted(order) == list(range(n))
    position = {v: i for i, v in enumerate(order)}
    assert all(position[u] < position[v] for u, v in acyclic)


def test_topological_sort_detects_cycle():
    graph = build(3, [(0, 1), (1, 2), (2, 0)], directed=True)
    with pytest.raises(ValueError):
        topological_sort(graph)


def test_topological_sort_needs_directed_graph():
    with pytest.raises(ValueError):
        topological_sort(Graph(range(2)))