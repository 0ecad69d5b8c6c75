import math

import pytest

from dsakit.graph import Edge, Graph, kruskal


def build(vertex_count, edges):
    graph = Graph(vertex_count)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


BFS_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (3, 5), (4, 5), (2, 6), (5, 6)]
DISCONNECTED_EDGES = [(0, 2), (0, 3), (2, 3), (1, 4), (5, 6)]
DIJKSTRA_EDGES = [
    (0, 1, 4),
    (0, 2, 8),
    (1, 3, 5),
    (1, 2, 2),
    (2, 3, 5),
    (2, 4, 9),
    (3, 4, 4),
]
PRIM_EDGES = [
    (0, 1, 4),
    (0, 2, 8),
    (1, 2, 2),
    (2, 3, 3),
    (1, 3, 6),
    (2, 4, 9),
    (3, 4, 5),
]
KRUSKAL_EDGES = [
    (0, 1, 1),
    (0, 2, 5),
    (2, 3, 10),
    (0, 3, 4),
    (1, 3, 3),
    (1, 2, 6),
    (3, 4, 7),
    (2, 4, 8),
    (4, 5, 2),
    (2, 5, 9),
    (3, 5, 6),
]


def test_bfs_sample():
    graph = build(7, BFS_EDGES)
    assert graph.bfs(0) == [0, 1, 2, 3, 4, 6, 5]


def test_dfs_sample():
    graph = build(4, [(0, 2), (2, 1), (1, 3)])
    assert graph.dfs(0) == [0, 2, 1, 3]


def test_traversals_of_disconnected_graph():
    graph = build(7, DISCONNECTED_EDGES)
    assert graph.dfs_all() == [0, 2, 3, 1, 4, 5, 6]
    assert graph.bfs_all() == [0, 2, 3, 1, 4, 5, 6]


def test_single_start_stays_in_component():
    graph = build(7, DISCONNECTED_EDGES)
    assert sorted(graph.bfs(0)) == [0, 2, 3]
    assert sorted(graph.dfs(5)) == [5, 6]


def test_all_traversals_visit_each_vertex_once():
    graph = build(7, BFS_EDGES)
    assert sorted(graph.bfs_all()) == list(range(7))
    assert sorted(graph.dfs_all()) == list(range(7))
    assert graph.dfs_all() == graph.dfs(0)


def test_dijkstra_sample():
    graph = build(5, DIJKSTRA_EDGES)
    assert graph.dijkstra(0) == [0, 4, 6, 9, 13]


def test_dijkstra_is_symmetric_for_undirected_graph():
    graph = build(5, DIJKSTRA_EDGES)
    table = [graph.dijkstra(source) for source in range(5)]
    for u in range(5):
        assert table[u][u] == 0
        for v in range(5):
            assert table[u][v] == table[v][u]


def test_dijkstra_unreachable_is_infinite():
    graph = build(7, [(u, v, 1) for u, v in DISCONNECTED_EDGES])
    distances = graph.dijkstra(0)
    assert distances[1] == math.inf
    assert distances[6] == math.inf


def test_prim_sample():
    graph = build(5, PRIM_EDGES)
    assert graph.prim() == [Edge(0, 1, 4), Edge(1, 2, 2), Edge(2, 3, 3), Edge(3, 4, 5)]


def test_kruskal_sample():
    assert kruskal(6, KRUSKAL_EDGES) == [
        Edge(0, 1, 1),
        Edge(4, 5, 2),
        Edge(1, 3, 3),
        Edge(0, 2, 5),
        Edge(3, 5, 6),
    ]


def test_prim_and_kruskal_agree_on_total_weight():
    for count, edges in ((5, PRIM_EDGES), (6, KRUSKAL_EDGES), (5, DIJKSTRA_EDGES)):
        prim_tree = build(count, edges).prim()
        kruskal_tree = kruskal(count, edges)
        assert len(prim_tree) == len(kruskal_tree) == count - 1
        assert sum(e.weight for e in prim_tree) == sum(e.weight for e in kruskal_tree)
        assert all(e.source <= e.dest for e in prim_tree + kruskal_tree)


def test_kruskal_accepts_edge_objects():
    edges = [Edge(*edge) for edge in KRUSKAL_EDGES]
    assert kruskal(6, edges) == kruskal(6, KRUSKAL_EDGES)


def test_spanning_trees_reject_disconnected_graphs():
    weighted = [(u, v, 1) for u, v in DISCONNECTED_EDGES]
    with pytest.raises(ValueError):
        build(7, weighted).prim()
    with pytest.raises(ValueError):
        kruskal(7, weighted)


def test_add_edge_rejects_bad_input():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(ValueError):
        graph.add_edge(0, 1, 0)
    with pytest.raises(ValueError):
        Graph(-1)


def test_kruskal_rejects_out_of_range_vertex():
    with pytest.raises(IndexError):
        kruskal(2, [(0, 2, 1)])


def test_normalized_puts_smaller_vertex_first():
    assert Edge(5, 2, 7).normalized() == Edge(2, 5, 7)