import pytest

from graphwork.mst import kruskal, kruskal_bruteforce, prim_mst

SOURCE_EDGES = [[0, 1, 2], [0, 3, 6], [1, 2, 3], [1, 3, 8], [1, 4, 5], [4, 2, 7]]

GRAPHS = [
    (5, SOURCE_EDGES),
    (4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1), (0, 2, 2)]),
    (4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]),
    (3, [(0, 1, 7), (1, 2, 7), (0, 2, 7)]),
]


def _adjacency(vertices, edges):
    adj = [[] for _ in range(vertices)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def test_kruskal_source_example():
    assert kruskal(5, SOURCE_EDGES) == 16


@pytest.mark.parametrize("vertices, edges", GRAPHS)
def test_all_algorithms_agree(vertices, edges):
    expected = kruskal(vertices, edges)
    assert kruskal_bruteforce(vertices, edges) == expected
    assert prim_mst(vertices, _adjacency(vertices, edges)) == expected


def test_kruskal_does_not_reorder_input():
    edges = [list(edge) for edge in SOURCE_EDGES]
    kruskal(5, edges)
    kruskal_bruteforce(5, edges)
    assert edges == SOURCE_EDGES


def test_tree_weight_is_sum_of_edges():
    edges = [(0, 1, 3), (1, 2, 9), (1, 3, 4)]
    total = sum(w for _, _, w in edges)
    assert kruskal(4, edges) == total
    assert kruskal_bruteforce(4, edges) == total
    assert prim_mst(4, _adjacency(4, edges)) == total


def test_disconnected_graph_forest_versus_prim_component():
    edges = [(0, 1, 3), (2, 3, 4)]
    assert kruskal(4, edges) == edges[0][2] + edges[1][2]
    assert kruskal_bruteforce(4, edges) == edges[0][2] + edges[1][2]
    assert prim_mst(4, _adjacency(4, edges)) == edges[0][2]


def test_prim_single_vertex():
    assert prim_mst(1, [[]]) == 0


def test_mst_not_heavier_than_any_spanning_path():
    vertices, edges = GRAPHS[2]
    path_weight = 10 + 15 + 4
    assert kruskal(vertices, edges) <= path_weight


def test_prim_rejects_empty_graph():
    with pytest.raises(ValueError):
        prim_mst(0, [])


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(IndexError):
        kruskal(2, [(0, 5, 1)])