import pytest

from graphwork.cycles import (
    has_cycle_bfs,
    has_cycle_from_list,
    has_cycle_from_matrix,
    has_cycle_matrix,
)


def _to_matrix(adj):
    matrix = [[0] * len(adj) for _ in adj]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            matrix[u][v] = 1
    return matrix


STAR = [[1, 2], [0], [0]]
PATH = [[1], [0, 2], [1, 3], [2]]
TRIANGLE = [[1, 2], [0, 2], [0, 1]]
SQUARE_AND_TAIL = [[1, 3], [0, 2], [1, 3], [0, 2, 4], [3]]
FOREST_WITH_CYCLE = [[1], [0], [3, 4], [2, 4], [2, 3]]
EMPTY_EDGES = [[], [], []]

GRAPHS = [STAR, PATH, TRIANGLE, SQUARE_AND_TAIL, FOREST_WITH_CYCLE, EMPTY_EDGES]


def test_source_examples_without_cycles():
    assert has_cycle_bfs(STAR) is False
    assert has_cycle_matrix(_to_matrix(STAR)) is False
    assert has_cycle_bfs(PATH) is False
    assert has_cycle_matrix(_to_matrix(PATH)) is False


def test_triangle_has_cycle():
    assert has_cycle_bfs(TRIANGLE) is True
    assert has_cycle_matrix(_to_matrix(TRIANGLE)) is True
    assert has_cycle_from_list(TRIANGLE, 0) is True
    assert has_cycle_from_matrix(_to_matrix(TRIANGLE), 0) is True


@pytest.mark.parametrize("adj", GRAPHS)
def test_matrix_and_list_agree(adj):
    assert has_cycle_matrix(_to_matrix(adj)) == has_cycle_bfs(adj)


@pytest.mark.parametrize("adj", GRAPHS)
def test_start_variants_agree(adj):
    matrix = _to_matrix(adj)
    for start in range(len(adj)):
        assert has_cycle_from_matrix(matrix, start) == has_cycle_from_list(adj, start)


def test_cycle_in_other_component_found_only_from_all_nodes():
    assert has_cycle_from_list(FOREST_WITH_CYCLE, 0) is False
    assert has_cycle_from_list(FOREST_WITH_CYCLE, 2) is True
    assert has_cycle_bfs(FOREST_WITH_CYCLE) is True
    assert has_cycle_matrix(_to_matrix(FOREST_WITH_CYCLE)) is True


def test_empty_graph_has_no_cycle():
    assert has_cycle_bfs([]) is False
    assert has_cycle_matrix([]) is False


def test_self_loop_in_matrix_is_cycle():
    assert has_cycle_matrix([[1]]) is True


def test_long_path_does_not_overflow_stack():
    n = 5000
    adj = [[] for _ in range(n)]
    for i in range(n - 1):
        adj[i].append(i + 1)
        adj[i + 1].append(i)
    assert has_cycle_from_list(adj, 0) is False
    adj[0].append(n - 1)
    adj[n - 1].append(0)
    assert has_cycle_from_list(adj, 0) is True


def test_start_out_of_range():
    with pytest.raises(IndexError):
        has_cycle_from_list(PATH, 4)
    with pytest.raises(IndexError):
        has_cycle_from_matrix(_to_matrix(PATH), -1)