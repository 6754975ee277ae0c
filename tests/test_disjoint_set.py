import pytest

from graphwork.disjoint_set import DisjointSet


def test_every_node_starts_alone():
    ds = DisjointSet(4)
    assert [ds.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert all(ds.component_size(i) == 1 for i in range(5))


def test_union_by_size_reports_whether_joined():
    ds = DisjointSet(5)
    assert ds.union_by_size(0, 1) is True
    assert ds.union_by_size(1, 0) is False
    assert ds.find(0) == ds.find(1)


def test_union_by_size_hangs_smaller_tree():
    ds = DisjointSet(5)
    ds.union_by_size(1, 2)
    ds.union_by_size(1, 3)
    ds.union_by_size(4, 1)
    assert ds.find(4) == ds.find(1)
    assert ds.find(4) == 1
    assert ds.component_size(4) == 4


def test_union_by_rank_tie_keeps_first_root():
    ds = DisjointSet(3)
    assert ds.union_by_rank(1, 2) is True
    assert ds.find(2) == 1
    assert ds.union_by_rank(2, 1) is False


def test_union_by_rank_lower_rank_goes_under_higher():
    ds = DisjointSet(5)
    ds.union_by_rank(0, 1)
    ds.union_by_rank(3, 0)
    assert ds.find(3) == 0
    assert ds.component_size(3) == 3


def test_chain_connects_transitively():
    ds = DisjointSet(6)
    for u, v in [(0, 1), (1, 2), (2, 3)]:
        ds.union_by_size(u, v)
    assert ds.find(0) == ds.find(3)
    assert ds.find(4) != ds.find(0)
    assert ds.component_size(2) == 4


def test_out_of_range_node_raises():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.find(-1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)