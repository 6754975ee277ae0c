"""Connected-component problems: linking a network and removing stones."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from graphwork.disjoint_set import DisjointSet

_COLUMN_OFFSET = 10_000
_STONE_SLOTS = 20_000


def _checked_edges(n: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    if n < 0:
        raise ValueError("number of nodes must be non-negative")
    checked = []
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < n:
                raise IndexError(f"node {node} is outside 0..{n - 1}")
        checked.append((u, v))
    return checked


def _connections_needed(n: int, edges: Iterable[Sequence[int]]) -> int:
    dsu = DisjointSet(n)
    extra = sum(1 for u, v in _checked_edges(n, edges) if not dsu.union_by_size(u, v))
    components = sum(1 for node in range(n) if dsu.find(node) == node)
    needed = components - 1
    return needed if extra >= needed else -1


def make_connected_bruteforce(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Cables to move so all n computers connect, or -1 if too few spare cables."""
    return _connections_needed(n, edges)


def make_connected(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Cables to move so all n computers connect, or -1 if too few spare cables."""
    return _connections_needed(n, edges)


def remove_stones_bruteforce(stones: Sequence[Sequence[int]]) -> int:
    """Most stones removable when a stone sharing a row or column remains.

    Builds the graph of stones sharing a row or column and counts its
    components by depth-first search.
    """
    stones = [tuple(stone) for stone in stones]
    adjacency: list[list[int]] = [[] for _ in stones]
    for i, (row_i, col_i) in enumerate(stones):
        for j in range(i + 1, len(stones)):
            row_j, col_j = stones[j]
            if row_i == row_j or col_i == col_j:
                adjacency[i].append(j)
                adjacency[j].append(i)

    visited = [False] * len(stones)
    components = 0
    for start in range(len(stones)):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return len(stones) - components


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Most stones removable, joining each stone's row and column in a disjoint set.

    Rows and columns must lie in ``0..9999``.
    """
    dsu = DisjointSet(_STONE_SLOTS)
    stones = [tuple(stone) for stone in stones]
    for row, col in stones:
        if not (0 <= row < _COLUMN_OFFSET and 0 <= col < _COLUMN_OFFSET):
            raise ValueError(f"stone ({row}, {col}) lies outside 0..{_COLUMN_OFFSET - 1}")
        dsu.union_by_size(row, col + _COLUMN_OFFSET)
    roots = {dsu.find(row) for row, _ in stones}
    return len(stones) - len(roots)