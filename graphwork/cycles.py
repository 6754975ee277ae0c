"""Cycle detection in undirected graphs, by adjacency matrix or adjacency list."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

Matrix = Sequence[Sequence[int]]
AdjacencyList = Sequence[Sequence[int]]


def _matrix_neighbours(adj_matrix: Matrix) -> Callable[[int], Iterable[int]]:
    def neighbours(node: int) -> Iterable[int]:
        return (v for v, edge in enumerate(adj_matrix[node]) if edge == 1)

    return neighbours


def _list_neighbours(adj: AdjacencyList) -> Callable[[int], Iterable[int]]:
    def neighbours(node: int) -> Iterable[int]:
        return iter(adj[node])

    return neighbours


def _check_start(start: int, size: int) -> None:
    if not 0 <= start < size:
        raise IndexError(f"start node {start} is outside 0..{size - 1}")


def _dfs_finds_cycle(
    start: int,
    neighbours: Callable[[int], Iterable[int]],
    visited: list[bool],
) -> bool:
    """Depth-first search from ``start``; a visited non-parent neighbour is a cycle."""
    visited[start] = True
    stack = [(start, -1, iter(neighbours(start)))]
    while stack:
        node, parent, pending = stack[-1]
        for neighbour in pending:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append((neighbour, node, iter(neighbours(neighbour))))
                break
            if neighbour != parent:
                return True
        else:
            stack.pop()
    return False


def _bfs_finds_cycle(start: int, adj: AdjacencyList, visited: list[bool]) -> bool:
    visited[start] = True
    queue = deque([(start, -1)])
    while queue:
        node, parent = queue.popleft()
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append((neighbour, node))
            elif neighbour != parent:
                return True
    return False


def has_cycle_matrix(adj_matrix: Matrix) -> bool:
    """True if any component of the graph given as a 0/1 matrix has a cycle."""
    visited = [False] * len(adj_matrix)
    neighbours = _matrix_neighbours(adj_matrix)
    return any(
        not visited[node] and _dfs_finds_cycle(node, neighbours, visited)
        for node in range(len(adj_matrix))
    )


def has_cycle_bfs(adj: AdjacencyList) -> bool:
    """True if any component of the graph given as adjacency lists has a cycle."""
    visited = [False] * len(adj)
    return any(
        not visited[node] and _bfs_finds_cycle(node, adj, visited)
        for node in range(len(adj))
    )


def has_cycle_from_matrix(adj_matrix: Matrix, start: int) -> bool:
    """True if the component of ``start`` in a 0/1 matrix graph has a cycle."""
    _check_start(start, len(adj_matrix))
    visited = [False] * len(adj_matrix)
    return _dfs_finds_cycle(start, _matrix_neighbours(adj_matrix), visited)


def has_cycle_from_list(adj: AdjacencyList, start: int) -> bool:
    """True if the component of ``start`` in an adjacency-list graph has a cycle."""
    _check_start(start, len(adj))
    visited = [False] * len(adj)
    return _dfs_finds_cycle(start, _list_neighbours(adj), visited)