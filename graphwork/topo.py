"""Topological ordering of directed graphs and course scheduling."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class DirectedGraph:
    """A directed graph on the vertices ``0`` to ``vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.vertices = vertices
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``."""
        for node in (u, v):
            if not 0 <= node < self.vertices:
                raise IndexError(f"vertex {node} is outside 0..{self.vertices - 1}")
        self._adj[u].append(v)

    def topo_sort_dfs(self) -> list[int]:
        """Vertices in reverse order of depth-first finishing time."""
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._adj[root]))]
            while stack:
                node, pending = stack[-1]
                for neighbour in pending:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adj[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished

    def topo_sort_kahn(self) -> list[int]:
        """Vertices in Kahn's order; shorter than the graph when it has a cycle."""
        return _kahn(self.vertices, self._adj)

    def has_cycle(self) -> bool:
        """True if no topological order covers every vertex."""
        return len(self.topo_sort_kahn()) < self.vertices


def _kahn(n: int, adj: Sequence[Sequence[int]]) -> list[int]:
    in_degree = [0] * n
    for neighbours in adj:
        for v in neighbours:
            in_degree[v] += 1
    queue = deque(node for node in range(n) if in_degree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adj[node]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)
    return order


def _course_graph(n: int, prerequisites: Iterable[Sequence[int]]) -> list[list[int]]:
    if n < 0:
        raise ValueError("number of courses must be non-negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    for course, required in prerequisites:
        for node in (course, required):
            if not 0 <= node < n:
                raise IndexError(f"course {node} is outside 0..{n - 1}")
        adj[required].append(course)
    return adj


def can_finish_bruteforce(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """True if every course can be taken; pairs are ``(course, prerequisite)``."""
    adj = _course_graph(n, prerequisites)
    state = [0] * n  # 0 unseen, 1 on the current path, 2 done
    for root in range(n):
        if state[root]:
            continue
        state[root] = 1
        stack = [(root, iter(adj[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if state[neighbour] == 1:
                    return False
                if state[neighbour] == 0:
                    state[neighbour] = 1
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                state[node] = 2
                stack.pop()
    return True


def find_order(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take all courses, or an empty list if none exists."""
    order = _kahn(n, _course_graph(n, prerequisites))
    return order if len(order) == n else []