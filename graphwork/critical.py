"""Bridges, articulation points and strongly connected components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def critical_connections(n: int, connections: Iterable[Sequence[int]]) -> list[list[int]]:
    """Edges whose removal disconnects the graph, as ``[parent, child]`` in DFS order."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in connections:
        adj[u].append(v)
        adj[v].append(u)

    tin = [0] * n
    low = [0] * n
    visited = [False] * n
    timer = 1
    bridges: list[list[int]] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, pending = stack[-1]
            for neighbour in pending:
                if neighbour == parent:
                    continue
                if not visited[neighbour]:
                    visited[neighbour] = True
                    tin[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                low[node] = min(low[node], tin[neighbour])
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[node])
                    if low[node] > tin[above]:
                        bridges.append([above, node])
    return bridges


def articulation_points(n: int, adj: Sequence[Sequence[int]]) -> list[int]:
    """Vertices whose removal disconnects the graph, ascending; ``[-1]`` if none."""
    tin = [0] * n
    low = [0] * n
    visited = [False] * n
    children = [0] * n
    marked = [False] * n
    timer = 1

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, pending = stack[-1]
            for neighbour in pending:
                if neighbour == parent:
                    continue
                if not visited[neighbour]:
                    visited[neighbour] = True
                    tin[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                low[node] = min(low[node], tin[neighbour])
            else:
                stack.pop()
                if parent == -1:
                    if children[node] > 1:
                        marked[node] = True
                    continue
                low[parent] = min(low[parent], low[node])
                grandparent = stack[-1][1]
                if low[node] >= tin[parent] and grandparent != -1:
                    marked[parent] = True
                children[parent] += 1

    points = [node for node in range(n) if marked[node]]
    return points or [-1]


def count_strongly_connected(vertices: int, adj: Sequence[Sequence[int]]) -> int:
    """Number of strongly connected components, by Kosaraju's algorithm."""
    visited = [False] * vertices
    finished: list[int] = []
    for root in range(vertices):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)

    reversed_adj: list[list[int]] = [[] for _ in range(vertices)]
    for u in range(vertices):
        for v in adj[u]:
            reversed_adj[v].append(u)

    visited = [False] * vertices
    components = 0
    for node in reversed(finished):
        if visited[node]:
            continue
        components += 1
        visited[node] = True
        pending = [node]
        while pending:
            current = pending.pop()
            for neighbour in reversed_adj[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
    return components