"""Minimum spanning tree weight by Prim's and Kruskal's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from graphwork.disjoint_set import DisjointSet


def prim_mst(vertices: int, adj: Sequence[Sequence[Sequence[int]]]) -> int:
    """Total weight of the spanning tree grown from node 0; ``adj[u]`` holds ``(v, weight)``."""
    if vertices <= 0:
        raise ValueError("graph must have at least one vertex")
    visited = [False] * vertices
    total = 0
    heap = [(0, 0)]
    while heap:
        weight, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += weight
        for v, edge_weight in adj[u]:
            if not visited[v]:
                heapq.heappush(heap, (edge_weight, v))
    return total


def _by_weight(edges: Iterable[Sequence[int]]) -> list[tuple[int, int, int]]:
    return sorted((tuple(edge) for edge in edges), key=lambda edge: edge[2])


def kruskal_bruteforce(vertices: int, edges: Iterable[Sequence[int]]) -> int:
    """Spanning forest weight from ``(u, v, weight)`` edges with a plain parent array."""
    parent = list(range(vertices))

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    total = 0
    for u, v, weight in _by_weight(edges):
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            total += weight
            parent[root_u] = root_v
    return total


def kruskal(vertices: int, edges: Iterable[Sequence[int]]) -> int:
    """Spanning forest weight from ``(u, v, weight)`` edges with union by rank."""
    if vertices < 0:
        raise ValueError("number of vertices must be non-negative")
    dsu = DisjointSet(vertices)
    total = 0
    for u, v, weight in _by_weight(edges):
        for node in (u, v):
            if not 0 <= node < vertices:
                raise IndexError(f"vertex {node} is outside 0..{vertices - 1}")
        if dsu.union_by_rank(u, v):
            total += weight
    return total