"""Counting the shortest routes between the first and last node of a graph."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7


def _build_adjacency(n: int, roads: Iterable[Sequence[int]]) -> list[list[tuple[int, int]]]:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in roads:
        adj[u].append((v, weight))
        adj[v].append((u, weight))
    return adj


def count_shortest_paths_bruteforce(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest routes from node 0 to node n-1 by exhaustive search, mod 1e9+7."""
    if n <= 0:
        raise ValueError("graph must have at least one node")
    adj = _build_adjacency(n, roads)
    dest = n - 1
    visited = [False] * n
    min_time = float("inf")
    count = 0

    def explore(node: int, time: int) -> None:
        nonlocal min_time, count
        if time > min_time:
            return
        if node == dest:
            if time < min_time:
                min_time = time
                count = 1
            else:
                count += 1
            return
        visited[node] = True
        for neighbour, weight in adj[node]:
            if not visited[neighbour]:
                explore(neighbour, time + weight)
        visited[node] = False

    explore(0, 0)
    return count % MOD


def count_shortest_paths(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest routes from node 0 to node n-1 by Dijkstra, mod 1e9+7."""
    if n <= 0:
        raise ValueError("graph must have at least one node")
    adj = _build_adjacency(n, roads)
    dist = [float("inf")] * n
    ways = [0] * n
    dist[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        current, u = heapq.heappop(heap)
        if current > dist[u]:
            continue
        for v, weight in adj[u]:
            new_time = current + weight
            if new_time < dist[v]:
                dist[v] = new_time
                ways[v] = ways[u]
                heapq.heappush(heap, (new_time, v))
            elif new_time == dist[v]:
                ways[v] = (ways[v] + ways[u]) % MOD
    return ways[n - 1]