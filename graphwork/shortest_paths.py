"""Single-source and all-pairs shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from graphwork.topo import DirectedGraph

INF = 10**9
"""Distance reported for nodes that cannot be reached."""

_MODULUS = 100_000


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def shortest_path_dag(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Distances from node 0 in a weighted DAG of ``(u, v, weight)`` edges; -1 if unreachable."""
    if n <= 0:
        raise ValueError("graph must have at least one node")
    graph = DirectedGraph(n)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        graph.add_edge(u, v)
        adj[u].append((v, weight))

    dist: list[float] = [math.inf] * n
    dist[0] = 0
    for node in graph.topo_sort_dfs():
        if dist[node] == math.inf:
            continue
        for v, weight in adj[node]:
            if dist[node] + weight < dist[v]:
                dist[v] = dist[node] + weight
    return [-1 if d == math.inf else int(d) for d in dist]


def dijkstra(adj: Sequence[Sequence[Sequence[int]]], source: int) -> list[int]:
    """Distances from ``source``; ``adj[u]`` holds ``(v, weight)`` pairs. Unreachable is ``INF``."""
    if not 0 <= source < len(adj):
        raise IndexError(f"source {source} is outside 0..{len(adj) - 1}")
    dist = [INF] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        dis, node = heapq.heappop(heap)
        if dis > dist[node]:
            continue
        for adj_node, weight in adj[node]:
            if dis + weight < dist[adj_node]:
                dist[adj_node] = dis + weight
                heapq.heappush(heap, (dist[adj_node], adj_node))
    return dist


def cheapest_flight(n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int) -> int:
    """Cheapest price from ``src`` to ``dst`` with at most ``k`` stops between; -1 if none."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, price in flights:
        adj[u].append((v, price))

    dist = [INF] * n
    dist[src] = 0
    queue = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for v, price in adj[node]:
            if cost + price < dist[v]:
                dist[v] = cost + price
                queue.append((stops + 1, v, cost + price))
    return -1 if dist[dst] == INF else dist[dst]


def minimum_multiplications(arr: Iterable[int], start: int, end: int) -> int:
    """Fewest multiplications by members of ``arr`` (mod 100000) taking start to end; -1 if none."""
    if not 0 <= start < _MODULUS:
        raise ValueError(f"start must lie in 0..{_MODULUS - 1}")
    factors = list(arr)
    dist = {start: 0}
    queue = deque([(start, 0)])
    while queue:
        node, steps = queue.popleft()
        for factor in factors:
            num = (factor * node) % _MODULUS
            if steps + 1 < dist.get(num, INF):
                dist[num] = steps + 1
                if num == end:
                    return steps + 1
                queue.append((num, steps + 1))
    return -1


def bellman_ford(vertices: int, src: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Distances from ``src`` over directed ``(u, v, weight)`` edges; unreachable is ``INF``.

    Raises NegativeCycleError if a negative cycle is reachable from ``src``.
    """
    edge_list = [tuple(edge) for edge in edges]
    dist = [INF] * vertices
    dist[src] = 0
    for _ in range(vertices - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    if any(dist[u] != INF and dist[u] + weight < dist[v] for u, v, weight in edge_list):
        raise NegativeCycleError("graph contains a negative cycle")
    return dist


def _relax_all_pairs(dist: list[list[float]]) -> None:
    for row_k in list(dist):
        pass
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            if through >= INF:
                continue
            for j, via in enumerate(row_k):
                if via < INF and through + via < row[j]:
                    row[j] = through + via


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; -1 off the diagonal means no edge, and no path in the result."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    dist = [
        [INF if value == -1 and i != j else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    _relax_all_pairs(dist)
    return [[-1 if value == INF else value for value in row] for row in dist]


def find_the_city(n: int, edges: Iterable[Sequence[int]], distance_threshold: int) -> int:
    """City reaching the fewest others within the threshold; the greatest index on ties."""
    dist = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, v, weight in edges:
        dist[u][v] = weight
        dist[v][u] = weight
    _relax_all_pairs(dist)
    if n == 0:
        return -1
    reach = [
        sum(1 for j, d in enumerate(row) if j != i and d <= distance_threshold)
        for i, row in enumerate(dist)
    ]
    return min(range(n), key=lambda city: (reach[city], -city))