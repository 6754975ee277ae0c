"""Disjoint-set (union-find) forest with path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the nodes ``0`` through ``n`` inclusive.

    One spare slot is kept so that both 0-based and 1-based node labels fit.
    Both union methods return ``True`` when two separate sets were joined and
    ``False`` when the nodes were already in the same set.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside the set")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``, hanging the lower-rank tree."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``, hanging the smaller tree."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        return True

    def component_size(self, node: int) -> int:
        """Return the number of nodes in the set holding ``node``."""
        return self._size[self.find(node)]