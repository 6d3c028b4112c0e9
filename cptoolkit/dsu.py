"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DSU:
    """Disjoint sets over the elements ``0 .. n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of elements must be non-negative, got {n}")
        self.n = n
        self.parent = list(range(n))
        self.rank = [1] * n

    def _check(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"element {u} outside 0..{self.n - 1}")

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        self._check(u)
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if already joined."""
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self.rank[v] < self.rank[u]:
            u, v = v, u
        self.parent[u] = v
        self.rank[v] += self.rank[u]
        return True