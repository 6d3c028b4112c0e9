"""Undirected graph with edge costs, and a grid bounds check."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

DIRECTIONS = (-1, 0, 1, 0, -1)
"""Consecutive pairs give the four orthogonal steps."""

MOVES = ((-1, 0), (0, -1), (0, 1), (1, 0))


class Graph:
    """Undirected graph; ``add`` takes 1-based labels, storage is 0-based."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of vertices must be non-negative, got {n}")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.cost: list[dict[int, Any]] = [{} for _ in range(n)]
        self.weight = [0] * n
        self.visited = [False] * n

    def add(self, u: int, v: int, cost: Any = None) -> None:
        """Add the edge between the 1-based vertices ``u`` and ``v``."""
        u -= 1
        v -= 1
        for w in (u, v):
            if not 0 <= w < self.n:
                raise IndexError(f"vertex {w + 1} outside 1..{self.n}")
        self.adj[u].append(v)
        self.adj[v].append(u)
        if cost is not None:
            self.cost[u][v] = cost
            self.cost[v][u] = cost

    def dfs(self, u: int) -> list[int]:
        """Mark everything reachable from the 0-based vertex ``u``; return new vertices in visit order."""
        if not 0 <= u < self.n:
            raise IndexError(f"vertex index {u} outside 0..{self.n - 1}")
        self.visited[u] = True
        order = [u]
        stack = [iter(self.adj[u])]
        while stack:
            for w in stack[-1]:
                if not self.visited[w]:
                    self.visited[w] = True
                    order.append(w)
                    stack.append(iter(self.adj[w]))
                    break
            else:
                stack.pop()
        return order


def in_grid(x: int, y: int, grid: Sequence[Sequence[Any]]) -> bool:
    """Return whether ``(x, y)`` indexes a cell of the rectangular ``grid``."""
    if not grid:
        return False
    return 0 <= x < len(grid) and 0 <= y < len(grid[0])