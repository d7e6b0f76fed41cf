"""Union-find over the integers 0..n."""

from __future__ import annotations

from typing import List


class DisjointSet:
    """Disjoint sets over the nodes 0..n, with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._parent: List[int] = list(range(n + 1))
        self._rank: List[int] = [0] * (n + 1)
        self._size: List[int] = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside 0..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Return the representative of the set holding node."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the lower-ranked root below the other."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the smaller set below the larger."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]