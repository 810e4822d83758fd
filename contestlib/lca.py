"""Rooted tree with binary-lifting ancestor queries."""

from __future__ import annotations

from collections.abc import Iterable


class RootedTree:
    """An unweighted tree on nodes 0..n-1, rooted at 0."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        self._n = n
        adj: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            self._check_node(u)
            self._check_node(v)
            adj[u].append(v)
            adj[v].append(u)

        parent = [-1] * n
        depth = [0] * n
        seen = [False] * n
        seen[0] = True
        order: list[int] = []
        stack = [0]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)
        if len(order) != n:
            raise ValueError("edges do not connect every node")

        size = [1] * n
        for u in reversed(order):
            if parent[u] >= 0:
                size[parent[u]] += size[u]

        self._depth = depth
        self._size = size
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([-1 if p == -1 else prev[p] for p in prev])

    def _check_node(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"node {u} out of range")

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of a and b."""
        self._check_node(a)
        self._check_node(b)
        if self._depth[a] > self._depth[b]:
            a, b = b, a
        b = self.kth_ancestor(self._depth[b] - self._depth[a], b)
        if a == b:
            return a
        for level in reversed(self._up):
            if level[a] != level[b]:
                a, b = level[a], level[b]
        return self._up[0][a]

    def is_ancestor(self, u: int, v: int) -> bool:
        """True if u lies on the path from v to the root (u itself counts)."""
        self._check_node(u)
        self._check_node(v)
        if self._depth[u] > self._depth[v]:
            return False
        return self.kth_ancestor(self._depth[v] - self._depth[u], v) == u

    def kth_ancestor(self, k: int, u: int) -> int:
        """Walk k steps towards the root from u.

        Each power-of-two jump that would pass the root is skipped.
        """
        if k < 0:
            raise ValueError("k must not be negative")
        self._check_node(u)
        for i, level in enumerate(self._up):
            if (k >> i) & 1 and level[u] != -1:
                u = level[u]
        return u

    def subtree_size(self, u: int) -> int:
        """Number of nodes in the subtree of u, u included."""
        self._check_node(u)
        return self._size[u]

    def equidistant_count(self, u: int, v: int) -> int:
        """Number of nodes at equal distance from u and v."""
        if u == v:
            return self._n
        ancestor = self.lca(u, v)
        du, dv = self._depth[u], self._depth[v]
        gap = du + dv - 2 * self._depth[ancestor] - 1
        if gap % 2 == 0:
            return 0
        half = gap >> 1
        if du == dv:
            left = self.kth_ancestor(half, u)
            right = self.kth_ancestor(half, v)
            return self._n - self._size[left] - self._size[right]
        deeper = u if du > dv else v
        middle = self.kth_ancestor(half + 1, deeper)
        below = self.kth_ancestor(half, deeper)
        return self._size[middle] - self._size[below]