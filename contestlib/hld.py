"""Heavy-light decomposition for path-maximum queries over edge weights."""

from __future__ import annotations

from collections.abc import Iterable


class _MaxSegmentTree:
    """Point-assign, range-max segment tree; an empty range yields -1."""

    def __init__(self, values: list[int]) -> None:
        self._size = len(values)
        self._tree = [-1] * (2 * self._size)
        self._tree[self._size:] = values
        for i in reversed(range(1, self._size)):
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])

    def assign(self, position: int, value: int) -> None:
        i = position + self._size
        self._tree[i] = value
        i //= 2
        while i >= 1:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, left: int, right: int) -> int:
        """Maximum over the half-open range [left, right)."""
        best = -1
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                best = max(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = max(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


class HeavyLightDecomposition:
    """A weighted tree on nodes 0..n-1, rooted at 0.

    ``edges`` is a sequence of ``(u, v, cost)``; an edge is later referred to
    by its position in that sequence.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int, int]]) -> None:
        edges = list(edges)
        if n < 1:
            raise ValueError("a tree needs at least one node")
        if len(edges) != n - 1:
            raise ValueError("a tree on n nodes has exactly n - 1 edges")
        self._n = n
        adj: list[list[tuple[int, int, int]]] = [[] for _ in range(n)]
        for index, (u, v, cost) in enumerate(edges):
            self._check_node(u)
            self._check_node(v)
            adj[u].append((v, cost, index))
            adj[v].append((u, cost, index))

        parent = [-1] * n
        depth = [0] * n
        parent_cost = [-1] * n
        self._edge_child = [-1] * len(edges)
        seen = [False] * n
        seen[0] = True
        order: list[int] = []
        stack = [0]
        while stack:
            u = stack.pop()
            order.append(u)
            for v, cost, index in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    parent_cost[v] = cost
                    self._edge_child[index] = v
                    stack.append(v)
        if len(order) != n:
            raise ValueError("edges do not form a connected tree")

        size = [1] * n
        for u in reversed(order):
            if parent[u] >= 0:
                size[parent[u]] += size[u]

        children: list[list[int]] = [[] for _ in range(n)]
        for u in range(n):
            for v, _, index in adj[u]:
                if self._edge_child[index] == v and parent[v] == u and v not in children[u]:
                    children[u].append(v)

        heavy = [-1] * n
        for u in range(n):
            for v in children[u]:
                if heavy[u] == -1 or size[heavy[u]] < size[v]:
                    heavy[u] = v

        head = [0] * n
        pos = [0] * n
        base: list[int] = []
        stack = [0]
        while stack:
            u = stack.pop()
            pos[u] = len(base)
            base.append(parent_cost[u])
            for v in reversed(children[u]):
                if v != heavy[u]:
                    head[v] = v
                    stack.append(v)
            if heavy[u] != -1:
                head[heavy[u]] = head[u]
                stack.append(heavy[u])

        self._parent = parent
        self._depth = depth
        self._head = head
        self._pos = pos
        self._tree = _MaxSegmentTree(base)

    def _check_node(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"node {u} out of range")

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        self._check_node(u)
        self._check_node(v)
        head, parent, depth = self._head, self._parent, self._depth
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u = parent[head[u]]
            else:
                v = parent[head[v]]
        return u if depth[u] < depth[v] else v

    def update_edge(self, index: int, value: int) -> None:
        """Set the cost of the edge at position ``index``."""
        if not 0 <= index < len(self._edge_child):
            raise IndexError(f"edge {index} out of range")
        self._tree.assign(self._pos[self._edge_child[index]], value)

    def _query_up(self, u: int, ancestor: int) -> int:
        if u == ancestor:
            return 0
        best = -1
        while True:
            if self._head[u] == self._head[ancestor]:
                if u != ancestor:
                    best = max(best, self._tree.query(self._pos[ancestor] + 1, self._pos[u] + 1))
                return best
            top = self._head[u]
            best = max(best, self._tree.query(self._pos[top], self._pos[u] + 1))
            u = self._parent[top]

    def path_max(self, u: int, v: int) -> int:
        """Largest edge cost on the path from u to v.

        A one-sided or empty path contributes 0, so the result is never below 0.
        """
        ancestor = self.lca(u, v)
        return max(self._query_up(u, ancestor), self._query_up(v, ancestor))