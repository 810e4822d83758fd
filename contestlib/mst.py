"""Disjoint sets and Kruskal's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union-find over 0..n-1 with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n
        self._members = [1] * n

    def find(self, u: int) -> int:
        """Representative of the set holding u."""
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of u and v; False if they were already one set."""
        up, vp = self.find(u), self.find(v)
        if up == vp:
            return False
        if self._rank[up] < self._rank[vp]:
            up, vp = vp, up
        self._parent[vp] = up
        self._members[up] += self._members[vp]
        if self._rank[up] == self._rank[vp]:
            self._rank[up] += 1
        return True

    def size(self, u: int) -> int:
        """Number of elements in the set holding u."""
        return self._members[self.find(u)]


def minimum_spanning_tree(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int, int]]]:
    """Total cost and edges of a minimum spanning tree on nodes 0..n-1.

    Raises ValueError if the graph is not connected.
    """
    if n < 1:
        raise ValueError("graph has no nodes")
    sets = DisjointSet(n)
    chosen = [(u, v, w) for u, v, w in sorted(edges, key=lambda e: e[2]) if sets.union(u, v)]
    if sets.size(0) != n:
        raise ValueError("graph is not connected")
    return sum(w for _, _, w in chosen), chosen