"""Maximum flow by Dinic's blocking-flow algorithm."""

from __future__ import annotations

from collections import deque


class Dinic:
    """A flow network on nodes 0..n-1.

    Flow pushed by ``max_flow`` stays in the network, so a later call only
    adds what can still be pushed.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a network needs at least one node")
        self._n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._to: list[int] = []
        self._cap: list[int] = []

    def _check_node(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"node {u} out of range")

    def _check_edge(self, u: int, v: int, cap: int) -> None:
        self._check_node(u)
        self._check_node(v)
        if cap < 0:
            raise ValueError("capacity must not be negative")

    def _push_pair(self, u: int, v: int, forward: int, backward: int) -> None:
        self._adj[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(forward)
        self._adj[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(backward)

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge u -> v; a self loop is ignored."""
        self._check_edge(u, v, cap)
        if u != v:
            self._push_pair(u, v, cap, 0)

    def add_undirected_edge(self, u: int, v: int, cap: int) -> None:
        """Add an edge usable in both directions up to ``cap``; a self loop is ignored."""
        self._check_edge(u, v, cap)
        if u != v:
            self._push_pair(u, v, cap, cap)

    def _levels(self, source: int, sink: int) -> list[int] | None:
        level = [-1] * self._n
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                v = self._to[e]
                if level[v] < 0 and self._cap[e] > 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level if level[sink] >= 0 else None

    def _augment(self, source: int, sink: int, level: list[int], it: list[int]) -> int:
        to, cap, adj = self._to, self._cap, self._adj
        path: list[int] = []
        u = source
        while u != sink:
            edges = adj[u]
            advanced = False
            while it[u] < len(edges):
                e = edges[it[u]]
                v = to[e]
                if cap[e] > 0 and level[v] == level[u] + 1:
                    path.append(e)
                    u = v
                    advanced = True
                    break
                it[u] += 1
            if advanced:
                continue
            level[u] = -1
            if not path:
                return 0
            e = path.pop()
            u = to[e ^ 1]
            it[u] += 1
        pushed = min(cap[e] for e in path)
        for e in path:
            cap[e] -= pushed
            cap[e ^ 1] += pushed
        return pushed

    def max_flow(self, source: int, sink: int) -> int:
        """Push as much flow as possible from source to sink and return it."""
        self._check_node(source)
        self._check_node(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while (level := self._levels(source, sink)) is not None:
            it = [0] * self._n
            while pushed := self._augment(source, sink, level, it):
                total += pushed
        return total