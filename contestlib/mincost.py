"""Minimum-cost maximum flow by successive shortest paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence


class MinCostFlow:
    """A flow network on nodes 0..n-1 whose edges carry a cost per unit.

    Costs may be negative as long as the network has no negative cycle.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a network needs at least one node")
        self._n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._to: list[int] = []
        self._cap: list[int] = []
        self._cost: list[int] = []

    def _check_node(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"node {u} out of range")

    def add_edge(self, u: int, v: int, cap: int, cost: int) -> None:
        """Add a directed edge u -> v with a capacity and a unit cost."""
        self._check_node(u)
        self._check_node(v)
        if cap < 0:
            raise ValueError("capacity must not be negative")
        for a, b, c, w in ((u, v, cap, cost), (v, u, 0, -cost)):
            self._adj[a].append(len(self._to))
            self._to.append(b)
            self._cap.append(c)
            self._cost.append(w)

    def _shortest_path(self, source: int) -> tuple[list[float], list[int]]:
        dist: list[float] = [math.inf] * self._n
        via = [-1] * self._n
        queued = [False] * self._n
        dist[source] = 0
        queue = deque([source])
        queued[source] = True
        while queue:
            u = queue.popleft()
            queued[u] = False
            for e in self._adj[u]:
                if self._cap[e] <= 0:
                    continue
                v = self._to[e]
                candidate = dist[u] + self._cost[e]
                if candidate < dist[v]:
                    dist[v] = candidate
                    via[v] = e
                    if not queued[v]:
                        queued[v] = True
                        queue.append(v)
        return dist, via

    def min_cost_flow(self, source: int, sink: int) -> tuple[int, int]:
        """Push the maximum flow at least cost; return ``(flow, cost)``."""
        self._check_node(source)
        self._check_node(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        flow = cost = 0
        while True:
            dist, via = self._shortest_path(source)
            if dist[sink] == math.inf:
                return flow, cost
            path = []
            v = sink
            while v != source:
                e = via[v]
                path.append(e)
                v = self._to[e ^ 1]
            pushed = min(self._cap[e] for e in path)
            for e in path:
                self._cap[e] -= pushed
                self._cap[e ^ 1] += pushed
            flow += pushed
            cost += pushed * int(dist[sink])


def min_cost_assignment(costs: Sequence[Sequence[int]]) -> int:
    """Least total cost of assigning each row to a distinct column of a square matrix."""
    n = len(costs)
    if any(len(row) != n for row in costs):
        raise ValueError("cost matrix must be square")
    source, sink = 2 * n, 2 * n + 1
    net = MinCostFlow(2 * n + 2)
    for i, row in enumerate(costs):
        net.add_edge(source, i, 1, 0)
        for j, value in enumerate(row):
            net.add_edge(i, n + j, 1, value)
    for j in range(n):
        net.add_edge(n + j, sink, 1, 0)
    return net.min_cost_flow(source, sink)[1]