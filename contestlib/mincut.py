"""Maximum flow and minimum cut in an undirected capacitated graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _augmenting_parents(
    n: int, adj: list[list[int]], cap: list[list[int]], source: int, sink: int
) -> list[int] | None:
    parent = [-1] * n
    seen = [False] * n
    seen[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if cap[u][v] and not seen[v]:
                seen[v] = True
                parent[v] = u
                if v == sink:
                    return parent
                queue.append(v)
    return None


def min_cut(
    n: int, edges: Iterable[tuple[int, int, int]], source: int, sink: int
) -> tuple[int, list[tuple[int, int]]]:
    """Maximum flow value and the edges of a minimum cut.

    ``edges`` holds undirected ``(u, v, capacity)`` on nodes 0..n-1. The cut
    is listed as ``(u, v)`` with u on the source side, in the order the
    source side is explored; parallel edges appear once each.
    """
    for node in (source, sink):
        if not 0 <= node < n:
            raise IndexError(f"node {node} out of range")
    if source == sink:
        raise ValueError("source and sink must differ")
    cap = [[0] * n for _ in range(n)]
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v, c in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range")
        if c < 0:
            raise ValueError("capacity must not be negative")
        cap[u][v] += c
        cap[v][u] += c
        adj[u].append(v)
        adj[v].append(u)

    flow = 0
    while (parent := _augmenting_parents(n, adj, cap, source, sink)) is not None:
        bottleneck = None
        v = sink
        while v != source:
            u = parent[v]
            bottleneck = cap[u][v] if bottleneck is None else min(bottleneck, cap[u][v])
            v = u
        v = sink
        while v != source:
            u = parent[v]
            cap[u][v] -= bottleneck
            cap[v][u] += bottleneck
            v = u
        flow += bottleneck

    reached = [False] * n
    reached[source] = True
    order = [source]
    stack = [(source, iter(adj[source]))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if not reached[v] and cap[u][v] > 0:
                reached[v] = True
                order.append(v)
                stack.append((v, iter(adj[v])))
                break
        else:
            stack.pop()

    cut = [(u, v) for u in order for v in adj[u] if not reached[v]]
    return flow, cut