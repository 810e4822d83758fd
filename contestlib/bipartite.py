"""Maximum bipartite matching by the Hopcroft-Karp algorithm."""

from __future__ import annotations

from collections import deque


class HopcroftKarp:
    """A bipartite graph with edges from left nodes 0..n_left-1 to right nodes 0..n_right-1."""

    def __init__(self, n_left: int, n_right: int) -> None:
        if n_left < 0 or n_right < 0:
            raise ValueError("side sizes must not be negative")
        self._n_left = n_left
        self._n_right = n_right
        self._adj: list[list[int]] = [[] for _ in range(n_left)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect left node u to right node v."""
        if not 0 <= u < self._n_left:
            raise IndexError(f"left node {u} out of range")
        if not 0 <= v < self._n_right:
            raise IndexError(f"right node {v} out of range")
        self._adj[u].append(v)

    def _layers(self, used: list[bool], match: list[int]) -> list[int]:
        dist = [-1] * self._n_left
        queue = deque()
        for u in range(self._n_left):
            if not used[u]:
                dist[u] = 0
                queue.append(u)
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                w = match[v]
                if w >= 0 and dist[w] < 0:
                    dist[w] = dist[u] + 1
                    queue.append(w)
        return dist

    def _augment(
        self, root: int, dist: list[int], visited: list[bool], used: list[bool], match: list[int]
    ) -> bool:
        visited[root] = True
        stack = [root]
        chosen: list[int] = []
        position = {root: 0}
        while stack:
            u = stack[-1]
            edges = self._adj[u]
            advanced = False
            while position[u] < len(edges):
                v = edges[position[u]]
                position[u] += 1
                w = match[v]
                if w < 0:
                    chosen.append(v)
                    for left, right in zip(stack, chosen):
                        match[right] = left
                        used[left] = True
                    return True
                if not visited[w] and dist[w] == dist[u] + 1:
                    visited[w] = True
                    position[w] = 0
                    chosen.append(v)
                    stack.append(w)
                    advanced = True
                    break
            if not advanced:
                stack.pop()
                if chosen:
                    chosen.pop()
        return False

    def max_matching(self) -> int:
        """Size of a maximum matching."""
        used = [False] * self._n_left
        match = [-1] * self._n_right
        total = 0
        while True:
            dist = self._layers(used, match)
            visited = [False] * self._n_left
            found = sum(
                1
                for u in range(self._n_left)
                if not used[u] and self._augment(u, dist, visited, used, match)
            )
            if not found:
                return total
            total += found