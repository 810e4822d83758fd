"""Segment tree with range chmin updates and range minimum queries."""

from __future__ import annotations

import math
from collections.abc import Iterable

INF = math.inf


class MinAssignTree:
    """Positions 0..size-1, each starting at ``INF``.

    ``chmin`` lowers every value in a range to at most a given value;
    ``query`` returns the minimum over a range.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._tree = [INF] * (4 * size)
        self._lazy = [INF] * (4 * size)

    def _check(self, left: int, right: int) -> None:
        if left < 0 or right >= self.size:
            raise IndexError(f"range [{left}, {right}] out of bounds")

    def _apply(self, node: int, value: float) -> None:
        if value < self._tree[node]:
            self._tree[node] = value
        if value < self._lazy[node]:
            self._lazy[node] = value

    def _push(self, node: int) -> None:
        value = self._lazy[node]
        if value < INF:
            self._apply(2 * node, value)
            self._apply(2 * node + 1, value)
            self._lazy[node] = INF

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value: float) -> None:
        if hi < left or lo > right:
            return
        if left <= lo and hi <= right:
            self._apply(node, value)
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> float:
        if hi < left or lo > right:
            return INF
        if left <= lo and hi <= right:
            return self._tree[node]
        self._push(node)
        mid = (lo + hi) // 2
        return min(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def chmin(self, left: int, right: int, value: float) -> None:
        """Set every position in [left, right] to min(itself, value); empty ranges do nothing."""
        if left > right:
            return
        self._check(left, right)
        self._update(1, 0, self.size - 1, left, right, value)

    def query(self, left: int, right: int) -> float:
        """Minimum over [left, right]; ``INF`` for an empty range or untouched positions."""
        if left > right:
            return INF
        self._check(left, right)
        return self._query(1, 0, self.size - 1, left, right)


def min_intervals_cover(n: int, intervals: Iterable[tuple[int, int]]) -> int:
    """Fewest intervals whose chain reaches from 0 to n, or 0 if none does.

    Intervals are clipped to [0, n]; a chain starts with an interval at 0 and
    each next interval must start at a point already covered.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    ranges = set()
    for left, right in intervals:
        left, right = max(0, left), min(right, n)
        if left > n or right < 0 or left > right:
            continue
        ranges.add((left, right))
    tree = MinAssignTree(n + 1)
    for left, right in sorted(ranges):
        if left == 0:
            tree.chmin(left, right, 1)
        else:
            tree.chmin(left, right, tree.query(left, right) + 1)
    best = tree.query(n, n)
    return 0 if best == INF else int(best)