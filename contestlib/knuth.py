"""Optimal stick cutting with Knuth's interval-DP speed-up."""

from __future__ import annotations

from collections.abc import Iterable


def optimal_cut_cost(length: int, cuts: Iterable[int]) -> int:
    """Least total cost of cutting a stick at every given position.

    Each cut costs the length of the piece being cut.
    """
    pos = [0, *sorted(cuts), length]
    n = len(pos) - 1
    dp = [[0] * (n + 1) for _ in range(n + 1)]
    mid = [[0] * (n + 1) for _ in range(n + 1)]
    for span in range(n + 1):
        for left in range(n - span + 1):
            right = left + span
            if span < 2:
                dp[left][right] = 0
                mid[left][right] = left
                continue
            cost = pos[right] - pos[left]
            best = None
            best_mid = left
            for m in range(mid[left][right - 1], mid[left + 1][right] + 1):
                current = dp[left][m] + dp[m][right] + cost
                if best is None or current < best:
                    best, best_mid = current, m
            dp[left][right] = best
            mid[left][right] = best_mid
    return dp[0][n]