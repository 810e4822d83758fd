"""Nearest-smaller spans over a histogram."""

from __future__ import annotations

from collections.abc import Sequence


def nearest_smaller_bounds(values: Sequence[int]) -> list[tuple[int, int]]:
    """For each bar, the widest inclusive index span whose bars are all at least as tall."""
    n = len(values)
    left = list(range(n))
    right = list(range(n))
    for i in range(n):
        while left[i] > 0 and values[i] <= values[left[i] - 1]:
            left[i] = left[left[i] - 1]
    for i in reversed(range(n)):
        while right[i] < n - 1 and values[i] <= values[right[i] + 1]:
            right[i] = right[right[i] + 1]
    return list(zip(left, right))


def largest_rectangle(values: Sequence[int]) -> int:
    """Area of the largest rectangle under the histogram; 0 when empty."""
    return max(
        (value * (hi - lo + 1) for value, (lo, hi) in zip(values, nearest_smaller_bounds(values))),
        default=0,
    )