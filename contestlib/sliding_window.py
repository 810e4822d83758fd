"""Maximum and minimum of every fixed-width window, in linear time."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from typing import Any


def _sliding(values: Sequence[Any], width: int, dominates: Callable[[Any, Any], bool]) -> list:
    n = len(values)
    if not 1 <= width <= n:
        raise ValueError("width must be between 1 and the number of values")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(values):
        while window and dominates(value, values[window[-1]]):
            window.pop()
        window.append(i)
        if window[0] <= i - width:
            window.popleft()
        if i >= width - 1:
            result.append(values[window[0]])
    return result


def max_sliding_window(values: Sequence[Any], width: int) -> list:
    """Maximum of each window of ``width`` consecutive values."""
    return _sliding(values, width, lambda new, old: new >= old)


def min_sliding_window(values: Sequence[Any], width: int) -> list:
    """Minimum of each window of ``width`` consecutive values."""
    return _sliding(values, width, lambda new, old: new <= old)