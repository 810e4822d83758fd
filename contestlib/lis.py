"""Longest strictly increasing subsequence in O(n log n)."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LisResult:
    """Length and one witness of a longest strictly increasing subsequence.

    ``ends[i]`` is the length of the longest such subsequence ending at
    position i.
    """

    length: int
    sequence: list
    ends: list[int]


def longest_increasing_subsequence(values: Sequence[Any]) -> LisResult:
    """Longest strictly increasing subsequence of ``values``."""
    tails: list = []
    ends: list[int] = []
    for value in values:
        loc = bisect_left(tails, value)
        if loc == len(tails):
            tails.append(value)
        else:
            tails[loc] = value
        ends.append(loc + 1)

    length = len(tails)
    sequence: list = []
    wanted = length
    for value, end in zip(reversed(values), reversed(ends)):
        if wanted == 0:
            break
        if end == wanted:
            sequence.append(value)
            wanted -= 1
    sequence.reverse()
    return LisResult(length, sequence, ends)