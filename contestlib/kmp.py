"""Prefix function and its behaviour on Fibonacci words."""

from __future__ import annotations


def prefix_function(s: str) -> list[int]:
    """For each position, the length of the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k > 0 and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def fibonacci_words(count: int) -> list[str]:
    """The first ``count`` Fibonacci words: "a", "b", "ba", "bab", "babba", ..."""
    if count < 0:
        raise ValueError("count must not be negative")
    words = ["a", "b"][:count]
    while len(words) < count:
        words.append(words[-1] + words[-2])
    return words


def fibonacci_prefix_sums(count: int) -> list[tuple[int, int]]:
    """Prefix-function sums of Fibonacci words 3..count+2 beside a closed-form estimate.

    Each pair is ``(sum of prefix_function(word k), a(a+1)/2 + b(b+1)/2)`` with
    ``a = F(k-1) - 2`` and ``b = F(k-2)``, F being the word lengths.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    words = fibonacci_words(count + 2)
    lengths = [len(w) for w in words]
    result = []
    for k in range(2, count + 2):
        a = lengths[k - 1] - 2
        b = lengths[k - 2]
        estimate = (a * (a + 1) >> 1) + (b * (b + 1) >> 1)
        result.append((sum(prefix_function(words[k])), estimate))
    return result