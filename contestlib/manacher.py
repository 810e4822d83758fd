"""Manacher's algorithm for palindromic substrings."""

from __future__ import annotations


def palindrome_radii(s: str) -> list[int]:
    """Length of the longest palindrome centred at each of the 2n+1 centres.

    Even positions are the gaps between characters (and the two ends), odd
    positions the characters themselves.
    """
    t: list[str | None] = [None]
    for ch in s:
        t.extend((ch, None))
    n = len(t)
    p = [0] * n
    center = right = 0
    for i in range(n):
        mirror = 2 * center - i
        if right > i and mirror >= 0:
            p[i] = min(p[mirror], right - i)
        while i - 1 - p[i] >= 0 and i + 1 + p[i] < n and t[i - 1 - p[i]] == t[i + 1 + p[i]]:
            p[i] += 1
        if i + p[i] > right:
            center, right = i, i + p[i]
    return p


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost centre wins ties."""
    radii = palindrome_radii(s)
    best_center, best = 0, 0
    for i, r in enumerate(radii):
        if r > best:
            best_center, best = i, r
    start = (best_center - best) // 2
    return s[start:start + best]