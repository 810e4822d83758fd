"""Prefix-function string matching and word search in a square letter grid."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]


class PrefixMatcher:
    """Finds the first occurrence of a fixed pattern with the Knuth-Morris-Pratt method."""

    def __init__(self, pattern: str) -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        self._fail = [0] * len(pattern)
        k = 0
        for i in range(1, len(pattern)):
            while k and pattern[i] != pattern[k]:
                k = self._fail[k - 1]
            if pattern[k] == pattern[i]:
                k += 1
            self._fail[i] = k

    def find(self, text: str) -> int:
        """Index of the first occurrence of the pattern in ``text``, or -1."""
        pattern, size = self.pattern, len(self.pattern)
        if size > len(text):
            return -1
        k = 0
        for j, ch in enumerate(text):
            while k and pattern[k] != ch:
                k = self._fail[k - 1]
            if pattern[k] == ch:
                k += 1
            if k == size:
                return j - size + 1
        return -1


class WordGrid:
    """A square grid of letters searched along rows, columns and diagonals.

    Rows are read both ways, columns only top to bottom, and every diagonal
    in both directions; lines are tried in a fixed order and the first line
    holding the word wins.
    """

    def __init__(self, rows: Sequence[str]) -> None:
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise ValueError("grid must be square")
        self.rows = list(rows)
        self._lines = [
            ("".join(self.rows[x][y] for x, y in line), line) for line in self._line_positions(n)
        ]

    @staticmethod
    def _line_positions(n: int) -> list[list[Position]]:
        lines: list[list[Position]] = []

        def both_ways(line: list[Position]) -> None:
            lines.append(line)
            lines.append(line[::-1])

        for i in range(n):
            both_ways([(i, j) for j in range(n)])
        for j in range(n):
            lines.append([(i, j) for i in range(n)])
        for i in range(n):
            both_ways([(i + t, t) for t in range(n - i)])
        for i in range(1, n):
            both_ways([(t, i + t) for t in range(n - i)])
        for i in range(n):
            both_ways([(i + t, n - 1 - t) for t in range(n - i)])
        for i in range(n - 2, -1, -1):
            both_ways([(t, i - t) for t in range(i + 1)])
        return lines

    def search(self, word: str) -> tuple[Position, Position] | None:
        """Positions (row, column) of the first and last letter of ``word``, or None."""
        matcher = PrefixMatcher(word)
        for text, positions in self._lines:
            start = matcher.find(text)
            if start != -1:
                return positions[start], positions[start + len(word) - 1]
        return None