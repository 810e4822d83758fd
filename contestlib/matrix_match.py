"""Two-dimensional pattern search with row hashes and prefix-function matching."""

from __future__ import annotations

from collections.abc import Sequence

from contestlib.kmp import prefix_function

_MODS = (59272331, 84592337)

Hash = tuple[int, int]


def _check_rectangular(rows: Sequence[str], what: str) -> None:
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{what} rows must all have the same length")


def _window_hashes(codes: list[int], width: int, base: int) -> list[Hash]:
    prefix = [(0, 0)]
    for code in codes:
        h1, h2 = prefix[-1]
        prefix.append(((h1 * base + code) % _MODS[0], (h2 * base + code) % _MODS[1]))
    top = tuple(pow(base, width, mod) for mod in _MODS)
    return [
        tuple((prefix[j + width][k] - prefix[j][k] * top[k]) % _MODS[k] for k in range(2))
        for j in range(len(codes) - width + 1)
    ]


def contains_submatrix(grid: Sequence[str], pattern: Sequence[str]) -> bool:
    """True if ``pattern`` occurs as a contiguous block inside ``grid``."""
    grid, pattern = list(grid), list(pattern)
    if not pattern or not pattern[0]:
        raise ValueError("pattern must not be empty")
    _check_rectangular(grid, "grid")
    _check_rectangular(pattern, "pattern")
    if not grid:
        return False
    rows, cols = len(pattern), len(pattern[0])
    if rows > len(grid) or cols > len(grid[0]):
        return False

    ids: dict[str, int] = {}
    for line in grid + pattern:
        for ch in line:
            ids.setdefault(ch, len(ids))
    base = len(ids)

    def codes(line: str) -> list[int]:
        return [ids[ch] for ch in line]

    windows = [_window_hashes(codes(line), cols, base) for line in grid]
    wanted = [_window_hashes(codes(line), cols, base)[0] for line in pattern]
    fail = prefix_function(wanted)

    for j in range(len(grid[0]) - cols + 1):
        k = 0
        for row in windows:
            h = row[j]
            while k > 0 and wanted[k] != h:
                k = fail[k - 1]
            if wanted[k] == h:
                k += 1
            if k == rows:
                return True
    return False