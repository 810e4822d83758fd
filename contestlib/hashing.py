"""Longest common substring by binary search over double polynomial hashes."""

from __future__ import annotations

_MOD1 = 59272331
_MOD2 = 84592337


class _HashedString:
    """Prefix hashes of a string under two moduli, for O(1) substring hashes."""

    def __init__(self, codes: list[int], powers: list[tuple[int, int]], inverses: list[tuple[int, int]]) -> None:
        self._inverses = inverses
        self._prefix = [(0, 0)]
        h1 = h2 = 0
        for i, code in enumerate(codes):
            p1, p2 = powers[i]
            h1 = (h1 + code * p1) % _MOD1
            h2 = (h2 + code * p2) % _MOD2
            self._prefix.append((h1, h2))

    def window(self, start: int, length: int) -> tuple[int, int]:
        """Hash of the substring of ``length`` characters starting at ``start``."""
        lo1, lo2 = self._prefix[start]
        hi1, hi2 = self._prefix[start + length]
        inv1, inv2 = self._inverses[start]
        return (hi1 - lo1) * inv1 % _MOD1, (hi2 - lo2) * inv2 % _MOD2


def longest_common_substring(a: str, b: str) -> str:
    """Longest string that is a substring of both ``a`` and ``b``.

    Among several of the greatest length, the one that starts earliest in
    ``b`` is returned; the empty string if the two share no character.
    """
    ids: dict[str, int] = {}
    for ch in a + b:
        ids.setdefault(ch, len(ids) + 1)
    base = len(ids) + 1
    longest = max(len(a), len(b))

    inv_base = (pow(base, _MOD1 - 2, _MOD1), pow(base, _MOD2 - 2, _MOD2))
    powers = [(1, 1)]
    inverses = [(1, 1)]
    for _ in range(longest):
        p1, p2 = powers[-1]
        i1, i2 = inverses[-1]
        powers.append((p1 * base % _MOD1, p2 * base % _MOD2))
        inverses.append((i1 * inv_base[0] % _MOD1, i2 * inv_base[1] % _MOD2))

    hashed_a = _HashedString([ids[ch] for ch in a], powers, inverses)
    hashed_b = _HashedString([ids[ch] for ch in b], powers, inverses)

    def first_common(length: int) -> int | None:
        seen = {hashed_a.window(i, length) for i in range(len(a) - length + 1)}
        return next(
            (i for i in range(len(b) - length + 1) if hashed_b.window(i, length) in seen),
            None,
        )

    lo, hi = 1, min(len(a), len(b))
    best_len, best_start = 0, None
    while lo <= hi:
        mid = (lo + hi) // 2
        start = first_common(mid)
        if start is not None:
            best_len, best_start = mid, start
            lo = mid + 1
        else:
            hi = mid - 1
    if best_start is None:
        return ""
    return b[best_start:best_start + best_len]