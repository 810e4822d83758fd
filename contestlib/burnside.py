"""Euler's totient and counting necklaces with Burnside's lemma."""

from __future__ import annotations

DEFAULT_MOD = 1_000_000_007


def phi_table(limit: int) -> list[int]:
    """Euler's totient of every number 0..limit; entry 0 is 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for j in range(i, limit + 1, i):
                phi[j] -= phi[j] // i
    return phi


def _phi(m: int) -> int:
    result = m
    p = 2
    while p * p <= m:
        if m % p == 0:
            while m % p == 0:
                m //= p
            result -= result // p
        p += 1
    if m > 1:
        result -= result // m
    return result


def _divisors(n: int) -> list[int]:
    small = [d for d in range(1, int(n ** 0.5) + 2) if d * d <= n and n % d == 0]
    return sorted(set(small) | {n // d for d in small})


def necklaces(n: int, k: int, mod: int = DEFAULT_MOD) -> int:
    """Number of necklaces of n beads in k colours up to rotation, modulo ``mod``.

    Computes (1/n) * sum over d | n of phi(n/d) * k**d; n must be invertible
    modulo ``mod``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if mod < 1:
        raise ValueError("mod must be positive")
    total = sum(_phi(n // d) * pow(k, d, mod) for d in _divisors(n)) % mod
    return total * pow(n, -1, mod) % mod