"""Square integer matrices with fast exponentiation."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations


class Matrix:
    """An immutable square matrix of integers."""

    _modulus: int | None = None

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        data = tuple(tuple(int(x) for x in row) for row in rows)
        if not data or any(len(row) != len(data) for row in data):
            raise ValueError("matrix must be square and non-empty")
        if self._modulus is not None:
            data = tuple(tuple(x % self._modulus for x in row) for row in data)
        self.rows = data

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self.rows)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """The identity matrix of the given size."""
        if size < 1:
            raise ValueError("size must be positive")
        return cls([[int(i == j) for j in range(size)] for i in range(size)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self.rows]!r})"

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            raise ValueError("matrices must have the same size")
        columns = list(zip(*other.rows))
        return type(self)(
            [sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.rows
        )

    def __pow__(self, exponent: int) -> Matrix:
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        result = type(self).identity(self.size)
        base = self
        while exponent:
            if exponent & 1:
                result = result @ base
            exponent >>= 1
            if exponent:
                base = base @ base
        return result


class _Uint32Matrix(Matrix):
    """A matrix whose entries wrap around modulo 2**32."""

    _modulus = 1 << 32


def _digit_pairs() -> list[tuple[int, int]]:
    return [(i, j) for i, j in combinations(range(10), 2) if j >= i + 2]


def _compatible(first: tuple[int, int], second: tuple[int, int]) -> bool:
    return all(abs(a - b) > 1 for a in first for b in second)


def count_digit_pair_sequences(n: int) -> int:
    """Number of length-n sequences of non-adjacent digit pairs, modulo 2**32.

    A pair is two digits that differ by at least 2; consecutive pairs in a
    sequence may share no digit and hold no two digits that differ by 1.
    """
    if n < 1:
        raise ValueError("n must be positive")
    pairs = _digit_pairs()
    if n == 1:
        return len(pairs)
    step = _Uint32Matrix([[int(_compatible(p, q)) for q in pairs] for p in pairs])
    power = step ** (n - 1)
    return sum(sum(row) for row in power.rows) % (1 << 32)