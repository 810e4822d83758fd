"""A fully persistent FIFO queue built on binary lifting over versions."""

from __future__ import annotations

from typing import Any

_LEVELS = 17


class PersistentQueue:
    """A queue whose every state is kept as a numbered version.

    Version 0 is the empty queue. Each push or pop applied to any existing
    version creates a new version numbered one past the latest.
    """

    MAX_VERSIONS = (1 << _LEVELS) - 1

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every version except the empty version 0."""
        self._up: list[list[int]] = []
        self._length: list[int] = [0]
        self._tail: list[Any] = [None]
        self._link(-1)

    @property
    def latest(self) -> int:
        """Number of the most recently created version."""
        return len(self._length) - 1

    def _link(self, parent: int) -> None:
        jumps = [parent]
        while len(jumps) < _LEVELS and jumps[-1] != -1:
            level = len(jumps) - 1
            ancestors = self._up[jumps[-1]]
            jumps.append(ancestors[level] if level < len(ancestors) else -1)
        self._up.append(jumps)

    def _check(self, version: int) -> None:
        if not 0 <= version <= self.latest:
            raise IndexError(f"version {version} does not exist")

    def _reserve(self) -> None:
        if self.latest >= self.MAX_VERSIONS:
            raise OverflowError("too many versions")

    def length(self, version: int) -> int:
        """Number of elements held by ``version``."""
        self._check(version)
        return self._length[version]

    def push(self, version: int, value: Any) -> int:
        """Append ``value`` to the back of ``version``; return the new version."""
        self._check(version)
        self._reserve()
        self._length.append(self._length[version] + 1)
        self._tail.append(value)
        self._link(version)
        return self.latest

    def pop(self, version: int) -> tuple[Any, int]:
        """Remove the front of ``version``; return ``(value, new_version)``."""
        self._check(version)
        size = self._length[version]
        if size == 0:
            raise IndexError("pop from an empty queue")
        self._reserve()
        current = version
        jump = size - 1
        for level in range(_LEVELS):
            if (jump >> level) & 1:
                current = self._up[current][level]
        value = self._tail[current]
        self._length.append(size - 1)
        self._tail.append(self._tail[version])
        # The new version shares the popped version's path, so it hangs off
        # the same parent rather than off the popped version itself.
        self._link(self._up[version][0])
        return value, self.latest