"""Counting how often each byte value occurs."""

from __future__ import annotations

import os
from collections import Counter

TABLE_SIZE = 256


class FrequencyCounter:
    """Accumulates byte-value frequencies over one or more inputs."""

    def __init__(self) -> None:
        self._table = [0] * TABLE_SIZE

    def count(self, path: str | os.PathLike) -> None:
        """Add the byte frequencies of the file at ``path``."""
        with open(path, "rb") as handle:
            self.count_bytes(handle.read())

    def count_bytes(self, data: bytes) -> None:
        """Add the byte frequencies of ``data``."""
        for value, occurrences in Counter(data).items():
            self._table[value] += occurrences

    def frequencies(self) -> tuple[int, ...]:
        """Return the count of every byte value, indexed by value."""
        return tuple(self._table)

    def unique_count(self) -> int:
        """Return how many distinct byte values have been seen."""
        return sum(1 for occurrences in self._table if occurrences)