"""A string-keyed hash map with separate chaining, and two counting helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

_BASE = 37
_INITIAL_BUCKETS = 5
_MAX_LOAD_FACTOR = 0.7


@dataclass
class _Entry:
    key: str
    value: Any


class OurMap:
    """Hash map from strings to values that doubles its buckets above load 0.7."""

    def __init__(self) -> None:
        self._buckets: list[list[_Entry]] = [[] for _ in range(_INITIAL_BUCKETS)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def _bucket_index(self, key: str) -> int:
        buckets = len(self._buckets)
        code = 0
        coefficient = 1
        for char in reversed(key):
            code = (code + ord(char) * coefficient) % buckets
            coefficient = coefficient * _BASE % buckets
        return code

    def _bucket(self, key: str) -> list[_Entry]:
        if not isinstance(key, str):
            raise TypeError(f"keys must be strings, got {type(key).__name__}")
        return self._buckets[self._bucket_index(key)]

    def _find(self, key: str) -> _Entry | None:
        return next((entry for entry in self._bucket(key) if entry.key == key), None)

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(2 * len(old_buckets))]
        self._count = 0
        for bucket in old_buckets:
            for entry in bucket:
                self.insert(entry.key, entry.value)

    def insert(self, key: str, value: Any) -> None:
        """Set ``key`` to ``value``, replacing any existing value."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._bucket(key).insert(0, _Entry(key, value))
        self._count += 1
        if self.load_factor() > _MAX_LOAD_FACTOR:
            self._rehash()

    def get(self, key: str) -> Any:
        """Return the value for ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if it is absent."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._count -= 1
                return entry.value
        raise KeyError(key)

    def load_factor(self) -> float:
        """Return the number of entries per bucket."""
        return self._count / len(self._buckets)


def highest_frequency(values: Sequence[Hashable]) -> Hashable:
    """Return the most frequent value; on a tie, the one that occurs first."""
    if not values:
        raise ValueError("cannot find the most frequent value of an empty sequence")
    counts = Counter(values)
    best = values[0]
    for value in values:
        if counts[value] > counts[best]:
            best = value
    return best


def intersection(first: Iterable[Hashable], second: Iterable[Hashable]) -> list:
    """Return the values common to both, in the order of ``second``.

    A value appears as many times as it occurs in both inputs.
    """
    available = Counter(first)
    common = []
    for value in second:
        if available[value] > 0:
            common.append(value)
            available[value] -= 1
    return common