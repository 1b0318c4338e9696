"""A dictionary that is safe to share between threads."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SyncMap(Generic[K, V]):
    """A thread-safe map; every operation runs under one lock."""

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def load(self, key: K) -> V:
        """Return the value under ``key``; raise KeyError if absent."""
        with self._lock:
            return self._data[key]

    def store(self, key: K, val: V) -> None:
        """Store ``val`` under ``key``."""
        with self._lock:
            self._data[key] = val

    def load_or_store(self, key: K, val: V) -> tuple[V, bool]:
        """Return ``(existing, True)`` if ``key`` is present, else store ``val`` and return ``(val, False)``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = val
            return val, False

    def load_and_delete(self, key: K) -> V:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        with self._lock:
            return self._data.pop(key)

    def delete(self, key: K) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._data.pop(key, None)

    def range(self, fn: Callable[[K, V], bool]) -> None:
        """Call ``fn(key, val)`` for each entry until it returns False."""
        for key, val in self.items():
            if not fn(key, val):
                break

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield a snapshot of the ``(key, value)`` pairs."""
        with self._lock:
            snapshot = list(self._data.items())
        return iter(snapshot)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)