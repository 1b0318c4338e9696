"""A map for keys that supply their own hash code and equality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, TypeVar

from jitkit.maps import MapLike

V = TypeVar("V")


class HashKey(ABC):
    """A key that supplies its own bucket hash and equality test."""

    @abstractmethod
    def hash_code(self) -> int:
        """Return the bucket hash of this key."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Tell whether ``other`` is the same key."""


class _Entry(Generic[V]):
    __slots__ = ("key", "val")

    def __init__(self, key: HashKey, val: V) -> None:
        self.key = key
        self.val = val


class HashMap(MapLike[HashKey, V]):
    """A map of hash buckets, each a chain of entries in insertion order.

    ``size`` reports the number of buckets in use.
    """

    def __init__(self) -> None:
        self._buckets: dict[int, list[_Entry[V]]] = {}

    def size(self) -> int:
        return len(self._buckets)

    def _entries(self) -> Iterator[_Entry[V]]:
        for chain in list(self._buckets.values()):
            yield from list(chain)

    def keys(self) -> list[HashKey]:
        return [e.key for e in self._entries()]

    def vals(self) -> list[V]:
        return [e.val for e in self._entries()]

    def put(self, key: HashKey, val: V) -> None:
        chain = self._buckets.setdefault(key.hash_code(), [])
        for entry in chain:
            if entry.key.equals(key):
                entry.val = val
                return
        chain.append(_Entry(key, val))

    def delete(self, key: HashKey) -> V:
        code = key.hash_code()
        chain = self._buckets.get(code, [])
        for pos, entry in enumerate(chain):
            if entry.key.equals(key):
                del chain[pos]
                if not chain:
                    del self._buckets[code]
                return entry.val
        raise KeyError(key)

    def get(self, key: HashKey) -> V:
        for entry in self._buckets.get(key.hash_code(), ()):
            if entry.key.equals(key):
                return entry.val
        raise KeyError(key)

    def items(self) -> Iterator[tuple[HashKey, V]]:
        for entry in self._entries():
            yield entry.key, entry.val

    def buckets(self) -> dict[int, list[tuple[HashKey, V]]]:
        """Return a snapshot of every bucket as a list of ``(key, value)`` pairs."""
        return {
            code: [(e.key, e.val) for e in chain]
            for code, chain in self._buckets.items()
        }