"""A map that keeps a list of values under each key."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from jitkit.hashmap import HashMap
from jitkit.maps import MapLike
from jitkit.treemap import TreeMap

K = TypeVar("K")
V = TypeVar("V")


class MultiMap(Generic[K, V]):
    """Maps each key to a list of values over a backing map."""

    def __init__(self, backing: MapLike) -> None:
        self._map = backing

    @classmethod
    def tree(cls, compare: Callable[[K, K], int]) -> "MultiMap[K, V]":
        """Build a multimap ordered by ``compare``."""
        return cls(TreeMap(compare))

    @classmethod
    def hashed(cls) -> "MultiMap[K, V]":
        """Build a multimap over a HashMap; keys must be HashKey instances."""
        return cls(HashMap())

    def size(self) -> int:
        """Return the size of the backing map."""
        return self._map.size()

    def keys(self) -> list[K]:
        return self._map.keys()

    def vals(self) -> list[list[V]]:
        """Return a copy of each key's value list."""
        return [list(values) for values in self._map.vals()]

    def put(self, key: K, val: V) -> None:
        """Add ``val`` to the values of ``key``."""
        self.put_many(key, val)

    def put_many(self, key: K, *args: V) -> None:
        """Add every argument to the values of ``key``."""
        try:
            values = self.get(key)
        except KeyError:
            values = []
        values.extend(args)
        self._map.put(key, values)

    def delete(self, key: K) -> list[V]:
        """Remove ``key`` and return its values."""
        return self._map.delete(key)

    def get(self, key: K) -> list[V]:
        """Return a copy of the values of ``key``."""
        return list(self._map.get(key))

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield one ``(key, value)`` pair per stored value."""
        for key, values in self._map.items():
            for val in list(values):
                yield key, val