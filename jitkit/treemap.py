"""A map kept in key order by a comparator."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterator, Mapping, TypeVar

from sortedcontainers import SortedKeyList

from jitkit.errors import NilComparatorError
from jitkit.maps import MapLike

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[K, K], int]


class TreeMap(MapLike[K, V]):
    """A map ordered by ``compare(a, b)``; keys need not be hashable."""

    def __init__(self, compare: Comparator) -> None:
        if compare is None:
            raise NilComparatorError()
        self._compare = compare
        to_key = cmp_to_key(compare)
        self._to_key = to_key
        self._entries = SortedKeyList(key=lambda entry: to_key(entry[0]))

    @classmethod
    def from_dict(cls, compare: Comparator, data: Mapping[K, V]) -> "TreeMap[K, V]":
        """Build a tree map holding every pair of ``data``."""
        tree = cls(compare)
        for key, val in (data or {}).items():
            tree.put(key, val)
        return tree

    def _find(self, key: K) -> int:
        idx = self._entries.bisect_key_left(self._to_key(key))
        if idx < len(self._entries) and self._compare(self._entries[idx][0], key) == 0:
            return idx
        return -1

    def size(self) -> int:
        return len(self._entries)

    def keys(self) -> list[K]:
        return [entry[0] for entry in self._entries]

    def vals(self) -> list[V]:
        return [entry[1] for entry in self._entries]

    def put(self, key: K, val: V) -> None:
        idx = self._find(key)
        if idx >= 0:
            self._entries[idx][1] = val
        else:
            self._entries.add([key, val])

    def delete(self, key: K) -> V:
        idx = self._find(key)
        if idx < 0:
            raise KeyError(key)
        entry = self._entries[idx]
        del self._entries[idx]
        return entry[1]

    def get(self, key: K) -> V:
        idx = self._find(key)
        if idx < 0:
            raise KeyError(key)
        return self._entries[idx][1]

    def items(self) -> Iterator[tuple[K, V]]:
        for key, val in list(self._entries):
            yield key, val

    def key_vals(self) -> tuple[list[K], list[V]]:
        """Return the keys and the values, both in key order."""
        return self.keys(), self.vals()