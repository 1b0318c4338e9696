"""An ordered list that keeps its elements sorted by a comparator."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterator, TypeVar

from sortedcontainers import SortedKeyList

from jitkit.errors import EmptySequenceError, IndexOutOfBoundsError, NilComparatorError

T = TypeVar("T")

Comparator = Callable[[T, T], int]


class SkipList:
    """A sorted list ordered by ``compare(a, b)``; equal elements may repeat."""

    def __init__(self, compare: Comparator) -> None:
        if compare is None:
            raise NilComparatorError()
        self._key = cmp_to_key(compare)
        self._compare = compare
        self._items = SortedKeyList(key=self._key)

    def _locate(self, target: T) -> int:
        idx = self._items.bisect_key_left(self._key(target))
        if idx < len(self._items) and self._compare(self._items[idx], target) == 0:
            return idx
        return -1

    def insert(self, val: T) -> None:
        """Add ``val`` in sorted position."""
        self._items.add(val)

    def delete(self, target: T) -> bool:
        """Remove one element equal to ``target``; tell whether one was found."""
        idx = self._locate(target)
        if idx < 0:
            return False
        del self._items[idx]
        return True

    def exists(self, target: T) -> bool:
        """Tell whether an element equal to ``target`` is present."""
        return self._locate(target) >= 0

    def get(self, index: int) -> T:
        """Return the element at sorted position ``index``."""
        if index < 0 or index >= len(self._items):
            raise IndexOutOfBoundsError(len(self._items), index)
        return self._items[index]

    def peek(self) -> T:
        """Return the smallest element."""
        if not self._items:
            raise EmptySequenceError()
        return self._items[0]

    def to_list(self) -> list[T]:
        """Return the elements in sorted order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))