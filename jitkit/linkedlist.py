"""A doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, TypeVar

from jitkit.errors import IndexOutOfBoundsError
from jitkit.lists import List, Visitor

T = TypeVar("T")


class _Node:
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any = None) -> None:
        self.val = val
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(List[T]):
    """A doubly linked list; lookups walk from whichever end is closer."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._sentinel = _Node()
        self._size = 0
        self.append(*(values or ()))

    def _check(self, index: int, *, allow_end: bool = False) -> None:
        upper = self._size if allow_end else self._size - 1
        if index < 0 or index > upper:
            raise IndexOutOfBoundsError(self._size, index)

    def _find(self, index: int) -> _Node:
        if index <= self._size // 2:
            node = self._sentinel.next
            for _ in range(index):
                node = node.next
        else:
            node = self._sentinel.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _link_before(self, anchor: _Node, val: T) -> None:
        node = _Node(val)
        node.prev, node.next = anchor.prev, anchor
        anchor.prev.next = node
        anchor.prev = node
        self._size += 1

    def insert(self, index: int, val: T) -> None:
        self._check(index, allow_end=True)
        anchor = self._sentinel if index == self._size else self._find(index)
        self._link_before(anchor, val)

    def append(self, *args: T) -> None:
        for val in args:
            self._link_before(self._sentinel, val)

    def delete(self, index: int) -> None:
        self._check(index)
        node = self._find(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._size -= 1

    def set(self, index: int, val: T) -> None:
        self._check(index)
        self._find(index).val = val

    def get(self, index: int) -> T:
        self._check(index)
        return self._find(index).val

    def for_each(self, visit: Visitor) -> None:
        for idx, val in enumerate(self):
            visit(idx, val)

    def to_list(self) -> list[T]:
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.val
            node = node.next