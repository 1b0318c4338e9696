"""Sets backed by a dict or by an ordered tree map."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, TypeVar

from jitkit.treemap import TreeMap

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class Set(ABC, Generic[T]):
    """A collection of distinct elements."""

    @abstractmethod
    def add(self, elem: T) -> None:
        """Add ``elem``; adding an existing element changes nothing."""

    @abstractmethod
    def delete(self, elem: T) -> None:
        """Remove ``elem`` if present."""

    @abstractmethod
    def exists(self, elem: T) -> bool:
        """Tell whether ``elem`` is present."""

    @abstractmethod
    def elems(self) -> list[T]:
        """Return the elements."""


class MapSet(Set[H]):
    """A set of hashable elements in no particular order."""

    def __init__(self) -> None:
        self._items: dict[H, None] = {}

    def add(self, elem: H) -> None:
        self._items[elem] = None

    def delete(self, elem: H) -> None:
        self._items.pop(elem, None)

    def exists(self, elem: H) -> bool:
        return elem in self._items

    def elems(self) -> list[H]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class TreeSet(Set[T]):
    """A set ordered by ``compare(a, b)``; elements need not be hashable."""

    def __init__(self, compare: Callable[[T, T], int]) -> None:
        self._tree: TreeMap[T, None] = TreeMap(compare)

    def add(self, elem: T) -> None:
        self._tree.put(elem, None)

    def delete(self, elem: T) -> None:
        try:
            self._tree.delete(elem)
        except KeyError:
            pass

    def exists(self, elem: T) -> bool:
        return elem in self._tree

    def elems(self) -> list[T]:
        return self._tree.keys()

    def __len__(self) -> int:
        return self._tree.size()