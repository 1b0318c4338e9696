"""Index-addressed lists: a plain array list, a locked wrapper and a copy-on-write list."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from jitkit.errors import IndexOutOfBoundsError

T = TypeVar("T")

Visitor = Callable[[int, T], None]


def _check_index(length: int, index: int, *, allow_end: bool = False) -> None:
    upper = length if allow_end else length - 1
    if index < 0 or index > upper:
        raise IndexOutOfBoundsError(length, index)


class List(ABC, Generic[T]):
    """A list addressed by position; out-of-range indices raise IndexOutOfBoundsError."""

    @abstractmethod
    def insert(self, index: int, val: T) -> None:
        """Insert ``val`` before ``index``; ``index`` may equal the length."""

    @abstractmethod
    def append(self, *args: T) -> None:
        """Append every argument, in order."""

    @abstractmethod
    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""

    @abstractmethod
    def set(self, index: int, val: T) -> None:
        """Replace the element at ``index``."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at ``index``."""

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return a copy of the elements as a Python list."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    def for_each(self, visit: Visitor) -> None:
        """Call ``visit(idx, val)`` for each element; an exception stops the walk."""
        for idx, val in enumerate(self):
            visit(idx, val)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())


class ArrayList(List[T]):
    """A list backed by a Python list."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._vals: list[T] = list(values or ())

    def insert(self, index: int, val: T) -> None:
        _check_index(len(self._vals), index, allow_end=True)
        self._vals.insert(index, val)

    def append(self, *args: T) -> None:
        self._vals.extend(args)

    def delete(self, index: int) -> None:
        _check_index(len(self._vals), index)
        del self._vals[index]

    def set(self, index: int, val: T) -> None:
        _check_index(len(self._vals), index)
        self._vals[index] = val

    def get(self, index: int) -> T:
        _check_index(len(self._vals), index)
        return self._vals[index]

    def for_each(self, visit: Visitor) -> None:
        for idx, val in enumerate(self._vals):
            visit(idx, val)

    def to_list(self) -> list[T]:
        return list(self._vals)

    def __len__(self) -> int:
        return len(self._vals)

    def __iter__(self) -> Iterator[T]:
        return iter(self._vals)


class ConcurrentList(List[T]):
    """Wraps another list so that every operation runs under one lock."""

    def __init__(self, inner: List[T]) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    def insert(self, index: int, val: T) -> None:
        with self._lock:
            self._inner.insert(index, val)

    def append(self, *args: T) -> None:
        with self._lock:
            self._inner.append(*args)

    def delete(self, index: int) -> None:
        with self._lock:
            self._inner.delete(index)

    def set(self, index: int, val: T) -> None:
        with self._lock:
            self._inner.set(index, val)

    def get(self, index: int) -> T:
        with self._lock:
            return self._inner.get(index)

    def for_each(self, visit: Visitor) -> None:
        with self._lock:
            self._inner.for_each(visit)

    def to_list(self) -> list[T]:
        with self._lock:
            return self._inner.to_list()

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())


class CowArrayList(List[T]):
    """A copy-on-write list: writers copy under a lock, readers never lock.

    Suited to data that is read often and changed rarely.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._lock = threading.Lock()
        self._vals: list[T] = list(values or ())

    def insert(self, index: int, val: T) -> None:
        with self._lock:
            _check_index(len(self._vals), index, allow_end=True)
            self._vals = [*self._vals[:index], val, *self._vals[index:]]

    def append(self, *args: T) -> None:
        with self._lock:
            self._vals = [*self._vals, *args]

    def delete(self, index: int) -> None:
        with self._lock:
            _check_index(len(self._vals), index)
            self._vals = self._vals[:index] + self._vals[index + 1:]

    def set(self, index: int, val: T) -> None:
        with self._lock:
            _check_index(len(self._vals), index)
            updated = list(self._vals)
            updated[index] = val
            self._vals = updated

    def get(self, index: int) -> T:
        vals = self._vals
        _check_index(len(vals), index)
        return vals[index]

    def for_each(self, visit: Visitor) -> None:
        for idx, val in enumerate(self._vals):
            visit(idx, val)

    def to_list(self) -> list[T]:
        return list(self._vals)

    def __len__(self) -> int:
        return len(self._vals)

    def __iter__(self) -> Iterator[T]:
        return iter(self._vals)