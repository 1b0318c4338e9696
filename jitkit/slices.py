"""Helpers for working with lists: insertion, search, aggregation and mapping."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, Sequence, Tuple, TypeVar

from jitkit.errors import EmptySequenceError, IndexOutOfBoundsError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EqFunc = Callable[[T, T], bool]
MatchFunc = Callable[[T], bool]


def add(src: Optional[Sequence[T]], index: int, item: T) -> list[T]:
    """Return a new list with ``item`` inserted at ``index``."""
    items = list(src or ())
    if index < 0 or index > len(items):
        raise IndexOutOfBoundsError(len(items), index)
    items.insert(index, item)
    return items


def delete(src: Optional[Sequence[T]], index: int) -> list[T]:
    """Return a new list without the element at ``index``."""
    items = list(src or ())
    if index < 0 or index >= len(items):
        raise IndexOutOfBoundsError(len(items), index)
    del items[index]
    return items


def filter_delete(src: list[T], predicate: Callable[[int, T], bool]) -> list[T]:
    """Remove, in place, every element for which ``predicate(idx, elem)`` is true."""
    src[:] = [elem for idx, elem in enumerate(src) if not predicate(idx, elem)]
    return src


def maximum(items: Optional[Sequence[T]]) -> T:
    """Return the largest element; raise EmptySequenceError if there is none."""
    if not items:
        raise EmptySequenceError()
    return max(items)


def minimum(items: Optional[Sequence[T]]) -> T:
    """Return the smallest element; raise EmptySequenceError if there is none."""
    if not items:
        raise EmptySequenceError()
    return min(items)


def total(items: Optional[Iterable[T]]):
    """Return the sum of the elements, zero for an empty input."""
    return sum(items or ())


def contains_func(items: Optional[Iterable[T]], match: MatchFunc) -> bool:
    """Tell whether any element satisfies ``match``."""
    return any(match(v) for v in items or ())


def contains(items: Optional[Iterable[T]], elem: T) -> bool:
    """Tell whether ``elem`` is among the elements."""
    return contains_func(items, lambda v: v == elem)


def contains_any_func(
    items: Optional[Sequence[T]], elems: Optional[Sequence[T]], eq: EqFunc
) -> bool:
    """Tell whether any of ``elems`` is present, comparing with ``eq(item, elem)``."""
    return any(eq(v, e) for e in elems or () for v in items or ())


def contains_any(items: Optional[Iterable[T]], elems: Optional[Iterable[T]]) -> bool:
    """Tell whether any of ``elems`` is present."""
    present = set(items or ())
    return any(e in present for e in elems or ())


def contains_all_func(
    items: Optional[Sequence[T]], elems: Optional[Sequence[T]], eq: EqFunc
) -> bool:
    """Tell whether every one of ``elems`` is present; False if either input is None."""
    if items is None or elems is None:
        return False
    return all(any(eq(e, v) for v in items) for e in elems)


def contains_all(items: Optional[Iterable[T]], elems: Optional[Iterable[T]]) -> bool:
    """Tell whether every one of ``elems`` is present; False if either input is None."""
    if items is None or elems is None:
        return False
    present = set(items)
    return all(e in present for e in elems)


def find(items: Optional[Iterable[T]], match: MatchFunc) -> Optional[T]:
    """Return the first element satisfying ``match``, or None."""
    return next((v for v in items or () if match(v)), None)


def find_all(items: Optional[Iterable[T]], match: MatchFunc) -> list[T]:
    """Return every element satisfying ``match``, in order."""
    return [v for v in items or () if match(v)]


def index_func(items: Optional[Iterable[T]], match: MatchFunc) -> int:
    """Return the index of the first matching element, or -1."""
    return next((i for i, v in enumerate(items or ()) if match(v)), -1)


def index_of(items: Optional[Iterable[T]], elem: T) -> int:
    """Return the index of the first occurrence of ``elem``, or -1."""
    return index_func(items, lambda v: v == elem)


def last_index_func(items: Optional[Sequence[T]], match: MatchFunc) -> int:
    """Return the index of the last matching element, or -1."""
    seq = items or ()
    return next(
        (i for i in reversed(range(len(seq))) if match(seq[i])),
        -1,
    )


def last_index_of(items: Optional[Sequence[T]], elem: T) -> int:
    """Return the index of the last occurrence of ``elem``, or -1."""
    return last_index_func(items, lambda v: v == elem)


def index_all_func(items: Optional[Iterable[T]], match: MatchFunc) -> list[int]:
    """Return the indices of all matching elements."""
    return [i for i, v in enumerate(items or ()) if match(v)]


def index_all(items: Optional[Iterable[T]], elem: T) -> list[int]:
    """Return the indices of all occurrences of ``elem``."""
    return index_all_func(items, lambda v: v == elem)


def map_items(items: Optional[Iterable[T]], fn: Callable[[int, T], U]) -> list[U]:
    """Return ``fn(idx, item)`` for every element."""
    return [fn(i, v) for i, v in enumerate(items or ())]


def filter_map(
    items: Optional[Iterable[T]], fn: Callable[[int, T], Tuple[U, bool]]
) -> list[U]:
    """Map with ``fn(idx, item) -> (value, keep)`` and keep the accepted values."""
    result = []
    for i, v in enumerate(items or ()):
        value, keep = fn(i, v)
        if keep:
            result.append(value)
    return result


def to_dict(items: Optional[Iterable[V]], key_fn: Callable[[V], K]) -> dict[K, V]:
    """Build a dict keyed by ``key_fn(item)``; later items win on collision."""
    return {key_fn(v): v for v in items or ()}


def to_dict_with_val(
    items: Optional[Iterable[T]], fn: Callable[[T], Tuple[K, V]]
) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs that ``fn`` returns."""
    return dict(fn(v) for v in items or ())


def reverse(items: Optional[Iterable[T]]) -> list[T]:
    """Return a new list with the elements in reverse order."""
    return list(items or ())[::-1]


def reverse_in_place(items: list[T]) -> None:
    """Reverse ``items`` in place."""
    items.reverse()