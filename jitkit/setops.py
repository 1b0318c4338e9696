"""Set operations over lists: difference, intersection, symmetric difference, union."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqFunc = Callable[[T, T], bool]


def _member(items: Iterable[T], value: T, eq: EqFunc) -> bool:
    return any(eq(value, t) for t in items)


def _dedup_func(items: Sequence[T], eq: EqFunc) -> list[T]:
    """Keep each element only where no equal element follows it."""
    return [v for i, v in enumerate(items) if not _member(items[i + 1:], v, eq)]


def _unique(items: Iterable[H]) -> list[H]:
    return list(dict.fromkeys(items))


def diff_set(src: Optional[Iterable[H]], dst: Optional[Iterable[H]]) -> list[H]:
    """Return the distinct elements of ``src`` that are not in ``dst``."""
    excluded = set(dst or ())
    return [v for v in _unique(src or ()) if v not in excluded]


def diff_set_func(
    src: Optional[Sequence[T]], dst: Optional[Sequence[T]], eq: EqFunc
) -> list[T]:
    """Return the distinct elements of ``src`` with no ``eq`` match in ``dst``."""
    others = dst or ()
    kept = [v for v in src or () if not _member(others, v, eq)]
    return _dedup_func(kept, eq)


def intersect_set(src: Optional[Iterable[H]], dst: Optional[Iterable[H]]) -> list[H]:
    """Return the distinct elements present in both inputs."""
    present = set(src or ())
    return _unique(v for v in dst or () if v in present)


def intersect_set_func(
    src: Optional[Sequence[T]], dst: Optional[Sequence[T]], eq: EqFunc
) -> list[T]:
    """Return the distinct elements of ``src`` that have an ``eq`` match in ``dst``."""
    others = dst or ()
    shared = [v for v in src or () if _member(others, v, eq)]
    return _dedup_func(shared, eq)


def symm_diff_set(src: Optional[Iterable[H]], dst: Optional[Iterable[H]]) -> list[H]:
    """Return the distinct elements present in exactly one of the inputs."""
    left, right = _unique(src or ()), _unique(dst or ())
    left_set, right_set = set(left), set(right)
    return [v for v in left if v not in right_set] + [v for v in right if v not in left_set]


def symm_diff_set_func(
    src: Optional[Sequence[T]], dst: Optional[Sequence[T]], eq: EqFunc
) -> list[T]:
    """Return the distinct elements without an ``eq`` match in the other input."""
    left, right = list(src or ()), list(dst or ())
    only_left = [v for v in left if not _member(right, v, eq)]
    only_right = [v for v in right if not _member(left, v, eq)]
    return _dedup_func(only_left + only_right, eq)


def union_set(src: Optional[Iterable[H]], dst: Optional[Iterable[H]]) -> list[H]:
    """Return the distinct elements present in either input."""
    return _unique([*(src or ()), *(dst or ())])


def union_set_func(
    src: Optional[Sequence[T]], dst: Optional[Sequence[T]], eq: EqFunc
) -> list[T]:
    """Return the distinct elements of both inputs, distinctness decided by ``eq``."""
    return _dedup_func([*(src or ()), *(dst or ())], eq)