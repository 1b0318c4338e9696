"""Map helpers and a common interface for the map containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterator, Mapping, Optional, Sequence, TypeVar

from jitkit.errors import KeyValueLengthError

K = TypeVar("K")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


@dataclass(frozen=True)
class MapKV(Generic[K, V]):
    """A key-value pair taken from a map."""

    key: K
    val: V


class MapLike(ABC, Generic[K, V]):
    """Common interface of the map containers; missing keys raise KeyError."""

    @abstractmethod
    def size(self) -> int:
        """Return the size of the map."""

    @abstractmethod
    def keys(self) -> list[K]:
        """Return the keys."""

    @abstractmethod
    def vals(self) -> list[V]:
        """Return the values."""

    @abstractmethod
    def put(self, key: K, val: V) -> None:
        """Store ``val`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: K) -> V:
        """Remove ``key`` and return its value."""

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value stored under ``key``."""

    @abstractmethod
    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs."""

    def __contains__(self, key: object) -> bool:
        try:
            self.get(key)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True


class BuiltInMap(MapLike[H, V]):
    """A map over a plain dict, which it shares rather than copies."""

    def __init__(self, data: Optional[dict[H, V]] = None) -> None:
        self._data: dict[H, V] = {} if data is None else data

    def size(self) -> int:
        return len(self._data)

    def keys(self) -> list[H]:
        return keys(self._data)

    def vals(self) -> list[V]:
        return vals(self._data)

    def put(self, key: H, val: V) -> None:
        self._data[key] = val

    def delete(self, key: H) -> V:
        return self._data.pop(key)

    def get(self, key: H) -> V:
        return self._data[key]

    def items(self) -> Iterator[tuple[H, V]]:
        return iter(list(self._data.items()))


def keys(mapping: Optional[Mapping[H, V]]) -> list[H]:
    """Return the keys of ``mapping``; empty for None."""
    return list(mapping or {})


def vals(mapping: Optional[Mapping[H, V]]) -> list[V]:
    """Return the values of ``mapping``; empty for None."""
    return list((mapping or {}).values())


def keys_vals(mapping: Optional[Mapping[H, V]]) -> list[MapKV[H, V]]:
    """Return the key-value pairs of ``mapping``; empty for None."""
    return [MapKV(k, v) for k, v in (mapping or {}).items()]


def merge(*args: Optional[Mapping[H, V]]) -> dict[H, V]:
    """Merge the mappings into a new dict; later values win on conflict."""
    return merge_func(lambda _first, second: second, *args)


def merge_func(merge_fn: Callable[[V, V], V], *args: Optional[Mapping[H, V]]) -> dict[H, V]:
    """Merge the mappings; on conflict store ``merge_fn(existing, new)``."""
    result: dict[H, V] = {}
    for mapping in args:
        for k, v in (mapping or {}).items():
            result[k] = merge_fn(result[k], v) if k in result else v
    return result


def to_map(keys: Optional[Sequence[H]], vals: Optional[Sequence[V]]) -> dict[H, V]:
    """Pair ``keys`` with ``vals`` into a dict.

    Raises ValueError if either is None and KeyValueLengthError if their
    lengths differ.
    """
    if keys is None or vals is None:
        raise ValueError("keys or vals can not be None")
    if len(keys) != len(vals):
        raise KeyValueLengthError()
    return dict(zip(keys, vals))