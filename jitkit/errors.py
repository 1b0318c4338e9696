"""Exceptions raised by the collection helpers."""

from __future__ import annotations


class IndexOutOfBoundsError(IndexError):
    """Raised when an index falls outside the valid range of a sequence."""

    def __init__(self, length: int, index: int) -> None:
        super().__init__(f"index {index} out of bounds for length {length}")
        self.length = length
        self.index = index


class EmptySequenceError(ValueError):
    """Raised when an operation needs at least one element but got none."""

    def __init__(self) -> None:
        super().__init__("sequence is empty")


class NilComparatorError(ValueError):
    """Raised when an ordered container is built without a comparator."""

    def __init__(self) -> None:
        super().__init__("comparator can not be nil")


class KeyValueLengthError(ValueError):
    """Raised when key and value sequences differ in length."""

    def __init__(self) -> None:
        super().__init__("keys and vals must have the same length")