import pytest

from jitkit.errors import (
    EmptySequenceError,
    IndexOutOfBoundsError,
    KeyValueLengthError,
    NilComparatorError,
)
from jitkit.slices import add, delete, maximum, minimum


def test_index_out_of_bounds_carries_length_and_index():
    err = IndexOutOfBoundsError(5, 7)
    assert err.length == 5
    assert err.index == 7


def test_index_out_of_bounds_message_mentions_values():
    message = str(IndexOutOfBoundsError(3, -1))
    assert "3" in message
    assert "-1" in message


def test_index_error_raised_by_add_is_an_index_error():
    with pytest.raises(IndexError) as info:
        add([1], 5, 0)
    assert isinstance(info.value, IndexOutOfBoundsError)
    assert info.value.length == 1
    assert info.value.index == 5


def test_index_error_raised_by_delete_reports_bounds():
    with pytest.raises(IndexOutOfBoundsError) as info:
        delete([1, 2, 3], 3)
    assert (info.value.length, info.value.index) == (3, 3)


def test_empty_sequence_error_is_value_error():
    with pytest.raises(ValueError):
        maximum([])
    with pytest.raises(EmptySequenceError):
        minimum(None)


def test_nil_comparator_message():
    assert "comparator can not be nil" in str(NilComparatorError())


def test_key_value_length_error_message():
    err = KeyValueLengthError()
    assert isinstance(err, ValueError)
    assert "same length" in str(err)