import pytest

from jitkit.errors import KeyValueLengthError
from jitkit.maps import (
    BuiltInMap,
    MapKV,
    keys,
    keys_vals,
    merge,
    merge_func,
    to_map,
    vals,
)


@pytest.mark.parametrize(
    "mapping, want",
    [({1: 1, 2: 2, 3: 3}, [1, 2, 3]), ({}, []), (None, [])],
)
def test_keys(mapping, want):
    assert sorted(keys(mapping)) == want


@pytest.mark.parametrize(
    "mapping, want",
    [({1: 1, 2: 2, 3: 3}, [1, 2, 3]), ({}, []), (None, [])],
)
def test_vals(mapping, want):
    assert sorted(vals(mapping)) == want


@pytest.mark.parametrize(
    "mapping, want",
    [
        ({1: 1, 2: 2, 3: 3}, [MapKV(1, 1), MapKV(2, 2), MapKV(3, 3)]),
        ({}, []),
        (None, []),
    ],
)
def test_keys_vals(mapping, want):
    assert sorted(keys_vals(mapping), key=lambda kv: kv.key) == want


def test_to_map_basic():
    assert to_map([1, 2, 3], [1, 2, 3]) == {1: 1, 2: 2, 3: 3}


def test_to_map_empty():
    assert to_map([], []) == {}


@pytest.mark.parametrize("ks, vs", [(None, [1, 2, 3]), ([1, 2, 3], None)])
def test_to_map_none(ks, vs):
    with pytest.raises(ValueError):
        to_map(ks, vs)


@pytest.mark.parametrize(
    "ks, vs", [([1, 2, 3], [1, 2]), ([], [1, 2, 3]), ([1, 2, 3], [])]
)
def test_to_map_length_mismatch(ks, vs):
    with pytest.raises(KeyValueLengthError):
        to_map(ks, vs)


@pytest.mark.parametrize(
    "maps, want",
    [
        ([{1: 1, 2: 2, 3: 3}, {4: 4, 5: 5, 6: 6}], {1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: 6}),
        ([{1: 1, 2: 2, 3: 3}, {1: 10, 2: 20, 3: 30}], {1: 10, 2: 20, 3: 30}),
        (
            [{1: 1, 2: 2, 3: 3}, {1: 10, 2: 20, 3: 30, 4: 40}],
            {1: 10, 2: 20, 3: 30, 4: 40},
        ),
        (
            [
                {1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: 6, 7: 7},
                {1: 10, 2: 20, 3: 30, 4: 40, 5: 50, 6: 60},
                {1: 10, 2: 20, 3: 30},
                {1: 100, 2: 200, 3: 300},
                {1: 1000, 2: 2000, 3: 3000},
            ],
            {1: 1000, 2: 2000, 3: 3000, 4: 40, 5: 50, 6: 60, 7: 7},
        ),
    ],
)
def test_merge(maps, want):
    assert merge(*maps) == want


def _add(a, b):
    return a + b


def _mul(a, b):
    return a * b


@pytest.mark.parametrize(
    "maps, fn, want",
    [
        (
            [{1: 1, 2: 2, 3: 3}, {4: 4, 5: 5, 6: 6}],
            _add,
            {1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: 6},
        ),
        ([{1: 1, 2: 2, 3: 3}, {1: 10, 2: 20, 3: 30}], _add, {1: 11, 2: 22, 3: 33}),
        (
            [{1: 1, 2: 2, 3: 3}, {1: 10, 2: 20, 3: 30, 4: 40}],
            _mul,
            {1: 10, 2: 40, 3: 90, 4: 40},
        ),
        (
            [
                {1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: 6, 7: 7},
                {1: 10, 2: 20, 3: 30, 4: 40, 5: 50, 6: 60},
                {1: 10, 2: 20, 3: 30},
                {1: 100, 2: 200, 3: 300},
                {1: 1000, 2: 2000, 3: 3000},
            ],
            _add,
            {1: 1121, 2: 2242, 3: 3363, 4: 44, 5: 55, 6: 66, 7: 7},
        ),
    ],
)
def test_merge_func(maps, fn, want):
    assert merge_func(fn, *maps) == want


@pytest.mark.parametrize("key, val", [(4, 4), (1, 2)])
def test_builtin_put(key, val):
    m = BuiltInMap({1: 1, 2: 2, 3: 3})
    m.put(key, val)
    assert m.get(key) == val


def test_builtin_delete_existing():
    m = BuiltInMap({1: 1, 2: 2, 3: 3})
    assert m.delete(1) == 1
    with pytest.raises(KeyError):
        m.get(1)


@pytest.mark.parametrize("data, key", [({1: 1, 2: 2, 3: 3}, 4), ({}, 1)])
def test_builtin_delete_missing(data, key):
    m = BuiltInMap(data)
    with pytest.raises(KeyError):
        m.delete(key)


def test_builtin_get():
    assert BuiltInMap({1: 1, 2: 2, 3: 3}).get(1) == 1


@pytest.mark.parametrize("data, key", [({1: 1, 2: 2, 3: 3}, 4), ({}, 1)])
def test_builtin_get_missing(data, key):
    with pytest.raises(KeyError):
        BuiltInMap(data).get(key)


@pytest.mark.parametrize(
    "data, want_keys, want_vals, want_size",
    [({"a": 1, "b": 2, "c": 3}, ["a", "b", "c"], [1, 2, 3], 3), ({}, [], [], 0)],
)
def test_builtin_keys_vals_size(data, want_keys, want_vals, want_size):
    m = BuiltInMap(data)
    assert sorted(m.keys()) == want_keys
    assert sorted(m.vals()) == want_vals
    assert m.size() == want_size


def test_builtin_items_and_contains():
    m = BuiltInMap({"a": 1, "b": 2})
    assert sorted(m.items()) == [("a", 1), ("b", 2)]
    assert "a" in m
    assert "z" not in m