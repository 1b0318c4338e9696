# jitkit

Generic containers, list helpers and thread synchronisation primitives for
Python 3.10 and later.

## Installation

    pip install jitkit

The ordered containers (`SkipList`, `TreeMap`, `TreeSet` and the tree-backed
`MultiMap`) use `sortedcontainers`, which is installed with the package.

## Modules

### `jitkit.slices`

Functions over plain lists and sequences. A `None` input is treated as empty.

- `add(src, index, item)` and `delete(src, index)` return a new list with an
  element inserted or removed; an index out of range raises
  `IndexOutOfBoundsError`.
- `filter_delete(src, predicate)` removes, in place, every element for which
  `predicate(idx, elem)` is true, and returns the same list.
- `maximum(items)` and `minimum(items)` raise `EmptySequenceError` on an
  empty input; `total(items)` returns `0` for one.
- `contains`, `contains_any` and `contains_all`, each with a `*_func`
  variant taking a match or equality function. `contains_all` and
  `contains_all_func` return `False` when either argument is `None`.
- `find` (returns `None` when nothing matches), `find_all`, `index_of`,
  `last_index_of`, `index_all` and their `*_func` variants; the index
  functions return `-1` when nothing matches.
- `map_items(items, fn)` calls `fn(idx, item)`; `filter_map(items, fn)` keeps
  the values for which `fn(idx, item)` returns `(value, True)`.
- `to_dict(items, key_fn)` and `to_dict_with_val(items, fn)` build dicts.
- `reverse(items)` returns a reversed copy; `reverse_in_place(items)`
  reverses the list itself.

### `jitkit.setops`

`diff_set`, `intersect_set`, `symm_diff_set` and `union_set` take two
iterables of hashable elements and return a list of distinct elements. Each
has a `*_func` variant that takes an equality function `eq(a, b)` instead,
for elements that are not hashable.

### `jitkit.lists`

The abstract `List` interface: `insert`, `append(*values)`, `delete`, `set`,
`get`, `for_each(visit)`, `to_list`, `len()` and iteration. An index out of
range raises `IndexOutOfBoundsError`; `insert` also accepts an index equal to
the length.

- `ArrayList(values=None)` is backed by a Python list.
- `CowArrayList(values=None)` copies its storage on every write under a lock
  and reads without locking; it suits data read often and changed rarely.
- `ConcurrentList(inner)` runs every operation of another `List` under one
  lock.

### `jitkit.linkedlist`

`LinkedList(values=None)` is a doubly linked list with the `List` interface.
Positional lookups walk from whichever end is closer.

### `jitkit.skiplist`

`SkipList(compare)` keeps its elements sorted by `compare(a, b)`, which
returns a negative number, zero or a positive number. Equal elements may
repeat. It offers `insert`, `delete` (returns whether an element was
removed), `exists`, `get(index)`, `peek()` for the smallest element,
`to_list`, `len()` and iteration. `get` raises `IndexOutOfBoundsError` and
`peek` on an empty list raises `EmptySequenceError`. A `None` comparator
raises `NilComparatorError`.

### `jitkit.maps`

- `keys`, `vals`, `keys_vals` (a list of `MapKV(key, val)`), `merge(*maps)`
  (later values win) and `merge_func(merge_fn, *maps)` (conflicts become
  `merge_fn(existing, new)`).
- `to_map(keys, vals)` pairs two sequences into a dict; it raises
  `ValueError` if either is `None` and `KeyValueLengthError` if their lengths
  differ.
- `MapLike` is the interface shared by the map containers: `size`, `keys`,
  `vals`, `put`, `delete`, `get`, `items` and `in`. `get` and `delete` raise
  `KeyError` for a missing key.
- `BuiltInMap(data=None)` implements `MapLike` over a dict, which it shares
  rather than copies.

### `jitkit.hashmap`

`HashMap()` stores keys that subclass `HashKey` and implement
`hash_code()` and `equals(other)`. Keys with the same hash code share a
bucket, kept in insertion order. `size()` reports the number of buckets in
use, not the number of entries; `buckets()` returns a snapshot of every
bucket as a list of `(key, value)` pairs.

### `jitkit.treemap`

`TreeMap(compare)` keeps its entries in key order by `compare(a, b)`; keys
need not be hashable. `TreeMap.from_dict(compare, data)` builds one from a
dict, and `key_vals()` returns the keys and the values as two lists. A
`None` comparator raises `NilComparatorError`.

### `jitkit.multimap`

`MultiMap` keeps a list of values under each key. Build it with
`MultiMap.tree(compare)` or `MultiMap.hashed()` (keys must then be
`HashKey` instances), or pass any `MapLike` to `MultiMap(backing)`. It offers
`put`, `put_many(key, *values)`, `get` and `vals` (both return copies),
`delete`, `keys`, `size` (the size of the backing map) and `items`, which
yields one `(key, value)` pair per stored value.

### `jitkit.sets`

The `Set` interface: `add`, `delete` (ignores missing elements), `exists`
and `elems`. `MapSet()` holds hashable elements in no particular order;
`TreeSet(compare)` keeps them in comparator order. Both support `len()`.

### `jitkit.cond`

`Cond(lock=None)` is a condition variable bound to a lock (a new
`threading.Lock` by default). It can be used as a context manager to take
the lock. `wait(timeout=None)` must be called with the lock held; it releases
the lock, waits for `signal()` or `broadcast()`, and takes the lock back.
Waiters wake in the order they began waiting. If no signal arrives within
`timeout` seconds, `wait` raises `TimeoutError` with the lock held again; a
signal that reaches a waiter just as it times out is passed on to the next
waiter rather than lost.

### `jitkit.syncmap`

`SyncMap()` is a dictionary whose operations run under one lock: `load`,
`store`, `load_or_store` (returns `(value, loaded)`), `load_and_delete`,
`delete`, `range(fn)` (stops when `fn` returns `False`), `items`, `in` and
`len()`. `load` and `load_and_delete` raise `KeyError` for a missing key.

### `jitkit.pool`

`Pool(factory)` hands out objects with `get()`, reusing those returned with
`put(item)` and calling `factory()` when none are free.

### `jitkit.errors`

`IndexOutOfBoundsError` (an `IndexError` carrying `length` and `index`),
`EmptySequenceError`, `NilComparatorError` and `KeyValueLengthError` (all
`ValueError`).

## Example

    from jitkit.lists import ArrayList
    from jitkit.treemap import TreeMap
    from jitkit.slices import maximum

    items = ArrayList([1, 2, 3])
    items.insert(0, 0)
    items.append(4, 5)
    print(items.to_list())          # [0, 1, 2, 3, 4, 5]

    tree = TreeMap.from_dict(lambda a, b: a - b, {3: "c", 1: "a", 2: "b"})
    print(tree.keys())              # [1, 2, 3]

    print(maximum([1, -2, 3]))      # 3

## What it does not do

jitkit is a library only: it has no command-line tool, and its containers
live in memory with no persistence.

## Running the tests

    pip install "jitkit[test]"
    pytest