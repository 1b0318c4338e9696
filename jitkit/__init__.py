"""Generic containers, list helpers and thread synchronisation primitives."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "slices",
    "setops",
    "lists",
    "linkedlist",
    "skiplist",
    "maps",
    "hashmap",
    "treemap",
    "multimap",
    "sets",
    "cond",
    "syncmap",
    "pool",
]