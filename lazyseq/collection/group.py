"""Grouping aggregators

Group, index and deduplicate elements. Groups are plain dicts, which keep
keys in first-seen order."""

from __future__ import annotations

from collections.abc import Hashable

from .._helpers import identity, indexed, release
from .._types import Cursor, Indexed, Selector


def group_by[T, K: Hashable](cursor: Cursor[T], key: Indexed[T, K]) -> dict[K, list[T]]:
    """
    Map key -> elements with that key.

    Keys appear in first-seen order; elements keep source order within a group.
    key receives (value, index) if it takes two arguments.

    Example:
        group_by(iter(["apple", "banana", "apricot"]), lambda w: w[0])
        # {"a": ["apple", "apricot"], "b": ["banana"]}
    """
    call = indexed(key)
    groups: dict[K, list[T]] = {}
    try:
        for index, value in enumerate(cursor):
            groups.setdefault(call(value, index), []).append(value)
    finally:
        release(cursor)
    return groups


def to_map[T, K: Hashable](cursor: Cursor[T], key: Indexed[T, K]) -> dict[K, list[T]]:
    """Same grouping as group_by(); kept as the map-shaped materializer next to to_set()."""
    return group_by(cursor, key)


def to_set[T: Hashable](cursor: Cursor[T]) -> set[T]:
    """Distinct elements."""
    return set(group_by(cursor, identity))


def uniqueness[T](cursor: Cursor[T], key: Selector[T, Hashable] | None = None) -> bool:
    """
    True when no two elements share a key (default: the element itself).

    Stops pulling at the first duplicate.
    """
    key_of = key if key is not None else identity
    seen: set[Hashable] = set()
    try:
        for value in cursor:
            k = key_of(value)
            if k in seen:
                return False
            seen.add(k)
        return True
    finally:
        release(cursor)


__all__ = ("group_by", "to_map", "to_set", "uniqueness")
