"""Sorting aggregator"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping

from .._types import Cursor, SortKey
from .materialize import to_list


def _key_function(key: SortKey[typing.Any]) -> Callable[[typing.Any], typing.Any]:
    if callable(key):
        return key

    def lookup(item: typing.Any) -> typing.Any:
        if isinstance(item, Mapping):
            return item[key]
        return getattr(item, key)

    return lookup


def to_sorted_by[T](cursor: Cursor[T], *keys: SortKey[T]) -> list[T]:
    """
    Materialize and sort ascending by several keys.

    Keys are compared in the order given, later keys only breaking ties of
    earlier ones. The sort is stable, so fully tied elements keep source order.
    A key is a key function, or a name looked up as item (mappings) or attribute.
    """
    items = to_list(cursor)
    extractors = [_key_function(key) for key in keys]
    # list.sort is stable: sorting by the least significant key first gives
    # lexicographic order across all keys
    for extract in reversed(extractors):
        items.sort(key=extract)
    return items


__all__ = ("to_sorted_by",)
