"""Materializing aggregators

Terminal operations that pull the cursor and hand back plain values."""

from __future__ import annotations

import typing

from .._helpers import MISSING, release
from .._types import Cursor
from ..transform.slicing import drop_cursor, take_cursor


def to_list[T](cursor: Cursor[T]) -> list[T]:
    """Pull everything into a list."""
    try:
        return list(cursor)
    finally:
        release(cursor)


def first[T](cursor: Cursor[T]) -> T | None:
    """Pull one element (None when empty) and release the cursor."""
    try:
        value = next(cursor, MISSING)
    finally:
        release(cursor)
    return None if value is MISSING else typing.cast(T, value)


def last[T](cursor: Cursor[T]) -> T | None:
    """Consume everything, keep the last element seen (None when empty)."""
    value: object = MISSING
    try:
        for value in cursor:
            pass
    finally:
        release(cursor)
    return None if value is MISSING else typing.cast(T, value)


def count_items(cursor: Cursor[object]) -> int:
    """Consume everything and count the elements."""
    total = 0
    try:
        for _ in cursor:
            total += 1
    finally:
        release(cursor)
    return total


def at[T](cursor: Cursor[T], index: int) -> T | None:
    """
    Element at index, None when out of range.

    - index >= 0:  drop(index).first()
    - index == -1: last()
    - index < -1:  take(index).at(0), i.e. through the take(-n) window
    """
    if index == -1:
        return last(cursor)
    if index < 0:
        return at(take_cursor(cursor, index), 0)
    return first(drop_cursor(cursor, index))


def total[T](cursor: Cursor[T], start: typing.Any = 0) -> typing.Any:
    """Sum of all elements, starting from `start`."""
    try:
        return sum(cursor, start)
    finally:
        release(cursor)


__all__ = ("at", "count_items", "first", "last", "to_list", "total")
