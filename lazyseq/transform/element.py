"""Element-wise combinators

Transform, keep or observe elements one at a time. None of them buffers."""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable, Iterator

from .._helpers import identity, indexed, release
from .._types import Cursor, Indexed, Selector, Source
from ..lift.up import adapt


def map_cursor[T, U](cursor: Cursor[T], fn: Indexed[T, U]) -> Cursor[U]:
    """Transform every element; fn receives (value, index) if it takes two args."""
    call = indexed(fn)

    def run() -> Iterator[U]:
        try:
            for index, value in enumerate(cursor):
                yield call(value, index)
        finally:
            release(cursor)

    return run()


def filter_cursor[T](cursor: Cursor[T], predicate: Indexed[T, object]) -> Cursor[T]:
    """Keep elements for which predicate holds."""
    call = indexed(predicate)

    def run() -> Iterator[T]:
        try:
            for index, value in enumerate(cursor):
                if call(value, index):
                    yield value
        finally:
            release(cursor)

    return run()


def compact_cursor[T](cursor: Cursor[T | None]) -> Cursor[T]:
    """Drop None elements."""
    return typing.cast(Cursor[T], filter_cursor(cursor, lambda value: value is not None))


def with_each_cursor[T](cursor: Cursor[T], effect: Indexed[T, object]) -> Cursor[T]:
    """Run a side effect per element as it passes through, element unchanged."""
    call = indexed(effect)

    def run() -> Iterator[T]:
        try:
            for index, value in enumerate(cursor):
                call(value, index)
                yield value
        finally:
            release(cursor)

    return run()


def flat_map_cursor[T, U](cursor: Cursor[T], fn: Indexed[T, Source[U]]) -> Cursor[U]:
    """
    Map every element to a source and yield that source's elements.

    One level only. A result that is not a source raises InvalidSourceError.
    NOTE: strings are iterables, so they are flattened into characters.
    """
    call = indexed(fn)

    def run() -> Iterator[U]:
        try:
            for index, value in enumerate(cursor):
                inner = adapt(call(value, index))
                try:
                    yield from inner
                finally:
                    release(inner)
        finally:
            release(cursor)

    return run()


def flatten_cursor[T](cursor: Cursor[Source[T]]) -> Cursor[T]:
    """flat_map(identity)."""
    return flat_map_cursor(cursor, identity)


def unique_cursor[T](
    cursor: Cursor[T],
    key: Selector[T, Hashable] | None = None,
) -> Cursor[T]:
    """
    Keep only the first element seen per key (default: the element itself).

    The set of seen keys lives as long as the cursor is consumed.
    """
    key_of: Callable[[T], Hashable] = key if key is not None else identity

    def run() -> Iterator[T]:
        seen: set[Hashable] = set()
        try:
            for value in cursor:
                k = key_of(value)
                if k not in seen:
                    seen.add(k)
                    yield value
        finally:
            release(cursor)

    return run()


__all__ = (
    "compact_cursor",
    "filter_cursor",
    "flat_map_cursor",
    "flatten_cursor",
    "map_cursor",
    "unique_cursor",
    "with_each_cursor",
)
