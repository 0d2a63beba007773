"""
Slicing combinators
===================

Positional combinators: take/drop by count or by predicate, and splice.

Non-negative positions stream. Negative positions count from the end, which
can only be known once the source is exhausted, so those variants buffer:
- take(-n): sliding window of n elements
- drop(-n), splice(-k, ...): full materialization

Buffering happens on the first pull of the result, never at call time.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .._helpers import indexed, release
from .._types import Cursor, Indexed


def take_cursor[T](cursor: Cursor[T], limit: int) -> Cursor[T]:
    """
    limit >= 0: first `limit` elements, exactly `limit` pulls from upstream.
    limit < 0: last `-limit` elements.

    Upstream is released as soon as the limit is reached.
    """
    if limit < 0:
        return take_last_cursor(cursor, -limit)

    def run() -> Iterator[T]:
        try:
            if limit == 0:
                return
            for taken, value in enumerate(cursor, start=1):
                yield value
                if taken >= limit:
                    return
        finally:
            release(cursor)

    return run()


def take_last_cursor[T](cursor: Cursor[T], count: int) -> Cursor[T]:
    """Last `count` elements via a window that drops the oldest once full."""

    def run() -> Iterator[T]:
        try:
            window: deque[T] = deque(cursor, maxlen=count)
        finally:
            release(cursor)
        yield from window

    return run()


def drop_cursor[T](cursor: Cursor[T], count: int) -> Cursor[T]:
    """
    count >= 0: skip the first `count` elements, yield the rest.
    count < 0: drop the last `-count` elements (materializes the source).
    """

    def run() -> Iterator[T]:
        try:
            if count < 0:
                items = list(cursor)
                yield from items[: max(len(items) + count, 0)]
                return
            for index, value in enumerate(cursor):
                if index >= count:
                    yield value
        finally:
            release(cursor)

    return run()


def take_while_cursor[T](cursor: Cursor[T], predicate: Indexed[T, object]) -> Cursor[T]:
    """Yield while predicate holds; the first failure ends the sequence."""
    call = indexed(predicate)

    def run() -> Iterator[T]:
        try:
            for index, value in enumerate(cursor):
                if not call(value, index):
                    return
                yield value
        finally:
            release(cursor)

    return run()


def drop_while_cursor[T](cursor: Cursor[T], predicate: Indexed[T, object]) -> Cursor[T]:
    """Skip while predicate holds, then yield everything unconditionally."""
    call = indexed(predicate)

    def run() -> Iterator[T]:
        try:
            for index, value in enumerate(cursor):
                if not call(value, index):
                    yield value
                    break
            else:
                return
            yield from cursor
        finally:
            release(cursor)

    return run()


def splice_cursor[T](
    cursor: Cursor[T],
    start: int,
    delete_count: int,
    *items: T,
) -> Cursor[T]:
    """
    Replace `delete_count` elements at `start` with `items`, like list splicing.

    start >= 0 streams; when the source ends before `start`, nothing is
    inserted and the source is yielded unchanged.
    start < 0 materializes the source and counts from the end.
    """

    def run() -> Iterator[T]:
        try:
            if start < 0:
                buffered = list(cursor)
                begin = max(len(buffered) + start, 0)
                removed = min(max(delete_count, 0), len(buffered) - begin)
                yield from buffered[:begin]
                yield from items
                yield from buffered[begin + removed :]
                return
            for index, value in enumerate(cursor):
                if index == start:
                    yield from items
                if index < start or index >= start + delete_count:
                    yield value
        finally:
            release(cursor)

    return run()


def replace_at_cursor[T](cursor: Cursor[T], index: int, value: T) -> Cursor[T]:
    """Replace the element at index. splice(index, 1, value)."""
    return splice_cursor(cursor, index, 1, value)


__all__ = (
    "drop_cursor",
    "drop_while_cursor",
    "replace_at_cursor",
    "splice_cursor",
    "take_cursor",
    "take_last_cursor",
    "take_while_cursor",
)
