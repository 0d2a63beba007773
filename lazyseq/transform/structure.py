"""Structural combinators

Change the shape of a sequence: concatenate, separate, interleave, group
into chunks, split tuples apart, replay."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator

from .._helpers import MISSING, indexed, release
from .._types import Cursor, Source
from ..lift.up import adapt


def concat_cursor[T](cursor: Cursor[T], items: Source[T]) -> Cursor[T]:
    """Receiver first; `items` is only adapted and pulled once the receiver is exhausted."""

    def run() -> Iterator[T]:
        try:
            yield from cursor
        finally:
            release(cursor)
        tail = adapt(items)
        try:
            yield from tail
        finally:
            release(tail)

    return run()


def prepend_many_cursor[T](cursor: Cursor[T], items: Source[T]) -> Cursor[T]:
    """`items` first, then the receiver."""

    def run() -> Iterator[T]:
        try:
            head = adapt(items)
            try:
                yield from head
            finally:
                release(head)
            yield from cursor
        finally:
            release(cursor)

    return run()


def append_cursor[T](cursor: Cursor[T], item: T) -> Cursor[T]:
    return concat_cursor(cursor, (item,))


def prepend_cursor[T](cursor: Cursor[T], item: T) -> Cursor[T]:
    return prepend_many_cursor(cursor, (item,))


def interpose_with_cursor[T, S](
    cursor: Cursor[T],
    separator: Callable[[T, T], S] | Callable[[T, T, int], S],
) -> Cursor[T | S]:
    """
    Insert separator(lhs, rhs, index) between adjacent elements.

    index is the 0-based position of the pair; separators that take two
    arguments are called without it.
    """
    call = indexed(separator, extra=2)

    def run() -> Iterator[T | S]:
        try:
            previous = next(cursor, MISSING)
            if previous is MISSING:
                return
            yield previous
            for index, current in enumerate(cursor):
                yield call(previous, current, index)
                yield current
                previous = current
        finally:
            release(cursor)

    return run()


def interpose_cursor[T, S](cursor: Cursor[T], separator: S) -> Cursor[T | S]:
    """Insert a fixed separator between adjacent elements."""
    return interpose_with_cursor(cursor, lambda _lhs, _rhs: separator)


def interleave_cursor[T, U](cursor: Cursor[T], other: Source[U]) -> Cursor[T | U]:
    """
    Alternate receiver and other, receiver first on every step.

    When one side runs out, the rest of the other is yielded unchanged.
    """
    second = adapt(other)

    def run() -> Iterator[T | U]:
        try:
            while True:
                left = next(cursor, MISSING)
                if left is MISSING:
                    yield from second
                    return
                yield left
                right = next(second, MISSING)
                if right is MISSING:
                    yield from cursor
                    return
                yield right
        finally:
            release(cursor)
            release(second)

    return run()


def chunk_cursor[T](cursor: Cursor[T], size: int) -> Cursor[list[T]]:
    """
    Group into lists of `size`; the last one holds the remainder.

    Each chunk is pulled in one go from the same cursor, so nothing else may
    pull that cursor while a chunk is being built.
    """
    if size < 1:
        raise ValueError("chunk() size must be >= 1")

    def run() -> Iterator[list[T]]:
        try:
            while True:
                # islice doesn't close the cursor it reads from
                group = list(itertools.islice(cursor, size))
                if not group:
                    return
                yield group
                if len(group) < size:
                    return
        finally:
            release(cursor)

    return run()


def chunk_with_cursor[T](cursor: Cursor[T], same: Callable[[T, T], object]) -> Cursor[list[T]]:
    """Group consecutive elements while same(previous, current) holds."""

    def run() -> Iterator[list[T]]:
        try:
            first = next(cursor, MISSING)
            if first is MISSING:
                return
            group = [first]
            for value in cursor:
                if same(group[-1], value):
                    group.append(value)
                else:
                    yield group
                    group = [value]
            yield group
        finally:
            release(cursor)

    return run()


class _UnzipBranch:
    """
    One position of an unzipped cursor.

    Branches share the upstream through itertools.tee; the upstream is released
    once every branch has been exhausted or closed.
    """

    __slots__ = ("_source", "_position", "_upstream", "_live", "_closed")

    def __init__(
        self,
        source: Iterator[tuple[object, ...]],
        position: int,
        upstream: Cursor[tuple[object, ...]],
        live: list[int],
    ) -> None:
        self._source = source
        self._position = position
        self._upstream = upstream
        self._live = live
        self._closed = False

    def __iter__(self) -> _UnzipBranch:
        return self

    def __next__(self) -> object:
        if self._closed:
            raise StopIteration
        try:
            group = next(self._source)
        except StopIteration:
            self.close()
            raise
        return group[self._position]

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._live[0] -= 1
        if self._live[0] == 0:
            release(self._upstream)


def unzip_cursors(cursor: Cursor[tuple[object, ...]], width: int = 2) -> tuple[Cursor[object], ...]:
    """
    Split a cursor of tuples into `width` cursors of their positions.

    Elements pulled through one branch are buffered until the others reach them.
    The upstream is released when the last branch finishes or is closed.
    """
    if width < 1:
        raise ValueError("unzip() width must be >= 1")

    # branches still open, shared by all of them
    live = [width]
    return tuple(
        _UnzipBranch(branch, position, cursor, live)
        for position, branch in enumerate(itertools.tee(cursor, width))
    )


def default_if_empty_cursor[T, D](cursor: Cursor[T], provider: Callable[[], D]) -> Cursor[T | D]:
    """Yield provider() once if the receiver is empty, else the receiver unchanged."""

    def run() -> Iterator[T | D]:
        try:
            first = next(cursor, MISSING)
            if first is MISSING:
                yield provider()
                return
            yield first
            yield from cursor
        finally:
            release(cursor)

    return run()


def loop_cursor[T](cursor: Cursor[T], times: int | None = None) -> Cursor[T]:
    """
    Replay the receiver `times` times (forever when None).

    The first pass streams and is buffered; later passes replay the buffer.
    An empty receiver ends the loop right away.
    """

    def run() -> Iterator[T]:
        if times is not None and times <= 0:
            release(cursor)
            return
        buffer: list[T] = []
        try:
            for value in cursor:
                buffer.append(value)
                yield value
        finally:
            release(cursor)
        if not buffer:
            return
        passes = itertools.count(1) if times is None else range(1, times)
        for _ in passes:
            yield from buffer

    return run()


__all__ = (
    "append_cursor",
    "chunk_cursor",
    "chunk_with_cursor",
    "concat_cursor",
    "default_if_empty_cursor",
    "interleave_cursor",
    "interpose_cursor",
    "interpose_with_cursor",
    "loop_cursor",
    "prepend_cursor",
    "prepend_many_cursor",
    "unzip_cursors",
)
