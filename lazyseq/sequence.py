"""
Fluent sequence type.

Architecture:
- Seq[T] - owns one cursor and is a cursor itself (iterator protocol)
- every transformation returns a new Seq wrapping a cursor that pulls from
  the previous Seq; nothing is pulled until the new Seq is
- aggregators consume the Seq and return plain values

The free functions in transform/, collection/ and generate.py do the work;
Seq only threads ownership through them:

    from lazyseq import count, seq

    seq([3, 1, 2]).map(lambda x: x * 10).to_list()      # [30, 10, 20]
    count().filter(lambda x: x % 2).take(3).to_list()    # [1, 3, 5]
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable
from types import TracebackType

from ._helpers import release
from ._types import Cursor, Indexed, Selector, SortKey, Source
from .generate import (
    CountRange,
    count_cursor,
    empty_cursor,
    random_cursor,
    repeat_cursor,
    zip_cursors,
)
from .lift.up import adapt, from_entries, from_keys, from_values


class Seq[T]:
    """
    Lazy, pull-based sequence.

    Invariants:
    - one pull of a Seq is one pull of its cursor (multi-pull combinators
      like chunk and zip excepted)
    - exhaustion is terminal: after StopIteration, every pull raises it again
    - close() releases the cursor and everything it was derived from
    """

    __slots__ = ("_cursor", "_upstreams", "_done")

    def __init__(self, cursor: Cursor[T], /, *, upstreams: tuple[object, ...] = ()) -> None:
        """Wrap a cursor. Use seq() to build from arbitrary sources."""
        self._cursor = cursor
        self._upstreams = upstreams
        self._done = False

    # Protocol methods

    def __iter__(self) -> Seq[T]:
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        try:
            return next(self._cursor)
        except StopIteration:
            self._done = True
            raise

    def close(self) -> None:
        """Stop early and release held resources. Idempotent."""
        self._done = True
        release(self._cursor)
        for upstream in self._upstreams:
            release(upstream)

    def throw(self, exc: BaseException, /) -> T:
        """Inject an error into the cursor, if it supports it."""
        inject = getattr(self._cursor, "throw", None)
        if self._done or inject is None:
            self._done = True
            raise exc
        try:
            return inject(exc)
        except StopIteration:
            self._done = True
            raise

    def __enter__(self) -> Seq[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "exhausted" if self._done else "live"
        return f"Seq({self._cursor!r}, {state})"

    def _derive[U](self, cursor: Cursor[U], *others: object) -> Seq[U]:
        return Seq(cursor, upstreams=(self, *others))

    # Element-wise

    def map[U](self, fn: Indexed[T, U], /) -> Seq[U]:
        """Transform every element; fn may take the index as second argument."""
        from .transform.element import map_cursor
        return self._derive(map_cursor(self, fn))

    def filter(self, predicate: Indexed[T, object], /) -> Seq[T]:
        from .transform.element import filter_cursor
        return self._derive(filter_cursor(self, predicate))

    def flat_map[U](self, fn: Indexed[T, Source[U]], /) -> Seq[U]:
        """Map to sources and flatten one level."""
        from .transform.element import flat_map_cursor
        return self._derive(flat_map_cursor(self, fn))

    def flatten(self) -> Seq[typing.Any]:
        from .transform.element import flatten_cursor
        return self._derive(flatten_cursor(typing.cast(Cursor[Source[typing.Any]], self)))

    def unique(self, key: Selector[T, Hashable] | None = None, /) -> Seq[T]:
        from .transform.element import unique_cursor
        return self._derive(unique_cursor(self, key))

    def compact(self) -> Seq[T]:
        """Drop None elements."""
        from .transform.element import compact_cursor
        return self._derive(compact_cursor(self))

    def with_each(self, effect: Indexed[T, object], /) -> Seq[T]:
        """Side effect per element as it passes through."""
        from .transform.element import with_each_cursor
        return self._derive(with_each_cursor(self, effect))

    # Slicing

    def take(self, limit: int, /) -> Seq[T]:
        """First `limit` elements, or the last `-limit` when negative."""
        from .transform.slicing import take_cursor
        return self._derive(take_cursor(self, limit))

    def drop(self, count: int, /) -> Seq[T]:
        """Skip the first `count` elements, or the last `-count` when negative."""
        from .transform.slicing import drop_cursor
        return self._derive(drop_cursor(self, count))

    def take_while(self, predicate: Indexed[T, object], /) -> Seq[T]:
        from .transform.slicing import take_while_cursor
        return self._derive(take_while_cursor(self, predicate))

    def drop_while(self, predicate: Indexed[T, object], /) -> Seq[T]:
        from .transform.slicing import drop_while_cursor
        return self._derive(drop_while_cursor(self, predicate))

    def splice(self, start: int, delete_count: int, /, *items: T) -> Seq[T]:
        """List-style splice; negative start materializes the sequence."""
        from .transform.slicing import splice_cursor
        return self._derive(splice_cursor(self, start, delete_count, *items))

    def replace_at(self, index: int, value: T, /) -> Seq[T]:
        from .transform.slicing import replace_at_cursor
        return self._derive(replace_at_cursor(self, index, value))

    # Structure

    def append(self, item: T, /) -> Seq[T]:
        from .transform.structure import append_cursor
        return self._derive(append_cursor(self, item))

    def prepend(self, item: T, /) -> Seq[T]:
        from .transform.structure import prepend_cursor
        return self._derive(prepend_cursor(self, item))

    def concat(self, items: Source[T], /) -> Seq[T]:
        """Append many; `items` is pulled only after this sequence is exhausted."""
        from .transform.structure import concat_cursor
        return self._derive(concat_cursor(self, items), items)

    def prepend_many(self, items: Source[T], /) -> Seq[T]:
        from .transform.structure import prepend_many_cursor
        return self._derive(prepend_many_cursor(self, items), items)

    def interpose[S](self, separator: S, /) -> Seq[T | S]:
        from .transform.structure import interpose_cursor
        return self._derive(interpose_cursor(self, separator))

    def interpose_with[S](
        self,
        separator: Callable[[T, T], S] | Callable[[T, T, int], S],
        /,
    ) -> Seq[T | S]:
        """Insert separator(lhs, rhs, pair_index) between adjacent elements."""
        from .transform.structure import interpose_with_cursor
        return self._derive(interpose_with_cursor(self, separator))

    def interleave[U](self, other: Source[U], /) -> Seq[T | U]:
        """Alternate with other, then drain whichever is left."""
        from .transform.structure import interleave_cursor
        other_cursor = adapt(other)
        return self._derive(interleave_cursor(self, other_cursor), other_cursor)

    def zip(self, *others: Source[typing.Any]) -> Seq[tuple[typing.Any, ...]]:
        """Group this sequence with others per step; shortest wins."""
        return zip_seq(self, *others)

    def unzip(self, width: int = 2, /) -> tuple[Seq[typing.Any], ...]:
        """Split a sequence of tuples into `width` sequences."""
        from .transform.structure import unzip_cursors
        branches = unzip_cursors(typing.cast(Cursor[tuple[object, ...]], self), width)
        # the last branch to finish or close releases the shared upstream
        return tuple(Seq(branch) for branch in branches)

    def chunk(self, size: int, /) -> Seq[list[T]]:
        """Lists of `size` elements; the last one may be shorter."""
        from .transform.structure import chunk_cursor
        return self._derive(chunk_cursor(self, size))

    def chunk_with(self, same: Callable[[T, T], object], /) -> Seq[list[T]]:
        """Group runs of neighbours for which same(previous, current) holds."""
        from .transform.structure import chunk_with_cursor
        return self._derive(chunk_with_cursor(self, same))

    def default_if_empty[D](self, provider: Callable[[], D], /) -> Seq[T | D]:
        from .transform.structure import default_if_empty_cursor
        return self._derive(default_if_empty_cursor(self, provider))

    def loop(self, times: int | None = None, /) -> Seq[T]:
        """Replay the sequence `times` times (forever when None)."""
        from .transform.structure import loop_cursor
        return self._derive(loop_cursor(self, times))

    # Aggregators

    def to_list(self) -> list[T]:
        from .collection.materialize import to_list
        return to_list(self)

    def first(self) -> T | None:
        from .collection.materialize import first
        return first(self)

    def last(self) -> T | None:
        from .collection.materialize import last
        return last(self)

    def count(self) -> int:
        from .collection.materialize import count_items
        return count_items(self)

    def at(self, index: int, /) -> T | None:
        from .collection.materialize import at
        return at(self, index)

    def sum(self, start: typing.Any = 0, /) -> typing.Any:
        from .collection.materialize import total
        return total(self, start)

    def group_by[K: Hashable](self, key: Indexed[T, K], /) -> dict[K, list[T]]:
        from .collection.group import group_by
        return group_by(self, key)

    def to_map[K: Hashable](self, key: Indexed[T, K], /) -> dict[K, list[T]]:
        from .collection.group import to_map
        return to_map(self, key)

    def to_set(self) -> set[typing.Any]:
        from .collection.group import to_set
        return to_set(typing.cast(Cursor[typing.Any], self))

    def uniqueness(self, key: Selector[T, Hashable] | None = None, /) -> bool:
        from .collection.group import uniqueness
        return uniqueness(self, key)

    def collect[R](self, collector: Callable[[Cursor[T]], R], /) -> R:
        from .collection.fold import collect
        return collect(self, collector)

    def fold[A](self, fn: Callable[[A, T], A], /, *, initial: A) -> A:
        from .collection.fold import fold
        return fold(self, fn, initial=initial)

    def to_sorted_by(self, *keys: SortKey[T]) -> list[T]:
        from .collection.sort import to_sorted_by
        return to_sorted_by(self, *keys)

    def to_chain[R](self, invoke: Callable[..., R], /) -> Chain[T, R]:
        """Build a chain of responsibility out of the handlers in this sequence."""
        from .control.chain import build_chain
        return build_chain(self, invoke)


# ============================================================================
# Constructor functions
# ============================================================================


def seq[T](source: Source[T], /) -> Seq[T]:
    """Build a Seq from a cursor, an iterable or an array-like object."""
    if isinstance(source, Seq):
        return typing.cast(Seq[T], source)
    return Seq(adapt(source))


def empty[T]() -> Seq[T]:
    return Seq(empty_cursor())


def count(
    start: float = 0,
    end: float | None = None,
    interval: float = 1,
    *,
    policy: CountRange | None = None,
) -> Seq[float]:
    """
    Ascending numbers from start, by interval, below end (unbounded by default).

    Accepts either the three numbers or a CountRange policy.
    NOTE: a zero or negative interval is not rejected; see CountRange.
    """
    if policy is None:
        policy = CountRange(start=start, end=end, interval=interval)
    return Seq(count_cursor(policy))


def repeat[T](count: int | None, value: T, /) -> Seq[T]:
    """`value` exactly `count` times (none when count <= 0, forever when None)."""
    return Seq(repeat_cursor(count, value))


def randoms(*, seed: int | None = None) -> Seq[float]:
    """Unbounded random floats in [0, 1)."""
    return Seq(random_cursor(seed=seed))


def zip_seq(*sources: Source[typing.Any]) -> Seq[tuple[typing.Any, ...]]:
    """One tuple per step, one element per operand; stops at the shortest."""
    cursors = tuple(adapt(source) for source in sources)
    return Seq(zip_cursors(*cursors), upstreams=cursors)


def keys_of(subject: object) -> Seq[typing.Any]:
    """Keys of a mapping (attribute names of a plain object)."""
    return Seq(from_keys(subject))


def values_of(subject: object) -> Seq[typing.Any]:
    """Values of a mapping (attribute values of a plain object)."""
    return Seq(from_values(subject))


def entries_of(subject: object) -> Seq[tuple[typing.Any, typing.Any]]:
    """(key, value) pairs of a mapping (or of a plain object's attributes)."""
    return Seq(from_entries(subject))


if typing.TYPE_CHECKING:
    from .control.chain import Chain


__all__ = (
    "Seq",
    "count",
    "empty",
    "entries_of",
    "keys_of",
    "randoms",
    "repeat",
    "seq",
    "values_of",
    "zip_seq",
)
