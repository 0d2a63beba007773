"""
Lifting sources into cursors.

Functions that turn iterators, iterables, array-like objects and mappings into
the single pull-based cursor every combinator works with.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterator, Mapping

from kungfu import Error, Ok, Result

from .._errors import InvalidSourceError
from .._types import ArrayLike, Cursor, Source

logger = logging.getLogger(__name__)


def from_indexable[T](source: ArrayLike[T]) -> Cursor[T]:
    """
    Iterate an array-like object by increasing integer index.

    Only __len__ and __getitem__ are used, so objects without an iteration
    protocol (or with a sparse one) work. The length is read once, when the
    first element is pulled.

    Example:
        class Pair:
            def __len__(self): return 2
            def __getitem__(self, i): return ("left", "right")[i]

        list(from_indexable(Pair()))  # ["left", "right"]
    """

    def run() -> Iterator[T]:
        for index in range(len(source)):
            yield source[index]

    return run()


def try_adapt[T](source: Source[T]) -> Result[Cursor[T], InvalidSourceError]:
    """
    Normalize a source into a cursor without raising.

    Accepted shapes, checked in order:
    - a cursor (has __next__): used as-is, no copying
    - an iterable (has __iter__): iter(source)
    - an array-like (has __len__ and __getitem__): indexed iteration
    """
    if hasattr(source, "__next__"):
        return Ok(typing.cast(Cursor[T], source))
    if hasattr(source, "__iter__"):
        return Ok(iter(typing.cast(typing.Iterable[T], source)))
    if hasattr(source, "__len__") and hasattr(source, "__getitem__"):
        return Ok(from_indexable(typing.cast(ArrayLike[T], source)))
    return Error(InvalidSourceError(source))


def adapt[T](source: Source[T]) -> Cursor[T]:
    """Normalize a source into a cursor. Raises InvalidSourceError."""
    match try_adapt(source):
        case Ok(cursor):
            return cursor
        case Error(err):
            logger.debug("rejected source of type %s", type(source).__name__)
            raise err


def _fields(subject: object) -> Mapping[typing.Any, typing.Any]:
    if isinstance(subject, Mapping):
        return subject
    try:
        return vars(subject)
    except TypeError:
        raise InvalidSourceError(subject) from None


def from_keys(subject: object) -> Cursor[typing.Any]:
    """Keys of a mapping, or attribute names of a plain object."""
    return iter(list(_fields(subject).keys()))


def from_values(subject: object) -> Cursor[typing.Any]:
    """Values of a mapping, or attribute values of a plain object."""
    return iter(list(_fields(subject).values()))


def from_entries(subject: object) -> Cursor[tuple[typing.Any, typing.Any]]:
    """(key, value) pairs of a mapping, or of a plain object's attributes."""
    return iter(list(_fields(subject).items()))


__all__ = (
    "adapt",
    "from_entries",
    "from_indexable",
    "from_keys",
    "from_values",
    "try_adapt",
)
