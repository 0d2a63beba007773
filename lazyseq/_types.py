"""
Core type definitions for lazyseq.

Aliases shared by the adapter, the combinators and the aggregators.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

# ============================================================================
# Cursor & sources
# ============================================================================

# Cursor = anything that can be pulled: next value or StopIteration
# NOTE: Python's iterator protocol already is the pull capability,
#       so Cursor is an alias, not a new base class.
type Cursor[T] = Iterator[T]


@typing.runtime_checkable
class ArrayLike[T](typing.Protocol):
    """Indexable object with a length, iterated by integer index."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int, /) -> T: ...


# Source = every shape the adapter accepts
type Source[T] = Iterator[T] | Iterable[T] | ArrayLike[T]

# ============================================================================
# Callback aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for grouping/deduplication
type Selector[T, K] = Callable[[T], K]

# Indexed = callback that may also receive the element index
type Indexed[T, R] = Callable[[T], R] | Callable[[T, int], R]

# SortKey = attribute/item name or key function
type SortKey[T] = str | Callable[[T], typing.Any]

__all__ = (
    "ArrayLike",
    "Cursor",
    "Indexed",
    "Predicate",
    "Selector",
    "SortKey",
    "Source",
)
