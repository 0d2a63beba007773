"""Fold aggregators

Hand the cursor to caller-supplied reductions."""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import release
from .._types import Cursor


def collect[T, R](cursor: Cursor[T], collector: Callable[[Cursor[T]], R]) -> R:
    """
    Give the raw cursor to an arbitrary reduction.

    Example:
        collect(iter([1, 2, 3]), sum)  # 6
    """
    try:
        return collector(cursor)
    finally:
        release(cursor)


def fold[T, A](cursor: Cursor[T], fn: Callable[[A, T], A], *, initial: A) -> A:
    """Left fold: fn(...fn(fn(initial, x0), x1)..., xn)."""
    acc = initial
    try:
        for value in cursor:
            acc = fn(acc, value)
    finally:
        release(cursor)
    return acc


__all__ = ("collect", "fold")
