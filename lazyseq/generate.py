"""Construction primitives

Cursors that produce values out of nothing but their parameters."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

from ._helpers import MISSING, release
from ._types import Cursor, Source
from .lift.up import adapt


@dataclass(frozen=True, slots=True)
class CountRange:
    """
    Configuration for count().

    NOTE: interval is not validated. A zero interval never advances and a
    negative one walks away from a finite end, so both loop forever unless the
    consumer bounds the sequence (e.g. with take).
    """

    start: float = 0
    end: float | None = None
    interval: float = 1


def empty_cursor[T]() -> Cursor[T]:
    """Cursor that is exhausted before the first pull."""
    return iter(())


def count_cursor(policy: CountRange) -> Cursor[float]:
    """Ascending numbers start, start+interval, ... while below end (if any)."""

    def run() -> Iterator[float]:
        counter = policy.start
        while policy.end is None or counter < policy.end:
            yield counter
            counter += policy.interval

    return run()


def repeat_cursor[T](count: int | None, value: T) -> Cursor[T]:
    """Yield value count times; forever when count is None."""

    def run() -> Iterator[T]:
        if count is None:
            while True:
                yield value
        for _ in range(count):
            yield value

    return run()


def random_cursor(*, seed: int | None = None) -> Cursor[float]:
    """Unbounded stream of floats in [0, 1)."""
    rng = random.Random(seed)

    def run() -> Iterator[float]:
        while True:
            yield rng.random()

    return run()


def zip_cursors(*sources: Source[object]) -> Cursor[tuple[object, ...]]:
    """
    Pull one element from every operand per step.

    Stops at the first exhausted operand (shortest wins); operands after it
    are not pulled on that step. All operands are released on exit.
    """
    cursors = [adapt(source) for source in sources]

    def run() -> Iterator[tuple[object, ...]]:
        try:
            if not cursors:
                return
            while True:
                group: list[object] = []
                for cursor in cursors:
                    value = next(cursor, MISSING)
                    if value is MISSING:
                        return
                    group.append(value)
                yield tuple(group)
        finally:
            for cursor in cursors:
                release(cursor)

    return run()


__all__ = (
    "CountRange",
    "count_cursor",
    "empty_cursor",
    "random_cursor",
    "repeat_cursor",
    "zip_cursors",
)
