from __future__ import annotations

import typing


class InvalidSourceError(TypeError):
    """Source is neither a cursor, an iterable nor an array-like."""

    source: typing.Any

    def __init__(self, source: typing.Any) -> None:
        self.source = source
        super().__init__(
            f"Cannot build a sequence from {type(source).__name__!r}: "
            "expected an iterator, an iterable or an object with __len__ and __getitem__"
        )


class ChainExhaustedError(LookupError):
    """Every handler forwarded to next() and none produced a result."""

    handlers: int
    origin: object | None

    def __init__(self, handlers: int, origin: object | None = None) -> None:
        self.handlers = handlers
        self.origin = origin
        super().__init__(f"No handler produced a result after {handlers} handler(s)")


__all__ = ("ChainExhaustedError", "InvalidSourceError")
