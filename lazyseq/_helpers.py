"""Internal helpers for lazyseq.

Common functions used across combinator modules.
These are not part of the public API but are handy when writing custom combinators."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


# Sentinel for "no element", distinct from None which is a legal element
MISSING: typing.Final = _Missing()


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def release(cursor: object) -> None:
    """
    Release resources held by a cursor, if it supports it.

    Generators and file-like cursors expose close(); plain iterators don't,
    in which case this is a no-op. Safe to call more than once.
    """
    close = getattr(cursor, "close", None)
    if callable(close):
        close()


def _positional_arity(fn: Callable[..., typing.Any]) -> int | None:
    """Number of required positional parameters of fn, None when it takes *args."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.default is not param.empty:
            continue
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def indexed[R](fn: Callable[..., R], *, extra: int = 1) -> Callable[..., R]:
    """
    Adapt a callback so it can always be called with trailing index arguments.

    Combinators call callbacks as fn(*values, index). Callbacks that only accept
    the values are called without the index:

        indexed(lambda x: x * 2)(3, 0)      # 6
        indexed(lambda x, i: x * i)(3, 2)   # 6

    `extra` is the number of leading value arguments (2 for interpose_with).
    Parameters with defaults never receive the index: `lambda x, scale=2: ...`
    is called with the value only.
    """
    arity = _positional_arity(fn)
    if arity is None or arity > extra:
        return fn

    def call(*args: typing.Any) -> R:
        return fn(*args[:extra])

    return call


__all__ = (
    "MISSING",
    "identity",
    "indexed",
    "release",
)
