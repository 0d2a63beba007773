"""
Chain of responsibility
=======================

Turn an ordered collection of handlers into one callable. Every handler gets
a `next` continuation and decides whether to answer or forward:

    humanize = seq([
        lambda next, ms: f"{ms} ms" if ms < 1000 else next(ms / 1000),
        lambda next, s: f"{s} s" if s < 60 else next(s / 60),
        lambda next, m: f"{m} min",
    ]).to_chain(lambda handler, next, value: handler(next, value))

    humanize(2000)  # "2.0 s"

No base classes: how a handler is called is decided by `invoke`.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import ChainExhaustedError

logger = logging.getLogger(__name__)

# Next = continuation a handler calls to forward to the rest of the chain
type Next[R] = Callable[..., R]

# Invoke = how a handler is called: invoke(handler, next, *args, **kwargs)
type Invoke[H, R] = Callable[..., R]


@dataclass(frozen=True, slots=True)
class Chain[H, R]:
    """
    Built chain of responsibility.

    Handlers are captured once; every call walks them with a fresh cursor,
    so a chain is reusable, including after a call that ran out of handlers.
    """

    handlers: tuple[H, ...]
    invoke: Invoke[H, R]

    def __call__(self, *args: typing.Any, **kwargs: typing.Any) -> R:
        cursor = iter(self.handlers)
        tried = 0

        def next_(*args: typing.Any, **kwargs: typing.Any) -> R:
            nonlocal tried
            for handler in cursor:
                tried += 1
                return self.invoke(handler, next_, *args, **kwargs)
            logger.debug("chain exhausted after %d handler(s)", tried)
            raise ChainExhaustedError(tried, origin=self)

        return next_(*args, **kwargs)

    def try_call(self, *args: typing.Any, **kwargs: typing.Any) -> Result[R, ChainExhaustedError]:
        """
        Call the chain, returning Error instead of raising when it runs out.

        Only this chain's exhaustion is captured; other failures propagate.
        """
        try:
            return Ok(self(*args, **kwargs))
        except ChainExhaustedError as exc:
            if exc.origin is not self:
                raise
            return Error(exc)


def build_chain[H, R](handlers: Iterable[H], invoke: Invoke[H, R]) -> Chain[H, R]:
    """Materialize handlers and build the chain."""
    captured = tuple(handlers)
    logger.debug("built chain of %d handler(s)", len(captured))
    return Chain(captured, invoke)


__all__ = ("Chain", "Next", "Invoke", "build_chain")
