from __future__ import annotations
"""Boundary adapters between exception-raising code and Result values.

These are the only places in errchain that catch exceptions.  Anything
derived from ``Exception`` is wrapped into a :class:`ChainError`; other
``BaseException``s (``KeyboardInterrupt``, cancellation) keep propagating.
"""
import functools
import inspect
from typing import Awaitable, Callable, TypeVar

from anyio import to_thread

from .chain_error import wrap
from .result import Result

T = TypeVar("T")

__all__ = ["from_call", "from_async", "from_blocking", "catching"]


def from_call(fn: Callable[[], T], message: str = "") -> Result[T]:  # noqa: D401
    """Invoke *fn*; return ``(value, None)`` or ``(None, ChainError)``."""
    try:
        value = fn()
    except Exception as exc:  # noqa: BLE001
        return wrap(exc, message)
    return Result.success(value)


async def from_async(fn: Callable[[], Awaitable[T]], message: str = "") -> Result[T]:  # noqa: D401
    """Await *fn()*; same contract as :func:`from_call`."""
    try:
        value = await fn()
    except Exception as exc:  # noqa: BLE001
        return wrap(exc, message)
    return Result.success(value)


async def from_blocking(fn: Callable[[], T], message: str = "") -> Result[T]:  # noqa: D401
    """Run blocking *fn* in a worker thread; same contract as :func:`from_call`."""
    try:
        value = await to_thread.run_sync(fn)
    except Exception as exc:  # noqa: BLE001
        return wrap(exc, message)
    return Result.success(value)


# --------------------------------------------------------------------------- #
# Decorator
# --------------------------------------------------------------------------- #

def catching(message: str = ""):  # noqa: D401
    """Decorator: make *func* return a Result instead of raising.

    Works for plain and ``async def`` functions; arguments are forwarded.
    """

    def _decorator(func):
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def _async_wrapper(*args, **kwargs):
                return await from_async(lambda: func(*args, **kwargs), message)

            return _async_wrapper

        @functools.wraps(func)
        def _wrapper(*args, **kwargs):
            return from_call(lambda: func(*args, **kwargs), message)

        return _wrapper

    return _decorator
