"""Async programming utilities and helpers."""

from __future__ import annotations

import asyncio
import traceback
from collections import abc
from typing import Any, TypeVar


_T = TypeVar("_T")  # type


def format_traceback(exc: BaseException, **kwargs: Any) -> str:
    """
    Like `traceback.print_exc` but returns a string. Uses the passed-in exception.
    Any additional `**kwargs` are passed to the underlaying `traceback.format_exception`.
    """
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__, **kwargs))


async def settle(coros: abc.Iterable[abc.Coroutine[Any, Any, _T]]) -> list[_T | Exception]:
    """
    Run all coroutines concurrently and wait until every one of them has finished.

    Unlike a plain gather, a failing coroutine doesn't cancel or hide its siblings:
    each slot of the returned list (in input order) holds either the coroutine's result
    or the exception it raised. Cancellation is never captured and always propagates.
    """
    tasks: list[asyncio.Task[_T]] = [asyncio.ensure_future(coro) for coro in coros]
    if not tasks:
        return []
    await asyncio.wait(tasks)
    outcomes: list[_T | Exception] = []
    for task in tasks:
        exc = task.exception()  # raises CancelledError for cancelled tasks
        if exc is None:
            outcomes.append(task.result())
        elif isinstance(exc, Exception):
            outcomes.append(exc)
        else:
            raise exc
    return outcomes
