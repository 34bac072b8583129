"""Run several awaitables concurrently and collect all their results."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable
from typing import Any


def _discard(awaitables: tuple[Any, ...]) -> None:
    for item in awaitables:
        if inspect.iscoroutine(item):
            item.close()


async def parallel(*args: Awaitable[Any]) -> tuple[Any, ...]:
    """Await every argument concurrently and return their results in order.

    Results keep the order of the arguments, not the order of completion.
    Values such as error objects are returned like any other result. If one
    awaitable raises, the others are cancelled and the exception propagates.
    """
    for index, item in enumerate(args):
        if not inspect.isawaitable(item):
            _discard(args)
            raise TypeError(
                f"argument {index} is not awaitable: {type(item).__name__}"
            )

    tasks = [asyncio.ensure_future(item) for item in args]
    if not tasks:
        return ()
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return tuple(results)