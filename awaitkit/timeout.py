"""Await an operation under a deadline, with an optional fallback."""

from __future__ import annotations

import asyncio
import inspect
from numbers import Real
from typing import Any

_MISSING: Any = object()

TASK_FAILED_MESSAGE = "Task panicked"


class TimeoutExpired(Exception):
    """The operation did not produce a value in time.

    ``reason`` holds either the fallback's value or a default message.
    """

    def __init__(self, reason: Any) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return str(self.reason)


def _timed_out_message(duration: Any) -> str:
    return f"Operation timed out after {duration} seconds"


def _discard(*items: Any) -> None:
    for item in items:
        if inspect.iscoroutine(item):
            item.close()


def _seconds(duration: Any, *pending: Any) -> float:
    if isinstance(duration, bool) or not isinstance(duration, Real):
        _discard(*pending)
        raise TypeError(
            f"duration must be a number of seconds, got {type(duration).__name__}"
        )
    if duration < 0:
        _discard(*pending)
        raise ValueError("duration must not be negative")
    return float(duration)


async def _evaluate(expr: Any) -> Any:
    """Produce a value: call a callable, then await the result if needed."""
    value = expr() if callable(expr) else expr
    if inspect.isawaitable(value):
        value = await value
    return value


def _as_awaitable(body: Any, fallback: Any) -> Any:
    awaitable = body() if callable(body) and not inspect.isawaitable(body) else body
    if not inspect.isawaitable(awaitable):
        _discard(fallback)
        raise TypeError(f"body is not awaitable: {type(awaitable).__name__}")
    return awaitable


async def _within(seconds: float, awaitable: Any) -> tuple[bool, Any]:
    """Return ``(True, value)`` if done in time, ``(False, None)`` if not."""
    scope = asyncio.timeout(seconds)
    try:
        async with scope:
            return True, await awaitable
    except TimeoutError:
        if scope.expired():
            return False, None
        raise


async def _reason(fallback: Any, default: str) -> Any:
    if fallback is _MISSING:
        return default
    return await _evaluate(fallback)


async def timeout(duration: Real, body: Any, fallback: Any = _MISSING) -> Any:
    """Await ``body`` for at most ``duration`` seconds and return its value.

    ``body`` is an awaitable, or a callable returning one. On timeout the body
    is cancelled and TimeoutExpired is raised; its reason is the fallback's
    value if one is given (a callable fallback is only called on timeout),
    otherwise a message naming the duration. Exceptions from the body
    propagate unchanged.
    """
    seconds = _seconds(duration, body, fallback)
    awaitable = _as_awaitable(body, fallback)
    finished, value = await _within(seconds, awaitable)
    if finished:
        _discard(fallback)
        return value
    raise TimeoutExpired(await _reason(fallback, _timed_out_message(duration)))


async def timeout_fallback(duration: Real, body: Any, fallback: Any) -> Any:
    """Await ``body`` for at most ``duration`` seconds, else return the fallback.

    The fallback is a value, an awaitable or a callable; it is evaluated only
    when the deadline passes.
    """
    seconds = _seconds(duration, body, fallback)
    awaitable = _as_awaitable(body, fallback)
    finished, value = await _within(seconds, awaitable)
    if finished:
        _discard(fallback)
        return value
    return await _evaluate(fallback)


async def timeout_value(duration: Real, body: Any, fallback: Any = _MISSING) -> Any:
    """Evaluate ``body`` in its own task for at most ``duration`` seconds.

    ``body`` may be a plain value, an awaitable or a callable (sync or async).
    If the task raises, TimeoutExpired is raised with the fallback's value or
    ``"Task panicked"`` and the original exception as its cause. On timeout it
    is raised with the fallback's value or a message naming the duration.
    """
    seconds = _seconds(duration, body, fallback)
    task = asyncio.ensure_future(_evaluate(body))
    try:
        finished, value = await _within(seconds, task)
    except Exception as exc:
        raise TimeoutExpired(await _reason(fallback, TASK_FAILED_MESSAGE)) from exc
    if finished:
        _discard(fallback)
        return value
    raise TimeoutExpired(await _reason(fallback, _timed_out_message(duration)))