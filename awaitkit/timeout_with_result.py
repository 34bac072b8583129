"""Await a fallible operation under a deadline and report a three-way result."""

from __future__ import annotations

from numbers import Real
from typing import Any

from .core import Failure, Success, TimedOut, TimeoutResult
from .timeout import _MISSING, _as_awaitable, _discard, _evaluate, _seconds, _within


async def timeout_with_result(
    duration: Real, body: Any, fallback: Any = _MISSING
) -> TimeoutResult[Any, Any]:
    """Await ``body`` for at most ``duration`` seconds.

    ``body`` is an awaitable, or a callable returning one. A value it returns
    in time becomes :class:`Success`; an exception it raises in time becomes
    :class:`Failure`. When the deadline passes the body is cancelled and,
    without a fallback, :class:`TimedOut` is returned. With a fallback (a
    value, an awaitable or a callable, evaluated only on timeout) its value
    becomes :class:`Success` and an exception it raises becomes
    :class:`Failure`.
    """
    seconds = _seconds(duration, body, fallback)
    awaitable = _as_awaitable(body, fallback)
    try:
        finished, value = await _within(seconds, awaitable)
    except Exception as exc:
        _discard(fallback)
        return Failure(exc)
    if finished:
        _discard(fallback)
        return Success(value)
    if fallback is _MISSING:
        return TimedOut()
    try:
        value = await _evaluate(fallback)
    except Exception as exc:
        return Failure(exc)
    return Success(value)