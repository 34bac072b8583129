"""Three-way outcome of an operation run under a deadline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class TimeoutResultError(Exception):
    """Raised when a non-successful :class:`TimeoutResult` is unwrapped.

    It carries either the operation's own error or marks a timeout.
    """

    def __init__(self, error: Any = None, *, timed_out: bool = False) -> None:
        if timed_out and error is not None:
            raise ValueError("a timed-out result carries no error")
        super().__init__("operation timed out" if timed_out else error)
        self.error = error
        self.timed_out = timed_out


class TimeoutResult(Generic[T, E]):
    """Base of :class:`Success`, :class:`Failure` and :class:`TimedOut`."""

    __slots__ = ()

    def unwrap(self) -> T:
        """Return the value of a success, raise TimeoutResultError otherwise."""
        match self:
            case Success(value):
                return value
            case Failure(error):
                _raise_failure(error)
            case TimedOut():
                raise TimeoutResultError(timed_out=True)
        raise TypeError(f"unknown result kind: {type(self).__name__}")


def _raise_failure(error: Any) -> NoReturn:
    if isinstance(error, BaseException):
        raise TimeoutResultError(error) from error
    raise TimeoutResultError(error)


@dataclass(frozen=True, slots=True)
class Success(TimeoutResult[T, E]):
    """The operation finished in time with a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure(TimeoutResult[T, E]):
    """The operation finished in time with an error."""

    error: E


@dataclass(frozen=True, slots=True)
class TimedOut(TimeoutResult[T, E]):
    """The operation did not finish before its deadline."""


def from_residual(residual: TimeoutResultError) -> TimeoutResult[Any, Any]:
    """Turn a raised TimeoutResultError back into the result it came from."""
    if not isinstance(residual, TimeoutResultError):
        raise TypeError(
            f"expected TimeoutResultError, got {type(residual).__name__}"
        )
    if residual.timed_out:
        return TimedOut()
    return Failure(residual.error)