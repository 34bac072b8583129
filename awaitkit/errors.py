"""Application error kinds and their conversion from timed results."""

from __future__ import annotations

from .core import TimeoutResultError

TIMEOUT_MESSAGE = "Operation did not complete within the allotted time"


class CustomError(Exception):
    """Base for the application's error kinds."""

    prefix = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = str(message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class Unauthorized(CustomError):
    """The caller is not allowed to perform the operation."""

    prefix = "Unauthorized"


class ResourceNotFound(CustomError):
    """A requested resource does not exist."""

    prefix = "Resource not found"


class OperationTimeout(CustomError):
    """The operation did not finish in time."""

    prefix = "Operation timed out"


class UnknownError(CustomError):
    """Any other failure."""

    prefix = "Unknown error"


def from_timeout_result_error(err: TimeoutResultError) -> CustomError:
    """Map a timed result's residual onto a CustomError.

    A wrapped CustomError is passed through; a timeout becomes
    :class:`OperationTimeout`.
    """
    if err.timed_out:
        return OperationTimeout(TIMEOUT_MESSAGE)
    if not isinstance(err.error, CustomError):
        raise TypeError(
            f"expected a CustomError, got {type(err.error).__name__}"
        )
    return err.error