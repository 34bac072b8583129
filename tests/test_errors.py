import pytest

from awaitkit.core import Failure, TimedOut, TimeoutResultError
from awaitkit.errors import (
    CustomError,
    OperationTimeout,
    ResourceNotFound,
    Unauthorized,
    UnknownError,
    from_timeout_result_error,
)


@pytest.mark.parametrize(
    "error, text",
    [
        (Unauthorized("no access"), "Unauthorized: no access"),
        (ResourceNotFound("123"), "Resource not found: 123"),
        (OperationTimeout("slow"), "Operation timed out: slow"),
        (UnknownError("what"), "Unknown error: what"),
    ],
)
def test_display_messages(error, text):
    assert str(error) == text


def test_message_is_kept():
    err = ResourceNotFound("test error")
    assert err.message == "test error"


def test_errors_are_catchable_as_custom_error():
    error = from_timeout_result_error(
        TimeoutResultError(ResourceNotFound("slow error"))
    )
    assert str(error) == "Resource not found: slow error"
    with pytest.raises(CustomError) as info:
        raise error
    assert info.value is error
    assert info.value.message == "slow error"


def test_timeout_residual_becomes_operation_timeout():
    converted = from_timeout_result_error(TimeoutResultError(timed_out=True))
    assert isinstance(converted, OperationTimeout)
    assert converted.message == "Operation did not complete within the allotted time"


def test_error_residual_passes_through():
    original = Unauthorized("nope")
    assert from_timeout_result_error(TimeoutResultError(original)) is original


def test_conversion_after_unwrapping_failure():
    original = ResourceNotFound("123")
    with pytest.raises(TimeoutResultError) as info:
        Failure(original).unwrap()
    assert from_timeout_result_error(info.value) is original


def test_conversion_after_unwrapping_timeout():
    with pytest.raises(TimeoutResultError) as info:
        TimedOut().unwrap()
    assert isinstance(from_timeout_result_error(info.value), OperationTimeout)


def test_non_custom_error_is_rejected():
    with pytest.raises(TypeError):
        from_timeout_result_error(TimeoutResultError(ValueError("x")))