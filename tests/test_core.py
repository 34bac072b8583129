import pytest

from awaitkit.core import (
    Failure,
    Success,
    TimedOut,
    TimeoutResult,
    TimeoutResultError,
    from_residual,
)


def _describe(result: TimeoutResult) -> tuple[str, object]:
    match result:
        case Success(value):
            return ("ok", value)
        case Failure(error):
            return ("err", error)
        case TimedOut():
            return ("timeout", None)
    return ("unmatched", result)


def test_success_unwraps_to_value():
    assert Success(42).unwrap() == 42


def test_failure_unwrap_raises_with_error():
    err = ValueError("boom")
    with pytest.raises(TimeoutResultError) as info:
        Failure(err).unwrap()
    assert info.value.error is err
    assert info.value.timed_out is False
    assert info.value.__cause__ is err


def test_failure_with_plain_value_error():
    with pytest.raises(TimeoutResultError) as info:
        Failure("error occurred").unwrap()
    assert info.value.error == "error occurred"


def test_timed_out_unwrap_raises_timeout_marker():
    with pytest.raises(TimeoutResultError) as info:
        TimedOut().unwrap()
    assert info.value.timed_out is True
    assert info.value.error is None


def test_residual_round_trip_for_failure():
    err = KeyError("missing")
    original = Failure(err)
    with pytest.raises(TimeoutResultError) as info:
        original.unwrap()
    assert from_residual(info.value) == original


def test_residual_round_trip_for_timeout():
    with pytest.raises(TimeoutResultError) as info:
        TimedOut().unwrap()
    assert from_residual(info.value) == TimedOut()


def test_from_residual_rejects_other_types():
    with pytest.raises(TypeError):
        from_residual(ValueError("not a residual"))


def test_error_cannot_be_both_timeout_and_failure():
    with pytest.raises(ValueError):
        TimeoutResultError("oops", timed_out=True)


@pytest.mark.parametrize(
    "result, expected",
    [
        (Success(7), ("ok", 7)),
        (Failure("bad"), ("err", "bad")),
        (TimedOut(), ("timeout", None)),
    ],
)
def test_results_support_pattern_matching(result, expected):
    assert _describe(result) == expected


def test_results_are_immutable_and_comparable():
    result = Success(1)
    with pytest.raises(AttributeError):
        result.value = 2
    assert result == Success(1)
    assert Success(1) != Failure(1)