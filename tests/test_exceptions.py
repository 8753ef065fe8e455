import pytest

from note_dispenser.exceptions import (
    FailureKind,
    InvalidArgumentException,
    InvalidRequest,
    NoteUnavailableException,
    WithdrawalError,
)
from note_dispenser.money import display_amount, format_amount


def test_note_unavailable_message():
    e = NoteUnavailableException(125)
    assert isinstance(e, WithdrawalError)
    assert e.name == "NoteUnavailableException"
    assert e.kind is FailureKind.NOTE_UNAVAILABLE
    assert e.amount == 125
    assert e.message == "The requested amount of $125.00 cannot be satisfied with available notes."


def test_note_unavailable_formats_fractional_amount():
    assert "$5.50" in NoteUnavailableException(5.5).message


def test_invalid_argument_keeps_message():
    e = InvalidArgumentException("Test error message")
    assert isinstance(e, WithdrawalError)
    assert e.name == "InvalidArgumentException"
    assert e.kind is FailureKind.INVALID_INPUT
    assert str(e) == "Test error message"


def test_invalid_request_is_not_a_domain_failure():
    e = InvalidRequest("Invalid JSON in request body.")
    assert not isinstance(e, WithdrawalError)
    assert e.name == "InvalidRequest"
    assert e.message == "Invalid JSON in request body."


@pytest.mark.parametrize(
    "amount, expected",
    [
        (125, "125.00"),
        (5.5, "5.50"),
        (1.005, "1.00"),          # binary value is just under 1.005
        (2.675, "2.67"),
        (0.1, "0.10"),
        (10**30 + 5, "1000000000000000000000000000005.00"),
    ],
)
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


@pytest.mark.parametrize("amount, expected", [(-130, "-130"), (-130.0, "-130"), (-0.5, "-0.5")])
def test_display_amount(amount, expected):
    assert display_amount(amount) == expected
