from enum import Enum

from .money import format_amount


class FailureKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    NOTE_UNAVAILABLE = "NoteUnavailable"


class WithdrawalError(Exception):
    """Base for calculator failures; `kind` decides the HTTP status."""
    name = "WithdrawalError"
    kind: FailureKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentException(WithdrawalError):
    """Amount is missing, not a number, or negative."""
    name = "InvalidArgumentException"
    kind = FailureKind.INVALID_INPUT


class NoteUnavailableException(WithdrawalError):
    """Amount is valid but no combination of notes adds up to it."""
    name = "NoteUnavailableException"
    kind = FailureKind.NOTE_UNAVAILABLE

    def __init__(self, amount):
        self.amount = amount
        super().__init__(
            f"The requested amount of ${format_amount(amount)} cannot be satisfied with available notes."
        )


class InvalidRequest(Exception):
    """Malformed request body, detected before the amount is looked at."""
    name = "InvalidRequest"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
