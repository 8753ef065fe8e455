import logging
import math
import numbers
from decimal import Decimal

from pydantic import BaseModel

from .exceptions import FailureKind, InvalidArgumentException, NoteUnavailableException, WithdrawalError
from .money import display_amount

logger = logging.getLogger("domain")

# Descending; greedy picks from the front. Changing this set means re-checking
# that greedy still finds a combination whenever one exists.
DENOMINATIONS: tuple[int, ...] = (100, 50, 20, 10)


class WithdrawalResult(BaseModel):
    ok: bool
    notes: list[int] = []
    kind: FailureKind | None = None
    message: str | None = None


def _is_valid_number(amount) -> bool:
    if isinstance(amount, bool):
        return False
    if isinstance(amount, Decimal):
        return amount.is_finite()
    if isinstance(amount, numbers.Integral):
        # ints past float range would overflow math.isfinite
        return True
    return isinstance(amount, numbers.Real) and math.isfinite(amount)


def calculate_notes(amount) -> list[int]:
    """
    Split `amount` into the fewest notes from DENOMINATIONS, largest first.

    calculate_notes(30)  -> [20, 10]
    calculate_notes(80)  -> [50, 20, 10]
    calculate_notes(0)   -> []
    calculate_notes(125) -> raises NoteUnavailableException

    Raises InvalidArgumentException for None, non-numbers, NaN/inf and
    negative amounts.
    """
    if amount is None:
        raise InvalidArgumentException("Amount cannot be null or undefined.")
    if not _is_valid_number(amount):
        raise InvalidArgumentException("Amount must be a valid number.")
    if amount < 0:
        raise InvalidArgumentException(f"Amount cannot be negative. Received: {display_amount(amount)}")
    if amount == 0:
        return []

    counts: list[tuple[int, int]] = []
    remaining = amount
    for denomination in DENOMINATIONS:
        count, remaining = divmod(remaining, denomination)
        if count:
            counts.append((denomination, int(count)))
        if remaining == 0:
            break

    # no backtracking: a greedy remainder means the amount is unreachable
    if remaining > 0:
        logger.info("no note combination for amount=%s remainder=%s", amount, remaining)
        raise NoteUnavailableException(amount)

    notes: list[int] = []
    for denomination, count in counts:
        notes.extend([denomination] * count)
    return notes


def notes_total(notes: list[int]) -> int:
    return sum(notes)


def try_calculate_notes(amount) -> WithdrawalResult:
    """Same as calculate_notes, but failures come back as a result instead of an exception."""
    try:
        notes = calculate_notes(amount)
    except WithdrawalError as e:
        return WithdrawalResult(ok=False, kind=e.kind, message=e.message)
    return WithdrawalResult(ok=True, notes=notes)
