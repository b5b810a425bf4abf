from __future__ import annotations

import string
from datetime import timedelta
from types import MappingProxyType


MAX_AMOUNT = 2**32 - 1

ONE_MINUTE = timedelta(minutes=1)
ONE_HOUR = ONE_MINUTE * 60
ONE_DAY = ONE_HOUR * 24
ONE_WEEK = ONE_DAY * 7
# 4 weeks, not a calendar month
ONE_MONTH = ONE_WEEK * 4
ONE_YEAR = ONE_DAY * 365
MAX_DURATION = ONE_YEAR * 100
_ONE_SECOND = timedelta(seconds=1)

UNITS = MappingProxyType(
    {
        "m": ONE_MINUTE,
        "h": ONE_HOUR,
        "d": ONE_DAY,
        "w": ONE_WEEK,
        "mo": ONE_MONTH,
        "y": ONE_YEAR,
    }
)
UNIT_NAMES = ", ".join(UNITS)


class DurationError(ValueError):
    pass


class MissingUnitError(DurationError):
    pass


class MalformedAmountError(DurationError):
    pass


class UnknownUnitError(DurationError):
    pass


class DurationTooLongError(DurationError):
    pass


def parse_duration(text: str) -> timedelta:
    """Parse ``<amount><unit>`` strings such as ``5m``, ``2d`` or ``1mo``.

    The amount is an unsigned 32-bit integer and the unit is everything after
    the leading digits, so ``mo`` is matched as a whole. The result may not
    exceed 100 years.
    """
    split_at = _find_unit_start(text)
    if split_at is None:
        raise MissingUnitError(f"Did not find a unit, expected one of {UNIT_NAMES}")

    amount_text, unit_text = text[:split_at], text[split_at:]
    amount = _parse_amount(amount_text)

    unit = UNITS.get(unit_text)
    if unit is None:
        raise UnknownUnitError(f"Unknown unit {unit_text}, expected one of {UNIT_NAMES}")

    # compare whole seconds, timedelta itself overflows for large amounts
    seconds = amount * (unit // _ONE_SECOND)
    if seconds > MAX_DURATION // _ONE_SECOND:
        raise DurationTooLongError(f"Duration {text} is too long; maximum duration is 100y")
    return timedelta(seconds=seconds)


def _find_unit_start(text: str) -> int | None:
    for index, char in enumerate(text):
        if char not in string.digits:
            return index
    return None


def _parse_amount(amount_text: str) -> int:
    if not amount_text:
        raise MalformedAmountError("cannot parse integer from empty string")
    amount = int(amount_text)
    if amount > MAX_AMOUNT:
        raise MalformedAmountError(f"number too large to fit in target type: {amount_text}")
    return amount
