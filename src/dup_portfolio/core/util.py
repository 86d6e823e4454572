"""Numeric helpers shared by validation and presentation."""

from decimal import Decimal
from typing import Union

# Bounds on caller-supplied numbers; stored text and all Decimal
# arithmetic over values inside them stay exact.
MAX_INTEGER_DIGITS = 15
MAX_DECIMAL_PLACES = 12

_SMALLEST_STEP = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)


def within_ledger_bounds(value: Decimal) -> bool:
    """
    Return True when ``value`` has fewer than 15 integer digits and at most
    12 decimal places (trailing zeros not counted).
    """
    if value and value.adjusted() >= MAX_INTEGER_DIGITS:
        return False
    return value == value.quantize(_SMALLEST_STEP)


def round2(value: Union[Decimal, float, int]) -> float:
    """Round to 2 decimal places for monetary values."""
    return round(float(value), 2)
