"""Identifier Parsing — pure checks for numeric path and body values.

Invariants:
    - All functions are PURE: no IO, no async
    - An identifier is a finite, non-negative number
    - Whole-valued numbers come back as int so they compare equal to stored ids,
      unless they fall outside the store's 64-bit integer range; those stay float
    - Integers too large for a float are not numbers
"""

import math

from backoffice.core.domain_types import Identifier

# SQLite INTEGER is a signed 64-bit value
STORE_INT_MIN = -(2 ** 63)
STORE_INT_MAX = 2 ** 63 - 1


def _fits_store_integer(number: int) -> bool:
    return STORE_INT_MIN <= number <= STORE_INT_MAX


def to_number(value: object) -> Identifier | None:
    """Coerce value to a finite number, or None when it is not one.

    Booleans are rejected even though Python treats them as ints.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        if _fits_store_integer(value):
            return value
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer() and _fits_store_integer(int(number)):
        return int(number)
    return number


def is_number(value: object) -> bool:
    return to_number(value) is not None


def parse_identifier(raw: object) -> Identifier | None:
    """Parse a raw path segment into an identifier; None when malformed."""
    number = to_number(raw)
    if number is None or number < 0:
        return None
    return number
