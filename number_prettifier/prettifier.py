"""Short-scale prettifier for numeric display (e.g., 1123456 -> 1.1M).

Values below one million keep every digit and get thousands separators.
Larger values keep the leading group of digits, at most one truncated
fractional digit and a unit suffix (M, B or T). Nothing is ever rounded.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from typing import List, Optional, Tuple, Union

from .logging_utils import get_logger


_log = get_logger("prettifier")

Number = Union[numbers.Real, Decimal]

MAX_NUMBER = 999_999_999_999_999.9
MIN_NUMBER = -999_999_999_999_999.9
MAX_NUMBER_PRETTIFIED = "999.9T"
MIN_NUMBER_PRETTIFIED = "-999.9T"

_GROUP_WIDTH = 3
_MAX_EXACT = Fraction(repr(MAX_NUMBER))
_MIN_EXACT = Fraction(repr(MIN_NUMBER))
# Decimals with a larger adjusted exponent are at least 10**16.
_MAX_ADJUSTED_EXPONENT = 15
_OVERFLOW = Fraction(10 ** (_MAX_ADJUSTED_EXPONENT + 1))


class Magnitude(IntEnum):
    """Magnitude class of a value; the value is the number of group separators."""

    UNITS = 0
    THOUSANDS = 1
    MILLIONS = 2
    BILLIONS = 3
    TRILLIONS = 4

    @property
    def suffix(self) -> str:
        return unit_suffix(int(self))

    @property
    def abbreviated(self) -> bool:
        return self >= Magnitude.MILLIONS


# Group count -> short-scale suffix. The 7 row is outside the accepted range
# and only becomes reachable if the bounds are widened.
_UNIT_SUFFIXES: Tuple[Tuple[int, str], ...] = (
    (2, "M"),
    (3, "B"),
    (4, "T"),
    (7, "V"),
)


def unit_suffix(group_count: int) -> str:
    """Return the unit suffix for ``group_count`` separators, or ``""``."""

    for count, suffix in _UNIT_SUFFIXES:
        if count == group_count:
            return suffix
    return ""


def _to_exact(number: Number) -> Optional[Fraction]:
    """Exact rational view of ``number``, or ``None`` when it is not finite.

    Only binary floats are rounded, through their shortest repr, so 1000.1
    stays 1000.1 instead of 1000.0999999999999090505... Nothing here reads
    the active decimal context.
    """

    if isinstance(number, bool):
        raise TypeError("prettify() expects a real number, not bool")
    if isinstance(number, Decimal):
        if not number.is_finite():
            return None
        if number and number.adjusted() > _MAX_ADJUSTED_EXPONENT:
            # Past the bound already; avoid expanding a huge exponent.
            return _OVERFLOW if not number.is_signed() else -_OVERFLOW
        return Fraction(number)
    if isinstance(number, numbers.Rational):
        return Fraction(int(number.numerator), int(number.denominator))
    if isinstance(number, numbers.Real):
        try:
            value = float(number)
        except OverflowError:
            return None
        if not math.isfinite(value):
            return None
        return Fraction(repr(value))
    raise TypeError(f"prettify() expects a real number, got {type(number).__name__}")


def _checked_value(number: Number) -> Optional[Fraction]:
    value = _to_exact(number)
    if value is None:
        _log.debug("Rejecting non-finite value %r", number)
        return None
    if value > _MAX_EXACT or value < _MIN_EXACT:
        _log.debug("Rejecting out-of-range value %r", number)
        return None
    return value


def _split_groups(digits: str) -> List[str]:
    """Split a plain digit string into 3-digit groups, counted from the right."""

    head = len(digits) % _GROUP_WIDTH or _GROUP_WIDTH
    groups = [digits[:head]]
    groups.extend(
        digits[index:index + _GROUP_WIDTH]
        for index in range(head, len(digits), _GROUP_WIDTH)
    )
    return groups


def _fraction_digit(value: Fraction) -> str:
    """First decimal digit of the fractional part, or ``""`` when there is none."""

    magnitude = abs(value)
    fraction = magnitude - math.floor(magnitude)
    if not fraction:
        return ""
    return str(math.floor(fraction * 10))


def classify_magnitude(number: Number) -> Optional[Magnitude]:
    """Return the magnitude class of ``number`` (``None`` when out of domain)."""

    value = _checked_value(number)
    if value is None:
        return None
    digits = str(abs(int(value)))
    return Magnitude(len(_split_groups(digits)) - 1)


def prettify(number: Number) -> Optional[str]:
    """Return the prettified form of ``number``.

    ``None`` signals a value outside the supported domain: NaN, infinities
    and anything beyond +/-999,999,999,999,999.9.
    """

    value = _checked_value(number)
    if value is None:
        return None

    # int() truncates toward zero, so -0.5 leaves "0" and the sign is
    # carried separately.
    integer_part = abs(int(value))
    groups = _split_groups(str(integer_part))
    magnitude = Magnitude(len(groups) - 1)
    sign = "-" if value < 0 else ""

    if not magnitude.abbreviated:
        body = ",".join(groups)
        digit = _fraction_digit(value)
        if digit:
            body = f"{body}.{digit}"
        return f"{sign}{body}"

    body = groups[0]
    next_digit = groups[1][0]
    exact_power = integer_part == 10 ** (_GROUP_WIDTH * magnitude)
    if next_digit != "0" and not exact_power:
        body = f"{body}.{next_digit}"
    return f"{sign}{body}{magnitude.suffix}"


__all__ = [
    "MAX_NUMBER",
    "MAX_NUMBER_PRETTIFIED",
    "MIN_NUMBER",
    "MIN_NUMBER_PRETTIFIED",
    "Magnitude",
    "classify_magnitude",
    "prettify",
    "unit_suffix",
]
