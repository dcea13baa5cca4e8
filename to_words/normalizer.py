"""
Input normalization: turn a caller's number into sign, integer part and
fraction digits.

Everything downstream works on a Python ``int`` (arbitrary precision) and a
string of decimal digits, so no float arithmetic ever touches the words.
Floats are read through their shortest round-trip ``repr``: 0.0468 becomes the
digits "0468", not the binary expansion 0.046799999999999994...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidNumberError

logger = logging.getLogger(__name__)

# Floats above this magnitude no longer represent every integer exactly
MAX_EXACT_FLOAT_INTEGER = 2**53

# Digits allowed on either side of the decimal point
MAX_DIGITS = 4000


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class NormalizedNumber:
    """A number split into the parts the converter needs."""

    is_negative: bool
    integer_part: int  # absolute value, truncated
    fraction_digits: str  # digits after the point, leading zeros kept, no trailing zeros

    @property
    def is_zero(self) -> bool:
        return self.integer_part == 0 and not self.fraction_digits


# ─── Public API ──────────────────────────────────────────────────────


def normalize_number(value: int | float | Decimal | str) -> NormalizedNumber:
    """Validate ``value`` and split it into sign, integer part and fraction.

    Args:
        value: an int, float, Decimal, or a numeric string such as "-37.06".

    Returns:
        NormalizedNumber, e.g. 37.06 -> (False, 37, "06").

    Raises:
        InvalidNumberError: if the value is not a finite real number.
    """
    number = _to_decimal(value)

    if not number.is_finite():
        raise InvalidNumberError(f'Invalid Number "{value}"', {"value": str(value)})

    if isinstance(value, float) and abs(value) >= MAX_EXACT_FLOAT_INTEGER:
        logger.warning(
            "Float %r exceeds the exact integer range; pass an int or Decimal "
            "to keep every digit",
            value,
        )

    # Longer digit strings exceed the interpreter's int/str conversion limit
    integer_digits = max(number.adjusted() + 1, 0)
    fraction_length = max(-number.as_tuple().exponent, 0)
    if integer_digits > MAX_DIGITS or fraction_length > MAX_DIGITS:
        raise InvalidNumberError(
            f"Number has too many digits (limit {MAX_DIGITS} before and after the point)",
            {"integer_digits": integer_digits, "fraction_digits": fraction_length},
        )

    # copy_abs() never rounds, unlike abs() under the 28-digit default context.
    # Fixed-point text, never exponent notation: 1E+3 -> "1000", 1E-5 -> "0.00001"
    text = format(number.copy_abs(), "f")
    integer_text, _, fraction_text = text.partition(".")
    magnitude = NormalizedNumber(
        is_negative=False,
        integer_part=int(integer_text),
        fraction_digits=fraction_text.rstrip("0"),
    )

    if number.is_signed() and not magnitude.is_zero:
        return replace(magnitude, is_negative=True)
    return magnitude


# ─── Helpers ─────────────────────────────────────────────────────────


def _to_decimal(value: object) -> Decimal:
    """Coerce supported input types to Decimal without losing digits."""
    # bool is an int subclass, but True is not a number anyone means to spell
    if isinstance(value, bool):
        raise InvalidNumberError(f'Invalid Number "{value}"', {"value": str(value)})
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        if not text:
            raise InvalidNumberError("Empty text cannot be converted to a number", {"value": value})
        try:
            return Decimal(text)
        except InvalidOperation:
            raise InvalidNumberError(f'Invalid Number "{value}"', {"value": value}) from None
    raise InvalidNumberError(
        f'Invalid Number "{value}"',
        {"value": repr(value), "type": type(value).__name__},
    )
