"""
Formatting helpers (display only)
=================================

Render numbers in standard or scientific notation using the current alphabet of
their base. These helpers never take part in arithmetic. They accept any object
exposing `base`, `sign`, `int_digits`, `frac_digits` and `is_infinity()`.
"""

from __future__ import annotations

from typing import List

from .constants import (
    DECIMAL_POINT,
    DECIMAL_COMMA,
    EXPONENT_ABBREVIATION,
    INFINITY_REPRESENTATION,
    MINUS_SIGN,
)
from .digits import exponent_markers, symbol_of
from .chain import int_to_chain
from .exc import InvalidArgumentError


def _check_separator(separator: str) -> str:
    if separator not in (DECIMAL_POINT, DECIMAL_COMMA):
        raise InvalidArgumentError(f"unsupported decimal separator {separator!r}")
    return separator


def _sign_prefix(number) -> str:
    return MINUS_SIGN if number.sign.is_negative() else ""


def to_standard_notation(number, decimal_separator: str = DECIMAL_POINT) -> str:
    """E.g. '-12.05'; infinities render as 'Infinity' / '-Infinity'."""
    _check_separator(decimal_separator)
    if number.is_infinity():
        return _sign_prefix(number) + INFINITY_REPRESENTATION
    text = "".join(symbol_of(d) for d in reversed(number.int_digits))
    if number.frac_digits:
        text += decimal_separator + "".join(symbol_of(d) for d in number.frac_digits)
    return _sign_prefix(number) + text


def to_scientific_notation(number, decimal_separator: str = DECIMAL_POINT) -> str:
    """One non-zero leading digit, exponent in the number's base, e.g. '1.2345E1' ('1.2^1' from base 15 up)."""
    _check_separator(decimal_separator)
    if number.is_infinity():
        return _sign_prefix(number) + INFINITY_REPRESENTATION
    # most significant first; position of digits[0] is len(int_digits) - 1
    digits: List = list(reversed(number.int_digits)) + list(number.frac_digits)
    exponent = len(number.int_digits) - 1
    while len(digits) > 1 and digits[0].is_zero():
        digits.pop(0)
        exponent -= 1
    while len(digits) > 1 and digits[-1].is_zero():
        digits.pop()
    if len(digits) == 1 and digits[0].is_zero():
        exponent = 0
    mantissa = symbol_of(digits[0])
    if len(digits) > 1:
        mantissa += decimal_separator + "".join(symbol_of(d) for d in digits[1:])
    exp_text = "".join(symbol_of(d) for d in reversed(int_to_chain(abs(exponent), number.base)))
    if exponent < 0:
        exp_text = MINUS_SIGN + exp_text
    markers = exponent_markers(number.base) or (EXPONENT_ABBREVIATION,)
    return _sign_prefix(number) + mantissa + markers[0] + exp_text


__all__ = [
    "to_standard_notation",
    "to_scientific_notation",
]
