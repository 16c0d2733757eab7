"""
Digit arithmetic primitives.

Pure, total functions over digits of one base. Every multi-digit algorithm in
radixnum is built from these; carries and remainders are returned as digits of
the same base so they can be fed straight into the next position.

- add_digits: (d1 + d2 + carry) mod base, carry = sum div base (0 or 1).
- multiply_digits: (d1 * d2) mod base, carry = product div base (at most base - 2).
- halve_digit: (d + carry * base) div 2 with remainder 0 or 1.
- round_digit_half_up / round_digit_to_even: the rounded position becomes the zero
  digit; the carry is added at the next more significant position by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .digits import Digit, ordinal_to_digit, zero_digit
from .exc import BaseMismatchError, InvalidArgumentError


# ----------------------------
# Result pairs
# ----------------------------

@dataclass(frozen=True)
class ResultWithCarry:
    result: Digit
    carry: Digit


@dataclass(frozen=True)
class ResultWithRemainder:
    result: Digit
    remainder: Digit


# ----------------------------
# Guards
# ----------------------------

def _check_digit(d) -> Digit:
    if d is None:
        raise InvalidArgumentError("no digit specified")
    if not isinstance(d, Digit):
        raise InvalidArgumentError(f"expected a Digit, got {type(d).__name__}")
    return d


def _check_same_base(*digits: Digit) -> int:
    base = _check_digit(digits[0]).base
    for d in digits[1:]:
        if _check_digit(d).base != base:
            raise BaseMismatchError(base, d.base)
    return base


# ----------------------------
# Primitives
# ----------------------------

def add_digits(d1: Digit, d2: Digit, carry: Optional[Digit] = None) -> ResultWithCarry:
    if carry is None:
        base = _check_same_base(d1, d2)
        total = d1.ordinal + d2.ordinal
    else:
        base = _check_same_base(d1, d2, carry)
        total = d1.ordinal + d2.ordinal + carry.ordinal
    return ResultWithCarry(ordinal_to_digit(base, total % base), ordinal_to_digit(base, total // base))


def multiply_digits(d1: Digit, d2: Digit) -> ResultWithCarry:
    base = _check_same_base(d1, d2)
    product = d1.ordinal * d2.ordinal
    return ResultWithCarry(ordinal_to_digit(base, product % base), ordinal_to_digit(base, product // base))


def halve_digit(d: Digit, carry: Optional[Digit] = None) -> ResultWithRemainder:
    if carry is None:
        base = _check_same_base(d)
        total = d.ordinal
    else:
        base = _check_same_base(d, carry)
        if carry.ordinal > 1:
            raise InvalidArgumentError(f"halving carry must be 0 or 1, got {carry.ordinal}")
        total = carry.ordinal * base + d.ordinal
    return ResultWithRemainder(ordinal_to_digit(base, total // 2), ordinal_to_digit(base, total % 2))


def complement_digit(d: Digit) -> Digit:
    base = _check_same_base(d)
    return ordinal_to_digit(base, base - 1 - d.ordinal)


# ----------------------------
# Rounding
# ----------------------------

def round_down_digits(base: int) -> Tuple[Digit, ...]:
    """Digits strictly below half of `base`."""
    return tuple(ordinal_to_digit(base, o) for o in range(base) if 2 * o < base)


def round_up_digits(base: int) -> Tuple[Digit, ...]:
    """Digits strictly above half of `base`."""
    return tuple(ordinal_to_digit(base, o) for o in range(base) if 2 * o > base)


def middle_digits(base: int) -> Tuple[Digit, ...]:
    """The exact half digit; only even bases have one."""
    if base % 2:
        return ()
    return (ordinal_to_digit(base, base // 2),)


def round_digit_half_up(d: Digit) -> ResultWithCarry:
    base = _check_same_base(d)
    up = 2 * d.ordinal >= base
    return ResultWithCarry(zero_digit(base), ordinal_to_digit(base, 1 if up else 0))


def round_digit_to_even(d: Digit, kept: Digit) -> ResultWithCarry:
    """Round half to even: `d` is the first dropped digit, `kept` the last kept one."""
    base = _check_same_base(d, kept)
    twice = 2 * d.ordinal
    up = twice > base or (twice == base and kept.is_odd())
    return ResultWithCarry(zero_digit(base), ordinal_to_digit(base, 1 if up else 0))


__all__ = [
    "ResultWithCarry",
    "ResultWithRemainder",
    "add_digits",
    "multiply_digits",
    "halve_digit",
    "complement_digit",
    "round_down_digits",
    "round_up_digits",
    "middle_digits",
    "round_digit_half_up",
    "round_digit_to_even",
]
