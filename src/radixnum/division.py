"""
Long division on digit chains.

Integer chains only (least significant first, no fractional positions). Each quotient
digit is found by repeated subtraction of the divisor from the running remainder,
which takes at most base - 1 steps because the remainder is always below
divisor * base.

- divide_chains: integer quotient and remainder.
- long_divide: quotient continued for `precision` fractional digits, rounded half up
  at the last kept digit (2 * remainder >= divisor rounds up).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

from .core.chain import (
    Chain,
    add_chains,
    compare_chains,
    increment_chain,
    is_zero_chain,
    subtract_chains,
    trim,
)
from .core.digits import ordinal_to_digit, zero_digit
from .core.exc import InvalidArgumentError, UndefinedOperationError

if TYPE_CHECKING:
    from .number import Number

# Debug printing control
DEBUG_DIVISION = False

def _dbg(msg: str) -> None:
    if DEBUG_DIVISION:
        print(msg)


@dataclass(frozen=True)
class DivisionResult:
    quotient: "Number"
    remainder: "Number"


def _quotient_digit(remainder: Chain, divisor: Chain, base: int):
    count = 0
    while compare_chains(remainder, divisor, base) >= 0:
        remainder = subtract_chains(remainder, divisor, base)
        count += 1
    return ordinal_to_digit(base, count), remainder


def divide_chains(dividend: Chain, divisor: Chain, base: int) -> Tuple[Chain, Chain]:
    if is_zero_chain(divisor):
        raise UndefinedOperationError("divide", "0")
    quotient: Chain = []
    remainder: Chain = [zero_digit(base)]
    for d in reversed(dividend):
        remainder = trim([d] + remainder)
        digit, remainder = _quotient_digit(remainder, divisor, base)
        quotient.append(digit)
    quotient.reverse()
    return trim(quotient) if quotient else [zero_digit(base)], remainder


def long_divide(dividend: Chain, divisor: Chain, base: int, precision: int) -> Tuple[Chain, int]:
    """Quotient chain and its scale (== precision), rounded half up."""
    if precision < 0:
        raise InvalidArgumentError(f"precision must be >= 0, got {precision}")
    quotient, remainder = divide_chains(dividend, divisor, base)
    fraction: Chain = []
    for _ in range(precision):
        if is_zero_chain(remainder):
            fraction.append(zero_digit(base))
            continue
        remainder = trim([zero_digit(base)] + remainder)
        digit, remainder = _quotient_digit(remainder, divisor, base)
        fraction.append(digit)
    chain = list(reversed(fraction)) + quotient
    twice = add_chains(remainder, remainder, base)
    if not is_zero_chain(remainder) and compare_chains(twice, divisor, base) >= 0:
        _dbg(f"[division] rounding up at precision={precision}")
        chain = increment_chain(chain, base)
    return chain, precision


__all__ = [
    "DEBUG_DIVISION",
    "DivisionResult",
    "divide_chains",
    "long_divide",
]
