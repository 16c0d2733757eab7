"""
Digit-chain algorithms on unsigned magnitudes.

A chain is a list of digits of one base, least significant first, together with a
`scale`: the number of fractional positions at the low end. The value of a chain is

    sum(chain[i] * base ** (i - scale))

All routines work position by position through the digit primitives in
`digit_ops` and never mutate their inputs.

Key behaviours
- Chains of different length/scale are zero-padded before any binary step (align).
- subtract_chains uses the base complement of the subtrahend plus one unit in the
  last place; the final carry is dropped, so it requires a >= b.
- multiply_chains is schoolbook; a partial product carry never exceeds base - 2,
  so folding it with the addition carry cannot overflow one digit.
- halve_chain walks most to least significant; a leftover remainder adds exactly one
  fractional position (truncating in odd bases).
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .digits import Digit, ordinal_to_digit, zero_digit, one_digit
from .digit_ops import (
    add_digits,
    complement_digit,
    halve_digit,
    multiply_digits,
)

Chain = List[Digit]

# Debug printing control
DEBUG_CHAIN = False

def _dbg(msg: str) -> None:
    if DEBUG_CHAIN:
        print(msg)


# ----------------------------
# Conversion between (integer part, fraction part) and chains
# ----------------------------

def parts_to_chain(int_digits: Sequence[Digit], frac_digits: Sequence[Digit]) -> Tuple[Chain, int]:
    """`int_digits` least significant first, `frac_digits` most significant first."""
    return list(reversed(frac_digits)) + list(int_digits), len(frac_digits)


def chain_to_parts(chain: Sequence[Digit], scale: int, base: int) -> Tuple[Tuple[Digit, ...], Tuple[Digit, ...]]:
    """Split into canonical parts: one units digit at least, no padding zeros."""
    zero = zero_digit(base)
    digits = list(chain)
    if scale < 0:
        digits = [zero] * (-scale) + digits
        scale = 0
    if scale > len(digits):
        # leading fractional zeros of a trimmed chain
        digits = digits + [zero] * (scale - len(digits))
    frac = digits[:scale]
    ints = digits[scale:]
    low = 0
    while low < len(frac) and frac[low].is_zero():
        low += 1
    frac = frac[low:]
    while len(ints) > 1 and ints[-1].is_zero():
        ints.pop()
    if not ints:
        ints = [zero]
    return tuple(ints), tuple(reversed(frac))


def trim(chain: Sequence[Digit]) -> Chain:
    """Drop most significant zeros (keeps at least one digit)."""
    digits = list(chain)
    while len(digits) > 1 and digits[-1].is_zero():
        digits.pop()
    return digits


def is_zero_chain(chain: Sequence[Digit]) -> bool:
    return all(d.is_zero() for d in chain)


def align(a: Sequence[Digit], scale_a: int, b: Sequence[Digit], scale_b: int, base: int) -> Tuple[Chain, Chain, int]:
    """Zero-pad both chains to a common scale and a common length."""
    zero = zero_digit(base)
    scale = max(scale_a, scale_b)
    a = [zero] * (scale - scale_a) + list(a)
    b = [zero] * (scale - scale_b) + list(b)
    size = max(len(a), len(b))
    a += [zero] * (size - len(a))
    b += [zero] * (size - len(b))
    return a, b, scale


def _pad_pair(a: Sequence[Digit], b: Sequence[Digit], base: int) -> Tuple[Chain, Chain]:
    a, b, _ = align(a, 0, b, 0, base)
    return a, b


# ----------------------------
# Small native integers (counts, ordinals, positions only)
# ----------------------------

def chain_to_int(chain: Sequence[Digit], base: int) -> int:
    value = 0
    for d in reversed(chain):
        value = value * base + d.ordinal
    return value


def int_to_chain(value: int, base: int) -> Chain:
    if value < 0:
        raise ValueError("int_to_chain expects a non-negative value")
    if value == 0:
        return [zero_digit(base)]
    digits = []
    while value:
        value, r = divmod(value, base)
        digits.append(ordinal_to_digit(base, r))
    return digits


# ----------------------------
# Comparison
# ----------------------------

def compare_chains(a: Sequence[Digit], b: Sequence[Digit], base: int) -> int:
    """-1, 0 or 1 for two integer-aligned chains of any length."""
    a, b = _pad_pair(a, b, base)
    for x, y in zip(reversed(a), reversed(b)):
        if x.ordinal != y.ordinal:
            return -1 if x.ordinal < y.ordinal else 1
    return 0


# ----------------------------
# Addition and subtraction
# ----------------------------

def add_chains(a: Sequence[Digit], b: Sequence[Digit], base: int) -> Chain:
    a, b = _pad_pair(a, b, base)
    carry = zero_digit(base)
    out: Chain = []
    for x, y in zip(a, b):
        r = add_digits(x, y, carry)
        out.append(r.result)
        carry = r.carry
    if not carry.is_zero():
        out.append(carry)
    return out


def subtract_chains(a: Sequence[Digit], b: Sequence[Digit], base: int) -> Chain:
    """a - b for a >= b (same scale) via the base complement of b."""
    a, b = _pad_pair(a, b, base)
    carry = one_digit(base)
    out: Chain = []
    for x, y in zip(a, b):
        r = add_digits(x, complement_digit(y), carry)
        out.append(r.result)
        carry = r.carry
    # final carry is the base**len overflow of the complement
    _dbg(f"[chain] subtract dropped carry={carry.ordinal}")
    return trim(out)


def increment_chain(a: Sequence[Digit], base: int) -> Chain:
    return add_chains(a, [one_digit(base)], base)


# ----------------------------
# Multiplication
# ----------------------------

def multiply_chains(a: Sequence[Digit], b: Sequence[Digit], base: int) -> Chain:
    zero = zero_digit(base)
    if is_zero_chain(a) or is_zero_chain(b):
        return [zero]
    acc: Chain = [zero] * (len(a) + len(b))
    for j, y in enumerate(b):
        if y.is_zero():
            continue
        carry = zero
        for i, x in enumerate(a):
            p = multiply_digits(x, y)
            s = add_digits(acc[i + j], p.result, carry)
            acc[i + j] = s.result
            carry = add_digits(p.carry, s.carry).result
        acc[j + len(a)] = carry
    return trim(acc)


# ----------------------------
# Halving
# ----------------------------

def halve_chain(chain: Sequence[Digit], scale: int, base: int) -> Tuple[Chain, int, Digit]:
    """Halve a magnitude; returns (chain, scale, remainder left after the extra position)."""
    zero = zero_digit(base)
    out: Chain = []
    remainder = zero
    for d in reversed(chain):
        r = halve_digit(d, remainder)
        out.append(r.result)
        remainder = r.remainder
    if not remainder.is_zero():
        r = halve_digit(zero, remainder)
        out.append(r.result)
        remainder = r.remainder
        scale += 1
    out.reverse()
    return out, scale, remainder


def parity_remainder(chain: Sequence[Digit], base: int) -> Digit:
    """Remainder of an integer chain divided by two, computed by halving."""
    remainder = zero_digit(base)
    for d in reversed(chain):
        remainder = halve_digit(d, remainder).remainder
    return remainder


__all__ = [
    "Chain",
    "DEBUG_CHAIN",
    "parts_to_chain",
    "chain_to_parts",
    "trim",
    "is_zero_chain",
    "align",
    "chain_to_int",
    "int_to_chain",
    "compare_chains",
    "add_chains",
    "subtract_chains",
    "increment_chain",
    "multiply_chains",
    "halve_chain",
    "parity_remainder",
]
