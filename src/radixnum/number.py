"""
Number: signed arbitrary-precision positional value in any base from 2 to 64.

- Digit chain anchored at the units position: `int_digits` holds positions 0, 1, 2, ...
  (least significant first), `frac_digits` holds positions -1, -2, ... (most
  significant first). Canonical form: one units digit at least, no leading integer
  zeros, no trailing fractional zeros.
- Infinity carries no digits, only a sign. Zero keeps the sign it was built with;
  +0 and -0 compare and hash equal.
- Immutable: every operation returns a new Number built from fresh tuples.
- Binary operations require operands of the same base (BaseMismatchError otherwise).

Extended-real rules are applied before any digit algorithm runs:
- same-signed infinities absorb finite operands and each other under add;
  +inf + -inf is undefined; inf * 0 is undefined;
- doubling/halving/shifting an infinity returns it unchanged;
- shifting left by +inf gives a signed zero, shifting right by +inf a signed infinity.

# Notes:
# - Small native ints are used only for digit ordinals, positions and loop counts;
#   value arithmetic goes through the chain algorithms in core.chain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from .core.constants import DEFAULT_NUMBER_BASE, DEFAULT_MAXIMUM_FRACTION_LENGTH, DECIMAL_POINT
from .core.digits import Digit, check_base, ordinal_to_digit, zero_digit, one_digit
from .core.digit_ops import complement_digit, round_digit_half_up, round_digit_to_even
from .core.signs import Sign
from .core.chain import (
    add_chains,
    align,
    chain_to_int,
    chain_to_parts,
    compare_chains,
    halve_chain,
    int_to_chain,
    is_zero_chain,
    multiply_chains,
    parity_remainder,
    parts_to_chain,
    subtract_chains,
)
from .core.notations import parse_number
from .core.fmt import to_standard_notation, to_scientific_notation
from .core.exc import (
    BaseMismatchError,
    InvalidArgumentError,
    UndefinedOperationError,
)
from .division import DivisionResult, divide_chains

if TYPE_CHECKING:
    from .fraction import Fraction

# Debug printing control
DEBUG_NUMBERS = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMBERS:
        print(msg)


ShiftCount = Union[int, "Number"]


@dataclass(frozen=True, eq=False)
class Number:
    """Signed positional number; build it with parse/from_int/from_digits rather than directly."""
    base: int
    sign: Sign
    int_digits: Tuple[Digit, ...]
    frac_digits: Tuple[Digit, ...]
    infinite: bool = False

    def __post_init__(self):
        check_base(self.base)
        if not isinstance(self.sign, Sign):
            raise InvalidArgumentError(f"sign must be a Sign, got {self.sign!r}")
        if self.infinite:
            if self.int_digits or self.frac_digits:
                raise InvalidArgumentError("infinity carries no digits")
            object.__setattr__(self, "int_digits", ())
            object.__setattr__(self, "frac_digits", ())
            return
        if not self.int_digits:
            raise InvalidArgumentError("a finite number needs a units digit")
        for d in tuple(self.int_digits) + tuple(self.frac_digits):
            if not isinstance(d, Digit):
                raise InvalidArgumentError(f"expected a Digit, got {d!r}")
            if d.base != self.base:
                raise BaseMismatchError(self.base, d.base)
        int_digits, frac_digits = chain_to_parts(*parts_to_chain(self.int_digits, self.frac_digits), self.base)
        object.__setattr__(self, "int_digits", int_digits)
        object.__setattr__(self, "frac_digits", frac_digits)

    # ----------------------------
    # Construction
    # ----------------------------

    @classmethod
    def _from_chain(cls, base: int, sign: Sign, chain: Sequence[Digit], scale: int) -> "Number":
        int_digits, frac_digits = chain_to_parts(chain, scale, base)
        return cls(base, sign, int_digits, frac_digits)

    @classmethod
    def from_digits(
        cls,
        base: int,
        sign: Sign,
        int_digits: Sequence[Digit],
        frac_digits: Sequence[Digit] = (),
    ) -> "Number":
        """`int_digits` least significant first, `frac_digits` most significant first."""
        check_base(base)
        chain, scale = parts_to_chain(int_digits, frac_digits)
        return cls._from_chain(base, sign, chain or [zero_digit(base)], scale)

    @classmethod
    def parse(cls, text: str, base: int = DEFAULT_NUMBER_BASE) -> "Number":
        parsed = parse_number(text, base)
        if parsed.infinity:
            return cls.infinity(base, parsed.sign)
        chain, scale = parts_to_chain(parsed.int_digits, parsed.frac_digits)
        return cls._from_chain(base, parsed.sign, chain, scale - parsed.exponent)

    @classmethod
    def from_int(cls, value: int, base: int = DEFAULT_NUMBER_BASE) -> "Number":
        check_base(base)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"expected an int, got {value!r}")
        return cls._from_chain(base, Sign.of(value < 0), int_to_chain(abs(value), base), 0)

    @classmethod
    def from_float(cls, value: float, base: int = DEFAULT_NUMBER_BASE) -> "Number":
        """Exact value of repr(value); non-terminating digits in `base` are truncated like rebase()."""
        if value is None:
            raise InvalidArgumentError("no value specified")
        if math.isnan(value):
            raise InvalidArgumentError("NaN has no number representation")
        if math.isinf(value):
            return cls.infinity(base, Sign.of(value < 0))
        number = cls.parse(repr(float(value)), DEFAULT_NUMBER_BASE)
        return number.rebase(base)

    @staticmethod
    def zero(base: int = DEFAULT_NUMBER_BASE, sign: Sign = Sign.POSITIVE) -> "Number":
        return Number(base, sign, (zero_digit(base),), ())

    @staticmethod
    def one(base: int = DEFAULT_NUMBER_BASE) -> "Number":
        return Number(base, Sign.POSITIVE, (one_digit(base),), ())

    @staticmethod
    def infinity(base: int = DEFAULT_NUMBER_BASE, sign: Sign = Sign.POSITIVE) -> "Number":
        return Number(base, sign, (), (), infinite=True)

    # ----------------------------
    # Guards
    # ----------------------------

    def _check_operand(self, other, operation: str) -> "Number":
        if other is None:
            raise InvalidArgumentError(f"{operation}: no operand specified")
        if not isinstance(other, Number):
            raise InvalidArgumentError(f"{operation}: expected a Number, got {type(other).__name__}")
        if other.base != self.base:
            raise BaseMismatchError(self.base, other.base)
        return other

    def _check_integer(self, operation: str) -> None:
        if self.infinite or self.frac_digits:
            raise InvalidArgumentError(f"{operation} requires an integer, got {self}")

    def _chain(self):
        return parts_to_chain(self.int_digits, self.frac_digits)

    # ----------------------------
    # Digit access
    # ----------------------------

    def digits(self) -> int:
        return len(self.int_digits) + len(self.frac_digits)

    def left_digits(self) -> int:
        return len(self.int_digits)

    def right_digits(self) -> int:
        return len(self.frac_digits)

    def digit_at(self, position: int) -> Digit:
        """Digit at `position` (0 = units, negative = fractional); zero outside the chain."""
        if position >= 0:
            if position < len(self.int_digits):
                return self.int_digits[position]
        elif -position <= len(self.frac_digits):
            return self.frac_digits[-position - 1]
        return zero_digit(self.base)

    def iter_digits(self) -> Iterator[Digit]:
        """Most significant first."""
        yield from reversed(self.int_digits)
        yield from self.frac_digits

    def iter_digits_reversed(self) -> Iterator[Digit]:
        """Least significant first."""
        yield from reversed(self.frac_digits)
        yield from self.int_digits

    # ----------------------------
    # Predicates
    # ----------------------------

    def is_infinity(self) -> bool:
        return self.infinite

    def is_zero(self) -> bool:
        return not self.infinite and not self.frac_digits and len(self.int_digits) == 1 and self.int_digits[0].is_zero()

    def is_one(self) -> bool:
        return (
            not self.infinite
            and self.sign.is_positive()
            and not self.frac_digits
            and len(self.int_digits) == 1
            and self.int_digits[0].ordinal == 1
        )

    def is_positive(self) -> bool:
        return self.sign.is_positive()

    def is_negative(self) -> bool:
        return self.sign.is_negative()

    def is_integer(self) -> bool:
        return not self.infinite and not self.frac_digits

    def is_fraction(self) -> bool:
        return bool(self.frac_digits)

    def is_even(self) -> bool:
        self._check_integer("is_even")
        return parity_remainder(list(self.int_digits), self.base).is_zero()

    def is_odd(self) -> bool:
        return not self.is_even()

    # ----------------------------
    # Comparison
    # ----------------------------

    def _rank(self) -> int:
        if self.infinite:
            return 2 if self.sign.is_positive() else -2
        if self.is_zero():
            return 0
        return 1 if self.sign.is_positive() else -1

    def _cmp_core(self, other: "Number") -> int:
        r1, r2 = self._rank(), other._rank()
        if r1 != r2:
            return -1 if r1 < r2 else 1
        if r1 in (-2, 0, 2):
            return 0
        a, sa = self._chain()
        b, sb = other._chain()
        a, b, _ = align(a, sa, b, sb, self.base)
        c = compare_chains(a, b, self.base)
        return c if r1 > 0 else -c

    def compare_to(self, other: "Number") -> int:
        """-1, 0 or 1; raises BaseMismatchError for different bases."""
        return self._cmp_core(self._check_operand(other, "compare_to"))

    def equals(self, other) -> bool:
        """Value equality; False for None, foreign types and other bases."""
        if not isinstance(other, Number) or other.base != self.base:
            return False
        return self._cmp_core(other) == 0

    def is_greater(self, other: "Number") -> bool:
        return self.compare_to(other) > 0

    def is_greater_or_equal(self, other: "Number") -> bool:
        return self.compare_to(other) >= 0

    def is_lesser(self, other: "Number") -> bool:
        return self.compare_to(other) < 0

    def is_lesser_or_equal(self, other: "Number") -> bool:
        return self.compare_to(other) <= 0

    def is_within_interval(self, lower: "Number", upper: "Number") -> bool:
        return self.is_greater_or_equal(lower) and self.is_lesser_or_equal(upper)

    def max(self, other: "Number") -> "Number":
        return other if self.compare_to(other) < 0 else self

    def min(self, other: "Number") -> "Number":
        return other if self.compare_to(other) > 0 else self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "Number") -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Number") -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Number") -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Number") -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        if self.infinite:
            return hash((Number, self.base, self.sign, "inf"))
        if self.is_zero():
            return hash((Number, self.base, 0))
        return hash((Number, self.base, self.sign, self.int_digits, self.frac_digits))

    # ----------------------------
    # Sign handling
    # ----------------------------

    def negate(self) -> "Number":
        return Number(self.base, self.sign.negate(), self.int_digits, self.frac_digits, self.infinite)

    def absolute_value(self) -> "Number":
        return Number(self.base, Sign.POSITIVE, self.int_digits, self.frac_digits, self.infinite)

    # ----------------------------
    # Addition family
    # ----------------------------

    def add(self, other: "Number") -> "Number":
        other = self._check_operand(other, "add")
        if self.infinite or other.infinite:
            if self.infinite and other.infinite and self.sign is not other.sign:
                raise UndefinedOperationError("add", self, other)
            return self if self.infinite else other
        a, sa = self._chain()
        b, sb = other._chain()
        a, b, scale = align(a, sa, b, sb, self.base)
        if self.sign is other.sign:
            return Number._from_chain(self.base, self.sign, add_chains(a, b, self.base), scale)
        c = compare_chains(a, b, self.base)
        if c == 0:
            return Number.zero(self.base)
        if c > 0:
            return Number._from_chain(self.base, self.sign, subtract_chains(a, b, self.base), scale)
        return Number._from_chain(self.base, other.sign, subtract_chains(b, a, self.base), scale)

    def subtract(self, other: "Number") -> "Number":
        other = self._check_operand(other, "subtract")
        if self.infinite and other.infinite and self.sign is other.sign:
            raise UndefinedOperationError("subtract", self, other)
        return self.add(other.negate())

    def inc(self) -> "Number":
        return self.add(Number.one(self.base))

    def dec(self) -> "Number":
        return self.subtract(Number.one(self.base))

    def doubling(self) -> "Number":
        return self.add(self)

    def halving(self) -> "Number":
        if self.infinite:
            return self
        if self.is_zero():
            return Number.zero(self.base)
        chain, scale = self._chain()
        halved, scale, _ = halve_chain(chain, scale, self.base)
        return Number._from_chain(self.base, self.sign, halved, scale)

    def complement(self) -> "Number":
        """Digit-wise base - 1 - d over the existing chain; the sign is kept."""
        if self.infinite:
            raise UndefinedOperationError("complement", self)
        ints = tuple(complement_digit(d) for d in self.int_digits)
        fracs = tuple(complement_digit(d) for d in self.frac_digits)
        return Number.from_digits(self.base, self.sign, ints, fracs)

    def digit_sum(self) -> "Number":
        if self.infinite:
            raise UndefinedOperationError("digit_sum", self)
        total = [zero_digit(self.base)]
        for d in self.iter_digits_reversed():
            total = add_chains(total, [d], self.base)
        return Number._from_chain(self.base, Sign.POSITIVE, total, 0)

    # ----------------------------
    # Multiplication family
    # ----------------------------

    def multiply(self, other: "Number") -> "Number":
        other = self._check_operand(other, "multiply")
        sign = self.sign.xor(other.sign)
        if self.infinite or other.infinite:
            if self.is_zero() or other.is_zero():
                raise UndefinedOperationError("multiply", self, other)
            return Number.infinity(self.base, sign)
        if self.is_zero() or other.is_zero():
            return Number.zero(self.base)
        a, sa = self._chain()
        b, sb = other._chain()
        return Number._from_chain(self.base, sign, multiply_chains(a, b, self.base), sa + sb)

    def square(self) -> "Number":
        return self.multiply(self)

    def exponentiate(self, exponent: ShiftCount) -> "Number":
        """Non-negative integer exponent (negative exponents live on Fraction)."""
        count = self._integer_count(exponent, "exponentiate")
        if count < 0:
            raise InvalidArgumentError("negative exponent; use Fraction.exponentiate")
        result = Number.one(self.base)
        factor = self
        while count:
            if count & 1:
                result = result.multiply(factor)
            count >>= 1
            if count:
                factor = factor.square()
        return result

    # ----------------------------
    # Division family
    # ----------------------------

    def divide_with_remainder(self, other: "Number") -> DivisionResult:
        """Integer division truncated toward zero; the remainder takes the dividend's sign."""
        other = self._check_operand(other, "divide_with_remainder")
        if self.infinite or other.infinite or other.is_zero():
            raise UndefinedOperationError("divide_with_remainder", self, other)
        self._check_integer("divide_with_remainder")
        other._check_integer("divide_with_remainder")
        q, r = divide_chains(list(self.int_digits), list(other.int_digits), self.base)
        quotient = Number._from_chain(self.base, self.sign.xor(other.sign), q, 0)
        remainder = Number._from_chain(self.base, self.sign, r, 0)
        if quotient.is_zero():
            quotient = Number.zero(self.base)
        if remainder.is_zero():
            remainder = Number.zero(self.base)
        return DivisionResult(quotient, remainder)

    def modulo(self, other: "Number") -> "Number":
        return self.divide_with_remainder(other).remainder

    def divide(self, other: "Number") -> "Fraction":
        """Exact quotient as a Fraction."""
        from .fraction import Fraction
        other = self._check_operand(other, "divide")
        return Fraction.from_number(self).divide(Fraction.from_number(other))

    def reciprocal(self) -> "Fraction":
        from .fraction import Fraction
        return Fraction.from_number(self).reciprocal()

    def is_multiple_of(self, other: "Number") -> bool:
        """True when self == k * other for an integer k; zero and infinity are nobody's multiple."""
        other = self._check_operand(other, "is_multiple_of")
        if self.infinite or other.infinite or self.is_zero() or other.is_zero():
            return False
        places = max(self.right_digits(), other.right_digits())
        a = self.absolute_value().shift_right(places)
        b = other.absolute_value().shift_right(places)
        return a.modulo(b).is_zero()

    def factorial(self) -> "Number":
        self._check_integer("factorial")
        if self.is_negative() and not self.is_zero():
            raise InvalidArgumentError(f"factorial requires a non-negative integer, got {self}")
        result = Number.one(self.base)
        factor = Number.one(self.base)
        while factor.is_lesser_or_equal(self):
            result = result.multiply(factor)
            factor = factor.inc()
        return result

    # ----------------------------
    # Divisors and primes (see radixnum.reduction)
    # ----------------------------

    def divisors(self, iterations: Optional[int] = None) -> Tuple["Number", ...]:
        from .reduction import divisors
        return divisors(self, iterations)

    def prime_factors(self, iterations: Optional[int] = None) -> Tuple["Number", ...]:
        from .reduction import prime_factors
        return prime_factors(self, iterations)

    def is_prime(self) -> bool:
        from .reduction import is_prime
        return is_prime(self)

    def next_prime(self) -> "Number":
        from .reduction import next_prime
        return next_prime(self)

    # ----------------------------
    # Roots
    # ----------------------------

    def nth_root(self, n: ShiftCount, precision: Optional[int] = None) -> "Number":
        """Principal n-th root truncated (not rounded) to `precision` fractional digits.

        Integer Newton iteration on the radicand scaled by base**(n * precision):
        starting above the root, r' = ((n - 1) * r + N // r**(n - 1)) // n decreases
        until it stops, and the last r is floor(N ** (1/n)).
        """
        degree = self._integer_count(n, "nth_root")
        if degree < 1:
            raise InvalidArgumentError(f"root degree must be >= 1, got {degree}")
        if precision is None:
            precision = DEFAULT_MAXIMUM_FRACTION_LENGTH
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidArgumentError(f"precision must be an int >= 0, got {precision!r}")
        if self.is_negative() and not self.is_zero():
            raise UndefinedOperationError("nth_root", self, n)
        if self.infinite:
            return self
        radicand = self.shift_right(degree * precision).truncate()
        if radicand.is_zero():
            return Number.zero(self.base)
        k = Number.from_int(degree, self.base)
        k1 = Number.from_int(degree - 1, self.base)
        root = Number.one(self.base).shift_right((radicand.left_digits() + degree - 1) // degree)
        while True:
            estimate = k1.multiply(root).add(radicand.divide_with_remainder(root.exponentiate(degree - 1)).quotient)
            estimate = estimate.divide_with_remainder(k).quotient
            if estimate.is_greater_or_equal(root):
                break
            root = estimate
        _dbg(f"[number] nth_root({degree}) of {self} -> {root} / base**{precision}")
        return root.shift_left(precision)

    def square_root(self, precision: Optional[int] = None) -> "Number":
        return self.nth_root(2, precision)

    # ----------------------------
    # Shifts
    # ----------------------------

    def _integer_count(self, n, operation: str) -> int:
        """Native int for a loop/shift count given as int or integer Number."""
        if n is None:
            raise InvalidArgumentError(f"{operation}: no count specified")
        if isinstance(n, bool):
            raise InvalidArgumentError(f"{operation}: expected an int or Number, got bool")
        if isinstance(n, int):
            return n
        if isinstance(n, float):
            if not n.is_integer():
                raise UndefinedOperationError(operation, self, n)
            return int(n)
        if isinstance(n, Number):
            self._check_operand(n, operation)
            if n.infinite:
                raise UndefinedOperationError(operation, self, n)
            if n.frac_digits:
                raise UndefinedOperationError(operation, self, n)
            value = chain_to_int(list(n.int_digits), n.base)
            return -value if n.sign.is_negative() else value
        raise InvalidArgumentError(f"{operation}: expected an int or Number, got {type(n).__name__}")

    def _shift(self, n: ShiftCount, towards_fraction: bool, operation: str) -> "Number":
        if isinstance(n, Number) and n.infinite:
            self._check_operand(n, operation)
            if self.infinite or self.is_zero():
                return self
            # +inf moves in the named direction, -inf in the opposite one
            if n.sign.is_positive() == towards_fraction:
                return Number.zero(self.base, self.sign)
            return Number.infinity(self.base, self.sign)
        count = self._integer_count(n, operation)
        if self.infinite or self.is_zero() or count == 0:
            return self
        chain, scale = self._chain()
        scale = scale + count if towards_fraction else scale - count
        _dbg(f"[number] {operation}({count}) scale -> {scale}")
        return Number._from_chain(self.base, self.sign, chain, scale)

    def shift_left(self, n: ShiftCount) -> "Number":
        """Move the point `n` places left (divide by base**n)."""
        return self._shift(n, True, "shift_left")

    def shift_right(self, n: ShiftCount) -> "Number":
        """Move the point `n` places right (multiply by base**n)."""
        return self._shift(n, False, "shift_right")

    # ----------------------------
    # Integer/fraction parts and rounding
    # ----------------------------

    def truncate(self) -> "Number":
        if self.infinite or not self.frac_digits:
            return self
        return Number.from_digits(self.base, self.sign, self.int_digits)

    def remove_integer_part(self) -> "Number":
        if self.infinite:
            raise UndefinedOperationError("remove_integer_part", self)
        return Number.from_digits(self.base, self.sign, (zero_digit(self.base),), self.frac_digits)

    def _round_with(self, precision: int, rounder) -> "Number":
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidArgumentError(f"precision must be an int >= 0, got {precision!r}")
        if self.infinite or len(self.frac_digits) <= precision:
            return self
        kept = self.frac_digits[:precision]
        dropped = self.frac_digits[precision]
        last_kept = kept[-1] if kept else self.int_digits[0]
        carry = rounder(dropped, last_kept).carry
        chain, scale = parts_to_chain(self.int_digits, kept)
        if not carry.is_zero():
            chain = add_chains(chain, [carry], self.base)
        return Number._from_chain(self.base, self.sign, chain, scale)

    def round(self, precision: int = 0) -> "Number":
        """Round half up on the magnitude to `precision` fractional digits."""
        return self._round_with(precision, lambda d, _kept: round_digit_half_up(d))

    def round_to_even(self, precision: int = 0) -> "Number":
        return self._round_with(precision, round_digit_to_even)

    # ----------------------------
    # Rebase
    # ----------------------------

    def rebase(self, new_base: int) -> "Number":
        """Same value in `new_base`.

        The integer part is exact (Horner evaluation in the target base). The fraction
        part is produced digit by digit (multiply by the new base, take the integer
        part); a non-terminating expansion stops at the first non-zero digit from the
        DEFAULT_MAXIMUM_FRACTION_LENGTH-th digit on.
        """
        check_base(new_base)
        if new_base == self.base:
            return Number(self.base, self.sign, self.int_digits, self.frac_digits, self.infinite)
        if self.infinite:
            return Number.infinity(new_base, self.sign)

        old_base_there = int_to_chain(self.base, new_base)
        ints = [zero_digit(new_base)]
        for d in reversed(self.int_digits):
            ints = multiply_chains(ints, old_base_there, new_base)
            ints = add_chains(ints, int_to_chain(d.ordinal, new_base), new_base)

        new_base_here = int_to_chain(new_base, self.base)
        zero = zero_digit(self.base)
        scale = len(self.frac_digits)
        rest = list(reversed(self.frac_digits))
        fracs = []
        remaining = DEFAULT_MAXIMUM_FRACTION_LENGTH
        while rest and not is_zero_chain(rest):
            product = multiply_chains(rest, new_base_here, self.base)
            product += [zero] * (scale - len(product))
            digit = ordinal_to_digit(new_base, chain_to_int(product[scale:], self.base))
            rest = product[:scale]
            fracs.append(digit)
            if remaining:
                remaining -= 1
            if remaining == 0 and not digit.is_zero():
                _dbg(f"[number] rebase {self.base}->{new_base} truncated after {len(fracs)} digits")
                break
        return Number._from_chain(new_base, self.sign, list(reversed(fracs)) + ints, len(fracs))

    # ----------------------------
    # Formatting and protocol
    # ----------------------------

    def to_standard_notation(self, decimal_separator: str = DECIMAL_POINT) -> str:
        return to_standard_notation(self, decimal_separator)

    def to_scientific_notation(self, decimal_separator: str = DECIMAL_POINT) -> str:
        return to_scientific_notation(self, decimal_separator)

    def __str__(self) -> str:
        return to_standard_notation(self)

    def __repr__(self) -> str:
        return f"Number({to_standard_notation(self)!r}, base={self.base})"

    def __neg__(self) -> "Number":
        return self.negate()

    def __abs__(self) -> "Number":
        return self.absolute_value()

    def __add__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "Number") -> "Fraction":
        if not isinstance(other, Number):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return self.modulo(other)

    def __pow__(self, exponent: ShiftCount) -> "Number":
        return self.exponentiate(exponent)


__all__ = ["Number", "DivisionResult", "DEBUG_NUMBERS"]
