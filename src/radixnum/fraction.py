"""
Fraction: exact rational value built from integer Numbers of one base.

- Stored as a sign plus the magnitudes of integer part, numerator and denominator
  (defaults 0 and 1). The sign is combined from all given components: an odd number
  of negative components makes the fraction negative.
- A zero denominator with a non-zero numerator marks the fraction infinity; 0/0 is
  rejected. Fraction infinity evaluates to the Number infinity of the same sign.
- Arithmetic and comparison work by cross-multiplication on the normalized form
  (integer part folded into the numerator); results are not reduced implicitly.
- Equality is by value: 1/2 == 2/4 == 0 1/2.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .core.constants import DEFAULT_NUMBER_BASE, DEFAULT_MAXIMUM_FRACTION_LENGTH
from .core.signs import Sign
from .core.exc import BaseMismatchError, InvalidArgumentError, UndefinedOperationError
from .division import long_divide
from .number import Number
from .reduction import (
    DEFAULT_PROCESSING_DETAILS,
    ProcessingDetails,
    common_divisor_set,
    common_prime_factors,
    reduce_terms,
)

# Debug printing control
DEBUG_FRACTIONS = False

def _dbg(msg: str) -> None:
    if DEBUG_FRACTIONS:
        print(msg)


Component = Union[Number, int, str]
Operand = Union["Fraction", Number]


def _component(value: Component, base: int, name: str) -> Number:
    if value is None:
        raise InvalidArgumentError(f"no {name} specified")
    if isinstance(value, Number):
        if value.base != base:
            raise BaseMismatchError(base, value.base)
        number = value
    elif isinstance(value, str):
        number = Number.parse(value, base)
    elif isinstance(value, int) and not isinstance(value, bool):
        number = Number.from_int(value, base)
    else:
        raise InvalidArgumentError(f"{name} must be a Number, int or str, got {type(value).__name__}")
    if number.is_infinity():
        raise InvalidArgumentError(f"{name} must be finite")
    if not number.is_integer():
        raise InvalidArgumentError(f"{name} must be an integer, got {number}")
    return number


@dataclass(frozen=True, eq=False)
class Fraction:
    """sign * (integer_part + numerator / denominator), components stored as magnitudes."""
    sign: Sign
    integer_part: Number
    numerator: Number
    denominator: Number

    def __post_init__(self):
        parts = (self.integer_part, self.numerator, self.denominator)
        for p in parts:
            if not isinstance(p, Number) or not p.is_integer() or p.is_negative():
                raise InvalidArgumentError(f"fraction components must be non-negative integers, got {p!r}")
            if p.base != self.numerator.base:
                raise BaseMismatchError(self.numerator.base, p.base)
        if self.numerator.is_zero() and self.denominator.is_zero():
            raise UndefinedOperationError("fraction", self.numerator, self.denominator)

    # ----------------------------
    # Construction
    # ----------------------------

    @classmethod
    def mixed(
        cls,
        integer_part: Component,
        numerator: Component,
        denominator: Component = 1,
        base: Optional[int] = None,
    ) -> "Fraction":
        """integer_part + numerator/denominator with the combined sign of all three."""
        if base is None:
            base = next(
                (c.base for c in (integer_part, numerator, denominator) if isinstance(c, Number)),
                DEFAULT_NUMBER_BASE,
            )
        parts = (
            _component(integer_part, base, "integer part"),
            _component(numerator, base, "numerator"),
            _component(denominator, base, "denominator"),
        )
        negatives = sum(1 for p in parts if p.is_negative())
        i, n, d = (p.absolute_value() for p in parts)
        return cls(Sign.of(negatives % 2 == 1), i, n, d)

    @classmethod
    def of(cls, numerator: Component, denominator: Component = 1, base: Optional[int] = None) -> "Fraction":
        return cls.mixed(0, numerator, denominator, base)

    @classmethod
    def from_number(cls, number: Number) -> "Fraction":
        """Exact: a fractional Number with k fraction digits becomes m / base**k."""
        if number is None:
            raise InvalidArgumentError("no number specified")
        if not isinstance(number, Number):
            raise InvalidArgumentError(f"expected a Number, got {type(number).__name__}")
        base = number.base
        sign = number.sign
        if number.is_infinity():
            return cls.infinity(base, sign)
        if number.is_zero():
            return cls.zero(base)
        k = number.right_digits()
        numerator = number.absolute_value().shift_right(k)
        denominator = Number.one(base).shift_right(k)
        return cls(sign, Number.zero(base), numerator, denominator)

    @classmethod
    def _from_terms(cls, numerator: Number, denominator: Number) -> "Fraction":
        """Signed numerator over a positive denominator."""
        base = numerator.base
        if numerator.is_zero():
            return cls.zero(base)
        sign = numerator.sign.xor(denominator.sign)
        return cls(sign, Number.zero(base), numerator.absolute_value(), denominator.absolute_value())

    @staticmethod
    def zero(base: int = DEFAULT_NUMBER_BASE) -> "Fraction":
        return Fraction(Sign.POSITIVE, Number.zero(base), Number.zero(base), Number.one(base))

    @staticmethod
    def one(base: int = DEFAULT_NUMBER_BASE) -> "Fraction":
        return Fraction(Sign.POSITIVE, Number.zero(base), Number.one(base), Number.one(base))

    @staticmethod
    def infinity(base: int = DEFAULT_NUMBER_BASE, sign: Sign = Sign.POSITIVE) -> "Fraction":
        return Fraction(sign, Number.zero(base), Number.one(base), Number.zero(base))

    @property
    def base(self) -> int:
        return self.numerator.base

    # ----------------------------
    # Predicates
    # ----------------------------

    def is_infinity(self) -> bool:
        return self.denominator.is_zero()

    def is_zero(self) -> bool:
        return not self.is_infinity() and self.integer_part.is_zero() and self.numerator.is_zero()

    def is_positive(self) -> bool:
        return self.sign.is_positive()

    def is_negative(self) -> bool:
        return self.sign.is_negative()

    # ----------------------------
    # Normal forms
    # ----------------------------

    def normalized_fraction(self) -> "Fraction":
        """numerator' = integer_part * denominator + numerator, integer part zero."""
        if self.is_infinity() or self.integer_part.is_zero():
            return self
        numerator = self.integer_part.multiply(self.denominator).add(self.numerator)
        return Fraction(self.sign, Number.zero(self.base), numerator, self.denominator)

    def normalized_mixed_fraction(self) -> "Fraction":
        """Integer part extracted so that numerator < denominator."""
        if self.is_infinity():
            return self
        f = self.normalized_fraction()
        division = f.numerator.divide_with_remainder(f.denominator)
        return Fraction(self.sign, division.quotient, division.remainder, f.denominator)

    def _terms(self) -> Tuple[Number, Number]:
        """(signed numerator, denominator) of the normalized form."""
        f = self.normalized_fraction()
        numerator = f.numerator.negate() if self.sign.is_negative() else f.numerator
        return numerator, f.denominator

    def _coerce(self, other: Operand, operation: str) -> "Fraction":
        if other is None:
            raise InvalidArgumentError(f"{operation}: no operand specified")
        if isinstance(other, Number):
            other = Fraction.from_number(other)
        elif not isinstance(other, Fraction):
            raise InvalidArgumentError(f"{operation}: expected a Fraction or Number, got {type(other).__name__}")
        if other.base != self.base:
            raise BaseMismatchError(self.base, other.base)
        return other

    # ----------------------------
    # Sign handling
    # ----------------------------

    def negate(self) -> "Fraction":
        return Fraction(self.sign.negate(), self.integer_part, self.numerator, self.denominator)

    def absolute_value(self) -> "Fraction":
        return Fraction(Sign.POSITIVE, self.integer_part, self.numerator, self.denominator)

    # ----------------------------
    # Arithmetic
    # ----------------------------

    def add(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "add")
        if self.is_infinity() or other.is_infinity():
            if self.is_infinity() and other.is_infinity() and self.sign is not other.sign:
                raise UndefinedOperationError("add", self, other)
            return self if self.is_infinity() else other
        a, b = self._terms()
        c, d = other._terms()
        return Fraction._from_terms(a.multiply(d).add(c.multiply(b)), b.multiply(d))

    def subtract(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "subtract")
        if self.is_infinity() and other.is_infinity() and self.sign is other.sign:
            raise UndefinedOperationError("subtract", self, other)
        return self.add(other.negate())

    def multiply(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "multiply")
        sign = self.sign.xor(other.sign)
        if self.is_infinity() or other.is_infinity():
            if self.is_zero() or other.is_zero():
                raise UndefinedOperationError("multiply", self, other)
            return Fraction.infinity(self.base, sign)
        if self.is_zero() or other.is_zero():
            return Fraction.zero(self.base)
        if self.is_one_magnitude():
            return Fraction(sign, other.integer_part, other.numerator, other.denominator)
        if other.is_one_magnitude():
            return Fraction(sign, self.integer_part, self.numerator, self.denominator)
        f, g = self.normalized_fraction(), other.normalized_fraction()
        return Fraction(sign, Number.zero(self.base), f.numerator.multiply(g.numerator), f.denominator.multiply(g.denominator))

    def divide(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "divide")
        sign = self.sign.xor(other.sign)
        if self.is_infinity() and other.is_infinity():
            raise UndefinedOperationError("divide", self, other)
        if other.is_zero():
            if self.is_zero():
                raise UndefinedOperationError("divide", self, other)
            return Fraction.infinity(self.base, sign)
        if self.is_infinity():
            return Fraction.infinity(self.base, sign)
        if other.is_infinity() or self.is_zero():
            return Fraction.zero(self.base)
        return self.multiply(other.reciprocal())

    def reciprocal(self) -> "Fraction":
        if self.is_infinity():
            return Fraction.zero(self.base)
        if self.is_zero():
            return Fraction.infinity(self.base, self.sign)
        f = self.normalized_fraction()
        return Fraction(self.sign, Number.zero(self.base), f.denominator, f.numerator)

    def exponentiate(self, exponent: Union[int, Number]) -> "Fraction":
        """Integer exponents only; x**0 == 1 for every x, negative exponents invert first."""
        count = self.numerator._integer_count(exponent, "exponentiate")
        if count == 0:
            return Fraction.one(self.base)
        if count < 0:
            return self.reciprocal().exponentiate(-count)
        sign = self.sign if count % 2 else Sign.POSITIVE
        if self.is_infinity():
            return Fraction.infinity(self.base, sign)
        f = self.normalized_fraction()
        return Fraction(sign, Number.zero(self.base), f.numerator.exponentiate(count), f.denominator.exponentiate(count))

    def is_one_magnitude(self) -> bool:
        f = self.normalized_fraction()
        return not self.is_infinity() and f.numerator.equals(f.denominator)

    def inc(self) -> "Fraction":
        return self.add(Fraction.one(self.base))

    def dec(self) -> "Fraction":
        return self.subtract(Fraction.one(self.base))

    def doubling(self) -> "Fraction":
        return self.add(self)

    def halving(self) -> "Fraction":
        if self.is_infinity() or self.is_zero():
            return self
        f = self.normalized_fraction()
        return Fraction(self.sign, Number.zero(self.base), f.numerator, f.denominator.doubling())

    def square(self) -> "Fraction":
        return self.multiply(self)

    # ----------------------------
    # Reduction
    # ----------------------------

    def reduce(self, details: Optional[ProcessingDetails] = None) -> "Fraction":
        """Normalized fraction with all common factors cancelled (see radixnum.reduction)."""
        if self.is_infinity():
            return Fraction.infinity(self.base, self.sign)
        if self.is_zero():
            return Fraction.zero(self.base)
        f = self.normalized_fraction()
        numerator, denominator = reduce_terms(f.numerator, f.denominator, details or DEFAULT_PROCESSING_DETAILS)
        _dbg(f"[fraction] reduce {self} -> {numerator}/{denominator}")
        return Fraction(self.sign, Number.zero(self.base), numerator, denominator)

    def common_divisor_set(self, details: Optional[ProcessingDetails] = None) -> Tuple[Number, ...]:
        details = details or DEFAULT_PROCESSING_DETAILS
        f = self.normalized_fraction()
        return common_divisor_set(f.numerator, f.denominator, details.iterations)

    def common_prime_factors(self, details: Optional[ProcessingDetails] = None) -> Tuple[Number, ...]:
        details = details or DEFAULT_PROCESSING_DETAILS
        f = self.normalized_fraction()
        return common_prime_factors(f.numerator, f.denominator, details.iterations)

    # ----------------------------
    # Evaluation and rebasing
    # ----------------------------

    def evaluate(self, precision: Optional[int] = None, details: Optional[ProcessingDetails] = None) -> Number:
        """Long division to `precision` fractional digits, rounded half up."""
        if precision is None:
            precision = details.precision if details is not None and details.precision is not None else DEFAULT_MAXIMUM_FRACTION_LENGTH
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidArgumentError(f"precision must be an int >= 0, got {precision!r}")
        if self.is_infinity():
            return Number.infinity(self.base, self.sign)
        f = self.normalized_fraction()
        chain, scale = long_divide(list(f.numerator.int_digits), list(f.denominator.int_digits), self.base, precision)
        return Number._from_chain(self.base, self.sign, chain, scale)

    def rebase(self, new_base: int) -> "Fraction":
        """Component-wise; exact because all components are integers."""
        return Fraction(
            self.sign,
            self.integer_part.rebase(new_base),
            self.numerator.rebase(new_base),
            self.denominator.rebase(new_base),
        )

    # ----------------------------
    # Comparison
    # ----------------------------

    def _rank(self) -> int:
        if self.is_infinity():
            return 2 if self.sign.is_positive() else -2
        if self.is_zero():
            return 0
        return 1 if self.sign.is_positive() else -1

    def _cmp_core(self, other: "Fraction") -> int:
        r1, r2 = self._rank(), other._rank()
        if r1 != r2:
            return -1 if r1 < r2 else 1
        if r1 in (-2, 0, 2):
            return 0
        a, b = self._terms()
        c, d = other._terms()
        return a.multiply(d).compare_to(c.multiply(b))

    def compare_to(self, other: Operand) -> int:
        return self._cmp_core(self._coerce(other, "compare_to"))

    def equals(self, other) -> bool:
        """Value equality against a Fraction or Number; False for anything else or another base."""
        if isinstance(other, Number):
            other = Fraction.from_number(other)
        if not isinstance(other, Fraction) or other.base != self.base:
            return False
        return self._cmp_core(other) == 0

    def is_greater(self, other: Operand) -> bool:
        return self.compare_to(other) > 0

    def is_greater_or_equal(self, other: Operand) -> bool:
        return self.compare_to(other) >= 0

    def is_lesser(self, other: Operand) -> bool:
        return self.compare_to(other) < 0

    def is_lesser_or_equal(self, other: Operand) -> bool:
        return self.compare_to(other) <= 0

    def is_within_interval(self, lower: Operand, upper: Operand) -> bool:
        return self.is_greater_or_equal(lower) and self.is_lesser_or_equal(upper)

    def max(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "max")
        return other if self._cmp_core(other) < 0 else self

    def min(self, other: Operand) -> "Fraction":
        other = self._coerce(other, "min")
        return other if self._cmp_core(other) > 0 else self

    # ----------------------------
    # Protocol
    # ----------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.evaluate())

    def __lt__(self, other: Operand) -> bool:
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Operand) -> bool:
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Operand) -> bool:
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other: Operand) -> "Fraction":
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "Fraction":
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Number) -> "Fraction":
        if not isinstance(other, Number):
            return NotImplemented
        return Fraction.from_number(other).subtract(self)

    def __mul__(self, other: Operand) -> "Fraction":
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> "Fraction":
        if not isinstance(other, (Fraction, Number)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Number) -> "Fraction":
        if not isinstance(other, Number):
            return NotImplemented
        return Fraction.from_number(other).divide(self)

    def __pow__(self, exponent: Union[int, Number]) -> "Fraction":
        return self.exponentiate(exponent)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self.absolute_value()

    def __str__(self) -> str:
        prefix = "-" if self.sign.is_negative() else ""
        if self.is_infinity():
            return prefix + "Infinity"
        if self.integer_part.is_zero():
            return f"{prefix}{self.numerator}/{self.denominator}"
        return f"{prefix}{self.integer_part} {self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({str(self)!r}, base={self.base})"


__all__ = ["Fraction", "DEBUG_FRACTIONS"]
