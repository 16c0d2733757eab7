"""
Divisors, prime factors and fraction reduction on integer Numbers.

All searches are trial divisions carried out with Number arithmetic in the operands'
own base. Two reduction strategies are offered and always agree on the result:

- COMMON_DIVISORS: enumerate the common divisor set (trial division up to the square
  root of the smaller operand) and divide out its greatest element.
- COMMON_PRIME_FACTORS (default): strip common trailing zero digits (a factor of the
  base) and common factors of two first, then divide out the common prime factors.

`ProcessingDetails.iterations` bounds the trial divisions of the divisor and the
prime-factor search (DEFAULT_PRIME_FACTOR_ITERATIONS unless the caller says
otherwise). When the budget runs out the factors found so far are still cancelled
(partial reduction), so large coprime terms come back unchanged instead of looping
for a time proportional to their square root.

`is_prime`, `next_prime` and `nth_prime` always search to the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .core.constants import DEFAULT_PRIME_FACTOR_ITERATIONS
from .core.exc import BaseMismatchError, InvalidArgumentError, UndefinedOperationError
from .number import Number

# Debug printing control
DEBUG_REDUCTION = False

def _dbg(msg: str) -> None:
    if DEBUG_REDUCTION:
        print(msg)


# ----------------------------
# Configuration
# ----------------------------

class ReductionStrategy(Enum):
    COMMON_DIVISORS = "common_divisors"
    COMMON_PRIME_FACTORS = "common_prime_factors"


@dataclass(frozen=True)
class ProcessingDetails:
    """Per-call algorithm selection.

    strategy   : reduction algorithm
    precision  : fractional digits for evaluation (None = library default)
    iterations : trial-division budget of the divisor and prime-factor searches (None = unbounded)
    """
    strategy: ReductionStrategy = ReductionStrategy.COMMON_PRIME_FACTORS
    precision: Optional[int] = None
    iterations: Optional[int] = DEFAULT_PRIME_FACTOR_ITERATIONS

    def __post_init__(self):
        if not isinstance(self.strategy, ReductionStrategy):
            raise InvalidArgumentError(f"unknown reduction strategy {self.strategy!r}")
        if self.precision is not None and self.precision < 0:
            raise InvalidArgumentError(f"precision must be >= 0, got {self.precision}")
        if self.iterations is not None and self.iterations < 1:
            raise InvalidArgumentError(f"iterations must be >= 1, got {self.iterations}")


DEFAULT_PROCESSING_DETAILS = ProcessingDetails()


# ----------------------------
# Helpers
# ----------------------------

def _check_signed_integer(n: Number, name: str) -> Number:
    if n is None:
        raise InvalidArgumentError(f"no {name} specified")
    if not isinstance(n, Number):
        raise InvalidArgumentError(f"{name} must be a Number, got {type(n).__name__}")
    if not n.is_integer():
        raise InvalidArgumentError(f"{name} must be a finite integer, got {n}")
    return n


def _check_integer(n: Number, name: str) -> Number:
    return _check_signed_integer(n, name).absolute_value()


def _check_pair(a: Number, b: Number) -> Tuple[Number, Number]:
    a = _check_integer(a, "first operand")
    b = _check_integer(b, "second operand")
    if a.base != b.base:
        raise BaseMismatchError(a.base, b.base)
    if a.is_zero() and b.is_zero():
        raise UndefinedOperationError("common factors", a, b)
    return a, b


def _divides(d: Number, n: Number) -> bool:
    return n.modulo(d).is_zero()


def _exact_quotient(n: Number, d: Number) -> Number:
    return n.divide_with_remainder(d).quotient


# ----------------------------
# Single operands
# ----------------------------

def divisors(n: Number, iterations: Optional[int] = None) -> Tuple[Number, ...]:
    """All positive divisors of |n| in ascending order.

    With an iteration budget only the candidates tried so far (and their cofactors)
    are reported; every returned value still divides n.
    """
    n = _check_integer(n, "operand")
    if n.is_zero():
        raise UndefinedOperationError("divisors", n)
    low: List[Number] = []
    high: List[Number] = []
    d = Number.one(n.base)
    steps = 0
    while d.square().is_lesser_or_equal(n):
        if iterations is not None and steps >= iterations:
            _dbg(f"[reduction] divisor budget {iterations} exhausted at candidate {d}")
            break
        steps += 1
        if _divides(d, n):
            low.append(d)
            q = _exact_quotient(n, d)
            if not q.equals(d):
                high.append(q)
        d = d.inc()
    return tuple(low + high[::-1])


def prime_factors(n: Number, iterations: Optional[int] = None) -> Tuple[Number, ...]:
    """Prime factors of |n| in ascending order with multiplicity.

    With an iteration budget the result may stop early; the factors returned are
    still primes dividing n, the unfactored rest is left out.
    """
    n = _check_integer(n, "operand")
    if n.is_zero():
        raise UndefinedOperationError("prime_factors", n)
    factors: List[Number] = []
    rest = n
    d = Number.from_int(2, n.base)
    steps = 0
    while d.square().is_lesser_or_equal(rest):
        if iterations is not None and steps >= iterations:
            _dbg(f"[reduction] prime factor budget {iterations} exhausted at divisor {d}")
            return tuple(factors)
        steps += 1
        division = rest.divide_with_remainder(d)
        if division.remainder.is_zero():
            factors.append(d)
            rest = division.quotient
        else:
            d = d.inc()
    if not rest.is_one():
        factors.append(rest)
    return tuple(factors)


def is_prime(n: Number) -> bool:
    n = _check_integer(n, "operand")
    if n.is_zero() or n.is_one():
        return False
    factors = prime_factors(n)
    return len(factors) == 1


def next_prime(n: Number) -> Number:
    """Smallest prime strictly greater than n (2 for anything below 2)."""
    n = _check_signed_integer(n, "operand")
    two = Number.from_int(2, n.base)
    candidate = n.inc()
    if candidate.is_lesser(two):
        return two
    while not is_prime(candidate):
        candidate = candidate.inc()
    return candidate


def nth_prime(ordinal: Number) -> Number:
    """Prime with the given zero-based ordinal: 0 -> 2, 1 -> 3, 2 -> 5, ..."""
    ordinal = _check_signed_integer(ordinal, "ordinal")
    if ordinal.is_negative() and not ordinal.is_zero():
        raise InvalidArgumentError(f"ordinal must be >= 0, got {ordinal}")
    prime = Number.from_int(2, ordinal.base)
    counter = Number.zero(ordinal.base)
    while counter.is_lesser(ordinal):
        prime = next_prime(prime)
        counter = counter.inc()
    return prime


# ----------------------------
# Pairs
# ----------------------------

def common_divisor_set(a: Number, b: Number, iterations: Optional[int] = None) -> Tuple[Number, ...]:
    """Divisors shared by |a| and |b|, ascending (every number divides zero)."""
    a, b = _check_pair(a, b)
    if a.is_zero() or b.is_zero():
        return divisors(b if a.is_zero() else a, iterations)
    small, large = (a, b) if a.is_lesser_or_equal(b) else (b, a)
    return tuple(d for d in divisors(small, iterations) if _divides(d, large))


def common_prime_factors(a: Number, b: Number, iterations: Optional[int] = None) -> Tuple[Number, ...]:
    """Prime factors shared by |a| and |b|, ascending with multiplicity."""
    a, b = _check_pair(a, b)
    if a.is_zero() or b.is_zero():
        return prime_factors(b if a.is_zero() else a, iterations)
    small, large = (a, b) if a.is_lesser_or_equal(b) else (b, a)
    common: List[Number] = []
    for p in prime_factors(small, iterations):
        division = large.divide_with_remainder(p)
        if division.remainder.is_zero():
            common.append(p)
            large = division.quotient
    return tuple(common)


def _strip_trailing_zeros(a: Number, b: Number) -> Tuple[Number, Number]:
    while not a.is_zero() and not b.is_zero() and a.digit_at(0).is_zero() and b.digit_at(0).is_zero():
        a, b = a.shift_left(1), b.shift_left(1)
    return a, b


def _strip_twos(a: Number, b: Number) -> Tuple[Number, Number]:
    while not a.is_zero() and not b.is_zero() and a.is_even() and b.is_even():
        a, b = a.halving(), b.halving()
    return a, b


def reduce_terms(numerator: Number, denominator: Number, details: Optional[ProcessingDetails] = None) -> Tuple[Number, Number]:
    """Cancel common factors of two non-negative integers; returns (numerator, denominator)."""
    details = details or DEFAULT_PROCESSING_DETAILS
    n, d = _check_pair(numerator, denominator)
    if n.is_zero():
        return n, Number.one(n.base)
    if d.is_zero():
        return Number.one(n.base), d
    if details.strategy is ReductionStrategy.COMMON_DIVISORS:
        greatest = common_divisor_set(n, d, details.iterations)[-1]
        _dbg(f"[reduction] {n}/{d} greatest common divisor {greatest}")
        return _exact_quotient(n, greatest), _exact_quotient(d, greatest)
    n, d = _strip_trailing_zeros(n, d)
    n, d = _strip_twos(n, d)
    for p in common_prime_factors(n, d, details.iterations):
        n, d = _exact_quotient(n, p), _exact_quotient(d, p)
    _dbg(f"[reduction] reduced to {n}/{d}")
    return n, d


__all__ = [
    "DEBUG_REDUCTION",
    "DEFAULT_PROCESSING_DETAILS",
    "ProcessingDetails",
    "ReductionStrategy",
    "common_divisor_set",
    "common_prime_factors",
    "divisors",
    "is_prime",
    "next_prime",
    "nth_prime",
    "prime_factors",
    "reduce_terms",
]
