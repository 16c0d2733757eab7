import pytest

from radixnum import Fraction, Number, ProcessingDetails, ReductionStrategy
from radixnum.core.constants import DEFAULT_PRIME_FACTOR_ITERATIONS
from radixnum.core.exc import BaseMismatchError, InvalidArgumentError, UndefinedOperationError
from radixnum.reduction import (
    common_divisor_set,
    common_prime_factors,
    divisors,
    is_prime,
    next_prime,
    nth_prime,
    prime_factors,
    reduce_terms,
)

STRATEGIES = [ReductionStrategy.COMMON_PRIME_FACTORS, ReductionStrategy.COMMON_DIVISORS]


def _n(text: str, base: int = 10) -> Number:
    return Number.parse(text, base)


def _texts(numbers) -> list:
    return [n.to_standard_notation() for n in numbers]


# -----------------------------
# Single operands
# -----------------------------


def test_divisors_ascending():
    print("[divisors] 12 -> 1 2 3 4 6 12; 49 -> 1 7 49")
    assert _texts(divisors(_n("12"))) == ["1", "2", "3", "4", "6", "12"]
    assert _texts(divisors(_n("49"))) == ["1", "7", "49"]
    assert _texts(divisors(_n("-6"))) == ["1", "2", "3", "6"]
    assert _texts(divisors(_n("1"))) == ["1"]


@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("360", 10, ["2", "2", "2", "3", "3", "5"]),
        ("97", 10, ["97"]),
        ("1", 10, []),
        ("1100", 2, ["10", "10", "11"]),
        ("FF", 16, ["3", "5", "11"]),
    ],
)
def test_prime_factors(text, base, expect):
    r = prime_factors(_n(text, base))
    print(f"[primes base={base}] {text} -> {_texts(r)}")
    assert _texts(r) == expect


@pytest.mark.parametrize("text,expect", [("2", True), ("17", True), ("1", False), ("0", False), ("15", False), ("91", False)])
def test_is_prime(text, expect):
    print(f"[is-prime] {text} -> {expect}")
    assert is_prime(_n(text)) is expect


@pytest.mark.parametrize(
    "text,base,expect",
    [("13", 10, "17"), ("1", 10, "2"), ("-5", 10, "2"), ("2", 10, "3"), ("23", 10, "29"), ("111", 2, "1011"), ("F", 16, "11")],
)
def test_next_prime(text, base, expect):
    r = next_prime(_n(text, base))
    print(f"[next-prime base={base}] {text} -> {r}")
    assert r.to_standard_notation() == expect


@pytest.mark.parametrize("ordinal,expect", [(0, "2"), (1, "3"), (2, "5"), (5, "13"), (10, "31")])
def test_nth_prime_is_zero_based(ordinal, expect):
    r = nth_prime(Number.from_int(ordinal))
    print(f"[nth-prime] #{ordinal} -> {r}")
    assert r.to_standard_notation() == expect


def test_prime_search_errors():
    print("[next-prime] fraction and negative ordinal -> invalid argument")
    with pytest.raises(InvalidArgumentError):
        next_prime(_n("2.5"))
    with pytest.raises(InvalidArgumentError):
        nth_prime(_n("-1"))
    with pytest.raises(InvalidArgumentError):
        next_prime(Number.infinity(10))
    assert nth_prime(_n("-0")).to_standard_notation() == "2"


def test_single_operand_errors():
    print("[divisors] zero -> undefined, fraction -> invalid argument")
    with pytest.raises(UndefinedOperationError):
        divisors(_n("0"))
    with pytest.raises(UndefinedOperationError):
        prime_factors(_n("0"))
    with pytest.raises(InvalidArgumentError):
        prime_factors(_n("1.5"))
    with pytest.raises(InvalidArgumentError):
        divisors(None)


# -----------------------------
# Pairs
# -----------------------------


def test_common_divisor_set():
    print("[common-divisors] 12,18 -> 1 2 3 6")
    assert _texts(common_divisor_set(_n("12"), _n("18"))) == ["1", "2", "3", "6"]
    assert _texts(common_divisor_set(_n("7"), _n("9"))) == ["1"]
    assert _texts(common_divisor_set(_n("0"), _n("6"))) == ["1", "2", "3", "6"]
    assert _texts(Fraction.of(12, 18).common_divisor_set()) == ["1", "2", "3", "6"]


@pytest.mark.parametrize(
    "a,b,expect",
    [
        ("360", "84", ["2", "2", "3"]),
        ("14", "12", ["2"]),
        ("15", "51", ["3"]),
        ("100", "200", ["2", "2", "5", "5"]),
        ("8", "9", []),
    ],
)
def test_common_prime_factors(a, b, expect):
    r = common_prime_factors(_n(a), _n(b))
    print(f"[common-primes] {a},{b} -> {_texts(r)}")
    assert _texts(r) == expect
    assert _texts(Fraction.of(a, b).common_prime_factors()) == expect


def test_pair_errors():
    with pytest.raises(UndefinedOperationError):
        common_prime_factors(_n("0"), _n("0"))
    with pytest.raises(BaseMismatchError):
        common_divisor_set(_n("4"), _n("4", 16))


# -----------------------------
# Reduction
# -----------------------------


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize(
    "numerator,denominator,base,expect",
    [
        ("14", "12", 10, "7/6"),
        ("15", "51", 10, "5/17"),
        ("100", "200", 10, "1/2"),
        ("-14", "12", 10, "-7/6"),
        ("1010", "10100", 2, "1/10"),
        ("A", "14", 16, "1/2"),
        ("7", "9", 10, "7/9"),
        ("6", "3", 10, "2/1"),
    ],
)
def test_reduce(numerator, denominator, base, expect, strategy):
    f = Fraction.of(numerator, denominator, base)
    r = f.reduce(ProcessingDetails(strategy=strategy))
    print(f"[reduce {strategy.value} base={base}] {f} -> {r}")
    assert str(r) == expect
    assert r.equals(f)


def test_reduce_folds_integer_part_and_is_idempotent():
    f = Fraction.mixed(1, 2, 4)
    r = f.reduce()
    print("[reduce] 1 2/4 ->", r)
    assert str(r) == "3/2"
    assert str(r.reduce()) == "3/2"


def test_reduce_zero_and_infinity():
    print("[reduce] 0/5 -> 0/1, -4/0 -> -Infinity")
    assert str(Fraction.of(0, 5).reduce()) == "0/1"
    r = Fraction.of(-4, 0).reduce()
    assert r.is_infinity() and r.is_negative()


def test_iteration_budget_gives_partial_reduction():
    f = Fraction.of(63, 147)
    partial = f.reduce(ProcessingDetails(iterations=2))
    print("[reduce budget=2] 63/147 ->", partial, "; unbounded ->", f.reduce())
    assert str(partial) == "21/49"
    assert partial.equals(f)
    assert str(f.reduce()) == "3/7"


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_large_coprime_terms_come_back_unchanged(strategy):
    f = Fraction.of("1000000007", "1000000009")
    r = f.reduce(ProcessingDetails(strategy=strategy))
    print(f"[reduce {strategy.value}] {f} -> {r}")
    assert str(r) == "1000000007/1000000009"
    assert r.equals(f)


def test_divisor_budget_reports_only_tried_candidates():
    found = divisors(_n("360"), iterations=3)
    print("[divisors budget=3] 360 ->", _texts(found))
    assert _texts(found) == ["1", "2", "3", "120", "180", "360"]
    assert all(_n("360").modulo(d).is_zero() for d in found)
    assert _texts(divisors(_n("1000000007"), iterations=10)) == ["1", "1000000007"]
    assert _texts(common_divisor_set(_n("360"), _n("240"), iterations=3)) == ["1", "2", "3", "120"]


def test_reduce_terms_directly():
    n, d = reduce_terms(_n("-42"), _n("56"))
    print("[reduce-terms] -42/56 ->", n, d)
    assert (str(n), str(d)) == ("3", "4")
    n, d = reduce_terms(_n("0"), _n("9"))
    assert (str(n), str(d)) == ("0", "1")


@pytest.mark.parametrize(
    "kwargs",
    [{"iterations": 0}, {"precision": -1}, {"strategy": "common_divisors"}],
)
def test_processing_details_validation(kwargs):
    print(f"[details] {kwargs} -> expect InvalidArgumentError")
    with pytest.raises(InvalidArgumentError):
        ProcessingDetails(**kwargs)


def test_processing_details_defaults():
    details = ProcessingDetails()
    assert details.strategy is ReductionStrategy.COMMON_PRIME_FACTORS
    assert details.precision is None
    assert details.iterations == DEFAULT_PRIME_FACTOR_ITERATIONS
    assert ProcessingDetails(iterations=None).iterations is None
