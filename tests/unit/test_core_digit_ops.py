import pytest

from radixnum.core.constants import BASE_MIN_LIMIT, BASE_MAX_LIMIT
from radixnum.core.digits import ordinal_to_digit
from radixnum.core.digit_ops import (
    add_digits,
    complement_digit,
    halve_digit,
    middle_digits,
    multiply_digits,
    round_digit_half_up,
    round_digit_to_even,
    round_down_digits,
    round_up_digits,
)
from radixnum.core.exc import BaseMismatchError, InvalidArgumentError

ALL_BASES = range(BASE_MIN_LIMIT, BASE_MAX_LIMIT + 1)


def _d(base: int, ordinal: int):
    return ordinal_to_digit(base, ordinal)


# -----------------------------
# Addition
# -----------------------------


@pytest.mark.parametrize(
    "base,a,b,carry,expect_sum,expect_carry",
    [
        (10, 4, 5, None, 9, 0),
        (10, 9, 9, 1, 9, 1),
        (2, 1, 1, None, 0, 1),
        (2, 1, 1, 1, 1, 1),
        (16, 15, 1, None, 0, 1),
        (64, 63, 63, 1, 63, 1),
    ],
)
def test_add_digits(base, a, b, carry, expect_sum, expect_carry):
    c = None if carry is None else _d(base, carry)
    r = add_digits(_d(base, a), _d(base, b), c)
    print(f"[add base={base}] {a}+{b}+{carry} -> sum={r.result.ordinal} carry={r.carry.ordinal}")
    assert r.result.ordinal == expect_sum
    assert r.carry.ordinal == expect_carry


def test_add_digits_base_mismatch():
    print("[add-mismatch] base 10 + base 16 -> expect BaseMismatchError")
    with pytest.raises(BaseMismatchError):
        add_digits(_d(10, 1), _d(16, 1))


def test_add_digits_requires_digits():
    with pytest.raises(InvalidArgumentError):
        add_digits(None, _d(10, 1))


# -----------------------------
# Multiplication (exhaustive)
# -----------------------------


@pytest.mark.parametrize("base", ALL_BASES)
def test_multiply_digits_exhaustive(base):
    print(f"[multiply base={base}] every digit pair -> product mod base, carry div base")
    for a in range(base):
        for b in range(base):
            r = multiply_digits(_d(base, a), _d(base, b))
            assert r.result.ordinal == (a * b) % base
            assert r.carry.ordinal == (a * b) // base
            assert r.carry.ordinal <= base - 2 or base == 2


# -----------------------------
# Halving
# -----------------------------


@pytest.mark.parametrize(
    "base,d,carry,expect_half,expect_rem",
    [
        (10, 7, None, 3, 1),
        (10, 7, 1, 8, 1),
        (10, 0, 1, 5, 0),
        (2, 1, 1, 1, 1),
        (3, 2, 1, 2, 1),
        (3, 0, 1, 1, 1),
    ],
)
def test_halve_digit(base, d, carry, expect_half, expect_rem):
    c = None if carry is None else _d(base, carry)
    r = halve_digit(_d(base, d), c)
    print(f"[halve base={base}] ({carry}*{base}+{d})/2 -> {r.result.ordinal} rem {r.remainder.ordinal}")
    assert r.result.ordinal == expect_half
    assert r.remainder.ordinal == expect_rem


def test_halve_digit_rejects_large_carry():
    with pytest.raises(InvalidArgumentError):
        halve_digit(_d(10, 3), _d(10, 2))


# -----------------------------
# Complement
# -----------------------------


@pytest.mark.parametrize("base", ALL_BASES)
def test_complement_is_involution(base):
    print(f"[complement base={base}] complement(complement(d)) == d")
    for o in range(base):
        d = _d(base, o)
        assert complement_digit(d).ordinal == base - 1 - o
        assert complement_digit(complement_digit(d)) == d


# -----------------------------
# Rounding
# -----------------------------


@pytest.mark.parametrize(
    "base,ordinal,expect_carry",
    [
        (2, 0, 0),
        (2, 1, 1),
        (3, 1, 0),
        (3, 2, 1),
        (5, 2, 0),
        (5, 3, 1),
        (10, 4, 0),
        (10, 5, 1),
        (16, 7, 0),
        (16, 8, 1),
    ],
)
def test_round_digit_half_up(base, ordinal, expect_carry):
    r = round_digit_half_up(_d(base, ordinal))
    print(f"[round-half-up base={base}] digit {ordinal} -> result {r.result.ordinal} carry {r.carry.ordinal}")
    assert r.result.is_zero()
    assert r.carry.ordinal == expect_carry


@pytest.mark.parametrize(
    "base,dropped,kept,expect_carry",
    [
        (10, 5, 2, 0),
        (10, 5, 3, 1),
        (10, 6, 2, 1),
        (10, 4, 3, 0),
        (3, 1, 1, 0),
        (3, 2, 0, 1),
    ],
)
def test_round_digit_to_even(base, dropped, kept, expect_carry):
    r = round_digit_to_even(_d(base, dropped), _d(base, kept))
    print(f"[round-even base={base}] dropped {dropped} kept {kept} -> carry {r.carry.ordinal}")
    assert r.result.is_zero()
    assert r.carry.ordinal == expect_carry


def test_rounding_classes():
    print("[round-classes] base 10: 0-4 down, 5 middle, 6-9 up; base 5 has no middle")
    assert [d.ordinal for d in round_down_digits(10)] == [0, 1, 2, 3, 4]
    assert [d.ordinal for d in middle_digits(10)] == [5]
    assert [d.ordinal for d in round_up_digits(10)] == [6, 7, 8, 9]
    assert middle_digits(5) == ()
    assert [d.ordinal for d in round_up_digits(5)] == [3, 4]
