import pytest

from radixnum import Number, Sign
from radixnum.core.exc import InvalidArgumentError, NumberParsingError
from radixnum.core.digits import exponent_markers
from radixnum.core.notations import parse_number


# -----------------------------
# Parsing
# -----------------------------


@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("0", 10, "0"),
        ("-0", 10, "-0"),
        ("+12", 10, "12"),
        ("0012.3400", 10, "12.34"),
        ("12,5", 10, "12.5"),
        ("-FF.8", 16, "-FF.8"),
        ("101.01", 2, "101.01"),
        ("{|", 64, "{|"),
        ("  7  ", 10, "7"),
    ],
)
def test_parse_standard_notation(text, base, expect):
    n = Number.parse(text, base)
    print(f"[parse base={base}] {text!r} -> {n}")
    assert n.to_standard_notation() == expect


@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("1.2345E1", 10, "12.345"),
        ("1.5e-3", 10, "0.0015"),
        ("-7E+2", 10, "-700"),
        ("1.1E10", 2, "110"),
        ("1e-10", 2, "0.01"),
    ],
)
def test_parse_scientific_notation(text, base, expect):
    n = Number.parse(text, base)
    print(f"[parse-sci base={base}] {text!r} -> {n}")
    assert n.to_standard_notation() == expect


def test_e_is_a_digit_in_base_16():
    print("[parse base=16] '1E5' is a plain integer (0x1E5)")
    assert Number.parse("1E5", 16).to_standard_notation() == "1E5"
    assert Number.parse("1E5", 16).equals(Number.from_int(0x1E5, 16))


@pytest.mark.parametrize("text,negative", [("Infinity", False), ("+Infinity", False), ("-Infinity", True)])
def test_parse_infinity(text, negative):
    n = Number.parse(text)
    print(f"[parse-inf] {text} -> infinity negative={negative}")
    assert n.is_infinity()
    assert n.is_negative() is negative
    assert n.digits() == 0


@pytest.mark.parametrize(
    "text,base",
    [("", 10), ("1.2.3", 10), ("12A", 10), ("2", 2), ("1.", 10), (".5", 10), ("--1", 10), ("inf", 10), ("1E", 10)],
)
def test_parse_rejects_malformed_text(text, base):
    print(f"[parse-bad base={base}] {text!r} -> expect NumberParsingError")
    with pytest.raises(NumberParsingError) as info:
        Number.parse(text, base)
    assert info.value.base == base
    assert info.value.text == text
    assert len(info.value.causes) == 2


def test_parse_rejects_none_and_bad_base():
    with pytest.raises(InvalidArgumentError):
        Number.parse(None)
    with pytest.raises(InvalidArgumentError):
        Number.parse("1", 65)


def test_parsed_number_structure():
    p = parse_number("-12.5", 10)
    print("[parsed] -12.5 ->", p)
    assert p.sign is Sign.NEGATIVE
    assert [d.ordinal for d in p.int_digits] == [2, 1]
    assert [d.ordinal for d in p.frac_digits] == [5]
    assert p.exponent == 0


def test_from_int_and_from_float():
    print("[from-native] ints and floats -> exact digit chains")
    assert str(Number.from_int(-255, 16)) == "-FF"
    assert str(Number.from_int(0)) == "0"
    assert str(Number.from_float(0.1)) == "0.1"
    assert str(Number.from_float(-2.5)) == "-2.5"
    assert str(Number.from_float(1e-5)) == "0.00001"
    assert str(Number.from_float(2.5, 2)) == "10.1"
    assert Number.from_float(float("-inf")).is_infinity()
    with pytest.raises(InvalidArgumentError):
        Number.from_float(float("nan"))
    with pytest.raises(InvalidArgumentError):
        Number.from_int(1.5)


# -----------------------------
# Formatting
# -----------------------------


@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("12.345", 10, "1.2345E1"),
        ("0.0015", 10, "1.5E-3"),
        ("-700", 10, "-7E2"),
        ("0", 10, "0E0"),
        ("7", 10, "7E0"),
        ("110", 2, "1.1E10"),
        ("100000000000", 10, "1E11"),
    ],
)
def test_scientific_formatting(text, base, expect):
    n = Number.parse(text, base)
    print(f"[fmt-sci base={base}] {text} -> {n.to_scientific_notation()}")
    assert n.to_scientific_notation() == expect


def test_decimal_comma_and_infinity_formatting():
    print("[fmt] decimal comma and infinities")
    assert Number.parse("1.5").to_standard_notation(",") == "1,5"
    assert Number.parse("1.5").to_scientific_notation(",") == "1,5E0"
    assert Number.infinity(10).to_standard_notation() == "Infinity"
    assert Number.infinity(2, Sign.NEGATIVE).to_scientific_notation() == "-Infinity"
    with pytest.raises(InvalidArgumentError):
        Number.parse("1.5").to_standard_notation(";")


def test_repr_names_base():
    assert repr(Number.parse("FF", 16)) == "Number('FF', base=16)"


@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("12", 16, "1.2^1"),
        ("0.08", 16, "8^-2"),
        ("-ABC", 16, "-A.BC^2"),
        ("{|", 64, "{.|^1"),
        ("E", 15, "E^0"),
    ],
)
def test_scientific_round_trip_where_e_is_a_digit(text, base, expect):
    n = Number.parse(text, base)
    s = n.to_scientific_notation()
    print(f"[fmt-sci base={base}] {text} -> {s} -> {Number.parse(s, base)}")
    assert s == expect
    assert Number.parse(s, base).equals(n)


def test_exponent_markers_follow_the_alphabet():
    print("[markers] base 10 E/e/^, base 16 ^/e, base 64 ^ only")
    assert exponent_markers(10) == ("E", "e", "^")
    assert exponent_markers(16) == ("^", "e")
    assert exponent_markers(64) == ("^",)
    assert Number.parse("1.2e1", 16).equals(Number.parse("12", 16))
    assert Number.parse("1.2E1", 16).to_standard_notation() == "1.2E1"
