"""
Parsing of number text in standard and scientific notation.

- Standard: [sign]digits[(.|,)digits]
- Scientific: [sign]digit[(.|,)digits]<marker>[sign]digits, exponent written in the same base.
  The marker is "E" or "e" while those are not digits of the base, "^" otherwise,
  so bases 15 and up write and read "1.2^1".
- "Infinity", "+Infinity" and "-Infinity" denote the signed infinity.

Standard notation is tried first: in bases above 14 'E' is an ordinary digit, so
"1E5" is a plain base-16 integer. Patterns are built per alphabet (escaped), so a
custom alphabet is honoured as soon as it is registered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import INFINITY_REPRESENTATION, DECIMAL_POINT, DECIMAL_COMMA, MINUS_SIGN
from .digits import Digit, allowed_symbols, char_to_digit, check_base, exponent_markers
from .exc import InvalidArgumentError, NumberParsingError
from .signs import Sign
from .chain import chain_to_int


@dataclass(frozen=True)
class ParsedNumber:
    """Digits read from text. int_digits least significant first, frac_digits most significant first."""
    sign: Sign
    int_digits: Tuple[Digit, ...]
    frac_digits: Tuple[Digit, ...]
    exponent: int = 0
    infinity: bool = False


def _symbol_class(base: int) -> str:
    return "[" + "".join(re.escape(s) for s in allowed_symbols(base)) + "]"


def _separators() -> str:
    return "[" + re.escape(DECIMAL_POINT) + re.escape(DECIMAL_COMMA) + "]"


def standard_pattern(base: int) -> "re.Pattern":
    d = _symbol_class(base)
    return re.compile(rf"^([+-])?({d}+)(?:{_separators()}({d}+))?$")


def scientific_pattern(base: int) -> "re.Pattern":
    d = _symbol_class(base)
    markers = exponent_markers(base)
    if not markers:
        # every marker is a digit of this alphabet
        return re.compile(r"(?!)")
    e = "[" + "".join(re.escape(m) for m in markers) + "]"
    return re.compile(rf"^([+-])?({d})(?:{_separators()}({d}+))?{e}([+-])?({d}+)$")


def _digits(base: int, text: Optional[str]) -> List[Digit]:
    return [char_to_digit(base, s) for s in (text or "")]


def parse_standard(text: str, base: int) -> Optional[ParsedNumber]:
    m = standard_pattern(base).match(text)
    if m is None:
        return None
    sign = Sign.of(m.group(1) == MINUS_SIGN)
    int_digits = tuple(reversed(_digits(base, m.group(2))))
    frac_digits = tuple(_digits(base, m.group(3)))
    return ParsedNumber(sign, int_digits, frac_digits)


def parse_scientific(text: str, base: int) -> Optional[ParsedNumber]:
    m = scientific_pattern(base).match(text)
    if m is None:
        return None
    sign = Sign.of(m.group(1) == MINUS_SIGN)
    int_digits = tuple(_digits(base, m.group(2)))
    frac_digits = tuple(_digits(base, m.group(3)))
    exponent = chain_to_int(list(reversed(_digits(base, m.group(5)))), base)
    if m.group(4) == MINUS_SIGN:
        exponent = -exponent
    return ParsedNumber(sign, int_digits, frac_digits, exponent)


def parse_infinity(text: str) -> Optional[ParsedNumber]:
    body = text[1:] if text[:1] in "+-" else text
    if body != INFINITY_REPRESENTATION:
        return None
    return ParsedNumber(Sign.of(text.startswith(MINUS_SIGN)), (), (), infinity=True)


def parse_number(text: str, base: int) -> ParsedNumber:
    """Read `text` in `base`; raises NumberParsingError listing why each notation failed."""
    check_base(base)
    if text is None:
        raise InvalidArgumentError("no text specified")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"expected a string, got {type(text).__name__}")
    stripped = text.strip()
    parsed = parse_infinity(stripped)
    if parsed is not None:
        return parsed
    causes = []
    for name, parser in (("standard", parse_standard), ("scientific", parse_scientific)):
        parsed = parser(stripped, base)
        if parsed is not None:
            return parsed
        causes.append(f"{name} notation: {stripped!r} does not match base {base} digits {allowed_symbols(base)!r}")
    raise NumberParsingError(base, text, causes=causes)


__all__ = [
    "ParsedNumber",
    "standard_pattern",
    "scientific_pattern",
    "parse_standard",
    "parse_scientific",
    "parse_infinity",
    "parse_number",
]
