"""
Digits and positional numeral systems.

- Digit: immutable (base, ordinal, symbol) value; equality, hashing and ordering use
  (base, ordinal) only, so a digit keeps its identity when an alphabet is replaced.
- Numeral systems are kept in a process-wide registry keyed by base (2..64). The
  built-in alphabet is 0-9, A-Z, a-z, '{', '|'; a base takes the first `base` symbols.
- Registry reads are plain dictionary lookups on a snapshot. Building a system and
  registering a custom alphabet happen under a module lock and publish a new snapshot.

Digit instances are shared (one per base/ordinal). Callers must rely on value
equality, never on identity.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from .constants import BASE_MIN_LIMIT, BASE_MAX_LIMIT, EXPONENT_ABBREVIATION, EXPONENT_ABBREVIATION_FALLBACK
from .exc import InvalidArgumentError

# Debug printing control
DEBUG_DIGITS = False

def _dbg(msg: str) -> None:
    if DEBUG_DIGITS:
        print(msg)


# ----------------------------
# Symbol sets
# ----------------------------

def default_symbol(ordinal: int) -> str:
    """Symbol of `ordinal` in the built-in alphabet."""
    if ordinal < 10:
        return chr(48 + ordinal)
    if ordinal < 36:
        return chr(55 + ordinal)
    return chr(61 + ordinal)


#: 0-9, A-Z, a-z, '{', '|'
DEFAULT_SYMBOLS: Tuple[str, ...] = tuple(default_symbol(o) for o in range(BASE_MAX_LIMIT))


# ----------------------------
# Digit value object
# ----------------------------

@dataclass(frozen=True, order=True)
class Digit:
    """A single digit of a positional numeral system."""
    base: int
    ordinal: int
    symbol: str = field(compare=False)

    def __post_init__(self):
        check_base(self.base)
        if not (0 <= self.ordinal < self.base):
            raise InvalidArgumentError(
                f"ordinal {self.ordinal} outside [0, {self.base - 1}] for base {self.base}"
            )

    def is_zero(self) -> bool:
        return self.ordinal == 0

    def is_max(self) -> bool:
        return self.ordinal == self.base - 1

    def is_even(self) -> bool:
        return self.ordinal % 2 == 0

    def is_odd(self) -> bool:
        return self.ordinal % 2 == 1

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class PositionalNumeralSystem:
    """Alphabet of one base plus its shared digit instances."""
    base: int
    symbols: Tuple[str, ...]
    digits: Tuple[Digit, ...]
    index: Dict[str, Digit] = field(compare=False, repr=False)

    @classmethod
    def from_symbols(cls, symbols: Sequence[str]) -> "PositionalNumeralSystem":
        symbols = tuple(symbols)
        _check_alphabet(symbols)
        base = len(symbols)
        digits = tuple(Digit(base, o, s) for o, s in enumerate(symbols))
        return cls(base, symbols, digits, {d.symbol: d for d in digits})

    def allowed_symbols(self) -> str:
        return "".join(self.symbols)


# ----------------------------
# Registry
# ----------------------------

_LOCK = threading.Lock()
_SYSTEMS: Dict[int, PositionalNumeralSystem] = {}
_CUSTOM_BASES: frozenset = frozenset()


def check_base(base) -> int:
    """Return `base` if it is a supported radix, else raise InvalidArgumentError."""
    if base is None:
        raise InvalidArgumentError("no number base specified")
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidArgumentError(f"number base must be an int, got {type(base).__name__}")
    if base < BASE_MIN_LIMIT or base > BASE_MAX_LIMIT:
        raise InvalidArgumentError(
            f"number base {base} outside [{BASE_MIN_LIMIT}, {BASE_MAX_LIMIT}]"
        )
    return base


def _check_alphabet(symbols: Tuple[str, ...]) -> None:
    if not symbols:
        raise InvalidArgumentError("empty symbol set")
    for s in symbols:
        if not isinstance(s, str) or len(s) != 1:
            raise InvalidArgumentError(f"symbol {s!r} is not a single character")
    if len(set(symbols)) != len(symbols):
        raise InvalidArgumentError(f"symbol set {''.join(symbols)!r} contains duplicates")
    check_base(len(symbols))


def numeral_system(base: int) -> PositionalNumeralSystem:
    """Look up (building on first use) the numeral system of `base`."""
    global _SYSTEMS
    system = _SYSTEMS.get(base) if isinstance(base, int) else None
    if system is not None:
        return system
    check_base(base)
    with _LOCK:
        system = _SYSTEMS.get(base)
        if system is None:
            system = PositionalNumeralSystem.from_symbols(DEFAULT_SYMBOLS[:base])
            _SYSTEMS = {**_SYSTEMS, base: system}
            _dbg(f"[digits] built numeral system base={base}")
    return system


def register_symbols(symbols: Iterable[str], *, replace: bool = False) -> bool:
    """Register a custom alphabet for base len(symbols).

    The first custom alphabet of a base replaces the built-in one. Later
    registrations for the same base are ignored unless `replace` is set.
    Returns True when the alphabet became active.
    """
    if symbols is None:
        raise InvalidArgumentError("no symbol set specified")
    if isinstance(symbols, str):
        symbols = tuple(symbols)
    system = PositionalNumeralSystem.from_symbols(tuple(symbols))
    global _SYSTEMS, _CUSTOM_BASES
    with _LOCK:
        if system.base in _CUSTOM_BASES and not replace:
            _dbg(f"[digits] base={system.base} already has a custom alphabet, kept")
            return False
        _SYSTEMS = {**_SYSTEMS, system.base: system}
        _CUSTOM_BASES = _CUSTOM_BASES | {system.base}
    _dbg(f"[digits] registered alphabet {system.allowed_symbols()!r} for base={system.base}")
    return True


def reset_registry() -> None:
    """Drop every custom alphabet; built-in systems are rebuilt on demand."""
    global _SYSTEMS, _CUSTOM_BASES
    with _LOCK:
        _SYSTEMS = {}
        _CUSTOM_BASES = frozenset()


# ----------------------------
# Lookups
# ----------------------------

def ordinal_to_digit(base: int, ordinal: int) -> Digit:
    system = numeral_system(base)
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise InvalidArgumentError(f"ordinal must be an int, got {ordinal!r}")
    if not (0 <= ordinal < base):
        raise InvalidArgumentError(f"ordinal {ordinal} outside [0, {base - 1}] for base {base}")
    return system.digits[ordinal]


def char_to_digit(base: int, symbol: str) -> Digit:
    system = numeral_system(base)
    digit = system.index.get(symbol)
    if digit is None:
        raise InvalidArgumentError(f"symbol {symbol!r} is not a digit of base {base}")
    return digit


def ordinal_to_symbol(base: int, ordinal: int) -> str:
    return ordinal_to_digit(base, ordinal).symbol


def symbol_of(digit: Digit) -> str:
    """Current symbol of `digit` (follows alphabet replacements)."""
    return numeral_system(digit.base).symbols[digit.ordinal]


def subset(base: int) -> Tuple[str, ...]:
    """The ordered alphabet of `base`."""
    return numeral_system(base).symbols


def allowed_symbols(base: int) -> str:
    return numeral_system(base).allowed_symbols()


def exponent_markers(base: int) -> Tuple[str, ...]:
    """Exponent markers that are not digits of `base`; the first one is written by the formatter."""
    symbols = allowed_symbols(base)
    if EXPONENT_ABBREVIATION not in symbols:
        candidates = (EXPONENT_ABBREVIATION, EXPONENT_ABBREVIATION.lower(), EXPONENT_ABBREVIATION_FALLBACK)
    else:
        candidates = (EXPONENT_ABBREVIATION_FALLBACK, EXPONENT_ABBREVIATION.lower())
    return tuple(m for m in candidates if m not in symbols)


def zero_digit(base: int) -> Digit:
    return numeral_system(base).digits[0]


def one_digit(base: int) -> Digit:
    return numeral_system(base).digits[1]


def max_digit(base: int) -> Digit:
    return numeral_system(base).digits[-1]


__all__ = [
    "DEBUG_DIGITS",
    "DEFAULT_SYMBOLS",
    "Digit",
    "PositionalNumeralSystem",
    "allowed_symbols",
    "char_to_digit",
    "check_base",
    "default_symbol",
    "exponent_markers",
    "max_digit",
    "numeral_system",
    "one_digit",
    "ordinal_to_digit",
    "ordinal_to_symbol",
    "register_symbols",
    "reset_registry",
    "subset",
    "symbol_of",
    "zero_digit",
]
