"""
radixnum Core Constants
=======================

Numeral-system limits, defaults and notation tokens shared by every module.
Nothing here depends on other radixnum modules.
"""

from typing import Optional

# ---------------------------------------------------------------------------
# Supported positional numeral systems
# ---------------------------------------------------------------------------

#: Smallest supported radix.
BASE_MIN_LIMIT: int = 2

#: Largest supported radix (0-9, A-Z, a-z, '{', '|').
BASE_MAX_LIMIT: int = 64

#: Base used when a caller does not name one.
DEFAULT_NUMBER_BASE: int = 10


# ---------------------------------------------------------------------------
# Precision defaults
# ---------------------------------------------------------------------------

#: Fractional digits kept by evaluate() and by non-terminating rebase().
DEFAULT_MAXIMUM_FRACTION_LENGTH: int = 10

#: Trial-division budget of the divisor and prime-factor searches behind reduce().
#: Factors above it are left uncancelled (partial reduction); None means unbounded.
DEFAULT_PRIME_FACTOR_ITERATIONS: Optional[int] = 500


# ---------------------------------------------------------------------------
# Notation tokens
# ---------------------------------------------------------------------------

INFINITY_REPRESENTATION: str = "Infinity"
DECIMAL_POINT: str = "."
DECIMAL_COMMA: str = ","
EXPONENT_ABBREVIATION: str = "E"
#: Exponent marker of bases whose alphabet already uses "E" as a digit (base 15 up).
EXPONENT_ABBREVIATION_FALLBACK: str = "^"
PLUS_SIGN: str = "+"
MINUS_SIGN: str = "-"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "BASE_MIN_LIMIT",
    "BASE_MAX_LIMIT",
    "DEFAULT_NUMBER_BASE",
    "DEFAULT_MAXIMUM_FRACTION_LENGTH",
    "DEFAULT_PRIME_FACTOR_ITERATIONS",
    "INFINITY_REPRESENTATION",
    "DECIMAL_POINT",
    "DECIMAL_COMMA",
    "EXPONENT_ABBREVIATION",
    "EXPONENT_ABBREVIATION_FALLBACK",
    "PLUS_SIGN",
    "MINUS_SIGN",
]
