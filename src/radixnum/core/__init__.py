"""
radixnum Core
=============

Unified exports for the positional digit model and the primitives every number
operation is built from. All value arithmetic is digit by digit; native ints only
index digits, positions and loop counts.
"""

# NOTE:
#   The `core` package is dependency-free apart from its own modules. The Number and
#   Fraction types in the parent package compose these primitives across digit chains.

# Limits, defaults and notation tokens
from .constants import (
    BASE_MIN_LIMIT,
    BASE_MAX_LIMIT,
    DEFAULT_NUMBER_BASE,
    DEFAULT_MAXIMUM_FRACTION_LENGTH,
    DEFAULT_PRIME_FACTOR_ITERATIONS,
    INFINITY_REPRESENTATION,
    DECIMAL_POINT,
    DECIMAL_COMMA,
)

# Digits and the numeral-system registry
from .digits import (
    DEFAULT_SYMBOLS,
    Digit,
    PositionalNumeralSystem,
    allowed_symbols,
    char_to_digit,
    exponent_markers,
    ordinal_to_digit,
    ordinal_to_symbol,
    register_symbols,
    reset_registry,
    subset,
)

# Digit arithmetic primitives
from .digit_ops import (
    ResultWithCarry,
    ResultWithRemainder,
    add_digits,
    multiply_digits,
    halve_digit,
    complement_digit,
    round_digit_half_up,
    round_digit_to_even,
)

# Signs
from .signs import Sign

# Core exceptions
from .exc import (
    InvalidArgumentError,
    NumberParsingError,
    BaseMismatchError,
    UndefinedOperationError,
)

__all__ = [
    # constants
    "BASE_MIN_LIMIT",
    "BASE_MAX_LIMIT",
    "DEFAULT_NUMBER_BASE",
    "DEFAULT_MAXIMUM_FRACTION_LENGTH",
    "DEFAULT_PRIME_FACTOR_ITERATIONS",
    "INFINITY_REPRESENTATION",
    "DECIMAL_POINT",
    "DECIMAL_COMMA",
    # digits
    "DEFAULT_SYMBOLS",
    "Digit",
    "PositionalNumeralSystem",
    "allowed_symbols",
    "char_to_digit",
    "exponent_markers",
    "ordinal_to_digit",
    "ordinal_to_symbol",
    "register_symbols",
    "reset_registry",
    "subset",
    # digit primitives
    "ResultWithCarry",
    "ResultWithRemainder",
    "add_digits",
    "multiply_digits",
    "halve_digit",
    "complement_digit",
    "round_digit_half_up",
    "round_digit_to_even",
    # signs
    "Sign",
    # exceptions
    "InvalidArgumentError",
    "NumberParsingError",
    "BaseMismatchError",
    "UndefinedOperationError",
]
