"""
radixnum: exact numbers and fractions as digit chains in any base from 2 to 64.

Public API is re-exported here for convenience.
"""

from .core import (
    Digit,
    Sign,
    ordinal_to_digit,
    char_to_digit,
    register_symbols,
    InvalidArgumentError,
    NumberParsingError,
    BaseMismatchError,
    UndefinedOperationError,
)
from .number import Number
from .division import DivisionResult
from .fraction import Fraction
from .reduction import ProcessingDetails, ReductionStrategy

__all__ = [
    "Digit",
    "Sign",
    "ordinal_to_digit",
    "char_to_digit",
    "register_symbols",
    "Number",
    "DivisionResult",
    "Fraction",
    "ProcessingDetails",
    "ReductionStrategy",
    "InvalidArgumentError",
    "NumberParsingError",
    "BaseMismatchError",
    "UndefinedOperationError",
]
