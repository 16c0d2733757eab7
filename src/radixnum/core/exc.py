"""
Core exception types for radixnum.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
    "InvalidArgumentError",
    "NumberParsingError",
    "BaseMismatchError",
    "UndefinedOperationError",
]


class InvalidArgumentError(Exception):
    """Raised when an operand is absent or outside the domain an operation accepts."""
    pass


class NumberParsingError(Exception):
    """Raised when text cannot be read as a number in the requested base.

    Attributes
    ----------
    base : int
        The base the text was parsed in.
    text : str | None
        The rejected input.
    causes : tuple
        One entry per notation that was tried, explaining why it did not match.
    """

    def __init__(self, base, text, *, causes=()):
        super().__init__(f"Cannot parse {text!r} as a number in base {base}")
        self.base = base
        self.text = text
        self.causes = tuple(causes)


class BaseMismatchError(Exception):
    """Raised when a binary operation receives operands of different bases."""

    def __init__(self, base1, base2):
        super().__init__(f"Operands use different bases: {base1} and {base2}")
        self.base1 = base1
        self.base2 = base2


class UndefinedOperationError(Exception):
    """Raised for operations without a defined result (e.g. +inf + -inf, 0/0).

    Attributes
    ----------
    operation : str
        Short name of the failed operation.
    operands : tuple
        The operands involved, for context.
    """

    def __init__(self, operation, *operands):
        shown = ", ".join(str(o) for o in operands)
        super().__init__(f"Undefined operation {operation}({shown})")
        self.operation = operation
        self.operands = operands
