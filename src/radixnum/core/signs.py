"""Number signs and the product-of-signs rule."""

from __future__ import annotations

from enum import Enum


class Sign(Enum):
    POSITIVE = "+"
    NEGATIVE = "-"

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE

    def negate(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def xor(self, other: "Sign") -> "Sign":
        """Sign of a product or quotient: negative iff exactly one side is negative."""
        return Sign.POSITIVE if self is other else Sign.NEGATIVE

    @classmethod
    def of(cls, negative: bool) -> "Sign":
        return cls.NEGATIVE if negative else cls.POSITIVE

    def __str__(self) -> str:
        return self.value


__all__ = ["Sign"]
