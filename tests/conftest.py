from __future__ import annotations

from typing import Callable

import pytest

from radixnum import Fraction, Number
from radixnum.core.digits import reset_registry


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def num(text: str, base: int = 10) -> Number:
    return Number.parse(text, base)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def fresh_registry():
    """Custom alphabets registered inside a test are dropped afterwards."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture()
def make_number() -> Callable[..., Number]:
    return num


@pytest.fixture()
def make_fraction() -> Callable[..., Fraction]:
    def _make(numerator, denominator=1, integer_part=0, base=10) -> Fraction:
        return Fraction.mixed(integer_part, numerator, denominator, base)
    return _make
