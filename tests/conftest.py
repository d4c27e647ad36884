"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from decimal128 import DecimalValue

# Largest 34-digit integer
BIG_DIGITS = "9" * 34


@pytest.fixture
def big() -> DecimalValue:
    """The largest integer with exactly 34 digits."""
    return DecimalValue(BIG_DIGITS)


@pytest.fixture
def nan() -> DecimalValue:
    return DecimalValue("NaN")


@pytest.fixture
def infinity() -> DecimalValue:
    return DecimalValue("Infinity")


@pytest.fixture
def negative_infinity() -> DecimalValue:
    return DecimalValue("-Infinity")


@pytest.fixture
def zero() -> DecimalValue:
    return DecimalValue("0")


@pytest.fixture
def negative_zero() -> DecimalValue:
    return DecimalValue("-0")


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo structlog configuration done by the CLI between tests."""
    yield
    structlog.reset_defaults()
