"""Pytest configuration and fixtures."""

import pytest

from bigint import BigInteger
from bigint.radix import SUPPORTED_BASES
from tests.helpers import random_values


@pytest.fixture
def zero() -> BigInteger:
    """Canonical zero."""
    return BigInteger.from_digits([], False)


@pytest.fixture(scope="session")
def sample_ints() -> list[int]:
    """Signed native ints straddling digit boundaries plus random values."""
    return random_values(count=40)


@pytest.fixture(scope="session")
def sample_values(sample_ints: list[int]) -> list[BigInteger]:
    """sample_ints converted to BigInteger."""
    return [BigInteger.from_int(value) for value in sample_ints]


@pytest.fixture(params=list(SUPPORTED_BASES))
def base(request: pytest.FixtureRequest) -> int:
    """Every supported power-of-two base."""
    return request.param
