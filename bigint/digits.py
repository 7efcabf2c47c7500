"""Digit-level arithmetic on magnitudes.

A magnitude is a tuple of base-2^32 digits, least significant first. Canonical
magnitudes have no most-significant zero digit; zero is the empty tuple.

Builders here are plain lists that never leave the function that created them.
They are frozen into tuples before being returned, so every magnitude handed
out is immutable and can be shared between values.

All functions work on magnitudes only and know nothing about signs.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    # Constants
    "DIGIT_BITS",
    "DIGIT_BASE",
    "DIGIT_MAX",
    "SUPERDIGIT_BITS",
    "SUPERDIGIT_MAX",
    # Types
    "Magnitude",
    # Functions
    "get_digit",
    "complement_digit",
    "trim",
    "is_canonical",
    "is_less_than",
    "compare_magnitudes",
    "add_magnitudes",
    "subtract_magnitudes",
]

# =============================================================================
# Constants
# =============================================================================

DIGIT_BITS = 32
DIGIT_BASE = 1 << DIGIT_BITS
DIGIT_MAX = DIGIT_BASE - 1

# Widened accumulator for digit sums: two digits plus a carry always fit.
SUPERDIGIT_BITS = 64
SUPERDIGIT_MAX = (1 << SUPERDIGIT_BITS) - 1

Magnitude = tuple[int, ...]


# =============================================================================
# Helpers
# =============================================================================


def get_digit(magnitude: Sequence[int], index: int) -> int:
    """Return the digit at index, or 0 past the most significant digit."""
    return magnitude[index] if index < len(magnitude) else 0


def complement_digit(value: int) -> int:
    """Return the borrow complement 2^32 - value.

    This is the digit that adds up to 10 in base 2^32 together with value.
    Zero has no complement and must never be requested.
    """
    assert 0 < value <= DIGIT_BASE, f"no complement for {value}"
    return DIGIT_BASE - value


def trim(builder: list[int]) -> Magnitude:
    """Drop most-significant zero digits and freeze the builder."""
    end = len(builder)
    while end and builder[end - 1] == 0:
        end -= 1
    del builder[end:]
    return tuple(builder)


def is_canonical(magnitude: Sequence[int]) -> bool:
    """True if every digit is in range and there is no leading zero digit."""
    if magnitude and magnitude[-1] == 0:
        return False
    return all(0 <= digit <= DIGIT_MAX for digit in magnitude)


# =============================================================================
# Comparison
# =============================================================================


def compare_magnitudes(x: Sequence[int], y: Sequence[int]) -> int:
    """Three-way compare of two canonical magnitudes.

    Returns:
        -1 if x < y, 0 if x == y, 1 if x > y
    """
    # Canonical form has no leading zeros, so the longer magnitude is larger.
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    for index in range(len(x) - 1, -1, -1):
        if x[index] != y[index]:
            return -1 if x[index] < y[index] else 1
    return 0


def is_less_than(x: Sequence[int], y: Sequence[int]) -> bool:
    """Is magnitude x strictly less than magnitude y?"""
    return compare_magnitudes(x, y) < 0


# =============================================================================
# Carry / borrow arithmetic
# =============================================================================


def add_magnitudes(x: Sequence[int], y: Sequence[int]) -> Magnitude:
    """Add two magnitudes digit by digit with carry propagation.

    The shorter operand is implicitly padded with zero digits. Each column sum
    is computed in the widened accumulator; its high half is the carry.
    """
    result: list[int] = []
    carry = 0
    for index in range(max(len(x), len(y))):
        total = get_digit(x, index) + get_digit(y, index) + carry
        assert total <= SUPERDIGIT_MAX
        result.append(total & DIGIT_MAX)
        carry = total >> DIGIT_BITS
    if carry == 1:
        result.append(1)
    return tuple(result)


def subtract_magnitudes(x: Sequence[int], y: Sequence[int]) -> Magnitude:
    """Subtract magnitude y from magnitude x with borrow propagation.

    Requires x >= y. When a column underflows, the result digit is the
    complement of the shortfall and a borrow moves into the next column.

    Raises:
        AssertionError: If x < y (debug builds only)
    """
    assert not is_less_than(x, y), "subtract_magnitudes requires x >= y"
    result: list[int] = []
    borrow = 0
    for index in range(max(len(x), len(y))):
        minuend = get_digit(x, index) - borrow
        subtrahend = get_digit(y, index)
        if minuend >= subtrahend:
            result.append(minuend - subtrahend)
            borrow = 0
        else:
            result.append(complement_digit(subtrahend - minuend))
            borrow = 1
    assert borrow == 0
    return trim(result)
