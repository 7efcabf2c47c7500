"""BigInteger error classes.

Validation failures at the API boundary. Internal contract violations are
asserted instead and are not part of this hierarchy.
"""

from __future__ import annotations


class BigIntegerError(ValueError):
    """Base error for BigInteger input validation."""

    pass


class UnsupportedBase(BigIntegerError):
    """Base is not a power of two in (1, 36]."""

    def __init__(self, base: object) -> None:
        self.base = base
        super().__init__(f"Unsupported base: {base!r} (must be a power of two in (1, 36])")


class InvalidDigitCharacter(BigIntegerError):
    """Character is not a legal digit for the requested base."""

    def __init__(self, character: str, base: int, position: int) -> None:
        self.character = character
        self.base = base
        self.position = position
        if character:
            message = f"Invalid digit {character!r} at position {position} for base {base}"
        else:
            message = f"Numeral has no digits (base {base})"
        super().__init__(message)
