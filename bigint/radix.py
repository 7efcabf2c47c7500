"""Conversion between magnitudes and power-of-two numerals.

Power-of-two bases map whole groups of bits onto single characters, so both
directions stream bits instead of dividing:

- Parsing walks the numeral from its last (least significant) character,
  feeding each character's bits, lowest first, into 32-bit digits.
- Formatting walks the magnitude from its most significant bit, collecting
  groups of log2(base) bits and emitting one character per group once the
  first non-zero group has been seen.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from bigint.digits import DIGIT_BITS, Magnitude, trim
from bigint.errors import InvalidDigitCharacter, UnsupportedBase

logger = structlog.get_logger()

__all__ = [
    "MAX_BASE",
    "SUPPORTED_BASES",
    "is_pow2",
    "log2_pow2",
    "check_base",
    "digit_value",
    "digit_character",
    "parse_magnitude",
    "format_magnitude",
]

# Decimal digits + alphabet
DIGIT_CHARACTERS = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_BASE = len(DIGIT_CHARACTERS)

# Both letter cases, ASCII only
_DIGIT_VALUES = {character: value for value, character in enumerate(DIGIT_CHARACTERS)}
_DIGIT_VALUES.update({character.upper(): value for character, value in _DIGIT_VALUES.items()})

SUPPORTED_BASES = tuple(base for base in range(2, MAX_BASE + 1) if base & (base - 1) == 0)


def is_pow2(x: int) -> bool:
    """Check if x is a positive power of two."""
    return x > 0 and x & (x - 1) == 0


def log2_pow2(x: int) -> int:
    """Number of bits per character for power-of-two base x."""
    assert is_pow2(x), f"{x} is not a power of two"
    return x.bit_length() - 1


def check_base(base: object) -> int:
    """Validate a base and return it.

    Raises:
        UnsupportedBase: If base is not an int power of two in (1, 36]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        logger.debug("unsupported_base", base=repr(base), reason="not an int")
        raise UnsupportedBase(base)
    if not (1 < base <= MAX_BASE) or not is_pow2(base):
        logger.debug("unsupported_base", base=base)
        raise UnsupportedBase(base)
    return base


def digit_value(character: str, base: int, position: int = 0) -> int:
    """Numeric value of an ASCII digit character (either letter case).

    Args:
        character: Single character to decode
        base: Base the character must be a digit of
        position: Index of the character in its numeral, for error reporting

    Raises:
        InvalidDigitCharacter: If character is not alphanumeric or its value
            is not below base
    """
    value = _DIGIT_VALUES.get(character)
    if value is None or value >= base:
        logger.debug(
            "invalid_digit_character",
            character=character,
            base=base,
            position=position,
        )
        raise InvalidDigitCharacter(character, base, position)
    return value


def digit_character(value: int, uppercase: bool = True) -> str:
    """Digit character for a value below MAX_BASE."""
    assert 0 <= value < MAX_BASE, f"no digit character for {value}"
    character = DIGIT_CHARACTERS[value]
    return character.upper() if uppercase else character


def parse_magnitude(numeral: str, base: int, offset: int = 0) -> Magnitude:
    """Decode an unsigned numeral into a canonical magnitude.

    Args:
        numeral: Digit characters, most significant first, no sign
        base: Supported power-of-two base
        offset: Index of numeral[0] in the caller's text, for error reporting

    Raises:
        InvalidDigitCharacter: If any character is not a digit of base, or
            the numeral is empty
    """
    if not numeral:
        logger.debug("invalid_digit_character", character="", base=base, position=offset)
        raise InvalidDigitCharacter("", base, offset)

    bit_count = log2_pow2(base)
    result: list[int] = []
    current_digit = 0
    digit_bit_index = 0
    for position in range(len(numeral) - 1, -1, -1):
        value = digit_value(numeral[position], base, offset + position)
        for bit in range(bit_count):
            if value >> bit & 1:
                current_digit |= 1 << digit_bit_index
            digit_bit_index += 1
            if digit_bit_index == DIGIT_BITS:
                result.append(current_digit)
                current_digit = 0
                digit_bit_index = 0
    if current_digit != 0:
        result.append(current_digit)
    return trim(result)


def format_magnitude(magnitude: Sequence[int], base: int, uppercase: bool = True) -> str:
    """Encode a magnitude as an unsigned numeral without leading zeros.

    The zero magnitude formats as "0".
    """
    bit_count = log2_pow2(base)
    characters: list[str] = []
    current_bits = 0
    # Zero bits padded above the most significant digit so that the stream
    # length is a multiple of bit_count.
    filled = -(len(magnitude) * DIGIT_BITS) % bit_count
    for index in range(len(magnitude) - 1, -1, -1):
        digit = magnitude[index]
        for bit in range(DIGIT_BITS - 1, -1, -1):
            current_bits = current_bits << 1 | (digit >> bit & 1)
            filled += 1
            if filled == bit_count:
                if characters or current_bits != 0:
                    characters.append(digit_character(current_bits, uppercase))
                current_bits = 0
                filled = 0
    if not characters:
        return "0"
    return "".join(characters)
