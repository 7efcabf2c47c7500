"""Pydantic field types for BigInteger.

Lets models accept numerals and ints for BigInteger fields:

    class Limits(BaseModel):
        upper: HexBigInteger

    Limits(upper="-0xFFFFFFFFFFFF").upper  # BigInteger
"""

from functools import partial
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from bigint.errors import BigIntegerError
from bigint.integer import BigInteger

# Prefix accepted after the sign, per base
_PREFIXES = {2: ("0b", "0B"), 8: ("0o", "0O"), 16: ("0x", "0X")}


def validate_big_integer(value: Any, base: int = 16) -> BigInteger:
    """Coerce a field value into a BigInteger.

    Args:
        value: BigInteger, int, or numeral string (optional sign, then an
            optional base prefix such as 0x)
        base: Base of string numerals

    Returns:
        Parsed BigInteger

    Raises:
        ValueError: If value is not a valid numeral for base or has an
            unsupported type
    """
    if isinstance(value, BigInteger):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)

    if not isinstance(value, str):
        raise ValueError(f"BigInteger must be string or int, got {type(value).__name__}")

    text = value.strip()
    sign = ""
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:]
    if text.startswith(_PREFIXES.get(base, ())):
        text = text[2:]
    if text[:1] in ("-", "+"):
        raise ValueError(f"Invalid base-{base} BigInteger: '{value}' (sign after prefix)")

    try:
        return BigInteger.from_string(sign + text, base)
    except BigIntegerError as err:
        raise ValueError(f"Invalid base-{base} BigInteger: '{value}' ({err})") from err


def serialize_big_integer(value: BigInteger, base: int = 16) -> str:
    """Format a BigInteger field as a numeral without prefix."""
    return value.to_string(base)


# BigInteger given as hex text (optional 0x prefix) or int
HexBigInteger = Annotated[
    BigInteger,
    PlainValidator(partial(validate_big_integer, base=16)),
    PlainSerializer(partial(serialize_big_integer, base=16), return_type=str),
]

# BigInteger given as binary text (optional 0b prefix) or int
BinaryBigInteger = Annotated[
    BigInteger,
    PlainValidator(partial(validate_big_integer, base=2)),
    PlainSerializer(partial(serialize_big_integer, base=2), return_type=str),
]
