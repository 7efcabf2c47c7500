"""Arbitrary-precision signed integers over base-2^32 digits."""

from bigint.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from bigint.errors import BigIntegerError, InvalidDigitCharacter, UnsupportedBase
from bigint.integer import BigInteger

__version__ = "0.1.0"
__all__ = [
    "BigInteger",
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "BigIntegerError",
    "UnsupportedBase",
    "InvalidDigitCharacter",
    "__version__",
]
