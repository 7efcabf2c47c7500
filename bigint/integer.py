"""Arbitrary-precision signed integer value type.

BigInteger stores a canonical magnitude (tuple of base-2^32 digits, least
significant first) and a sign flag. Values are immutable: every operation
returns a new BigInteger, and unchanged magnitudes are shared rather than
copied.

Usage pattern:
    from bigint import BigInteger

    x = BigInteger.from_string("FFFFFFFF", 16)
    y = x + 1                       # or x.add(BigInteger.from_int(1))
    assert y.to_string(16) == "100000000"
    assert y.magnitude == (0, 1)
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from bigint.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from bigint.digits import (
    DIGIT_BITS,
    DIGIT_MAX,
    Magnitude,
    add_magnitudes,
    compare_magnitudes,
    is_less_than,
    subtract_magnitudes,
)
from bigint.radix import check_base, format_magnitude, parse_magnitude

logger = structlog.get_logger()

# Format spec letter -> (base, uppercase)
_FORMAT_SPECS = {
    "b": (2, False),
    "o": (8, False),
    "x": (16, False),
    "X": (16, True),
}


class BigInteger:
    """Immutable arbitrary-precision signed integer.

    Attributes:
        magnitude: Canonical digit tuple, least significant first (read-only)
        is_negative: Sign flag; always False for zero (read-only)
    """

    __slots__ = ("_magnitude", "_is_negative")
    _magnitude: Magnitude
    _is_negative: bool

    def __init__(self, magnitude: Iterable[int] = (), is_negative: bool = False) -> None:
        """Create a BigInteger from a canonical magnitude and a sign.

        The magnitude is frozen into a tuple but not trimmed; callers must
        pass canonical digits. Zero is always stored as non-negative.
        """
        digits = tuple(magnitude)
        assert all(0 <= digit <= DIGIT_MAX for digit in digits), "digit out of range"
        self._magnitude = digits
        self._is_negative = bool(is_negative) and bool(digits)

    # --- Construction ---

    @classmethod
    def from_digits(cls, magnitude: Iterable[int], is_negative: bool = False) -> BigInteger:
        """Create from base-2^32 digits (native representation).

        Args:
            magnitude: Canonical digits, least significant first
            is_negative: Sign flag
        """
        return cls(magnitude, is_negative)

    @classmethod
    def from_string(cls, text: str, base: int) -> BigInteger:
        """Parse a numeral with an optional leading '+' or '-'.

        Args:
            text: Numeral, most significant character first
            base: Power-of-two base in (1, 36]

        Raises:
            UnsupportedBase: If base is not a supported power of two
            InvalidDigitCharacter: If a character is not a digit of base or
                there are no digits at all
            TypeError: If text is not a str
        """
        if not isinstance(text, str):
            logger.debug("invalid_numeral_type", type=type(text).__name__)
            raise TypeError(f"BigInteger.from_string requires str, got {type(text).__name__}")
        check_base(base)
        is_negative = False
        offset = 0
        if text[:1] in ("-", "+"):
            is_negative = text[0] == "-"
            offset = 1
        return cls(parse_magnitude(text[offset:], base, offset), is_negative)

    @classmethod
    def from_int(cls, value: int) -> BigInteger:
        """Create from a native int by splitting it into 32-bit digits.

        Raises:
            TypeError: If value is not an int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInteger.from_int requires int, got {type(value).__name__}")
        remaining = abs(value)
        digits: list[int] = []
        while remaining:
            digits.append(remaining & DIGIT_MAX)
            remaining >>= DIGIT_BITS
        return cls(digits, value < 0)

    @classmethod
    def zero(cls) -> BigInteger:
        """Canonical zero."""
        return cls()

    # --- Accessors ---

    @property
    def magnitude(self) -> Magnitude:
        """Digits of the absolute value, least significant first."""
        return self._magnitude

    @property
    def is_negative(self) -> bool:
        return self._is_negative

    @property
    def is_zero(self) -> bool:
        return not self._magnitude

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if not self._magnitude:
            return 0
        return -1 if self._is_negative else 1

    # --- Formatting ---

    def to_string(
        self,
        base: int | None = None,
        uppercase: bool | None = None,
        config: FormatConfig | None = None,
    ) -> str:
        """Format as a numeral, with a leading '-' when negative.

        Args:
            base: Power-of-two base in (1, 36]; config default if None
            uppercase: Letter case for digits above 9; config default if None
            config: Defaults to use instead of DEFAULT_FORMAT_CONFIG

        Raises:
            UnsupportedBase: If base is not a supported power of two
        """
        config = config or DEFAULT_FORMAT_CONFIG
        base = config.default_base if base is None else check_base(base)
        uppercase = config.uppercase if uppercase is None else uppercase
        numeral = format_magnitude(self._magnitude, base, uppercase)
        return "-" + numeral if self._is_negative else numeral

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        sign = "-" if self._is_negative else ""
        return f'BigInteger("{sign}0x{format_magnitude(self._magnitude, 16)}")'

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        if format_spec not in _FORMAT_SPECS:
            raise ValueError(f"Unknown format code {format_spec!r} for BigInteger")
        base, uppercase = _FORMAT_SPECS[format_spec]
        return self.to_string(base, uppercase)

    # --- Arithmetic ---

    def negate(self) -> BigInteger:
        """Same magnitude, opposite sign. Zero stays non-negative."""
        if not self._magnitude:
            return self
        return BigInteger(self._magnitude, not self._is_negative)

    def add(self, other: BigInteger) -> BigInteger:
        """Return self + other."""
        return _signed_add(self._magnitude, self._is_negative, other._magnitude, other._is_negative)

    def subtract(self, other: BigInteger) -> BigInteger:
        """Return self - other."""
        # x - y = x + (-y)
        return _signed_add(
            self._magnitude, self._is_negative, other._magnitude, not other._is_negative
        )

    def __neg__(self) -> BigInteger:
        return self.negate()

    def __pos__(self) -> BigInteger:
        return self

    def __abs__(self) -> BigInteger:
        if self._is_negative:
            return self.negate()
        return self

    def __add__(self, other: BigInteger | int) -> BigInteger:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self.add(other_value)

    def __radd__(self, other: int) -> BigInteger:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return other_value.add(self)

    def __sub__(self, other: BigInteger | int) -> BigInteger:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self.subtract(other_value)

    def __rsub__(self, other: int) -> BigInteger:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return other_value.subtract(self)

    # --- Comparison ---

    def is_less_than(self, other: BigInteger) -> bool:
        """Is |self| < |other|?

        Compares magnitudes only; signs are ignored. Use compare() or the
        ordering operators for signed order.
        """
        return is_less_than(self._magnitude, other._magnitude)

    def compare(self, other: BigInteger | int) -> int:
        """Signed three-way comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other

        Raises:
            TypeError: If other is neither a BigInteger nor an int
        """
        other_value = _coerce(other)
        if other_value is None:
            raise TypeError(f"Cannot compare BigInteger with {type(other).__name__}")
        return self._compare_to(other_value)

    def _compare_to(self, other: BigInteger) -> int:
        if self._is_negative != other._is_negative:
            return -1 if self._is_negative else 1
        order = compare_magnitudes(self._magnitude, other._magnitude)
        return -order if self._is_negative else order

    def __eq__(self, other: object) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return (
            self._is_negative == other_value._is_negative
            and self._magnitude == other_value._magnitude
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigInteger | int) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self._compare_to(other_value) < 0

    def __le__(self, other: BigInteger | int) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self._compare_to(other_value) <= 0

    def __gt__(self, other: BigInteger | int) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self._compare_to(other_value) > 0

    def __ge__(self, other: BigInteger | int) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return self._compare_to(other_value) >= 0

    def __hash__(self) -> int:
        # Equal to hash(int(self)) so that x == n implies hash(x) == hash(n).
        return hash(int(self))

    # --- Conversion ---

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._magnitude):
            value = value << DIGIT_BITS | digit
        return -value if self._is_negative else value

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return bool(self._magnitude)


def _signed_add(
    x_magnitude: Magnitude, x_negative: bool, y_magnitude: Magnitude, y_negative: bool
) -> BigInteger:
    """Add two signed magnitudes using unsigned magnitude arithmetic.

    Sign cases:
        (+x) + (+y) =  (x + y)
        (-x) + (-y) = -(x + y)
        (+x) + (-y) =  (x - y) if x >= y else -(y - x)
        (-x) + (+y) = -(x - y) if x >= y else  (y - x)

    The mixed cases subtract the smaller magnitude from the larger one and
    take the sign of the larger operand. Zero results come out non-negative.
    """
    if x_negative == y_negative:
        return BigInteger(add_magnitudes(x_magnitude, y_magnitude), x_negative)
    if is_less_than(x_magnitude, y_magnitude):
        return BigInteger(subtract_magnitudes(y_magnitude, x_magnitude), y_negative)
    return BigInteger(subtract_magnitudes(x_magnitude, y_magnitude), x_negative)


def _coerce(value: object) -> BigInteger | None:
    """Return value as a BigInteger, or None if it is not integral."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None
