"""Formatting configuration for BigInteger."""

from __future__ import annotations

import os
from dataclasses import dataclass

from bigint.radix import check_base


@dataclass(frozen=True)
class FormatConfig:
    """Defaults used when a BigInteger is converted to text without an
    explicit base or letter case (str(), to_string() with no arguments).

    Attributes:
        default_base: Power-of-two base in (1, 36] (default: 16)
        uppercase: Emit letter digits in upper case (default: True)
    """

    default_base: int = 16
    uppercase: bool = True

    def __post_init__(self) -> None:
        check_base(self.default_base)

    @classmethod
    def from_env(cls) -> FormatConfig:
        """Build a config from environment variables.

        - BIGINT_DEFAULT_BASE: Default output base (default: 16)
        - BIGINT_UPPERCASE: Upper-case letter digits (default: true)

        Raises:
            UnsupportedBase: If BIGINT_DEFAULT_BASE is not a supported base
        """
        raw_base = os.environ.get("BIGINT_DEFAULT_BASE", "16")
        try:
            base: object = int(raw_base)
        except ValueError:
            base = raw_base
        uppercase = os.environ.get("BIGINT_UPPERCASE", "true").lower() in ("true", "1", "yes")
        return cls(default_base=base, uppercase=uppercase)  # type: ignore[arg-type]


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig.from_env()
