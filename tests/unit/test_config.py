"""Tests for FormatConfig."""

import pytest

from bigint import BigInteger, FormatConfig, UnsupportedBase
from bigint.config import DEFAULT_FORMAT_CONFIG


class TestFormatConfig:
    """Tests for FormatConfig construction and environment loading."""

    def test_defaults(self):
        """Upper-case hex unless configured otherwise."""
        config = FormatConfig()
        assert config.default_base == 16
        assert config.uppercase is True

    def test_frozen(self):
        """Configs are immutable."""
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.default_base = 2  # type: ignore

    def test_rejects_unsupported_base(self):
        """Default base is validated on construction."""
        with pytest.raises(UnsupportedBase):
            FormatConfig(default_base=10)

    def test_from_env_defaults(self, monkeypatch):
        """Missing variables fall back to the defaults."""
        monkeypatch.delenv("BIGINT_DEFAULT_BASE", raising=False)
        monkeypatch.delenv("BIGINT_UPPERCASE", raising=False)
        assert FormatConfig.from_env() == FormatConfig()

    @pytest.mark.parametrize(
        "flag,expected",
        [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)],
    )
    def test_from_env(self, monkeypatch, flag, expected):
        """Environment variables override the defaults."""
        monkeypatch.setenv("BIGINT_DEFAULT_BASE", "8")
        monkeypatch.setenv("BIGINT_UPPERCASE", flag)
        config = FormatConfig.from_env()
        assert config.default_base == 8
        assert config.uppercase is expected

    @pytest.mark.parametrize("raw", ["10", "hex", ""])
    def test_from_env_bad_base(self, monkeypatch, raw):
        """An unusable base in the environment fails loudly."""
        monkeypatch.setenv("BIGINT_DEFAULT_BASE", raw)
        with pytest.raises(UnsupportedBase):
            FormatConfig.from_env()

    def test_default_instance_drives_str(self):
        """str() follows DEFAULT_FORMAT_CONFIG."""
        x = BigInteger.from_int(-255)
        config = DEFAULT_FORMAT_CONFIG
        assert str(x) == x.to_string(config.default_base, config.uppercase)
