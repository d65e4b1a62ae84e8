"""Tests for typed environment helpers."""

import pytest

from common.config.env import get_env_bool, get_env_str


class TestGetEnvStr:
    """Tests for get_env_str."""

    def test_missing_returns_default(self, monkeypatch):
        """Unset variables fall back to the default."""
        monkeypatch.delenv("GP_TEST_VALUE", raising=False)
        assert get_env_str("GP_TEST_VALUE", "fallback") == "fallback"

    def test_value_is_stripped(self, monkeypatch):
        """Surrounding whitespace is removed."""
        monkeypatch.setenv("GP_TEST_VALUE", "  postgres ")
        assert get_env_str("GP_TEST_VALUE") == "postgres"

    def test_required_missing_raises(self, monkeypatch):
        """Required variables raise KeyError when unset."""
        monkeypatch.delenv("GP_TEST_VALUE", raising=False)
        with pytest.raises(KeyError):
            get_env_str("GP_TEST_VALUE", required=True)


class TestGetEnvBool:
    """Tests for get_env_bool."""

    @pytest.mark.parametrize("raw", ["true", "1", "YES", "on"])
    def test_truthy_values(self, monkeypatch, raw):
        """Truthy spellings parse as True."""
        monkeypatch.setenv("GP_TEST_FLAG", raw)
        assert get_env_bool("GP_TEST_FLAG") is True

    @pytest.mark.parametrize("raw", ["false", "0", "no", "off", ""])
    def test_falsey_values(self, monkeypatch, raw):
        """Falsey spellings parse as False."""
        monkeypatch.setenv("GP_TEST_FLAG", raw)
        assert get_env_bool("GP_TEST_FLAG", True) is False

    def test_invalid_value_raises(self, monkeypatch):
        """Unrecognized values raise ValueError."""
        monkeypatch.setenv("GP_TEST_FLAG", "maybe")
        with pytest.raises(ValueError):
            get_env_bool("GP_TEST_FLAG")
