"""Tests for settings and logging configuration."""

import logging
from unittest.mock import patch

from bc_rest.config import LOG_FORMAT, Settings, configure_logging


def test_settings_from_environment(monkeypatch):
    """Test settings pick up BIGCOMMERCE_* variables."""
    monkeypatch.setenv("BIGCOMMERCE_STORE_HASH", "store42")
    monkeypatch.setenv("BIGCOMMERCE_MAX_RETRIES", "7")

    settings = Settings()

    assert settings.bigcommerce_store_hash == "store42"
    assert settings.bigcommerce_max_retries == 7


def test_configure_logging_uses_level():
    """Test configure_logging applies the requested level and format."""
    with patch("bc_rest.config.logging.basicConfig") as basic_config:
        configure_logging("debug")

    basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)
