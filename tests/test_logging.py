"""Tests for logging configuration."""

import logging

import pytest

from stock_agent.errors import ConfigurationError
from stock_agent.utils.logging import LogConfig, get_logger, parse_level, setup_logging


class TestParseLevel:
    """Tests for level name parsing."""

    @pytest.mark.parametrize(("name", "expected"), [("debug", logging.DEBUG), (" WARNING ", logging.WARNING)])
    def test_known_levels(self, name, expected):
        """Test that names are matched case-insensitively."""
        assert parse_level(name) == expected

    def test_unknown_level(self):
        """Test that an unknown name is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown log level: 'verbose'"):
            parse_level("verbose")


class TestSetupLogging:
    """Tests for logger setup."""

    def test_bad_env_level_rejected(self, monkeypatch):
        """Test that setup_logging reports an invalid LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError):
            setup_logging()

    def test_bad_config_level_rejected(self):
        """Test that an invalid explicit level is rejected."""
        with pytest.raises(ConfigurationError):
            setup_logging(LogConfig(level="loud"))


class TestGetLogger:
    """Tests for module logger creation."""

    def test_bad_env_level_is_not_fatal(self, monkeypatch):
        """Test that module import paths survive an invalid LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        logger = get_logger("stock_agent.tests.bad_env")
        assert logger.level == logging.NOTSET

    def test_env_level_applied(self, monkeypatch):
        """Test that a valid LOG_LEVEL sets the logger level."""
        monkeypatch.setenv("LOG_LEVEL", "info")
        assert get_logger("stock_agent.tests.env_info").level == logging.INFO

    def test_explicit_bad_level_raises(self, monkeypatch):
        """Test that an invalid explicit level is still an error."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        with pytest.raises(ConfigurationError):
            get_logger("stock_agent.tests.explicit", level="loud")
