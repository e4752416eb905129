"""
Unit tests for the logging configuration.
"""
import json
import logging
import sys

import pytest

from LicenseKeyManager.settings.logging import (
    SERVICE_NAME,
    CustomJsonFormatter,
    get_logging_config,
)


class TestGetLoggingConfig:
    """Tests for get_logging_config."""

    def test_production_uses_json(self):
        """Test production logs JSON at WARNING by default."""
        config = get_logging_config("production")

        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["loggers"]["licenses"]["level"] == "WARNING"

    def test_development_uses_text(self):
        """Test development logs verbose text at DEBUG."""
        config = get_logging_config("development")

        assert config["handlers"]["console"]["formatter"] == "verbose"
        assert config["loggers"]["core"]["level"] == "DEBUG"

    def test_handlers_write_to_stderr(self):
        """Test logs never share stdout with command output."""
        config = get_logging_config("production")

        assert config["handlers"]["console"]["stream"] is sys.stderr

    def test_explicit_level(self):
        """Test an explicit level overrides the environment default."""
        config = get_logging_config("production", "info")

        assert config["loggers"]["licenses"]["level"] == "INFO"

    def test_unknown_level(self):
        """Test an unknown level is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            get_logging_config("production", "LOUD")


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_adds_service_and_level(self):
        """Test records carry the service name and level."""
        formatter = CustomJsonFormatter("%(name)s %(message)s")
        record = logging.LogRecord(
            name="licenses",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="License key verification failed",
            args=(),
            exc_info=None,
        )

        payload = json.loads(formatter.format(record))

        assert payload["service"] == SERVICE_NAME
        assert payload["level"] == "WARNING"
        assert payload["message"] == "License key verification failed"
