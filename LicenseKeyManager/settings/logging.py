"""
Logging configuration.

Command output goes to stdout, so every handler here writes to stderr.
Production uses JSON records; development uses a verbose text format.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "license-key-manager"


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that adds service and level fields."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record.setdefault("level", record.levelname)


def get_logging_config(environment: str = "development", log_level: str = None) -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production)
        log_level: Level for application loggers; defaults to DEBUG in
            development and WARNING elsewhere

    Returns:
        Django logging configuration dictionary
    """
    if log_level is None:
        log_level = "DEBUG" if environment == "development" else "WARNING"
    log_level = log_level.upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")

    formatter = "verbose" if environment == "development" else "json"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
            "verbose": {
                "format": "{levelname} {asctime} {name} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": sys.stderr,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
        "loggers": {
            "core": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
            "licenses": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
            "LicenseKeyManager": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
        },
    }
