"""
Development settings for LicenseKeyManager.
"""

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = True

LOGGING = get_logging_config("development", LOG_LEVEL)  # noqa: F405
