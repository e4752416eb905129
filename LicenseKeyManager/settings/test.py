"""
Test settings for LicenseKeyManager.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

LICENSE_KEYS = {
    **LICENSE_KEYS,  # noqa: F405
    "HARDWARE_ID_TIMEOUT": 1,
}

# Disable logging during tests
LOGGING_CONFIG = None
