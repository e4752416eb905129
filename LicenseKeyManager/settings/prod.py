"""
Production settings for LicenseKeyManager.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = False

LICENSE_KEYS = {
    **LICENSE_KEYS,  # noqa: F405
    "HARDWARE_ID_TIMEOUT": float(os.environ.get("HARDWARE_ID_TIMEOUT", 5)),
}
