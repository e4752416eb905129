"""
Base Django settings for LicenseKeyManager.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEBUG = False

# Application definition
INSTALLED_APPS = [
    "core",
    "licenses",
]

# No persistence: keys are never stored
DATABASES = {}

# Expiration dates compare against the system clock in local time,
# so Django must not override the process time zone.
TIME_ZONE = None
USE_TZ = False
USE_I18N = False

# License keys
LICENSE_KEYS = {
    "HARDWARE_ID_PROVIDER": "licenses.infrastructure.hardware_id.MachineIdProvider",
    "HARDWARE_ID_TIMEOUT": 5,  # seconds
}

# Observability
LOG_LEVEL = os.environ.get("LOG_LEVEL")
LOGGING = get_logging_config("production", LOG_LEVEL)
