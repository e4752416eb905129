"""
License Key Manager Django project.

Issues and verifies license keys bound to a domain, an expiration date
and a hardware fingerprint.
"""

__version__ = "1.0.0"
