"""
VerifyLicenseKeyQuery.

Query to check a license key's structure and embedded checksum.
"""
from dataclasses import dataclass


@dataclass
class VerifyLicenseKeyQuery:
    """Query to verify a full license key string."""

    license_key: str
