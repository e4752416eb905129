"""
License key DTOs for command output.
"""
from dataclasses import dataclass


@dataclass
class LicenseKeyDTO:
    """DTO for a generated license key."""

    key: str
    salt: str
    digest: str
    checksum: str
    domain: str
    expire: str


@dataclass
class VerificationDTO:
    """DTO for a license key verification result."""

    is_valid: bool
    salt: str
    digest: str
    checksum: str
    is_canonical: bool
