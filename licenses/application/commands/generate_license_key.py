"""
GenerateLicenseKeyCommand.

Command to generate a license key bound to a domain, an expiration date
and a hardware id.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class GenerateLicenseKeyCommand:
    """
    Command to generate a license key.

    When ``hardware_id`` is omitted the configured hardware id provider
    supplies the id of the current machine.
    """

    domain: str
    expire: str  # YYYY-MM-DD
    hardware_id: Optional[str] = None
