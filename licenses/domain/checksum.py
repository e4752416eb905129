"""
Checksum codec.

The checksum is the first 8 hex characters of an unsalted MD5 over the
core key. It detects accidental corruption only; anyone can compute it.
"""
import hashlib
import hmac

from core.domain.exceptions import ChecksumMismatchError
from licenses.domain.license_key import CHECKSUM_LENGTH, DELIMITER, LicenseKey


def checksum(data: str) -> str:
    """Return the truncated MD5 checksum of ``data``."""
    return hashlib.md5(data.encode("utf-8")).hexdigest()[:CHECKSUM_LENGTH]


def add_checksum(core_key: str) -> str:
    """Append the checksum of ``core_key`` to it."""
    return f"{core_key}{DELIMITER}{checksum(core_key)}"


def verify_checksum(full_key: str) -> bool:
    """
    Check a full license key against its embedded checksum.

    Args:
        full_key: ``salt.digest.checksum`` string

    Returns:
        True if the checksum matches, False otherwise

    Raises:
        MalformedKeyError: If the key does not split into exactly 3 parts
    """
    key = LicenseKey.parse(full_key)
    expected = checksum(str(key.core))
    return hmac.compare_digest(expected.encode("utf-8"), key.checksum.encode("utf-8"))


def ensure_checksum(full_key: str) -> LicenseKey:
    """
    Parse a full license key and require a matching checksum.

    Raises:
        MalformedKeyError: If the key does not split into exactly 3 parts
        ChecksumMismatchError: If the checksum does not match
    """
    if not verify_checksum(full_key):
        raise ChecksumMismatchError()
    return LicenseKey.parse(full_key)
