"""
LicenseKey domain values.

A full license key is three lowercase hex components joined with dots:
``<salt>.<digest>.<checksum>``. The salt and digest together form the
core key; the checksum is appended by the checksum codec.
"""

import hashlib
import re
import secrets
from dataclasses import dataclass

from core.domain.exceptions import KeyGenerationError, MalformedKeyError

DELIMITER = "."
FIELD_SEPARATOR = "-"

SALT_BYTES = 16
SALT_LENGTH = SALT_BYTES * 2
DIGEST_LENGTH = 64
CHECKSUM_LENGTH = 8
KEY_LENGTH = SALT_LENGTH + 1 + DIGEST_LENGTH + 1 + CHECKSUM_LENGTH

_HEX = re.compile(r"[0-9a-f]+")


def _is_hex(value: str, length: int) -> bool:
    return len(value) == length and _HEX.fullmatch(value) is not None


@dataclass(frozen=True)
class LicenseKeyCore:
    """Salt and digest pair, before the checksum is appended."""

    salt: str
    digest: str

    def __str__(self) -> str:
        return f"{self.salt}{DELIMITER}{self.digest}"


@dataclass(frozen=True)
class LicenseKey:
    """
    Full license key as distributed to end users.

    Parsing only enforces the three-part shape. Component lengths and
    alphabet are reported by ``is_canonical`` rather than enforced, since
    verification is defined over the checksum alone.
    """

    salt: str
    digest: str
    checksum: str

    @classmethod
    def parse(cls, raw_key: str) -> "LicenseKey":
        """
        Split a raw key string into its components.

        Args:
            raw_key: Full license key string

        Returns:
            LicenseKey instance

        Raises:
            MalformedKeyError: If the key does not split into exactly 3 parts
        """
        parts = raw_key.split(DELIMITER)
        if len(parts) != 3:
            raise MalformedKeyError(
                f"Invalid license key format: expected 3 parts, got {len(parts)}"
            )
        salt, digest, checksum = parts
        return cls(salt=salt, digest=digest, checksum=checksum)

    @property
    def core(self) -> LicenseKeyCore:
        return LicenseKeyCore(salt=self.salt, digest=self.digest)

    @property
    def is_canonical(self) -> bool:
        """Check component lengths and lowercase hex alphabet."""
        return (
            _is_hex(self.salt, SALT_LENGTH)
            and _is_hex(self.digest, DIGEST_LENGTH)
            and _is_hex(self.checksum, CHECKSUM_LENGTH)
        )

    def __str__(self) -> str:
        return DELIMITER.join((self.salt, self.digest, self.checksum))


def compute_digest(salt: str, domain: str, expire: str, hardware_id: str) -> str:
    """
    Compute the SHA-256 digest binding a salt to the license fields.

    Fields are joined with ``-`` and no escaping, which keeps digests
    compatible with keys already issued.
    """
    preimage = FIELD_SEPARATOR.join((salt, domain, expire, hardware_id))
    return hashlib.sha256(preimage.encode("utf-8")).hexdigest()


def generate_core_key(domain: str, expire: str, hardware_id: str) -> LicenseKeyCore:
    """
    Generate a salted core key for the given license fields.

    A fresh random salt is drawn on every call, so identical inputs
    never produce the same key.

    Args:
        domain: Licensed domain name
        expire: Expiration date string (YYYY-MM-DD)
        hardware_id: Hardware identifier of the licensed machine

    Returns:
        LicenseKeyCore with the salt and digest

    Raises:
        KeyGenerationError: If the random source or hash primitive fails
    """
    try:
        salt = secrets.token_bytes(SALT_BYTES).hex()
        digest = compute_digest(salt, domain, expire, hardware_id)
    except Exception as e:  # pylint: disable=broad-exception-caught
        raise KeyGenerationError() from e
    return LicenseKeyCore(salt=salt, digest=digest)
