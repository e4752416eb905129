"""
VerifyLicenseKeyHandler.

Handler for the verify license key query.
"""

import logging

from core.domain.exceptions import LicenseKeyException
from core.domain.result import Result
from licenses.application.dto.license_key_dto import VerificationDTO
from licenses.application.queries.verify_license_key import VerifyLicenseKeyQuery
from licenses.domain.checksum import ensure_checksum

logger = logging.getLogger(__name__)


class VerifyLicenseKeyHandler:
    """Handler for VerifyLicenseKeyQuery."""

    def handle(self, query: VerifyLicenseKeyQuery) -> Result[VerificationDTO]:
        """
        Handle verify license key query.

        Only the embedded checksum is checked. The domain, expiration and
        hardware id the key was issued for are never re-derived.

        Args:
            query: VerifyLicenseKeyQuery

        Returns:
            Result with a VerificationDTO, or MalformedKeyError /
            ChecksumMismatchError
        """
        try:
            key = ensure_checksum(query.license_key)
        except LicenseKeyException as e:
            logger.warning("License key verification failed: %s (%s)", e.message, e.code)
            return Result.failure(e)

        if not key.is_canonical:
            logger.warning("License key checksum matches but components are not canonical")

        return Result.success(
            VerificationDTO(
                is_valid=True,
                salt=key.salt,
                digest=key.digest,
                checksum=key.checksum,
                is_canonical=key.is_canonical,
            )
        )
