"""
GenerateLicenseKeyHandler.

Handles the generate license key command.
"""

import logging

from core.domain.exceptions import (
    InvalidDomainError,
    InvalidExpirationError,
    LicenseKeyException,
)
from core.domain.result import Result
from licenses.application.commands.generate_license_key import GenerateLicenseKeyCommand
from licenses.application.dto.license_key_dto import LicenseKeyDTO
from licenses.domain.checksum import add_checksum
from licenses.domain.license_key import LicenseKey, generate_core_key
from licenses.domain.validators import DomainValidator, ExpirationValidator
from licenses.infrastructure.hardware_id import StaticHardwareIdProvider
from licenses.ports.hardware_id_provider import HardwareIdProvider

logger = logging.getLogger(__name__)


class GenerateLicenseKeyHandler:
    """Handler for GenerateLicenseKeyCommand."""

    def __init__(self, hardware_id_provider: HardwareIdProvider):
        """Initialize handler with the hardware id provider."""
        self.hardware_id_provider = hardware_id_provider

    def handle(self, command: GenerateLicenseKeyCommand) -> Result[LicenseKeyDTO]:
        """
        Handle generate license key command.

        Validation runs before the hardware id is requested, and no
        hashing happens until every precondition holds.

        Args:
            command: GenerateLicenseKeyCommand

        Returns:
            Result with a LicenseKeyDTO, or the failure that stopped generation:
            InvalidDomainError, InvalidExpirationError,
            HardwareIdUnavailableError or KeyGenerationError
        """
        try:
            full_key = self._generate(command)
        except LicenseKeyException as e:
            logger.warning(
                "License key generation failed: %s (%s)", e.message, e.code
            )
            return Result.failure(e)

        key = LicenseKey.parse(full_key)
        logger.info(
            "Generated license key for domain %s expiring %s",
            command.domain,
            command.expire,
        )
        return Result.success(
            LicenseKeyDTO(
                key=full_key,
                salt=key.salt,
                digest=key.digest,
                checksum=key.checksum,
                domain=command.domain,
                expire=command.expire,
            )
        )

    def _generate(self, command: GenerateLicenseKeyCommand) -> str:
        domain_check = DomainValidator.validate(command.domain)
        if not domain_check:
            logger.debug("Domain rejected: %s", domain_check.reason)
            raise InvalidDomainError()

        expiration_check = ExpirationValidator.validate(command.expire)
        if not expiration_check:
            logger.debug("Expiration rejected: %s", expiration_check.reason)
            raise InvalidExpirationError()

        provider = self.hardware_id_provider
        if command.hardware_id is not None:
            provider = StaticHardwareIdProvider(command.hardware_id)
        hardware_id = provider.current_id()

        core_key = generate_core_key(command.domain, command.expire, hardware_id)
        return add_checksum(str(core_key))
