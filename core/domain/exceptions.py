"""
Domain exceptions.

Domain exceptions represent rule violations and error conditions
raised while generating or verifying license keys.
"""

from core.domain.value_objects import ErrorKind


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    @property
    def kind(self) -> ErrorKind:
        """Return the error kind matching this exception's code."""
        return ErrorKind(self.code)


class LicenseKeyException(DomainException):
    """Base exception for license key errors."""

    pass


class InvalidDomainError(LicenseKeyException):
    """Raised when a domain fails the syntax check."""

    def __init__(self, message: str = "Invalid domain format"):
        super().__init__(message, code=ErrorKind.INVALID_DOMAIN.value)


class InvalidExpirationError(LicenseKeyException):
    """Raised when an expiration date is malformed or not in the future."""

    def __init__(
        self,
        message: str = (
            "Invalid expiration date. Use format YYYY-MM-DD and date must be in the future"
        ),
    ):
        super().__init__(message, code=ErrorKind.INVALID_EXPIRATION.value)


class HardwareIdUnavailableError(LicenseKeyException):
    """Raised when the platform hardware identifier cannot be obtained."""

    def __init__(self, message: str = "Hardware id unavailable"):
        super().__init__(message, code=ErrorKind.HARDWARE_ID_UNAVAILABLE.value)


class KeyGenerationError(LicenseKeyException):
    """Raised when the random source or hash primitive fails."""

    def __init__(self, message: str = "Failed to generate license key"):
        super().__init__(message, code=ErrorKind.KEY_GENERATION_FAILED.value)


class MalformedKeyError(LicenseKeyException):
    """Raised when a license key does not split into exactly three parts."""

    def __init__(self, message: str = "Invalid license key format"):
        super().__init__(message, code=ErrorKind.MALFORMED_KEY.value)


class ChecksumMismatchError(LicenseKeyException):
    """Raised when a well-formed license key carries the wrong checksum."""

    def __init__(self, message: str = "Invalid license key: checksum mismatch"):
        super().__init__(message, code=ErrorKind.CHECKSUM_MISMATCH.value)
