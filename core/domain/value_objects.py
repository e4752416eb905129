"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure a generate or verify call can report."""

    INVALID_DOMAIN = "INVALID_DOMAIN"
    INVALID_EXPIRATION = "INVALID_EXPIRATION"
    HARDWARE_ID_UNAVAILABLE = "HARDWARE_ID_UNAVAILABLE"
    KEY_GENERATION_FAILED = "KEY_GENERATION_FAILED"
    MALFORMED_KEY = "MALFORMED_KEY"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"

    def __str__(self) -> str:
        """Return error kind as string."""
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check, truthy when valid."""

    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.is_valid
