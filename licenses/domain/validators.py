"""
Pre-generation validators.

Both checks are purely syntactic (plus a clock comparison for the
expiration date); no network lookup is performed.
"""
import re
from datetime import datetime
from typing import Optional

from core.domain.value_objects import ValidationResult

DOMAIN_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9-]{1,61}[a-zA-Z0-9](?:\.[a-zA-Z]{2,})+")
EXPIRATION_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
EXPIRATION_FORMAT = "%Y-%m-%d"


class DomainValidator:
    """Domain service for domain name syntax validation."""

    @staticmethod
    def validate(domain: str) -> ValidationResult:
        """
        Validate a domain name.

        The first label must be 3 to 63 characters, start and end with an
        alphanumeric character and contain only alphanumerics and hyphens.
        It must be followed by one or more alphabetic segments of at least
        two characters each.

        Args:
            domain: Domain name to validate

        Returns:
            ValidationResult with the failure reason if invalid
        """
        if not isinstance(domain, str) or not domain:
            return ValidationResult.invalid("Domain is required")
        if DOMAIN_PATTERN.fullmatch(domain) is None:
            return ValidationResult.invalid(f"Invalid domain format: {domain!r}")
        return ValidationResult.valid()


class ExpirationValidator:
    """Domain service for expiration date validation."""

    @staticmethod
    def validate(value: str, now: Optional[datetime] = None) -> ValidationResult:
        """
        Validate an expiration date string.

        Args:
            value: Date string, must be exactly YYYY-MM-DD
            now: Moment to compare against (defaults to local system time)

        Returns:
            ValidationResult with the failure reason if invalid
        """
        if not isinstance(value, str) or EXPIRATION_PATTERN.fullmatch(value) is None:
            return ValidationResult.invalid("Expiration date must use format YYYY-MM-DD")

        try:
            expires_at = datetime.strptime(value, EXPIRATION_FORMAT)
        except ValueError:
            return ValidationResult.invalid(f"Expiration date {value} is not a calendar date")

        now = now or datetime.now()
        if expires_at <= now:
            return ValidationResult.invalid(f"Expiration date {value} must be in the future")

        return ValidationResult.valid()


def is_valid_domain(domain: str) -> bool:
    return DomainValidator.validate(domain).is_valid


def is_valid_expiration_date(value: str, now: Optional[datetime] = None) -> bool:
    return ExpirationValidator.validate(value, now=now).is_valid
