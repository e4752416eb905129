"""
Django management command to verify a license key.
"""

from django.core.management.base import BaseCommand, CommandError

from LicenseKeyManager import __version__
from licenses.application.handlers.verify_license_key_handler import VerifyLicenseKeyHandler
from licenses.application.queries.verify_license_key import VerifyLicenseKeyQuery


class Command(BaseCommand):
    """Command to verify a license key."""

    help = "Verify a license key"
    requires_system_checks = []

    def get_version(self):
        return __version__

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "-k",
            "--key",
            required=True,
            metavar="LICENSE_KEY",
            help="License key to verify",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        result = VerifyLicenseKeyHandler().handle(VerifyLicenseKeyQuery(license_key=options["key"]))
        if not result.ok:
            raise CommandError(result.error.message)

        verification = result.value
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("License key is valid"))
        self.stdout.write(f"Salt: {verification.salt}")
        self.stdout.write(f"Hash: {verification.digest}")
        self.stdout.write(f"Checksum: {verification.checksum}")
