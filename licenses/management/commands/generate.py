"""
Django management command to generate a license key.
"""

from django.core.management.base import BaseCommand, CommandError

from LicenseKeyManager import __version__
from licenses.application.commands.generate_license_key import GenerateLicenseKeyCommand
from licenses.application.handlers.generate_license_key_handler import (
    GenerateLicenseKeyHandler,
)
from licenses.infrastructure.hardware_id import get_hardware_id_provider


class Command(BaseCommand):
    """Command to generate a new license key."""

    help = "Generate a new license key"
    requires_system_checks = []

    def get_version(self):
        return __version__

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("-d", "--domain", required=True, help="Domain name")
        parser.add_argument(
            "-e", "--expire", required=True, help="Expire date (YYYY-MM-DD)"
        )
        parser.add_argument(
            "--hardware-id",
            dest="hardware_id",
            default=None,
            help="Bind the key to this hardware id instead of the current machine",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        handler = GenerateLicenseKeyHandler(hardware_id_provider=get_hardware_id_provider())
        result = handler.handle(
            GenerateLicenseKeyCommand(
                domain=options["domain"],
                expire=options["expire"],
                hardware_id=options["hardware_id"],
            )
        )
        if not result.ok:
            raise CommandError(result.error.message)

        self.stdout.write(f"Generated License Key: {result.value.key}")
