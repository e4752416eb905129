"""
Django management command to print this machine's hardware id.

The printed value can be passed to ``generate --hardware-id`` on the
machine that issues keys.
"""

from django.core.management.base import BaseCommand, CommandError

from LicenseKeyManager import __version__
from core.domain.exceptions import HardwareIdUnavailableError
from licenses.infrastructure.hardware_id import get_hardware_id_provider


class Command(BaseCommand):
    """Command to print the current hardware id."""

    help = "Print this machine's hardware id"
    requires_system_checks = []

    def get_version(self):
        return __version__

    def handle(self, *args, **options):
        """Execute the command."""
        try:
            hardware_id = get_hardware_id_provider().current_id()
        except HardwareIdUnavailableError as e:
            raise CommandError(e.message) from e
        self.stdout.write(hardware_id)
