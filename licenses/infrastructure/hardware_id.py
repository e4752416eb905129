"""
Hardware id adapters.

``MachineIdProvider`` reads the operating system's machine identifier
and hashes it with SHA-256, so the raw id never appears in a digest
preimage. ``StaticHardwareIdProvider`` returns a fixed id, used when a
key is issued for another machine.
"""

import hashlib
import logging
import re
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence

from django.conf import settings
from django.utils.module_loading import import_string

from core.domain.exceptions import HardwareIdUnavailableError
from licenses.ports.hardware_id_provider import HardwareIdProvider

logger = logging.getLogger(__name__)

LINUX_MACHINE_ID_PATHS = ("/etc/machine-id", "/var/lib/dbus/machine-id")
BSD_HOST_ID_PATH = "/etc/hostid"

DARWIN_COMMAND = ("ioreg", "-rd1", "-c", "IOPlatformExpertDevice")
WINDOWS_COMMAND = (
    "REG",
    "QUERY",
    r"HKEY_LOCAL_MACHINE\SOFTWARE\Microsoft\Cryptography",
    "/v",
    "MachineGuid",
)
BSD_COMMAND = ("kenv", "-q", "smbios.system.uuid")

DARWIN_UUID = re.compile(r'"IOPlatformUUID"\s*=\s*"([^"]+)"')
WINDOWS_GUID = re.compile(r"MachineGuid\s+REG_SZ\s+(\S+)")


class MachineIdProvider(HardwareIdProvider):
    """Hardware id derived from the operating system's machine id."""

    def __init__(self, platform: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize provider.

        Args:
            platform: ``sys.platform`` value to dispatch on (defaults to current)
            timeout: Seconds allowed for platform commands
        """
        self.platform = platform or sys.platform
        if timeout is None:
            timeout = settings.LICENSE_KEYS.get("HARDWARE_ID_TIMEOUT", 5)
        self.timeout = timeout

    def current_id(self) -> str:
        raw_id = self._read_raw_id()
        if not raw_id:
            raise HardwareIdUnavailableError(
                f"Hardware id unavailable on platform {self.platform}"
            )
        return hashlib.sha256(raw_id.encode("utf-8")).hexdigest()

    def _read_raw_id(self) -> str:
        if self.platform.startswith("linux"):
            return self._read_first_file(LINUX_MACHINE_ID_PATHS)
        if self.platform == "darwin":
            return self._search(DARWIN_UUID, self._run(DARWIN_COMMAND))
        if self.platform in ("win32", "cygwin"):
            return self._search(WINDOWS_GUID, self._run(WINDOWS_COMMAND))
        if "bsd" in self.platform:
            return self._read_first_file((BSD_HOST_ID_PATH,)) or self._run(BSD_COMMAND)
        raise HardwareIdUnavailableError(f"Unsupported platform: {self.platform}")

    @staticmethod
    def _read_first_file(paths: Sequence[str]) -> str:
        for path in paths:
            try:
                value = Path(path).read_text(encoding="utf-8").strip()
            except OSError as e:
                logger.debug("Cannot read machine id from %s: %s", path, e)
                continue
            if value:
                return value
        return ""

    def _run(self, command: Sequence[str]) -> str:
        try:
            completed = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise HardwareIdUnavailableError(
                f"Hardware id unavailable: {command[0]} failed ({e})"
            ) from e
        return completed.stdout.strip()

    @staticmethod
    def _search(pattern: re.Pattern, output: str) -> str:
        match = pattern.search(output)
        return match.group(1) if match else ""


class StaticHardwareIdProvider(HardwareIdProvider):
    """Hardware id supplied up front, e.g. for a customer's machine."""

    def __init__(self, hardware_id: str):
        self.hardware_id = hardware_id

    def current_id(self) -> str:
        if not self.hardware_id or not self.hardware_id.strip():
            raise HardwareIdUnavailableError("Hardware id cannot be empty")
        return self.hardware_id


def get_hardware_id_provider() -> HardwareIdProvider:
    """Instantiate the provider named by ``LICENSE_KEYS["HARDWARE_ID_PROVIDER"]``."""
    provider_class = import_string(settings.LICENSE_KEYS["HARDWARE_ID_PROVIDER"])
    return provider_class()
