"""
Unit tests for hardware id adapters.
"""
import hashlib
import subprocess

import pytest

from core.domain.exceptions import HardwareIdUnavailableError
from licenses.infrastructure import hardware_id as hardware_id_module
from licenses.infrastructure.hardware_id import (
    MachineIdProvider,
    StaticHardwareIdProvider,
    get_hardware_id_provider,
)


def _completed(stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


class TestMachineIdProvider:
    """Tests for MachineIdProvider."""

    def test_linux_machine_id(self, tmp_path, monkeypatch):
        """Test Linux id is read from machine-id and hashed."""
        machine_id = tmp_path / "machine-id"
        machine_id.write_text("0123456789abcdef\n")
        monkeypatch.setattr(
            hardware_id_module,
            "LINUX_MACHINE_ID_PATHS",
            (str(tmp_path / "missing"), str(machine_id)),
        )

        provider = MachineIdProvider(platform="linux", timeout=1)

        assert provider.current_id() == hashlib.sha256(b"0123456789abcdef").hexdigest()

    def test_linux_stable(self, tmp_path, monkeypatch):
        """Test the same machine yields the same id."""
        machine_id = tmp_path / "machine-id"
        machine_id.write_text("stable-id")
        monkeypatch.setattr(hardware_id_module, "LINUX_MACHINE_ID_PATHS", (str(machine_id),))

        provider = MachineIdProvider(platform="linux", timeout=1)

        assert provider.current_id() == provider.current_id()

    def test_linux_missing(self, tmp_path, monkeypatch):
        """Test missing machine-id files are unavailable."""
        monkeypatch.setattr(
            hardware_id_module, "LINUX_MACHINE_ID_PATHS", (str(tmp_path / "missing"),)
        )

        with pytest.raises(HardwareIdUnavailableError):
            MachineIdProvider(platform="linux", timeout=1).current_id()

    def test_darwin(self, monkeypatch):
        """Test macOS id is parsed from ioreg output."""
        output = '  "IOPlatformUUID" = "UUID-1234"\n  "IOPlatformSerialNumber" = "C02"\n'
        monkeypatch.setattr(
            hardware_id_module.subprocess, "run", lambda *args, **kwargs: _completed(output)
        )

        provider = MachineIdProvider(platform="darwin", timeout=1)

        assert provider.current_id() == hashlib.sha256(b"UUID-1234").hexdigest()

    def test_windows(self, monkeypatch):
        """Test Windows id is parsed from the registry query."""
        output = (
            "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Cryptography\n"
            "    MachineGuid    REG_SZ    1111-2222\n"
        )
        monkeypatch.setattr(
            hardware_id_module.subprocess, "run", lambda *args, **kwargs: _completed(output)
        )

        provider = MachineIdProvider(platform="win32", timeout=1)

        assert provider.current_id() == hashlib.sha256(b"1111-2222").hexdigest()

    def test_command_failure(self, monkeypatch):
        """Test a failing platform command is unavailable."""

        def failing_run(*args, **kwargs):
            raise FileNotFoundError("ioreg")

        monkeypatch.setattr(hardware_id_module.subprocess, "run", failing_run)

        with pytest.raises(HardwareIdUnavailableError):
            MachineIdProvider(platform="darwin", timeout=1).current_id()

    def test_unparseable_output(self, monkeypatch):
        """Test output without an id is unavailable."""
        monkeypatch.setattr(
            hardware_id_module.subprocess, "run", lambda *args, **kwargs: _completed("")
        )

        with pytest.raises(HardwareIdUnavailableError):
            MachineIdProvider(platform="darwin", timeout=1).current_id()

    def test_unsupported_platform(self):
        """Test unknown platforms are unavailable."""
        with pytest.raises(HardwareIdUnavailableError, match="Unsupported platform"):
            MachineIdProvider(platform="plan9", timeout=1).current_id()

    def test_timeout_from_settings(self, settings):
        """Test the default timeout comes from settings."""
        settings.LICENSE_KEYS = {**settings.LICENSE_KEYS, "HARDWARE_ID_TIMEOUT": 7}

        assert MachineIdProvider(platform="linux").timeout == 7


class TestStaticHardwareIdProvider:
    """Tests for StaticHardwareIdProvider."""

    def test_returns_value(self):
        """Test the supplied id is returned unchanged."""
        assert StaticHardwareIdProvider("abc123").current_id() == "abc123"

    def test_empty(self):
        """Test an empty id is unavailable."""
        with pytest.raises(HardwareIdUnavailableError):
            StaticHardwareIdProvider("").current_id()


class TestGetHardwareIdProvider:
    """Tests for the configured provider factory."""

    def test_default_provider(self):
        """Test settings select MachineIdProvider by default."""
        assert isinstance(get_hardware_id_provider(), MachineIdProvider)

    def test_configured_provider(self, settings):
        """Test the provider class is resolved from settings."""
        settings.LICENSE_KEYS = {
            **settings.LICENSE_KEYS,
            "HARDWARE_ID_PROVIDER": "licenses.infrastructure.hardware_id.MissingProvider",
        }

        with pytest.raises(ImportError):
            get_hardware_id_provider()
