"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest

from core.domain.exceptions import HardwareIdUnavailableError
from licenses.application.handlers.generate_license_key_handler import (
    GenerateLicenseKeyHandler,
)
from licenses.ports.hardware_id_provider import HardwareIdProvider


class FakeHardwareIdProvider(HardwareIdProvider):
    """Hardware id provider returning a fixed id and counting calls."""

    def __init__(self, hardware_id: str = "abc123"):
        self.hardware_id = hardware_id
        self.calls = 0

    def current_id(self) -> str:
        self.calls += 1
        return self.hardware_id


class UnavailableHardwareIdProvider(HardwareIdProvider):
    """Hardware id provider that always fails."""

    def current_id(self) -> str:
        raise HardwareIdUnavailableError("No machine id on this host")


@pytest.fixture
def hardware_id_provider():
    """Fixture for a fake HardwareIdProvider."""
    return FakeHardwareIdProvider()


@pytest.fixture
def unavailable_hardware_id_provider():
    """Fixture for a HardwareIdProvider that cannot supply an id."""
    return UnavailableHardwareIdProvider()


@pytest.fixture
def generate_handler(hardware_id_provider):
    """Fixture for GenerateLicenseKeyHandler wired to the fake provider."""
    return GenerateLicenseKeyHandler(hardware_id_provider=hardware_id_provider)


@pytest.fixture
def fixed_now():
    """Fixture for a fixed comparison moment."""
    return datetime(2026, 10, 18, 12, 30)


@pytest.fixture
def patch_command_provider(monkeypatch, hardware_id_provider):
    """Make management commands use the fake hardware id provider."""
    import licenses.management.commands.generate as generate_module
    import licenses.management.commands.hardware_id as hardware_id_module

    monkeypatch.setattr(generate_module, "get_hardware_id_provider", lambda: hardware_id_provider)
    monkeypatch.setattr(hardware_id_module, "get_hardware_id_provider", lambda: hardware_id_provider)
    return hardware_id_provider
