"""
HardwareIdProvider port (interface).

This defines the contract for obtaining the identifier of the machine a
license key is bound to. Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod


class HardwareIdProvider(ABC):
    """
    Abstract source of a stable, platform-derived machine identifier.

    This is a port in hexagonal architecture - the domain only sees an
    opaque string, not how it was obtained.
    """

    @abstractmethod
    def current_id(self) -> str:
        """
        Return the hardware identifier of the current machine.

        Returns:
            Hardware identifier string

        Raises:
            HardwareIdUnavailableError: If the identifier cannot be obtained
        """
        pass
