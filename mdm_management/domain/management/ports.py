"""
Port interfaces (ABCs) for the management bounded context.

Ports define the contracts that the transport and application layers
require from the outside world. Infrastructure adapters implement the
storage and DEP ports; the application layer implements the service port.
"""

from abc import ABC, abstractmethod
from typing import Optional

from mdm_management.domain.management.entities import DEPDevice, Profile
from mdm_management.shared.context import RequestContext


class ManagementService(ABC):
    """Business operations exposed over HTTP.

    Every operation returns a domain result or raises a ManagementError.
    """

    @abstractmethod
    def fetch_devices(self, ctx: RequestContext) -> list[DEPDevice]:
        """Fetch the devices assigned to this server by DEP."""
        raise NotImplementedError

    @abstractmethod
    def add_profile(self, ctx: RequestContext, profile: Profile) -> Profile:
        """Store a new profile and return it with its assigned UUID."""
        raise NotImplementedError

    @abstractmethod
    def list_profiles(self, ctx: RequestContext) -> list[Profile]:
        """Return every stored profile."""
        raise NotImplementedError

    @abstractmethod
    def show_profile(self, ctx: RequestContext, uuid: str) -> Profile:
        """Return the profile with the given UUID."""
        raise NotImplementedError

    @abstractmethod
    def delete_profile(self, ctx: RequestContext, uuid: str) -> None:
        """Delete the profile with the given UUID."""
        raise NotImplementedError


class ProfileRepository(ABC):
    """Port for persisting configuration profiles."""

    @abstractmethod
    def get(self, uuid: str) -> Optional[Profile]:
        """Return the profile with this UUID, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_identifier(self, payload_identifier: str) -> Optional[Profile]:
        """Return the profile with this payload identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Profile]:
        """Return all profiles ordered by creation time."""
        raise NotImplementedError

    @abstractmethod
    def save(self, profile: Profile) -> None:
        """Persist a new profile."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, uuid: str) -> bool:
        """Delete a profile. Returns False when nothing was deleted."""
        raise NotImplementedError


class DEPDeviceSource(ABC):
    """Port for fetching device records from the DEP service."""

    @abstractmethod
    def fetch_devices(self) -> list[DEPDevice]:
        """Return every device assigned to this MDM server.

        Raises:
            DEPFetchError: If the DEP service cannot be reached or rejects the call.
        """
        raise NotImplementedError
