"""
Data Transfer Objects for the management application layer.

Requests are what decoders produce and endpoints accept.
Responses are envelopes endpoints return and the response encoder writes.

An envelope self-describes how it is encoded through three optional
capabilities, checked independently by the encoder:
    - error: a non-None ManagementError means "encode as an error".
    - status_code: an explicit HTTP status; 204 means no body.
    - encode_list(): the envelope supplies the items of a JSON array body.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from mdm_management.domain.management.entities import DEPDevice, Profile
from mdm_management.domain.management.errors import ManagementError

HTTP_204 = 204


@dataclass(frozen=True)
class FetchDevicesRequest:
    """Input DTO for fetching DEP devices. Carries no fields."""


@dataclass(frozen=True)
class AddProfileRequest:
    """Input DTO for storing a profile.

    Attributes:
        profile: Profile to add. Its uuid is assigned by the service.
    """

    profile: Profile


@dataclass(frozen=True)
class ListProfilesRequest:
    """Input DTO for listing profiles. Carries no fields."""


@dataclass(frozen=True)
class ShowProfileRequest:
    """Input DTO for retrieving one profile.

    Attributes:
        uuid: Profile UUID, exactly 36 characters.
    """

    uuid: str


@dataclass(frozen=True)
class DeleteProfileRequest:
    """Input DTO for deleting one profile.

    Attributes:
        uuid: Profile UUID, exactly 36 characters.
    """

    uuid: str


@dataclass(frozen=True)
class FetchDevicesResponse:
    """Devices fetched from DEP, encoded as a JSON array."""

    devices: list[DEPDevice] = field(default_factory=list)
    error: Optional[ManagementError] = None

    def encode_list(self) -> list[DEPDevice]:
        return list(self.devices)


@dataclass(frozen=True)
class AddProfileResponse:
    """The stored profile."""

    profile: Optional[Profile] = None
    error: Optional[ManagementError] = None


@dataclass(frozen=True)
class ListProfilesResponse:
    """Stored profiles, encoded as a JSON array."""

    profiles: list[Profile] = field(default_factory=list)
    error: Optional[ManagementError] = None

    def encode_list(self) -> list[Profile]:
        return list(self.profiles)


@dataclass(frozen=True)
class ShowProfileResponse:
    """A single profile."""

    profile: Optional[Profile] = None
    error: Optional[ManagementError] = None


@dataclass(frozen=True)
class DeleteProfileResponse:
    """Outcome of a delete. Success has no body."""

    status_code: ClassVar[int] = HTTP_204

    error: Optional[ManagementError] = None
