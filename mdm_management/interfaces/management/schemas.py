"""
Pydantic schemas for management API request and response bodies.

Profile payload keys follow the configuration profile naming
(PayloadIdentifier, PayloadDisplayName, ...) in both directions, so a
profile document can be posted back as it was received. Snake case
names are accepted on input as well.
No business logic belongs here.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from mdm_management.domain.management.entities import Profile


class AddProfileBody(BaseModel):
    """Request body for POST /management/v1/profiles.

    Attributes:
        payload_identifier: Reverse-DNS identifier of the profile. Required.
        payload_display_name: Human readable name.
        payload_description: Free form description.
        payload_organization: Issuing organization.
        payload_version: Profile format version.
        payload_content: Payload dictionaries carried by the profile.
    """

    model_config = ConfigDict(populate_by_name=True)

    payload_identifier: str = Field(..., alias="PayloadIdentifier")
    payload_display_name: str = Field(default="", alias="PayloadDisplayName")
    payload_description: str = Field(default="", alias="PayloadDescription")
    payload_organization: str = Field(default="", alias="PayloadOrganization")
    payload_version: int = Field(default=1, alias="PayloadVersion")
    payload_content: list[dict[str, Any]] = Field(
        default_factory=list, alias="PayloadContent"
    )


class ProfileDocument(AddProfileBody):
    """Wire representation of a stored profile.

    Attributes:
        uuid: Identifier assigned when the profile was stored.
        created_at: When the profile was stored.
    """

    uuid: str = Field(default="", alias="UUID")
    created_at: Optional[datetime] = Field(default=None, alias="CreatedAt")

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileDocument":
        return cls.model_validate(asdict(profile))


def profile_document(profile: Profile) -> dict[str, Any]:
    """Render a profile with its payload key names."""
    document = ProfileDocument.from_entity(profile)
    return document.model_dump(mode="json", by_alias=True)


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
