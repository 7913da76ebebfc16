"""
Domain entities for the management bounded context.

Entities represent core business objects.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Profile:
    """A configuration profile stored for distribution to enrolled devices."""

    payload_identifier: str
    uuid: str = ""
    payload_display_name: str = ""
    payload_description: str = ""
    payload_organization: str = ""
    payload_version: int = 1
    payload_content: list[dict[str, Any]] = field(default_factory=list)
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class DEPDevice:
    """A device record returned by the device enrollment program."""

    serial_number: str
    model: str = ""
    description: str = ""
    color: str = ""
    asset_tag: str = ""
    profile_status: str = ""
    profile_uuid: str = ""
    profile_assign_time: Optional[datetime] = None
    device_assigned_date: Optional[datetime] = None
    device_assigned_by: str = ""
    os: str = ""
    device_family: str = ""
