"""
Default implementation of the ManagementService port.

Profiles live in a ProfileRepository; devices come from a DEPDeviceSource.
Errors are raised as ManagementError subclasses and never mapped to HTTP here.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from mdm_management.domain.management.entities import DEPDevice, Profile
from mdm_management.domain.management.errors import (
    ProfileExistsError,
    ProfileNotFoundError,
)
from mdm_management.domain.management.ports import (
    DEPDeviceSource,
    ManagementService,
    ProfileRepository,
)
from mdm_management.shared.context import RequestContext

logger = logging.getLogger(__name__)


class DefaultManagementService(ManagementService):
    """Profile management and DEP device fetch backed by domain ports."""

    def __init__(
        self, profile_repo: ProfileRepository, dep_source: DEPDeviceSource
    ) -> None:
        """Initialize the service.

        Args:
            profile_repo: Storage for configuration profiles.
            dep_source: Source of DEP device records.
        """
        self._profile_repo = profile_repo
        self._dep_source = dep_source

    def fetch_devices(self, ctx: RequestContext) -> list[DEPDevice]:
        devices = self._dep_source.fetch_devices()
        logger.info(
            "Fetched %d DEP devices (request_id=%s)", len(devices), ctx.request_id
        )
        return devices

    def add_profile(self, ctx: RequestContext, profile: Profile) -> Profile:
        """Store a profile under a freshly generated UUID.

        Raises:
            ProfileExistsError: If the payload identifier is already stored.
        """
        if self._profile_repo.get_by_identifier(profile.payload_identifier):
            raise ProfileExistsError(profile.payload_identifier)

        stored = replace(
            profile,
            uuid=str(uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        self._profile_repo.save(stored)
        logger.info(
            "Added profile identifier=%s uuid=%s (request_id=%s)",
            stored.payload_identifier,
            stored.uuid,
            ctx.request_id,
        )
        return stored

    def list_profiles(self, ctx: RequestContext) -> list[Profile]:
        return self._profile_repo.list_all()

    def show_profile(self, ctx: RequestContext, uuid: str) -> Profile:
        profile = self._profile_repo.get(uuid)
        if profile is None:
            raise ProfileNotFoundError(uuid)
        return profile

    def delete_profile(self, ctx: RequestContext, uuid: str) -> None:
        if not self._profile_repo.delete(uuid):
            raise ProfileNotFoundError(uuid)
        logger.info("Deleted profile uuid=%s (request_id=%s)", uuid, ctx.request_id)
