"""
Use case: Store a new configuration profile.

Input: AddProfileRequest
Output: AddProfileResponse
Side effects: Persists the profile.
Failure cases: ProfileExistsError.
"""

from mdm_management.application.management.dtos import (
    AddProfileRequest,
    AddProfileResponse,
)
from mdm_management.domain.management.errors import ManagementError
from mdm_management.domain.management.ports import ManagementService
from mdm_management.shared.context import RequestContext


class AddProfileUseCase:
    """Adds a profile through the management service."""

    def __init__(self, service: ManagementService) -> None:
        self._service = service

    def execute(
        self, ctx: RequestContext, request: AddProfileRequest
    ) -> AddProfileResponse:
        """Run the add profile use case."""
        try:
            profile = self._service.add_profile(ctx, request.profile)
        except ManagementError as exc:
            return AddProfileResponse(error=exc)
        return AddProfileResponse(profile=profile)
