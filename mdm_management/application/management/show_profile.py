"""
Use case: Retrieve one configuration profile by UUID.

Input: ShowProfileRequest
Output: ShowProfileResponse
Side effects: None (read-only query).
Failure cases: ProfileNotFoundError.
"""

from mdm_management.application.management.dtos import (
    ShowProfileRequest,
    ShowProfileResponse,
)
from mdm_management.domain.management.errors import ManagementError
from mdm_management.domain.management.ports import ManagementService
from mdm_management.shared.context import RequestContext


class ShowProfileUseCase:
    """Looks up a single profile through the management service."""

    def __init__(self, service: ManagementService) -> None:
        self._service = service

    def execute(
        self, ctx: RequestContext, request: ShowProfileRequest
    ) -> ShowProfileResponse:
        """Run the show profile use case.

        Args:
            ctx: The request context.
            request: Request carrying the profile UUID.

        Returns:
            Envelope holding the profile, or the domain error.
        """
        try:
            profile = self._service.show_profile(ctx, request.uuid)
        except ManagementError as exc:
            return ShowProfileResponse(error=exc)
        return ShowProfileResponse(profile=profile)
