"""
Use case: Delete one configuration profile by UUID.

Input: DeleteProfileRequest
Output: DeleteProfileResponse (204, no body)
Side effects: Removes the profile from storage.
Failure cases: ProfileNotFoundError.
"""

from mdm_management.application.management.dtos import (
    DeleteProfileRequest,
    DeleteProfileResponse,
)
from mdm_management.domain.management.errors import ManagementError
from mdm_management.domain.management.ports import ManagementService
from mdm_management.shared.context import RequestContext


class DeleteProfileUseCase:
    """Deletes a profile through the management service."""

    def __init__(self, service: ManagementService) -> None:
        self._service = service

    def execute(
        self, ctx: RequestContext, request: DeleteProfileRequest
    ) -> DeleteProfileResponse:
        try:
            self._service.delete_profile(ctx, request.uuid)
        except ManagementError as exc:
            return DeleteProfileResponse(error=exc)
        return DeleteProfileResponse()
