"""
Use case: List stored configuration profiles.

Input: ListProfilesRequest
Output: ListProfilesResponse (list encoded)
Side effects: None (read-only query).
Failure cases: None beyond storage failures.
"""

from mdm_management.application.management.dtos import (
    ListProfilesRequest,
    ListProfilesResponse,
)
from mdm_management.domain.management.errors import ManagementError
from mdm_management.domain.management.ports import ManagementService
from mdm_management.shared.context import RequestContext


class ListProfilesUseCase:
    """Read-only query returning every stored profile."""

    def __init__(self, service: ManagementService) -> None:
        self._service = service

    def execute(
        self, ctx: RequestContext, request: ListProfilesRequest
    ) -> ListProfilesResponse:
        try:
            profiles = self._service.list_profiles(ctx)
        except ManagementError as exc:
            return ListProfilesResponse(error=exc)
        return ListProfilesResponse(profiles=profiles)
