"""
Use case: Fetch the devices assigned to this server by DEP.

Input: FetchDevicesRequest
Output: FetchDevicesResponse (list encoded)
Side effects: Calls the DEP service.
Failure cases: DEPFetchError.
"""

import logging

from mdm_management.application.management.dtos import (
    FetchDevicesRequest,
    FetchDevicesResponse,
)
from mdm_management.domain.management.errors import ManagementError
from mdm_management.domain.management.ports import ManagementService
from mdm_management.shared.context import RequestContext

logger = logging.getLogger(__name__)


class FetchDevicesUseCase:
    """Delegates to the service and wraps devices or errors in an envelope."""

    def __init__(self, service: ManagementService) -> None:
        self._service = service

    def execute(
        self, ctx: RequestContext, request: FetchDevicesRequest
    ) -> FetchDevicesResponse:
        """Run the fetch devices use case.

        Args:
            ctx: The request context.
            request: Empty fetch request.

        Returns:
            Envelope holding the devices, or the domain error.
        """
        try:
            devices = self._service.fetch_devices(ctx)
        except ManagementError as exc:
            logger.warning("DEP fetch failed: %s", exc.message)
            return FetchDevicesResponse(error=exc)
        return FetchDevicesResponse(devices=devices)
