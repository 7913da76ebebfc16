"""
HTTP transport for the management bounded context.

Binds each request decoder, endpoint and the shared encoder into a
handler, and registers the handlers against a static route table.

A handler runs three stages. A failure in any of them is wrapped in a
TransportError naming the stage, logged once and rendered by the error
encoder. A decode failure never reaches the service.
"""

import logging
from typing import Any, Callable

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from mdm_management.application.management.add_profile import AddProfileUseCase
from mdm_management.application.management.delete_profile import (
    DeleteProfileUseCase,
)
from mdm_management.application.management.fetch_devices import FetchDevicesUseCase
from mdm_management.application.management.list_profiles import (
    ListProfilesUseCase,
)
from mdm_management.application.management.show_profile import ShowProfileUseCase
from mdm_management.domain.management.ports import ManagementService
from mdm_management.interfaces.management.decoders import (
    decode_add_profile_request,
    decode_delete_profile_request,
    decode_fetch_devices_request,
    decode_list_profiles_request,
    decode_show_profile_request,
)
from mdm_management.interfaces.management.encoders import encode_response
from mdm_management.shared.context import (
    ErrorStage,
    RawRequest,
    RequestContext,
    TransportError,
    header_request_id,
)
from mdm_management.shared.errors.handlers import encode_error

logger = logging.getLogger(__name__)

Decoder = Callable[[RequestContext, RawRequest], Any]
Endpoint = Callable[[RequestContext, Any], Any]
Encoder = Callable[[RequestContext, Any], Response]
ErrorEncoder = Callable[[RequestContext, Exception], Response]

REQUEST_ID_HEADER = "X-Request-ID"


def make_handler(
    decoder: Decoder,
    endpoint: Endpoint,
    encoder: Encoder = encode_response,
    error_encoder: ErrorEncoder = encode_error,
) -> Callable[[Request], Any]:
    """Bind decoder -> endpoint -> encoder into a request handler.

    Args:
        decoder: Turns the raw request into a typed request.
        endpoint: Business operation; synchronous, run in the threadpool.
        encoder: Writes the endpoint's envelope.
        error_encoder: Writes any error raised by the three stages.

    Returns:
        An async handler suitable for APIRouter.add_api_route.
    """

    async def handler(request: Request) -> Response:
        ctx = RequestContext(
            request_id=header_request_id(request.headers.get(REQUEST_ID_HEADER)),
            method=request.method,
            path=request.url.path,
        )
        raw = RawRequest(
            body=await request.body(),
            path_params=dict(request.path_params),
        )

        try:
            typed_request = decoder(ctx, raw)
        except Exception as exc:
            return _fail(ctx, TransportError(ErrorStage.DECODE, exc), error_encoder)

        try:
            response = await run_in_threadpool(endpoint, ctx, typed_request)
        except Exception as exc:
            return _fail(ctx, TransportError(ErrorStage.DO, exc), error_encoder)

        try:
            return encoder(ctx, response)
        except Exception as exc:
            return _fail(ctx, TransportError(ErrorStage.ENCODE, exc), error_encoder)

    return handler


def _fail(
    ctx: RequestContext, err: TransportError, error_encoder: ErrorEncoder
) -> Response:
    logger.error(
        "%s %s failed at %s: %s (request_id=%s)",
        ctx.method,
        ctx.path,
        err.stage.value,
        err.err,
        ctx.request_id,
    )
    return error_encoder(ctx, err)


def build_router(service: ManagementService) -> APIRouter:
    """Register the management handlers against their routes.

    Args:
        service: The business logic behind every endpoint.

    Returns:
        Router carrying the five management routes.
    """
    routes = (
        (
            "POST",
            "/management/v1/devices/fetch",
            decode_fetch_devices_request,
            FetchDevicesUseCase(service).execute,
            "fetch_devices",
        ),
        (
            "POST",
            "/management/v1/profiles",
            decode_add_profile_request,
            AddProfileUseCase(service).execute,
            "add_profile",
        ),
        (
            "GET",
            "/management/v1/profiles",
            decode_list_profiles_request,
            ListProfilesUseCase(service).execute,
            "list_profiles",
        ),
        (
            "GET",
            "/management/v1/profiles/{uuid}",
            decode_show_profile_request,
            ShowProfileUseCase(service).execute,
            "show_profile",
        ),
        (
            "DELETE",
            "/management/v1/profiles/{uuid}",
            decode_delete_profile_request,
            DeleteProfileUseCase(service).execute,
            "delete_profile",
        ),
    )

    router = APIRouter(tags=["management"])
    for method, path, decoder, endpoint, name in routes:
        router.add_api_route(
            path,
            make_handler(decoder, endpoint),
            methods=[method],
            name=name,
        )
    return router
