"""
Centralized error encoding for the management API.

Maps management error kinds to HTTP responses. Every error response
has the same shape, {"error": "<message>"}, whatever its status.
Anything outside the known vocabulary becomes a 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mdm_management.domain.management.errors import ErrorKind, ManagementError
from mdm_management.shared.context import RequestContext, unwrap

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: HTTP_404,
    ErrorKind.EMPTY_REQUEST: HTTP_400,
    ErrorKind.BAD_UUID: HTTP_400,
    ErrorKind.ALREADY_EXISTS: HTTP_409,
}


class JSONUTF8Response(JSONResponse):
    """JSON response that always declares its charset."""

    media_type = JSON_CONTENT_TYPE


def status_for(err: Exception) -> int:
    """Return the HTTP status for an error, unwrapping transport carriers."""
    err = unwrap(err)
    if isinstance(err, ManagementError):
        return ERROR_STATUS.get(err.kind, HTTP_500)
    return HTTP_500


def encode_error(_ctx: RequestContext, err: Exception) -> JSONUTF8Response:
    """Encode an error raised by decoding or business logic.

    Args:
        _ctx: The request context.
        err: The error, possibly wrapped in a TransportError.

    Returns:
        A JSON response with the mapped status and {"error": message}.
    """
    err = unwrap(err)
    return JSONUTF8Response(status_code=status_for(err), content={"error": str(err)})


def register_error_handlers(app: FastAPI) -> None:
    """Register fallback handlers for errors raised outside an adapter.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ManagementError)
    async def handle_management_error(
        request: Request, exc: ManagementError
    ) -> JSONResponse:
        """Handle management errors that escaped an endpoint adapter."""
        logger.warning("Management error on %s: %s", request.url.path, exc.message)
        return encode_error(RequestContext(path=request.url.path), exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return encode_error(RequestContext(path=request.url.path), exc)
