"""
Response encoder for the management API.

A single encoder serves every route. It inspects the capabilities an
envelope declares, in this order:

    1. error       -> delegate to the error encoder
    2. status_code -> explicit status; 204 has no body
    3. encode_list -> the envelope supplies its own JSON array items
    4. otherwise   -> generic JSON document

Every response carries Content-Type application/json; charset=utf-8.
"""

from dataclasses import fields, is_dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import Response

from mdm_management.domain.management.entities import Profile
from mdm_management.interfaces.management.schemas import profile_document
from mdm_management.shared.context import RequestContext
from mdm_management.shared.errors.handlers import (
    JSON_CONTENT_TYPE,
    JSONUTF8Response,
    encode_error,
)

HTTP_200 = 200
HTTP_204 = 204

ERROR_FIELD = "error"

# Entities whose wire shape differs from their field names.
WIRE_ENCODERS = {Profile: profile_document}


def encode_response(ctx: RequestContext, response: Any) -> Response:
    """Encode an endpoint envelope into an HTTP response.

    Args:
        ctx: The request context.
        response: Envelope returned by an endpoint, or any JSON-able value.

    Returns:
        The HTTP response to send.
    """
    error = getattr(response, ERROR_FIELD, None)
    if error is not None:
        return encode_error(ctx, error)

    status_code = getattr(response, "status_code", None) or HTTP_200
    if status_code == HTTP_204:
        return Response(
            status_code=HTTP_204, headers={"Content-Type": JSON_CONTENT_TYPE}
        )

    encode_list = getattr(response, "encode_list", None)
    if callable(encode_list):
        return JSONUTF8Response(
            status_code=status_code,
            content=jsonable_encoder(encode_list(), custom_encoder=WIRE_ENCODERS),
        )

    return JSONUTF8Response(status_code=status_code, content=_document(response))


def _document(response: Any) -> Any:
    if is_dataclass(response) and not isinstance(response, type):
        body = {
            f.name: getattr(response, f.name)
            for f in fields(response)
            if f.name != ERROR_FIELD
        }
        return jsonable_encoder(body, custom_encoder=WIRE_ENCODERS)
    return jsonable_encoder(response, custom_encoder=WIRE_ENCODERS)
