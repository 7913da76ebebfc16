"""
Request decoders for the management API.

Each decoder turns a RawRequest into a typed request or raises.
Decoders never touch the service; a decode error goes straight to the
error encoder.
"""

import json
from typing import Any

from mdm_management.application.management.dtos import (
    AddProfileRequest,
    DeleteProfileRequest,
    FetchDevicesRequest,
    ListProfilesRequest,
    ShowProfileRequest,
)
from mdm_management.domain.management.entities import Profile
from mdm_management.domain.management.errors import (
    BadRoutingError,
    BadUUIDError,
    EmptyRequestError,
)
from mdm_management.interfaces.management.schemas import AddProfileBody
from mdm_management.shared.context import RawRequest, RequestContext

UUID_LENGTH = 36
UUID_PATH_PARAM = "uuid"
IDENTIFIER_KEY = "PayloadIdentifier"

# Lowercased alias or field name -> alias, for case-insensitive key matching.
BODY_KEYS: dict[str, str] = {
    key.lower(): field.alias or name
    for name, field in AddProfileBody.model_fields.items()
    for key in (name, field.alias or name)
}


def decode_fetch_devices_request(
    _ctx: RequestContext, _raw: RawRequest
) -> FetchDevicesRequest:
    return FetchDevicesRequest()


def decode_add_profile_request(
    _ctx: RequestContext, raw: RawRequest
) -> AddProfileRequest:
    """Decode a JSON profile body.

    Raises:
        EmptyRequestError: If the body is empty or has no payload identifier.
        pydantic.ValidationError: If the identifier is present but another
            payload field is invalid. Not remapped.
    """
    if not raw.body.strip():
        raise EmptyRequestError()

    data: Any
    try:
        # Only the first JSON value is read; anything after it is ignored.
        data, _ = json.JSONDecoder().raw_decode(raw.body.decode("utf-8").lstrip())
    except ValueError:
        data = None

    # A document that did not parse carries no identifier either.
    if not isinstance(data, dict):
        raise EmptyRequestError()
    fields = _match_keys(data)
    identifier = fields.get(IDENTIFIER_KEY)
    if not isinstance(identifier, str) or not identifier:
        raise EmptyRequestError()

    body = AddProfileBody.model_validate(fields)
    return AddProfileRequest(
        profile=Profile(
            payload_identifier=body.payload_identifier,
            payload_display_name=body.payload_display_name,
            payload_description=body.payload_description,
            payload_organization=body.payload_organization,
            payload_version=body.payload_version,
            payload_content=body.payload_content,
        )
    )


def decode_list_profiles_request(
    _ctx: RequestContext, _raw: RawRequest
) -> ListProfilesRequest:
    return ListProfilesRequest()


def decode_show_profile_request(
    _ctx: RequestContext, raw: RawRequest
) -> ShowProfileRequest:
    return ShowProfileRequest(uuid=_uuid_path_param(raw))


def decode_delete_profile_request(
    _ctx: RequestContext, raw: RawRequest
) -> DeleteProfileRequest:
    return DeleteProfileRequest(uuid=_uuid_path_param(raw))


def _match_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Map body keys onto field aliases ignoring case.

    Later keys win; unknown keys are dropped.
    """
    fields: dict[str, Any] = {}
    for key, value in data.items():
        alias = BODY_KEYS.get(key.lower())
        if alias is not None:
            fields[alias] = value
    return fields


def _uuid_path_param(raw: RawRequest) -> str:
    if UUID_PATH_PARAM not in raw.path_params:
        raise BadRoutingError(UUID_PATH_PARAM)
    uuid = raw.path_params[UUID_PATH_PARAM]
    # simple length check, not full UUID validation
    if len(uuid) != UUID_LENGTH:
        raise BadUUIDError(uuid)
    return uuid
