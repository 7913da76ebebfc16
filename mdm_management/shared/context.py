"""
Request-scoped values passed explicitly through every transport call.

RequestContext travels from the adapter into decoders, endpoints, the
service and the encoders. RawRequest is what a decoder sees: the body
already read and the path variables the router matched.
No framework imports allowed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import uuid4


@dataclass(frozen=True)
class RequestContext:
    """Handle identifying one inbound HTTP request.

    Attributes:
        request_id: Caller supplied X-Request-ID, or a generated one.
        method: HTTP method.
        path: Request path.
    """

    request_id: str = field(default_factory=lambda: uuid4().hex)
    method: str = ""
    path: str = ""


@dataclass(frozen=True)
class RawRequest:
    """Raw inputs available to a request decoder.

    Attributes:
        body: The request body bytes, possibly empty.
        path_params: Named variables supplied by the router.
    """

    body: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)


class ErrorStage(Enum):
    """Transport stage at which a request failed."""

    DECODE = "decode"
    DO = "do"
    ENCODE = "encode"


class TransportError(Exception):
    """Carrier wrapping an error raised while serving a request.

    The error encoder unwraps it before mapping the inner error to a status.
    """

    def __init__(self, stage: ErrorStage, err: Exception) -> None:
        super().__init__(f"{stage.value}: {err}")
        self.stage = stage
        self.err = err


def unwrap(err: Exception) -> Exception:
    """Return the inner error of a TransportError, or err itself."""
    if isinstance(err, TransportError):
        return err.err
    return err


def header_request_id(value: Optional[str]) -> str:
    """Use a caller supplied request id when present."""
    return value.strip() if value and value.strip() else uuid4().hex
