"""
Domain-specific errors for the management bounded context.

Every error carries an explicit ErrorKind drawn from a closed vocabulary.
The interface layer maps kinds (never concrete classes) to HTTP statuses.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed vocabulary of management error kinds."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    EMPTY_REQUEST = "empty_request"
    BAD_UUID = "bad_uuid"
    BAD_ROUTING = "bad_routing"
    UNEXPECTED = "unexpected"


class ManagementError(Exception):
    """Base error for all management domain errors."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProfileNotFoundError(ManagementError):
    """Raised when no profile exists for the requested UUID."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, uuid: str) -> None:
        super().__init__("profile not found")
        self.uuid = uuid


class ProfileExistsError(ManagementError):
    """Raised when a profile with the same payload identifier is already stored."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, payload_identifier: str) -> None:
        super().__init__("profile already exists")
        self.payload_identifier = payload_identifier


class EmptyRequestError(ManagementError):
    """Raised when a request body is empty or lacks its required identifier."""

    kind = ErrorKind.EMPTY_REQUEST

    def __init__(self) -> None:
        super().__init__("must supply a non-empty request")


class BadUUIDError(ManagementError):
    """Raised when a uuid path value is not exactly 36 characters long."""

    kind = ErrorKind.BAD_UUID

    def __init__(self, value: str) -> None:
        super().__init__("request must have a valid uuid")
        self.value = value


class BadRoutingError(ManagementError):
    """Raised when the router did not supply an expected path variable.

    This is a route table misconfiguration, not a client error.
    """

    kind = ErrorKind.BAD_ROUTING

    def __init__(self, variable: str) -> None:
        super().__init__("inconsistent mapping between route and handler")
        self.variable = variable


class DEPFetchError(ManagementError):
    """Raised when devices cannot be fetched from the DEP server."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, reason: str) -> None:
        super().__init__(f"dep fetch failed: {reason}")
        self.reason = reason
