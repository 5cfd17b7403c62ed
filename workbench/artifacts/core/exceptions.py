"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.errors import CloudError
    from ..runtime.rest.http_client import RawResponse
    from .enums import OperationState


class ArtifactsError(Exception):
    """Base exception for all library errors."""

    pass


class ServiceError(ArtifactsError):
    """The service answered with a status code the operation does not accept.

    Carries the status code, the parsed ``CloudError`` body when the service
    sent one, and the raw response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: CloudError | None = None,
        response: RawResponse | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.response = response


class NotFoundError(ServiceError):
    """Resource does not exist (404)."""

    pass


class ConflictError(ServiceError):
    """Request conflicts with the current state, e.g. a rename target exists (409)."""

    pass


class PreconditionFailedError(ServiceError):
    """An If-Match precondition did not hold (412)."""

    pass


class UnknownServerError(ServiceError):
    """Unrecognized non-success status."""

    pass


class TransportError(ArtifactsError):
    """Network-level failure before any HTTP status was received."""

    def __init__(self, message: str, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class SchemaMismatchError(ArtifactsError):
    """Payload does not match the expected schema."""

    def __init__(self, message: str, schema: str | None = None) -> None:
        super().__init__(message)
        self.schema = schema


class OperationFailedError(ArtifactsError):
    """A long-running operation ended in Failed or Canceled."""

    def __init__(
        self,
        message: str,
        state: OperationState,
        error: CloudError | None = None,
    ) -> None:
        super().__init__(message)
        self.state = state
        self.error = error
