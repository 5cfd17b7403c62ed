"""Core components."""

from .enums import FinalStateVia, HttpMethod, OperationState
from .exceptions import (
    ArtifactsError,
    ConflictError,
    NotFoundError,
    OperationFailedError,
    PreconditionFailedError,
    SchemaMismatchError,
    ServiceError,
    TransportError,
    UnknownServerError,
)

__all__ = [
    "HttpMethod",
    "OperationState",
    "FinalStateVia",
    "ArtifactsError",
    "ServiceError",
    "NotFoundError",
    "ConflictError",
    "PreconditionFailedError",
    "UnknownServerError",
    "TransportError",
    "SchemaMismatchError",
    "OperationFailedError",
]
