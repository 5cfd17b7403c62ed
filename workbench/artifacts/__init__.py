"""Workbench Artifacts - async client for workspace artifact REST APIs."""

from .clients import ArtifactsClient
from .config import ClientConfig
from .core import (
    ArtifactsError,
    ConflictError,
    FinalStateVia,
    HttpMethod,
    NotFoundError,
    OperationFailedError,
    OperationState,
    PreconditionFailedError,
    SchemaMismatchError,
    ServiceError,
    TransportError,
    UnknownServerError,
)
from .models import (
    ArtifactRenameRequest,
    ArtifactResource,
    CloudError,
    NotebookResource,
    NotModified,
    ResourcePage,
)
from .operations import NotebookOperations, ResourceClient
from .runtime import AsyncPager, LROPoller, OperationRequest, Serializer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "ArtifactsClient",
    "ClientConfig",
    "ResourceClient",
    "NotebookOperations",
    # Runtime
    "AsyncPager",
    "LROPoller",
    "OperationRequest",
    "Serializer",
    # Enums
    "HttpMethod",
    "OperationState",
    "FinalStateVia",
    # Models
    "ArtifactResource",
    "NotebookResource",
    "ArtifactRenameRequest",
    "NotModified",
    "ResourcePage",
    "CloudError",
    # Exceptions
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
