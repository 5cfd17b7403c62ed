"""Operations on artifact collections."""

from .adapters import ConditionalResponseAdapter, ModelResponseAdapter
from .notebook import NotebookOperations
from .resource_client import ResourceClient
from .routes import build_routes

__all__ = [
    "ResourceClient",
    "NotebookOperations",
    "build_routes",
    "ModelResponseAdapter",
    "ConditionalResponseAdapter",
]
