"""Data models for workspace artifacts.

Architecture:
    Pydantic v2 models describing the small part of the wire schema the
    client needs: the resource envelope, paged listings, the rename request
    and the service error body. Wire names are camelCase and populate the
    snake_case fields through aliases.

Model Categories:
    - Resources: ArtifactResource, NotebookResource
    - Listings: ResourcePage
    - Requests: ArtifactRenameRequest
    - Results: NotModified
    - Errors: CloudError
"""

from .errors import CloudError
from .page import ResourcePage
from .resource import ArtifactRenameRequest, ArtifactResource, NotebookResource, NotModified

__all__ = [
    "ArtifactResource",
    "NotebookResource",
    "ArtifactRenameRequest",
    "NotModified",
    "ResourcePage",
    "CloudError",
]
