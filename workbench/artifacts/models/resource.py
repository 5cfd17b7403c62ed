"""Artifact resource models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ArtifactResource(BaseModel):
    """A named workspace artifact.

    ``id``, ``type`` and ``etag`` are assigned by the service and are never
    sent back on writes. Unknown wire fields are preserved.
    """

    READ_ONLY_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "type", "etag"})

    id: str | None = None
    name: str | None = None
    type: str | None = None
    etag: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class NotebookResource(ArtifactResource):
    """Notebook artifact. The service rejects notebooks without properties."""

    properties: dict[str, Any]


class ArtifactRenameRequest(BaseModel):
    """Proposed new name for an existing artifact."""

    new_name: str = Field(..., min_length=1, alias="newName")

    model_config = ConfigDict(populate_by_name=True, frozen=True, str_strip_whitespace=True)


@dataclass(frozen=True)
class NotModified:
    """Result of a conditional get when the stored etag still matches."""

    etag: str | None = None
