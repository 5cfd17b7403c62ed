"""Service error body model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class CloudError(BaseModel):
    """Structured error returned by the service.

    The service sends either ``{"code", "message"}`` or the same object
    wrapped in an ``{"error": ...}`` envelope.
    """

    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[CloudError] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_payload(cls, payload: Any) -> CloudError | None:
        """Build from a decoded JSON body, or return None if it is not error-shaped."""
        if not isinstance(payload, dict):
            return None
        inner = payload.get("error")
        if isinstance(inner, dict):
            payload = inner
        if "code" not in payload and "message" not in payload:
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return None

    def __str__(self) -> str:
        if self.code and self.message:
            return f"{self.code}: {self.message}"
        return self.message or self.code or "unknown error"
