"""Paged listing model."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemT = TypeVar("ItemT")


class ResourcePage(BaseModel, Generic[ItemT]):
    """One page of a listing.

    ``next_link`` is an opaque continuation token; ``None`` marks the last page.
    """

    value: list[ItemT] = Field(default_factory=list)
    next_link: str | None = Field(default=None, alias="nextLink")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        """Treat a null ``value`` as an empty page."""
        return [] if v is None else v

    @property
    def continuation_token(self) -> str | None:
        return self.next_link or None

    @property
    def is_last(self) -> bool:
        return not self.next_link
