"""Response adapters for artifact endpoints."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ..models.resource import NotModified
from ..runtime.rest import RawResponse, ResponseAdapter
from ..runtime.serializer import Serializer

ModelT = TypeVar("ModelT", bound=BaseModel)


class ModelResponseAdapter(ResponseAdapter, Generic[ModelT]):
    """Deserializes the response body into a fixed schema."""

    def __init__(self, schema: type[ModelT], serializer: Serializer) -> None:
        self.schema = schema
        self._serializer = serializer

    def parse(self, response: RawResponse, params: dict[str, Any]) -> ModelT:
        return self._serializer.deserialize(response.body, self.schema)


class ConditionalResponseAdapter(ModelResponseAdapter[ModelT]):
    """Like ModelResponseAdapter, but a 304 yields NotModified without reading the body."""

    def parse(self, response: RawResponse, params: dict[str, Any]) -> ModelT | NotModified:
        if response.status == 304:
            return NotModified(etag=response.header("ETag") or params.get("if_none_match"))
        return super().parse(response, params)
