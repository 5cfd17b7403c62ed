"""Pydantic-backed wire serializer."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import SchemaMismatchError

ModelT = TypeVar("ModelT", bound=BaseModel)


class Serializer:
    """Maps models to and from JSON bytes using their camelCase aliases."""

    def serialize(self, obj: BaseModel) -> bytes:
        """Serialize a model for a request body.

        Fields listed in the model's ``READ_ONLY_FIELDS`` are dropped, as are
        unset optional values.
        """
        exclude = set(getattr(obj, "READ_ONLY_FIELDS", ()))
        return obj.model_dump_json(by_alias=True, exclude_none=True, exclude=exclude).encode()

    def deserialize(self, data: bytes | str, schema: type[ModelT]) -> ModelT:
        """Parse a response body into ``schema``.

        Raises:
            SchemaMismatchError: If the body is not valid JSON or does not
                match the schema
        """
        if isinstance(data, bytes) and not data.strip():
            raise SchemaMismatchError(f"Empty body for {schema.__name__}", schema=schema.__name__)
        try:
            return schema.model_validate_json(data)
        except ValidationError as e:
            raise SchemaMismatchError(
                f"Invalid {schema.__name__} payload: {e}", schema=schema.__name__
            ) from e

