"""Shared base for models sent to the ingress API."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class IngressModel(BaseModel):
    """Base for request bodies sent to the ingress API.

    Fields left as ``None`` are omitted from the serialized body rather than
    sent as ``null``. Only the model's own fields are filtered, so nested
    free-form values such as baggage are sent untouched.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_none(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict sent over the wire."""
        return self.model_dump(mode="json", by_alias=True)
