"""Pydantic base classes for every object in the event model.

FrozenModel is used for values that never change once built (enumeration members,
validation failures, configuration). SchemaObject is used for everything that is
projected onto the schema's JSON representation: events and their nested objects.
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import SerializerFunctionWrapHandler
from pydantic import model_serializer


class FrozenModel(BaseModel):
    """Base class for immutable pydantic models that prevent attribute mutation after construction."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=False,
    )


class SchemaObject(BaseModel):
    """Base class for mutable objects with a JSON projection.

    Attributes are populated by their Python name or by their wire name (alias).
    Unset optional attributes hold None and are dropped from the projection
    entirely rather than written as null.
    """

    model_config = ConfigDict(
        frozen=False,
        extra="forbid",
        arbitrary_types_allowed=False,
        populate_by_name=True,
    )

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        serialized = handler(self)
        return {key: value for key, value in serialized.items() if value is not None}

    def to_projection(self) -> dict[str, Any]:
        """Return the JSON-compatible dict for this object, keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        """Return the JSON projection as a string."""
        return self.model_dump_json(by_alias=True, indent=indent)
