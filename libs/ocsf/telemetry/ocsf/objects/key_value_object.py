from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.primitives import NonEmptyStr
from telemetry.ocsf.validation import FailureKind
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures


class KeyValueObject(SchemaObject):
    """A generic {key: value} pair. Use values instead of value when a key has several values."""

    name: NonEmptyStr = Field(description="The name of the key")
    value: str | None = Field(default=None, description="The value associated to the key")
    values: list[str] | None = Field(default=None, description="The values associated to the key")

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_identity_failures({"value": self.value, "values": self.values}, kind=FailureKind.MISSING_VALUE)
