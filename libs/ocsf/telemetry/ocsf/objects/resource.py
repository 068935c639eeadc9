from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures


class Resource(SchemaObject):
    """A resource that can be accessed, such as a file share, bucket or API."""

    uid: str | None = Field(default=None, description="The unique identifier of the resource")
    name: str | None = Field(default=None, description="The name of the resource")
    type: str | None = Field(default=None, description="The resource type as defined by the event source")

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_identity_failures({"uid": self.uid, "name": self.name})
