from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures


class Group(SchemaObject):
    """A group in an identity management system."""

    uid: str | None = Field(default=None, description="The unique identifier of the group")
    name: str | None = Field(default=None, description="The name of the group")
    type: str | None = Field(default=None, description="The type of the group")
    domain: str | None = Field(default=None, description="The domain to which the group belongs")
    privileges: list[str] | None = Field(default=None, description="Additional privileges of the group")
    description: str | None = Field(default=None, alias="desc", description="The group description")

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_identity_failures({"uid": self.uid, "name": self.name})
