from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures


class Product(SchemaObject):
    """Characteristics of a software product, e.g. the product reporting an event."""

    uid: str | None = Field(default=None, description="The unique identifier of the product")
    name: str | None = Field(default=None, description="The name of the product")
    version: str | None = Field(
        default=None,
        description="The version of the product, as defined by the event source. For example: 2013.1.3-beta",
    )
    vendor_name: str | None = Field(default=None, description="The vendor name of the product")

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_identity_failures({"uid": self.uid, "name": self.name})
