from typing import Final

from pydantic import Field
from pydantic import computed_field

from telemetry.ocsf.config import ReportingConfig
from telemetry.ocsf.config import get_default_reporting_config
from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.product import Product

SCHEMA_VERSION: Final[str] = "1.5.0"


def _default_product() -> Product:
    return get_default_reporting_config().product.model_copy(deep=True)


class Metadata(SchemaObject):
    """Metadata associated with an event: the schema version and the product that reported it.

    Each event owns its own copy of the reporting product, so mutating one event's
    metadata never leaks into another event.
    """

    labels: list[str] | None = Field(
        default=None,
        description='The list of labels attached to the event. For example: ["sample", "dev"]',
    )
    product: Product = Field(
        default_factory=_default_product,
        frozen=True,
        description="The product that reported the event",
    )

    @classmethod
    def from_config(cls, config: ReportingConfig) -> "Metadata":
        """Build metadata for an explicitly supplied reporting configuration."""
        return cls(product=config.product.model_copy(deep=True))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def version(self) -> str:
        """The version of the schema the event conforms to (SemVer)."""
        return SCHEMA_VERSION
