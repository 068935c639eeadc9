from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.primitives import EpochMillis


class Certificate(SchemaObject):
    """A digital certificate used for authentication or encryption."""

    serial_number: str | None = None
    subject: str | None = None
    issuer: str | None = None
    valid_from: EpochMillis | None = Field(default=None, description="Start of the validity period (epoch milliseconds)")
    valid_to: EpochMillis | None = Field(default=None, description="End of the validity period (epoch milliseconds)")
    thumbprint: str | None = Field(default=None, description="The certificate thumbprint/fingerprint")
    algorithm: str | None = Field(default=None, description="The public key algorithm used in the certificate")
