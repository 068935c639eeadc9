from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures


class NetworkEndpoint(SchemaObject):
    """A network endpoint, identified by at least one of its IP address, hostname or MAC address."""

    ip: str | None = Field(default=None, description="The IP address of the endpoint")
    hostname: str | None = Field(default=None, description="The hostname of the endpoint")
    port: int | None = Field(default=None, description="The port number used by the endpoint")
    ip_version: int | None = Field(default=None, description="The IP version (4 or 6)")
    mac: str | None = Field(default=None, description="The MAC address of the endpoint")
    domain: str | None = Field(default=None, description="The domain name of the endpoint")

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_identity_failures({"ip": self.ip, "hostname": self.hostname, "mac": self.mac})
