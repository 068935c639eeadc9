from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.primitives import EpochMillis


class AuthenticationToken(SchemaObject):
    """A token issued or presented during an authentication flow (JWT, OAuth, SAML, ...)."""

    uid: str | None = None
    type: str | None = Field(default=None, description="The type of the token, e.g. JWT")
    issued_time: EpochMillis | None = None
    expiration_time: EpochMillis | None = None
    issuer: str | None = None
    subject: str | None = None
    audience: str | None = Field(default=None, description="The audience for which the token is intended")
