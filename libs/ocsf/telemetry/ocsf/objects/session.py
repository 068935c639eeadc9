from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.primitives import EpochMillis
from telemetry.ocsf.primitives import NonNegativeInt
from telemetry.ocsf.objects.user import User


class Session(SchemaObject):
    """An authenticated user session."""

    uid: str | None = Field(default=None, description="The unique identifier of the session")
    start_time: EpochMillis | None = None
    end_time: EpochMillis | None = None
    duration: NonNegativeInt | None = Field(default=None, description="The duration of the session in seconds")
    user: User | None = None
    is_active: bool | None = None
    type: str | None = None
