from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import FailureKind
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures
from telemetry.ocsf.validation import find_nested_failures


class Actor(SchemaObject):
    """The user, application or service that initiated or performed an activity.

    This is not the threat actor of a campaign.
    """

    application_name: str | None = Field(
        default=None,
        alias="app_name",
        description="The client application or service that initiated the activity",
    )
    application_id: str | None = Field(
        default=None,
        alias="app_uid",
        description="The unique identifier of the client application or service that initiated the activity",
    )
    user: User | None = Field(
        default=None,
        description="The user that initiated the activity or the user context from which it was initiated",
    )

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_identity_failures(
                {"app_name": self.application_name, "app_uid": self.application_id, "user": self.user},
                kind=FailureKind.MISSING_ACTOR_IDENTITY,
            ),
            *find_nested_failures("user", self.user),
        )
