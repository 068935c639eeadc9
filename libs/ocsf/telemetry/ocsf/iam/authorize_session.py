from typing import Any
from typing import ClassVar

from pydantic import Field

from telemetry.ocsf.base_event import find_base_event_failures
from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.iam.iam_event import IamEvent
from telemetry.ocsf.iam.iam_event import find_actor_failures
from telemetry.ocsf.objects.group import Group
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_nested_failures
from telemetry.ocsf.validation import find_required_nested_failures


class AuthorizeSessionActivity(ClosedEnum):
    UNKNOWN: ClassVar["AuthorizeSessionActivity"]
    ASSIGN_PRIVILEGES: ClassVar["AuthorizeSessionActivity"]
    ASSIGN_GROUPS: ClassVar["AuthorizeSessionActivity"]


AuthorizeSessionActivity.UNKNOWN = AuthorizeSessionActivity.define(0, "Unknown")
# Assign special privileges to a new logon.
AuthorizeSessionActivity.ASSIGN_PRIVILEGES = AuthorizeSessionActivity.define(1, "Assign Privileges")
# Assign special groups to a new logon.
AuthorizeSessionActivity.ASSIGN_GROUPS = AuthorizeSessionActivity.define(2, "Assign Groups")


class AuthorizeSessionEvent(IamEvent):
    """Reports privileges or groups assigned to a new user session, usually at logon time."""

    CLASS_ID: ClassVar[int] = 3003
    CLASS_NAME: ClassVar[str] = "Authorize Session"
    Activity: ClassVar[type[AuthorizeSessionActivity]] = AuthorizeSessionActivity

    user: User = Field(description="The user to which the new session was assigned")
    group: Group | None = Field(default=None, description="The group assigned to the new session")
    privileges: list[str] | None = Field(default=None, description="The privileges assigned to the new session")

    def __init__(self, user: User, activity: AuthorizeSessionActivity, **data: Any) -> None:
        if user is None:
            raise MissingPrimarySubjectError(type(self).__name__, "user")
        super().__init__(activity, user=user, **data)

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("user", self.user),
            *find_nested_failures("group", self.group),
        )
