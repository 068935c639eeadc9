from typing import Any
from typing import ClassVar

from pydantic import Field

from telemetry.ocsf.base_event import find_base_event_failures
from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.iam.iam_event import IamEvent
from telemetry.ocsf.iam.iam_event import find_actor_failures
from telemetry.ocsf.objects.resource import Resource
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_item_failures
from telemetry.ocsf.validation import find_required_nested_failures


class UserAccessManagementActivity(ClosedEnum):
    UNKNOWN: ClassVar["UserAccessManagementActivity"]
    ASSIGN_PRIVILEGES: ClassVar["UserAccessManagementActivity"]
    REVOKE_PRIVILEGES: ClassVar["UserAccessManagementActivity"]


UserAccessManagementActivity.UNKNOWN = UserAccessManagementActivity.define(0, "Unknown")
UserAccessManagementActivity.ASSIGN_PRIVILEGES = UserAccessManagementActivity.define(1, "Assign Privileges")
UserAccessManagementActivity.REVOKE_PRIVILEGES = UserAccessManagementActivity.define(2, "Revoke Privileges")


class UserAccessManagementEvent(IamEvent):
    """Reports privileges granted to or revoked from a user, optionally scoped to resources."""

    CLASS_ID: ClassVar[int] = 3005
    CLASS_NAME: ClassVar[str] = "User Access Management"
    Activity: ClassVar[type[UserAccessManagementActivity]] = UserAccessManagementActivity

    user: User = Field(description="The user to which privileges were assigned or from which they were revoked")
    resources: list[Resource] | None = Field(
        default=None,
        description="The resources to which the privileges apply",
    )
    privileges: list[str] | None = Field(default=None, description="The privileges that were assigned or revoked")

    def __init__(self, user: User, activity: UserAccessManagementActivity, **data: Any) -> None:
        if user is None:
            raise MissingPrimarySubjectError(type(self).__name__, "user")
        super().__init__(activity, user=user, **data)

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("user", self.user),
            *find_item_failures("resources", self.resources),
        )
