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


class GroupManagementActivity(ClosedEnum):
    UNKNOWN: ClassVar["GroupManagementActivity"]
    ASSIGN_PRIVILEGES: ClassVar["GroupManagementActivity"]
    REVOKE_PRIVILEGES: ClassVar["GroupManagementActivity"]
    ADD_USER: ClassVar["GroupManagementActivity"]
    REMOVE_USER: ClassVar["GroupManagementActivity"]
    DELETE: ClassVar["GroupManagementActivity"]
    CREATE: ClassVar["GroupManagementActivity"]


GroupManagementActivity.UNKNOWN = GroupManagementActivity.define(0, "Unknown")
GroupManagementActivity.ASSIGN_PRIVILEGES = GroupManagementActivity.define(1, "Assign Privileges")
GroupManagementActivity.REVOKE_PRIVILEGES = GroupManagementActivity.define(2, "Revoke Privileges")
GroupManagementActivity.ADD_USER = GroupManagementActivity.define(3, "Add User")
GroupManagementActivity.REMOVE_USER = GroupManagementActivity.define(4, "Remove User")
GroupManagementActivity.DELETE = GroupManagementActivity.define(5, "Delete")
GroupManagementActivity.CREATE = GroupManagementActivity.define(6, "Create")


class GroupManagementEvent(IamEvent):
    """Reports management of a group: membership and privilege changes, creation and deletion."""

    CLASS_ID: ClassVar[int] = 3006
    CLASS_NAME: ClassVar[str] = "Group Management"
    Activity: ClassVar[type[GroupManagementActivity]] = GroupManagementActivity

    group: Group = Field(description="The group that was managed")
    # set for the membership activities (Add User, Remove User)
    user: User | None = Field(default=None, description="The user that was added to or removed from the group")
    privileges: list[str] | None = Field(
        default=None,
        description="The privileges assigned to or revoked from the group",
    )

    def __init__(self, group: Group, activity: GroupManagementActivity, **data: Any) -> None:
        if group is None:
            raise MissingPrimarySubjectError(type(self).__name__, "group")
        super().__init__(activity, group=group, **data)

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("group", self.group),
            *find_nested_failures("user", self.user),
        )
