from typing import Any
from typing import ClassVar

from pydantic import Field

from telemetry.ocsf.base_event import find_base_event_failures
from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.iam.iam_event import IamEvent
from telemetry.ocsf.iam.iam_event import find_actor_failures
from telemetry.ocsf.objects.managed_entity import ManagedEntity
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_required_nested_failures


class EntityManagementActivity(ClosedEnum):
    UNKNOWN: ClassVar["EntityManagementActivity"]
    CREATE: ClassVar["EntityManagementActivity"]
    READ: ClassVar["EntityManagementActivity"]
    UPDATE: ClassVar["EntityManagementActivity"]
    DELETE: ClassVar["EntityManagementActivity"]
    MOVE: ClassVar["EntityManagementActivity"]
    ENROLL: ClassVar["EntityManagementActivity"]
    UNENROLL: ClassVar["EntityManagementActivity"]
    ENABLE: ClassVar["EntityManagementActivity"]
    DISABLE: ClassVar["EntityManagementActivity"]
    ACTIVATE: ClassVar["EntityManagementActivity"]
    DEACTIVATE: ClassVar["EntityManagementActivity"]
    SUSPEND: ClassVar["EntityManagementActivity"]
    RESUME: ClassVar["EntityManagementActivity"]


EntityManagementActivity.UNKNOWN = EntityManagementActivity.define(0, "Unknown")
EntityManagementActivity.CREATE = EntityManagementActivity.define(1, "Create")
EntityManagementActivity.READ = EntityManagementActivity.define(2, "Read")
EntityManagementActivity.UPDATE = EntityManagementActivity.define(3, "Update")
EntityManagementActivity.DELETE = EntityManagementActivity.define(4, "Delete")
EntityManagementActivity.MOVE = EntityManagementActivity.define(5, "Move")
EntityManagementActivity.ENROLL = EntityManagementActivity.define(6, "Enroll")
EntityManagementActivity.UNENROLL = EntityManagementActivity.define(7, "Unenroll")
EntityManagementActivity.ENABLE = EntityManagementActivity.define(8, "Enable")
EntityManagementActivity.DISABLE = EntityManagementActivity.define(9, "Disable")
EntityManagementActivity.ACTIVATE = EntityManagementActivity.define(10, "Activate")
EntityManagementActivity.DEACTIVATE = EntityManagementActivity.define(11, "Deactivate")
EntityManagementActivity.SUSPEND = EntityManagementActivity.define(12, "Suspend")
EntityManagementActivity.RESUME = EntityManagementActivity.define(13, "Resume")


class EntityManagementEvent(IamEvent):
    """Reports activity on a managed entity (user, device, policy, ...) by a management system.

    The entity is fixed when the event is built and cannot be replaced afterwards.
    """

    CLASS_ID: ClassVar[int] = 3004
    CLASS_NAME: ClassVar[str] = "Entity Management"
    Activity: ClassVar[type[EntityManagementActivity]] = EntityManagementActivity

    entity: ManagedEntity = Field(frozen=True, description="The managed entity that was the target of the activity")
    comment: str | None = Field(default=None, description="The user provided comment about the activity")

    def __init__(self, entity: ManagedEntity, activity: EntityManagementActivity, **data: Any) -> None:
        if entity is None:
            raise MissingPrimarySubjectError(type(self).__name__, "entity")
        super().__init__(activity, entity=entity, **data)

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("entity", self.entity),
        )
