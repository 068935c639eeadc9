from typing import Any
from typing import ClassVar

from pydantic import Field

from telemetry.ocsf.base_event import find_base_event_failures
from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.iam.iam_event import IamEvent
from telemetry.ocsf.iam.iam_event import find_actor_failures
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_required_nested_failures


class AccountChangeActivity(ClosedEnum):
    UNKNOWN: ClassVar["AccountChangeActivity"]
    CREATE: ClassVar["AccountChangeActivity"]
    ENABLE: ClassVar["AccountChangeActivity"]
    PASSWORD_CHANGE: ClassVar["AccountChangeActivity"]
    PASSWORD_RESET: ClassVar["AccountChangeActivity"]
    DISABLE: ClassVar["AccountChangeActivity"]
    DELETE: ClassVar["AccountChangeActivity"]
    ATTACH_POLICY: ClassVar["AccountChangeActivity"]
    DETACH_POLICY: ClassVar["AccountChangeActivity"]
    LOCK: ClassVar["AccountChangeActivity"]
    MFA_FACTOR_ENABLE: ClassVar["AccountChangeActivity"]
    MFA_FACTOR_DISABLE: ClassVar["AccountChangeActivity"]
    UNLOCK: ClassVar["AccountChangeActivity"]


AccountChangeActivity.UNKNOWN = AccountChangeActivity.define(0, "Unknown")
AccountChangeActivity.CREATE = AccountChangeActivity.define(1, "Create")
AccountChangeActivity.ENABLE = AccountChangeActivity.define(2, "Enable")
AccountChangeActivity.PASSWORD_CHANGE = AccountChangeActivity.define(3, "Password Change")
AccountChangeActivity.PASSWORD_RESET = AccountChangeActivity.define(4, "Password Reset")
AccountChangeActivity.DISABLE = AccountChangeActivity.define(5, "Disable")
AccountChangeActivity.DELETE = AccountChangeActivity.define(6, "Delete")
AccountChangeActivity.ATTACH_POLICY = AccountChangeActivity.define(7, "Attach Policy")
AccountChangeActivity.DETACH_POLICY = AccountChangeActivity.define(8, "Detach Policy")
AccountChangeActivity.LOCK = AccountChangeActivity.define(9, "Lock")
AccountChangeActivity.MFA_FACTOR_ENABLE = AccountChangeActivity.define(10, "MFA Factor Enable")
AccountChangeActivity.MFA_FACTOR_DISABLE = AccountChangeActivity.define(11, "MFA Factor Disable")
AccountChangeActivity.UNLOCK = AccountChangeActivity.define(12, "Unlock")


class AccountChangeEvent(IamEvent):
    """Reports when an account is changed: created, enabled, its password changed, locked and so on."""

    CLASS_ID: ClassVar[int] = 3001
    CLASS_NAME: ClassVar[str] = "Account Change"
    Activity: ClassVar[type[AccountChangeActivity]] = AccountChangeActivity

    user: User = Field(description="The user whose account was changed")

    def __init__(self, user: User, activity: AccountChangeActivity, **data: Any) -> None:
        if user is None:
            raise MissingPrimarySubjectError(type(self).__name__, "user")
        super().__init__(activity, user=user, **data)

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("user", self.user),
        )
