from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Self

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.closed_enum import require_member
from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.account import Account
from telemetry.ocsf.objects.group import Group
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures
from telemetry.ocsf.validation import find_item_failures
from telemetry.ocsf.validation import find_nested_failures


class UserType(ClosedEnum):
    """The kind of user account."""

    UNKNOWN: ClassVar[UserType]
    USER: ClassVar[UserType]
    ADMIN: ClassVar[UserType]
    SYSTEM: ClassVar[UserType]


UserType.UNKNOWN = UserType.define(0, "Unknown")
# Regular user account.
UserType.USER = UserType.define(1, "User")
# Admin/root user account.
UserType.ADMIN = UserType.define(2, "Admin")
# e.g. Windows computer accounts with a trailing dollar sign ($)
UserType.SYSTEM = UserType.define(3, "System")


class User(SchemaObject):
    """A user/person or a security principal.

    A user is identified by at least one of uid, name or account. Its account and
    groups are validated along with it.
    """

    uid: str | None = Field(
        default=None,
        description="The unique user identifier. For example, the Windows user SID, ActiveDirectory DN or AWS user ARN",
    )
    name: str | None = Field(default=None, description="The username. For example, janedoe1")
    account: Account | None = Field(default=None, description="The user's account or the account associated with the user")
    domain: str | None = Field(
        default=None,
        description="The domain where the user is defined. For example: the LDAP or Active Directory domain",
    )
    full_name: str | None = Field(default=None, description="The full name of the user")
    email: str | None = Field(default=None, alias="email_addr", description="The email address of the user")
    groups: list[Group] | None = Field(default=None, description="The groups to which the user belongs")
    attributes: dict[str, Any] | None = Field(default=None, description="Additional attributes of the user")

    _user_type: UserType | None = PrivateAttr(default=None)

    def of_type(self, user_type: UserType) -> Self:
        """Set type and type_id together."""
        self._user_type = require_member(user_type, UserType)
        return self

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_identity_failures({"uid": self.uid, "name": self.name, "account": self.account}),
            *find_nested_failures("account", self.account),
            *find_item_failures("groups", self.groups),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> str | None:
        return None if self._user_type is None else self._user_type.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_id(self) -> int | None:
        return None if self._user_type is None else self._user_type.id
