from __future__ import annotations

from typing import ClassVar
from typing import Self

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.closed_enum import require_member
from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.key_value_object import KeyValueObject
from telemetry.ocsf.primitives import EpochMillis
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures
from telemetry.ocsf.validation import find_item_failures


class AccountType(ClosedEnum):
    """The kind of account, e.g. an LDAP, Windows or cloud provider account."""

    UNKNOWN: ClassVar[AccountType]
    LDAP_ACCOUNT: ClassVar[AccountType]
    WINDOWS_ACCOUNT: ClassVar[AccountType]
    AWS_IAM_USER: ClassVar[AccountType]
    AWS_IAM_ROLE: ClassVar[AccountType]
    GCP_ACCOUNT: ClassVar[AccountType]
    AZURE_AD_ACCOUNT: ClassVar[AccountType]
    MAC_OS_ACCOUNT: ClassVar[AccountType]
    APPLE_ACCOUNT: ClassVar[AccountType]
    LINUX_ACCOUNT: ClassVar[AccountType]
    AWS_ACCOUNT: ClassVar[AccountType]
    GCP_PROJECT: ClassVar[AccountType]
    OCI_COMPARTMENT: ClassVar[AccountType]
    AZURE_SUBSCRIPTION: ClassVar[AccountType]
    SALESFORCE_ACCOUNT: ClassVar[AccountType]
    GOOGLE_WORKSPACE: ClassVar[AccountType]
    SERVICENOW_INSTANCE: ClassVar[AccountType]
    M365_TENANT: ClassVar[AccountType]
    EMAIL_ACCOUNT: ClassVar[AccountType]


AccountType.UNKNOWN = AccountType.define(0, "Unknown")
AccountType.LDAP_ACCOUNT = AccountType.define(1, "LDAP Account")
AccountType.WINDOWS_ACCOUNT = AccountType.define(2, "Windows Account")
AccountType.AWS_IAM_USER = AccountType.define(3, "AWS IAM User")
AccountType.AWS_IAM_ROLE = AccountType.define(4, "AWS IAM Role")
AccountType.GCP_ACCOUNT = AccountType.define(5, "GCP Account")
AccountType.AZURE_AD_ACCOUNT = AccountType.define(6, "Azure AD Account")
AccountType.MAC_OS_ACCOUNT = AccountType.define(7, "MacOS Account")
AccountType.APPLE_ACCOUNT = AccountType.define(8, "Apple Account")
AccountType.LINUX_ACCOUNT = AccountType.define(9, "Linux Account")
AccountType.AWS_ACCOUNT = AccountType.define(10, "AWS Account")
AccountType.GCP_PROJECT = AccountType.define(11, "GCP Project")
AccountType.OCI_COMPARTMENT = AccountType.define(12, "OCI Compartment")
AccountType.AZURE_SUBSCRIPTION = AccountType.define(13, "Azure Subscription")
AccountType.SALESFORCE_ACCOUNT = AccountType.define(14, "Salesforce Account")
AccountType.GOOGLE_WORKSPACE = AccountType.define(15, "Google Workspace")
AccountType.SERVICENOW_INSTANCE = AccountType.define(16, "Servicenow Instance")
AccountType.M365_TENANT = AccountType.define(17, "M365 Tenant")
AccountType.EMAIL_ACCOUNT = AccountType.define(18, "Email Account")


class Account(SchemaObject):
    """The characteristics of an account.

    The Windows and Linux extension attributes are only meaningful for accounts of the
    corresponding type and are otherwise left unset.
    """

    uid: str | None = Field(
        default=None,
        description="The unique identifier of the account, e.g. AWS Account ID, GCP Project ID or M365 Tenant UID",
    )
    name: str | None = Field(default=None, description="The name of the account")
    labels: list[str] | None = Field(default=None, description="The list of labels associated to the account")
    tags: list[KeyValueObject] | None = Field(
        default=None,
        description="The list of tags; {key:value} pairs associated to the account",
    )

    # Windows extension
    sid: str | None = Field(default=None, description="The security identifier (SID) of the account")
    sam_account_name: str | None = Field(default=None, description="The Security Account Manager (SAM) account name")
    primary_group_sid: str | None = Field(default=None, description="The SID of the primary group")
    password_last_set_time: EpochMillis | None = Field(default=None, description="When the password was last set (epoch milliseconds)")
    flags: list[str] | None = Field(default=None, description="The account flags")

    # Linux extension
    home_directory: str | None = Field(default=None, description="The home directory of the account")
    shell: str | None = Field(default=None, description="The login shell of the account")
    uid_number: int | None = Field(default=None, description="The user ID (UID) number of the account")
    gid_number: int | None = Field(default=None, description="The group ID (GID) number of the account")

    _account_type: AccountType | None = PrivateAttr(default=None)

    def of_type(self, account_type: AccountType) -> Self:
        """Set type and type_id together."""
        self._account_type = require_member(account_type, AccountType)
        return self

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_identity_failures({"uid": self.uid, "name": self.name}),
            *find_item_failures("tags", self.tags),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> str | None:
        return None if self._account_type is None else self._account_type.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_id(self) -> int | None:
        return None if self._account_type is None else self._account_type.id
