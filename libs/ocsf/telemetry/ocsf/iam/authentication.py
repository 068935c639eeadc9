"""Authentication events: logon and logoff attempts and the tickets and factors involved."""

from typing import Any
from typing import ClassVar
from typing import Self

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

from telemetry.ocsf.base_event import find_base_event_failures
from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.closed_enum import require_member
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.iam.iam_event import IamEvent
from telemetry.ocsf.iam.iam_event import find_actor_failures
from telemetry.ocsf.objects.auth_factor import AuthFactor
from telemetry.ocsf.objects.authentication_token import AuthenticationToken
from telemetry.ocsf.objects.certificate import Certificate
from telemetry.ocsf.objects.network_endpoint import NetworkEndpoint
from telemetry.ocsf.objects.process import Process
from telemetry.ocsf.objects.session import Session
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.primitives import NonNegativeInt
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_nested_failures
from telemetry.ocsf.validation import find_required_nested_failures


class AuthenticationActivity(ClosedEnum):
    UNKNOWN: ClassVar["AuthenticationActivity"]
    LOGON: ClassVar["AuthenticationActivity"]
    LOGOFF: ClassVar["AuthenticationActivity"]
    AUTHENTICATION_TICKET: ClassVar["AuthenticationActivity"]
    SERVICE_TICKET_REQUEST: ClassVar["AuthenticationActivity"]
    SERVICE_TICKET_RENEW: ClassVar["AuthenticationActivity"]
    PREAUTH: ClassVar["AuthenticationActivity"]


AuthenticationActivity.UNKNOWN = AuthenticationActivity.define(0, "Unknown")
AuthenticationActivity.LOGON = AuthenticationActivity.define(1, "Logon")
AuthenticationActivity.LOGOFF = AuthenticationActivity.define(2, "Logoff")
# a Kerberos authentication ticket (TGT) was requested
AuthenticationActivity.AUTHENTICATION_TICKET = AuthenticationActivity.define(3, "Authentication Ticket")
# a Kerberos service ticket was requested
AuthenticationActivity.SERVICE_TICKET_REQUEST = AuthenticationActivity.define(4, "Service Ticket Request")
AuthenticationActivity.SERVICE_TICKET_RENEW = AuthenticationActivity.define(5, "Service Ticket Renew")
# a preauthentication stage was engaged
AuthenticationActivity.PREAUTH = AuthenticationActivity.define(6, "Preauth")


class LogonType(ClosedEnum):
    """How the user logged on. Id 6 is unassigned."""

    UNKNOWN: ClassVar["LogonType"]
    SYSTEM: ClassVar["LogonType"]
    INTERACTIVE: ClassVar["LogonType"]
    NETWORK: ClassVar["LogonType"]
    BATCH: ClassVar["LogonType"]
    OS_SERVICE: ClassVar["LogonType"]
    UNLOCK: ClassVar["LogonType"]
    NETWORK_CLEARTEXT: ClassVar["LogonType"]
    NEW_CREDENTIALS: ClassVar["LogonType"]
    REMOTE_INTERACTIVE: ClassVar["LogonType"]
    CACHED_INTERACTIVE: ClassVar["LogonType"]
    CACHED_REMOTE_INTERACTIVE: ClassVar["LogonType"]
    CACHED_UNLOCK: ClassVar["LogonType"]


LogonType.UNKNOWN = LogonType.define(0, "Unknown")
# used only by the System account, for example at system startup
LogonType.SYSTEM = LogonType.define(1, "System")
# a local logon at the console
LogonType.INTERACTIVE = LogonType.define(2, "Interactive")
# a logon from the network, e.g. to a shared folder
LogonType.NETWORK = LogonType.define(3, "Network")
# used by batch servers, e.g. scheduled tasks
LogonType.BATCH = LogonType.define(4, "Batch")
LogonType.OS_SERVICE = LogonType.define(5, "OS Service")
LogonType.UNLOCK = LogonType.define(7, "Unlock")
# the password was sent over the network in cleartext
LogonType.NETWORK_CLEARTEXT = LogonType.define(8, "Network Cleartext")
# a caller cloned its token and specified new credentials for outbound connections
LogonType.NEW_CREDENTIALS = LogonType.define(9, "New Credentials")
# Terminal Services, Remote Desktop or Remote Assistance
LogonType.REMOTE_INTERACTIVE = LogonType.define(10, "Remote Interactive")
# logged on with locally cached credentials, the domain controller was not contacted
LogonType.CACHED_INTERACTIVE = LogonType.define(11, "Cached Interactive")
LogonType.CACHED_REMOTE_INTERACTIVE = LogonType.define(12, "Cached Remote Interactive")
LogonType.CACHED_UNLOCK = LogonType.define(13, "Cached Unlock")


class AuthProtocol(ClosedEnum):
    """The authentication protocol used by an authentication attempt."""

    UNKNOWN: ClassVar["AuthProtocol"]
    NTLM: ClassVar["AuthProtocol"]
    KERBEROS: ClassVar["AuthProtocol"]
    DIGEST: ClassVar["AuthProtocol"]
    OPENID: ClassVar["AuthProtocol"]
    SAML: ClassVar["AuthProtocol"]
    OAUTH_2_0: ClassVar["AuthProtocol"]
    PAP: ClassVar["AuthProtocol"]
    CHAP: ClassVar["AuthProtocol"]
    EAP: ClassVar["AuthProtocol"]
    RADIUS: ClassVar["AuthProtocol"]


AuthProtocol.UNKNOWN = AuthProtocol.define(0, "Unknown")
AuthProtocol.NTLM = AuthProtocol.define(1, "NTLM")
AuthProtocol.KERBEROS = AuthProtocol.define(2, "Kerberos")
AuthProtocol.DIGEST = AuthProtocol.define(3, "Digest")
AuthProtocol.OPENID = AuthProtocol.define(4, "OpenID")
AuthProtocol.SAML = AuthProtocol.define(5, "SAML")
AuthProtocol.OAUTH_2_0 = AuthProtocol.define(6, "OAUTH 2.0")
AuthProtocol.PAP = AuthProtocol.define(7, "PAP")
AuthProtocol.CHAP = AuthProtocol.define(8, "CHAP")
AuthProtocol.EAP = AuthProtocol.define(9, "EAP")
AuthProtocol.RADIUS = AuthProtocol.define(10, "RADIUS")


class AuthenticationEvent(IamEvent):
    """Reports authentication session activities such as user attempts a logon or logoff, successfully or not.

    The logon type defaults to Unknown until using_logon_type() is called. The auth
    protocol is left unset until using_auth_protocol() is called.
    """

    CLASS_ID: ClassVar[int] = 3002
    CLASS_NAME: ClassVar[str] = "Authentication"
    Activity: ClassVar[type[AuthenticationActivity]] = AuthenticationActivity

    user: User = Field(description="The subject (user/role or account) to authenticate")
    session_duration: NonNegativeInt | None = Field(
        default=None,
        description="The duration of the authenticated session, in milliseconds",
    )
    is_mfa: bool | None = Field(default=None, description="Whether multi factor authentication was used")
    is_new_logon: bool | None = Field(default=None, description="Whether the logon is a new logon session")
    is_remote: bool | None = Field(default=None, description="Whether the authentication was remote")
    is_cleartext: bool | None = Field(
        default=None,
        description="Whether the credentials were passed in clear text. This indicates a security risk",
    )
    auth_factors: list[AuthFactor] | None = Field(
        default=None,
        description="The factors used during authentication, in the order they were presented",
    )
    session: Session | None = Field(default=None, description="The authenticated user or service session")
    src_endpoint: NetworkEndpoint | None = Field(
        default=None,
        description="The endpoint from which the authentication was requested",
    )
    dst_endpoint: NetworkEndpoint | None = Field(
        default=None,
        description="The endpoint to which the authentication was targeted",
    )
    authentication_token: AuthenticationToken | None = Field(
        default=None,
        description="The token used or issued during the authentication",
    )
    logon_process: Process | None = Field(default=None, description="The trusted process that validated the request")
    certificate: Certificate | None = Field(default=None, description="The certificate used during the authentication")

    _logon_type: LogonType = PrivateAttr(default=LogonType.UNKNOWN)
    _auth_protocol: AuthProtocol | None = PrivateAttr(default=None)

    def __init__(self, user: User, activity: AuthenticationActivity, **data: Any) -> None:
        if user is None:
            raise MissingPrimarySubjectError(type(self).__name__, "user")
        super().__init__(activity, user=user, **data)

    def using_logon_type(self, logon_type: LogonType) -> Self:
        """Set logon_type and logon_type_id together."""
        self._logon_type = require_member(logon_type, LogonType)
        return self

    def using_auth_protocol(self, auth_protocol: AuthProtocol) -> Self:
        """Set auth_protocol and auth_protocol_id together."""
        self._auth_protocol = require_member(auth_protocol, AuthProtocol)
        return self

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_base_event_failures(self),
            *find_actor_failures(self),
            *find_required_nested_failures("user", self.user),
            *find_nested_failures("src_endpoint", self.src_endpoint),
            *find_nested_failures("dst_endpoint", self.dst_endpoint),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logon_type(self) -> str:
        return self._logon_type.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logon_type_id(self) -> int:
        return self._logon_type.id

    @computed_field  # type: ignore[prop-decorator]
    @property
    def auth_protocol(self) -> str | None:
        return None if self._auth_protocol is None else self._auth_protocol.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def auth_protocol_id(self) -> int | None:
        return None if self._auth_protocol is None else self._auth_protocol.id
