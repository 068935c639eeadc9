"""The attribute set, derived fields and fluent mutators shared by every event class.

An event's classification (category, class, activity) is fixed when it is built: the
category and class come from class constants, the activity is a frozen field set by the
constructor. Everything derived from them (type_name, type_uid, ...) is computed on
read, so it can never disagree with its inputs.
"""

from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any
from typing import ClassVar
from typing import Final
from typing import Self

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field
from pydantic import field_validator

from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.closed_enum import require_member
from telemetry.ocsf.errors import InvalidTimezoneOffsetError
from telemetry.ocsf.errors import NaiveTimestampError
from telemetry.ocsf.event_enums import Severity
from telemetry.ocsf.event_enums import Status
from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.metadata import Metadata
from telemetry.ocsf.primitives import MAX_TIMEZONE_OFFSET_MINUTES
from telemetry.ocsf.primitives import EpochMillis
from telemetry.ocsf.primitives import NonNegativeInt
from telemetry.ocsf.pure import pure
from telemetry.ocsf.validation import FailureKind
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_missing_field_failures

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Event declares a "type" attribute, so its own annotations must not spell type[...].
ActivityFamily = type[ClosedEnum]

# An event whose time is still this value has no occurrence time.
UNSET_TIME: Final[int] = 0


class Event(SchemaObject):
    """Base class of every event class.

    Subclasses set the class constants below; Activity is the ClosedEnum family whose
    members are the activities of that class. Construct an event with an activity of
    that family:

        event = AccountChangeEvent(user, AccountChangeEvent.Activity.PASSWORD_CHANGE)

    Construction defaults status and severity to Unknown and the occurrence time to now
    (UTC). The fluent mutators return the event itself so calls can be chained.
    """

    CATEGORY_ID: ClassVar[int]
    CATEGORY_NAME: ClassVar[str]
    CLASS_ID: ClassVar[int]
    CLASS_NAME: ClassVar[str]
    Activity: ClassVar[ActivityFamily]

    activity_id: int = Field(frozen=True, description="The normalized identifier of the activity that triggered the event")
    activity_name: str = Field(frozen=True, description="The event activity name, as defined by the activity_id")
    count: NonNegativeInt | None = Field(
        default=None,
        description="The number of times that events in the same logical group occurred during the event time window",
    )
    start_time: EpochMillis | None = Field(default=None, description="The start time of a time period (epoch milliseconds)")
    end_time: EpochMillis | None = Field(default=None, description="The end time of a time period (epoch milliseconds)")
    duration: NonNegativeInt | None = Field(
        default=None,
        description="The event duration or aggregate time in milliseconds, used with start_time and end_time",
    )
    message: str | None = Field(default=None, description="The description of the event, as defined by the source")
    raw_data: str | None = Field(default=None, description="The raw event/finding data as received from the source")
    status_detail: str | None = Field(
        default=None,
        description="The status detail, e.g. the reason for a failure as reported by the source",
    )
    status_code: str | None = Field(
        default=None,
        description="The event status code, as reported by the event source. For example: 0x12 or 403",
    )
    metadata: Metadata = Field(
        default_factory=Metadata,
        frozen=True,
        description="The metadata associated with the event",
    )
    unmapped_fields: dict[str, Any] | None = Field(
        default=None,
        alias="unmapped",
        description="Source specific attributes that are not mapped onto the schema",
    )

    _status: Status = PrivateAttr(default=Status.UNKNOWN)
    _severity: Severity = PrivateAttr(default=Severity.UNKNOWN)
    _time: int = PrivateAttr(default=UNSET_TIME)
    _timezone_offset: int = PrivateAttr(default=0)

    @field_validator("unmapped_fields")
    @classmethod
    def _empty_unmapped_is_unset(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        return value or None

    def __init__(self, activity: ClosedEnum, /, **data: Any) -> None:
        activity = require_member(activity, type(self).Activity)
        super().__init__(activity_id=activity.id, activity_name=activity.name, **data)
        self.occurred_at(datetime.now(timezone.utc))

    def with_status(self, status: Status) -> Self:
        """Set status and status_id together."""
        self._status = require_member(status, Status)
        return self

    def with_severity(self, severity: Severity) -> Self:
        """Set severity and severity_id together."""
        self._severity = require_member(severity, Severity)
        return self

    def occurred_at(self, when: datetime) -> Self:
        """Set time and timezone_offset together from one timezone-aware instant."""
        offset = when.utcoffset()
        if offset is None:
            raise NaiveTimestampError(when)
        offset_minutes = int(offset.total_seconds()) // 60
        if abs(offset_minutes) > MAX_TIMEZONE_OFFSET_MINUTES:
            raise InvalidTimezoneOffsetError(offset_minutes, MAX_TIMEZONE_OFFSET_MINUTES)
        self._time = (when - _EPOCH) // timedelta(milliseconds=1)
        self._timezone_offset = offset_minutes
        return self

    def add_unmapped_field(self, name: str, value: Any) -> Self:
        """Record a source specific attribute. Writing the same name again replaces its value."""
        if self.unmapped_fields is None:
            self.unmapped_fields = {}
        self.unmapped_fields[name] = value
        return self

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return find_base_event_failures(self)

    def is_valid(self) -> bool:
        return not self.find_validation_failures()

    @computed_field(alias="category_uid")  # type: ignore[prop-decorator]
    @property
    def category_id(self) -> int:
        return self.CATEGORY_ID

    @computed_field(alias="category_name")  # type: ignore[prop-decorator]
    @property
    def category(self) -> str:
        return self.CATEGORY_NAME

    @computed_field(alias="class_uid")  # type: ignore[prop-decorator]
    @property
    def class_id(self) -> int:
        return self.CLASS_ID

    @computed_field  # type: ignore[prop-decorator]
    @property
    def class_name(self) -> str:
        return self.CLASS_NAME

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> str:
        return self._status.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status_id(self) -> int:
        return self._status.id

    @computed_field  # type: ignore[prop-decorator]
    @property
    def severity(self) -> str:
        return self._severity.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def severity_id(self) -> int:
        return self._severity.id

    @computed_field  # type: ignore[prop-decorator]
    @property
    def time(self) -> int:
        """The occurrence time, in milliseconds since the epoch (UTC)."""
        return self._time

    @computed_field  # type: ignore[prop-decorator]
    @property
    def timezone_offset(self) -> int:
        """Minutes ahead of (or behind) UTC at the place the event occurred."""
        return self._timezone_offset

    @computed_field  # type: ignore[prop-decorator]
    @property
    def raw_data_size(self) -> int | None:
        """The size of raw_data in bytes (UTF-8)."""
        return None if self.raw_data is None else len(self.raw_data.encode("utf-8"))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_uid(self) -> int:
        return self.CLASS_ID * 100 + self.activity_id

    @computed_field(alias="type_name")  # type: ignore[prop-decorator]
    @property
    def type(self) -> str:
        return f"{self.CLASS_NAME}: {self.activity_name}"


@pure
def find_base_event_failures(event: Event) -> tuple[ValidationFailure, ...]:
    """The checks every event shares: classification names, status, severity and time."""
    time_failures: tuple[ValidationFailure, ...] = ()
    if event.time == UNSET_TIME:
        time_failures = (
            ValidationFailure(kind=FailureKind.MISSING_FIELD, message="time is required", field_paths=("time",)),
        )
    return (
        *find_missing_field_failures(
            {
                "activity_name": event.activity_name,
                "class_name": event.class_name,
                "status": event.status,
                "severity": event.severity,
            }
        ),
        *time_failures,
    )


class BaseEventActivity(ClosedEnum):
    """Activities of the uncategorized base event."""

    UNKNOWN: ClassVar["BaseEventActivity"]


BaseEventActivity.UNKNOWN = BaseEventActivity.define(0, "Unknown")


class BaseEvent(Event):
    """An event that does not belong to any specific category or class."""

    CATEGORY_ID: ClassVar[int] = 0
    CATEGORY_NAME: ClassVar[str] = "Uncategorized"
    CLASS_ID: ClassVar[int] = 0
    CLASS_NAME: ClassVar[str] = "Base Event"
    Activity: ClassVar[type[BaseEventActivity]] = BaseEventActivity

    def __init__(self, activity: BaseEventActivity, /, **data: Any) -> None:
        super().__init__(activity, **data)
