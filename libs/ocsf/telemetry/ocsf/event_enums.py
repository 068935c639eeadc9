"""Enumerations shared by every event class."""

from __future__ import annotations

from typing import ClassVar

from telemetry.ocsf.closed_enum import ClosedEnum


class Status(ClosedEnum):
    """The normalized outcome of the event."""

    UNKNOWN: ClassVar[Status]
    SUCCESS: ClassVar[Status]
    FAILURE: ClassVar[Status]


Status.UNKNOWN = Status.define(0, "Unknown")
# e.g. a successful logon attempt
Status.SUCCESS = Status.define(1, "Success")
# e.g. a failed logon attempt
Status.FAILURE = Status.define(2, "Failure")


class Severity(ClosedEnum):
    """The normalized severity: the effort and expense required to manage and resolve an event.

    Smaller ids represent lower impact events, larger ids higher impact events.
    """

    UNKNOWN: ClassVar[Severity]
    INFORMATIONAL: ClassVar[Severity]
    LOW: ClassVar[Severity]
    MEDIUM: ClassVar[Severity]
    HIGH: ClassVar[Severity]
    CRITICAL: ClassVar[Severity]
    FATAL: ClassVar[Severity]


Severity.UNKNOWN = Severity.define(0, "Unknown")
# No action required.
Severity.INFORMATIONAL = Severity.define(1, "Informational")
# The user decides if action is needed.
Severity.LOW = Severity.define(2, "Low")
# Action is required but the situation is not serious at this time.
Severity.MEDIUM = Severity.define(3, "Medium")
# Action is required immediately.
Severity.HIGH = Severity.define(4, "High")
# Action is required immediately and the scope is broad.
Severity.CRITICAL = Severity.define(5, "Critical")
# An error occurred but it is too late to take remedial action.
Severity.FATAL = Severity.define(6, "Fatal")
