from __future__ import annotations

from pydantic import Field

from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.user import User


class Process(SchemaObject):
    """An operating system process, e.g. the logon process of an authentication."""

    pid: int | None = Field(default=None, description="The process identifier")
    name: str | None = None
    path: str | None = Field(default=None, description="The path to the process executable")
    cmd_line: str | None = Field(default=None, description="The command line used to launch the process")
    user: User | None = Field(default=None, description="The user that owns the process")
    parent: Process | None = None
