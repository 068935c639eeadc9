"""The Identity & Access Management category: events about who did what to which identity."""

from typing import ClassVar
from typing import Self

from pydantic import Field

from telemetry.ocsf.base_event import Event
from telemetry.ocsf.errors import UnexpectedObjectTypeError
from telemetry.ocsf.objects.actor import Actor
from telemetry.ocsf.pure import pure
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_nested_failures


class IamEvent(Event):
    """Base class of the IAM event classes. Adds the optional actor that performed the activity."""

    CATEGORY_ID: ClassVar[int] = 3
    CATEGORY_NAME: ClassVar[str] = "Identity & Access Management"

    actor: Actor | None = Field(default=None, description="The actor that performed the activity")

    def by(self, actor: Actor) -> Self:
        if not isinstance(actor, Actor):
            raise UnexpectedObjectTypeError("actor", Actor.__name__, actor)
        self.actor = actor
        return self


@pure
def find_actor_failures(event: IamEvent) -> tuple[ValidationFailure, ...]:
    """The failures of the event's actor. An event without an actor is not a failure."""
    return find_nested_failures("actor", event.actor)
