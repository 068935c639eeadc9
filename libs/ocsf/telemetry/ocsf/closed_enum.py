"""Closed enumerations: fixed, integer-coded categorical values with an open escape value.

Every categorical attribute of the schema (status, severity, activity, account type, ...)
is a pair of a numeric id and a display name. A family is a ClosedEnum subclass whose
well-known members are declared once with define() and bound as class constants:

    class Severity(ClosedEnum):
        UNKNOWN: ClassVar[Severity]

    Severity.UNKNOWN = Severity.define(0, "Unknown")

Values the schema does not name are expressed with Severity.other("source specific name"),
which always carries the escape id 99. Building a family value directly only succeeds for
an (id, name) pair the family defined, so no other pair can be forged. Equality is
structural: two values are equal when they belong to the same family and carry the same
id and name.
"""

from typing import Any
from typing import Final
from typing import Self
from typing import TypeVar

from pydantic import Field

from telemetry.ocsf.errors import DuplicateEnumIdError
from telemetry.ocsf.errors import EnumFamilyMismatchError
from telemetry.ocsf.errors import InvalidEnumNameError
from telemetry.ocsf.errors import ReservedEnumIdError
from telemetry.ocsf.errors import UnknownEnumIdError
from telemetry.ocsf.errors import UnregisteredEnumValueError
from telemetry.ocsf.model_base import FrozenModel
from telemetry.ocsf.primitives import NonEmptyStr

OTHER_ID: Final[int] = 99

# Well-known members per family, in declaration order. Only written while modules are
# imported (by define()), read-only afterwards.
_WELL_KNOWN_MEMBERS: Final[dict[type["ClosedEnum"], dict[int, "ClosedEnum"]]] = {}

# Passed by define() while it registers a new member, which has no registry entry yet.
_DEFINE_TOKEN: Final = object()


class ClosedEnum(FrozenModel):
    """A named, integer-coded value belonging to one enumeration family."""

    id: int = Field(description="The normalized identifier, stable across schema versions")
    name: NonEmptyStr = Field(description="The display name for the identifier")

    def __init__(self, define_token: object = None, /, **data: Any) -> None:
        super().__init__(**data)
        if define_token is _DEFINE_TOKEN or self.id == OTHER_ID:
            return
        known_member = _WELL_KNOWN_MEMBERS.get(type(self), {}).get(self.id)
        if known_member is None or known_member.name != self.name:
            raise UnregisteredEnumValueError(type(self).__name__, self.id, self.name)

    @classmethod
    def define(cls, member_id: int, name: str) -> Self:
        """Create and register a well-known member of this family.

        Ids are a public wire contract, so each id may be defined once per family and the
        escape id is reserved for other().
        """
        if member_id == OTHER_ID:
            raise ReservedEnumIdError(cls.__name__, OTHER_ID)
        known_members = _WELL_KNOWN_MEMBERS.setdefault(cls, {})
        existing = known_members.get(member_id)
        if existing is not None:
            raise DuplicateEnumIdError(cls.__name__, member_id, existing.name, name)
        member = cls(_DEFINE_TOKEN, id=member_id, name=name)
        known_members[member_id] = member
        return member

    @classmethod
    def other(cls, name: str) -> Self:
        """A value the schema does not define; the name carries the data source specific label."""
        if not name or not name.strip():
            raise InvalidEnumNameError(cls.__name__)
        return cls(id=OTHER_ID, name=name)

    @classmethod
    def members(cls) -> tuple[Self, ...]:
        """The well-known members of this family, in the order they were defined."""
        return tuple(_WELL_KNOWN_MEMBERS.get(cls, {}).values())  # type: ignore[arg-type]

    @classmethod
    def from_id(cls, member_id: int) -> Self:
        """Look up a well-known member by id.

        The escape id is never well-known since it does not determine a name; use other().
        """
        member = _WELL_KNOWN_MEMBERS.get(cls, {}).get(member_id)
        if member is None:
            raise UnknownEnumIdError(cls.__name__, member_id)
        return member  # type: ignore[return-value]

    @property
    def is_other(self) -> bool:
        return self.id == OTHER_ID

    def __str__(self) -> str:
        return self.name


_E = TypeVar("_E", bound=ClosedEnum)


def require_member(value: object, family: type[_E]) -> _E:
    """Return value if it belongs to family, otherwise fail fast."""
    if not isinstance(value, family):
        raise EnumFamilyMismatchError(family.__name__, value)
    return value
