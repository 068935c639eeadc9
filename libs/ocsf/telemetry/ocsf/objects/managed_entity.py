"""The managed entity object: the thing an Entity Management event acts on.

A ManagedEntity is only ever built through one of its factories, each of which fixes
the entity type consistently with the content it is given. For types that have a
dedicated attribute (user, group) that attribute is populated; anything else is
labelled with EntityType.other(name) and described through the data attribute.
"""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Final

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.errors import ManagedEntityConstructionError
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.model_base import SchemaObject
from telemetry.ocsf.objects.group import Group
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import ValidationFailure
from telemetry.ocsf.validation import find_identity_failures
from telemetry.ocsf.validation import find_nested_failures


class EntityType(ClosedEnum):
    """Classifies managed entities such as users, devices and policies."""

    UNKNOWN: ClassVar[EntityType]
    DEVICE: ClassVar[EntityType]
    USER: ClassVar[EntityType]
    GROUP: ClassVar[EntityType]
    ORGANIZATION: ClassVar[EntityType]
    POLICY: ClassVar[EntityType]
    EMAIL: ClassVar[EntityType]
    NETWORK_ZONE: ClassVar[EntityType]


EntityType.UNKNOWN = EntityType.define(0, "Unknown")
EntityType.DEVICE = EntityType.define(1, "Device")
EntityType.USER = EntityType.define(2, "User")
EntityType.GROUP = EntityType.define(3, "Group")
EntityType.ORGANIZATION = EntityType.define(4, "Organization")
EntityType.POLICY = EntityType.define(5, "Policy")
EntityType.EMAIL = EntityType.define(6, "Email")
# name and/or uid hold the zone; further zone information goes in data
EntityType.NETWORK_ZONE = EntityType.define(7, "Network Zone")

_FACTORY_TOKEN: Final[object] = object()


class ManagedEntity(SchemaObject):
    """Describes the type and version of an entity, such as a user, device or policy."""

    uid: str | None = Field(
        default=None,
        frozen=True,
        description="The identifier of the entity: the uid of its specific object, or the source specific id if Other",
    )
    name: str | None = Field(
        default=None,
        frozen=True,
        description="The name of the entity: the name of its specific object, or the entity name if Other",
    )
    user: User | None = Field(default=None, frozen=True, description="The user that pertains to the entity")
    group: Group | None = Field(default=None, frozen=True, description="The group that pertains to the entity")
    version: str | None = Field(default=None, description="The version of the managed entity. For example: 1.2.3")
    data: dict[str, Any] | None = Field(
        default=None,
        description="The managed entity content. Must be serializable to JSON",
    )

    _entity_type: EntityType = PrivateAttr(default=EntityType.UNKNOWN)

    def __init__(self, factory_token: object = None, /, **data: Any) -> None:
        if factory_token is not _FACTORY_TOKEN:
            raise ManagedEntityConstructionError()
        super().__init__(**data)

    @classmethod
    def _build(cls, entity_type: EntityType, **data: Any) -> ManagedEntity:
        entity = cls(_FACTORY_TOKEN, **data)
        entity._entity_type = entity_type
        return entity

    @classmethod
    def of_unknown_type(cls) -> ManagedEntity:
        return cls._build(EntityType.UNKNOWN, name=EntityType.UNKNOWN.name)

    @classmethod
    def of_type_user(cls, user: User) -> ManagedEntity:
        """A managed user; uid and name mirror the user's own."""
        if user is None:
            raise MissingPrimarySubjectError(cls.__name__, "user")
        return cls._build(EntityType.USER, uid=user.uid, name=user.name, user=user)

    @classmethod
    def of_type_group(cls, group: Group) -> ManagedEntity:
        """A managed group; uid and name mirror the group's own."""
        if group is None:
            raise MissingPrimarySubjectError(cls.__name__, "group")
        return cls._build(EntityType.GROUP, uid=group.uid, name=group.name, group=group)

    @classmethod
    def other(cls, name: str) -> ManagedEntity:
        """An entity whose type has no well-known member; name labels both the entity and its type."""
        entity_type = EntityType.other(name)
        return cls._build(entity_type, name=entity_type.name)

    @property
    def entity_type(self) -> EntityType:
        return self._entity_type

    def find_validation_failures(self) -> tuple[ValidationFailure, ...]:
        return (
            *find_identity_failures({"uid": self.uid, "name": self.name, "user": self.user, "group": self.group}),
            *find_nested_failures("user", self.user),
            *find_nested_failures("group", self.group),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> str:
        return self._entity_type.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_id(self) -> int:
        return self._entity_type.id
