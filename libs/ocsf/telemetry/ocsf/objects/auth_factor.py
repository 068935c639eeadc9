from __future__ import annotations

from typing import ClassVar
from typing import Self

from pydantic import Field
from pydantic import PrivateAttr
from pydantic import computed_field

from telemetry.ocsf.closed_enum import ClosedEnum
from telemetry.ocsf.closed_enum import require_member
from telemetry.ocsf.model_base import SchemaObject


class FactorType(ClosedEnum):
    """What kind of proof an authentication factor provides."""

    UNKNOWN: ClassVar[FactorType]
    KNOWLEDGE: ClassVar[FactorType]
    POSSESSION: ClassVar[FactorType]
    INHERENCE: ClassVar[FactorType]
    LOCATION: ClassVar[FactorType]


FactorType.UNKNOWN = FactorType.define(0, "Unknown")
# something the user knows: password, PIN
FactorType.KNOWLEDGE = FactorType.define(1, "Knowledge")
# something the user has: smart card, security token
FactorType.POSSESSION = FactorType.define(2, "Possession")
# something the user is: fingerprint, face
FactorType.INHERENCE = FactorType.define(3, "Inherence")
FactorType.LOCATION = FactorType.define(4, "Location")


class AuthFactor(SchemaObject):
    """A factor presented during an authentication."""

    name: str | None = Field(default=None, description="The name of the specific authentication factor")
    verification_method: str | None = Field(default=None, description="The method used to verify this factor")
    is_verified: bool | None = None

    _factor_type: FactorType | None = PrivateAttr(default=None)

    def of_type(self, factor_type: FactorType) -> Self:
        self._factor_type = require_member(factor_type, FactorType)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> str | None:
        return None if self._factor_type is None else self._factor_type.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_id(self) -> int | None:
        return None if self._factor_type is None else self._factor_type.id
