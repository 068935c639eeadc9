"""Intrinsic validation of the event model.

Validation never raises for business-rule violations. Each object exposes
find_validation_failures(), which returns a tuple of ValidationFailure records; an
empty tuple means the object is valid. Composite objects build their result by
concatenating the results of the helpers below, so the failures of an event are
exactly the union of its own checks and those of every nested object it holds.

Field paths use wire names. Failures of nested objects are prefixed with the path of
the attribute holding them, e.g. "user.uid" or "resources[2].name".
"""

from collections.abc import Mapping
from collections.abc import Sequence
from enum import StrEnum
from enum import auto
from typing import Protocol

from pydantic import Field

from telemetry.ocsf.model_base import FrozenModel
from telemetry.ocsf.pure import pure


class FailureKind(StrEnum):
    """The rule that a ValidationFailure reports."""

    # a required attribute is unset or blank
    MISSING_FIELD = auto()
    # none of the attributes that identify an object is set
    MISSING_IDENTITY = auto()
    # none of the attributes that identify an actor is set
    MISSING_ACTOR_IDENTITY = auto()
    # a key/value object has neither a value nor values
    MISSING_VALUE = auto()


class ValidationFailure(FrozenModel):
    """A single advisory validation failure."""

    kind: FailureKind = Field(description="The rule that failed")
    message: str = Field(description="Human-readable description of the failure")
    field_paths: tuple[str, ...] = Field(description="Wire-name paths of the attributes involved")

    def nested_under(self, prefix: str) -> "ValidationFailure":
        """Return this failure with every field path prefixed by the containing attribute's path."""
        nested_paths = tuple(f"{prefix}.{path}" for path in self.field_paths) or (prefix,)
        return self.model_copy(update={"field_paths": nested_paths})

    def __str__(self) -> str:
        return f"{self.kind}: {self.message} ({', '.join(self.field_paths)})"


class Validatable(Protocol):
    def find_validation_failures(self) -> tuple[ValidationFailure, ...]: ...


@pure
def is_blank(value: object) -> bool:
    """True for None and for strings that are empty or whitespace-only."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@pure
def find_missing_field_failures(fields: Mapping[str, object]) -> tuple[ValidationFailure, ...]:
    """One MISSING_FIELD failure per blank value, keyed by its path."""
    return tuple(
        ValidationFailure(
            kind=FailureKind.MISSING_FIELD,
            message=f"{path} is required",
            field_paths=(path,),
        )
        for path, value in fields.items()
        if is_blank(value)
    )


@pure
def find_identity_failures(
    identity_fields: Mapping[str, object],
    kind: FailureKind = FailureKind.MISSING_IDENTITY,
) -> tuple[ValidationFailure, ...]:
    """A single failure of the given kind when every identity field is blank."""
    if not all(is_blank(value) for value in identity_fields.values()):
        return ()
    paths = tuple(identity_fields.keys())
    return (
        ValidationFailure(
            kind=kind,
            message=f"At least one of {', '.join(paths)} must be present",
            field_paths=paths,
        ),
    )


@pure
def find_nested_failures(path: str, value: Validatable | None) -> tuple[ValidationFailure, ...]:
    """The failures of an optional nested object, prefixed with its path. Absence is not a failure."""
    if value is None:
        return ()
    return tuple(failure.nested_under(path) for failure in value.find_validation_failures())


@pure
def find_required_nested_failures(path: str, value: Validatable | None) -> tuple[ValidationFailure, ...]:
    """Like find_nested_failures, but absence is a MISSING_FIELD failure."""
    if value is None:
        return find_missing_field_failures({path: None})
    return find_nested_failures(path, value)


@pure
def find_item_failures(path: str, items: Sequence[Validatable] | None) -> tuple[ValidationFailure, ...]:
    """The failures of every item of an optional list, each prefixed with its indexed path."""
    if items is None:
        return ()
    return tuple(
        failure for index, item in enumerate(items) for failure in find_nested_failures(f"{path}[{index}]", item)
    )
