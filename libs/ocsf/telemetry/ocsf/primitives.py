"""Constrained scalars shared by the enumerations, value objects and events."""

from typing import Any
from typing import Final
from typing import Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema
from pydantic_core import core_schema

# Offsets outside this range are rejected by the schema's timezone_offset attribute.
MAX_TIMEZONE_OFFSET_MINUTES: Final[int] = 1080


class NonEmptyStr(str):
    """A display name or key: surrounding whitespace is stripped and nothing may remain empty."""

    def __new__(cls, value: str) -> Self:
        stripped = value.strip() if value else ""
        if not stripped:
            raise ValueError(f"{cls.__name__} cannot be empty")
        return super().__new__(cls, stripped)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(min_length=1),
            serialization=core_schema.to_string_ser_schema(),
        )


class NonNegativeInt(int):
    """A count or a duration. Projected as a plain JSON integer."""

    def __new__(cls, value: int) -> Self:
        if value < 0:
            raise ValueError(f"{cls.__name__} must be >= 0, got {value}")
        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=0),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )


class EpochMillis(NonNegativeInt):
    """Milliseconds since the Unix epoch, UTC."""
