class BaseOcsfError(Exception):
    """Base exception for all errors raised by the OCSF event model."""


class ModelConstructionError(BaseOcsfError, ValueError):
    """Raised when an object graph is built in a way no validation can reason about.

    These are caller contract violations, not business-rule failures. Business-rule
    failures are reported by find_validation_failures() and never raised.
    """


# === Closed enumerations ===


class ClosedEnumError(ModelConstructionError):
    """Base class for errors defining or using a closed enumeration."""


class InvalidEnumNameError(ClosedEnumError):
    """Raised when an enumeration value is given an empty name."""

    def __init__(self, family_name: str) -> None:
        self.family_name = family_name
        super().__init__(f"{family_name} values must have a non-empty name")


class ReservedEnumIdError(ClosedEnumError):
    """Raised when a well-known member is defined with the escape id."""

    def __init__(self, family_name: str, reserved_id: int) -> None:
        self.family_name = family_name
        self.reserved_id = reserved_id
        super().__init__(f"{family_name} id {reserved_id} is reserved for {family_name}.other(name)")


class DuplicateEnumIdError(ClosedEnumError):
    """Raised when two well-known members of one family share an id."""

    def __init__(self, family_name: str, member_id: int, existing_name: str, new_name: str) -> None:
        self.family_name = family_name
        self.member_id = member_id
        self.existing_name = existing_name
        self.new_name = new_name
        super().__init__(
            f"{family_name} id {member_id} is already defined as '{existing_name}', cannot redefine it as '{new_name}'"
        )


class UnknownEnumIdError(ClosedEnumError, LookupError):
    """Raised when looking up an id that no well-known member uses."""

    def __init__(self, family_name: str, member_id: int) -> None:
        self.family_name = family_name
        self.member_id = member_id
        super().__init__(f"{family_name} has no well-known member with id {member_id}")


class EnumFamilyMismatchError(ClosedEnumError, TypeError):
    """Raised when a value from one enumeration family is used where another is expected."""

    def __init__(self, expected_family: str, value: object) -> None:
        self.expected_family = expected_family
        self.value = value
        super().__init__(f"Expected a {expected_family} value, got {type(value).__name__}: {value!r}")


class UnregisteredEnumValueError(ClosedEnumError):
    """Raised when an enumeration value is built with an id/name pair its family never defined."""

    def __init__(self, family_name: str, member_id: int, name: str) -> None:
        self.family_name = family_name
        self.member_id = member_id
        self.name = name
        super().__init__(
            f"{family_name} has no well-known member ({member_id}, '{name}'). "
            f"Use one of its constants, or {family_name}.other(name) for values it does not define."
        )


# === Events and value objects ===


class MissingPrimarySubjectError(ModelConstructionError):
    """Raised when an event is constructed without its mandatory primary subject."""

    def __init__(self, event_class_name: str, subject_field: str) -> None:
        self.event_class_name = event_class_name
        self.subject_field = subject_field
        super().__init__(f"{event_class_name}.{subject_field} is required, got None")


class UnexpectedObjectTypeError(ModelConstructionError, TypeError):
    """Raised when a fluent setter is given an object of the wrong type."""

    def __init__(self, attribute_name: str, expected_type: str, value: object) -> None:
        self.attribute_name = attribute_name
        self.expected_type = expected_type
        self.value = value
        super().__init__(f"{attribute_name} must be of type {expected_type}, got {type(value).__name__}: {value!r}")


class ManagedEntityConstructionError(ModelConstructionError):
    """Raised when ManagedEntity is constructed directly instead of through a factory."""

    def __init__(self) -> None:
        super().__init__(
            "ManagedEntity cannot be constructed directly. "
            "Use ManagedEntity.of_unknown_type(), of_type_user(), of_type_group() or other(name)."
        )


class NaiveTimestampError(ModelConstructionError):
    """Raised when an event time is given without a UTC offset."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Event time must be timezone-aware, got naive datetime {value!r}")


class InvalidTimezoneOffsetError(ModelConstructionError):
    """Raised when an event time carries an offset outside the schema's range."""

    def __init__(self, offset_minutes: int, limit_minutes: int) -> None:
        self.offset_minutes = offset_minutes
        self.limit_minutes = limit_minutes
        super().__init__(
            f"Timezone offset must be between -{limit_minutes} and +{limit_minutes} minutes, got {offset_minutes}"
        )


# === Configuration ===


class ConfigError(BaseOcsfError):
    """Base class for reporting configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""

    def __init__(self, config_path: str) -> None:
        self.config_path = config_path
        super().__init__(f"Config file not found: {config_path}")


class ConfigParseError(ConfigError, ValueError):
    """Raised when a config file cannot be parsed or has unexpected keys."""


# === Schema documents ===


class SchemaDocumentError(BaseOcsfError):
    """Raised when a JSON Schema document cannot be loaded or is not a valid schema."""
