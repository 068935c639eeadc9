"""Checks event projections against JSON Schema documents.

The event model only produces projections. Which schema document an event class must
conform to is decided by the caller, who loads it with load_schema_document() and checks
projections with check_projection() or check_event().
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from loguru import logger
from pydantic import Field
from pydantic import computed_field

from telemetry.ocsf.errors import SchemaDocumentError
from telemetry.ocsf.logging import log_span
from telemetry.ocsf.model_base import FrozenModel
from telemetry.ocsf.model_base import SchemaObject


class SchemaViolation(FrozenModel):
    """A single place where a projection does not conform to a schema document."""

    path: str = Field(description="JSON path of the offending value, e.g. $.user.uid")
    message: str = Field(description="Human-readable description of the violation")
    validator: str = Field(description="The JSON Schema keyword that failed, e.g. required or type")


class SchemaCheckResult(FrozenModel):
    """The outcome of checking one projection against one schema document."""

    schema_name: str = Field(description="The name the schema document was checked under")
    violations: tuple[SchemaViolation, ...] = Field(default=(), description="Every violation found, in path order")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.violations


def load_schema_document(path: Path) -> dict[str, Any]:
    """Read a JSON Schema document from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise SchemaDocumentError(f"Cannot read schema document {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaDocumentError(f"Schema document {path} is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise SchemaDocumentError(f"Schema document {path} must be a JSON object, got {type(document).__name__}")
    return document


def check_projection(
    projection: Mapping[str, Any],
    schema_document: Mapping[str, Any],
    schema_name: str,
) -> SchemaCheckResult:
    """Check a projection with the validator matching the document's $schema (latest draft when absent)."""
    validator_class = validator_for(schema_document)
    try:
        validator_class.check_schema(schema_document)
    except SchemaError as e:
        raise SchemaDocumentError(f"Schema document {schema_name} is not a valid JSON Schema: {e.message}") from e

    with log_span("Checking projection against schema {}", schema_name):
        violations = tuple(
            SchemaViolation(path=error.json_path, message=error.message, validator=str(error.validator))
            for error in sorted(validator_class(schema_document).iter_errors(projection), key=lambda e: e.json_path)
        )
        for violation in violations:
            logger.debug("Schema {} violation at {}: {}", schema_name, violation.path, violation.message)

    return SchemaCheckResult(schema_name=schema_name, violations=violations)


def check_event(
    event: SchemaObject,
    schema_document: Mapping[str, Any],
    schema_name: str,
) -> SchemaCheckResult:
    """Project an event (or any schema object) and check the projection."""
    return check_projection(event.to_projection(), schema_document, schema_name)
