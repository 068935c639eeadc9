"""Tests for checking projections against schema documents."""

import json
from pathlib import Path
from typing import Any

import pytest

from telemetry.ocsf.errors import SchemaDocumentError
from telemetry.ocsf.iam.account_change import AccountChangeEvent
from telemetry.ocsf.objects.actor import Actor
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.schema_check import check_event
from telemetry.ocsf.schema_check import check_projection
from telemetry.ocsf.schema_check import load_schema_document


def test_load_schema_document_reads_json(tmp_path: Path, event_schema_document: dict[str, Any]) -> None:
    path = tmp_path / "iam.json"
    path.write_text(json.dumps(event_schema_document))
    assert load_schema_document(path) == event_schema_document


def test_load_schema_document_rejects_missing_files(tmp_path: Path) -> None:
    with pytest.raises(SchemaDocumentError, match="Cannot read schema document"):
        load_schema_document(tmp_path / "absent.json")


def test_load_schema_document_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(SchemaDocumentError, match="is not valid JSON"):
        load_schema_document(path)


def test_load_schema_document_rejects_non_objects(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]")
    with pytest.raises(SchemaDocumentError, match="must be a JSON object"):
        load_schema_document(path)


def test_check_projection_rejects_invalid_schema_documents() -> None:
    with pytest.raises(SchemaDocumentError, match="is not a valid JSON Schema"):
        check_projection({}, {"type": 12}, "broken")


def test_check_projection_reports_violations_in_path_order(event_schema_document: dict[str, Any]) -> None:
    projection = {
        "activity_id": "three",
        "timezone_offset": 5000,
    }
    result = check_projection(projection, event_schema_document, "account_change")

    assert not result.is_valid
    assert result.schema_name == "account_change"
    paths = [violation.path for violation in result.violations]
    assert paths == sorted(paths)
    assert "$.activity_id" in paths
    assert "$.timezone_offset" in paths
    validators = {violation.validator for violation in result.violations}
    assert {"required", "type", "maximum"} <= validators


def test_check_projection_accepts_conforming_projections(event_schema_document: dict[str, Any]) -> None:
    user = User(name="efudd")
    event = AccountChangeEvent(user, AccountChangeEvent.Activity.PASSWORD_CHANGE)
    result = check_projection(event.to_projection(), event_schema_document, "account_change")
    assert result.is_valid
    assert result.violations == ()


def test_check_event_projects_the_event(event_schema_document: dict[str, Any], admin_actor: Actor) -> None:
    event = AccountChangeEvent(User(name="efudd"), AccountChangeEvent.Activity.LOCK).by(admin_actor)
    assert check_event(event, event_schema_document, "account_change").is_valid


def test_violations_are_logged(event_schema_document: dict[str, Any], captured_log_messages: list[str]) -> None:
    check_projection({"activity_id": 1}, event_schema_document, "account_change")
    assert "Checking projection against schema account_change" in captured_log_messages
    assert any(message.startswith("Schema account_change violation at $:") for message in captured_log_messages)
