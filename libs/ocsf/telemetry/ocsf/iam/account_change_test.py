"""Tests for account change events."""

import pytest

from telemetry.ocsf.errors import EnumFamilyMismatchError
from telemetry.ocsf.errors import MissingPrimarySubjectError
from telemetry.ocsf.event_enums import Severity
from telemetry.ocsf.iam.account_change import AccountChangeActivity
from telemetry.ocsf.iam.account_change import AccountChangeEvent
from telemetry.ocsf.iam.authentication import AuthenticationActivity
from telemetry.ocsf.objects.actor import Actor
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.objects.user import UserType
from telemetry.ocsf.validation import FailureKind


def test_password_change_by_an_admin_is_valid() -> None:
    event = (
        AccountChangeEvent(User(name="efudd").of_type(UserType.USER), AccountChangeEvent.Activity.PASSWORD_CHANGE)
        .with_severity(Severity.INFORMATIONAL)
        .by(Actor(application_name="Identity Console", user=User(name="tstark").of_type(UserType.ADMIN)))
    )
    assert event.find_validation_failures() == ()
    assert event.class_id == 3001
    assert event.type_uid == 300103
    assert event.type == "Account Change: Password Change"


def test_user_without_identity_is_reported_under_user() -> None:
    event = AccountChangeEvent(User(), AccountChangeEvent.Activity.PASSWORD_CHANGE)
    failures = event.find_validation_failures()
    assert failures
    assert any(
        failure.kind == FailureKind.MISSING_IDENTITY and "user.uid" in failure.field_paths for failure in failures
    )


@pytest.mark.parametrize("user", [User(uid="S-1-5-21-1004"), User(name="efudd")])
def test_uid_or_name_clears_the_identity_failure(user: User) -> None:
    assert AccountChangeEvent(user, AccountChangeEvent.Activity.CREATE).find_validation_failures() == ()


def test_missing_user_is_rejected() -> None:
    with pytest.raises(MissingPrimarySubjectError, match="AccountChangeEvent.user is required"):
        AccountChangeEvent(None, AccountChangeEvent.Activity.CREATE)  # type: ignore[arg-type]


def test_activity_of_another_class_is_rejected() -> None:
    with pytest.raises(EnumFamilyMismatchError):
        AccountChangeEvent(User(name="efudd"), AuthenticationActivity.LOGON)  # type: ignore[arg-type]


def test_removing_the_user_afterwards_is_reported() -> None:
    event = AccountChangeEvent(User(name="efudd"), AccountChangeEvent.Activity.DISABLE)
    event.user = None  # type: ignore[assignment]
    failures = event.find_validation_failures()
    assert [(failure.kind, failure.field_paths) for failure in failures] == [(FailureKind.MISSING_FIELD, ("user",))]


def test_activity_members() -> None:
    assert AccountChangeEvent.Activity is AccountChangeActivity
    assert [(member.id, member.name) for member in AccountChangeActivity.members()] == [
        (0, "Unknown"),
        (1, "Create"),
        (2, "Enable"),
        (3, "Password Change"),
        (4, "Password Reset"),
        (5, "Disable"),
        (6, "Delete"),
        (7, "Attach Policy"),
        (8, "Detach Policy"),
        (9, "Lock"),
        (10, "MFA Factor Enable"),
        (11, "MFA Factor Disable"),
        (12, "Unlock"),
    ]


def test_projection_carries_the_user() -> None:
    event = AccountChangeEvent(User(name="efudd"), AccountChangeEvent.Activity.LOCK)
    projection = event.to_projection()
    assert projection["user"] == {"name": "efudd"}
    assert projection["class_uid"] == 3001
    assert projection["category_uid"] == 3
    assert projection["type_uid"] == 300109
    assert "actor" not in projection
