"""Tests for user access management events."""

from telemetry.ocsf.iam.user_access_management import UserAccessManagementEvent
from telemetry.ocsf.objects.resource import Resource
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.validation import FailureKind


def test_grant_on_resources_is_valid() -> None:
    event = UserAccessManagementEvent(
        User(name="efudd"),
        UserAccessManagementEvent.Activity.ASSIGN_PRIVILEGES,
        resources=[Resource(name="payroll-share"), Resource(uid="arn:aws:s3:::audit-logs")],
        privileges=["read", "write"],
    )
    assert event.find_validation_failures() == ()
    assert event.type_uid == 300501
    assert event.to_projection()["resources"] == [{"name": "payroll-share"}, {"uid": "arn:aws:s3:::audit-logs"}]


def test_each_resource_is_validated_by_index() -> None:
    event = UserAccessManagementEvent(
        User(name="efudd"),
        UserAccessManagementEvent.Activity.REVOKE_PRIVILEGES,
        resources=[Resource(name="payroll-share"), Resource(type="bucket")],
    )
    failures = event.find_validation_failures()
    assert [(failure.kind, failure.field_paths) for failure in failures] == [
        (FailureKind.MISSING_IDENTITY, ("resources[1].uid", "resources[1].name"))
    ]


def test_subject_and_resource_failures_are_all_reported() -> None:
    event = UserAccessManagementEvent(
        User(),
        UserAccessManagementEvent.Activity.REVOKE_PRIVILEGES,
        resources=[Resource()],
    )
    assert [failure.field_paths[0] for failure in event.find_validation_failures()] == [
        "user.uid",
        "resources[0].uid",
    ]
