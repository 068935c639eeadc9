"""Tests for authentication events."""

import pytest

from telemetry.ocsf.errors import EnumFamilyMismatchError
from telemetry.ocsf.iam.authentication import AuthenticationEvent
from telemetry.ocsf.iam.authentication import AuthProtocol
from telemetry.ocsf.iam.authentication import LogonType
from telemetry.ocsf.objects.auth_factor import AuthFactor
from telemetry.ocsf.objects.auth_factor import FactorType
from telemetry.ocsf.objects.network_endpoint import NetworkEndpoint
from telemetry.ocsf.objects.process import Process
from telemetry.ocsf.objects.user import User


def _logon() -> AuthenticationEvent:
    return AuthenticationEvent(User(name="efudd"), AuthenticationEvent.Activity.LOGON)


def test_logon_type_defaults_to_unknown() -> None:
    event = _logon()
    assert (event.logon_type, event.logon_type_id) == ("Unknown", 0)


def test_using_logon_type_sets_name_and_id() -> None:
    event = _logon().using_logon_type(LogonType.REMOTE_INTERACTIVE)
    assert (event.logon_type, event.logon_type_id) == ("Remote Interactive", 10)


def test_using_logon_type_rejects_other_families() -> None:
    with pytest.raises(EnumFamilyMismatchError):
        _logon().using_logon_type(AuthProtocol.KERBEROS)  # type: ignore[arg-type]


def test_logon_type_id_six_is_unassigned() -> None:
    assert 6 not in [member.id for member in LogonType.members()]


def test_auth_protocol_is_unset_until_chosen() -> None:
    event = _logon()
    projection = event.to_projection()
    assert "auth_protocol" not in projection
    assert "auth_protocol_id" not in projection
    event.using_auth_protocol(AuthProtocol.OAUTH_2_0)
    assert (event.auth_protocol, event.auth_protocol_id) == ("OAUTH 2.0", 6)


def test_authentication_event_is_class_3002() -> None:
    event = AuthenticationEvent(User(name="efudd"), AuthenticationEvent.Activity.other("Step Up"))
    assert (event.class_id, event.class_name) == (3002, "Authentication")
    assert event.type_uid == 300299


def test_endpoint_failures_are_reported_by_side() -> None:
    event = _logon()
    event.src_endpoint = NetworkEndpoint(port=51234)
    event.dst_endpoint = NetworkEndpoint(hostname="dc01.corp", port=88)
    failures = event.find_validation_failures()
    assert [failure.field_paths for failure in failures] == [
        ("src_endpoint.ip", "src_endpoint.hostname", "src_endpoint.mac")
    ]


def test_full_logon_projection() -> None:
    event = (
        AuthenticationEvent(
            User(name="efudd"),
            AuthenticationEvent.Activity.LOGON,
            is_mfa=True,
            is_remote=True,
            auth_factors=[
                AuthFactor(name="password").of_type(FactorType.KNOWLEDGE),
                AuthFactor(name="TOTP").of_type(FactorType.POSSESSION),
            ],
            src_endpoint=NetworkEndpoint(ip="203.0.113.7"),
            logon_process=Process(pid=612, name="lsass.exe"),
        )
        .using_logon_type(LogonType.NETWORK)
        .using_auth_protocol(AuthProtocol.KERBEROS)
    )
    assert event.find_validation_failures() == ()
    projection = event.to_projection()
    assert projection["logon_type"] == "Network"
    assert projection["logon_type_id"] == 3
    assert projection["auth_protocol"] == "Kerberos"
    assert projection["auth_protocol_id"] == 2
    assert projection["is_mfa"] is True
    assert "is_cleartext" not in projection
    assert [factor["type"] for factor in projection["auth_factors"]] == ["Knowledge", "Possession"]
    assert projection["src_endpoint"] == {"ip": "203.0.113.7"}
    assert projection["logon_process"] == {"pid": 612, "name": "lsass.exe"}


def test_auth_protocol_members() -> None:
    assert [member.name for member in AuthProtocol.members()] == [
        "Unknown",
        "NTLM",
        "Kerberos",
        "Digest",
        "OpenID",
        "SAML",
        "OAUTH 2.0",
        "PAP",
        "CHAP",
        "EAP",
        "RADIUS",
    ]
