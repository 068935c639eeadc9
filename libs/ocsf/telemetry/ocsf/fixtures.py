from collections.abc import Generator
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any

import pytest
from loguru import logger

from telemetry.ocsf.config import CONFIG_PATH_ENV_VAR
from telemetry.ocsf.config import ReportingConfig
from telemetry.ocsf.config import get_default_reporting_config
from telemetry.ocsf.logging import PACKAGE_LOGGER_NAME
from telemetry.ocsf.objects.actor import Actor
from telemetry.ocsf.objects.product import Product
from telemetry.ocsf.objects.user import User
from telemetry.ocsf.objects.user import UserType

_REPORTING_ENV_VARS = (
    CONFIG_PATH_ENV_VAR,
    "OCSF_PRODUCT_UID",
    "OCSF_PRODUCT_NAME",
    "OCSF_PRODUCT_VERSION",
    "OCSF_PRODUCT_VENDOR",
)


@pytest.fixture(autouse=True)
def isolated_reporting_identity(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Make every test load the default reporting identity from a clean environment.

    The default is cached for the life of the process, so it is cleared before and after
    each test.
    """
    for env_var in _REPORTING_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
    get_default_reporting_config.cache_clear()
    yield
    get_default_reporting_config.cache_clear()


@pytest.fixture(autouse=True)
def silent_package_logging() -> Generator[None, None, None]:
    """Start every test with the package logger disabled, as it is for library users."""
    logger.disable(PACKAGE_LOGGER_NAME)
    yield
    logger.disable(PACKAGE_LOGGER_NAME)


@pytest.fixture
def package_logging_enabled() -> Generator[None, None, None]:
    logger.enable(PACKAGE_LOGGER_NAME)
    yield
    logger.disable(PACKAGE_LOGGER_NAME)


@pytest.fixture
def reporting_config() -> ReportingConfig:
    return ReportingConfig(
        product=Product(uid="idp-7", name="Identity Gateway", version="2.4.1", vendor_name="Example Corp")
    )


@pytest.fixture
def subject_user() -> User:
    """A regular user identified only by name."""
    return User(name="efudd").of_type(UserType.USER)


@pytest.fixture
def admin_actor() -> Actor:
    """An administrator acting through a management application."""
    return Actor(application_name="Identity Console", user=User(name="tstark").of_type(UserType.ADMIN))


@pytest.fixture
def eastern_instant() -> datetime:
    """2024-03-01 12:30 at UTC-5, i.e. 17:30 UTC."""
    return datetime(2024, 3, 1, 12, 30, tzinfo=timezone(timedelta(hours=-5)))


@pytest.fixture
def event_schema_document() -> dict[str, Any]:
    """A minimal schema document covering the attributes every IAM event must carry."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": [
            "activity_id",
            "activity_name",
            "category_uid",
            "category_name",
            "class_uid",
            "class_name",
            "metadata",
            "severity",
            "severity_id",
            "status",
            "status_id",
            "time",
            "timezone_offset",
            "type_name",
            "type_uid",
        ],
        "properties": {
            "activity_id": {"type": "integer"},
            "activity_name": {"type": "string", "minLength": 1},
            "category_uid": {"const": 3},
            "class_uid": {"type": "integer"},
            "time": {"type": "integer", "minimum": 1},
            "timezone_offset": {"type": "integer", "minimum": -1080, "maximum": 1080},
            "type_uid": {"type": "integer"},
            "metadata": {
                "type": "object",
                "required": ["version", "product"],
                "properties": {"version": {"type": "string"}, "product": {"type": "object"}},
            },
            "actor": {"type": "object", "minProperties": 1},
        },
    }


@pytest.fixture
def captured_log_messages(package_logging_enabled: None) -> Generator[list[str], None, None]:
    """Collect the messages the package logs at any level while the test runs."""
    messages: list[str] = []

    def sink(message: Any) -> None:
        messages.append(message.record["message"])

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    yield messages
    logger.remove(handler_id)
