"""Reporting identity: which product the events of this process are reported by.

The identity is an explicit value (ReportingConfig) that callers can thread into event
construction through Metadata.from_config(). Events built without one use the process
default, which is loaded once on first use and treated as read-only afterwards.
"""

import os
import sys
import tomllib
from collections.abc import Mapping
from functools import cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path
from typing import Any
from typing import Final

from loguru import logger
from pydantic import Field

from telemetry.ocsf.errors import ConfigNotFoundError
from telemetry.ocsf.errors import ConfigParseError
from telemetry.ocsf.logging import log_span
from telemetry.ocsf.model_base import FrozenModel
from telemetry.ocsf.objects.product import Product

CONFIG_PATH_ENV_VAR: Final[str] = "OCSF_CONFIG_PATH"

# Environment variable overrides, keyed by the Product field they set.
_PRODUCT_ENV_VARS: Final[dict[str, str]] = {
    "uid": "OCSF_PRODUCT_UID",
    "name": "OCSF_PRODUCT_NAME",
    "version": "OCSF_PRODUCT_VERSION",
    "vendor_name": "OCSF_PRODUCT_VENDOR",
}

_PRODUCT_TABLE: Final[str] = "product"


class ReportingConfig(FrozenModel):
    """The reporting identity shared by the events of one process."""

    product: Product = Field(description="The product that reports the events")


def load_reporting_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ReportingConfig:
    """Load the reporting identity from all sources.

    Precedence (lowest to highest):
    1. The hosting process: its script name, and the version of the installed distribution of that name
    2. The [product] table of a TOML file (config_path, or OCSF_CONFIG_PATH)
    3. Environment variables (OCSF_PRODUCT_UID, OCSF_PRODUCT_NAME, OCSF_PRODUCT_VERSION, OCSF_PRODUCT_VENDOR)
    """
    if environ is None:
        environ = os.environ

    with log_span("Loading reporting config"):
        product_fields = _get_process_product_fields()

        if config_path is None and environ.get(CONFIG_PATH_ENV_VAR):
            config_path = Path(environ[CONFIG_PATH_ENV_VAR])
        if config_path is not None:
            file_fields = _parse_product_table(_load_toml(config_path.expanduser()), config_path)
            logger.debug("Using product fields {} from {}", sorted(file_fields), config_path)
            product_fields.update(file_fields)

        env_fields = {
            field_name: environ[env_var] for field_name, env_var in _PRODUCT_ENV_VARS.items() if environ.get(env_var)
        }
        if env_fields:
            logger.debug("Using product fields {} from the environment", sorted(env_fields))
            product_fields.update(env_fields)

        return ReportingConfig(product=Product(**product_fields))


@cache
def get_default_reporting_config() -> ReportingConfig:
    """The process-lifetime default reporting identity.

    Loaded from the process environment on first use. Set the environment (or
    OCSF_CONFIG_PATH) before building the first event; later changes are not seen.
    """
    return load_reporting_config()


def _get_process_product_fields() -> dict[str, Any]:
    script_name = Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else ""
    if not script_name:
        return {}
    try:
        script_version = distribution_version(script_name)
    except PackageNotFoundError:
        logger.trace("No installed distribution named {}, reporting without a version", script_name)
        return {"name": script_name}
    return {"name": script_name, "version": script_version}


def _load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    if not path.exists():
        raise ConfigNotFoundError(str(path))

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse {path}: {e}") from e


def _parse_product_table(raw: dict[str, Any], path: Path) -> dict[str, str]:
    unknown_tables = set(raw.keys()) - {_PRODUCT_TABLE}
    if unknown_tables:
        raise ConfigParseError(f"Unknown configuration sections in {path}: {sorted(unknown_tables)}")

    table = raw.get(_PRODUCT_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigParseError(f"[{_PRODUCT_TABLE}] in {path} must be a table")

    known_fields = set(_PRODUCT_ENV_VARS.keys())
    unknown_fields = set(table.keys()) - known_fields
    if unknown_fields:
        raise ConfigParseError(
            f"Unknown fields in [{_PRODUCT_TABLE}] of {path}: {sorted(unknown_fields)}. "
            f"Valid fields: {sorted(known_fields)}"
        )

    for field_name, value in table.items():
        if not isinstance(value, str):
            raise ConfigParseError(f"[{_PRODUCT_TABLE}].{field_name} in {path} must be a string, got {value!r}")
    return dict(table)
