"""Tests for loading the reporting identity."""

import sys
from importlib.metadata import version as distribution_version
from pathlib import Path

import pytest

from telemetry.ocsf.config import ReportingConfig
from telemetry.ocsf.config import get_default_reporting_config
from telemetry.ocsf.config import load_reporting_config
from telemetry.ocsf.errors import ConfigNotFoundError
from telemetry.ocsf.errors import ConfigParseError
from telemetry.ocsf.objects.metadata import Metadata


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "ocsf.toml"
    config_path.write_text(content)
    return config_path


@pytest.fixture
def unknown_host_process(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the host process is a script with no installed distribution."""
    monkeypatch.setattr(sys, "argv", ["/opt/tools/badge-sync-worker.py"])


# =============================================================================
# Process fallback
# =============================================================================


def test_falls_back_to_the_script_name(unknown_host_process: None) -> None:
    """Without a file or env vars the product is named after the running script."""
    config = load_reporting_config(environ={})
    assert config.product.name == "badge-sync-worker"
    assert config.product.version is None


def test_falls_back_to_the_installed_distribution_version(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/pytest"])
    config = load_reporting_config(environ={})
    assert config.product.name == "pytest"
    assert config.product.version == distribution_version("pytest")


def test_empty_argv_gives_an_anonymous_product(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", [""])
    config = load_reporting_config(environ={})
    assert config.product.to_projection() == {}


# =============================================================================
# TOML file
# =============================================================================


def test_file_overrides_the_process_fallback(tmp_path: Path, unknown_host_process: None) -> None:
    config_path = _write_config(
        tmp_path,
        '[product]\nname = "Identity Gateway"\nversion = "2.4.1"\nvendor_name = "Example Corp"\n',
    )
    config = load_reporting_config(config_path=config_path, environ={})
    assert config.product.name == "Identity Gateway"
    assert config.product.version == "2.4.1"
    assert config.product.vendor_name == "Example Corp"
    assert config.product.uid is None


def test_file_path_can_come_from_the_environment(tmp_path: Path, unknown_host_process: None) -> None:
    config_path = _write_config(tmp_path, '[product]\nuid = "idp-7"\n')
    config = load_reporting_config(environ={"OCSF_CONFIG_PATH": str(config_path)})
    assert config.product.uid == "idp-7"
    # the fallback name is kept since the file does not set one
    assert config.product.name == "badge-sync-worker"


def test_file_without_a_product_table_changes_nothing(tmp_path: Path, unknown_host_process: None) -> None:
    config_path = _write_config(tmp_path, "")
    assert load_reporting_config(config_path=config_path, environ={}).product.name == "badge-sync-worker"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError, match="Config file not found"):
        load_reporting_config(config_path=tmp_path / "absent.toml", environ={})


def test_malformed_file_raises(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "[product\nname = ")
    with pytest.raises(ConfigParseError, match="Failed to parse"):
        load_reporting_config(config_path=config_path, environ={})


def test_unknown_product_fields_raise(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, '[product]\nname = "x"\nrelease = "1"\n')
    with pytest.raises(ConfigParseError, match="Unknown fields in \\[product\\]"):
        load_reporting_config(config_path=config_path, environ={})


def test_unknown_sections_raise(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, '[vendor]\nname = "x"\n')
    with pytest.raises(ConfigParseError, match="Unknown configuration sections"):
        load_reporting_config(config_path=config_path, environ={})


def test_non_string_values_raise(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "[product]\nversion = 2\n")
    with pytest.raises(ConfigParseError, match="must be a string"):
        load_reporting_config(config_path=config_path, environ={})


# =============================================================================
# Environment variables
# =============================================================================


def test_environment_overrides_the_file(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, '[product]\nname = "Identity Gateway"\nversion = "2.4.1"\n')
    config = load_reporting_config(
        config_path=config_path,
        environ={"OCSF_PRODUCT_VERSION": "2.5.0", "OCSF_PRODUCT_VENDOR": "Example Corp"},
    )
    assert config.product.name == "Identity Gateway"
    assert config.product.version == "2.5.0"
    assert config.product.vendor_name == "Example Corp"


def test_empty_environment_values_are_ignored(unknown_host_process: None) -> None:
    config = load_reporting_config(environ={"OCSF_PRODUCT_NAME": ""})
    assert config.product.name == "badge-sync-worker"


def test_loading_is_logged(captured_log_messages: list[str], unknown_host_process: None) -> None:
    load_reporting_config(environ={"OCSF_PRODUCT_UID": "idp-7"})
    assert "Loading reporting config" in captured_log_messages
    assert "Using product fields ['uid'] from the environment" in captured_log_messages
    assert any("No installed distribution named badge-sync-worker" in message for message in captured_log_messages)


# =============================================================================
# Process default
# =============================================================================


def test_default_is_loaded_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCSF_PRODUCT_NAME", "Identity Gateway")
    first = get_default_reporting_config()
    monkeypatch.setenv("OCSF_PRODUCT_NAME", "Something Else")
    assert get_default_reporting_config() is first
    assert first.product.name == "Identity Gateway"


def test_metadata_uses_the_process_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCSF_PRODUCT_NAME", "Identity Gateway")
    monkeypatch.setenv("OCSF_PRODUCT_VERSION", "2.4.1")
    metadata = Metadata()
    assert metadata.product.name == "Identity Gateway"
    assert metadata.product.version == "2.4.1"


def test_metadata_owns_a_copy_of_the_product(reporting_config: ReportingConfig) -> None:
    """Changing one metadata's product must not change the config or other metadata."""
    first = Metadata.from_config(reporting_config)
    second = Metadata.from_config(reporting_config)
    first.product.name = "Renamed"
    assert second.product.name == "Identity Gateway"
    assert reporting_config.product.name == "Identity Gateway"


def test_metadata_projection(reporting_config: ReportingConfig) -> None:
    metadata = Metadata.from_config(reporting_config)
    metadata.labels = ["sample"]
    assert metadata.to_projection() == {
        "labels": ["sample"],
        "product": {"uid": "idp-7", "name": "Identity Gateway", "version": "2.4.1", "vendor_name": "Example Corp"},
        "version": "1.5.0",
    }
