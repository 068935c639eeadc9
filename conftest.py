"""Root conftest: registers the fixtures shared by the event model tests."""

pytest_plugins = ["telemetry.ocsf.fixtures"]
