"""Tests for primitive types."""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError

from telemetry.ocsf.primitives import EpochMillis
from telemetry.ocsf.primitives import NonEmptyStr
from telemetry.ocsf.primitives import NonNegativeInt


class _Sample(BaseModel):
    label: NonEmptyStr
    at: EpochMillis = EpochMillis(0)


def test_non_empty_str_strips_whitespace() -> None:
    assert NonEmptyStr("  Logon ") == "Logon"


def test_non_empty_str_rejects_blank() -> None:
    """Empty and whitespace-only strings should be rejected."""
    with pytest.raises(ValueError, match="cannot be empty"):
        NonEmptyStr("")
    with pytest.raises(ValueError, match="cannot be empty"):
        NonEmptyStr("   ")


def test_non_negative_int_rejects_negative() -> None:
    assert NonNegativeInt(0) == 0
    with pytest.raises(ValueError, match="must be >= 0"):
        NonNegativeInt(-1)


def test_primitives_validate_inside_models() -> None:
    """The primitive types should be usable as pydantic field types."""
    sample = _Sample(label=" ok ", at=1700000000000)
    assert sample.label == "ok"
    assert isinstance(sample.label, NonEmptyStr)
    assert sample.model_dump() == {"label": "ok", "at": 1700000000000}


def test_primitives_reject_invalid_values_inside_models() -> None:
    with pytest.raises(ValidationError):
        _Sample(label="")
    with pytest.raises(ValidationError):
        _Sample(label="ok", at=-5)
