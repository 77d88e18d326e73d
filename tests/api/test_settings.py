"""Tests for environment-driven service settings."""

import pytest

from projection.indices import DEFAULT_INDICES
from projection_api.settings import load_settings


def test_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROJECTION_PRIMARY_RATE", "PROJECTION_INFLATION_RATE", "PROJECTION_POLICY_RATE", "PROJECTION_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.default_indices == DEFAULT_INDICES
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROJECTION_PRIMARY_RATE", "0.12")
    monkeypatch.setenv("PROJECTION_POLICY_RATE", "")
    monkeypatch.setenv("PROJECTION_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.default_indices.primary_floating_rate == 0.12
    assert s.default_indices.policy_rate == DEFAULT_INDICES.policy_rate
    assert s.log_level == "DEBUG"


def test_invalid_rate_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROJECTION_INFLATION_RATE", "4.5%")
    with pytest.raises(ValueError, match="PROJECTION_INFLATION_RATE"):
        load_settings()
