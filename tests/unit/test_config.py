"""Tests for configuration."""

import pytest

from validstr.core.config import Constants, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings fall back to defaults without environment variables."""
    monkeypatch.delenv("LOGFIRE_TOKEN", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.service_name == "validstr"
    assert settings.logfire_token is None
    assert settings.is_production is False


def test_environment_variables_are_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings are read from environment variables regardless of case."""
    monkeypatch.setenv("logfire_token", "token123")
    monkeypatch.setenv("ENVIRONMENT", "Production")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.logfire_token == "token123"
    assert settings.is_production is True


def test_calling_convention_constants() -> None:
    """Test the builtin accepts 2 to 5 arguments with at most 2 names."""
    assert Constants.MIN_NARGIN == 2
    assert Constants.MAX_NARGIN == 5
    assert Constants.MAX_CHARACTER_INPUTS == 2
    assert Constants.ENTRY_SEPARATOR == ", "
