"""Pytest configuration and shared fixtures."""

import logfire
import pytest


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire() -> None:
    """Configure Logfire locally so spans are created but never exported."""
    logfire.configure(send_to_logfire=False, console=False)
