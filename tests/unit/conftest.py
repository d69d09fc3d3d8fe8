"""Pytest configuration and fixtures for unit tests."""

import pytest


@pytest.fixture
def octave_strarray() -> list[str]:
    """Valid set whose matches nest inside each other."""
    return ["octave", "Oct", "octopus", "octaves"]


@pytest.fixture
def abc_strarray() -> list[str]:
    """Valid set with two entries sharing the 'abc' prefix."""
    return ["abc1", "def", "abc2"]
