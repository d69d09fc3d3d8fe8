"""Tests for the builtin registry."""

from collections.abc import Iterator

import pytest

from validstr.core.builtin_registry import (
    Builtin,
    call_builtin,
    get_builtin,
    get_builtins,
    register_builtin,
    unregister_builtin,
)


@pytest.fixture
def echo_builtin() -> Iterator[Builtin]:
    """Register a throwaway builtin and remove it afterwards."""
    builtin = Builtin(name="test_echo", func=lambda *args: args, help_text="test_echo (...)")
    register_builtin(builtin)
    yield builtin
    unregister_builtin("test_echo")


@pytest.mark.unit
def test_register_and_get(echo_builtin: Builtin) -> None:
    """Test a registered builtin can be looked up by name."""
    assert get_builtin("test_echo") is echo_builtin
    assert "test_echo" in get_builtins()


@pytest.mark.unit
def test_duplicate_registration_rejected(echo_builtin: Builtin) -> None:
    """Test registering the same name twice raises ValueError."""
    with pytest.raises(ValueError, match="Builtin 'test_echo' is already registered"):
        register_builtin(echo_builtin)


@pytest.mark.unit
def test_get_builtins_returns_copy(echo_builtin: Builtin) -> None:
    """Test callers cannot modify the registry through the returned mapping."""
    builtins = get_builtins()
    builtins.pop("test_echo")

    assert get_builtin("test_echo") is echo_builtin


@pytest.mark.unit
def test_call_builtin_passes_arguments(echo_builtin: Builtin) -> None:
    """Test positional arguments are forwarded unchanged."""
    assert call_builtin("test_echo", 1, "two") == (1, "two")


@pytest.mark.unit
def test_call_unknown_builtin() -> None:
    """Test calling an unregistered name raises KeyError."""
    with pytest.raises(KeyError, match="'no_such_builtin' undefined"):
        call_builtin("no_such_builtin")


@pytest.mark.unit
def test_get_unknown_builtin() -> None:
    """Test looking up an unregistered name returns None."""
    assert get_builtin("no_such_builtin") is None


@pytest.mark.unit
def test_unregister_unknown_is_noop() -> None:
    """Test unregistering a missing name does nothing."""
    unregister_builtin("no_such_builtin")
