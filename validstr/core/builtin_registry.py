"""Builtin registry: the namespace of host-callable functions."""

from collections.abc import Callable
from typing import ClassVar

from pydantic import BaseModel


class Builtin(BaseModel):
    """A function exposed to the host under a fixed name."""

    name: str
    func: Callable[..., object]
    help_text: str


class _RegistryState:
    """Singleton state for builtin registry."""

    builtins: ClassVar[dict[str, Builtin]] = {}


_registry = _RegistryState()


def register_builtin(builtin: Builtin) -> None:
    """Register a builtin in the namespace.

    Args:
        builtin: Builtin to register

    Raises:
        ValueError: If a builtin with the same name is already registered
    """
    if builtin.name in _registry.builtins:
        msg = f"Builtin '{builtin.name}' is already registered"
        raise ValueError(msg)
    _registry.builtins[builtin.name] = builtin


def unregister_builtin(name: str) -> None:
    """Remove a builtin from the namespace if present."""
    _registry.builtins.pop(name, None)


def get_builtins() -> dict[str, Builtin]:
    """Get all registered builtins.

    Returns:
        Dictionary mapping builtin names to Builtin instances
    """
    return dict(_registry.builtins)


def get_builtin(name: str) -> Builtin | None:
    """Get a specific builtin by name.

    Args:
        name: Builtin name to retrieve

    Returns:
        Builtin if found, None otherwise
    """
    return _registry.builtins.get(name)


def call_builtin(name: str, *args: object) -> object:
    """Call a registered builtin with positional arguments.

    Raises:
        KeyError: If no builtin is registered under ``name``
    """
    builtin = get_builtin(name)
    if builtin is None:
        msg = f"'{name}' undefined"
        raise KeyError(msg)
    return builtin.func(*args)
