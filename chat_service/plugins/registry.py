# chat_service/plugins/registry.py
"""
Plugin registry.

Maps plugin names (as used in config files and on the command line) to
plugin classes. NO SILENT FALLBACK: an unknown name is an error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from chat_service.plugins.base import ChatPlugin
from chat_service.plugins.builtin import (
    FinishReasonPlugin,
    ResponseLogPlugin,
    UsageTrackerPlugin,
)


class PluginRegistryError(LookupError):
    """Raised when a plugin name cannot be resolved or instantiated."""


_REGISTRY: Dict[str, Type[ChatPlugin]] = {
    cls.plugin_name: cls
    for cls in (UsageTrackerPlugin, FinishReasonPlugin, ResponseLogPlugin)
}


def register_plugin(cls: Type[ChatPlugin]) -> Type[ChatPlugin]:
    """Register a plugin class under its plugin_name. Usable as a decorator."""
    if not cls.plugin_name:
        raise ValueError(f"{cls.__name__} must define plugin_name")
    _REGISTRY[cls.plugin_name] = cls
    return cls


def available_plugins() -> List[str]:
    """Sorted list of registered plugin names."""
    return sorted(_REGISTRY)


def get_plugin(name: str, **kwargs: Any) -> ChatPlugin:
    """
    Instantiate a plugin by name.

    Raises:
        PluginRegistryError: If the name is unknown or construction fails
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        raise PluginRegistryError(
            f"Unknown plugin: {name!r}. Available: {available_plugins()}"
        ) from None

    try:
        return cls(**kwargs)
    except TypeError as e:
        raise PluginRegistryError(f"Failed to create plugin {name!r}: {e}") from e


__all__ = [
    "PluginRegistryError",
    "available_plugins",
    "get_plugin",
    "register_plugin",
]
