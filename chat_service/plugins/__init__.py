# chat_service/plugins/__init__.py
"""Response plugins: contract, runner, stock plugins and registry."""

from chat_service.plugins.base import ChatPlugin
from chat_service.plugins.builtin import (
    FinishReasonPlugin,
    ResponseLogPlugin,
    UsageTrackerPlugin,
)
from chat_service.plugins.pipeline import run_plugins
from chat_service.plugins.registry import (
    PluginRegistryError,
    available_plugins,
    get_plugin,
    register_plugin,
)

__all__ = [
    "ChatPlugin",
    "run_plugins",
    "UsageTrackerPlugin",
    "FinishReasonPlugin",
    "ResponseLogPlugin",
    "PluginRegistryError",
    "available_plugins",
    "get_plugin",
    "register_plugin",
]
