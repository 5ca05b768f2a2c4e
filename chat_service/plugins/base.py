# chat_service/plugins/base.py
"""
Plugin contract for response observers and validators.

A plugin receives a read-only view of every raw completion response,
scoped to the top-level schema (keys.Root), before the reply is extracted.
It may validate, record telemetry or react in any other way, but it must
not touch the chat history. To block extraction, raise PluginError.

Example:
    class RequireId(ChatPlugin):
        plugin_name = "require_id"

        async def handle(self, view: JSONView[keys.Root]) -> None:
            if view.get(keys.Root.ID) is None:
                raise PluginError("response has no id")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from chat_service.core import keys
from chat_service.core.json_view import JSONView


class ChatPlugin(ABC):
    """Base class for all response plugins."""

    plugin_name: ClassVar[str] = ""

    @property
    def name(self) -> str:
        return self.plugin_name or type(self).__name__

    @abstractmethod
    async def handle(self, view: JSONView[keys.Root]) -> None:
        """
        React to one response.

        Raises:
            PluginError: To reject the response and fail the completion
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = ["ChatPlugin"]
