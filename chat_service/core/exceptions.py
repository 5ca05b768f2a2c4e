# chat_service/core/exceptions.py
"""
All exceptions raised by the chat completion core.

Hierarchy:
    ChatServiceError
    ├── NoDataError - transport returned no body
    ├── MalformedResponseError - body was not valid JSON
    ├── MissingFieldError - a required field was absent
    ├── NoChoicesError - no usable choices[0].message.content
    └── PluginError - a plugin rejected or failed on the response

Transport failures (chat_service.core.http.APIError) are not part of this
hierarchy; they propagate unchanged from the transport.
"""

from __future__ import annotations

from typing import Optional


class ChatServiceError(Exception):
    """Base error for the completion flow."""

    description: str = "Chat Service Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.description)

    def __str__(self) -> str:
        return self.args[0] if self.args else self.description


class NoDataError(ChatServiceError):
    """Transport succeeded but returned no body."""

    description = "No Data"


class MalformedResponseError(ChatServiceError):
    """Response body could not be parsed as JSON."""

    description = "Malformed Response"

    def __init__(self, message: Optional[str] = None, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body


class MissingFieldError(ChatServiceError):
    """A contractually required field was absent."""

    description = "Missing Field"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{self.description}: {field}")


class NoChoicesError(ChatServiceError):
    """Response parsed but lacked a usable choices[0].message.content."""

    description = "No AI Choices"


class PluginError(ChatServiceError):
    """
    A plugin rejected or failed while processing a response.

    Attributes:
        reason: Human-readable reason given by the plugin
        plugin: Name of the plugin that failed (filled in by the pipeline)
    """

    description = "Plugin Error"

    def __init__(self, reason: str, plugin: Optional[str] = None):
        self.reason = reason
        self.plugin = plugin
        super().__init__(reason)

    def __str__(self) -> str:
        if self.plugin:
            return f"[{self.plugin}] {self.reason}"
        return self.reason


__all__ = [
    "ChatServiceError",
    "NoDataError",
    "MalformedResponseError",
    "MissingFieldError",
    "NoChoicesError",
    "PluginError",
]
