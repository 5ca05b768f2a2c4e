"""
chat_service - conversational completion client with a response plugin pipeline.

Quick Start:
    >>> import asyncio
    >>> from chat_service import ChatService
    >>> service = ChatService(key="sk-...")
    >>> reply = asyncio.run(service.completion("Hello!"))
    >>> service.chat_history
    (Message(role='user', content='Hello!'), Message(role='assistant', content='...'))

Architecture:
    chat_service/
    ├── core/       # JSON view, key schemas, models, history, transport, errors
    ├── plugins/    # Plugin contract, fail-fast runner, stock plugins, registry
    ├── config/     # YAML config, schema, credentials
    ├── cli/        # chat-service command
    └── service.py  # Completion orchestrator
"""

__version__ = "0.1.0"

from chat_service.core import keys
from chat_service.core.exceptions import (
    ChatServiceError,
    MalformedResponseError,
    MissingFieldError,
    NoChoicesError,
    NoDataError,
    PluginError,
)
from chat_service.core.history import ChatHistory
from chat_service.core.http import APIError, HTTPXTransport, Transport, TransportResponse
from chat_service.core.json_view import JSONView
from chat_service.core.models import Message, Payload
from chat_service.plugins import ChatPlugin, run_plugins
from chat_service.service import ChatModel, ChatService

__all__ = [
    "__version__",
    # Orchestrator
    "ChatService",
    "ChatModel",
    # Data
    "Message",
    "Payload",
    "ChatHistory",
    "JSONView",
    "keys",
    # Plugins
    "ChatPlugin",
    "run_plugins",
    # Transport
    "Transport",
    "TransportResponse",
    "HTTPXTransport",
    "APIError",
    # Errors
    "ChatServiceError",
    "NoDataError",
    "MalformedResponseError",
    "MissingFieldError",
    "NoChoicesError",
    "PluginError",
]
