# chat_service/core/__init__.py
"""
Core building blocks of the completion flow.

    keys        - key schemas for the response JSON
    json_view   - schema-keyed read-only JSON view
    models      - Message and Payload
    history     - serialized, observable chat history
    http        - transport contract and httpx implementation
    exceptions  - error taxonomy
"""

from chat_service.core.exceptions import (
    ChatServiceError,
    MalformedResponseError,
    MissingFieldError,
    NoChoicesError,
    NoDataError,
    PluginError,
)
from chat_service.core.history import ChatHistory
from chat_service.core.json_view import JSONView
from chat_service.core.models import Message, Payload

__all__ = [
    "ChatHistory",
    "JSONView",
    "Message",
    "Payload",
    "ChatServiceError",
    "NoDataError",
    "MalformedResponseError",
    "MissingFieldError",
    "NoChoicesError",
    "PluginError",
]
