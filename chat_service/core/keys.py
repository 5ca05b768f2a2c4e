# chat_service/core/keys.py
"""
Key schemas for the chat completion response.

Each schema is a closed set of field names valid at one nesting level:

{
  "id": "chatcmpl-123",
  "object": "chat.completion",
  "created": 1677652288,
  "choices": [{
    "index": 0,
    "message": {"role": "assistant", "content": "Hello there!"},
    "finish_reason": "stop"
  }],
  "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21}
}
"""

from __future__ import annotations

from enum import Enum


class Root(str, Enum):
    ID = "id"
    OBJECT = "object"
    CREATED = "created"
    CHOICES = "choices"
    USAGE = "usage"


class Choices(str, Enum):
    INDEX = "index"
    MESSAGE = "message"
    FINISH_REASON = "finish_reason"


class Message(str, Enum):
    ROLE = "role"
    CONTENT = "content"


class Usage(str, Enum):
    PROMPT_TOKENS = "prompt_tokens"
    COMPLETION_TOKENS = "completion_tokens"
    TOTAL_TOKENS = "total_tokens"


__all__ = ["Root", "Choices", "Message", "Usage"]
