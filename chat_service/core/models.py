# chat_service/core/models.py
"""
Wire-level data model for chat completions.

Message is immutable once created. Payload is built fresh from a history
snapshot for every request and is never retained.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """
    One conversation turn.

    Roles are free-form ("user", "assistant", "system", ...); nothing here
    restricts them.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class Payload(BaseModel):
    """Request body for the chat completions endpoint."""

    model: str
    messages: List[Message]

    @classmethod
    def build(cls, model: str, messages: Sequence[Message]) -> "Payload":
        return cls(model=model, messages=list(messages))

    def to_bytes(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


__all__ = ["Message", "Payload"]
