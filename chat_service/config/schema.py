# chat_service/config/schema.py
"""
Pydantic schema for chat_service configuration files.

Example (chat_service.yaml):

    model: gpt-3.5-turbo
    endpoint: https://api.openai.com/v1/chat/completions
    timeout: 60
    plugins:
      - name: usage
      - name: finish_reason
        kwargs:
          rejected: [length]
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class PluginConfig(BaseModel):
    """One entry of the ordered plugin list."""

    model_config = ConfigDict(extra="forbid")

    name: str
    kwargs: Dict[str, Any] = Field(default_factory=dict)


class ChatServiceConfig(BaseModel):
    """Top-level configuration for a ChatService."""

    model_config = ConfigDict(extra="forbid")

    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    api_key: Optional[str] = Field(
        default=None,
        description="Explicit API key. Prefer the OPENAI_API_KEY environment variable.",
    )
    timeout: Optional[float] = Field(default=None, gt=0)
    plugins: List[PluginConfig] = Field(default_factory=list)

    @field_validator("plugins", mode="before")
    @classmethod
    def _accept_bare_names(cls, value: Any) -> Any:
        # "plugins: [usage, log]" is shorthand for [{name: usage}, {name: log}]
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value


__all__ = ["ChatServiceConfig", "PluginConfig", "DEFAULT_MODEL", "DEFAULT_ENDPOINT"]
