# chat_service/service.py
"""
ChatService - conversational completion client.

One ChatService is one conversation. Each completion() call:

    1. appends the user turn to the history
    2. builds the request payload from a history snapshot
    3. POSTs it through the transport (the only I/O)
    4. parses the body into a JSONView scoped to keys.Root
    5. runs the plugin pipeline over the view
    6. extracts choices[0].message.{role, content}
    7. appends the assistant turn and returns its content

The user turn is NOT rolled back when a later step fails: a failed call
leaves exactly one new message (the prompt) in the history, and calling
completion() again appends another user turn.

Usage:
    async with ChatService(key="sk-...") as service:
        reply = await service.completion("Hello!")
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from chat_service.config.credentials import resolve_api_key
from chat_service.config.schema import DEFAULT_ENDPOINT, DEFAULT_MODEL, ChatServiceConfig
from chat_service.core import keys
from chat_service.core.exceptions import MissingFieldError, NoChoicesError, NoDataError
from chat_service.core.history import ChatHistory
from chat_service.core.http import HTTPXTransport, Transport, build_headers
from chat_service.core.json_view import JSONView
from chat_service.core.models import Message, Payload
from chat_service.logging.logger import get_logger
from chat_service.logging.tags import CHAT
from chat_service.plugins.base import ChatPlugin
from chat_service.plugins.pipeline import run_plugins
from chat_service.plugins.registry import get_plugin

logger = get_logger(__name__)


class ChatModel:
    """Known chat model identifiers."""

    GPT = DEFAULT_MODEL


class ChatService:
    """
    Client for a chat completion endpoint that keeps the dialogue history.

    Args:
        key: API key sent as a bearer token
        model: Model identifier (default: ChatModel.GPT)
        plugins: Ordered plugins run over every response
        transport: Transport to POST through (default: HTTPXTransport,
            created on first use and closed by aclose() / ``async with``)
        endpoint: Completion endpoint URL
        timeout: Timeout for the default transport, in seconds
    """

    def __init__(
        self,
        key: str,
        model: str = ChatModel.GPT,
        plugins: Iterable[ChatPlugin] = (),
        *,
        transport: Optional[Transport] = None,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = None,
    ) -> None:
        self.key = key
        self.model = model
        self.plugins: List[ChatPlugin] = list(plugins)
        self.endpoint = endpoint
        self.timeout = timeout
        self.history = ChatHistory()

        self._transport: Optional[Transport] = transport
        self._owns_transport = transport is None

    @classmethod
    def from_config(
        cls,
        config: ChatServiceConfig,
        *,
        transport: Optional[Transport] = None,
        key: Optional[str] = None,
        model: Optional[str] = None,
    ) -> "ChatService":
        """
        Build a service from a validated config.

        `key` and `model` override the config values. Plugins are
        instantiated through the registry in config order.
        """
        plugins = [get_plugin(p.name, **p.kwargs) for p in config.plugins]

        return cls(
            key=key or resolve_api_key(config.api_key),
            model=model or config.model,
            plugins=plugins,
            transport=transport,
            endpoint=config.endpoint,
            timeout=config.timeout,
        )

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HTTPXTransport(timeout=self.timeout)
        return self._transport

    @property
    def chat_history(self) -> tuple[Message, ...]:
        """Current conversation, oldest first."""
        return self.history.messages

    async def completion(self, prompt: str) -> str:
        """
        Send `prompt` with the full history and return the assistant reply.

        Raises:
            NoDataError: Transport returned no body
            MalformedResponseError: Body was not valid JSON
            PluginError: A plugin rejected the response
            NoChoicesError: No usable choices[0].message
            APIError: Transport failure, propagated unchanged
        """
        await self.append_chat_history(Message(role="user", content=prompt))

        messages = await self.history.snapshot()
        body = Payload.build(self.model, messages).to_bytes()

        logger.debug(f"{CHAT} Requesting completion ({len(messages)} messages, model={self.model})")
        response = await self.transport.post(self.endpoint, body, build_headers(self.key))

        if not response.data:
            raise NoDataError()

        view = JSONView.from_bytes(response.data, keys.Root)

        await run_plugins(self.plugins, view)

        role, content = self._extract_reply(view)

        await self.append_chat_history(Message(role=role, content=content))
        return content

    async def append_chat_history(self, message: Message) -> None:
        """Append through the history's single serialization point."""
        await self.history.append(message)

    @staticmethod
    def _extract_reply(view: JSONView[keys.Root]) -> tuple[str, str]:
        choices = view.array(keys.Root.CHOICES, keyed=keys.Choices)
        if not choices:
            raise NoChoicesError()

        message = choices[0].object(keys.Choices.MESSAGE, keyed=keys.Message)
        if message is None:
            raise NoChoicesError()

        content = message.get(keys.Message.CONTENT, as_=str)
        if content is None:
            raise NoChoicesError()

        try:
            role = message.require(keys.Message.ROLE, as_=str)
        except MissingFieldError as exc:
            raise NoChoicesError() from exc

        return role, content

    async def aclose(self) -> None:
        """Close the transport if this service created it."""
        if self._owns_transport and self._transport is not None:
            transport, self._transport = self._transport, None
            await transport.aclose()

    async def __aenter__(self) -> "ChatService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["ChatService", "ChatModel"]
