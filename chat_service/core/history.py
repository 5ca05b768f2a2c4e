# chat_service/core/history.py
"""
Append-only chat history shared between completions and observers.

Every append and every snapshot goes through one asyncio.Lock, so
concurrent completions on the same event loop never interleave a read with
a write. The lock only guards the in-memory list; it is never held across
network I/O.

Observers (a CLI, a UI binding) subscribe with a callback:

    def render(message: Message, messages: tuple[Message, ...]) -> None: ...

    unsubscribe = history.subscribe(render)
"""

from __future__ import annotations

import asyncio
from typing import Callable, Iterator, List, Tuple

from chat_service.core.models import Message
from chat_service.logging.logger import get_logger
from chat_service.logging.tags import HISTORY

logger = get_logger(__name__)

HistoryObserver = Callable[[Message, Tuple[Message, ...]], None]


class ChatHistory:
    """Ordered log of exchanged messages. Never reordered, never trimmed."""

    def __init__(self) -> None:
        self._messages: List[Message] = []
        self._observers: List[HistoryObserver] = []
        self._lock = asyncio.Lock()

    @property
    def messages(self) -> Tuple[Message, ...]:
        """Current contents, for synchronous rendering."""
        return tuple(self._messages)

    async def append(self, message: Message) -> None:
        """Add `message` as the new last element and notify observers."""
        async with self._lock:
            self._messages.append(message)
            snapshot = tuple(self._messages)
        logger.debug(f"{HISTORY} Appended {message.role!r} turn ({len(snapshot)} total)")
        self._notify(message, snapshot)

    async def snapshot(self) -> Tuple[Message, ...]:
        """Consistent point-in-time copy of the history."""
        async with self._lock:
            return tuple(self._messages)

    def subscribe(self, observer: HistoryObserver) -> Callable[[], None]:
        """Register `observer`; returns a function that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, message: Message, snapshot: Tuple[Message, ...]) -> None:
        for observer in list(self._observers):
            try:
                observer(message, snapshot)
            except Exception:
                logger.exception(f"{HISTORY} History observer {observer!r} failed")

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))


__all__ = ["ChatHistory", "HistoryObserver"]
