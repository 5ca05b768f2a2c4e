# chat_service/plugins/builtin.py
"""
Stock plugins.

- UsageTrackerPlugin: accumulates token usage across responses
- FinishReasonPlugin: rejects responses whose first choice stopped for a
  disallowed reason (truncation, content filtering)
- ResponseLogPlugin: logs the response envelope (id, object, created)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from chat_service.core import keys
from chat_service.core.exceptions import PluginError
from chat_service.core.json_view import JSONView
from chat_service.logging.logger import get_logger
from chat_service.logging.tags import PLUGIN
from chat_service.plugins.base import ChatPlugin

logger = get_logger(__name__)


@dataclass
class UsageRecord:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class UsageTrackerPlugin(ChatPlugin):
    """Sums the `usage` block of every response it sees."""

    plugin_name = "usage"

    def __init__(self) -> None:
        self.totals = UsageRecord()
        self.records: List[UsageRecord] = []

    async def handle(self, view: JSONView[keys.Root]) -> None:
        usage = view.object(keys.Root.USAGE, keyed=keys.Usage)
        if usage is None:
            logger.debug(f"{PLUGIN} Response carries no usage block")
            return

        record = UsageRecord(
            prompt_tokens=usage.get(keys.Usage.PROMPT_TOKENS, as_=int) or 0,
            completion_tokens=usage.get(keys.Usage.COMPLETION_TOKENS, as_=int) or 0,
            total_tokens=usage.get(keys.Usage.TOTAL_TOKENS, as_=int) or 0,
        )
        self.records.append(record)
        self.totals.prompt_tokens += record.prompt_tokens
        self.totals.completion_tokens += record.completion_tokens
        self.totals.total_tokens += record.total_tokens

        logger.info(
            f"{PLUGIN} Usage: prompt={record.prompt_tokens} "
            f"completion={record.completion_tokens} total={record.total_tokens}"
        )


class FinishReasonPlugin(ChatPlugin):
    """Fails the completion when choices[0].finish_reason is rejected."""

    plugin_name = "finish_reason"

    DEFAULT_REJECTED = ("length", "content_filter")

    def __init__(self, rejected: Optional[Union[str, Iterable[str]]] = None) -> None:
        if rejected is None:
            rejected = self.DEFAULT_REJECTED
        elif isinstance(rejected, str):
            # a bare string is one reason
            rejected = (rejected,)
        self.rejected = frozenset(rejected)

    async def handle(self, view: JSONView[keys.Root]) -> None:
        choices = view.array(keys.Root.CHOICES, keyed=keys.Choices)
        if not choices:
            return

        reason = choices[0].get(keys.Choices.FINISH_REASON, as_=str)
        if reason in self.rejected:
            raise PluginError(f"completion stopped early (finish_reason={reason!r})")


class ResponseLogPlugin(ChatPlugin):
    plugin_name = "log"

    async def handle(self, view: JSONView[keys.Root]) -> None:
        logger.info(
            f"{PLUGIN} Response id={view.get(keys.Root.ID)} "
            f"object={view.get(keys.Root.OBJECT)} "
            f"created={view.get(keys.Root.CREATED, as_=int)}"
        )


__all__ = [
    "UsageRecord",
    "UsageTrackerPlugin",
    "FinishReasonPlugin",
    "ResponseLogPlugin",
]
