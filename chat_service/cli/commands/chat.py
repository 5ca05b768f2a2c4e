# chat_service/cli/commands/chat.py
"""
Chat command - interactive conversation.

Usage:
    chat-service chat
    chat-service chat -m gpt-4o -p usage

Replies are rendered by a history subscriber, not by the command loop; a
failed turn prints the error and the session continues.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from chat_service.cli.ui import ui
from chat_service.cli.utils import build_service
from chat_service.core.exceptions import ChatServiceError
from chat_service.core.http import APIError
from chat_service.core.models import Message
from chat_service.logging.logger import configure_logging, get_logger
from chat_service.logging.tags import CLI

logger = get_logger(__name__)

EXIT_WORDS = {"exit", "quit", ":q"}


def _render(message: Message, messages: tuple[Message, ...]) -> None:
    ui.message(message)


async def _session(service) -> None:
    """Run the prompt loop until an exit word or end of input."""
    unsubscribe = service.history.subscribe(_render)
    try:
        while True:
            try:
                prompt = await asyncio.to_thread(typer.prompt, "You", prompt_suffix=" > ")
            except (EOFError, typer.Abort):
                break

            if prompt.strip().lower() in EXIT_WORDS:
                break
            if not prompt.strip():
                continue

            try:
                await service.completion(prompt)
            except (ChatServiceError, APIError) as e:
                logger.debug(f"{CLI} Turn failed: {e!r}")
                ui.error(str(e))
    finally:
        unsubscribe()
        await service.aclose()


def command(
    config: Optional[Path] = None,
    model: Optional[str] = None,
    plugins: Optional[List[str]] = None,
    verbose: bool = False,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    service = build_service(config, model, plugins)

    ui.header("Chat", f"model: {service.model}")
    ui.info("Type 'exit' or 'quit' to end the conversation.")

    asyncio.run(_session(service))

    ui.info(f"Chat ended after {len(service.history)} messages.")
