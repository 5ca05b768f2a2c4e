# chat_service/cli/commands/ask.py
"""
Ask command - one-shot completion.

Usage:
    chat-service ask "Hello!"
    chat-service ask "Hello!" -p usage -p finish_reason
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from chat_service.cli.ui import console, ui
from chat_service.cli.utils import build_service
from chat_service.core.exceptions import ChatServiceError
from chat_service.core.http import APIError
from chat_service.logging.logger import configure_logging, get_logger
from chat_service.logging.tags import CLI

logger = get_logger(__name__)


async def _ask(prompt: str, config: Optional[Path], model: Optional[str], plugins: Optional[List[str]]) -> str:
    service = build_service(config, model, plugins)
    async with service:
        return await service.completion(prompt)


def command(
    prompt: str,
    config: Optional[Path] = None,
    model: Optional[str] = None,
    plugins: Optional[List[str]] = None,
    verbose: bool = False,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    logger.debug(f"{CLI} ask: {prompt!r}")

    try:
        reply = asyncio.run(_ask(prompt, config, model, plugins))
    except (ChatServiceError, APIError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    console.print(reply, markup=False, highlight=False)
