# chat_service/cli/utils.py
"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from chat_service.cli.ui import ui
from chat_service.config.credentials import CredentialError
from chat_service.config.loader import ConfigError, load_config
from chat_service.config.schema import PluginConfig
from chat_service.plugins.registry import PluginRegistryError
from chat_service.service import ChatService


def build_service(
    config_path: Optional[Path] = None,
    model: Optional[str] = None,
    plugins: Optional[List[str]] = None,
) -> ChatService:
    """
    Load config and build a ChatService, or exit with a helpful message.

    `plugins` given on the command line replace the configured list.
    """
    try:
        config = load_config(config_path)
        if plugins:
            config = config.model_copy(update={"plugins": [PluginConfig(name=p) for p in plugins]})
        return ChatService.from_config(config, model=model)
    except (ConfigError, CredentialError, PluginRegistryError) as e:
        ui.error(str(e))
        raise typer.Exit(1)
