# chat_service/cli/commands/plugins.py
"""Plugins command - list registered response plugins."""

from __future__ import annotations

from chat_service.cli.ui import console, ui
from chat_service.plugins.registry import available_plugins


def command() -> None:
    ui.header("Plugins", "Run over every response, in the order given")
    for name in available_plugins():
        console.print(f"  • {name}")
