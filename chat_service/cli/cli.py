# chat_service/cli/cli.py
"""
chat-service CLI.

Commands:
    chat-service chat       Interactive conversation
    chat-service ask        One-shot completion
    chat-service plugins    List available response plugins

NOTE: Commands are lazy-loaded; the implementation module is imported only
when the command runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="chat-service",
    help="Conversational completion client.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("chat")
def chat(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier."),
    plugin: Optional[List[str]] = typer.Option(None, "--plugin", "-p", help="Plugin name (repeatable)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    """Interactive chat session."""
    from chat_service.cli.commands import chat as mod

    mod.command(config=config, model=model, plugins=plugin, verbose=verbose)


@app.command("ask")
def ask(
    prompt: str = typer.Argument(..., help="Prompt to send."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier."),
    plugin: Optional[List[str]] = typer.Option(None, "--plugin", "-p", help="Plugin name (repeatable)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    """Send a single prompt and print the reply."""
    from chat_service.cli.commands import ask as mod

    mod.command(prompt=prompt, config=config, model=model, plugins=plugin, verbose=verbose)


@app.command("plugins")
def plugins() -> None:
    """List available response plugins."""
    from chat_service.cli.commands import plugins as mod

    mod.command()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
