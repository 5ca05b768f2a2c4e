# chat_service/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from chat_service.cli.ui import ui, console

    ui.header("Chat")
    ui.error("Something failed")
"""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from chat_service.core.models import Message

console = Console()


class UI:
    """Rich-styled output helpers."""

    def header(self, title: str, subtitle: str = "") -> None:
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")

    def message(self, message: Message) -> None:
        """Render one chat turn."""
        if message.role == "user":
            return
        console.print(
            Panel(
                Markdown(message.content),
                title=f"[bold cyan]{escape(message.role.capitalize())}[/bold cyan]",
                border_style="cyan",
            )
        )


ui = UI()

__all__ = ["UI", "ui", "console"]
