# tests/unit/test_cli.py
"""
Tests for the chat-service CLI.
"""

from __future__ import annotations

import asyncio
import threading
from unittest.mock import patch

from typer.testing import CliRunner

from chat_service.cli.cli import app
from chat_service.cli.commands.chat import _session
from chat_service.service import ChatService

from .helpers import FakeTransport, completion_body

runner = CliRunner()


def _service(*responses) -> ChatService:
    return ChatService(key="K", transport=FakeTransport(*responses))


class TestAskCommand:
    def test_ask_shows_help(self):
        result = runner.invoke(app, ["ask", "--help"])

        assert result.exit_code == 0
        assert "prompt" in result.output.lower()

    def test_ask_prints_reply(self):
        service = _service(completion_body("Hi there"))

        with patch("chat_service.cli.commands.ask.build_service", return_value=service):
            result = runner.invoke(app, ["ask", "Hello!"])

        assert result.exit_code == 0
        assert "Hi there" in result.output
        assert len(service.history) == 2

    def test_ask_reports_failure(self):
        with patch("chat_service.cli.commands.ask.build_service", return_value=_service(b"not json")):
            result = runner.invoke(app, ["ask", "Hello!"])

        assert result.exit_code == 1
        assert "Malformed Response" in result.output

    def test_ask_without_key_fails_cleanly(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["ask", "Hello!"])

        assert result.exit_code == 1
        assert "API key not found" in result.output

    def test_ask_with_unknown_plugin(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("OPENAI_API_KEY", "K")

        result = runner.invoke(app, ["ask", "Hello!", "--plugin", "nope"])

        assert result.exit_code == 1
        assert "Unknown plugin" in result.output


class TestChatCommand:
    def test_chat_renders_replies_and_exits(self):
        service = _service(completion_body("first reply"), completion_body("second reply"))

        with patch("chat_service.cli.commands.chat.build_service", return_value=service):
            result = runner.invoke(app, ["chat"], input="one\ntwo\nexit\n")

        assert result.exit_code == 0
        assert "first reply" in result.output
        assert "second reply" in result.output
        assert [m.content for m in service.chat_history] == [
            "one",
            "first reply",
            "two",
            "second reply",
        ]

    def test_chat_continues_after_failed_turn(self):
        service = _service(b"", completion_body("recovered"))

        with patch("chat_service.cli.commands.chat.build_service", return_value=service):
            result = runner.invoke(app, ["chat"], input="one\ntwo\nquit\n")

        assert result.exit_code == 0
        assert "No Data" in result.output
        assert "recovered" in result.output
        assert [m.role for m in service.chat_history] == ["user", "user", "assistant"]

    def test_chat_ends_on_eof(self):
        service = _service()

        with patch("chat_service.cli.commands.chat.build_service", return_value=service):
            result = runner.invoke(app, ["chat"], input="")

        assert result.exit_code == 0
        assert len(service.history) == 0

    def test_prompt_is_read_off_the_event_loop_thread(self):
        service = _service()
        threads = []

        def fake_prompt(*args, **kwargs):
            threads.append(threading.get_ident())
            return "exit"

        with patch("chat_service.cli.commands.chat.typer.prompt", side_effect=fake_prompt):
            asyncio.run(_session(service))

        assert len(threads) == 1
        assert threads[0] != threading.get_ident()


class TestPluginsCommand:
    def test_lists_plugins(self):
        result = runner.invoke(app, ["plugins"])

        assert result.exit_code == 0
        assert "usage" in result.output
        assert "finish_reason" in result.output
