# tests/unit/conftest.py
"""Fixtures for unit tests."""

from __future__ import annotations

import pytest

from .helpers import FakeTransport


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch):
    """Keep credential resolution independent of the developer's shell."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("CHAT_SERVICE_API_KEY", raising=False)
