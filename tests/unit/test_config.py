# tests/unit/test_config.py
"""
Tests for configuration loading and credential resolution.
"""

from __future__ import annotations

import pytest

from chat_service.config.credentials import CredentialError, resolve_api_key
from chat_service.config.loader import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    load_yaml,
)
from chat_service.config.schema import DEFAULT_ENDPOINT, DEFAULT_MODEL, ChatServiceConfig


class TestLoadConfig:
    def test_full_config(self, tmp_path):
        path = tmp_path / "chat.yaml"
        path.write_text(
            "model: gpt-4o\n"
            "timeout: 60\n"
            "plugins:\n"
            "  - usage\n"
            "  - name: finish_reason\n"
            "    kwargs:\n"
            "      rejected: [length]\n"
        )

        config = load_config(path)

        assert config.model == "gpt-4o"
        assert config.timeout == 60
        assert config.endpoint == DEFAULT_ENDPOINT
        assert [p.name for p in config.plugins] == ["usage", "finish_reason"]
        assert config.plugins[1].kwargs == {"rejected": ["length"]}

    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config == ChatServiceConfig()
        assert config.model == DEFAULT_MODEL
        assert config.plugins == []

    def test_picks_up_default_file(self, tmp_path, monkeypatch):
        (tmp_path / "chat_service.yaml").write_text("model: local\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().model == "local"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert "missing.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("model: [unclosed\n")

        with pytest.raises(ConfigParseError):
            load_yaml(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigParseError):
            load_yaml(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("modle: gpt-4o\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_non_positive_timeout_rejected(self, tmp_path):
        path = tmp_path / "timeout.yaml"
        path.write_text("timeout: 0\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestCredentials:
    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "env")

        assert resolve_api_key("explicit") == "explicit"

    def test_provider_env_before_generic(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "openai")
        monkeypatch.setenv("CHAT_SERVICE_API_KEY", "generic")

        assert resolve_api_key() == "openai"

    def test_generic_fallback(self, monkeypatch):
        monkeypatch.setenv("CHAT_SERVICE_API_KEY", "generic")

        assert resolve_api_key() == "generic"

    def test_missing_key(self):
        with pytest.raises(CredentialError) as exc_info:
            resolve_api_key()

        assert "OPENAI_API_KEY" in str(exc_info.value)
