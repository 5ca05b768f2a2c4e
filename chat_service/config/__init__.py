# chat_service/config/__init__.py
from chat_service.config.credentials import CredentialError, resolve_api_key
from chat_service.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    load_yaml,
)
from chat_service.config.schema import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    ChatServiceConfig,
    PluginConfig,
)

__all__ = [
    "ChatServiceConfig",
    "PluginConfig",
    "DEFAULT_MODEL",
    "DEFAULT_ENDPOINT",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "CredentialError",
    "load_config",
    "load_yaml",
    "resolve_api_key",
]
