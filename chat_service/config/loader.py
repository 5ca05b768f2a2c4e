# chat_service/config/loader.py
"""
Configuration loading.

Usage:
    from chat_service.config.loader import load_config, ConfigError

    config = load_config("chat_service.yaml")
    config = load_config()  # ./chat_service.yaml if present, else defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from chat_service.config.schema import ChatServiceConfig
from chat_service.logging.logger import get_logger
from chat_service.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULT_CONFIG_NAME = "chat_service.yaml"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> ChatServiceConfig:
    """
    Load and validate a configuration file.

    With no path, ./chat_service.yaml is used when it exists; otherwise
    the built-in defaults are returned.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If config doesn't match the schema
    """
    if path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if not default.exists():
            logger.debug(f"{CONFIG} No {DEFAULT_CONFIG_NAME} found, using defaults")
            return ChatServiceConfig()
        path = default

    p = Path(path)
    data = load_yaml(p)

    try:
        return ChatServiceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=p) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "DEFAULT_CONFIG_NAME",
    "load_yaml",
    "load_config",
]
