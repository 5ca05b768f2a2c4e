# chat_service/config/credentials.py
"""
API key resolution.

Resolution order:
  1. Explicit value (argument or config file)
  2. OPENAI_API_KEY
  3. CHAT_SERVICE_API_KEY (generic fallback)
Fails with an actionable error.
"""

from __future__ import annotations

import os
from typing import Optional

from chat_service.logging.logger import get_logger
from chat_service.logging.tags import CONFIG

logger = get_logger(__name__)

PROVIDER_ENV_VARS = ["OPENAI_API_KEY"]
GENERIC_API_KEY_ENV = "CHAT_SERVICE_API_KEY"


class CredentialError(RuntimeError):
    """Raised when credentials cannot be resolved."""


def resolve_api_key(explicit: Optional[str] = None) -> str:
    """
    Resolve the API key used for the Authorization header.

    Raises:
        CredentialError: If no API key could be resolved
    """
    if explicit:
        logger.debug(f"{CONFIG} Using API key from explicit config")
        return explicit

    for env_name in PROVIDER_ENV_VARS + [GENERIC_API_KEY_ENV]:
        value = os.getenv(env_name)
        if value:
            logger.debug(f"{CONFIG} Using API key from env '{env_name}'")
            return value

    expected = ", ".join(PROVIDER_ENV_VARS + [GENERIC_API_KEY_ENV])
    raise CredentialError(f"API key not found. Set one of: {expected}, or provide 'api_key' in config.")


__all__ = ["CredentialError", "resolve_api_key", "GENERIC_API_KEY_ENV"]
