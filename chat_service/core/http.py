# chat_service/core/http.py
"""
HTTP transport for the completion endpoint.

The completion core only needs one primitive:

    await transport.post(url, body, headers) -> TransportResponse

HTTPXTransport is the default implementation over httpx.AsyncClient. Any
object with the same coroutine signature can be injected instead (tests use
httpx.MockTransport underneath, or a hand-written fake).

Error handling:
    - Non-2xx statuses and connection/timeout failures raise APIError
      (or a subclass). The core lets these propagate unchanged.
    - No retries and no rate limiting happen here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from chat_service.logging.logger import get_logger
from chat_service.logging.tags import HTTP

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


@dataclass
class APIError(Exception):
    """
    Structured API error with details.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if available)
        endpoint: URL that failed
        details: Additional error details from the API response
        original_error: The original exception that caused this error
    """

    message: str
    status_code: Optional[int] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None
    original_error: Optional[Exception] = None

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.details:
            parts.append(f"- {self.details}")

        return " ".join(parts)


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded."""


class AuthenticationError(APIError):
    """Raised when API authentication fails."""


class ModelNotFoundError(APIError):
    """Raised when requested model doesn't exist."""


# =============================================================================
# Transport contract
# =============================================================================


@dataclass(frozen=True)
class TransportResponse:
    """Result of a POST: the body bytes, or None when the server sent none."""

    data: Optional[bytes]
    status_code: Optional[int] = None
    headers: Optional[Mapping[str, str]] = None


class Transport(Protocol):
    """Anything that can POST a body and hand back the response bytes."""

    async def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> TransportResponse: ...


# =============================================================================
# Default Configuration
# =============================================================================

DEFAULT_TIMEOUTS = {
    "default": 30.0,
    "chat": 120.0,  # generation can be slow
}


# =============================================================================
# httpx implementation
# =============================================================================


class HTTPXTransport:
    """
    Transport backed by httpx.AsyncClient.

    Usage:
        async with HTTPXTransport(timeout_type="chat") as transport:
            response = await transport.post(url, body, headers)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        timeout_type: str = "chat",
        client: Optional[httpx.AsyncClient] = None,
        **kwargs: Any,
    ) -> None:
        if timeout is None:
            timeout = DEFAULT_TIMEOUTS.get(timeout_type, DEFAULT_TIMEOUTS["default"])
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout, **kwargs)
        logger.debug(f"{HTTP} Created async HTTP client (timeout={timeout}s)")

    async def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> TransportResponse:
        try:
            response = await self._client.post(url, content=body, headers=dict(headers))
            raise_for_status(response, endpoint=url)
        except APIError:
            raise
        except httpx.HTTPError as exc:
            raise handle_api_error(exc, endpoint=url) from exc

        logger.debug(f"{HTTP} POST {url} -> {response.status_code} ({len(response.content)} bytes)")
        return TransportResponse(
            data=response.content or None,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HTTPXTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


# =============================================================================
# Error Handling
# =============================================================================


def _error_details(response: httpx.Response) -> Optional[str]:
    try:
        error_data = response.json()
    except ValueError:
        return response.text[:200] if response.text else None

    if not isinstance(error_data, dict):
        return None
    error = error_data.get("error")
    if isinstance(error, dict):
        return error.get("message")
    return error_data.get("message") or (error if isinstance(error, str) else None)


def handle_api_error(exc: Exception, endpoint: str = "") -> APIError:
    """
    Convert an httpx exception to a structured APIError.

    Example:
        try:
            response = await client.post(url, content=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise handle_api_error(exc, endpoint=url)
    """
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        details = _error_details(exc.response)

        if status_code == 401:
            error_cls, message = AuthenticationError, "Authentication failed"
        elif status_code == 429:
            error_cls, message = RateLimitError, "Rate limit exceeded"
        elif status_code == 404:
            error_cls, message = ModelNotFoundError, "Resource not found"
        else:
            error_cls, message = APIError, "API request failed"

        return error_cls(
            message=message,
            status_code=status_code,
            endpoint=endpoint,
            details=details,
            original_error=exc,
        )

    if isinstance(exc, httpx.ConnectError):
        return APIError(
            message="Failed to connect",
            endpoint=endpoint,
            details=str(exc),
            original_error=exc,
        )

    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            message="Request timed out",
            endpoint=endpoint,
            details="Consider increasing the transport timeout",
            original_error=exc,
        )

    return APIError(
        message=f"Request failed: {exc}",
        endpoint=endpoint,
        original_error=exc,
    )


def raise_for_status(response: httpx.Response, endpoint: str = "") -> None:
    """Raise the matching APIError if the response is not 2xx."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, endpoint=endpoint) from exc


def build_headers(api_key: str, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Request headers for the completion endpoint."""
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    if extra:
        headers.update(extra)
    return headers


__all__ = [
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "ModelNotFoundError",
    "Transport",
    "TransportResponse",
    "HTTPXTransport",
    "DEFAULT_TIMEOUTS",
    "build_headers",
    "handle_api_error",
    "raise_for_status",
]
