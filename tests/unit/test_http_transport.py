# tests/unit/test_http_transport.py
"""
Tests for the httpx-backed transport, using httpx.MockTransport.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from chat_service.core.http import (
    APIError,
    AuthenticationError,
    HTTPXTransport,
    ModelNotFoundError,
    RateLimitError,
    build_headers,
)
from chat_service.service import ChatService

URL = "https://api.example.test/v1/chat/completions"


def _transport(handler) -> HTTPXTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HTTPXTransport(client=client)


def _post(transport: HTTPXTransport, body: bytes = b"{}"):
    async def run():
        async with transport:
            return await transport.post(URL, body, build_headers("K"))

    return asyncio.run(run())


class TestHTTPXTransport:
    def test_returns_body_bytes(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["headers"] = request.headers
            seen["body"] = request.content
            return httpx.Response(200, content=b'{"ok": true}')

        response = _post(_transport(handler), b'{"model": "m"}')

        assert response.data == b'{"ok": true}'
        assert response.status_code == 200
        assert seen["body"] == b'{"model": "m"}'
        assert seen["headers"]["authorization"] == "Bearer K"
        assert seen["headers"]["content-type"] == "application/json"

    def test_empty_body_is_none(self):
        response = _post(_transport(lambda request: httpx.Response(200)))

        assert response.data is None

    @pytest.mark.parametrize(
        "status, error_cls",
        [
            (401, AuthenticationError),
            (429, RateLimitError),
            (404, ModelNotFoundError),
            (500, APIError),
        ],
    )
    def test_error_status_maps_to_api_error(self, status, error_cls):
        def handler(request):
            return httpx.Response(status, json={"error": {"message": "nope"}})

        with pytest.raises(error_cls) as exc_info:
            _post(_transport(handler))

        assert exc_info.value.status_code == status
        assert exc_info.value.details == "nope"
        assert exc_info.value.endpoint == URL

    def test_connection_failure_maps_to_api_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(APIError) as exc_info:
            _post(_transport(handler))

        assert "connect" in str(exc_info.value).lower()

    def test_timeout_maps_to_api_error(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(APIError) as exc_info:
            _post(_transport(handler))

        assert "timed out" in str(exc_info.value)


class TestServiceOverHTTP:
    def test_completion_through_mock_transport(self):
        def handler(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            last = payload["messages"][-1]["content"]
            return httpx.Response(
                200,
                json={"choices": [{"message": {"role": "assistant", "content": f"echo: {last}"}}]},
            )

        service = ChatService(key="K", transport=_transport(handler), endpoint=URL)

        async def run():
            async with service:
                return await service.completion("ping")

        assert asyncio.run(run()) == "echo: ping"
        assert len(service.history) == 2
