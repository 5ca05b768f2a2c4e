# tests/unit/helpers.py
"""
Test doubles shared across unit tests.

FakeTransport stands in for the HTTP layer: it records every request and
replies with queued bodies (or raises queued exceptions).
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional, Union

from chat_service.core.http import TransportResponse


def completion_body(content: Optional[str] = "Hi!", role: str = "assistant", **extra: Any) -> bytes:
    """Build a minimal chat completion response body."""
    message: dict = {"role": role}
    if content is not None:
        message["content"] = content
    body = {"choices": [{"index": 0, "message": message, "finish_reason": "stop"}]}
    body.update(extra)
    return json.dumps(body).encode("utf-8")


class FakeTransport:
    """Transport double returning queued responses in order."""

    def __init__(self, *responses: Union[bytes, None, Exception]):
        self.responses: List[Union[bytes, None, Exception]] = list(responses)
        self.requests: List[dict] = []

    async def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.requests.append({"url": url, "body": json.loads(body), "headers": dict(headers)})
        response = self.responses.pop(0) if self.responses else completion_body()
        if isinstance(response, Exception):
            raise response
        return TransportResponse(data=response, status_code=200)
