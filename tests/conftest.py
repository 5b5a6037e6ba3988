from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from parity_oracle.config import OracleSettings


def completion(content: str) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"message": {"role": "assistant", "content": content}, "index": 0, "finish_reason": "stop"}
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15},
    }


class Recorder:
    """Mock transport handler that replies with a fixed answer and keeps the requests it saw."""

    def __init__(self, content: str = "", status_code: int = 200, exc: Exception | None = None) -> None:
        self.content = content
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "nope"}})
        return httpx.Response(200, json=completion(self.content))

    def body(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings() -> OracleSettings:
    return OracleSettings(api_key="sk-test", timeout=5.0)


@pytest.fixture
def make_transport() -> Callable[..., tuple[httpx.MockTransport, Recorder]]:
    def _make(content: str = "", **kwargs: Any) -> tuple[httpx.MockTransport, Recorder]:
        recorder = Recorder(content, **kwargs)
        return httpx.MockTransport(recorder), recorder
    return _make
