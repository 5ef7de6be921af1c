from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from ukpostcodes.infra.http import HttpClient

TEST_API_URL = "https://api.postcodes.test"


class FakeUpstream:
    """Stands in for postcodes.io: records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._content: bytes = b'{"status": 200, "result": null}'
        self._error: Exception | None = None

    def reply(self, payload: Any, status: int = 200) -> None:
        self._status = status
        self._content = json.dumps(payload).encode("utf-8")
        self._error = None

    def reply_raw(self, content: bytes, status: int = 200) -> None:
        self._status = status
        self._content = content
        self._error = None

    def fail(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status, content=self._content)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http(upstream: FakeUpstream):
    client = HttpClient(base_url=TEST_API_URL, transport=httpx.MockTransport(upstream.handler))
    yield client
    client.close()


@pytest.fixture
def offline_http():
    """HttpClient that fails the test if anything reaches the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request: {request.method} {request.url}")

    client = HttpClient(base_url=TEST_API_URL, transport=httpx.MockTransport(handler))
    yield client
    client.close()
