"""Shared test fixtures for unifai."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import pytest

from unifai.common.api import APIConfig
from unifai.tools.api import ToolsAPI
from unifai.tools.dispatcher import Tools

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class RecordingBackend:
    """MockTransport wrapper that keeps every request it receives."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler or (lambda _: httpx.Response(200, json={"ok": True}))

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


@pytest.fixture
def make_backend() -> Callable[..., RecordingBackend]:
    """Factory fixture for a request-recording mock backend."""

    def _make(handler: Handler | None = None) -> RecordingBackend:
        return RecordingBackend(handler)

    return _make


@pytest.fixture
def make_tools() -> Any:
    """Factory fixture: ``make_tools(backend, **kwargs) -> Tools``."""

    def _make(
        backend: RecordingBackend,
        *,
        api_key: str = "test-key",
        endpoint: str = "https://backend.test/api/v1",
        concurrency: int = 1,
    ) -> Tools:
        api = ToolsAPI(APIConfig(api_key=api_key, endpoint=endpoint), client=backend.client())
        return Tools(concurrency=concurrency, api=api)

    return _make
