"""Tests for the backend tool routes (unifai.tools.api)."""

from __future__ import annotations

import json
from typing import Any

from unifai.common.api import APIConfig
from unifai.common.const import BACKEND_API_ENDPOINT
from unifai.tools.api import CALL_TIMEOUT, ToolsAPI


class TestEndpoint:
    def test_defaults_to_backend_endpoint(self, make_backend: Any) -> None:
        api = ToolsAPI(APIConfig(api_key="k"), client=make_backend().client())
        assert api.endpoint == BACKEND_API_ENDPOINT

    def test_no_config(self, make_backend: Any) -> None:
        api = ToolsAPI(client=make_backend().client())
        assert api.endpoint == BACKEND_API_ENDPOINT

    def test_explicit_endpoint_kept(self, make_backend: Any) -> None:
        api = ToolsAPI(
            APIConfig(endpoint="https://staging.test/api"), client=make_backend().client()
        )
        assert api.endpoint == "https://staging.test/api"


class TestSearchTools:
    async def test_get_with_query_params(self, make_backend: Any) -> None:
        backend = make_backend()
        async with ToolsAPI(APIConfig(api_key="k"), client=backend.client()) as api:
            await api.search_tools({"query": "weather", "limit": "5"})
        request = backend.requests[0]
        assert request.method == "GET"
        assert request.url.host == "backend.unifai.network"
        assert request.url.path == "/api/v1/actions/search"
        assert dict(request.url.params) == {"query": "weather", "limit": "5"}
        assert request.headers["Authorization"] == "k"

    async def test_default_timeout(self, make_backend: Any) -> None:
        backend = make_backend()
        async with ToolsAPI(client=backend.client()) as api:
            await api.search_tools({"query": "x"})
        assert backend.requests[0].extensions["timeout"]["read"] == 10.0

    async def test_returns_decoded_body(self, make_backend: Any) -> None:
        import httpx

        payload = {"actions": [{"action": "Weather/1/forecast"}]}
        backend = make_backend(lambda _: httpx.Response(200, json=payload))
        async with ToolsAPI(client=backend.client()) as api:
            assert await api.search_tools({"query": "weather"}) == payload


class TestInvokeService:
    async def test_post_with_json_body(self, make_backend: Any) -> None:
        backend = make_backend()
        args = {"action": "Weather/1/forecast", "payload": "{}", "payment": 0.5}
        async with ToolsAPI(APIConfig(api_key="k"), client=backend.client()) as api:
            await api.invoke_service(args)
        request = backend.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/actions/call"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == args

    async def test_long_timeout(self, make_backend: Any) -> None:
        backend = make_backend()
        async with ToolsAPI(client=backend.client()) as api:
            await api.invoke_service({"action": "a", "payload": "{}"})
        assert CALL_TIMEOUT == 50.0
        assert backend.requests[0].extensions["timeout"]["read"] == 50.0
