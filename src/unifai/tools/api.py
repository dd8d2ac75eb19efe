"""Backend routes behind the two tool functions."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from unifai.common.api import API, APIConfig, RequestOptions
from unifai.common.const import BACKEND_API_ENDPOINT

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

SEARCH_PATH = "/actions/search"
CALL_PATH = "/actions/call"
# Invocations may run long downstream actions
CALL_TIMEOUT = 50.0


class ToolsAPI(API):
    """Catalog search and service invocation against the backend API.

    Uses :data:`~unifai.common.const.BACKEND_API_ENDPOINT` unless the
    config names another endpoint.
    """

    def __init__(
        self,
        config: APIConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or APIConfig()
        if not config.endpoint:
            config = replace(config, endpoint=BACKEND_API_ENDPOINT)
        super().__init__(config, client=client)

    async def search_tools(self, params: Mapping[str, str]) -> Any:
        """``GET /actions/search`` with *params* as the query string."""
        return await self.request("GET", SEARCH_PATH, RequestOptions(params=dict(params)))

    async def invoke_service(self, args: Any) -> Any:
        """``POST /actions/call`` with *args* as the JSON body."""
        return await self.request(
            "POST",
            CALL_PATH,
            RequestOptions(body=args, timeout=CALL_TIMEOUT),
        )
