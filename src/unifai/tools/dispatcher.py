"""Tool dispatcher -- runs model tool calls against the UnifAI backend.

Exposes the ``search_services`` and ``invoke_service`` definitions to an
orchestration loop and executes the tool calls the model makes with
them. Batches run concurrently, bounded by a semaphore; every call in a
batch produces exactly one :class:`ToolResult`, with failures encoded as
``{"error": ...}`` content instead of being raised.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from unifai.common.api import APIConfig
from unifai.core.errors import UnknownToolError
from unifai.tools.api import ToolsAPI
from unifai.tools.base import ToolCall, ToolResult, resolve_arguments
from unifai.tools.definitions import CALL_TOOL, SEARCH_TOOLS, TOOL_DEFINITIONS

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from unifai.config.schema import UnifaiConfig
    from unifai.tools.base import ToolDefinition

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    """Render a search argument as a query-string value.

    Integral floats print without a fraction up to 1e21; larger ones keep
    exponent form (``1e+21``).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return json.dumps(value)


class Tools:
    """Dispatches ``search_services`` / ``invoke_service`` tool calls.

    Usage::

        async with Tools(api_key="...", concurrency=4) as tools:
            response = await openai_client.chat.completions.create(
                model="gpt-4o", messages=messages, tools=tools.get_tools()
            )
            results = await tools.call_tools(response.choices[0].message.tool_calls or [])
            messages.extend(r.to_message() for r in results)
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        concurrency: int = 1,
        endpoint: str | None = None,
        api: ToolsAPI | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if api is None:
            api = ToolsAPI(APIConfig(api_key=api_key, endpoint=endpoint or ""), client=client)
        self._api = api
        self._concurrency = max(1, concurrency)

    @classmethod
    def from_config(
        cls,
        config: UnifaiConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> Tools:
        return cls(
            config.backend.api_key or "",
            concurrency=config.tools.concurrency,
            endpoint=config.backend.endpoint,
            client=client,
        )

    @property
    def concurrency(self) -> int:
        return self._concurrency

    @property
    def api(self) -> ToolsAPI:
        return self._api

    def set_api_endpoint(self, endpoint: str) -> None:
        """Send subsequent calls to a different backend endpoint."""
        self._api.set_endpoint(endpoint)

    async def __aenter__(self) -> Tools:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._api.aclose()

    # ── Definitions ──────────────────────────────────────────

    def get_tool_definitions(self) -> list[ToolDefinition]:
        """Return the search and invoke definitions, in that order."""
        return list(TOOL_DEFINITIONS)

    def get_tools(self) -> list[dict[str, Any]]:
        """Return the definitions as OpenAI chat-completions tools."""
        return [definition.to_openai() for definition in TOOL_DEFINITIONS]

    # ── Execution ────────────────────────────────────────────

    async def call_tool(self, name: str, args: Any) -> Any:
        """Call one tool and return the backend's decoded JSON response.

        Args:
            name: ``search_services`` or ``invoke_service``.
            args: JSON text or a mapping of arguments.

        Raises:
            ArgumentDecodeError: If *args* cannot be read as a mapping.
            UnknownToolError: If *name* is not one of the two tools.
            APIError: If the backend request fails.
        """
        params = resolve_arguments(args)

        if name == SEARCH_TOOLS:
            query = {key: _stringify(value) for key, value in params.items()}
            return await self._api.search_tools(query)
        if name == CALL_TOOL:
            return await self._api.invoke_service(params)
        raise UnknownToolError(name)

    async def call_tools(self, tool_calls: Iterable[ToolCall | Any]) -> list[ToolResult]:
        """Run a batch of tool calls with at most ``concurrency`` in flight.

        Entries may be :class:`ToolCall` instances or OpenAI tool calls
        (SDK objects or their dict form). Failures of individual calls are
        returned as ``{"error": ...}`` content; results are in input order
        and carry the originating call id.

        Raises:
            InvalidToolCallError: If an entry is not a tool call. Raised
                before any call is made.
        """
        calls = [ToolCall.coerce(tc) for tc in tool_calls]
        if not calls:
            return []

        semaphore = asyncio.Semaphore(self._concurrency)

        async def _bounded(call: ToolCall) -> ToolResult:
            async with semaphore:
                return await self._execute(call)

        logger.debug("Dispatching %d tool call(s), concurrency %d", len(calls), self._concurrency)
        results = await asyncio.gather(*(_bounded(call) for call in calls))
        return list(results)

    async def _execute(self, call: ToolCall) -> ToolResult:
        try:
            result = await self.call_tool(call.name, call.arguments)
        except Exception as exc:
            logger.warning("Tool call %s (%s) failed: %s", call.id, call.name, exc)
            return ToolResult(
                tool_call_id=call.id,
                content=json.dumps({"error": str(exc)}),
                is_error=True,
            )

        try:
            content = json.dumps(result, allow_nan=False)
        except (TypeError, ValueError) as exc:
            logger.warning(
                "Tool call %s (%s) returned unserializable result: %s", call.id, call.name, exc
            )
            return ToolResult(
                tool_call_id=call.id,
                content=json.dumps({"error": f"failed to serialize result: {exc}"}),
                is_error=True,
            )
        return ToolResult(tool_call_id=call.id, content=content)
