"""Authenticated JSON request executor for the UnifAI backend."""

from __future__ import annotations

import asyncio
import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any

import httpx

from unifai.core.errors import DecodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _reject_constant(token: str) -> Any:
    msg = f"invalid number literal {token}"
    raise ValueError(msg)


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        msg = f"number out of range: {text}"
        raise ValueError(msg)
    return value


def decode_json(raw: str | bytes) -> Any:
    """Decode JSON, rejecting ``NaN``, ``Infinity`` and floats that overflow."""
    return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)


@dataclass(frozen=True, slots=True)
class APIConfig:
    """Credentials and base URL shared by every request of an :class:`API`."""

    api_key: str = ""
    endpoint: str = ""


@dataclass(slots=True)
class RequestOptions:
    """Per-request settings. ``body`` is sent as JSON when not ``None``."""

    timeout: float | None = None
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] | None = None
    body: Any = None


class API:
    """Sends JSON requests to a backend and decodes JSON responses.

    Usage::

        async with API(APIConfig(api_key="...", endpoint="https://...")) as api:
            options = RequestOptions(params={"query": "x"})
            data = await api.request("GET", "/actions/search", options)

    A custom ``httpx.AsyncClient`` can be injected (tests pass one built on
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: APIConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = config.api_key
        self._endpoint = config.endpoint
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def set_endpoint(self, endpoint: str) -> None:
        """Point subsequent requests at a different base URL."""
        self._endpoint = endpoint

    async def __aenter__(self) -> API:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        options: RequestOptions | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path appended to the configured endpoint.
            options: Timeout, headers, query params and JSON body.

        Returns:
            The decoded JSON value (dict, list, str, int, float, bool or None).

        Raises:
            TransportError: The request could not be built or sent, or the
                deadline expired.
            HTTPStatusError: The response status is outside ``[200, 300)``.
            DecodeError: The response body is not valid JSON.
        """
        opts = options or RequestOptions()
        timeout = opts.timeout or DEFAULT_TIMEOUT

        request = self._build_request(method, path, opts, timeout)
        logger.debug("%s %s (timeout %.1fs)", method, request.url, timeout)

        response: httpx.Response | None = None
        try:
            async with asyncio.timeout(timeout):
                response = await self._open(request)
                if 200 <= response.status_code < 300:
                    return await self._read_json(response)
                body = await self._read_error_body(response)
        except TimeoutError as e:
            if response is None or 200 <= response.status_code < 300:
                msg = f"request failed: deadline of {timeout}s exceeded"
                raise TransportError(msg) from e
            # Deadline hit while reading an error body
            body = ""
        finally:
            if response is not None:
                await response.aclose()

        assert response is not None
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        raise HTTPStatusError(response.status_code, body)

    def _build_request(
        self,
        method: str,
        path: str,
        options: RequestOptions,
        timeout: float,
    ) -> httpx.Request:
        try:
            url = httpx.URL(self._endpoint + path)
        except (httpx.InvalidURL, TypeError) as e:
            msg = f"failed to parse URL: {e}"
            raise TransportError(msg) from e

        content: bytes | None = None
        headers = httpx.Headers()
        if options.body is not None:
            try:
                content = json.dumps(options.body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                msg = f"failed to marshal JSON: {e}"
                raise TransportError(msg) from e
            headers["Content-Type"] = "application/json"

        caller_headers = httpx.Headers(options.headers)
        if self._api_key and "Authorization" not in caller_headers:
            headers["Authorization"] = self._api_key
        headers.update(caller_headers)

        try:
            return self._client.build_request(
                method,
                url,
                params=options.params,
                content=content,
                headers=headers,
                timeout=timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            msg = f"failed to create request: {e}"
            raise TransportError(msg) from e

    async def _open(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            msg = f"request failed: {e}"
            raise TransportError(msg) from e

    async def _read_json(self, response: httpx.Response) -> Any:
        try:
            raw = await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as e:
            msg = f"request failed: {e}"
            raise TransportError(msg) from e

        try:
            return decode_json(raw)
        except ValueError as e:
            msg = f"failed to decode response: {e}"
            raise DecodeError(msg) from e

    async def _read_error_body(self, response: httpx.Response) -> str:
        """Best-effort read of a non-2xx body; empty when unreadable."""
        try:
            await response.aread()
        except (httpx.HTTPError, httpx.StreamError):
            return ""
        return response.text
