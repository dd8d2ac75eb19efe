"""Exception hierarchy for unifai.

Every module imports from here. The hierarchy is:

    UnifaiError
    ├── APIError
    │   ├── TransportError
    │   ├── HTTPStatusError(status_code, body)
    │   └── DecodeError
    ├── ToolError
    │   ├── ArgumentDecodeError
    │   ├── UnknownToolError(name)
    │   └── InvalidToolCallError
    └── ConfigError
"""

from __future__ import annotations


class UnifaiError(Exception):
    """Base exception for all unifai errors."""


# ─── Backend API Errors ───────────────────────────────────────


class APIError(UnifaiError):
    """Base for errors talking to the backend."""


class TransportError(APIError):
    """The request could not be built, sent, or received."""


class HTTPStatusError(APIError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error! status: {status_code}, body: {body}")


class DecodeError(APIError):
    """The response body is not valid JSON."""


# ─── Tool Errors ──────────────────────────────────────────────


class ToolError(UnifaiError):
    """Base for tool dispatch errors."""


class ArgumentDecodeError(ToolError):
    """Tool-call arguments could not be decoded into a mapping."""


class UnknownToolError(ToolError):
    """No tool with the requested name exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown tool name: {name}")


class InvalidToolCallError(ToolError):
    """A batch entry cannot be read as a tool call."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(UnifaiError):
    """Invalid configuration."""
