"""Core errors and logging utilities."""

from unifai.core.errors import (
    APIError,
    ArgumentDecodeError,
    ConfigError,
    DecodeError,
    HTTPStatusError,
    InvalidToolCallError,
    ToolError,
    TransportError,
    UnifaiError,
    UnknownToolError,
)
from unifai.core.log import configure_logging

__all__ = [
    "APIError",
    "ArgumentDecodeError",
    "ConfigError",
    "DecodeError",
    "HTTPStatusError",
    "InvalidToolCallError",
    "ToolError",
    "TransportError",
    "UnifaiError",
    "UnknownToolError",
    "configure_logging",
]
