"""Shared HTTP plumbing and endpoint constants."""

from unifai.common.api import API, APIConfig, RequestOptions
from unifai.common.const import (
    BACKEND_API_ENDPOINT,
    BACKEND_WS_ENDPOINT,
    FRONTEND_API_ENDPOINT,
    TRANSACTION_API_ENDPOINT,
)

__all__ = [
    "API",
    "APIConfig",
    "BACKEND_API_ENDPOINT",
    "BACKEND_WS_ENDPOINT",
    "FRONTEND_API_ENDPOINT",
    "RequestOptions",
    "TRANSACTION_API_ENDPOINT",
]
