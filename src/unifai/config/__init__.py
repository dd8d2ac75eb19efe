"""Configuration loading and validation."""

from unifai.config.loader import load_config
from unifai.config.schema import (
    BackendConfig,
    ChatConfig,
    LoggingConfig,
    ToolsConfig,
    UnifaiConfig,
)

__all__ = [
    "BackendConfig",
    "ChatConfig",
    "LoggingConfig",
    "ToolsConfig",
    "UnifaiConfig",
    "load_config",
]
