"""Pydantic models for unifai configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from unifai.common.const import BACKEND_API_ENDPOINT


class BackendConfig(BaseModel):
    """Connection to the UnifAI backend."""

    api_key: str | None = None
    api_key_env: str | None = "UNIFAI_AGENT_API_KEY"
    endpoint: str = BACKEND_API_ENDPOINT


class ToolsConfig(BaseModel):
    """Tool dispatch settings."""

    concurrency: int = 1


class ChatConfig(BaseModel):
    """OpenAI model used by ``unifai chat``."""

    model: str = "gpt-4o"
    api_key: str | None = None
    api_key_env: str | None = "OPENAI_API_KEY"
    base_url: str | None = None
    max_rounds: int = 10


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: str = ""


class UnifaiConfig(BaseModel):
    """Top-level configuration for unifai."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
