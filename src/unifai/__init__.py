"""unifai - let LLM agents discover and call services from the UnifAI network."""

from unifai.common import API, APIConfig, RequestOptions
from unifai.tools import (
    CALL_TOOL,
    SEARCH_TOOLS,
    ToolCall,
    ToolDefinition,
    ToolResult,
    Tools,
    ToolsAPI,
)

__version__ = "0.1.0"

__all__ = [
    "API",
    "APIConfig",
    "CALL_TOOL",
    "RequestOptions",
    "SEARCH_TOOLS",
    "ToolCall",
    "ToolDefinition",
    "ToolResult",
    "Tools",
    "ToolsAPI",
    "__version__",
]
