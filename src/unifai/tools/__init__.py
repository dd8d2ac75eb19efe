"""Tool definitions, backend routes and the batch dispatcher."""

from unifai.tools.api import ToolsAPI
from unifai.tools.base import ToolCall, ToolDefinition, ToolResult, resolve_arguments
from unifai.tools.definitions import CALL_TOOL, SEARCH_TOOLS, TOOL_DEFINITIONS
from unifai.tools.dispatcher import Tools

__all__ = [
    "CALL_TOOL",
    "SEARCH_TOOLS",
    "TOOL_DEFINITIONS",
    "ToolCall",
    "ToolDefinition",
    "ToolResult",
    "Tools",
    "ToolsAPI",
    "resolve_arguments",
]
