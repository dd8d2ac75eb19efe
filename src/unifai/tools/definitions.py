"""The two tool functions exposed to the model."""

from __future__ import annotations

from unifai.tools.base import ToolDefinition

SEARCH_TOOLS = "search_services"
CALL_TOOL = "invoke_service"

SEARCH_TOOLS_DEFINITION = ToolDefinition(
    name=SEARCH_TOOLS,
    description=(
        "Search for tools. The tools cover a wide range of domains including data "
        f"sources, APIs, SDKs, etc. Actions returned should be used in {CALL_TOOL}."
    ),
    parameters_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": (
                    "The query to search for tools. Describe what you want to do "
                    "or what tools to use."
                ),
            },
            "limit": {
                "type": "number",
                "description": (
                    "The maximum number of tools to return (must be between 1 and 100, "
                    "default is 10)."
                ),
            },
        },
        "required": ["query"],
    },
)

CALL_TOOL_DEFINITION = ToolDefinition(
    name=CALL_TOOL,
    description=f"Call a tool returned by {SEARCH_TOOLS}.",
    parameters_schema={
        "type": "object",
        "properties": {
            "action": {
                "type": "string",
                "description": f"The exact action to be called from the {SEARCH_TOOLS} result.",
            },
            "payload": {
                "type": "string",
                "description": "The action payload (can be a JSON object or JSON-encoded string).",
            },
            "payment": {
                "type": "number",
                "description": (
                    "Amount to authorize in USD. A positive number indicates a charge cap, "
                    "while a negative number requests a minimum payout."
                ),
            },
        },
        "required": ["action", "payload"],
    },
)

TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (SEARCH_TOOLS_DEFINITION, CALL_TOOL_DEFINITION)
