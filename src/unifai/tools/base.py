"""Tool data types.

Definitions handed to the model, tool calls coming back from it, and
the results returned to it, plus argument decoding shared by the
dispatcher.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from unifai.common.api import decode_json
from unifai.core.errors import ArgumentDecodeError, InvalidToolCallError


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Schema definition for a tool, suitable for passing to providers."""

    name: str
    description: str
    parameters_schema: dict[str, Any] = field(default_factory=dict)

    def to_openai(self) -> dict[str, Any]:
        """Render as an OpenAI chat-completions function tool."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": copy.deepcopy(self.parameters_schema),
            },
        }


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool invocation requested by a model.

    ``arguments`` is either the raw JSON text the model produced or an
    already-decoded mapping.
    """

    id: str
    name: str
    arguments: str | Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: Any) -> ToolCall:
        """Build a ToolCall from an OpenAI tool call (SDK object or dict).

        Raises:
            InvalidToolCallError: If *value* has no id, function name or
                arguments in the expected places.
        """
        if isinstance(value, ToolCall):
            return value
        if isinstance(value, Mapping):
            call_id = value.get("id")
            function = value.get("function")
            name = function.get("name") if isinstance(function, Mapping) else None
            arguments = function.get("arguments") if isinstance(function, Mapping) else None
        else:
            call_id = getattr(value, "id", None)
            function = getattr(value, "function", None)
            name = getattr(function, "name", None)
            arguments = getattr(function, "arguments", None)

        if not isinstance(call_id, str) or not isinstance(name, str):
            msg = f"not a tool call: {value!r}"
            raise InvalidToolCallError(msg)
        if arguments is None:
            arguments = {}
        return cls(id=call_id, name=name, arguments=arguments)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Result of one tool call; ``content`` is always JSON text."""

    tool_call_id: str
    content: str
    is_error: bool = False

    def to_message(self) -> dict[str, str]:
        """Render as an OpenAI ``tool`` role message."""
        return {
            "role": "tool",
            "tool_call_id": self.tool_call_id,
            "content": self.content,
        }


def resolve_arguments(args: Any) -> dict[str, Any]:
    """Turn tool-call arguments into a mapping.

    A string is decoded as JSON and must hold an object; a mapping is
    used as-is.

    Raises:
        ArgumentDecodeError: If the string is not a JSON object, or *args*
            is neither a string nor a mapping.
    """
    if isinstance(args, str):
        try:
            decoded = decode_json(args)
        except ValueError as e:
            msg = f"failed to unmarshal args: {e}"
            raise ArgumentDecodeError(msg) from e
        if not isinstance(decoded, dict):
            msg = f"failed to unmarshal args: expected a JSON object, got {type(decoded).__name__}"
            raise ArgumentDecodeError(msg)
        return decoded
    if isinstance(args, Mapping):
        return dict(args)
    msg = f"unsupported argument type: {type(args).__name__}"
    raise ArgumentDecodeError(msg)
