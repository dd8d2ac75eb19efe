"""Rich output for the unifai CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from unifai.tools.base import ToolCall, ToolDefinition, ToolResult

_TRUNCATE_LEN = 200


def _truncate(text: str, limit: int = _TRUNCATE_LEN) -> str:
    """Truncate text to *limit* characters with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + " ..."


class ToolsDisplay:
    """Renders tool definitions, backend responses and chat turns.

    Accepts an optional :class:`~rich.console.Console` for dependency
    injection in tests.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show_json(self, data: Any) -> None:
        self._console.print_json(json.dumps(data))

    def show_definitions(self, definitions: Sequence[ToolDefinition]) -> None:
        for definition in definitions:
            self._console.print(
                Panel(
                    Text(json.dumps(definition.parameters_schema, indent=2)),
                    title=f"[bold]{definition.name}[/bold]",
                    subtitle=_truncate(definition.description, 80),
                    border_style="cyan",
                )
            )

    def show_assistant(self, content: str) -> None:
        self._console.print(content, markup=False, highlight=False)

    def show_tool_calls(self, calls: Sequence[ToolCall]) -> None:
        line = Text("Calling tools:", style="yellow")
        for call in calls:
            args = call.arguments if isinstance(call.arguments, str) else json.dumps(call.arguments)
            line.append(f" {call.name}({_truncate(args)})", style="dim")
        self._console.print(line)

    def show_tool_results(self, results: Sequence[ToolResult]) -> None:
        for result in results:
            style = "red" if result.is_error else "green"
            self._console.print(
                Text(f"  {result.tool_call_id}: {_truncate(result.content)}", style=style)
            )
