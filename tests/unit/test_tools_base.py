"""Tests for tool data types and argument decoding."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from unifai.core.errors import ArgumentDecodeError, InvalidToolCallError
from unifai.tools.base import ToolCall, ToolDefinition, ToolResult, resolve_arguments

# ── resolve_arguments ───────────────────────────────────────────────


class TestResolveArguments:
    def test_json_string(self) -> None:
        assert resolve_arguments('{"query": "weather", "limit": 5}') == {
            "query": "weather",
            "limit": 5,
        }

    def test_mapping_used_as_is(self) -> None:
        args = {"action": "a", "payload": {"k": "v"}}
        assert resolve_arguments(args) == args

    def test_returns_copy_of_mapping(self) -> None:
        args = {"query": "x"}
        resolved = resolve_arguments(args)
        resolved["extra"] = 1
        assert "extra" not in args

    def test_invalid_json(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="unmarshal"):
            resolve_arguments("{not json")

    def test_json_array_rejected(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="JSON object"):
            resolve_arguments("[1, 2]")

    def test_empty_string_rejected(self) -> None:
        with pytest.raises(ArgumentDecodeError):
            resolve_arguments("")

    @pytest.mark.parametrize(
        "text",
        [
            '{"payment": NaN}',
            '{"payment": Infinity}',
            '{"payment": -Infinity}',
            '{"payment": 1e400}',
        ],
    )
    def test_non_finite_numbers_rejected(self, text: str) -> None:
        with pytest.raises(ArgumentDecodeError, match="unmarshal"):
            resolve_arguments(text)

    def test_large_finite_numbers_kept(self) -> None:
        assert resolve_arguments('{"payment": 1e300}') == {"payment": 1e300}

    def test_unsupported_type(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="unsupported"):
            resolve_arguments(42)


# ── ToolCall.coerce ─────────────────────────────────────────────────


class TestToolCallCoerce:
    def test_tool_call_passthrough(self) -> None:
        call = ToolCall(id="c1", name="search_services", arguments="{}")
        assert ToolCall.coerce(call) is call

    def test_from_openai_object(self) -> None:
        sdk_call = SimpleNamespace(
            id="call_1",
            type="function",
            function=SimpleNamespace(name="search_services", arguments='{"query": "x"}'),
        )
        call = ToolCall.coerce(sdk_call)
        assert call == ToolCall(id="call_1", name="search_services", arguments='{"query": "x"}')

    def test_from_openai_dict(self) -> None:
        call = ToolCall.coerce(
            {
                "id": "call_2",
                "type": "function",
                "function": {"name": "invoke_service", "arguments": {"action": "a"}},
            }
        )
        assert call.id == "call_2"
        assert call.name == "invoke_service"
        assert call.arguments == {"action": "a"}

    def test_missing_arguments_default_to_empty(self) -> None:
        call = ToolCall.coerce({"id": "c", "function": {"name": "search_services"}})
        assert call.arguments == {}

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "search_services",
            {"function": {"name": "search_services"}},
            {"id": "c1"},
            {"id": "c1", "function": "search_services"},
            SimpleNamespace(id=1, function=SimpleNamespace(name="x", arguments="{}")),
        ],
    )
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidToolCallError):
            ToolCall.coerce(value)


# ── ToolResult / ToolDefinition ─────────────────────────────────────


class TestToolResult:
    def test_defaults(self) -> None:
        result = ToolResult(tool_call_id="c1", content="{}")
        assert result.is_error is False

    def test_to_message(self) -> None:
        result = ToolResult(tool_call_id="c1", content='{"ok": true}')
        assert result.to_message() == {
            "role": "tool",
            "tool_call_id": "c1",
            "content": '{"ok": true}',
        }


class TestToolDefinition:
    def test_to_openai(self) -> None:
        schema = {"type": "object", "properties": {"q": {"type": "string"}}}
        definition = ToolDefinition(name="t", description="desc", parameters_schema=schema)
        rendered = definition.to_openai()
        assert rendered == {
            "type": "function",
            "function": {"name": "t", "description": "desc", "parameters": schema},
        }

    def test_to_openai_does_not_share_schema(self) -> None:
        definition = ToolDefinition(name="t", description="d", parameters_schema={"type": "object"})
        rendered = definition.to_openai()
        rendered["function"]["parameters"]["type"] = "changed"
        assert definition.parameters_schema == {"type": "object"}

    def test_json_serializable(self) -> None:
        definition = ToolDefinition(name="t", description="d")
        assert json.loads(json.dumps(definition.to_openai()))["function"]["name"] == "t"
