"""Chat loop that lets an OpenAI model find and call UnifAI services.

Sends the conversation with the two tool definitions, runs whatever
tool calls come back through :meth:`Tools.call_tools`, feeds the results
back as ``tool`` messages, and repeats until the model answers without
calling tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from unifai.tools.base import ToolCall

if TYPE_CHECKING:
    import openai

    from unifai.cli.display import ToolsDisplay
    from unifai.tools.dispatcher import Tools

SYSTEM_PROMPT = """
You are a personal assistant capable of doing many things with your tools. When you are \
given a task you cannot finish right now (like something you don't know, or requires you \
to take some action), try to find appropriate tools to do it.

When searching for tools, think about what tools might be useful and use relevant generic \
keywords rather than putting all the details/numbers into the query, because you are \
finding the tool, not solving the problem itself. If you fail to find appropriate tools, \
change the query and search again.

Sometimes there are multiple tools that can be used to finish a task. If the result from \
one tool is not good enough, try other tools and compare or combine results. When you are \
trying to get comprehensive data, information, or analysis, using results from multiple \
tools or sources is beneficial.

When you search for a tool, before actually calling it, tell the user which tools you got \
from the search results and which one you picked.
""".strip()


def _assistant_message(message: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {"role": "assistant", "content": message.content}
    if message.tool_calls:
        entry["tool_calls"] = [
            {
                "id": tc.id,
                "type": "function",
                "function": {"name": tc.function.name, "arguments": tc.function.arguments},
            }
            for tc in message.tool_calls
        ]
    return entry


async def run_chat(
    message: str,
    tools: Tools,
    client: openai.AsyncOpenAI,
    *,
    model: str,
    display: ToolsDisplay,
    max_rounds: int = 10,
) -> list[dict[str, Any]]:
    """Run the conversation for *message* and return the full transcript.

    Stops when the model replies without tool calls, when a tool round
    yields no results, or after *max_rounds* model calls.

    Raises:
        openai.APIError: If the chat completion request fails.
        InvalidToolCallError: If the model returns a malformed tool call.
    """
    messages: list[dict[str, Any]] = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]
    tool_params = tools.get_tools()

    for _round in range(max_rounds):
        completion = await client.chat.completions.create(
            model=model,
            messages=messages,  # type: ignore[arg-type]
            tools=tool_params,  # type: ignore[arg-type]
        )
        if not completion.choices:
            break

        reply = completion.choices[0].message
        if reply.content:
            display.show_assistant(reply.content)
        messages.append(_assistant_message(reply))

        if not reply.tool_calls:
            break

        calls = [ToolCall.coerce(tc) for tc in reply.tool_calls]
        display.show_tool_calls(calls)
        results = await tools.call_tools(calls)
        if not results:
            break
        display.show_tool_results(results)
        messages.extend(result.to_message() for result in results)

    return messages
