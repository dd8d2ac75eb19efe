"""Main CLI application.

Click commands for the unifai toolkit: tools, search, invoke, chat.
"""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING, Any

import click

from unifai import __version__
from unifai.config.loader import load_config
from unifai.core.errors import ConfigError, UnifaiError
from unifai.core.log import configure_logging
from unifai.tools.definitions import CALL_TOOL, SEARCH_TOOLS, TOOL_DEFINITIONS

if TYPE_CHECKING:
    from unifai.cli.display import ToolsDisplay
    from unifai.config.schema import UnifaiConfig


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(ctx: click.Context) -> UnifaiConfig:
    """Load config with user-friendly error handling and set up logging."""
    try:
        config = load_config(path=ctx.obj.get("config_path"))
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy
    configure_logging(config.logging, verbose=ctx.obj.get("verbose", False))
    return config


def _make_display() -> ToolsDisplay:
    from unifai.cli.display import ToolsDisplay

    return ToolsDisplay()


async def _call_tool_async(config: UnifaiConfig, name: str, args: dict[str, Any]) -> Any:
    from unifai.tools.dispatcher import Tools

    async with Tools.from_config(config) as tools:
        return await tools.call_tool(name, args)


async def _chat_async(config: UnifaiConfig, message: str, display: ToolsDisplay) -> None:
    import openai

    from unifai.cli.chat import run_chat
    from unifai.tools.dispatcher import Tools

    kwargs: dict[str, Any] = {}
    if config.chat.api_key is not None:
        kwargs["api_key"] = config.chat.api_key
    if config.chat.base_url is not None:
        kwargs["base_url"] = config.chat.base_url
    client = openai.AsyncOpenAI(**kwargs)

    try:
        async with Tools.from_config(config) as tools:
            await run_chat(
                message,
                tools,
                client,
                model=config.chat.model,
                display=display,
                max_rounds=config.chat.max_rounds,
            )
    finally:
        await client.close()


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="unifai")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """unifai - Discover and call services from the UnifAI network.

    Search the service catalog, invoke services, or let an LLM do both.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── tools ────────────────────────────────────────────────────────


@cli.command()
def tools() -> None:
    """Show the tool definitions handed to the model."""
    _make_display().show_definitions(TOOL_DEFINITIONS)


# ── search ───────────────────────────────────────────────────────


@cli.command()
@click.argument("query")
@click.option("--limit", type=click.IntRange(1, 100), default=10, help="Max results.")
@click.pass_context
def search(ctx: click.Context, query: str, limit: int) -> None:
    """Search the service catalog for QUERY."""
    config = _load_config(ctx)
    try:
        result = asyncio.run(
            _call_tool_async(config, SEARCH_TOOLS, {"query": query, "limit": limit})
        )
    except UnifaiError as e:
        _error(str(e))
        return
    _make_display().show_json(result)


# ── invoke ───────────────────────────────────────────────────────


@cli.command()
@click.argument("action")
@click.argument("payload")
@click.option(
    "--payment",
    type=float,
    default=None,
    help="USD to authorize: positive caps the charge, negative requests a minimum payout.",
)
@click.pass_context
def invoke(ctx: click.Context, action: str, payload: str, payment: float | None) -> None:
    """Invoke ACTION (as returned by search) with PAYLOAD (JSON)."""
    config = _load_config(ctx)
    args: dict[str, Any] = {"action": action, "payload": payload}
    if payment is not None:
        args["payment"] = payment
    try:
        result = asyncio.run(_call_tool_async(config, CALL_TOOL, args))
    except UnifaiError as e:
        _error(str(e))
        return
    _make_display().show_json(result)


# ── chat ─────────────────────────────────────────────────────────


@cli.command()
@click.argument("message", nargs=-1, required=True)
@click.option("--model", default=None, help="OpenAI model (overrides config).")
@click.pass_context
def chat(ctx: click.Context, message: tuple[str, ...], model: str | None) -> None:
    """Ask an OpenAI model to answer MESSAGE using UnifAI services."""
    import openai

    config = _load_config(ctx)
    if model:
        config.chat.model = model
    try:
        asyncio.run(_chat_async(config, " ".join(message), _make_display()))
    except (UnifaiError, openai.OpenAIError) as e:
        _error(str(e))
