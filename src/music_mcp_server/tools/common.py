"""Shared helpers for Music MCP tools."""

from __future__ import annotations

from music_mcp.tools import ToolDefinition, ToolInputError, ToolParameters
from music_mcp_server.applescript import (
    AppleScriptRunner,
    escape_applescript_string,
    tell,
)


class NoParams(ToolParameters):
    """Parameters for tools that take no arguments."""


def statement_tool(
    runner: AppleScriptRunner,
    *,
    name: str,
    description: str,
    statement: str,
    reply: str,
) -> ToolDefinition:
    """Create a tool that sends one fixed statement to Music and replies."""

    def handler(_: dict[str, object]) -> str:
        runner.run(tell(statement))
        return reply

    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=NoParams,
        handler=handler,
    )


def script_tool(
    runner: AppleScriptRunner, *, name: str, description: str, script: str
) -> ToolDefinition:
    """Create a tool that runs a fixed multi-line script and returns its output."""

    def handler(_: dict[str, object]) -> str:
        return runner.run_multi(script)

    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=NoParams,
        handler=handler,
    )


def quoted(text: str) -> str:
    """Return ``text`` as a double-quoted AppleScript string literal."""
    return f'"{escape_applescript_string(text)}"'


def format_number(value: float) -> str:
    """Render a number the way the player expects it, without a stray ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def choose(value: str, allowed: tuple[str, ...], message: str) -> str:
    """Normalize ``value`` and ensure it belongs to ``allowed``.

    Raises:
        ToolInputError: If the normalized value is not allowed.

    """
    normalized = value.strip().lower()
    if normalized not in allowed:
        raise ToolInputError(message)
    return normalized
