"""Music app lifecycle tools."""

from __future__ import annotations

from music_mcp.tools import ToolDefinition
from music_mcp_server.applescript import AppleScriptRunner
from music_mcp_server.tools.common import statement_tool


def open_music_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_open tool."""
    return statement_tool(
        runner,
        name="music_open",
        description="Open the Music app",
        statement="activate",
        reply="Music app opened",
    )


def quit_music_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_quit tool."""
    return statement_tool(
        runner,
        name="music_quit",
        description="Quit the Music app",
        statement="quit",
        reply="Music app closed",
    )
