"""Transport controls: play, pause, stop and track skipping."""

from __future__ import annotations

from music_mcp.tools import ToolDefinition
from music_mcp_server.applescript import AppleScriptRunner
from music_mcp_server.tools.common import statement_tool


def playback_tools(runner: AppleScriptRunner) -> list[ToolDefinition]:
    """Create the playback control tools in catalog order."""
    return [
        statement_tool(
            runner,
            name="music_play",
            description="Start playing music or resume playback",
            statement="play",
            reply="Playback started",
        ),
        statement_tool(
            runner,
            name="music_pause",
            description="Pause playback",
            statement="pause",
            reply="Playback paused",
        ),
        statement_tool(
            runner,
            name="music_stop",
            description="Stop playback",
            statement="stop",
            reply="Playback stopped",
        ),
        statement_tool(
            runner,
            name="music_next",
            description="Skip to the next track",
            statement="next track",
            reply="Skipped to next track",
        ),
        statement_tool(
            runner,
            name="music_previous",
            description="Go to the previous track",
            statement="previous track",
            reply="Went to previous track",
        ),
        statement_tool(
            runner,
            name="music_toggle_playback",
            description="Toggle between play and pause",
            statement="playpause",
            reply="Toggled playback",
        ),
    ]
