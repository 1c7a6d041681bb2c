"""Love and dislike the current track."""

from __future__ import annotations

from music_mcp.tools import ToolDefinition
from music_mcp_server.applescript import AppleScriptRunner, tell_block
from music_mcp_server.tools.common import script_tool


def rate_current_track_script(flag: str, verb: str) -> str:
    """Build the script setting ``flag`` on the current track, if any."""
    return tell_block(
        f"""  if player state is not stopped then
    set {flag} of current track to true
    return "{verb}: " & name of current track
  else
    return "No track is playing"
  end if"""
    )


def love_track_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_love_track tool."""
    return script_tool(
        runner,
        name="music_love_track",
        description="Love (favorite) the current track",
        script=rate_current_track_script("loved", "Loved"),
    )


def dislike_track_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_dislike_track tool."""
    return script_tool(
        runner,
        name="music_dislike_track",
        description="Dislike the current track",
        script=rate_current_track_script("disliked", "Disliked"),
    )
