"""Tool registration helpers for the Music MCP server."""

from __future__ import annotations

from music_mcp.tools import ToolDefinition
from music_mcp_server.applescript import AppleScriptRunner
from music_mcp_server.tools.application import open_music_tool, quit_music_tool
from music_mcp_server.tools.favorites import dislike_track_tool, love_track_tool
from music_mcp_server.tools.library import (
    get_playlist_tracks_tool,
    get_playlists_tool,
    play_playlist_tool,
    search_library_tool,
)
from music_mcp_server.tools.playback import playback_tools
from music_mcp_server.tools.player import (
    get_current_track_tool,
    get_player_state_tool,
    get_position_tool,
    get_repeat_tool,
    get_shuffle_tool,
    get_volume_tool,
    set_position_tool,
    set_repeat_tool,
    set_shuffle_tool,
    set_volume_tool,
)
from music_mcp_server.tools.selection import (
    add_to_queue_tool,
    play_album_tool,
    play_artist_tool,
    play_song_tool,
)


def build_tools(runner: AppleScriptRunner) -> list[ToolDefinition]:
    """Instantiate all tool definitions, in catalog order, bound to ``runner``."""
    return [
        *playback_tools(runner),
        get_current_track_tool(runner),
        get_player_state_tool(runner),
        get_volume_tool(runner),
        set_volume_tool(runner),
        get_position_tool(runner),
        set_position_tool(runner),
        get_shuffle_tool(runner),
        set_shuffle_tool(runner),
        get_repeat_tool(runner),
        set_repeat_tool(runner),
        get_playlists_tool(runner),
        get_playlist_tracks_tool(runner),
        play_playlist_tool(runner),
        search_library_tool(runner),
        play_song_tool(runner),
        play_album_tool(runner),
        play_artist_tool(runner),
        add_to_queue_tool(runner),
        love_track_tool(runner),
        dislike_track_tool(runner),
        open_music_tool(runner),
        quit_music_tool(runner),
    ]
