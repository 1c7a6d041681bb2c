"""Library browsing tools: playlists and free-text search."""

from __future__ import annotations

from pydantic import Field

from music_mcp.tools import ParameterSpec, ToolDefinition, ToolParameters
from music_mcp_server.applescript import AppleScriptRunner, tell_block
from music_mcp_server.tools.common import NoParams, choose, format_number, quoted

SEARCH_TYPES = ("songs", "albums", "artists", "all")
DEFAULT_PLAYLIST_TRACK_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 20

PLAYLISTS_SCRIPT = tell_block(
    """  set playlistNames to ""
  repeat with p in playlists
    set playlistNames to playlistNames & name of p & "\\n"
  end repeat
  return playlistNames"""
)


class PlaylistTracksParams(ToolParameters):
    """Parameters for music_get_playlist_tracks."""

    playlist: str
    limit: int | float | None = None


class PlayPlaylistParams(ToolParameters):
    """Parameters for music_play_playlist."""

    playlist: str
    shuffle: bool | None = None


class SearchLibraryParams(ToolParameters):
    """Parameters for music_search_library."""

    query: str
    search_type: str | None = Field(None, alias="searchType")
    limit: int | float | None = None


def playlist_tracks_script(playlist: str, limit: float) -> str:
    """Build the script listing up to ``limit`` tracks of a playlist."""
    name = quoted(playlist)
    bound = format_number(limit)
    return tell_block(
        f"""  try
    set thePlaylist to playlist {name}
    set trackList to ""
    set trackCount to 0
    repeat with t in tracks of thePlaylist
      if trackCount < {bound} then
        set trackList to trackList & name of t & " - " & artist of t & "\\n"
        set trackCount to trackCount + 1
      end if
    end repeat
    if trackList is "" then
      return "Playlist is empty"
    end if
    return trackList
  on error
    return "Playlist not found: " & {name}
  end try"""
    )


def play_playlist_script(playlist: str, shuffle: bool) -> str:
    """Build the script starting playback of a playlist."""
    name = quoted(playlist)
    shuffle_line = "set shuffle enabled to true" if shuffle else ""
    return tell_block(
        f"""  try
    set thePlaylist to playlist {name}
    {shuffle_line}
    play thePlaylist
    return "Playing playlist: " & {name}
  on error
    return "Playlist not found: " & {name}
  end try"""
    )


def song_search_script(query: str, limit: float) -> str:
    """Build the script matching tracks by name, artist or album."""
    needle = quoted(query)
    bound = format_number(limit)
    return tell_block(
        f"""  set results to ""
  set matchCount to 0
  repeat with t in (every track whose name contains {needle} or artist contains {needle} or album contains {needle})
    if matchCount < {bound} then
      set results to results & name of t & " - " & artist of t & " (" & album of t & ")\\n"
      set matchCount to matchCount + 1
    end if
  end repeat
  if results is "" then
    return "No results found for: " & {needle}
  end if
  return results"""
    )


def album_search_script(query: str, limit: float) -> str:
    """Build the script listing distinct albums whose title matches."""
    needle = quoted(query)
    bound = format_number(limit)
    return tell_block(
        f"""  set results to ""
  set albumList to {{}}
  set matchCount to 0
  repeat with t in (every track whose album contains {needle})
    if matchCount < {bound} then
      set albumKey to album of t & " - " & album artist of t
      if albumKey is not in albumList then
        set end of albumList to albumKey
        set results to results & album of t & " - " & album artist of t & "\\n"
        set matchCount to matchCount + 1
      end if
    end if
  end repeat
  if results is "" then
    return "No albums found for: " & {needle}
  end if
  return results"""
    )


def artist_search_script(query: str, limit: float) -> str:
    """Build the script listing distinct artists whose name matches."""
    needle = quoted(query)
    bound = format_number(limit)
    return tell_block(
        f"""  set results to ""
  set artistList to {{}}
  set matchCount to 0
  repeat with t in (every track whose artist contains {needle})
    if matchCount < {bound} then
      set artistName to artist of t
      if artistName is not in artistList then
        set end of artistList to artistName
        set results to results & artistName & "\\n"
        set matchCount to matchCount + 1
      end if
    end if
  end repeat
  if results is "" then
    return "No artists found for: " & {needle}
  end if
  return results"""
    )


SEARCH_SCRIPTS = {
    "songs": song_search_script,
    "all": song_search_script,
    "albums": album_search_script,
    "artists": artist_search_script,
}


def get_playlists_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_playlists tool."""

    def handler(_: dict[str, object]) -> str:
        names = runner.run_multi(PLAYLISTS_SCRIPT)
        if not names:
            return "No playlists found"
        return f"Playlists:\n{names}"

    return ToolDefinition(
        name="music_get_playlists",
        description="Get all playlists",
        parameters_model=NoParams,
        handler=handler,
    )


def get_playlist_tracks_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_playlist_tracks tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = PlaylistTracksParams.model_validate(raw_params)
        limit = DEFAULT_PLAYLIST_TRACK_LIMIT if params.limit is None else params.limit
        return runner.run_multi(playlist_tracks_script(params.playlist, limit))

    return ToolDefinition(
        name="music_get_playlist_tracks",
        description="Get tracks in a specific playlist",
        parameters_model=PlaylistTracksParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="playlist",
                kind="string",
                description="Playlist name",
                required=True,
            ),
            ParameterSpec(
                name="limit",
                kind="number",
                description="Maximum number of tracks to return (default: 50)",
            ),
        ),
    )


def play_playlist_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_play_playlist tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = PlayPlaylistParams.model_validate(raw_params)
        shuffle = bool(params.shuffle)
        return runner.run_multi(play_playlist_script(params.playlist, shuffle))

    return ToolDefinition(
        name="music_play_playlist",
        description="Play a specific playlist",
        parameters_model=PlayPlaylistParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="playlist",
                kind="string",
                description="Playlist name",
                required=True,
            ),
            ParameterSpec(
                name="shuffle",
                kind="boolean",
                description="Shuffle the playlist (default: false)",
            ),
        ),
    )


def search_library_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_search_library tool.

    Each search scope produces a differently shaped script; an unknown scope
    is rejected without contacting Music.
    """

    def handler(raw_params: dict[str, object]) -> str:
        params = SearchLibraryParams.model_validate(raw_params)
        requested = "all" if params.search_type is None else params.search_type
        search_type = choose(requested, SEARCH_TYPES, "Invalid search type")
        limit = DEFAULT_SEARCH_LIMIT if params.limit is None else params.limit
        build_script = SEARCH_SCRIPTS[search_type]
        return runner.run_multi(build_script(params.query, limit))

    return ToolDefinition(
        name="music_search_library",
        description="Search the music library for songs, albums, or artists",
        parameters_model=SearchLibraryParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="query",
                kind="string",
                description="Search query",
                required=True,
            ),
            ParameterSpec(
                name="searchType",
                kind="string",
                description="Type of search (default: all)",
                enum=SEARCH_TYPES,
            ),
            ParameterSpec(
                name="limit",
                kind="number",
                description="Maximum number of results (default: 20)",
            ),
        ),
    )
