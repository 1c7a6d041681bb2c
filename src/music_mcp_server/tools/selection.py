"""Play or look up a song, album or artist by name."""

from __future__ import annotations

from music_mcp.tools import ParameterSpec, ToolDefinition, ToolParameters
from music_mcp_server.applescript import AppleScriptRunner, tell_block
from music_mcp_server.tools.common import quoted

QUEUE_NOTE = "Note: Direct queue manipulation requires manual action in Music app"


class SongParams(ToolParameters):
    """Parameters naming a song, optionally narrowed by artist."""

    song: str
    artist: str | None = None


class AlbumParams(ToolParameters):
    """Parameters for music_play_album."""

    album: str
    artist: str | None = None


class ArtistParams(ToolParameters):
    """Parameters for music_play_artist."""

    artist: str
    shuffle: bool | None = None


def _matching_tracks(song: str, artist: str | None) -> str:
    if artist:
        return (
            f"set matchingTracks to (every track whose name contains {quoted(song)}"
            f" and artist contains {quoted(artist)})"
        )
    return f"set matchingTracks to (every track whose name contains {quoted(song)})"


def play_song_script(song: str, artist: str | None) -> str:
    """Build the script playing the first track whose name matches."""
    return tell_block(
        f"""  try
    {_matching_tracks(song, artist)}
    if (count of matchingTracks) > 0 then
      play item 1 of matchingTracks
      set t to item 1 of matchingTracks
      return "Playing: " & name of t & " - " & artist of t
    else
      return "Song not found: " & {quoted(song)}
    end if
  on error errMsg
    return "Error: " & errMsg
  end try"""
    )


def play_album_script(album: str, artist: str | None) -> str:
    """Build the script playing an album, optionally matched on album artist."""
    if artist:
        selection = (
            f"set albumTracks to (every track whose album is {quoted(album)}"
            f" and album artist contains {quoted(artist)})"
        )
    else:
        selection = f"set albumTracks to (every track whose album is {quoted(album)})"
    return tell_block(
        f"""  try
    {selection}
    if (count of albumTracks) > 0 then
      play item 1 of albumTracks
      return "Playing album: " & {quoted(album)}
    else
      return "Album not found: " & {quoted(album)}
    end if
  on error errMsg
    return "Error: " & errMsg
  end try"""
    )


def play_artist_script(artist: str, shuffle: bool) -> str:
    """Build the script playing tracks by an artist."""
    shuffle_line = "set shuffle enabled to true" if shuffle else ""
    return tell_block(
        f"""  try
    set artistTracks to (every track whose artist contains {quoted(artist)})
    if (count of artistTracks) > 0 then
      {shuffle_line}
      play item 1 of artistTracks
      return "Playing songs by: " & {quoted(artist)}
    else
      return "No songs found by: " & {quoted(artist)}
    end if
  on error errMsg
    return "Error: " & errMsg
  end try"""
    )


def find_song_script(song: str, artist: str | None) -> str:
    """Build the script reporting the first track a queue request would use.

    Music's scripting dictionary cannot append to Up Next, so the script only
    confirms that a match exists.
    """
    return tell_block(
        f"""  try
    {_matching_tracks(song, artist)}
    if (count of matchingTracks) > 0 then
      set t to item 1 of matchingTracks
      return "Found: " & name of t & " - " & artist of t & "\\n{QUEUE_NOTE}"
    else
      return "Song not found: " & {quoted(song)}
    end if
  on error errMsg
    return "Error: " & errMsg
  end try"""
    )


def _song_parameters(
    description: str, artist_description: str
) -> tuple[ParameterSpec, ...]:
    return (
        ParameterSpec(
            name="song", kind="string", description=description, required=True
        ),
        ParameterSpec(name="artist", kind="string", description=artist_description),
    )


def play_song_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_play_song tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = SongParams.model_validate(raw_params)
        return runner.run_multi(play_song_script(params.song, params.artist))

    return ToolDefinition(
        name="music_play_song",
        description="Play a specific song by name",
        parameters_model=SongParams,
        handler=handler,
        parameters=_song_parameters(
            "Song name to play", "Artist name (optional, helps find the right song)"
        ),
    )


def play_album_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_play_album tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = AlbumParams.model_validate(raw_params)
        return runner.run_multi(play_album_script(params.album, params.artist))

    return ToolDefinition(
        name="music_play_album",
        description="Play a specific album",
        parameters_model=AlbumParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="album", kind="string", description="Album name", required=True
            ),
            ParameterSpec(
                name="artist", kind="string", description="Artist name (optional)"
            ),
        ),
    )


def play_artist_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_play_artist tool. Shuffle defaults to on."""

    def handler(raw_params: dict[str, object]) -> str:
        params = ArtistParams.model_validate(raw_params)
        shuffle = True if params.shuffle is None else params.shuffle
        return runner.run_multi(play_artist_script(params.artist, shuffle))

    return ToolDefinition(
        name="music_play_artist",
        description="Play songs by a specific artist",
        parameters_model=ArtistParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="artist", kind="string", description="Artist name", required=True
            ),
            ParameterSpec(
                name="shuffle",
                kind="boolean",
                description="Shuffle the songs (default: true)",
            ),
        ),
    )


def add_to_queue_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_add_to_queue tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = SongParams.model_validate(raw_params)
        return runner.run_multi(find_song_script(params.song, params.artist))

    return ToolDefinition(
        name="music_add_to_queue",
        description="Add a song to the play queue",
        parameters_model=SongParams,
        handler=handler,
        parameters=_song_parameters("Song name to add", "Artist name (optional)"),
    )
