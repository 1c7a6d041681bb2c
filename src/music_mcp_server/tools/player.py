"""Player state tools: current track, volume, position, shuffle and repeat."""

from __future__ import annotations

from pydantic import Field

from music_mcp.tools import ParameterSpec, ToolDefinition, ToolParameters
from music_mcp_server.applescript import AppleScriptRunner, tell, tell_block
from music_mcp_server.tools.common import (
    NoParams,
    choose,
    format_number,
    script_tool,
)

REPEAT_MODES = ("off", "one", "all")

CURRENT_TRACK_SCRIPT = tell_block(
    """  if player state is not stopped then
    set currentTrack to current track
    set trackInfo to "Name: " & name of currentTrack & "\\n"
    set trackInfo to trackInfo & "Artist: " & artist of currentTrack & "\\n"
    set trackInfo to trackInfo & "Album: " & album of currentTrack & "\\n"
    set trackInfo to trackInfo & "Duration: " & (duration of currentTrack) & " seconds\\n"
    set trackInfo to trackInfo & "Year: " & year of currentTrack & "\\n"
    set trackInfo to trackInfo & "Genre: " & genre of currentTrack
    return trackInfo
  else
    return "No track is currently playing"
  end if"""
)


class SetVolumeParams(ToolParameters):
    """Parameters for music_set_volume."""

    volume: int | float


class SetPositionParams(ToolParameters):
    """Parameters for music_set_position."""

    position: int | float


class SetShuffleParams(ToolParameters):
    """Parameters for music_set_shuffle."""

    enabled: bool


class SetRepeatParams(ToolParameters):
    """Parameters for music_set_repeat."""

    mode: str = Field(min_length=1)


def clamp_volume(volume: int | float) -> int | float:
    """Limit a requested volume to the 0-100 range the player supports."""
    return max(0, min(100, volume))


def _query_tool(
    runner: AppleScriptRunner,
    *,
    name: str,
    description: str,
    expression: str,
    template: str,
) -> ToolDefinition:
    """Create a tool that reads one player property and formats it."""

    def handler(_: dict[str, object]) -> str:
        return template.format(runner.run(tell(f"return {expression}")))

    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=NoParams,
        handler=handler,
    )


def get_current_track_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_current_track tool."""
    return script_tool(
        runner,
        name="music_get_current_track",
        description="Get information about the currently playing track",
        script=CURRENT_TRACK_SCRIPT,
    )


def get_player_state_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_player_state tool."""
    return _query_tool(
        runner,
        name="music_get_player_state",
        description="Get the current player state (playing, paused, stopped)",
        expression="player state as string",
        template="Player state: {}",
    )


def get_volume_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_volume tool."""
    return _query_tool(
        runner,
        name="music_get_volume",
        description="Get the current volume level (0-100)",
        expression="sound volume",
        template="Volume: {}%",
    )


def set_volume_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_set_volume tool.

    Out-of-range values are clamped instead of rejected.
    """

    def handler(raw_params: dict[str, object]) -> str:
        params = SetVolumeParams.model_validate(raw_params)
        volume = format_number(clamp_volume(params.volume))
        runner.run(tell(f"set sound volume to {volume}"))
        return f"Volume set to {volume}%"

    return ToolDefinition(
        name="music_set_volume",
        description="Set the volume level (0-100)",
        parameters_model=SetVolumeParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="volume",
                kind="number",
                description="Volume level (0-100)",
                required=True,
                minimum=0,
                maximum=100,
            ),
        ),
    )


def get_position_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_position tool."""
    return _query_tool(
        runner,
        name="music_get_position",
        description="Get the current playback position in seconds",
        expression="player position",
        template="Position: {} seconds",
    )


def set_position_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_set_position tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = SetPositionParams.model_validate(raw_params)
        position = format_number(params.position)
        runner.run(tell(f"set player position to {position}"))
        return f"Position set to {position} seconds"

    return ToolDefinition(
        name="music_set_position",
        description="Set the playback position in seconds",
        parameters_model=SetPositionParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="position",
                kind="number",
                description="Position in seconds",
                required=True,
            ),
        ),
    )


def get_shuffle_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_shuffle tool."""

    def handler(_: dict[str, object]) -> str:
        enabled = runner.run(tell("return shuffle enabled"))
        return f"Shuffle: {'on' if enabled == 'true' else 'off'}"

    return ToolDefinition(
        name="music_get_shuffle",
        description="Get the shuffle state",
        parameters_model=NoParams,
        handler=handler,
    )


def set_shuffle_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_set_shuffle tool."""

    def handler(raw_params: dict[str, object]) -> str:
        params = SetShuffleParams.model_validate(raw_params)
        runner.run(tell(f"set shuffle enabled to {str(params.enabled).lower()}"))
        return f"Shuffle {'enabled' if params.enabled else 'disabled'}"

    return ToolDefinition(
        name="music_set_shuffle",
        description="Set shuffle on or off",
        parameters_model=SetShuffleParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="enabled",
                kind="boolean",
                description="Enable or disable shuffle",
                required=True,
            ),
        ),
    )


def get_repeat_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_get_repeat tool."""
    return _query_tool(
        runner,
        name="music_get_repeat",
        description="Get the repeat mode (off, one, all)",
        expression="song repeat as string",
        template="Repeat mode: {}",
    )


def set_repeat_tool(runner: AppleScriptRunner) -> ToolDefinition:
    """Create the music_set_repeat tool.

    Modes outside ``REPEAT_MODES`` are rejected before Music is contacted.
    """

    def handler(raw_params: dict[str, object]) -> str:
        params = SetRepeatParams.model_validate(raw_params)
        mode = choose(
            params.mode, REPEAT_MODES, f"Invalid repeat mode: {params.mode}"
        )
        runner.run(tell(f"set song repeat to {mode}"))
        return f"Repeat mode set to {mode}"

    return ToolDefinition(
        name="music_set_repeat",
        description="Set the repeat mode",
        parameters_model=SetRepeatParams,
        handler=handler,
        parameters=(
            ParameterSpec(
                name="mode",
                kind="string",
                description=(
                    "Repeat mode: off, one (repeat track), or all (repeat playlist)"
                ),
                required=True,
                enum=REPEAT_MODES,
            ),
        ),
    )
