"""Model Context Protocol server for the macOS Music app."""

from music_mcp_server.applescript import (
    AppleScriptRunner,
    CommandExecutor,
    RecordingExecutor,
    ShellCommandExecutor,
)
from music_mcp_server.errors import MCPError, raise_mcp_error

__all__ = [
    "AppleScriptRunner",
    "CommandExecutor",
    "MCPError",
    "RecordingExecutor",
    "ShellCommandExecutor",
    "raise_mcp_error",
]
