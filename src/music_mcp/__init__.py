"""music_mcp package initialization."""

from music_mcp.server import InvocationResult, MCPServer
from music_mcp.tools import (
    ParameterSpec,
    ToolDefinition,
    ToolInputError,
    ToolParameters,
)

__all__ = [
    "InvocationResult",
    "MCPServer",
    "ParameterSpec",
    "ToolDefinition",
    "ToolInputError",
    "ToolParameters",
]
