"""Adapters for exposing Music MCP tools via FastMCP."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from music_mcp.server import MCPServer
from music_mcp.tools import ToolDefinition
from music_mcp_server.applescript import AppleScriptRunner
from music_mcp_server.tools import build_tools

SERVER_NAME = "music-mcp"
SERVER_INSTRUCTIONS = (
    "Control the macOS Music app: playback, volume, shuffle and repeat, "
    "playlists, library search and favorites."
)


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool.

    Calls are routed through :meth:`MCPServer.invoke`; an error result is
    raised as :class:`ToolError` so the client receives ``isError`` with the
    same text.
    """

    def __init__(self, server: MCPServer, definition: ToolDefinition) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=None,
            tags=set(),
        )
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call and wrap the reply text."""
        result = self._server.invoke(self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Convert every registered tool into a FastMCP-compatible tool."""
    return [
        ToolDefinitionAdapter(server, definition) for definition in server.list_tools()
    ]


def build_fastmcp_app(runner: AppleScriptRunner) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all Music tools registered."""
    server = MCPServer()
    server.register_tools(*build_tools(runner))
    # Range and enum checks belong to the dispatcher, which clamps volume and
    # words its own rejections.
    app = FastMCP(
        name=SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        strict_input_validation=False,
    )
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    return app, server
