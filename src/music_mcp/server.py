"""Registry and dispatcher for Music MCP tools.

The server keeps an ordered catalog of tool definitions and turns every
invocation into an :class:`InvocationResult`. Transport details live in
``music_mcp_server.fastmcp_adapter``; this module stays free of them so that
dispatch can be exercised directly in tests.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from music_mcp.tools import ToolDefinition, ToolInputError


@dataclass(frozen=True)
class InvocationResult:
    """Result returned by tool execution.

    Attributes:
        text: Reply text shown to the client.
        is_error: Whether the invocation failed.

    """

    text: str
    is_error: bool = False

    def to_json(self) -> str:
        """Serialize the result to JSON.

        Returns:
            JSON representation of the invocation result.

        """
        return json.dumps({"text": self.text, "isError": self.is_error})


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    Tools are kept in registration order, which is also the order reported to
    clients during discovery.
    """

    def __init__(self) -> None:
        """Initialize an empty server registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def list_tools(self) -> tuple[ToolDefinition, ...]:
        """Return the registered tools in registration order."""
        return tuple(self._tools.values())

    def available_tools(self) -> list[str]:
        """List the names of registered tools.

        Returns:
            Tool names in registration order.

        """
        return list(self._tools)

    def invoke(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> InvocationResult:
        """Execute a registered tool without ever raising.

        Args:
            name: Name of the tool to execute.
            arguments: Raw arguments supplied by the client.

        Returns:
            InvocationResult carrying the reply text. Unknown tools, rejected
            arguments and execution failures are reported with ``is_error``.

        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: {}", name)
            return InvocationResult(text=f"Unknown tool: {name}", is_error=True)

        logger.debug("Invoking {} with {}", name, dict(arguments or {}))
        try:
            validated_params = tool.validate(dict(arguments or {}))
            text = tool.handler(validated_params)
        except ToolInputError as error:
            logger.warning("Rejected arguments for {}: {}", name, error)
            return InvocationResult(text=str(error), is_error=True)
        except Exception as exc:
            logger.warning("Tool {} failed: {}", name, exc)
            return InvocationResult(text=f"Error: {exc}", is_error=True)
        return InvocationResult(text=text)

    def to_catalog(self) -> list[dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Tool metadata in registration order.

        """
        return [tool.metadata() for tool in self._tools.values()]
