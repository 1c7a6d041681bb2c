"""Tests for the registry and dispatcher."""

from __future__ import annotations

import json

import pytest

from music_mcp.server import InvocationResult, MCPServer
from music_mcp.tools import ToolDefinition, ToolInputError, ToolParameters


class EchoParams(ToolParameters):
    """Parameters for the echo tool."""

    message: str


def _echo_tool() -> ToolDefinition:
    def handler(raw_params: dict[str, object]) -> str:
        return EchoParams.model_validate(raw_params).message

    return ToolDefinition(
        name="echo",
        description="Return the message unchanged.",
        parameters_model=EchoParams,
        handler=handler,
    )


def _failing_tool(error: Exception) -> ToolDefinition:
    def handler(_: dict[str, object]) -> str:
        raise error

    return ToolDefinition(
        name="explode",
        description="Always fails.",
        parameters_model=ToolParameters,
        handler=handler,
    )


class TestMCPServer:
    """Behavioral coverage for MCPServer."""

    def test_register_and_list_tools(self) -> None:
        """Registered tools appear in registration order."""
        # Arrange
        server = MCPServer()
        echo = _echo_tool()

        # Act
        server.register_tools(echo, _failing_tool(RuntimeError("boom")))

        # Assert
        assert server.available_tools() == ["echo", "explode"]
        assert server.list_tools()[0] is echo
        catalog = server.to_catalog()
        assert catalog[0]["name"] == "echo"
        assert catalog[0]["description"] == echo.description

    def test_prevents_duplicate_tool_names(self) -> None:
        """Duplicate tool registrations raise a ValueError."""
        # Arrange
        server = MCPServer()
        server.register_tool(_echo_tool())

        # Act / Assert
        with pytest.raises(ValueError):
            server.register_tool(_echo_tool())

    def test_runs_registered_tool(self) -> None:
        """Executing a registered tool returns its reply text."""
        # Arrange
        server = MCPServer()
        server.register_tool(_echo_tool())

        # Act
        result = server.invoke("echo", {"message": "hello"})

        # Assert
        assert result == InvocationResult(text="hello")
        assert json.loads(result.to_json()) == {"text": "hello", "isError": False}

    def test_unknown_tool_is_an_error_result(self) -> None:
        """Unknown tool invocations never raise."""
        # Arrange
        server = MCPServer()

        # Act
        result = server.invoke("missing", {})

        # Assert
        assert result == InvocationResult(text="Unknown tool: missing", is_error=True)

    def test_rejects_invalid_parameters(self) -> None:
        """Pydantic failures become error results naming the tool."""
        # Arrange
        server = MCPServer()
        server.register_tool(_echo_tool())

        # Act
        result = server.invoke("echo", {})

        # Assert
        assert result.is_error is True
        assert result.text.startswith("Invalid parameters for tool 'echo'")
        assert "message" in result.text

    def test_input_errors_are_reported_verbatim(self) -> None:
        """ToolInputError messages are passed through without a prefix."""
        server = MCPServer()
        server.register_tool(_failing_tool(ToolInputError("Invalid thing")))

        result = server.invoke("explode")

        assert result == InvocationResult(text="Invalid thing", is_error=True)

    def test_unexpected_failures_are_caught(self) -> None:
        """Any other exception is converted to an 'Error:' result."""
        server = MCPServer()
        server.register_tool(_failing_tool(RuntimeError("boom")))

        result = server.invoke("explode", None)

        assert result == InvocationResult(text="Error: boom", is_error=True)
