"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from loguru import logger

from music_mcp.server import MCPServer
from music_mcp_server.applescript import AppleScriptRunner, RecordingExecutor
from music_mcp_server.tools import build_tools


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the event loop fastmcp targets."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks added by a test so none outlive its captured streams."""
    yield
    logger.remove()


@pytest.fixture()
def executor() -> RecordingExecutor:
    """Provide a fresh recording executor."""
    return RecordingExecutor()


@pytest.fixture()
def runner(executor: RecordingExecutor) -> AppleScriptRunner:
    """Provide an AppleScript runner backed by the recording executor."""
    return AppleScriptRunner(executor)


@pytest.fixture()
def server(runner: AppleScriptRunner) -> MCPServer:
    """Provide a server with the full Music tool catalog registered."""
    mcp_server = MCPServer()
    mcp_server.register_tools(*build_tools(runner))
    return mcp_server


@pytest.fixture()
def reply(
    server: MCPServer, executor: RecordingExecutor
) -> Callable[..., tuple[str, bool]]:
    """Invoke a tool with scripted bridge output and return (text, is_error)."""

    def _reply(name: str, output: str = "", **arguments: object) -> tuple[str, bool]:
        executor.output = output
        result = server.invoke(name, arguments)
        return result.text, result.is_error

    return _reply
