"""CLI-level coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import pytest

from music_mcp.server import MCPServer
from music_mcp_server import main as server_main
from music_mcp_server.applescript import AppleScriptRunner, RecordingExecutor


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture()
def dummy_app(monkeypatch: pytest.MonkeyPatch) -> _DummyApp:
    """Replace the FastMCP app built by main() with a recording shim."""
    app = _DummyApp()
    monkeypatch.setattr(
        server_main, "build_fastmcp_app", lambda _runner: (app, MCPServer())
    )
    return app


def test_main_runs_fastmcp_with_transport(dummy_app: _DummyApp) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_defaults_to_stdio(dummy_app: _DummyApp) -> None:
    """Network options are not forwarded to the stdio transport."""
    exit_code = server_main.main(["--host", "0.0.0.0", "--log-level", "debug"])

    assert exit_code == 0
    assert dummy_app.run_calls == [{"transport": "stdio"}]


def test_catalog_flag(capsys: pytest.CaptureFixture[str]) -> None:
    """--catalog prints the tool descriptors and does not start a server."""
    exit_code = server_main.main(["--catalog"])

    assert exit_code == 0
    catalog = json.loads(capsys.readouterr().out)
    assert len(catalog) == 28
    assert catalog[0] == {
        "name": "music_play",
        "description": "Start playing music or resume playback",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    }


@pytest.mark.parametrize(("argv", "recording"), [(["--dry-run"], True), ([], False)])
def test_dry_run_selects_recording_executor(
    monkeypatch: pytest.MonkeyPatch, argv: list[str], recording: bool
) -> None:
    """--dry-run swaps the shell executor for one that only records commands."""
    runners: list[AppleScriptRunner] = []

    def _build(runner: AppleScriptRunner) -> tuple[_DummyApp, MCPServer]:
        runners.append(runner)
        return _DummyApp(), MCPServer()

    monkeypatch.setattr(server_main, "build_fastmcp_app", _build)

    assert server_main.main(argv) == 0
    assert isinstance(runners[0]._executor, RecordingExecutor) is recording
