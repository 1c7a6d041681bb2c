"""Coverage for the AppleScript bridge: escaping, quoting and error mapping."""

from __future__ import annotations

import shutil
import subprocess

import pytest

from music_mcp_server.applescript import (
    AppleScriptRunner,
    RecordingExecutor,
    ShellCommandExecutor,
    build_multiline_command,
    build_single_statement_command,
    escape_applescript_string,
    escape_for_double_quote_shell_literal,
    escape_for_single_quote_shell_literal,
    tell,
)
from music_mcp_server.errors import MCPError, raise_mcp_error

requires_shell = pytest.mark.skipif(shutil.which("sh") is None, reason="needs sh")


def test_applescript_string_escapes_backslash_before_quote() -> None:
    assert escape_applescript_string('a\\b"c') == 'a\\\\b\\"c'


def test_single_quote_shell_literal_splices_quotes() -> None:
    assert escape_for_single_quote_shell_literal("it's") == "it'\"'\"'s"


def test_double_quote_shell_literal_escapes_shell_metacharacters() -> None:
    escaped = escape_for_double_quote_shell_literal('say "$HOME" `id` \\n')

    assert escaped == 'say \\"\\$HOME\\" \\`id\\` \\\\n'


def test_single_statement_command_shape() -> None:
    command = build_single_statement_command(tell("play"))

    assert command == "osascript -e 'tell application \"Music\" to play'"


def test_multiline_command_shape() -> None:
    command = build_multiline_command('return "x"')

    assert command == 'osascript -e "return \\"x\\""'


def test_runner_trims_output(executor: RecordingExecutor) -> None:
    executor.output = "  playing\n"

    assert AppleScriptRunner(executor).run(tell("return player state")) == "playing"


def test_runner_prefers_stderr(executor: RecordingExecutor) -> None:
    executor.error = subprocess.CalledProcessError(
        1, "osascript", stderr="Music is not running\n"
    )

    with pytest.raises(MCPError) as excinfo:
        AppleScriptRunner(executor).run(tell("play"))

    assert str(excinfo.value) == "AppleScript error: Music is not running"
    assert excinfo.value.error_type == "AppleScriptError"
    assert excinfo.value.to_dict()["error"]["details"] == {"returncode": 1}


def test_runner_falls_back_to_exception_text(executor: RecordingExecutor) -> None:
    executor.error = RuntimeError("Command failed without stderr")

    with pytest.raises(MCPError) as excinfo:
        AppleScriptRunner(executor).run_multi("return 1")

    assert str(excinfo.value) == "AppleScript error: Command failed without stderr"
    assert excinfo.value.to_dict()["error"]["details"] == {"returncode": None}


def test_runner_ignores_blank_stderr(executor: RecordingExecutor) -> None:
    error = subprocess.CalledProcessError(2, "osascript", stderr="  ")
    executor.error = error

    with pytest.raises(MCPError) as excinfo:
        AppleScriptRunner(executor).run("x")

    assert str(excinfo.value) == f"AppleScript error: {error}"


def test_raise_mcp_error_builds_structured_payload() -> None:
    with pytest.raises(MCPError) as excinfo:
        raise_mcp_error(
            "AppleScriptError", "AppleScript error: boom", {"returncode": 3}
        )

    assert excinfo.value.to_dict() == {
        "error": {
            "type": "AppleScriptError",
            "message": "AppleScript error: boom",
            "details": {"returncode": 3},
        }
    }


def test_recording_executor_records_without_running() -> None:
    executor = RecordingExecutor(output=" 42 \n")

    assert AppleScriptRunner(executor).run(tell("get sound volume")) == "42"
    assert executor.commands == [
        "osascript -e 'tell application \"Music\" to get sound volume'"
    ]


def test_recording_executor_without_commands() -> None:
    with pytest.raises(LookupError):
        _ = RecordingExecutor().last_command


@requires_shell
def test_shell_executor_round_trips_quoted_script_text() -> None:
    """Text survives both quoting modes when passed through a real shell."""
    executor = ShellCommandExecutor()
    text = 'He said "hi" it\'s $HOME `x` \\ done'

    single = executor.execute(
        f"printf '%s' '{escape_for_single_quote_shell_literal(text)}'"
    )
    double = executor.execute(
        f'printf \'%s\' "{escape_for_double_quote_shell_literal(text)}"'
    )

    assert single == text
    assert double == text


@requires_shell
def test_shell_executor_raises_with_stderr() -> None:
    executor = ShellCommandExecutor()

    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        executor.execute("echo 'Music is not running' >&2; exit 1")

    assert excinfo.value.stderr.strip() == "Music is not running"


@requires_shell
def test_shell_executor_captures_large_output() -> None:
    executor = ShellCommandExecutor()

    output = executor.execute("yes track | head -n 200000")

    assert output.count("track") == 200000
