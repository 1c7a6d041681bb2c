"""AppleScript bridge used to drive the Music app.

Scripts are run through ``osascript -e`` as a single shell command. Two
quoting modes exist and must not be mixed up:

* single statements are wrapped in a single-quoted shell literal, where the
  only character needing care is ``'`` itself;
* multi-line scripts (conditionals, loops, ``try`` blocks) are wrapped in a
  double-quoted shell literal, where ``\\``, ``"``, ``$`` and backticks must
  be escaped.

User-supplied text is first escaped for the AppleScript string literal it is
placed in, and the whole script is then escaped for the shell literal.
"""

from __future__ import annotations

import subprocess
from typing import Protocol

from loguru import logger

from music_mcp_server.errors import raise_mcp_error

MUSIC_APP = "Music"


def escape_applescript_string(text: str) -> str:
    """Escape text for use inside a double-quoted AppleScript string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def escape_for_single_quote_shell_literal(script: str) -> str:
    """Escape a script for embedding between single quotes in a shell command."""
    return script.replace("'", "'\"'\"'")


def escape_for_double_quote_shell_literal(script: str) -> str:
    """Escape a script for embedding between double quotes in a shell command."""
    return (
        script.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("`", "\\`")
    )


def build_single_statement_command(script: str) -> str:
    """Build the shell command running a one-line AppleScript statement."""
    return f"osascript -e '{escape_for_single_quote_shell_literal(script)}'"


def build_multiline_command(script: str) -> str:
    """Build the shell command running a multi-line AppleScript program."""
    return f'osascript -e "{escape_for_double_quote_shell_literal(script)}"'


def tell(statement: str) -> str:
    """Return a single-statement ``tell`` addressed to the Music app."""
    return f'tell application "{MUSIC_APP}" to {statement}'


def tell_block(body: str) -> str:
    """Wrap script lines in a ``tell`` block addressed to the Music app."""
    return f'\ntell application "{MUSIC_APP}"\n{body}\nend tell'


class CommandExecutor(Protocol):
    """Runs a shell command and returns its standard output."""

    def execute(self, command: str) -> str:
        """Run ``command`` and return stdout, raising on failure."""
        ...


class ShellCommandExecutor:
    """Execute commands through the system shell and capture their output.

    Output is read in full, so large library listings are not truncated.
    """

    def execute(self, command: str) -> str:
        """Run ``command`` and return its stdout.

        Raises:
            subprocess.CalledProcessError: If the command exits non-zero.
            OSError: If the shell cannot be started.

        """
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
        return completed.stdout


class RecordingExecutor:
    """Record commands instead of running them, replying with canned output.

    Backs the ``--dry-run`` mode of the CLI and lets tests inspect the exact
    command lines a tool produces. Setting ``error`` makes every call raise it.
    """

    def __init__(self, output: str = "") -> None:
        self.commands: list[str] = []
        self.output = output
        self.error: Exception | None = None

    def execute(self, command: str) -> str:
        """Record ``command`` and return the canned output."""
        logger.info("Dry run, not executing: {}", command)
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.output

    @property
    def last_command(self) -> str:
        """Return the most recent command, failing if none was recorded."""
        if not self.commands:
            raise LookupError("No command was executed")
        return self.commands[-1]


class AppleScriptRunner:
    """Run AppleScript through a :class:`CommandExecutor`.

    Every failure is re-raised as an ``AppleScriptError`` :class:`MCPError`,
    using the executor's stderr when it has any and the exception text
    otherwise. The exit status, when known, is kept in the error details.
    """

    def __init__(self, executor: CommandExecutor | None = None) -> None:
        """Create a runner, defaulting to the shell executor."""
        self._executor = executor or ShellCommandExecutor()

    def run(self, script: str) -> str:
        """Run a single AppleScript statement and return its trimmed output."""
        return self._execute(build_single_statement_command(script))

    def run_multi(self, script: str) -> str:
        """Run a multi-line AppleScript program and return its trimmed output."""
        return self._execute(build_multiline_command(script))

    def _execute(self, command: str) -> str:
        logger.debug("Running command: {}", command)
        try:
            output = self._executor.execute(command)
        except Exception as exc:
            stderr = getattr(exc, "stderr", None)
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            reason = stderr.strip() if stderr and stderr.strip() else str(exc)
            returncode = getattr(exc, "returncode", None)
            logger.warning("AppleScript failed (exit {}): {}", returncode, reason)
            raise_mcp_error(
                "AppleScriptError",
                f"AppleScript error: {reason}",
                {"returncode": returncode},
            )
        return output.strip()
