"""Entry point for the Music MCP server."""

from __future__ import annotations

import argparse
import json

from loguru import logger

from music_mcp_server.applescript import AppleScriptRunner, RecordingExecutor
from music_mcp_server.fastmcp_adapter import build_fastmcp_app
from music_mcp_server.log import configure_logging

TRANSPORTS = ("stdio", "http", "sse", "streamable-http")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server CLI."""
    parser = argparse.ArgumentParser(
        description="Control the macOS Music app over the Model Context Protocol."
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport to serve (default: stdio).",
    )
    parser.add_argument("--host", help="Bind address for network transports.")
    parser.add_argument("--port", type=int, help="Port for network transports.")
    parser.add_argument("--path", help="URL path for network transports.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON and exit.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log generated osascript commands instead of running them.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Minimum level written to stderr (default: INFO).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the server, or print the tool catalog when asked to."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    executor = RecordingExecutor() if args.dry_run else None
    app, server = build_fastmcp_app(AppleScriptRunner(executor))
    if args.catalog:
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    run_kwargs: dict[str, object] = {}
    if args.transport != "stdio":
        for option in ("host", "port", "path"):
            value = getattr(args, option)
            if value is not None:
                run_kwargs[option] = value

    logger.info(
        "Starting music-mcp on {} with {} tools",
        args.transport,
        len(server.available_tools()),
    )
    app.run(transport=args.transport, **run_kwargs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
