"""Logging setup for the Music MCP server."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr at ``level``.

    Stdout carries the stdio transport, so nothing may be logged there.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
