"""GitHub Actions workflow commands and the logging handler that emits them."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = [
    "WorkflowCommandHandler",
    "configure_logging",
    "escape_data",
    "format_command",
]

_LEVEL_COMMANDS: tuple[tuple[int, str], ...] = (
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, ""),
    (logging.NOTSET, "debug"),
)


def escape_data(value: str) -> str:
    """Escape a command payload the way the Actions runner expects."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str = "") -> str:
    return f"::{command}::{escape_data(message)}"


class WorkflowCommandHandler(logging.StreamHandler):
    """Render log records as workflow commands on stdout.

    DEBUG becomes ``::debug::``, WARNING ``::warning::``, ERROR and above
    ``::error::``. INFO records are written as plain lines.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream if stream is not None else sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for level, command in _LEVEL_COMMANDS:
            if record.levelno >= level:
                return format_command(command, message) if command else message
        return message


def configure_logging(level: int = logging.DEBUG, stream: TextIO | None = None) -> logging.Logger:
    """Attach a ``WorkflowCommandHandler`` to the package logger.

    Calling this more than once replaces the previously installed handler.
    """
    package_logger = logging.getLogger("boringcache_action")
    for handler in list(package_logger.handlers):
        if isinstance(handler, WorkflowCommandHandler):
            package_logger.removeHandler(handler)
    handler = WorkflowCommandHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger
