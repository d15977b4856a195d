"""Logging setup with a colored console formatter."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Logging formatter that applies ANSI color codes to the levelname field.

    Colors are disabled when the ``NO_COLOR`` environment variable is set or
    when the target stream is not a TTY (e.g. redirected to a file).
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",     # cyan
        logging.INFO: "\033[32m",      # green
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = DEFAULT_FORMAT,
        datefmt: str | None = DEFAULT_DATEFMT,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.stream = stream

    def use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self.stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color():
            color = self.COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(log_level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Attach a colored console handler to the ``voteable_mongo`` logger.

    Calling it again replaces the handler installed by the previous call.

    Returns:
        The installed handler.
    """
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)
    target = stream or sys.stderr

    package_logger = logging.getLogger("voteable_mongo")
    for existing in list(package_logger.handlers):
        if getattr(existing, "_voteable_console", False):
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(target)
    handler.setFormatter(ColoredFormatter(stream=target))
    handler._voteable_console = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved_level)
    return handler
