"""Tests for ColoredFormatter and setup_logging."""

import logging
from io import StringIO

import pytest

from voteable_mongo.utils.logging import ColoredFormatter, setup_logging

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


def _make_record(level: int, message: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name="voteable_mongo.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


def _tty_stream() -> StringIO:
    stream = StringIO()
    stream.isatty = lambda: True  # type: ignore[method-assign]
    return stream


class TestColoredFormatter:
    """Tests for ANSI color formatting."""

    @pytest.mark.parametrize(
        "level",
        [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL],
    )
    def test_color_applied_per_level(self, level, monkeypatch):
        """Should apply the correct ANSI color code for each level."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_tty_stream())

        output = fmt.format(_make_record(level))

        assert LEVEL_COLORS[level] in output
        assert RESET in output

    def test_no_color_when_no_color_env_set(self, monkeypatch):
        """Should not apply colors when NO_COLOR env var is set."""
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_tty_stream())

        assert fmt.format(_make_record(logging.INFO)) == "INFO | test"

    def test_no_color_for_non_tty(self, monkeypatch):
        """Should not apply colors when the stream is not a TTY."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=StringIO())

        assert fmt.format(_make_record(logging.WARNING)) == "WARNING | test"

    def test_original_record_unchanged(self, monkeypatch):
        """Should not leak color codes into the record seen by other handlers."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s", stream=_tty_stream())
        record = _make_record(logging.ERROR)

        fmt.format(record)

        assert record.levelname == "ERROR"


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        package_logger = logging.getLogger("voteable_mongo")
        handlers = list(package_logger.handlers)
        level = package_logger.level
        yield
        package_logger.handlers = handlers
        package_logger.setLevel(level)

    def test_installs_handler_and_level(self):
        """Should log package messages to the given stream at the given level."""
        stream = StringIO()

        setup_logging("debug", stream=stream)
        logging.getLogger("voteable_mongo.domain").debug("planned %s", "vote")

        assert "planned vote" in stream.getvalue()
        assert logging.getLogger("voteable_mongo").level == logging.DEBUG

    def test_repeated_setup_replaces_handler(self):
        """Should keep a single console handler across calls."""
        first = setup_logging("INFO", stream=StringIO())
        second = setup_logging("INFO", stream=StringIO())

        handlers = logging.getLogger("voteable_mongo").handlers
        assert second in handlers
        assert first not in handlers

    def test_unknown_level_falls_back_to_info(self):
        """Should use INFO for unknown level names."""
        setup_logging("chatty", stream=StringIO())

        assert logging.getLogger("voteable_mongo").level == logging.INFO
