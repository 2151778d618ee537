"""
Tests for logging setup.
"""

import io
import logging

import pytest

from adjgraph.logs import (
    ColorFormatter,
    ExitStreamHandler,
    fatal,
    setup_logging,
    verbosity_level,
)


def make_record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, msg, None, None)


def test_color_formatter_plain():
    formatter = ColorFormatter(use_color=False)

    assert formatter.format(make_record(logging.WARNING, "careful")) == (
        "WARNING: careful"
    )


def test_color_formatter_color():
    formatter = ColorFormatter(use_color=True)

    assert formatter.format(make_record(logging.INFO, "hi")) == (
        "\x1b[32;1mINFO:\x1b[0m hi"
    )


def test_exit_stream_handler_exits_at_level():
    stream = io.StringIO()
    handler = ExitStreamHandler(stream, logging.ERROR)
    handler.emit(make_record(logging.WARNING, "fine"))

    with pytest.raises(SystemExit) as info:
        handler.emit(make_record(logging.ERROR, "bad"))

    assert info.value.code == 1
    assert stream.getvalue() == "fine\nbad\n"


def test_verbosity_level():
    assert verbosity_level(None) == logging.WARNING
    assert verbosity_level(0) == logging.WARNING
    assert verbosity_level(1) == logging.INFO
    assert verbosity_level(2) == logging.DEBUG
    assert verbosity_level(5) == logging.DEBUG


def test_setup_logging(restore_root_logger):
    stream = io.StringIO()
    setup_logging(stream, logging.INFO, logging.ERROR)
    setup_logging(stream, logging.INFO, logging.ERROR)

    handlers = [
        h for h in restore_root_logger.handlers if isinstance(h, ExitStreamHandler)
    ]
    assert len(handlers) == 1
    assert restore_root_logger.level == logging.INFO

    logging.info("hello")
    logging.debug("hidden")
    assert stream.getvalue() == "INFO: hello\n"

    with pytest.raises(SystemExit):
        logging.error("stop")
    assert stream.getvalue().endswith("ERROR: stop\n")


def test_setup_logging_rejects_bad_levels(restore_root_logger):
    with pytest.raises(AssertionError):
        setup_logging(io.StringIO(), logging.ERROR, logging.WARNING)


def test_fatal_exits(restore_root_logger):
    stream = io.StringIO()
    setup_logging(stream, logging.WARNING, logging.FATAL)

    with pytest.raises(SystemExit):
        fatal("giving up on %s", "everything")
    assert stream.getvalue() == "FATAL: giving up on everything\n"
