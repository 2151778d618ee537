"""Logging setup for the adjgraph command."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import NoReturn, Optional, TextIO

# ANSI color codes for level names.
LEVEL_COLORS = {
    logging.FATAL: 31,
    logging.ERROR: 31,
    logging.WARNING: 33,
    logging.INFO: 32,
    logging.DEBUG: 35,
}


class ColorFormatter(Formatter):

    """Formats records as "LEVEL: message", with a bold colored level on TTYs."""

    def __init__(self, use_color: bool):
        super().__init__("%(message)s")
        self.use_color = use_color

    def level_label(self, record: LogRecord) -> str:
        label = f"{record.levelname}:"
        code = LEVEL_COLORS.get(record.levelno)
        if self.use_color and code is not None:
            return f"\x1b[{code};1m{label}\x1b[0m"
        return label

    def format(self, record: LogRecord) -> str:
        return f"{self.level_label(record)} {super().format(record)}"


class ExitStreamHandler(StreamHandler):

    """Stream handler that calls sys.exit(1) after emitting a severe record.

    A record is severe if its level is at least exit_level. The CLI uses ERROR,
    or FATAL when given --keep-going.
    """

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def verbosity_level(verbose: Optional[int]) -> int:
    """Map the count of -v flags to a log level."""
    if not verbose:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Install an ExitStreamHandler writing to stream on the root logger.

    Requires log_level <= exit_level <= FATAL. Calling it again replaces the
    handler installed by the previous call.
    """
    assert log_level <= exit_level <= logging.FATAL
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in list(root.handlers):
        if isinstance(handler, ExitStreamHandler):
            root.removeHandler(handler)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    root.addHandler(handler)
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL level and exit with status 1.

    Exits even if no ExitStreamHandler is installed.
    """
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
