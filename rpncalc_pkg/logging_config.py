"""Logging for rpncalc.

Every module logs through a child of the ``rpncalc`` logger, e.g.
``rpncalc.converter``. Nothing is emitted until ``setup_logging`` attaches
handlers; the CLI calls it once per invocation.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

from .config import LOG_LEVEL

LOGGER_NAME = "rpncalc"
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class StructuredFormatter(logging.Formatter):
    """One line per record: ``<iso timestamp> [LEVEL] logger: message``.

    Tracebacks, when attached, follow on the next lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach handlers to the package logger, replacing any from an earlier call.

    Args:
        level: DEBUG, INFO, WARNING or ERROR. Defaults to ``RPNCALC_LOG_LEVEL``;
            unrecognized names fall back to WARNING
        log_file: Also append records to this file
        stream: Console stream (defaults to stderr)

    Returns:
        The ``rpncalc`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    level_name = (level or LOG_LEVEL).upper()
    if level_name not in _LEVELS:
        level_name = "WARNING"
    logger.setLevel(getattr(logging, level_name))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = StructuredFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``rpncalc.<name>`` logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
