"""Logging setup for per-entry error reports on stderr."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "lsview"


class _ReportFormatter(logging.Formatter):
    """Format errors like ``perror("Error")`` and lesser records by level."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return f"Error: {message}"
        return f"{record.levelname}: {message}"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``lsview`` logger.

    Repeated calls replace the handler previously installed here.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_lsview_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ReportFormatter())
    handler._lsview_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
