"""Logging helpers. Diagnostics go to stderr so stdout carries only the report."""

import logging
import sys

LOGGER_NAME = "tickets_analyzer"


class DiagnosticFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] message``."""

    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname}] {record.getMessage()}"


def get_logger(name: str = LOGGER_NAME, level: str = "WARNING") -> logging.Logger:
    """
    Creates a logger that writes to the current stderr stream.

    Args:
        name: Logger name; child modules use ``tickets_analyzer.<module>``.
        level: Level name such as "DEBUG" or "WARNING".

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(DiagnosticFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger
