"""Logging setup for the CLI and the TUI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "tooly"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    *,
    to_stderr: bool = True,
) -> logging.Logger:
    """Configure the ``tooly`` logger.

    The TUI passes ``to_stderr=False`` since it owns the terminal; with no
    log file it then logs nowhere.

    Args:
        level: Log level name.
        log_file: Optional file to append log records to.
        to_stderr: Whether to log to stderr as well.

    Returns:
        The configured ``tooly`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove handlers from a previous call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if to_stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    return logger
