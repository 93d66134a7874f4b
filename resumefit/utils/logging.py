"""Logging configuration for resumefit.

Library modules log through `logging.getLogger(__name__)`, which places them
under the `resumefit` logger configured here.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "resumefit"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO/DEBUG while reading PDFs.
_NOISY_LOGGERS = ("pdfminer", "pdfplumber")

_handler: logging.Handler | None = None


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    Calling this again only changes the level; the handler installed by the
    first call is reused.

    Args:
        level: Log level name. Defaults to INFO; unknown names fall back to INFO.
        stream: Destination for log records. Defaults to stderr.

    Returns:
        The `resumefit` logger.
    """
    global _handler

    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.ERROR)

    _handler.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the `resumefit.<name>` child logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Remove the installed handler (useful for testing)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _handler = None
