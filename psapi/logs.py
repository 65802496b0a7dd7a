"""Opt-in logging for the psapi package.

The package logger carries only a ``NullHandler`` until :func:`enable_logging`
attaches a stderr handler, so library use is silent by default.
"""

from __future__ import annotations

import logging
from typing import IO

from psapi.utils.dates import format_rfc822, from_timestamp

PACKAGE_LOGGER = "psapi"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


class RFC822Formatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return format_rfc822(from_timestamp(record.created))


_handler: logging.Handler | None = None


def get_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def enable_logging(level: int = logging.INFO, stream: IO[str] | None = None) -> logging.Handler:
    global _handler
    logger = get_logger()
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(RFC822Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    logger.info("Logging enabled.")
    return _handler


def disable_logging() -> None:
    global _handler
    logger = get_logger()
    logger.info("Logging disabled.")
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
