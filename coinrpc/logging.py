"""
Logging setup for the wallet CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers under the
``coinrpc`` namespace; handlers are attached here, by the CLI, never on import.
"""

from __future__ import annotations

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "coinrpc"
LOG_FORMAT = "%(asctime)sZ %(levelname)s %(name)s %(message)s"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUPS = 2


def _formatter() -> logging.Formatter:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    formatter.converter = time.gmtime
    return formatter


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(log_file: Path | None = None, *, level: int = logging.INFO) -> logging.Logger:
    """(Re)configure the ``coinrpc`` logger.

    Records go to stderr so command output on stdout stays machine readable.
    Calling this again replaces, and closes, any handlers from a previous call.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _drop_handlers(logger)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
        )
    formatter = _formatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger
