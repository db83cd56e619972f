"""Logging setup for the lfg command line.

Library code only asks for loggers through :func:`get_logger`. Handlers are
attached by :func:`configure_logging`, which the CLI calls once per run; until
then the ``lfg`` logger is left alone and records propagate as usual.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

_LOGGER_NAME = "lfg"
CONSOLE_FORMAT = "[lfg] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers attached by configure_logging, so a later call can close them.
_installed: List[logging.Handler] = []


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``lfg`` or a child logger such as ``lfg.context.indexer``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def reset_logging() -> None:
    """Detach and close every handler installed by :func:`configure_logging`."""
    logger = logging.getLogger(_LOGGER_NAME)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send lfg records to stderr and, optionally, to ``log_file``.

    Calling this again replaces the previous configuration; file handlers
    from the earlier call are closed.
    """
    reset_logging()
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]
    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(sink)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
        _installed.append(handler)
    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
