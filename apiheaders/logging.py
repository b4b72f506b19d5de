"""Logging setup for the apiheaders build step."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "apiheaders"
_CONSOLE_FORMAT = "[apiheaders] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below ``apiheaders``, e.g. ``apiheaders.transformer``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def _resolve_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _build_handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send apiheaders records to stderr and, optionally, to ``log_file``.

    ``verbose`` wins over ``quiet``. Calling this again replaces the handlers
    installed by the previous call.
    """
    level = _resolve_level(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_build_handler(logging.StreamHandler(), level, _CONSOLE_FORMAT))
    if log_file is not None:
        logger.addHandler(
            _build_handler(logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
        )
    return logger


__all__ = ["configure_logging", "get_logger"]
