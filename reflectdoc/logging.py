"""Diagnostics output for reflectdoc.

Modules ask :func:`get_logger` for a named child logger. Nothing is printed
until the command line calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "reflectdoc"
_CONSOLE_FORMAT = "[reflectdoc] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """``get_logger("resolvers")`` gives ``reflectdoc.resolvers``; no name gives the package logger."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _level_for(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route package diagnostics to stderr and, when ``log_file`` is given, to that file.

    Levels: DEBUG with ``verbose`` (overload and skipped-member notes), WARNING
    with ``quiet``, INFO otherwise. ``verbose`` takes precedence.
    """
    level = _level_for(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Calling this twice replaces the previous sinks.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), level, _CONSOLE_FORMAT)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)

    return logger


__all__ = ["configure_logging", "get_logger"]
