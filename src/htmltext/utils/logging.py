"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``htmltext`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; the package logger never holds more than
      one handler installed here.
    - Library code only obtains loggers and never configures the root logger.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "htmltext"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package logs to the current ``sys.stderr``.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.  A handler installed
    by an earlier call is replaced, so the stream always follows ``sys.stderr``.
    """

    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
