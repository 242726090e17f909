"""Logging utilities for labsched.

Every module in the package obtains its logger through :func:`get_logger`, so
the whole library can be silenced or made verbose from one place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_STREAM: Optional[TextIO] = None  # None means sys.stderr at handler creation
_DEFAULT_FORMAT = DEFAULT_FORMAT

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.WARNING
    return int(level)


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(_DEFAULT_STREAM if _DEFAULT_STREAM is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the ``labsched`` namespace.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module.

    Args:
        name: Logger name. ``None`` returns the package root logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from labsched.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("registered node %r", "lab 1")
    """
    if name is None:
        name = "labsched"

    if name == "labsched" or name.startswith("labsched."):
        logger_name = name
    else:
        logger_name = f"labsched.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every labsched logger, including ones created later.

    Args:
        level: ``logging.DEBUG``-style int or a level name such as ``"INFO"``.
            Unknown names fall back to WARNING.
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Reconfigure output for every labsched logger.

    Existing handlers are replaced by a single stream handler, and loggers
    created afterwards use the same settings. Call once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. Defaults to ``DEFAULT_FORMAT``.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from labsched.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL, _DEFAULT_STREAM, _DEFAULT_FORMAT

    _DEFAULT_LEVEL = _coerce_level(level)
    _DEFAULT_STREAM = stream
    _DEFAULT_FORMAT = format_string or DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
