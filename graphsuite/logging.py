"""Logging utilities for graphsuite.

Every module obtains its logger through :func:`get_logger` so that all
library output lives under the ``graphsuite.`` namespace. The level,
format and stream chosen with :func:`configure_logging` apply both to
loggers that already exist and to loggers created afterwards.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_ROOT_NAME = "graphsuite"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level: int = logging.WARNING
_format: str = _DEFAULT_FORMAT
_stream: Optional[IO[str]] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if name is None or name == _ROOT_NAME:
        return _ROOT_NAME
    if name.startswith(_ROOT_NAME + "."):
        return name
    return f"{_ROOT_NAME}.{name}"


def _install_handler(logger: logging.Logger) -> None:
    """Replace logger's handlers with one built from the current settings."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))

    logger.setLevel(_level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module; names outside the
    package are prefixed with ``graphsuite.``.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphsuite.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing edges")
    """
    logger_name = _qualify(name)

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    _install_handler(logger)

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all graphsuite loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    global _level
    _level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for graphsuite.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging
        >>> from graphsuite.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream

    for logger in _loggers.values():
        _install_handler(logger)
