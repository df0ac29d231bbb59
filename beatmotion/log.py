"""
beatmotion.log - Logging module with proper Python exception handling.

Usage:
    from beatmotion import log

    log.info("Hello")
    log.warn("Something wrong")

    try:
        do_something()
    except Exception as e:
        log.error(e, "Failed to do something")  # includes traceback

Messages go to the standard ``logging`` logger named "beatmotion", so host
applications configure handlers and levels the usual way.
"""

import logging
import traceback
from enum import IntEnum
from typing import Callable, Optional

_logger = logging.getLogger("beatmotion")


class Level(IntEnum):
    """Log levels accepted by set_level()."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    _dispatch(logging.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    _dispatch(logging.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    _dispatch(logging.WARNING, msg_or_exc, context)


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    _dispatch(logging.ERROR, msg_or_exc, context)


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def set_level(level: Level) -> None:
    """Set minimum level for the beatmotion logger."""
    _logger.setLevel(int(level))


class _CallbackHandler(logging.Handler):
    def __init__(self, callback: Callable[[Level, str], None]):
        super().__init__()
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        level = Level.ERROR
        for candidate in Level:
            if record.levelno <= candidate:
                level = candidate
                break
        self.callback(level, record.getMessage())


_callback_handler: Optional[_CallbackHandler] = None


def set_callback(callback: Optional[Callable[[Level, str], None]]) -> None:
    """
    Route every message to callback(level, message).

    Passing None removes a previously installed callback.
    """
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)


def _dispatch(levelno: int, msg_or_exc, context: str):
    if isinstance(msg_or_exc, BaseException):
        _log_exception(levelno, msg_or_exc, context)
    else:
        _logger.log(levelno, str(msg_or_exc))


def _log_exception(levelno: int, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)

    # Get traceback if available
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        full_msg = f"{context}: {exc_type}: {exc_msg}\n{tb}"
    else:
        full_msg = f"{exc_type}: {exc_msg}\n{tb}"

    _logger.log(levelno, full_msg)
