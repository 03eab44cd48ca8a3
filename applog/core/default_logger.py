"""
Process-wide default logger

Module-level functions forward to one shared Logger. Replacing that logger
is serialized by a module lock; changing its sink, level or flags goes
through the Logger's own mutex-protected methods.
"""

from __future__ import annotations

import threading
from typing import Any, Union

from applog.core.format_flags import FormatFlags
from applog.core.log_level import LogLevel
from applog.core.logger import CALL_DEPTH, Logger, _sprintf, _sprintln
from applog.core.logger_config import LoggerConfig
from applog.writers.stream_sink import StreamSink

_lock = threading.Lock()
_std = Logger(LoggerConfig(flags=FormatFlags.STD), sink=StreamSink())


def default_logger() -> Logger:
    """Return the current default logger."""
    with _lock:
        return _std


def set_default_logger(logger: Logger) -> Logger:
    """
    Replace the default logger.

    Returns:
        The previous default logger (left open)
    """
    global _std
    if not isinstance(logger, Logger):
        raise TypeError("logger must be a Logger")
    with _lock:
        previous, _std = _std, logger
    return previous


def set_output(sink: Any) -> Any:
    """Swap the default logger's sink."""
    return default_logger().set_output(sink)


def set_level(level: Union[LogLevel, str]) -> None:
    default_logger().set_level(level)


def set_flags(flags: Any) -> None:
    default_logger().set_flags(flags)


def debugf(fmt: str, *args: Any) -> None:
    default_logger()._emit(LogLevel.DEBUG, _sprintf(fmt, args), CALL_DEPTH)


def debug(*args: Any) -> None:
    default_logger()._emit(LogLevel.DEBUG, _sprintln(args), CALL_DEPTH)


def debugln(*args: Any) -> None:
    default_logger()._emit(LogLevel.DEBUG, _sprintln(args), CALL_DEPTH)


def infof(fmt: str, *args: Any) -> None:
    default_logger()._emit(LogLevel.INFO, _sprintf(fmt, args), CALL_DEPTH)


def info(*args: Any) -> None:
    default_logger()._emit(LogLevel.INFO, _sprintln(args), CALL_DEPTH)


def infoln(*args: Any) -> None:
    default_logger()._emit(LogLevel.INFO, _sprintln(args), CALL_DEPTH)


def warnf(fmt: str, *args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintf(fmt, args), CALL_DEPTH)


def warn(*args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintln(args), CALL_DEPTH)


def warnln(*args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintln(args), CALL_DEPTH)


def warningf(fmt: str, *args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintf(fmt, args), CALL_DEPTH)


def warning(*args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintln(args), CALL_DEPTH)


def warningln(*args: Any) -> None:
    default_logger()._emit(LogLevel.WARN, _sprintln(args), CALL_DEPTH)


def errorf(fmt: str, *args: Any) -> None:
    default_logger()._emit(LogLevel.ERROR, _sprintf(fmt, args), CALL_DEPTH)


def error(*args: Any) -> None:
    default_logger()._emit(LogLevel.ERROR, _sprintln(args), CALL_DEPTH)


def errorln(*args: Any) -> None:
    default_logger()._emit(LogLevel.ERROR, _sprintln(args), CALL_DEPTH)


def printf(fmt: str, *args: Any) -> None:
    default_logger()._emit(None, _sprintf(fmt, args), CALL_DEPTH)


def println(*args: Any) -> None:
    default_logger()._emit(None, _sprintln(args), CALL_DEPTH)
