"""
Main Logger class - leveled logger writing to one swappable sink

Every record is rendered and written while holding a single lock that also
guards the current sink, so a record never straddles two files and the
shared scratch buffer is never used by two calls at once.
"""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from applog.core.format_flags import FormatFlags
from applog.core.log_level import LogLevel
from applog.core.logger_config import LoggerConfig
from applog.filters.level_filter import LevelFilter
from applog.formatters.header_formatter import HeaderFormatter

# Frames between output() and the application code for every public call:
# output <- _emit <- info() <- caller
CALL_DEPTH = 3


def _format_error(e: Exception, fmt: Any = "") -> str:
    try:
        return f"[FORMAT ERROR: {e}] {fmt}"
    except Exception:
        return f"[FORMAT ERROR: {type(e).__name__}]"


def _sprintf(fmt: Any, args: tuple) -> str:
    """Render a printf-style body; never raises."""
    try:
        if not args:
            return str(fmt)
        if len(args) == 1 and isinstance(args[0], Mapping):
            args = args[0]
        return str(fmt) % args
    except Exception as e:
        return _format_error(e, fmt)


def _safe_str(arg: Any) -> str:
    try:
        return str(arg)
    except Exception as e:
        return _format_error(e).rstrip()


def _sprintln(args: tuple) -> str:
    return " ".join(_safe_str(arg) for arg in args) + "\n"


class Logger:
    """Leveled logger with a mutex-protected, swappable output sink."""

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        sink: Any = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize logger.

        Args:
            config: Logger configuration (level, flags, encoding)
            sink: Initial output sink; without one, writes are no-ops until
                  set_output() installs a sink
            clock: Source of record timestamps (default: datetime.now)
        """
        self._config = config or LoggerConfig.default()
        self._filter = LevelFilter(self._config.min_level)
        self._flags = FormatFlags(self._config.flags)
        self._formatter = HeaderFormatter()
        self._clock = clock or datetime.now
        self._encoding = self._config.encoding

        # Guards _sink, _buf and _metrics
        self._lock = threading.Lock()
        self._sink = sink
        self._buf = bytearray()
        self._metrics = {"written": 0, "failed": 0}

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def level(self) -> LogLevel:
        return self._filter.threshold

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the verbosity threshold."""
        self._filter.threshold = level

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether calls at level are currently written."""
        return self._filter.enabled(level)

    @property
    def flags(self) -> FormatFlags:
        return self._flags

    def set_flags(self, flags: Any) -> None:
        """Set the header flags."""
        flags = FormatFlags.parse(flags)
        with self._lock:
            self._flags = flags

    @property
    def sink(self) -> Any:
        return self._sink

    def set_output(self, sink: Any, close_previous: bool = True) -> Any:
        """
        Install a new sink.

        The swap and the close of the previous sink happen under the write
        lock, so no record is written to a half-closed sink.

        Args:
            sink: New sink (or None to stop writing)
            close_previous: Close the replaced sink

        Returns:
            The replaced sink
        """
        with self._lock:
            previous, self._sink = self._sink, sink
            if close_previous and previous is not None and previous is not sink:
                previous.close()
        return previous

    def output(self, calldepth: int, s: str) -> int:
        """
        Write one record.

        Args:
            calldepth: Number of frames above this call to report as the
                       caller; 1 is the function calling output()
            s: Record body; a trailing newline is added if missing

        Returns:
            Number of bytes written; 0 when no sink is installed

        Raises:
            OSError: If the sink write fails
            ValueError: If the underlying file was closed elsewhere
            Exception: Anything else the sink raises, unchanged
        """
        now = self._clock()
        flags = self._flags

        # Frame lookup touches no shared state, so it stays outside the lock
        file, line = "", 0
        if flags & (FormatFlags.SHORT_FILE | FormatFlags.LONG_FILE):
            try:
                frame = sys._getframe(calldepth)
                file, line = frame.f_code.co_filename, frame.f_lineno
            except ValueError:
                file, line = "???", 0

        body = s.encode(self._encoding, "replace")

        with self._lock:
            sink = self._sink
            if sink is None:
                return 0

            buf = self._buf
            del buf[:]
            try:
                self._formatter.render(buf, now, file, line, flags)
                buf.extend(body)
                if not body or body[-1] != 0x0A:
                    buf.append(0x0A)
                n = sink.write(buf)
            except Exception:
                self._metrics["failed"] += 1
                raise
            finally:
                del buf[:]
            self._metrics["written"] += 1
            return n

    def _emit(self, level: Optional[LogLevel], body: str, depth: int = CALL_DEPTH) -> None:
        """Gate, tag and write a record, reporting any failure to stderr."""
        if level is not None:
            if not self._filter.enabled(level):
                return
            body = level.tag + body
        try:
            self.output(depth, body)
        except Exception as e:
            print(f"Log write error: {e}", file=sys.stderr)

    # Debug

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log a printf-style debug message."""
        self._emit(LogLevel.DEBUG, _sprintf(fmt, args))

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self._emit(LogLevel.DEBUG, _sprintln(args))

    def debugln(self, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, _sprintln(args))

    # Info

    def infof(self, fmt: str, *args: Any) -> None:
        """Log a printf-style info message."""
        self._emit(LogLevel.INFO, _sprintf(fmt, args))

    def info(self, *args: Any) -> None:
        """Log info message."""
        self._emit(LogLevel.INFO, _sprintln(args))

    def infoln(self, *args: Any) -> None:
        self._emit(LogLevel.INFO, _sprintln(args))

    # Warn

    def warnf(self, fmt: str, *args: Any) -> None:
        """Log a printf-style warning message."""
        self._emit(LogLevel.WARN, _sprintf(fmt, args))

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self._emit(LogLevel.WARN, _sprintln(args))

    def warnln(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, _sprintln(args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, _sprintf(fmt, args))

    def warning(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, _sprintln(args))

    def warningln(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, _sprintln(args))

    # Error

    def errorf(self, fmt: str, *args: Any) -> None:
        """Log a printf-style error message."""
        self._emit(LogLevel.ERROR, _sprintf(fmt, args))

    def error(self, *args: Any) -> None:
        """Log error message."""
        self._emit(LogLevel.ERROR, _sprintln(args))

    def errorln(self, *args: Any) -> None:
        self._emit(LogLevel.ERROR, _sprintln(args))

    # Print: no level gate, no tag

    def printf(self, fmt: str, *args: Any) -> None:
        """Write a printf-style message regardless of level."""
        self._emit(None, _sprintf(fmt, args))

    def print(self, *args: Any) -> None:
        """Write a message regardless of level."""
        self._emit(None, _sprintln(args))

    def println(self, *args: Any) -> None:
        self._emit(None, _sprintln(args))

    def flush(self) -> None:
        """Flush the current sink."""
        with self._lock:
            if self._sink is not None and hasattr(self._sink, "flush"):
                self._sink.flush()

    def close(self) -> None:
        """
        Close the current sink.

        Waits for an in-flight write; afterwards writes are no-ops until a
        new sink is installed.
        """
        with self._lock:
            sink, self._sink = self._sink, None
            if sink is not None:
                sink.close()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name='{self.name}', level={self.level}, flags={int(self._flags)})"
