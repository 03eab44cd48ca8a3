"""
Level-based filter

Gates log calls by comparing level ordinals against a threshold
"""

from typing import Union

from applog.core.log_level import LogLevel


class LevelFilter:
    """
    Filter log calls based on a verbosity threshold.

    A level is enabled when its ordinal is less than or equal to the
    threshold's ordinal, so DEBUG enables everything and ERROR only errors.

    The threshold is read without locking; it is expected to change rarely
    and from one thread at a time.
    """

    def __init__(self, threshold: Union[LogLevel, str] = LogLevel.INFO):
        """
        Initialize level filter.

        Args:
            threshold: Most verbose level that is still emitted

        Example:
            # Only log WARN and ERROR
            filter = LevelFilter(LogLevel.WARN)
        """
        self._threshold = LogLevel.coerce(threshold)

    @property
    def threshold(self) -> LogLevel:
        return self._threshold

    @threshold.setter
    def threshold(self, value: Union[LogLevel, str]) -> None:
        self._threshold = LogLevel.coerce(value)

    def enabled(self, level: LogLevel) -> bool:
        """
        Check whether a call at this level should produce output.

        Args:
            level: Level of the call

        Returns:
            True if the level is within the threshold
        """
        return int(level) <= int(self._threshold)

    def __call__(self, level: LogLevel) -> bool:
        """Allow filters to be callable."""
        return self.enabled(level)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(threshold={self._threshold})"
