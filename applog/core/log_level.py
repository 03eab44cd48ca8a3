"""
Log level enumeration

Levels are ordered by verbosity: ERROR is the least verbose and DEBUG the
most. A record is emitted when its level's ordinal does not exceed the
configured threshold's ordinal.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """Log level enumeration, ordered by verbosity."""

    ERROR = 0   # Operation failed
    WARN = 1    # Unexpected but recoverable
    INFO = 2    # Normal operation
    DEBUG = 3   # Developer diagnostics

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive), "warning" is accepted
                       as an alias of "warn"

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(str(level_str).strip().lower())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def coerce(cls, value: Union["LogLevel", str, int]) -> "LogLevel":
        """Accept a LogLevel, its name or its ordinal."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)

    @property
    def tag(self) -> str:
        """Bracketed tag written in front of every record of this level."""
        return LEVEL_TAGS[self]


# Mapping from lower-case names to levels
LEVEL_FROM_NAME: Dict[str, LogLevel] = {
    "error": LogLevel.ERROR,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "info": LogLevel.INFO,
    "debug": LogLevel.DEBUG,
}

LEVEL_TAGS: Dict[LogLevel, str] = {
    LogLevel.ERROR: "[level=error] ",
    LogLevel.WARN: "[level=warning] ",
    LogLevel.INFO: "[level=info] ",
    LogLevel.DEBUG: "[level=debug] ",
}
