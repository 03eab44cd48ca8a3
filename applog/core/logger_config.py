"""
Logger configuration management

Directory, prefix, threshold and rotation schedule consumed when a daily
logger is constructed.
"""

import codecs
from dataclasses import dataclass, field, fields
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from applog.core.format_flags import FormatFlags
from applog.core.log_level import LogLevel
from applog.core.period import PeriodResolution, RotationKind


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    String values for level, flags, rotation and resolution are accepted and
    converted in __post_init__, so a config can be built straight from a
    parsed configuration file.
    """

    # Basic settings
    name: str = "applog"
    min_level: Union[LogLevel, str] = LogLevel.INFO
    flags: Any = FormatFlags.STD | FormatFlags.LONG_FILE

    # File settings
    log_directory: Union[Path, str] = field(default_factory=lambda: Path("logs"))
    prefix: str = ""
    encoding: str = "utf-8"

    # Rotation settings
    rotation: Union[RotationKind, str] = RotationKind.DAILY
    rotation_interval: Optional[Union[timedelta, int, float]] = None
    resolution: Optional[Union[PeriodResolution, str]] = None

    # Fail at construction when the first log file cannot be opened,
    # instead of running without a sink until the next rotation
    fail_fast: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.min_level = LogLevel.coerce(self.min_level)
        self.flags = FormatFlags.parse(self.flags)

        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

        if isinstance(self.rotation, str):
            try:
                self.rotation = RotationKind(self.rotation.strip().lower())
            except ValueError:
                raise ValueError(f"Invalid rotation: {self.rotation}") from None

        if isinstance(self.resolution, str):
            try:
                self.resolution = PeriodResolution[self.resolution.strip().upper()]
            except KeyError:
                raise ValueError(f"Invalid resolution: {self.resolution}") from None

        if isinstance(self.rotation_interval, (int, float)):
            self.rotation_interval = timedelta(seconds=self.rotation_interval)

        if self.rotation is RotationKind.INTERVAL:
            if self.rotation_interval is None:
                raise ValueError("rotation_interval is required for interval rotation")
            if self.rotation_interval <= timedelta(0):
                raise ValueError("rotation_interval must be positive")

        if not self.encoding:
            raise ValueError("encoding cannot be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            flags=FormatFlags.STD | FormatFlags.MICROSECONDS | FormatFlags.SHORT_FILE,
            rotation=RotationKind.HOURLY,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            flags=FormatFlags.STD | FormatFlags.SHORT_FILE,
            rotation=RotationKind.DAILY,
            fail_fast=True,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a mapping.

        Args:
            data: Mapping with configuration keys. "level" and "directory"
                  are accepted as aliases of "min_level" and "log_directory".

        Returns:
            New LoggerConfig instance

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        aliases = {"level": "min_level", "directory": "log_directory", "dir": "log_directory"}
        known = {f.name for f in fields(cls)}

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            key = aliases.get(key, key)
            if key not in known:
                raise ValueError(f"Unknown configuration key: {key}")
            kwargs[key] = value
        return cls(**kwargs)
