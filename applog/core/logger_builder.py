"""Logger builder pattern"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from applog.core.log_level import LogLevel
from applog.core.logger_config import LoggerConfig
from applog.core.period import PeriodResolution, RotationKind

if TYPE_CHECKING:
    from applog.rotation.daily_logger import AutoDailyLogger
    from applog.rotation.triggers import BaseTrigger


class LoggerBuilder:
    """Builder pattern for AutoDailyLogger construction."""

    def __init__(self):
        self._options = {}
        self._trigger: Optional["BaseTrigger"] = None
        self._clock: Optional[Callable[[], datetime]] = None
        self._as_default = False

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._options["name"] = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set verbosity threshold."""
        self._options["min_level"] = level
        return self

    def with_directory(self, directory: Union[str, Path]) -> "LoggerBuilder":
        """Set directory for log files."""
        self._options["log_directory"] = directory
        return self

    def with_prefix(self, prefix: str) -> "LoggerBuilder":
        """Set log file name prefix."""
        self._options["prefix"] = prefix
        return self

    def with_flags(self, flags: Any) -> "LoggerBuilder":
        """Set record header flags."""
        self._options["flags"] = flags
        return self

    def with_rotation(
        self,
        kind: Union[RotationKind, str],
        interval: Optional[Union[timedelta, int, float]] = None,
    ) -> "LoggerBuilder":
        """
        Set rotation schedule.

        Args:
            kind: DAILY, HOURLY or INTERVAL (or their names)
            interval: Required for INTERVAL; timedelta or seconds

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_directory("logs")
                .with_rotation(RotationKind.INTERVAL, timedelta(minutes=10))
                .build())
        """
        self._options["rotation"] = kind
        self._options["rotation_interval"] = interval
        return self

    def with_resolution(self, resolution: Union[PeriodResolution, str]) -> "LoggerBuilder":
        """Set period-timestamp resolution of file names."""
        self._options["resolution"] = resolution
        return self

    def with_fail_fast(self, enabled: bool = True) -> "LoggerBuilder":
        """Raise at build time when the first log file cannot be opened."""
        self._options["fail_fast"] = enabled
        return self

    def with_trigger(self, trigger: "BaseTrigger") -> "LoggerBuilder":
        """Use a custom rotation trigger, e.g. a ManualTrigger driven by cron."""
        self._trigger = trigger
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use a custom wall-clock source."""
        self._clock = clock
        return self

    def as_default(self, enabled: bool = True) -> "LoggerBuilder":
        """Install the built logger as the process-wide default."""
        self._as_default = enabled
        return self

    def build_config(self) -> LoggerConfig:
        """Build and return the configuration only."""
        return LoggerConfig(**self._options)

    def build(self) -> "AutoDailyLogger":
        """Build and return configured daily logger (not yet started)."""
        from applog.rotation.daily_logger import AutoDailyLogger

        daily = AutoDailyLogger(
            self.build_config(), trigger=self._trigger, clock=self._clock
        )
        if self._as_default:
            from applog.core.default_logger import set_default_logger

            set_default_logger(daily.logger)
        return daily
