"""
Rotation policy

Decides the dated file name for a point in time and how long to wait
until the next rotation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from applog.core.period import PeriodResolution, RotationKind

if TYPE_CHECKING:
    from applog.core.logger_config import LoggerConfig

# Never schedule a zero or negative delay
MIN_DELAY_SECONDS = 0.001


@dataclass
class RotationPolicy:
    """
    Rotation schedule plus file naming.

    Files are named prefix + period-timestamp + ".log" inside directory.
    DAILY rotates at local midnight, HOURLY at the top of each hour and
    INTERVAL every `interval`. Resolution defaults to DAY for DAILY and
    HOUR otherwise; an INTERVAL shorter than the resolution reopens the
    same file in append mode.
    """

    kind: RotationKind = RotationKind.DAILY
    directory: Path = Path("logs")
    prefix: str = ""
    interval: Optional[timedelta] = None
    resolution: Optional[PeriodResolution] = None

    def __post_init__(self):
        """Validate policy after initialization."""
        self.directory = Path(self.directory)
        if self.kind is RotationKind.INTERVAL:
            if self.interval is None or self.interval <= timedelta(0):
                raise ValueError("interval rotation needs a positive interval")
        if self.resolution is None:
            self.resolution = (
                PeriodResolution.DAY
                if self.kind is RotationKind.DAILY
                else PeriodResolution.HOUR
            )

    @classmethod
    def from_config(cls, config: "LoggerConfig") -> "RotationPolicy":
        """Create policy from logger configuration."""
        return cls(
            kind=config.rotation,
            directory=config.log_directory,
            prefix=config.prefix,
            interval=config.rotation_interval,
            resolution=config.resolution,
        )

    def period_timestamp(self, now: datetime) -> str:
        """Format the period a file written at `now` belongs to."""
        return now.strftime(self.resolution.value)

    def filename_for(self, now: datetime) -> str:
        return f"{self.prefix}{self.period_timestamp(now)}.log"

    def path_for(self, now: datetime) -> Path:
        return self.directory / self.filename_for(now)

    def next_boundary(self, now: datetime) -> datetime:
        """
        Compute the next rotation time after `now`.

        Args:
            now: Current wall-clock time

        Returns:
            Time at which the next rotation should fire
        """
        if self.kind is RotationKind.DAILY:
            start = now.replace(hour=0, minute=0, second=0, microsecond=0)
            return start + timedelta(days=1)
        if self.kind is RotationKind.HOURLY:
            start = now.replace(minute=0, second=0, microsecond=0)
            return start + timedelta(hours=1)
        return now + self.interval

    def seconds_until_next(self, now: datetime) -> float:
        """Delay in seconds until the next boundary; always positive."""
        delay = (self.next_boundary(now) - now).total_seconds()
        return max(delay, MIN_DELAY_SECONDS)
