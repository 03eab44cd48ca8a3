"""Rotation schedule and period-timestamp enumerations"""

from enum import Enum


class RotationKind(Enum):
    """How often the log file is replaced."""

    DAILY = "daily"
    HOURLY = "hourly"
    INTERVAL = "interval"


class PeriodResolution(Enum):
    """Resolution of the period-timestamp embedded in file names."""

    DAY = "%Y%m%d"
    HOUR = "%Y%m%d%H"
