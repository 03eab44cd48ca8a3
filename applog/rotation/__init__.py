"""
Rotation module - calendar-based log file replacement

Provides:
- RotationPolicy: Dated file naming and boundary timing
- Triggers: Timer-driven and externally driven rotation cadence
- RotationScheduler: Opens the next file and swaps it into a Logger
- AutoDailyLogger: Logger plus scheduler with start/stop lifecycle
"""

from applog.rotation.rotation_policy import (
    PeriodResolution,
    RotationKind,
    RotationPolicy,
)
from applog.rotation.triggers import BaseTrigger, ManualTrigger, TimerTrigger
from applog.rotation.scheduler import RotationScheduler, RotationStats, SchedulerState
from applog.rotation.daily_logger import AutoDailyLogger

__all__ = [
    "PeriodResolution",
    "RotationKind",
    "RotationPolicy",
    "BaseTrigger",
    "ManualTrigger",
    "TimerTrigger",
    "RotationScheduler",
    "RotationStats",
    "SchedulerState",
    "AutoDailyLogger",
]
