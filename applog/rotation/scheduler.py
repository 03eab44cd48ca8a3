"""
Rotation scheduler

Replaces a Logger's file sink at each trigger. The new file is opened
before the logger lock is taken; only the swap and the close of the old
file happen under it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from applog.rotation.rotation_policy import RotationPolicy
from applog.rotation.triggers import BaseTrigger, TimerTrigger
from applog.writers.file_sink import FileSink

if TYPE_CHECKING:
    from applog.core.logger import Logger


class SchedulerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass
class RotationStats:
    """Counters for rotation monitoring."""

    rotations: int = 0
    failures: int = 0
    last_rotation: Optional[datetime] = None
    current_path: Optional[Path] = None

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "rotations": self.rotations,
            "failures": self.failures,
            "last_rotation": (
                self.last_rotation.isoformat() if self.last_rotation else None
            ),
            "current_path": str(self.current_path) if self.current_path else None,
        }


class RotationScheduler:
    """
    Periodically swap the logger's file for one named after the current period.

    State machine: STOPPED --start--> RUNNING --stop--> STOPPED. While
    running, every trigger firing calls rotate().

    If the new file cannot be opened, the previous sink stays installed,
    the failure is logged at ERROR through the logger and the scheduler
    keeps running.

    Example:
        logger = Logger(config, sink=FileSink.open(policy.path_for(datetime.now())))
        scheduler = RotationScheduler(logger, policy)
        scheduler.start()
    """

    def __init__(
        self,
        logger: "Logger",
        policy: RotationPolicy,
        trigger: Optional[BaseTrigger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize rotation scheduler.

        Args:
            logger: Logger whose sink is rotated
            policy: Naming and schedule
            trigger: Cadence source (default: TimerTrigger on policy boundaries)
            clock: Wall-clock source (default: datetime.now)
        """
        self.logger = logger
        self.policy = policy
        self.clock = clock or datetime.now
        self.trigger = trigger or TimerTrigger(
            lambda: self.policy.seconds_until_next(self.clock())
        )

        self._state = SchedulerState.STOPPED
        self._state_lock = threading.Lock()
        # Held for the whole of a rotation; stop() waits on it
        self._rotate_lock = threading.Lock()
        self._stats = RotationStats()

        sink = logger.sink
        if isinstance(sink, FileSink):
            self._stats.current_path = sink.path

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    def start(self) -> None:
        """Start the trigger. Does nothing if already running."""
        with self._state_lock:
            if self._state is SchedulerState.RUNNING:
                return
            self._state = SchedulerState.RUNNING
        self.trigger.start(self.rotate)

    def stop(self) -> None:
        """
        Stop the trigger.

        Returns after any rotation in progress has finished; no rotation
        starts after that.
        """
        with self._state_lock:
            if self._state is SchedulerState.STOPPED:
                return
            self._state = SchedulerState.STOPPED
        self.trigger.stop()
        with self._rotate_lock:
            pass

    def rotate(self) -> bool:
        """
        Open the file for the current period and install it.

        Returns:
            True if a new sink was installed
        """
        with self._rotate_lock:
            if self._state is not SchedulerState.RUNNING:
                return False

            now = self.clock()
            path = self.policy.path_for(now)
            try:
                sink = FileSink.open(path)
            except OSError as e:
                self._stats.failures += 1
                self.logger.errorf("rotate log file to %s failed: %s", path, e)
                return False

            self.logger.set_output(sink)
            self._stats.rotations += 1
            self._stats.last_rotation = now
            self._stats.current_path = path
            self.logger.infof("log file rotated to %s", path)
            return True

    def get_stats(self) -> RotationStats:
        """
        Get rotation statistics.

        Returns:
            Copy of current rotation statistics
        """
        with self._rotate_lock:
            return RotationStats(
                rotations=self._stats.rotations,
                failures=self._stats.failures,
                last_rotation=self._stats.last_rotation,
                current_path=self._stats.current_path,
            )

    def __repr__(self) -> str:
        """String representation."""
        return f"RotationScheduler(kind={self.policy.kind.value}, state={self._state.value})"
