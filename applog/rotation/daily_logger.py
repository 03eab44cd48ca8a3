"""
Auto daily logger

A Logger writing to a dated file, plus the scheduler that moves it to a
new file at every period boundary.
"""

from __future__ import annotations

import atexit
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from applog.core.logger import Logger
from applog.core.logger_config import LoggerConfig
from applog.rotation.rotation_policy import RotationPolicy
from applog.rotation.scheduler import RotationScheduler
from applog.rotation.triggers import BaseTrigger
from applog.writers.file_sink import FileSink


class AutoDailyLogger:
    """
    Logger whose output file follows the calendar.

    On construction the file for the current period is opened (appending if
    it already exists). If that fails the logger runs without a sink and
    drops records until the next successful rotation, unless
    config.fail_fast is set, in which case the OSError is raised.

    Example:
        daily = AutoDailyLogger(LoggerConfig(log_directory="logs", prefix="app-"))
        daily.start()
        daily.logger.infof("listening on %d", 8080)
        daily.stop()
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        trigger: Optional[BaseTrigger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize auto daily logger.

        Args:
            config: Logger configuration
            trigger: Rotation cadence (default: timer on policy boundaries)
            clock: Wall-clock source for file names and timestamps

        Raises:
            OSError: If config.fail_fast is set and the first file cannot
                     be opened
        """
        self.config = config or LoggerConfig.default()
        self.clock = clock or datetime.now
        self.policy = RotationPolicy.from_config(self.config)
        self.logger = Logger(self.config, clock=self.clock)

        path = self.policy.path_for(self.clock())
        try:
            self.logger.set_output(FileSink.open(path))
        except OSError as e:
            if self.config.fail_fast:
                raise
            print(f"Log file {path} unavailable, logging disabled: {e}", file=sys.stderr)

        self.scheduler = RotationScheduler(
            self.logger, self.policy, trigger=trigger, clock=self.clock
        )
        self._started = False
        # Serializes start() and stop()
        self._state_lock = threading.Lock()

    @property
    def current_path(self) -> Optional[Path]:
        sink = self.logger.sink
        return sink.path if isinstance(sink, FileSink) else None

    @property
    def running(self) -> bool:
        return self._started

    def start(self) -> None:
        """Start rotating."""
        with self._state_lock:
            if self._started:
                return
            self._started = True
            self.scheduler.start()
            atexit.register(self.stop)
            self.logger.info("AutoDailyLogger start")

    def stop(self) -> None:
        """
        Stop rotating and close the file.

        The scheduler is stopped first so no rotation can reopen a file
        after close; a write in flight finishes before the file is closed.
        """
        with self._state_lock:
            if not self._started:
                self.logger.close()
                return
            self._started = False
            self.scheduler.stop()
            atexit.unregister(self.stop)
            self.logger.info("AutoDailyLogger stop")
            self.logger.close()

    def __enter__(self) -> "AutoDailyLogger":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()

    def __repr__(self) -> str:
        """String representation."""
        return f"AutoDailyLogger(path='{self.current_path}', running={self._started})"
