"""
Rotation triggers

A trigger invokes a callback repeatedly on some cadence. The scheduler
depends only on start(callback) and stop(); what decides the cadence (a
timer chain here, or an external cron engine calling ManualTrigger.fire)
is up to the trigger.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional


class BaseTrigger(ABC):
    """Abstract base class for rotation triggers."""

    @abstractmethod
    def start(self, callback: Callable[[], None]) -> None:
        """
        Begin invoking callback on the trigger's cadence.

        Args:
            callback: Function to invoke at each boundary
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop invoking the callback."""
        pass


class TimerTrigger(BaseTrigger):
    """
    Trigger backed by a chain of threading.Timer objects.

    After each firing the next delay is asked from `next_delay`, so daily
    and hourly schedules realign to the wall clock every time.

    Thread Safety:
        start() and stop() may be called from any thread.
    """

    def __init__(self, next_delay: Callable[[], float], name: str = "applog-rotation"):
        """
        Initialize timer trigger.

        Args:
            next_delay: Returns seconds until the next firing
            name: Timer thread name
        """
        self.next_delay = next_delay
        self.name = name
        self._callback: Optional[Callable[[], None]] = None
        self._timer: Optional[threading.Timer] = None
        self._timer_lock = threading.Lock()
        self._running = False
        # Bumped by start() and stop(); a chain from an older start() ends
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self, callback: Callable[[], None]) -> None:
        with self._timer_lock:
            if self._running:
                return
            self._callback = callback
            self._running = True
            self._generation += 1
            generation = self._generation
        self._schedule(generation)

    def _schedule(self, generation: int) -> None:
        """Schedule next firing."""
        with self._timer_lock:
            if not self._running or generation != self._generation:
                return

            self._timer = threading.Timer(self.next_delay(), self._fire, args=(generation,))
            self._timer.name = self.name
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation: int) -> None:
        """Called by the timer thread."""
        with self._timer_lock:
            if not self._running or generation != self._generation:
                return

        try:
            self._callback()
        except Exception as e:
            print(f"Rotation trigger callback error: {e}", file=sys.stderr)

        self._schedule(generation)

    def stop(self) -> None:
        """Cancel the pending timer; no timer is scheduled afterwards."""
        with self._timer_lock:
            self._running = False
            self._generation += 1
            if self._timer:
                self._timer.cancel()
                self._timer = None


class ManualTrigger(BaseTrigger):
    """
    Trigger fired explicitly through fire().

    Lets an external scheduler (a cron engine, a job runner, a test) decide
    when rotation happens.
    """

    def __init__(self):
        self._callback: Optional[Callable[[], None]] = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        with self._lock:
            self._callback = callback

    def stop(self) -> None:
        with self._lock:
            self._callback = None

    def fire(self) -> bool:
        """
        Invoke the callback once.

        Returns:
            True if the trigger was started and the callback ran
        """
        with self._lock:
            callback = self._callback
        if callback is None:
            return False
        callback()
        return True
