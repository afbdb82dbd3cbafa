"""
Qt-backed countdown scheduler.

Runs roll countdowns on the Qt event thread with a single-shot QTimer
re-armed for every step, so ticks and the finish land on the same
elapsed times as with the engine's ManualScheduler.
"""

from typing import Optional
from PyQt6.QtCore import QObject, QTimer

from engine.timer import Countdown, Scheduler, TimerHandle, TickCallback, FinishCallback


class QtCountdown(Countdown):
    """Countdown driven by a QTimer."""

    def __init__(
        self,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
        parent: Optional[QObject] = None,
    ):
        super().__init__(duration_ms, interval_ms, on_tick, on_finish)

        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        super().start()
        self._arm()

    def cancel(self) -> None:
        self._timer.stop()
        super().cancel()

    def _arm(self) -> None:
        """Schedule the next step if still running."""
        if self.active:
            self._timer.start(self.next_event_ms - self.elapsed_ms)

    def _on_timeout(self) -> None:
        # A timeout queued before cancel() is dropped by fire_next()
        self.fire_next()
        self._arm()


class QtScheduler(Scheduler):
    """Scheduler that uses the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def start_countdown(
        self,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> TimerHandle:
        countdown = QtCountdown(duration_ms, interval_ms, on_tick, on_finish, self._parent)
        countdown.start()
        return countdown
