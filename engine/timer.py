"""
Countdown timers for roll animations.

A countdown ticks at elapsed 0, interval, 2 * interval, ... while the
elapsed time is below the duration, then finishes once at the duration.
The first tick fires synchronously when the countdown starts.

Schedulers only decide *when* the next step runs; the tick/finish
bookkeeping lives in Countdown so every scheduler behaves the same.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional


TickCallback = Callable[[int], None]
FinishCallback = Callable[[], None]


class TimerHandle(ABC):
    """Handle to a running countdown."""

    @abstractmethod
    def cancel(self) -> None:
        """
        Stop the countdown.

        After this returns no further tick or finish callback fires.
        """
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether the countdown can still fire."""
        pass


class Countdown(TimerHandle):
    """Tick/finish bookkeeping driven by a scheduler."""

    def __init__(
        self,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ):
        if duration_ms <= 0:
            raise ValueError("Countdown duration must be positive")
        if interval_ms <= 0:
            raise ValueError("Countdown interval must be positive")

        self.duration_ms = duration_ms
        self.interval_ms = interval_ms
        self.elapsed_ms = 0
        self.ticks = 0
        self._on_tick = on_tick
        self._on_finish = on_finish
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def next_event_ms(self) -> int:
        """Elapsed time at which the next tick or the finish is due."""
        return min(self.elapsed_ms + self.interval_ms, self.duration_ms)

    def start(self) -> None:
        """Activate and fire the first tick."""
        self._active = True
        self._tick()

    def cancel(self) -> None:
        self._active = False

    def fire_next(self) -> None:
        """Advance to the next event and fire it."""
        if not self._active:
            return

        self.elapsed_ms = self.next_event_ms
        if self.elapsed_ms >= self.duration_ms:
            # Deactivate first so the finish callback may start a new countdown
            self._active = False
            self._on_finish()
        else:
            self._tick()

    def _tick(self) -> None:
        self.ticks += 1
        self._on_tick(self.duration_ms - self.elapsed_ms)


class Scheduler(ABC):
    """Abstract interface for starting countdowns."""

    @abstractmethod
    def start_countdown(
        self,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> TimerHandle:
        """
        Start a countdown.

        Args:
            duration_ms: Total length of the countdown
            interval_ms: Time between ticks
            on_tick: Called with the remaining milliseconds on every tick
            on_finish: Called once when the duration has elapsed

        Returns:
            TimerHandle: Handle that can cancel the countdown
        """
        pass


class ManualScheduler(Scheduler):
    """
    Scheduler driven by a virtual clock.

    Nothing happens until advance() or run_until_idle() is called, which
    makes roll timing fully deterministic in tests and headless drivers.
    """

    def __init__(self):
        self._now_ms = 0
        self._countdowns: list[tuple[int, Countdown]] = []

    @property
    def now_ms(self) -> int:
        """Current virtual time."""
        return self._now_ms

    @property
    def active_count(self) -> int:
        """Number of countdowns that can still fire."""
        return sum(1 for _, countdown in self._countdowns if countdown.active)

    def start_countdown(
        self,
        duration_ms: int,
        interval_ms: int,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> TimerHandle:
        countdown = Countdown(duration_ms, interval_ms, on_tick, on_finish)
        self._countdowns.append((self._now_ms, countdown))
        countdown.start()
        return countdown

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing every callback due on the way."""
        if ms < 0:
            raise ValueError("Cannot move the clock backwards")

        target = self._now_ms + ms
        while True:
            due = self._next_due(target)
            if due is None:
                break
            at, countdown = due
            self._now_ms = at
            countdown.fire_next()

        self._now_ms = target
        self._prune()

    def run_until_idle(self) -> None:
        """Advance until no countdown is active."""
        while True:
            due = self._next_due(None)
            if due is None:
                break
            at, countdown = due
            self._now_ms = at
            countdown.fire_next()
        self._prune()

    def _next_due(self, limit: Optional[int]) -> Optional[tuple[int, Countdown]]:
        """Find the earliest pending event at or before limit."""
        best: Optional[tuple[int, Countdown]] = None
        for started_at, countdown in self._countdowns:
            if not countdown.active:
                continue
            at = started_at + countdown.next_event_ms
            if limit is not None and at > limit:
                continue
            if best is None or at < best[0]:
                best = (at, countdown)
        return best

    def _prune(self) -> None:
        self._countdowns = [
            (started_at, countdown)
            for started_at, countdown in self._countdowns
            if countdown.active
        ]
