"""
Dice controller.

Wraps the engine's RollSession and emits Qt signals for UI updates.
"""

import logging
import random
from typing import Callable, Optional, Sequence
from PyQt6.QtCore import QObject, pyqtSignal

from engine import RollSession, SessionSnapshot, Scheduler
from shared.constants import ROLL_DURATION_CHOICES_MS
from shared.enums import EventType, Outcome, RollState
from client.config import ClientSettings, settings as default_settings
from client.qt_scheduler import QtScheduler


logger = logging.getLogger(__name__)


class DiceController(QObject):
    """
    Controller between the dice widgets and the roll session.

    Every per-die request carries the die index; the controller keeps no
    "current die" of its own.

    Signals:
        state_changed: Dice or total changed (snapshot dict)
        rolling_changed: A roll started or ended (is_rolling)
        outcome_reached: A finished roll won or lost (outcome value)
        event_logged: Something worth showing in the roll log (event_type, data)
    """

    state_changed = pyqtSignal(dict)
    rolling_changed = pyqtSignal(bool)
    outcome_reached = pyqtSignal(str)
    event_logged = pyqtSignal(str, dict)

    def __init__(
        self,
        parent=None,
        scheduler: Optional[Scheduler] = None,
        client_settings: Optional[ClientSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(parent)

        self._settings = client_settings or default_settings
        self._stopping = False
        self._pending_start: Optional[dict] = None
        self._session = RollSession(
            scheduler=scheduler or QtScheduler(),
            rng=rng,
            seed=self._settings.seed,
            roll_duration_ms=self._settings.roll_duration_ms,
            tick_interval_ms=self._settings.tick_interval_ms,
            active_dice_count=self._settings.start_dice_count,
        )

        self._session.add_update_listener(self._on_update)
        self._session.add_state_listener(self._on_state)
        self._session.add_outcome_listener(self._on_outcome)

    @property
    def session(self) -> RollSession:
        """The wrapped session."""
        return self._session

    @property
    def roll_duration_choices(self) -> Sequence[int]:
        """Durations offered by the roll length picker."""
        return self._settings.roll_duration_choices_ms or ROLL_DURATION_CHOICES_MS

    def get_state(self) -> dict:
        """Get the current session state."""
        return self._session.snapshot().to_dict()

    def refresh(self) -> None:
        """Re-emit the current state."""
        self.state_changed.emit(self.get_state())

    def _emit_event(self, event_type: EventType, data: dict) -> None:
        self.event_logged.emit(event_type.value, data)

    # =========================================================================
    # Session callbacks
    # =========================================================================

    def _announce_roll_start(self) -> None:
        """Log a pending ROLL_STARTED ahead of the roll's first signal."""
        if self._pending_start is not None:
            data, self._pending_start = self._pending_start, None
            self._emit_event(EventType.ROLL_STARTED, data)

    def _on_update(self, snapshot: SessionSnapshot) -> None:
        self._announce_roll_start()
        self.state_changed.emit(snapshot.to_dict())

    def _on_state(self, state: RollState) -> None:
        is_rolling = state == RollState.ROLLING
        if is_rolling:
            self._announce_roll_start()
            self.rolling_changed.emit(True)
            return

        self.rolling_changed.emit(False)
        if self._stopping:
            self._emit_event(EventType.ROLL_STOPPED, {"total": self._session.total})
        else:
            self._emit_event(EventType.ROLL_FINISHED, {"total": self._session.total})

    def _on_outcome(self, outcome: Outcome) -> None:
        logger.info(f"Outcome: {outcome.value}")
        self.outcome_reached.emit(outcome.value)
        self._emit_event(EventType.OUTCOME, {
            "outcome": outcome.value,
            "total": self._session.total,
            "dice_count": self._session.active_dice_count,
        })

    # =========================================================================
    # Dice actions
    # =========================================================================

    def increment(self, index: int) -> bool:
        """Add one to a die."""
        return self._session.increment_die(index)

    def decrement(self, index: int) -> bool:
        """Subtract one from a die."""
        return self._session.decrement_die(index)

    def set_visible_dice(self, count: int) -> bool:
        """Change the number of dice in play."""
        success = self._session.set_active_dice_count(count)
        if success:
            self._emit_event(EventType.DICE_COUNT_CHANGED, {"dice_count": count})
        return success

    def roll_all(self) -> bool:
        """Roll all dice in play."""
        return self._start_roll(self._session.start_roll_all, {
            "target": "all",
            "duration_ms": self._session.roll_duration_ms,
        })

    def roll_single(self, index: int) -> bool:
        """Roll one die."""
        return self._start_roll(lambda: self._session.start_roll_single(index), {
            "target": "single",
            "index": index,
            "duration_ms": self._session.roll_duration_ms,
        })

    def _start_roll(self, start: Callable[[], bool], data: dict) -> bool:
        """
        Start a roll and log ROLL_STARTED.

        The event is emitted from the session callbacks, before the roll's
        first rolling_changed or state_changed signal. A rejected roll
        fires no callbacks and logs nothing.
        """
        self._pending_start = data
        try:
            return start()
        finally:
            self._pending_start = None

    def stop(self) -> bool:
        """Stop the running roll."""
        self._stopping = True
        try:
            return self._session.stop_roll()
        finally:
            self._stopping = False

    # =========================================================================
    # Roll length
    # =========================================================================

    def set_roll_duration(self, duration_ms: int) -> bool:
        """Set the length of the next roll."""
        success = self._session.set_roll_duration(duration_ms)
        if success:
            self._emit_event(EventType.DURATION_CHANGED, {"duration_ms": duration_ms})
        return success

    def set_roll_length_choice(self, which: int) -> bool:
        """Set the roll length from a picker index."""
        choices = self.roll_duration_choices
        if not 0 <= which < len(choices):
            logger.debug(f"Ignoring roll length choice {which}")
            return False
        return self.set_roll_duration(choices[which])
