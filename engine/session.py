"""
Roll session - owns the dice, the active dice count and the roll animation.

All mutation goes through RollSession. Listeners are notified
synchronously after every change and every animation tick.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from shared.constants import (
    MAX_DICE, DICE_COUNT_CHOICES, ROLL_TICK_MS, DEFAULT_ROLL_DURATION_MS
)
from shared.enums import RollState, RollTargetKind, Outcome

from .die import Die
from .rules import evaluate_outcome
from .timer import Scheduler, ManualScheduler, TimerHandle


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollTarget:
    """Which dice a roll randomizes."""
    kind: RollTargetKind
    index: Optional[int] = None

    @classmethod
    def all(cls) -> "RollTarget":
        return cls(RollTargetKind.ALL)

    @classmethod
    def single(cls, index: int) -> "RollTarget":
        return cls(RollTargetKind.SINGLE, index)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "index": self.index}

    def __str__(self) -> str:
        if self.kind == RollTargetKind.SINGLE:
            return f"die {self.index + 1}"
        return "all dice"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session, sent to update listeners."""
    active_dice_count: int
    values: tuple[int, ...]
    image_keys: tuple[str, ...]
    total: int
    state: RollState
    target: Optional[RollTarget] = None

    @property
    def active_values(self) -> tuple[int, ...]:
        """Values of the dice that count toward the total."""
        return self.values[:self.active_dice_count]

    @property
    def is_rolling(self) -> bool:
        return self.state == RollState.ROLLING

    def to_dict(self) -> dict:
        return {
            "active_dice_count": self.active_dice_count,
            "dice": [
                {"index": i, "value": value, "image_key": key, "active": i < self.active_dice_count}
                for i, (value, key) in enumerate(zip(self.values, self.image_keys))
            ],
            "total": self.total,
            "state": self.state.value,
            "target": self.target.to_dict() if self.target else None,
        }


UpdateListener = Callable[[SessionSnapshot], None]
OutcomeListener = Callable[[Outcome], None]
StateListener = Callable[[RollState], None]


class RollSession:
    """
    The dice roller state machine.

    Idle --start_roll--> Rolling --(tick)*--> Rolling --(finish)--> Idle
    Only a natural finish evaluates win/lose. Stopping a roll, or starting
    a new one while rolling, cancels the running countdown silently.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        roll_duration_ms: int = DEFAULT_ROLL_DURATION_MS,
        tick_interval_ms: int = ROLL_TICK_MS,
        active_dice_count: int = MAX_DICE,
    ):
        """
        Initialize a session.

        Args:
            scheduler: Countdown scheduler (a ManualScheduler if omitted)
            rng: Random source shared by all dice
            seed: Seed for a new random source when rng is omitted
            roll_duration_ms: Length of a roll animation
            tick_interval_ms: Time between animation ticks
            active_dice_count: Number of dice initially in play
        """
        if roll_duration_ms <= 0:
            raise ValueError("Roll duration must be positive")
        if tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive")
        if active_dice_count not in DICE_COUNT_CHOICES:
            raise ValueError(f"Dice count must be one of {DICE_COUNT_CHOICES}")

        self._scheduler = scheduler or ManualScheduler()
        self._random = rng or random.Random(seed)
        self._dice = tuple(Die(i + 1, self._random) for i in range(MAX_DICE))

        self._active_dice_count = active_dice_count
        self._roll_duration_ms = roll_duration_ms
        self._tick_interval_ms = tick_interval_ms

        # Roll state
        self._state = RollState.IDLE
        self._target: Optional[RollTarget] = None
        self._timer: Optional[TimerHandle] = None
        self._roll_id = 0

        self._total = 0
        self._recalculate_total()

        # Listeners
        self._update_listeners: list[UpdateListener] = []
        self._outcome_listeners: list[OutcomeListener] = []
        self._state_listeners: list[StateListener] = []

    # =========== Properties ===========

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def state(self) -> RollState:
        return self._state

    @property
    def is_rolling(self) -> bool:
        return self._state == RollState.ROLLING

    @property
    def roll_target(self) -> Optional[RollTarget]:
        """Target of the running roll, None when idle."""
        return self._target

    @property
    def active_dice_count(self) -> int:
        return self._active_dice_count

    @property
    def values(self) -> tuple[int, ...]:
        """Values of every die, active or not."""
        return tuple(die.value for die in self._dice)

    @property
    def total(self) -> int:
        """Sum of the active dice."""
        return self._total

    @property
    def roll_duration_ms(self) -> int:
        return self._roll_duration_ms

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    def snapshot(self) -> SessionSnapshot:
        """Get the current state as a snapshot."""
        return SessionSnapshot(
            active_dice_count=self._active_dice_count,
            values=self.values,
            image_keys=tuple(die.image_key for die in self._dice),
            total=self._total,
            state=self._state,
            target=self._target,
        )

    # =========== Listeners ===========

    def add_update_listener(self, listener: UpdateListener) -> None:
        self._update_listeners.append(listener)

    def remove_update_listener(self, listener: UpdateListener) -> None:
        if listener in self._update_listeners:
            self._update_listeners.remove(listener)

    def add_outcome_listener(self, listener: OutcomeListener) -> None:
        self._outcome_listeners.append(listener)

    def remove_outcome_listener(self, listener: OutcomeListener) -> None:
        if listener in self._outcome_listeners:
            self._outcome_listeners.remove(listener)

    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def remove_state_listener(self, listener: StateListener) -> None:
        if listener in self._state_listeners:
            self._state_listeners.remove(listener)

    def _notify_update(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._update_listeners):
            listener(snapshot)

    def _notify_outcome(self, outcome: Outcome) -> None:
        for listener in list(self._outcome_listeners):
            listener(outcome)

    def _notify_state(self) -> None:
        for listener in list(self._state_listeners):
            listener(self._state)

    # =========== Direct manipulation ===========

    def _is_active_index(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < self._active_dice_count

    def _recalculate_total(self) -> None:
        self._total = sum(die.value for die in self._dice[:self._active_dice_count])

    def set_active_dice_count(self, count: int) -> bool:
        """
        Change how many dice are in play.

        Dice that drop out keep their values and count again once they
        are brought back.
        """
        if isinstance(count, bool) or count not in DICE_COUNT_CHOICES:
            logger.debug(f"Ignoring dice count {count!r}")
            return False

        self._active_dice_count = count
        self._recalculate_total()
        self._notify_update()
        return True

    def increment_die(self, index: int) -> bool:
        """Add one to an active die (capped at 6)."""
        return self._change_die(index, Die.increment)

    def decrement_die(self, index: int) -> bool:
        """Subtract one from an active die (capped at 1)."""
        return self._change_die(index, Die.decrement)

    def set_die_value(self, index: int, value: int) -> bool:
        """Set an active die to a face; out-of-range faces are ignored."""
        return self._change_die(index, lambda die: die.set_value(value))

    def _change_die(self, index: int, change: Callable[[Die], bool]) -> bool:
        """
        Apply a change to an active die.

        Returns:
            False if the index is not an active die, True otherwise (even
            when the die ignored the change)
        """
        if not self._is_active_index(index):
            logger.debug(f"Ignoring change to inactive die {index!r}")
            return False

        change(self._dice[index])
        self._recalculate_total()
        self._notify_update()
        return True

    # =========== Rolling ===========

    def set_roll_duration(self, duration_ms: int) -> bool:
        """Set the length of the next roll. A running roll keeps its length."""
        if isinstance(duration_ms, bool) or not isinstance(duration_ms, int) or duration_ms <= 0:
            logger.debug(f"Ignoring roll duration {duration_ms!r}")
            return False

        self._roll_duration_ms = duration_ms
        logger.info(f"Roll duration set to {duration_ms} ms")
        return True

    def start_roll_all(self) -> bool:
        """Roll every active die."""
        return self.start_roll(RollTarget.all())

    def start_roll_single(self, index: int) -> bool:
        """Roll one active die."""
        return self.start_roll(RollTarget.single(index))

    def start_roll(self, target: RollTarget) -> bool:
        """
        Start a roll, cancelling any roll already running.

        A single-die target outside the active dice is ignored and leaves
        a running roll untouched.
        """
        if target.kind == RollTargetKind.SINGLE and not self._is_active_index(target.index):
            logger.debug(f"Ignoring roll of inactive die {target.index!r}")
            return False

        self._cancel_timer()
        self._roll_id += 1
        roll_id = self._roll_id

        was_rolling = self.is_rolling
        self._state = RollState.ROLLING
        self._target = target
        if not was_rolling:
            self._notify_state()

        logger.info(f"Rolling {target} for {self._roll_duration_ms} ms")

        handle = self._scheduler.start_countdown(
            self._roll_duration_ms,
            self._tick_interval_ms,
            lambda remaining_ms: self._on_tick(roll_id, remaining_ms),
            lambda: self._on_finish(roll_id),
        )

        if roll_id == self._roll_id:
            self._timer = handle
        else:
            # A listener stopped or replaced this roll during the first tick
            handle.cancel()
        return True

    def stop_roll(self) -> bool:
        """Stop a running roll without evaluating the outcome."""
        if not self.is_rolling:
            return False

        self._cancel_timer()
        self._roll_id += 1
        self._state = RollState.IDLE
        self._target = None

        logger.info("Roll stopped")
        self._notify_state()
        return True

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_tick(self, roll_id: int, remaining_ms: int) -> None:
        if roll_id != self._roll_id or self._target is None:
            return

        if self._target.kind == RollTargetKind.ALL:
            for die in self._dice[:self._active_dice_count]:
                die.roll_random()
        else:
            self._dice[self._target.index].roll_random()

        self._recalculate_total()
        logger.debug(f"Tick ({remaining_ms} ms left): {self.values}")
        self._notify_update()

    def _on_finish(self, roll_id: int) -> None:
        if roll_id != self._roll_id:
            return

        self._timer = None
        self._state = RollState.IDLE
        self._target = None
        self._notify_state()
        # A state listener may have started a new roll
        if roll_id != self._roll_id:
            return

        self._recalculate_total()
        self._notify_update()
        if roll_id != self._roll_id:
            return

        outcome = self.evaluate_outcome()
        logger.info(f"Roll finished: total {self._total} with {self._active_dice_count} dice ({outcome.value})")
        if outcome != Outcome.NONE:
            self._notify_outcome(outcome)

    def evaluate_outcome(self) -> Outcome:
        """Apply the win/lose rules to the current dice."""
        return evaluate_outcome(self._active_dice_count, self._total)
