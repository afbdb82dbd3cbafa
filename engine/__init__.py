"""
Dice engine package.
"""
from .die import Die
from .rules import evaluate_outcome, is_win, is_loss
from .timer import TimerHandle, Countdown, Scheduler, ManualScheduler
from .session import RollSession, RollTarget, SessionSnapshot

__all__ = [
    "Die",
    "evaluate_outcome",
    "is_win",
    "is_loss",
    "TimerHandle",
    "Countdown",
    "Scheduler",
    "ManualScheduler",
    "RollSession",
    "RollTarget",
    "SessionSnapshot",
]
