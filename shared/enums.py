"""
Enumerations used throughout the dice roller.
"""
from enum import Enum


class RollState(str, Enum):
    """Whether a roll animation is running."""
    IDLE = "IDLE"
    ROLLING = "ROLLING"


class RollTargetKind(str, Enum):
    """Which dice a roll randomizes."""
    ALL = "ALL"
    SINGLE = "SINGLE"


class Outcome(str, Enum):
    """Result of evaluating the sum after a completed roll."""
    NONE = "NONE"
    WIN = "WIN"
    LOSE = "LOSE"


class EventType(str, Enum):
    """Events reported to the roll log."""
    ROLL_STARTED = "ROLL_STARTED"
    ROLL_FINISHED = "ROLL_FINISHED"
    ROLL_STOPPED = "ROLL_STOPPED"
    OUTCOME = "OUTCOME"
    DICE_COUNT_CHANGED = "DICE_COUNT_CHANGED"
    DURATION_CHANGED = "DURATION_CHANGED"
