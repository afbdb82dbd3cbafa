"""
Win/lose rules for a settled roll.
"""

from shared.constants import (
    TWO_DICE_WINNING_TOTALS, TWO_DICE_LOSING_TOTALS,
    THREE_DICE_WINNING_DIVISORS, THREE_DICE_LOSING_TOTALS
)
from shared.enums import Outcome


def is_win(active_dice_count: int, total: int) -> bool:
    """Check the winning conditions for the given dice count."""
    if active_dice_count == 2:
        return total in TWO_DICE_WINNING_TOTALS
    if active_dice_count == 3:
        return any(total % divisor == 0 for divisor in THREE_DICE_WINNING_DIVISORS)
    return False


def is_loss(active_dice_count: int, total: int) -> bool:
    """Check the losing conditions for the given dice count."""
    if active_dice_count == 2:
        return total in TWO_DICE_LOSING_TOTALS
    if active_dice_count == 3:
        return total in THREE_DICE_LOSING_TOTALS
    return False


def evaluate_outcome(active_dice_count: int, total: int) -> Outcome:
    """
    Evaluate a settled roll.

    Win is checked first and takes priority over lose. A single die
    never wins or loses.

    Returns:
        Outcome.WIN, Outcome.LOSE, or Outcome.NONE
    """
    if is_win(active_dice_count, total):
        return Outcome.WIN
    if is_loss(active_dice_count, total):
        return Outcome.LOSE
    return Outcome.NONE
