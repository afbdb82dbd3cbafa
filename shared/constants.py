"""
Game constants for the dice roller.
All durations are in milliseconds.
"""

# Dice
MAX_DICE = 3
MIN_FACE = 1
MAX_FACE = 6
DICE_COUNT_CHOICES = (1, 2, 3)

# Image keys, one per face
IMAGE_KEYS = {face: f"dice_{face}" for face in range(MIN_FACE, MAX_FACE + 1)}

# Rolling
ROLL_TICK_MS = 100
DEFAULT_ROLL_DURATION_MS = 2000
ROLL_DURATION_CHOICES_MS = (1000, 2000, 3000)

# Win/lose tables
TWO_DICE_WINNING_TOTALS = frozenset({7, 11})
TWO_DICE_LOSING_TOTALS = frozenset({2, 12})
THREE_DICE_WINNING_DIVISORS = (7, 11)
THREE_DICE_LOSING_TOTALS = frozenset({3, 18})
