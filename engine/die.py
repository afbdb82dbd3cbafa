"""
Single six-sided die.
"""
import random
from typing import Optional

from shared.constants import MIN_FACE, MAX_FACE, IMAGE_KEYS


class Die:
    """
    A die holding a value in [1, 6].

    Out-of-range updates are ignored rather than clamped or wrapped, so
    incrementing a six or decrementing a one leaves the die unchanged.
    """

    def __init__(self, value: int = MIN_FACE, rng: Optional[random.Random] = None):
        """
        Initialize a die.

        Args:
            value: Starting face. Out-of-range values leave the die at 1.
            rng: Random source used by roll_random (shared with the session)
        """
        self._value = MIN_FACE
        self._image_key = IMAGE_KEYS[MIN_FACE]
        self._random = rng or random.Random()
        self.set_value(value)

    @property
    def value(self) -> int:
        """Current face."""
        return self._value

    @property
    def image_key(self) -> str:
        """Image resource key for the current face."""
        return self._image_key

    def set_value(self, value: int) -> bool:
        """
        Set the face if it is in range.

        Returns:
            True if the value was accepted
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if not MIN_FACE <= value <= MAX_FACE:
            return False

        self._value = value
        self._image_key = IMAGE_KEYS[value]
        return True

    def increment(self) -> bool:
        """Add one to the face (no-op at 6)."""
        return self.set_value(self._value + 1)

    def decrement(self) -> bool:
        """Subtract one from the face (no-op at 1)."""
        return self.set_value(self._value - 1)

    def roll_random(self) -> int:
        """Assign a uniformly random face and return it."""
        self.set_value(self._random.randint(MIN_FACE, MAX_FACE))
        return self._value

    def __repr__(self) -> str:
        return f"Die(value={self._value})"
