"""
Client configuration settings.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from shared.constants import (
    MAX_DICE, ROLL_TICK_MS, DEFAULT_ROLL_DURATION_MS, ROLL_DURATION_CHOICES_MS
)

load_dotenv()


@dataclass
class ClientSettings:
    """Client configuration."""

    # UI settings
    window_width: int = 520
    window_height: int = 420

    # Rolling
    roll_duration_ms: int = DEFAULT_ROLL_DURATION_MS
    tick_interval_ms: int = ROLL_TICK_MS
    roll_duration_choices_ms: tuple[int, ...] = field(default=ROLL_DURATION_CHOICES_MS)

    # Session
    start_dice_count: int = MAX_DICE
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.roll_duration_ms <= 0:
            raise ValueError("Roll duration must be positive")
        if self.tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive")
        if not self.roll_duration_choices_ms or min(self.roll_duration_choices_ms) <= 0:
            raise ValueError("Roll duration choices must be positive")


def _parse_choices(raw: Optional[str]) -> tuple[int, ...]:
    """Parse a comma separated list of durations."""
    if not raw:
        return ROLL_DURATION_CHOICES_MS
    return tuple(int(part) for part in raw.split(",") if part.strip())


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def load_settings() -> ClientSettings:
    """Load settings from environment variables."""
    return ClientSettings(
        window_width=int(os.getenv("DICE_WINDOW_WIDTH", "520")),
        window_height=int(os.getenv("DICE_WINDOW_HEIGHT", "420")),
        roll_duration_ms=int(os.getenv("DICE_ROLL_DURATION_MS", str(DEFAULT_ROLL_DURATION_MS))),
        tick_interval_ms=int(os.getenv("DICE_TICK_INTERVAL_MS", str(ROLL_TICK_MS))),
        roll_duration_choices_ms=_parse_choices(os.getenv("DICE_ROLL_CHOICES_MS")),
        start_dice_count=int(os.getenv("DICE_START_COUNT", str(MAX_DICE))),
        seed=_parse_seed(os.getenv("DICE_SEED")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
