"""
GUI widgets for the dice roller.
"""

from .dice_widget import DieWidget
from .event_log import EventLog

__all__ = [
    "DieWidget",
    "EventLog",
]
