"""
GUI windows and widgets for the dice roller.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
