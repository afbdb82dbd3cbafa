"""
Roll length picker dialog.
"""

from typing import Optional, Sequence
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QListWidget, QListWidgetItem, QDialogButtonBox
)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont

from client.gui.styles import MAIN_STYLESHEET


def format_duration(duration_ms: int) -> str:
    """Format a duration for the picker, e.g. "2 seconds"."""
    seconds = duration_ms / 1000
    unit = "second" if seconds == 1 else "seconds"
    return f"{seconds:g} {unit}"


class RollLengthDialog(QDialog):
    """
    Dialog for picking how long a roll animation runs.

    Signals:
        roll_length_selected: A length was picked (choice index)
    """

    roll_length_selected = pyqtSignal(int)

    def __init__(self, choices_ms: Sequence[int], current_ms: Optional[int] = None, parent=None):
        super().__init__(parent)

        self.setWindowTitle("Roll Length")
        self.setMinimumWidth(260)
        self.setStyleSheet(MAIN_STYLESHEET)

        self._choices = list(choices_ms)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        title = QLabel("Pick a roll length")
        title.setFont(QFont("Arial", 14, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._list = QListWidget()
        for duration_ms in self._choices:
            self._list.addItem(QListWidgetItem(format_duration(duration_ms)))
        if current_ms in self._choices:
            self._list.setCurrentRow(self._choices.index(current_ms))
        self._list.itemActivated.connect(lambda _item: self.accept())
        layout.addWidget(self._list)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def selected_index(self) -> int:
        """Index of the highlighted choice, -1 if none."""
        return self._list.currentRow()

    def accept(self) -> None:
        which = self.selected_index()
        if which >= 0:
            self.roll_length_selected.emit(which)
        super().accept()
