"""
Event log widget.

Shows roll events and outcomes in a scrolling log.
"""

from datetime import datetime
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QTextEdit
from PyQt6.QtGui import QFont, QTextCursor

from shared.enums import EventType, Outcome


class EventLog(QWidget):
    """Scrolling log of roll events."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # Title
        title = QLabel("Roll Log")
        title.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        title.setStyleSheet("color: white;")
        layout.addWidget(title)

        # Log text area
        self._log = QTextEdit()
        self._log.setReadOnly(True)
        self._log.setFont(QFont("Consolas", 9))
        self._log.setStyleSheet("""
            QTextEdit {
                background-color: #1A252F;
                color: #ECF0F1;
                border: 1px solid #34495E;
                border-radius: 4px;
            }
        """)
        layout.addWidget(self._log)

    def add_message(self, text: str, color: str = "#ECF0F1") -> None:
        """Add a message to the log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        html = f'<span style="color: #7F8C8D;">[{timestamp}]</span> '
        html += f'<span style="color: {color};">{text}</span><br>'

        self._log.moveCursor(QTextCursor.MoveOperation.End)
        self._log.insertHtml(html)
        self._log.moveCursor(QTextCursor.MoveOperation.End)

    def add_system_message(self, text: str) -> None:
        """Add a system message."""
        self.add_message(text, "#3498DB")

    def add_event(self, event_type: str, data: dict) -> None:
        """Add an event reported by the controller."""
        text = ""
        color = "#ECF0F1"

        if event_type == EventType.ROLL_STARTED.value:
            seconds = data.get("duration_ms", 0) / 1000
            if data.get("target") == "single":
                text = f"🎲 Rolling die {data.get('index', 0) + 1} for {seconds:g}s"
            else:
                text = f"🎲 Rolling all dice for {seconds:g}s"

        elif event_type == EventType.ROLL_FINISHED.value:
            text = f"Settled on {data.get('total', 0)}"

        elif event_type == EventType.ROLL_STOPPED.value:
            text = f"⏹ Roll stopped at {data.get('total', 0)}"
            color = "#95A5A6"

        elif event_type == EventType.OUTCOME.value:
            total = data.get("total", 0)
            if data.get("outcome") == Outcome.WIN.value:
                text = f"🏆 You win with {total}!"
                color = "#27AE60"
            else:
                text = f"💀 You lose with {total}"
                color = "#E74C3C"

        elif event_type == EventType.DICE_COUNT_CHANGED.value:
            count = data.get("dice_count", 0)
            text = f"Playing with {count} {'die' if count == 1 else 'dice'}"
            color = "#3498DB"

        elif event_type == EventType.DURATION_CHANGED.value:
            text = f"Roll length set to {data.get('duration_ms', 0) / 1000:g}s"
            color = "#3498DB"

        else:
            # Unknown event type
            text = f"{event_type}: {data}"
            color = "#7F8C8D"

        if text:
            self.add_message(text, color)

    def clear(self) -> None:
        """Clear the log."""
        self._log.clear()
