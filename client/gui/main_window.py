"""
Main application window.

Shows the dice, the sum and the roll log, and routes toolbar and die
gestures to the DiceController.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QToolBar
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup

from client.config import settings
from client.controller import DiceController
from client.gui.roll_length_dialog import RollLengthDialog
from client.gui.styles import MAIN_STYLESHEET, OUTCOME_COLORS
from client.gui.widgets import DieWidget, EventLog
from shared.constants import MAX_DICE
from shared.enums import Outcome


OUTCOME_MESSAGES = {
    Outcome.WIN.value: "You win!",
    Outcome.LOSE.value: "You lose!",
}

# Status bar message duration, like a short snackbar
OUTCOME_MESSAGE_MS = 2000


class MainWindow(QMainWindow):
    """
    Main application window.

    Coordinates between the dice controller and the widgets.
    """

    def __init__(self, controller: Optional[DiceController] = None):
        super().__init__()

        self.setWindowTitle("Dice Roller")
        self.setMinimumSize(settings.window_width, settings.window_height)
        self.setStyleSheet(MAIN_STYLESHEET)

        # Controller
        self._controller = controller or DiceController(self)

        # Set up UI
        self._setup_ui()
        self._setup_toolbar()
        self._connect_controller_signals()

        self._controller.refresh()
        self._on_rolling_changed(self._controller.session.is_rolling)
        self._event_log.add_system_message("Double-click a die to add one, drag across the dice to roll")

    def _setup_ui(self) -> None:
        """Set up the main UI."""
        central = QWidget()
        central.setObjectName("centralWidget")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        # Dice row
        dice_row = QHBoxLayout()
        dice_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._dice_widgets: list[DieWidget] = []
        for i in range(MAX_DICE):
            die_widget = DieWidget(i)
            die_widget.increment_requested.connect(self._controller.increment)
            die_widget.decrement_requested.connect(self._controller.decrement)
            die_widget.roll_requested.connect(self._controller.roll_single)
            die_widget.roll_all_requested.connect(self._controller.roll_all)
            dice_row.addWidget(die_widget)
            self._dice_widgets.append(die_widget)
        layout.addLayout(dice_row, 1)

        # Sum
        self._sum_label = QLabel("Sum: 0")
        self._sum_label.setObjectName("sumLabel")
        self._sum_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._sum_label)

        # Roll log
        self._event_log = EventLog()
        self._event_log.setMaximumHeight(140)
        layout.addWidget(self._event_log)

        self.statusBar()

    def _setup_toolbar(self) -> None:
        """Set up the toolbar actions."""
        toolbar = QToolBar("Dice")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        # Dice count
        count_group = QActionGroup(self)
        count_group.setExclusive(True)
        self._count_actions: dict[int, QAction] = {}
        for count, label in ((1, "One"), (2, "Two"), (3, "Three")):
            action = QAction(label, self)
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, n=count: self._controller.set_visible_dice(n))
            count_group.addAction(action)
            toolbar.addAction(action)
            self._count_actions[count] = action

        toolbar.addSeparator()

        self._roll_action = QAction("Roll", self)
        self._roll_action.triggered.connect(lambda: self._controller.roll_all())
        toolbar.addAction(self._roll_action)

        self._stop_action = QAction("Stop", self)
        self._stop_action.triggered.connect(lambda: self._controller.stop())
        toolbar.addAction(self._stop_action)

        self._roll_length_action = QAction("Roll Length", self)
        self._roll_length_action.triggered.connect(self._show_roll_length_dialog)
        toolbar.addAction(self._roll_length_action)

    def _connect_controller_signals(self) -> None:
        """Connect controller signals."""
        self._controller.state_changed.connect(self._on_state_changed)
        self._controller.rolling_changed.connect(self._on_rolling_changed)
        self._controller.outcome_reached.connect(self._on_outcome)
        self._controller.event_logged.connect(self._event_log.add_event)

    # =========================================================================
    # Controller signal handlers
    # =========================================================================

    def _on_state_changed(self, state: dict) -> None:
        """Update dice and sum to match the session."""
        active_count = state.get("active_dice_count", MAX_DICE)

        for die_data, die_widget in zip(state.get("dice", []), self._dice_widgets):
            die_widget.setVisible(die_data.get("active", False))
            if die_data.get("active"):
                die_widget.set_die(die_data.get("value", 1), die_data.get("image_key", ""))

        action = self._count_actions.get(active_count)
        if action and not action.isChecked():
            action.setChecked(True)

        self._sum_label.setText(f"Sum: {state.get('total', 0)}")

    def _on_rolling_changed(self, is_rolling: bool) -> None:
        """Swap Roll and Stop while a roll runs."""
        self._roll_action.setVisible(not is_rolling)
        self._stop_action.setVisible(is_rolling)
        for die_widget in self._dice_widgets:
            die_widget.set_rolling(is_rolling)

    def _on_outcome(self, outcome: str) -> None:
        """Show a short win/lose message."""
        message = OUTCOME_MESSAGES.get(outcome)
        if message:
            color = OUTCOME_COLORS[outcome].name()
            self.statusBar().setStyleSheet(f"QStatusBar {{ color: {color}; font-weight: bold; }}")
            self.statusBar().showMessage(message, OUTCOME_MESSAGE_MS)

    # =========================================================================
    # Dialogs
    # =========================================================================

    def _show_roll_length_dialog(self) -> None:
        """Let the user pick a roll length."""
        dialog = RollLengthDialog(
            self._controller.roll_duration_choices,
            self._controller.session.roll_duration_ms,
            self,
        )
        dialog.roll_length_selected.connect(self._controller.set_roll_length_choice)
        dialog.exec()

    def closeEvent(self, event) -> None:
        """Stop any running roll before closing."""
        self._controller.stop()
        super().closeEvent(event)
