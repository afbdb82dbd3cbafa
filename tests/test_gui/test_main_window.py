"""
GUI tests for the dice roller window and widgets.

Runs headless on the offscreen Qt platform, with the controller on a
ManualScheduler so rolls finish instantly.

Run from project root: python -m tests.test_gui.test_main_window
"""

import os
import sys
import unittest
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from client.config import ClientSettings
from client.controller import DiceController
from client.gui import MainWindow
from client.gui.roll_length_dialog import RollLengthDialog, format_duration
from client.gui.widgets import DieWidget
from engine import ManualScheduler


class FixedRandom:
    """Random source that always lands on the same face."""

    def __init__(self, face: int):
        self._face = face

    def randint(self, a: int, b: int) -> int:
        return self._face


class GuiTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])


class MainWindowTests(GuiTestCase):

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.controller = DiceController(
            scheduler=self.scheduler,
            client_settings=ClientSettings(start_dice_count=2),
            rng=FixedRandom(6),
        )
        self.window = MainWindow(self.controller)

    def tearDown(self):
        self.window.deleteLater()

    def test_initial_state(self):
        self.assertEqual(self.window._sum_label.text(), "Sum: 3")
        self.assertFalse(self.window._dice_widgets[0].isHidden())
        self.assertFalse(self.window._dice_widgets[1].isHidden())
        self.assertTrue(self.window._dice_widgets[2].isHidden())
        self.assertTrue(self.window._count_actions[2].isChecked())
        self.assertTrue(self.window._roll_action.isVisible())
        self.assertFalse(self.window._stop_action.isVisible())

    def test_dice_count_actions(self):
        self.window._count_actions[3].trigger()
        self.assertFalse(self.window._dice_widgets[2].isHidden())
        self.assertEqual(self.window._sum_label.text(), "Sum: 6")

        self.window._count_actions[1].trigger()
        self.assertTrue(self.window._dice_widgets[1].isHidden())
        self.assertEqual(self.window._sum_label.text(), "Sum: 1")

    def test_roll_swaps_actions_and_reports_outcome(self):
        self.window._roll_action.trigger()
        self.assertFalse(self.window._roll_action.isVisible())
        self.assertTrue(self.window._stop_action.isVisible())

        self.scheduler.run_until_idle()
        self.assertTrue(self.window._roll_action.isVisible())
        self.assertFalse(self.window._stop_action.isVisible())
        self.assertEqual(self.window._sum_label.text(), "Sum: 12")
        self.assertEqual(self.window.statusBar().currentMessage(), "You lose!")

    def test_stop_action(self):
        self.window._roll_action.trigger()
        self.window._stop_action.trigger()

        self.assertFalse(self.controller.session.is_rolling)
        self.assertTrue(self.window._roll_action.isVisible())
        self.assertEqual(self.window.statusBar().currentMessage(), "")

    def test_die_gesture_signals_reach_controller(self):
        self.window._dice_widgets[1].increment_requested.emit(1)
        self.assertEqual(self.controller.session.values[1], 3)
        self.assertEqual(self.window._sum_label.text(), "Sum: 4")
        self.assertEqual(self.window._dice_widgets[1].value, 3)


class DieWidgetTests(GuiTestCase):

    def setUp(self):
        self.widget = DieWidget(1)
        self.requests: list[tuple[str, int]] = []
        self.widget.increment_requested.connect(lambda i: self.requests.append(("add", i)))
        self.widget.decrement_requested.connect(lambda i: self.requests.append(("subtract", i)))
        self.widget.roll_requested.connect(lambda i: self.requests.append(("roll", i)))

    def tearDown(self):
        self.widget.deleteLater()

    def test_context_menu(self):
        menu = self.widget.build_context_menu()
        actions = {action.text(): action for action in menu.actions() if action.text()}

        self.assertIn("Die 2 options", actions)
        self.assertFalse(actions["Die 2 options"].isEnabled())

        actions["Add one"].trigger()
        actions["Subtract one"].trigger()
        actions["Roll"].trigger()
        self.assertEqual(self.requests, [("add", 1), ("subtract", 1), ("roll", 1)])

    def test_set_die_updates_description(self):
        self.widget.set_die(5, "dice_5")
        self.assertEqual(self.widget.value, 5)
        self.assertEqual(self.widget.image_key, "dice_5")
        self.assertEqual(self.widget.accessibleName(), "5")


class RollLengthDialogTests(GuiTestCase):

    def test_format_duration(self):
        self.assertEqual(format_duration(1000), "1 second")
        self.assertEqual(format_duration(2000), "2 seconds")
        self.assertEqual(format_duration(1500), "1.5 seconds")

    def test_accept_emits_choice(self):
        dialog = RollLengthDialog([1000, 2000, 3000], current_ms=2000)
        picked: list[int] = []
        dialog.roll_length_selected.connect(picked.append)

        self.assertEqual(dialog.selected_index(), 1)
        dialog._list.setCurrentRow(2)
        dialog.accept()
        self.assertEqual(picked, [2])
        dialog.deleteLater()


if __name__ == '__main__':
    unittest.main()
