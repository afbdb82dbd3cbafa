"""
Tests for countdowns and the manual scheduler.

Run with: python3 tests/test_engine/test_timer.py
"""

import sys
import unittest
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from engine import Countdown, ManualScheduler


class CountdownRecorder:
    """Collects countdown callbacks."""

    def __init__(self):
        self.remaining: list[int] = []
        self.finished = 0

    def on_tick(self, remaining_ms: int) -> None:
        self.remaining.append(remaining_ms)

    def on_finish(self) -> None:
        self.finished += 1


class ManualSchedulerTestCase(unittest.TestCase):
    """Countdown timing on the virtual clock."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.recorder = CountdownRecorder()

    def start(self, duration_ms: int, interval_ms: int = 100):
        return self.scheduler.start_countdown(
            duration_ms, interval_ms, self.recorder.on_tick, self.recorder.on_finish
        )

    def test_first_tick_fires_on_start(self):
        handle = self.start(2000)
        self.assertTrue(handle.active)
        self.assertEqual(self.recorder.remaining, [2000])
        self.assertEqual(self.scheduler.active_count, 1)

    def test_ticks_then_finish(self):
        self.start(2000)

        self.scheduler.advance(1900)
        self.assertEqual(len(self.recorder.remaining), 20)
        self.assertEqual(self.recorder.remaining[-1], 100)
        self.assertEqual(self.recorder.finished, 0)

        self.scheduler.advance(100)
        self.assertEqual(len(self.recorder.remaining), 20)
        self.assertEqual(self.recorder.finished, 1)
        self.assertEqual(self.scheduler.active_count, 0)

        self.scheduler.advance(1000)
        self.assertEqual(self.recorder.finished, 1)

    def test_duration_not_a_multiple_of_interval(self):
        self.start(250)

        self.scheduler.advance(249)
        self.assertEqual(self.recorder.remaining, [250, 150, 50])
        self.assertEqual(self.recorder.finished, 0)

        self.scheduler.advance(1)
        self.assertEqual(self.recorder.finished, 1)

    def test_cancel_stops_all_callbacks(self):
        handle = self.start(2000)
        self.scheduler.advance(500)
        self.assertEqual(len(self.recorder.remaining), 6)

        handle.cancel()
        self.assertFalse(handle.active)

        self.scheduler.advance(5000)
        self.assertEqual(len(self.recorder.remaining), 6)
        self.assertEqual(self.recorder.finished, 0)
        self.assertEqual(self.scheduler.active_count, 0)

    def test_run_until_idle(self):
        self.start(300)
        self.scheduler.run_until_idle()
        self.assertEqual(self.recorder.finished, 1)
        self.assertEqual(self.scheduler.now_ms, 300)

    def test_finish_callback_can_start_another_countdown(self):
        second = CountdownRecorder()

        def on_finish():
            self.recorder.on_finish()
            self.scheduler.start_countdown(300, 100, second.on_tick, second.on_finish)

        self.scheduler.start_countdown(200, 100, self.recorder.on_tick, on_finish)
        self.scheduler.run_until_idle()

        self.assertEqual(self.recorder.finished, 1)
        self.assertEqual(second.remaining, [300, 200, 100])
        self.assertEqual(second.finished, 1)
        self.assertEqual(self.scheduler.now_ms, 500)

    def test_independent_countdowns_interleave(self):
        other = CountdownRecorder()
        self.start(200)
        self.scheduler.advance(50)
        self.scheduler.start_countdown(100, 100, other.on_tick, other.on_finish)

        self.scheduler.advance(100)
        self.assertEqual(other.finished, 1)
        self.assertEqual(self.recorder.finished, 0)

        self.scheduler.advance(50)
        self.assertEqual(self.recorder.finished, 1)

    def test_advance_rejects_negative_time(self):
        with self.assertRaises(ValueError):
            self.scheduler.advance(-1)


class CountdownValidationTestCase(unittest.TestCase):
    """Construction rules."""

    def test_rejects_non_positive_duration(self):
        with self.assertRaises(ValueError):
            Countdown(0, 100, lambda remaining: None, lambda: None)

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            Countdown(1000, 0, lambda remaining: None, lambda: None)


if __name__ == '__main__':
    unittest.main()
