"""
Tests for the Die model.

Run with: python3 tests/test_engine/test_die.py
"""

import random
import sys
import unittest
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from engine import Die


class DieValueTestCase(unittest.TestCase):
    """Setting and stepping a die's value."""

    def setUp(self):
        self.die = Die(3, random.Random(7))

    def test_set_value_accepts_every_face(self):
        for face in range(1, 7):
            self.assertTrue(self.die.set_value(face))
            self.assertEqual(self.die.value, face)
            self.assertEqual(self.die.image_key, f"dice_{face}")

    def test_set_value_ignores_out_of_range(self):
        for bad in (0, 7, -1, 100):
            self.assertFalse(self.die.set_value(bad))
            self.assertEqual(self.die.value, 3)
            self.assertEqual(self.die.image_key, "dice_3")

    def test_set_value_ignores_non_integers(self):
        self.assertFalse(self.die.set_value(True))
        self.assertFalse(self.die.set_value(2.0))
        self.assertFalse(self.die.set_value("4"))
        self.assertEqual(self.die.value, 3)

    def test_increment_caps_at_six(self):
        self.die.set_value(5)
        self.assertTrue(self.die.increment())
        self.assertEqual(self.die.value, 6)

        self.assertFalse(self.die.increment())
        self.assertEqual(self.die.value, 6)

    def test_decrement_caps_at_one(self):
        self.die.set_value(2)
        self.assertTrue(self.die.decrement())
        self.assertEqual(self.die.value, 1)

        self.assertFalse(self.die.decrement())
        self.assertEqual(self.die.value, 1)

    def test_out_of_range_initial_value_starts_at_one(self):
        die = Die(9)
        self.assertEqual(die.value, 1)
        self.assertEqual(die.image_key, "dice_1")


class DieRollTestCase(unittest.TestCase):
    """Random rolls."""

    def test_roll_stays_in_range(self):
        die = Die(1, random.Random(42))
        seen = set()
        for _ in range(300):
            value = die.roll_random()
            self.assertGreaterEqual(value, 1)
            self.assertLessEqual(value, 6)
            self.assertEqual(die.value, value)
            self.assertEqual(die.image_key, f"dice_{value}")
            seen.add(value)

        # 300 uniform draws cover every face
        self.assertEqual(seen, {1, 2, 3, 4, 5, 6})

    def test_roll_uses_given_random_source(self):
        first = Die(1, random.Random(1234))
        second = Die(1, random.Random(1234))
        rolls_first = [first.roll_random() for _ in range(20)]
        rolls_second = [second.roll_random() for _ in range(20)]
        self.assertEqual(rolls_first, rolls_second)


if __name__ == '__main__':
    unittest.main()
