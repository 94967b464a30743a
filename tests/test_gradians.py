"""
Tests for the Gradians unit.
"""

import unittest
from math import pi

from anglekit.unit import Degrees, Gradians, Radians


class TestGradians(unittest.TestCase):
    """Test gradian conversion, normalization and arithmetic."""

    def test_from_siblings(self):
        """Test conversion from degrees and radians."""
        self.assertAlmostEqual(Gradians(Degrees(90)).raw_value, 100.0, places=10)
        self.assertEqual(Gradians(Radians(pi)), Gradians(200))

    def test_normalization(self):
        """Test wrapping into [0, 400)."""
        self.assertEqual(Gradians(1200).normalized().raw_value, 0.0)
        self.assertEqual(Gradians(-10).normalized().raw_value, 390.0)

    def test_circular_equivalence(self):
        """Test that 10 and 410 gradians point the same way."""
        self.assertTrue(Gradians(10).is_equivalent(Gradians(410)))
        self.assertTrue(Gradians(10).is_equivalent(Degrees(369)))

    def test_mixed_arithmetic(self):
        """Test adding degrees to gradians."""
        total = Gradians(100) + Degrees(90)
        self.assertIsInstance(total, Gradians)
        self.assertEqual(total, Gradians(200))
        self.assertEqual(Gradians(350) + Gradians(100), Gradians(50))

    def test_str(self):
        """Test the gradian symbol."""
        self.assertEqual(str(Gradians(100)), "100.0 gon")


if __name__ == '__main__':
    unittest.main()
