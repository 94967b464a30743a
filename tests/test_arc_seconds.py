"""
Tests for the ArcSeconds unit.
"""

import unittest

from anglekit.unit import ArcMinutes, ArcSeconds, Degrees, Revolutions


class TestArcSeconds(unittest.TestCase):
    """Test arc second conversion and normalization."""

    def test_from_siblings(self):
        """Test the literal factors from degrees and arc minutes."""
        self.assertEqual(ArcSeconds(Degrees(1)).raw_value, 3600.0)
        self.assertEqual(ArcSeconds(ArcMinutes(1)).raw_value, 60.0)
        self.assertEqual(ArcSeconds(Revolutions(0.5)), ArcSeconds(648000))

    def test_normalization(self):
        """Test wrapping into [0, 1296000)."""
        self.assertEqual(ArcSeconds(1296000).normalized().raw_value, 0.0)
        self.assertEqual(ArcSeconds(-1).normalized().raw_value, 1295999.0)

    def test_equality_with_degrees(self):
        """Test that 3600 arc seconds make a degree."""
        self.assertEqual(ArcSeconds(3600), Degrees(1))
        self.assertTrue(ArcSeconds(3600) >= Degrees(1))

    def test_str(self):
        """Test the arc second symbol."""
        self.assertEqual(str(ArcSeconds(1)), "1.0 ″")


if __name__ == '__main__':
    unittest.main()
