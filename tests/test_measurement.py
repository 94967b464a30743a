"""
Tests for conversion to and from host measurement values.
"""

import unittest
from math import nan

from anglekit import AngleType, Measurement, MeasurementUnit, UnknownAngleTypeError, from_measurement, to_measurement
from anglekit.unit import ArcMinutes, ArcSeconds, Degrees, Radians, Revolutions


class TestMeasurementUnit(unittest.TestCase):
    """Test the tag mapping."""

    def test_bijection(self):
        """Test that tags and angle types map one-to-one."""
        for member in AngleType:
            tag = MeasurementUnit.for_angle_type(member)
            self.assertIs(tag.angle_type, member)
        self.assertEqual(len({tag.angle_type for tag in MeasurementUnit}), 6)

    def test_tag_values(self):
        """Test the host spelling of the tags."""
        self.assertEqual(MeasurementUnit.ARC_MINUTES.value, "arcMinutes")
        self.assertEqual(MeasurementUnit.ARC_SECONDS.value, "arcSeconds")


class TestMeasurement(unittest.TestCase):
    """Test converting angles to measurements and back."""

    def test_to_measurement(self):
        """Test that the unit and raw value are kept."""
        measurement = to_measurement(ArcMinutes(90))
        self.assertEqual(measurement, Measurement(90.0, MeasurementUnit.ARC_MINUTES))
        value, unit = Measurement.from_angle(Degrees(450))
        self.assertEqual(value, 450.0)
        self.assertIs(unit, MeasurementUnit.DEGREES)

    def test_from_measurement(self):
        """Test building angles from measurements and plain pairs."""
        angle = from_measurement(Measurement(1.5, MeasurementUnit.RADIANS))
        self.assertIsInstance(angle, Radians)
        self.assertEqual(angle.raw_value, 1.5)

        angle = from_measurement((30, "arcSeconds"))
        self.assertIsInstance(angle, ArcSeconds)
        self.assertEqual(angle.raw_value, 30.0)

        self.assertIsInstance(Measurement(1.0, "revolutions").to_angle(), Revolutions)

    def test_round_trip_keeps_unit(self):
        """Test that each unit comes back as itself."""
        for member in AngleType:
            angle = member.init_angle(12.5)
            back = from_measurement(to_measurement(angle))
            self.assertIs(type(back), type(angle))
            self.assertEqual(back.raw_value, 12.5)

    def test_nan_is_preserved(self):
        """Test that an invalid angle stays invalid."""
        self.assertTrue(from_measurement(to_measurement(Degrees(nan))).is_nan)

    def test_unknown_tag(self):
        """Test that unknown tags raise a library error."""
        with self.assertRaises(UnknownAngleTypeError):
            from_measurement((1.0, "steradians"))


if __name__ == '__main__':
    unittest.main()
