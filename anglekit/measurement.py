"""Interop with host "measurement" value objects.

Platforms that model physical quantities as a (value, unit) pair, such as a
measurement of an angle in one of a fixed set of units, exchange angles with
this library through the Measurement named tuple. The six MeasurementUnit tags
map one-to-one onto the six angle units, so a conversion in either direction
never loses the unit.

Example:
    >>> m = Measurement.from_angle(Degrees(90))
    >>> m
    Measurement(value=90.0, unit=<MeasurementUnit.DEGREES: 'degrees'>)
    >>> value, tag = m
    >>> Measurement(1.0, "revolutions").to_angle()
    <Revolutions: 1.0 rev (normalized 0.0, tolerance 1e-12)>
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from anglekit.angle_type import AngleType
from anglekit.exceptions import UnknownAngleTypeError
from anglekit.unit import UnitFloat

logger = logging.getLogger(__name__)


class MeasurementUnit(str, Enum):
    """Angle unit tags understood by host measurement types."""

    DEGREES = "degrees"
    RADIANS = "radians"
    GRADIANS = "gradians"
    REVOLUTIONS = "revolutions"
    ARC_MINUTES = "arcMinutes"
    ARC_SECONDS = "arcSeconds"

    @property
    def angle_type(self) -> AngleType:
        """AngleType: The angle unit this tag denotes."""
        match self:
            case MeasurementUnit.DEGREES:
                return AngleType.DEGREES
            case MeasurementUnit.RADIANS:
                return AngleType.RADIANS
            case MeasurementUnit.GRADIANS:
                return AngleType.GRADIANS
            case MeasurementUnit.REVOLUTIONS:
                return AngleType.REVOLUTIONS
            case MeasurementUnit.ARC_MINUTES:
                return AngleType.ARC_MINUTES
            case MeasurementUnit.ARC_SECONDS:
                return AngleType.ARC_SECONDS

    @classmethod
    def for_angle_type(cls, angle_type: AngleType) -> MeasurementUnit:
        """Return the tag for an angle unit."""
        match angle_type:
            case AngleType.DEGREES:
                return cls.DEGREES
            case AngleType.RADIANS:
                return cls.RADIANS
            case AngleType.GRADIANS:
                return cls.GRADIANS
            case AngleType.REVOLUTIONS:
                return cls.REVOLUTIONS
            case AngleType.ARC_MINUTES:
                return cls.ARC_MINUTES
            case AngleType.ARC_SECONDS:
                return cls.ARC_SECONDS


class Measurement(NamedTuple):
    """A host-side angle measurement: a raw value and a unit tag.

    Attributes:
        value (float): Magnitude in the tagged unit.
        unit (MeasurementUnit): Unit tag.
    """

    value: float
    unit: MeasurementUnit

    @classmethod
    def from_angle(cls, angle: UnitFloat) -> Measurement:
        """Describe an angle as a measurement in its own unit.

        Args:
            angle: Angle of any unit.

        Returns:
            Measurement: Raw value and the matching unit tag.
        """
        return cls(float(angle), MeasurementUnit.for_angle_type(AngleType.of(angle)))

    def to_angle(self) -> UnitFloat:
        """Build the angle this measurement describes.

        Returns:
            UnitFloat: Angle of the tagged unit holding the raw value.

        Raises:
            UnknownAngleTypeError: If the unit tag is not recognized.
        """
        return measurement_unit(self.unit).angle_type.init_angle(self.value)


def measurement_unit(tag: MeasurementUnit | str) -> MeasurementUnit:
    """Resolve a unit tag, raising a library error for unknown tags.

    Args:
        tag: MeasurementUnit member or its string value.

    Returns:
        MeasurementUnit: The matching tag.

    Raises:
        UnknownAngleTypeError: If the tag is not one of the six angle tags.
    """
    try:
        return MeasurementUnit(tag)
    except ValueError:
        logger.debug("Unrecognized measurement unit tag %r", tag)
        raise UnknownAngleTypeError(f"Unknown measurement unit: {tag!r}") from None


def to_measurement(angle: UnitFloat) -> Measurement:
    """Convert an angle into a host measurement."""
    return Measurement.from_angle(angle)


def from_measurement(measurement: Measurement | tuple[float, MeasurementUnit | str]) -> UnitFloat:
    """Build an angle from a host measurement or a plain (value, tag) pair.

    Args:
        measurement: Measurement, or any two-item (value, unit tag) sequence.

    Returns:
        UnitFloat: Angle of the tagged unit.

    Raises:
        UnknownAngleTypeError: If the unit tag is not recognized.
    """
    value, tag = measurement
    return Measurement(float(value), measurement_unit(tag)).to_angle()
