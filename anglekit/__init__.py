"""Unit-safe angle arithmetic.

anglekit provides six distinct angle types (degrees, radians, gradians,
revolutions, arc minutes and arc seconds) that convert into each other,
compare with tolerance and combine with the usual arithmetic operators while
handling non-finite values and wraparound consistently.

Components:
    Unit System (anglekit.unit):
        • UnitFloat: Shared contract for conversion, normalization and comparison
        • Degrees, Radians, Gradians, Revolutions, ArcMinutes, ArcSeconds

    Unit Selection (anglekit.angle_type):
        • AngleType: Enumeration of units for runtime dispatch

    Interop (anglekit.measurement, anglekit.serialization):
        • Measurement: (value, unit tag) pairs for host measurement types
        • to_dict / from_dict / dumps / loads: structured and JSON encoding

    Binding (anglekit.binding):
        • bind_angle: Explicit conversion into a field's declared unit

Typical Usage:
    >>> from anglekit import AngleType, Degrees, Radians
    >>> from math import pi
    >>> Degrees(180) == Radians(pi)
    True
    >>> Degrees(180) + Degrees(270)
    <Degrees: 90.0 ° (normalized 90.0, tolerance 1e-12)>
    >>> AngleType.parse("gradians").init_angle(Degrees(90)).raw_value
    100.0
"""

from .angle_type import AngleType
from .binding import bind_angle
from .exceptions import AngleDecodeError, AngleError, AngleTypeMismatchError, UnknownAngleTypeError
from .measurement import Measurement, MeasurementUnit, from_measurement, to_measurement
from .serialization import dumps, from_dict, loads, to_dict
from .unit import Angle, ArcMinutes, ArcSeconds, Degrees, Gradians, Radians, Revolutions, Unit, UnitFloat

__all__ = [
    "Angle",
    "AngleDecodeError",
    "AngleError",
    "AngleType",
    "AngleTypeMismatchError",
    "ArcMinutes",
    "ArcSeconds",
    "Degrees",
    "Gradians",
    "Measurement",
    "MeasurementUnit",
    "Radians",
    "Revolutions",
    "Unit",
    "UnitFloat",
    "UnknownAngleTypeError",
    "bind_angle",
    "dumps",
    "from_dict",
    "from_measurement",
    "loads",
    "to_dict",
    "to_measurement",
]
