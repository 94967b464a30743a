"""Angle unit system.

This package implements the angle units and the contract they share. Every
unit stores a raw value in its own native scale; conversions, comparisons and
arithmetic between different units go through the ratio of their
normalization values (the magnitude of one full turn in each unit).

Architecture:
    - unit_base: Unit descriptor with per-unit constants and tolerance sanitization
    - unit_float: UnitFloat, the float-based angle contract
    - unit_angle: The six concrete units

Key Features:
    - Unit Safety: Mixed-unit operands are converted into the left operand's unit
    - Tolerance: Equality within a per-instance tolerance that scales with conversion
    - Circularity: Normalization into one turn and wraparound-aware equivalence
    - Numeric Errors: NaN propagation instead of exceptions

Example:
    >>> from anglekit.unit import Degrees, Gradians, Radians
    >>> Degrees(90) == Gradians(100)
    True
    >>> Degrees(0) - Degrees(90)  # normalized into one turn
    <Degrees: 270.0 ° (normalized 270.0, tolerance 1e-12)>
    >>> Degrees(30).convert(Radians)
    <Radians: 0.5235987755982988 rad (normalized 0.5235987755982988, tolerance 1e-12)>
"""

from .unit_angle import Angle, ArcMinutes, ArcSeconds, Degrees, Gradians, Radians, Revolutions
from .unit_base import Unit
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Degrees",
    "Radians",
    "Gradians",
    "Revolutions",
    "ArcMinutes",
    "ArcSeconds",
    "Angle",
]
