"""Angular unit definitions.

This module provides the six concrete angle units. Each stores its raw value
in its own native scale and differs from its siblings only in the magnitude of
one full turn (its normalization value) and in display metadata; every
behaviour comes from UnitFloat.

The literal pairwise factors registered at the bottom of the module are used
in place of the normalization-value ratio for the pairs that have a
well-known exact constant (60 arc minutes per degree, and so on).

These units are commonly used for:
- Headings, bearings and orientation angles (Degrees)
- Trigonometry and rotational mechanics (Radians)
- Surveying (Gradians)
- Rotation counts and duty cycles (Revolutions)
- Astronomy and geodesy (ArcMinutes, ArcSeconds)

Classes:
    Degrees: 360 per full turn.
    Radians: 2π per full turn, with trigonometric helpers.
    Gradians: 400 per full turn.
    Revolutions: 1 per full turn.
    ArcMinutes: 21 600 per full turn.
    ArcSeconds: 1 296 000 per full turn.

Type Aliases:
    Angle: Union type for all angle units.

Example:
    >>> heading = Degrees(45)
    >>> print(heading)  # "45.0 °"
    >>> print(heading.convert(Radians))  # "0.7853981633974483 rad"
    >>> Degrees(180) == Radians(pi)
    True
"""

from __future__ import annotations

from math import cos, pi, sin, tan

from .unit_float import UnitFloat


class Degrees(UnitFloat):
    """Angular unit: Degree (1/360 of a full rotation).

    Used for navigation headings, orientation angles and most user-facing
    angle input. Adds a few circular helpers on top of the common contract.

    Attributes:
        NORMALIZATION_VALUE (float): 360.0 degrees per turn.
        SYMBOL (str): "°".

    Example:
        >>> bearing = Degrees(90)
        >>> print(bearing.opposite())  # "270.0 °"
        >>> bearing.adjacent_angles()  # (Degrees 180, Degrees 0)
    """

    NORMALIZATION_VALUE = 360.0
    NAME = "degrees"
    SYMBOL = "°"

    def opposite(self) -> Degrees:
        """Return the opposite direction: half a turn away, normalized."""
        return self + Degrees(180.0)

    def supplementary(self) -> Degrees:
        """Return the supplementary angle (180° - self), normalized."""
        return Degrees(180.0) - self

    def adjacent_angles(self) -> tuple[Degrees, Degrees]:
        """Return the two directions a quarter turn away.

        Returns:
            tuple[Degrees, Degrees]: ``(self + 90°, self - 90°)``, both
            normalized. NaN for non-finite values.
        """
        quarter = Degrees(90.0)
        return self + quarter, self - quarter


class Radians(UnitFloat):
    """Angular unit: Radian (2π per full rotation).

    The natural unit for trigonometric functions. The reciprocal functions
    and the right-triangle helpers return None where the result would require
    a division by a value within tolerance of zero.

    Attributes:
        NORMALIZATION_VALUE (float): 2π radians per turn.
        SYMBOL (str): "rad".

    Example:
        >>> angle = Radians(pi / 6)
        >>> round(angle.sine, 12)
        0.5
        >>> angle.hypotenuse_from_opposite(1.0)  # ~2.0
    """

    NORMALIZATION_VALUE = 2 * pi
    NAME = "radians"
    SYMBOL = "rad"

    @property
    def sine(self) -> float:
        return sin(float(self))

    @property
    def cosine(self) -> float:
        return cos(float(self))

    @property
    def tangent(self) -> float:
        return tan(float(self))

    def _reciprocal(self, value: float) -> float | None:
        if abs(value) <= self.tolerance:
            return None
        return 1.0 / value

    @property
    def cotangent(self) -> float | None:
        """float | None: 1/tan, None where the tangent vanishes."""
        return self._reciprocal(self.tangent)

    @property
    def secant(self) -> float | None:
        """float | None: 1/cos, None where the cosine vanishes."""
        return self._reciprocal(self.cosine)

    @property
    def cosecant(self) -> float | None:
        """float | None: 1/sin, None where the sine vanishes."""
        return self._reciprocal(self.sine)

    def opposite_leg(self, hypotenuse: float) -> float:
        """Leg opposite this angle in a right triangle with the given hypotenuse."""
        return hypotenuse * self.sine

    def adjacent_leg(self, hypotenuse: float) -> float:
        """Leg adjacent to this angle in a right triangle with the given hypotenuse."""
        return hypotenuse * self.cosine

    def hypotenuse_from_opposite(self, opposite_leg: float) -> float | None:
        sine = self.sine
        if abs(sine) <= self.tolerance:
            return None
        return opposite_leg / sine

    def hypotenuse_from_adjacent(self, adjacent_leg: float) -> float | None:
        cosine = self.cosine
        if abs(cosine) <= self.tolerance:
            return None
        return adjacent_leg / cosine

    def opposite_from_adjacent(self, adjacent_leg: float) -> float:
        return adjacent_leg * self.tangent

    def adjacent_from_opposite(self, opposite_leg: float) -> float | None:
        tangent = self.tangent
        if abs(tangent) <= self.tolerance:
            return None
        return opposite_leg / tangent


class Gradians(UnitFloat):
    """Angular unit: Gradian (1/400 of a full rotation).

    Used mainly in surveying, where a right angle is a round 100 gradians.

    Attributes:
        NORMALIZATION_VALUE (float): 400.0 gradians per turn.
        SYMBOL (str): "gon".
    """

    NORMALIZATION_VALUE = 400.0
    NAME = "gradians"
    SYMBOL = "gon"


class Revolutions(UnitFloat):
    """Angular unit: Revolution (one full rotation)."""

    NORMALIZATION_VALUE = 1.0
    NAME = "revolutions"
    SYMBOL = "rev"


class ArcMinutes(UnitFloat):
    """Angular unit: Arc minute (1/60 of a degree).

    Attributes:
        NORMALIZATION_VALUE (float): 21 600 arc minutes per turn.
        SYMBOL (str): "′".
    """

    NORMALIZATION_VALUE = 21_600.0
    NAME = "arc minutes"
    SYMBOL = "′"


class ArcSeconds(UnitFloat):
    """Angular unit: Arc second (1/60 of an arc minute, 1/3600 of a degree).

    Attributes:
        NORMALIZATION_VALUE (float): 1 296 000 arc seconds per turn.
        SYMBOL (str): "″".
    """

    NORMALIZATION_VALUE = 1_296_000.0
    NAME = "arc seconds"
    SYMBOL = "″"


# Literal factors (to, from) for the pairs with a well-known exact constant
Degrees.register_exact_scale(Gradians, 10.0 / 9.0, 9.0 / 10.0)
Degrees.register_exact_scale(Radians, pi / 180.0, 180.0 / pi)
Degrees.register_exact_scale(Revolutions, 1.0 / 360.0, 360.0)
Degrees.register_exact_scale(ArcMinutes, 60.0, 1.0 / 60.0)
Degrees.register_exact_scale(ArcSeconds, 3600.0, 1.0 / 3600.0)
ArcMinutes.register_exact_scale(ArcSeconds, 60.0, 1.0 / 60.0)
Gradians.register_exact_scale(ArcMinutes, 54.0, 1.0 / 54.0)
Radians.register_exact_scale(ArcMinutes, 10_800.0 / pi, pi / 10_800.0)
Revolutions.register_exact_scale(ArcMinutes, 21_600.0, 1.0 / 21_600.0)

Angle = Degrees | Radians | Gradians | Revolutions | ArcMinutes | ArcSeconds  # Type alias for any angle unit
