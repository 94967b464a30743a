"""Float-based angle values with conversion, normalization and tolerant comparison.

This module provides the UnitFloat class, the contract every angle unit
implements. It combines Python's float type with a unit, an instance-level
comparison tolerance and a purely numeric error model: nothing here raises for
bad numbers, every failure shows up as a NaN raw value or a False comparison.

Key Features:
- Raw values stored verbatim in the unit's native scale (450 degrees stays 450)
- Generic conversion driven by the units' normalization values, with the
  tolerance scaled by the same factor as the value
- Circular normalization into [0, NORMALIZATION_VALUE)
- Tolerance-aware equality, circular equivalence and ordering
- Arithmetic with other angles of any unit and with plain numbers
- NaN propagation for every operation that touches a non-finite operand

Classes:
    UnitFloat: Base class for all angle units.

Example:
    >>> class Degrees(UnitFloat):
    ...     NORMALIZATION_VALUE = 360.0
    ...     SYMBOL = "°"
    ...
    >>> heading = Degrees(450)
    >>> print(heading)  # "450.0 °"
    >>> print(heading.normalized())  # "90.0 °"
    >>> print(Degrees(180) + Degrees(270))  # "90.0 °"
"""

from __future__ import annotations

from math import fmod, isfinite, isnan
from typing import Any, Self, TypeVar

from anglekit.config import Number

from .unit_base import Unit

U = TypeVar("U", bound="UnitFloat")

NAN = float("nan")


def describe_raw(value: float) -> str:
    """Render a raw value, spelling out the non-finite cases.

    Args:
        value: Raw floating-point value.

    Returns:
        str: "NaN", "+Inf", "-Inf" or the usual float representation.
    """
    if isnan(value):
        return "NaN"
    if not isfinite(value):
        return "-Inf" if value < 0 else "+Inf"
    return str(value)


class UnitFloat(float, Unit):
    """Base class for angle values with automatic unit conversion.

    The float value of an instance is its raw value in the unit's native
    scale. Instances are immutable; arithmetic, normalization and conversion
    all return new values. Operations between two different units convert the
    right-hand operand into the left-hand operand's unit first, so
    ``Degrees(90) + Radians(pi)`` is a Degrees value.

    Attributes:
        NORMALIZATION_VALUE (ClassVar[float]): Magnitude of one full turn.
        DEFAULT_TOLERANCE (ClassVar[float]): Minimum comparison tolerance.
        NAME (ClassVar[str]): Human-readable unit name.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
    """

    __slots__ = ("_tolerance",)

    _tolerance: float

    def __new__(cls, value: Number | UnitFloat = 0.0, tolerance: float | None = None):
        """Create a new angle from a raw number or from another angle.

        A raw number is stored verbatim, without normalization. Another angle
        is converted into this unit, carrying its tolerance along.

        Args:
            value: Raw value in this unit, or an angle of any unit.
            tolerance: Comparison tolerance. Sanitized; when omitted the unit's
                default (or the converted tolerance of an angle) is used.

        Returns:
            UnitFloat: New instance of this unit.
        """
        if isinstance(value, UnitFloat):
            converted = value.convert(cls)
            if tolerance is None:
                return converted
            return converted.with_tolerance(tolerance)

        obj = float.__new__(cls, float(value))
        if tolerance is None:
            obj._tolerance = cls.DEFAULT_TOLERANCE
        else:
            obj._tolerance = cls.sanitized_tolerance(tolerance)
        return obj

    @classmethod
    def nan(cls) -> Self:
        """Create the invalid (NaN) angle of this unit."""
        return cls(NAN)

    @property
    def raw_value(self) -> float:
        """float: Magnitude in this unit's native scale."""
        return float(self)

    @property
    def tolerance(self) -> float:
        """float: Comparison tolerance, always finite and >= DEFAULT_TOLERANCE."""
        return self._tolerance

    @property
    def is_nan(self) -> bool:
        return isnan(float(self))

    @property
    def is_finite(self) -> bool:
        return isfinite(float(self))

    def with_tolerance(self, tolerance: float) -> Self:
        """Return a copy of this angle with another comparison tolerance.

        Args:
            tolerance: New tolerance, sanitized before use.

        Returns:
            UnitFloat: Same raw value and unit with the new tolerance.
        """
        return type(self)(float(self), tolerance=tolerance)

    def _with_raw(self, raw: float) -> Self:
        return type(self)(raw, tolerance=self._tolerance)

    # -------------------------------- Normalization --------------------------------
    def normalized(self, by: float | None = None) -> Self:
        """Wrap the raw value into one full turn.

        The result lies in ``[0, by)``, where ``by`` defaults to the unit's
        NORMALIZATION_VALUE. Values already in range are returned unchanged,
        as are non-finite values and every value when ``by`` is not a finite
        positive number. The tolerance is preserved.

        Args:
            by: Optional period to normalize by.

        Returns:
            UnitFloat: Normalized angle.
        """
        period = type(self).NORMALIZATION_VALUE if by is None else float(by)
        value = float(self)
        if not (isfinite(value) and isfinite(period) and period > 0.0):
            return self
        if 0.0 <= value < period:
            return self

        result = fmod(value, period)
        if result < 0.0:
            result += period
        # tiny negative remainders round up to a full turn
        if result >= period:
            result = 0.0
        return self._with_raw(result)

    # -------------------------------- Conversion --------------------------------
    def convert(self, target: type[U] | Any) -> U:
        """Convert to another angle unit.

        The raw value is multiplied by the scale factor between the two units
        and so is the tolerance, which keeps "equal within tolerance" a
        unit-independent notion. The converted tolerance never drops below
        the target unit's default.

        Args:
            target: Target unit class, or an AngleType member.

        Returns:
            UnitFloat: Instance of the target unit. NaN when the source value
            is non-finite or when the units have no valid scale factor.
        """
        if not isinstance(target, type):
            return target.init_angle(self)
        if type(self) is target:
            return self

        scale = type(self).scale_to(target)
        if not isfinite(scale):
            return target.nan()

        tolerance = max(target.DEFAULT_TOLERANCE, self.sanitized_tolerance(self._tolerance) * abs(scale))
        raw = float(self)
        if not isfinite(raw):
            return target(NAN, tolerance=tolerance)
        return target(raw * scale, tolerance=tolerance)

    def to(self, target: type[UnitFloat] | Any) -> float:
        """Convert to another unit and return the bare raw value.

        Args:
            target: Target unit class, or an AngleType member.

        Returns:
            float: Value in the target unit's scale.
        """
        return float(self.convert(target))

    def _counterpart(self, other: Any) -> Self | None:
        """Express an operand in this angle's unit.

        Angles are converted, plain numbers are read as raw values of this
        unit. Anything else yields None.
        """
        if isinstance(other, UnitFloat):
            return other.convert(type(self))
        if isinstance(other, Number):
            return type(self)(other)
        return None

    def _effective_tolerance(self, other: UnitFloat, tolerance: float | None) -> float:
        if tolerance is not None:
            return self.sanitized_tolerance(tolerance)
        return max(
            self.sanitized_tolerance(self._tolerance),
            self.sanitized_tolerance(other._tolerance),
        )

    # -------------------------------- Comparison --------------------------------
    def is_approximately_equal(self, other: UnitFloat | Number, tolerance: float | None = None) -> bool:
        """Compare raw values within a tolerance, after unit conversion.

        NaN is never equal to anything, itself included, and neither are
        infinities.

        Args:
            other: Angle of any unit, or a raw number in this unit.
            tolerance: Explicit tolerance (sanitized). Defaults to the larger
                of both operands' tolerances.

        Returns:
            bool: True if the raw values differ by at most the tolerance.
        """
        rhs = self._counterpart(other)
        if rhs is None:
            return False
        lhs_raw, rhs_raw = float(self), float(rhs)
        if not (isfinite(lhs_raw) and isfinite(rhs_raw)):
            return False
        return abs(lhs_raw - rhs_raw) <= self._effective_tolerance(rhs, tolerance)

    def is_equivalent(self, other: UnitFloat | Number, tolerance: float | None = None) -> bool:
        """Circular equality: compare directions rather than raw values.

        Both operands are normalized first and the distance between them is
        measured the short way around the circle, so 0 and 360 degrees (or
        359.9999999999999 and 0) are equivalent.

        Args:
            other: Angle of any unit, or a raw number in this unit.
            tolerance: Explicit tolerance (sanitized). Defaults to the larger
                of both operands' tolerances.

        Returns:
            bool: True if the two angles point the same way within tolerance.
        """
        period = type(self).NORMALIZATION_VALUE
        if not (isfinite(period) and period > 0.0):
            return False
        rhs = self._counterpart(other)
        if rhs is None:
            return False
        lhs, rhs = self.normalized(), rhs.normalized()
        lhs_raw, rhs_raw = float(lhs), float(rhs)
        if not (isfinite(lhs_raw) and isfinite(rhs_raw)):
            return False
        delta = abs(lhs_raw - rhs_raw)
        return min(delta, period - delta) <= self._effective_tolerance(rhs, tolerance)

    def __eq__(self, other: object) -> bool:
        """Tolerant equality with angles of any unit or raw numbers.

        Args:
            other: Value to compare against.

        Returns:
            bool: Result of is_approximately_equal, or NotImplemented for
            non-numeric operands.
        """
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_approximately_equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return not self.is_approximately_equal(other)

    def __hash__(self) -> int:
        value = float(self)
        return hash((type(self), None if isnan(value) else value))

    def __lt__(self, other: UnitFloat | Number) -> bool:
        """Strict less-than after conversion; exact, no tolerance applied."""
        rhs = self._counterpart(other)
        if rhs is None:
            return NotImplemented
        return float(self) < float(rhs)

    def __gt__(self, other: UnitFloat | Number) -> bool:
        """Strict greater-than after conversion; exact, no tolerance applied."""
        rhs = self._counterpart(other)
        if rhs is None:
            return NotImplemented
        return float(self) > float(rhs)

    def __le__(self, other: UnitFloat | Number) -> bool:
        """Less-than-or-equal with the tolerance as boundary slack.

        Args:
            other: Angle of any unit, or a raw number in this unit.

        Returns:
            bool: True if ``self <= other + tolerance``; False when either
            value is non-finite.
        """
        rhs = self._counterpart(other)
        if rhs is None:
            return NotImplemented
        lhs_raw, rhs_raw = float(self), float(rhs)
        if not (isfinite(lhs_raw) and isfinite(rhs_raw)):
            return False
        return lhs_raw <= rhs_raw + self._effective_tolerance(rhs, None)

    def __ge__(self, other: UnitFloat | Number) -> bool:
        """Greater-than-or-equal with the tolerance as boundary slack.

        Args:
            other: Angle of any unit, or a raw number in this unit.

        Returns:
            bool: True if ``self >= other - tolerance``; False when either
            value is non-finite.
        """
        rhs = self._counterpart(other)
        if rhs is None:
            return NotImplemented
        lhs_raw, rhs_raw = float(self), float(rhs)
        if not (isfinite(lhs_raw) and isfinite(rhs_raw)):
            return False
        return lhs_raw >= rhs_raw - self._effective_tolerance(rhs, None)

    # -------------------------------- Arithmetic Operations --------------------------------
    def _operands(self, other: Any) -> tuple[float, float] | None:
        rhs = self._counterpart(other)
        if rhs is None:
            return None
        return float(self), float(rhs)

    def __add__(self, other: UnitFloat | Number) -> Self:
        """Add an angle of any unit or a raw number, then normalize.

        Args:
            other: Angle (converted into this unit) or raw number.

        Returns:
            UnitFloat: Normalized sum, NaN if either operand is non-finite.
        """
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        if not (isfinite(lhs) and isfinite(rhs)):
            return self.nan()
        return type(self)(lhs + rhs).normalized()

    def __radd__(self, other: Number) -> Self:
        """Right-side addition of a raw number."""
        return self.__add__(other)

    def __sub__(self, other: UnitFloat | Number) -> Self:
        """Subtract an angle of any unit or a raw number, then normalize.

        Args:
            other: Angle (converted into this unit) or raw number.

        Returns:
            UnitFloat: Normalized difference, NaN if either operand is non-finite.
        """
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        if not (isfinite(lhs) and isfinite(rhs)):
            return self.nan()
        return type(self)(lhs - rhs).normalized()

    def __rsub__(self, other: Number) -> Self:
        """Right-side subtraction: a raw number minus this angle.

        Args:
            other: Raw number read in this angle's unit.

        Returns:
            UnitFloat: Normalized difference with other as minuend.
        """
        if isinstance(other, UnitFloat) or not isinstance(other, Number):
            return NotImplemented
        return type(self)(other).__sub__(self)

    def __mul__(self, k: UnitFloat | Number) -> Self:
        """Multiply the raw value. The product is not normalized.

        Args:
            k: Raw number, or an angle whose converted raw value is used.

        Returns:
            UnitFloat: Scaled angle, NaN if either operand is non-finite.
        """
        operands = self._operands(k)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        if not (isfinite(lhs) and isfinite(rhs)):
            return self.nan()
        return type(self)(lhs * rhs)

    def __rmul__(self, k: Number) -> Self:
        """Right-side multiplication by a raw number."""
        return self.__mul__(k)

    def __truediv__(self, k: UnitFloat | Number) -> Self:
        """Divide the raw value. The quotient is not normalized.

        Args:
            k: Raw number, or an angle whose converted raw value is used.

        Returns:
            UnitFloat: Divided angle, NaN if either operand is non-finite or
            the divisor is zero.
        """
        operands = self._operands(k)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        if not (isfinite(lhs) and isfinite(rhs)) or rhs == 0.0:
            return self.nan()
        return type(self)(lhs / rhs)

    def __neg__(self) -> Self:
        """Negate the raw value without normalizing; NaN for non-finite values."""
        value = float(self)
        if not isfinite(value):
            return self.nan()
        return type(self)(-value)

    def __iadd__(self, other: UnitFloat | Number) -> Self:
        """In-place addition; rebinds to the normalized sum."""
        return self.__add__(other)

    def __isub__(self, other: UnitFloat | Number) -> Self:
        """In-place subtraction; rebinds to the normalized difference."""
        return self.__sub__(other)

    def __imul__(self, k: UnitFloat | Number) -> Self:
        """In-place multiplication; rebinds to the product."""
        return self.__mul__(k)

    def __itruediv__(self, k: UnitFloat | Number) -> Self:
        """In-place division; rebinds to the quotient."""
        return self.__truediv__(k)

    def __str__(self) -> str:
        """Return the raw value and unit symbol (e.g. "90.0 °", "NaN rad").

        Returns:
            str: Human-readable representation in the unit's native scale.
        """
        return f"{describe_raw(float(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return a detailed representation with the normalized value.

        Returns:
            str: e.g. "<Degrees: 450.0 ° (normalized 90.0, tolerance 1e-12)>".
        """
        return (
            f"<{type(self).__name__}: {self!s} "
            f"(normalized {describe_raw(float(self.normalized()))}, tolerance {self._tolerance:g})>"
        )
