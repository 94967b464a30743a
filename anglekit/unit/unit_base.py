"""Unit descriptor foundation for the angle unit family.

This module provides the Unit class that holds the per-unit constant metadata
shared by every angle representation: the magnitude of one full turn in the
unit (the normalization value), the display name and symbol, and the default
comparison tolerance. It also implements tolerance sanitization, the rule that
turns any caller-supplied tolerance into one that is safe to use in a
comparison, and the scale factor lookup used by every conversion.

Key Concepts:
- NORMALIZATION_VALUE: One full turn expressed in the unit (360 for degrees).
- DEFAULT_TOLERANCE: Floor applied to every tolerance of the unit.
- Sanitized tolerance: Finite, non-negative and at least DEFAULT_TOLERANCE.
- Exact scales: Literal pairwise factors (e.g. degrees to arc minutes = 60)
  registered per class and preferred over the normalization-value ratio.

Classes:
    Unit: Base class carrying unit metadata and tolerance sanitization.

Example:
    >>> class Turns(Unit):
    ...     NORMALIZATION_VALUE = 1.0
    ...     NAME = "turns"
    >>> Turns.sanitized_tolerance(float("nan"))
    1e-12
    >>> Turns.sanitized_tolerance(0.5)
    0.5
"""

from __future__ import annotations

from math import isfinite
from typing import ClassVar

from anglekit.config import DEFAULT_TOLERANCE


class Unit:
    """Base class for all angle unit types.

    Concrete unit classes should inherit from UnitFloat rather than directly
    from this class; Unit only carries the class-level constants and the
    helpers that depend on nothing but those constants.

    Attributes:
        NORMALIZATION_VALUE (ClassVar[float]): Magnitude of one full turn.
        DEFAULT_TOLERANCE (ClassVar[float]): Minimum comparison tolerance.
        NAME (ClassVar[str]): Human-readable unit name for diagnostics.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        EXACT_SCALES (ClassVar[dict[type[Unit], float]]): Literal factors into
            sibling units, filled by register_exact_scale.
    """

    __slots__ = ()
    __array_priority__ = 1000

    NORMALIZATION_VALUE: ClassVar[float] = 1.0
    DEFAULT_TOLERANCE: ClassVar[float] = DEFAULT_TOLERANCE
    NAME: ClassVar[str] = ""
    SYMBOL: ClassVar[str] = ""
    EXACT_SCALES: ClassVar[dict[type[Unit], float]]

    def __init_subclass__(cls, **kwargs):
        """Give every subclass its own exact scale table.

        Without this, all subclasses would share (and mutate) the table of
        their first ancestor that defined one.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        cls.EXACT_SCALES = {}

    @classmethod
    def register_exact_scale(cls, unit_type: type[Unit], to_factor: float, from_factor: float):
        """Register literal conversion factors between this unit and another.

        Args:
            unit_type: The sibling unit the factors relate to.
            to_factor: Multiplier taking a raw value of this unit into unit_type.
            from_factor: Multiplier taking a raw value of unit_type into this unit.
        """
        cls.EXACT_SCALES[unit_type] = to_factor
        unit_type.EXACT_SCALES[cls] = from_factor

    @classmethod
    def sanitized_tolerance(cls, tolerance: float) -> float:
        """Coerce a tolerance into one usable for comparisons.

        Args:
            tolerance: Candidate tolerance, possibly negative or non-finite.

        Returns:
            float: DEFAULT_TOLERANCE when the candidate is non-finite or
            negative, otherwise the larger of the candidate and
            DEFAULT_TOLERANCE.
        """
        tolerance = float(tolerance)
        if not isfinite(tolerance) or tolerance < 0.0:
            return cls.DEFAULT_TOLERANCE
        return max(tolerance, cls.DEFAULT_TOLERANCE)

    @classmethod
    def scale_to(cls, unit_type: type[Unit]) -> float:
        """Return the factor that maps a raw value of this unit into another.

        A registered exact factor wins; otherwise the factor is the ratio of
        the two normalization values. NaN is returned when either
        normalization value is non-finite or when this unit's normalization
        value is zero, since no meaningful factor exists.

        Args:
            unit_type: Target unit class.

        Returns:
            float: Multiplicative scale factor, or NaN.
        """
        source = cls.NORMALIZATION_VALUE
        target = unit_type.NORMALIZATION_VALUE
        if not (isfinite(source) and isfinite(target)) or source == 0.0:
            return float("nan")
        if unit_type is cls:
            return 1.0
        return cls.EXACT_SCALES.get(unit_type, target / source)
