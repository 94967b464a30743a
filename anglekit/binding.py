"""Explicit typed binding of angles to a declared unit.

Fields that must hold a specific unit get their value through bind_angle,
which converts whatever angle it is handed into the declared unit. The
conversion is a visible call at the assignment site rather than an implicit
coercion hidden in an attribute setter.

Example:
    >>> class Heading:
    ...     def __init__(self, value):
    ...         self.value = bind_angle(value, Degrees)
    >>> Heading(Radians(pi)).value
    <Degrees: 180.0 ° (normalized 180.0, tolerance 1e-12)>
"""

from __future__ import annotations

import logging
from typing import TypeVar

from anglekit.angle_type import AngleType
from anglekit.exceptions import AngleTypeMismatchError
from anglekit.unit import UnitFloat

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=UnitFloat)


def bind_angle(value: UnitFloat, unit_type: type[U], declared: AngleType | str | None = None) -> U:
    """Convert an angle into the unit of the field it is assigned to.

    Args:
        value: Angle of any unit.
        unit_type: Storage unit of the field.
        declared: Optional explicit unit annotation. It must name unit_type.

    Returns:
        UnitFloat: value converted into unit_type.

    Raises:
        AngleTypeMismatchError: If declared names a different unit than
            unit_type, or value is not an angle.
    """
    if declared is not None:
        declared_type = AngleType.parse(declared) if isinstance(declared, str) else declared
        if declared_type.unit_type is not unit_type:
            raise AngleTypeMismatchError(
                f"Angle type mismatch: requested {declared_type.description}, "
                f"but storage is {unit_type.__name__}"
            )
    if not isinstance(value, UnitFloat):
        raise AngleTypeMismatchError(f"Expected an angle, got {type(value).__name__}")

    if type(value) is not unit_type:
        logger.debug("Binding %s value %s as %s", type(value).__name__, value, unit_type.__name__)
    return value.convert(unit_type)
