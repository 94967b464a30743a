"""Runtime selection of angle units.

AngleType enumerates the six angle units so that a unit can be chosen from
data (configuration files, serialized payloads, command line arguments)
rather than from a class name in the source. Every dispatch over the
enumeration is an exhaustive ``match``, so adding a unit means touching each
dispatch site explicitly.

Example:
    >>> unit = AngleType.parse("arc seconds")
    >>> unit.init_angle(3600)
    <ArcSeconds: 3600.0 ″ (normalized 3600.0, tolerance 1e-12)>
    >>> AngleType.RADIANS.init_angle(Degrees(180)).raw_value
    3.141592653589793
"""

from __future__ import annotations

import logging
from enum import Enum

from anglekit.config import Number
from anglekit.exceptions import UnknownAngleTypeError
from anglekit.unit import ArcMinutes, ArcSeconds, Degrees, Gradians, Radians, Revolutions, UnitFloat

logger = logging.getLogger(__name__)


class AngleType(str, Enum):
    """Enumeration of the supported angle units.

    Members serialize as their lowercase value string.
    """

    DEGREES = "degrees"
    RADIANS = "radians"
    GRADIANS = "gradians"
    REVOLUTIONS = "revolutions"
    ARC_MINUTES = "arc_minutes"
    ARC_SECONDS = "arc_seconds"

    @classmethod
    def _missing_(cls, value):
        """Accept camelCase, spaced and differently cased spellings."""
        if isinstance(value, str):
            key = "".join(c for c in value.lower() if c.isalnum())
            for member in cls:
                if member.value.replace("_", "") == key:
                    return member
        return None

    @classmethod
    def parse(cls, text: str) -> AngleType:
        """Resolve a unit name, raising a library error for unknown names.

        Args:
            text: Unit name such as "degrees", "arcSeconds" or "arc minutes".

        Returns:
            AngleType: The matching member.

        Raises:
            UnknownAngleTypeError: If the name matches no unit.
        """
        try:
            return cls(text)
        except ValueError:
            logger.debug("Unrecognized angle unit %r", text)
            raise UnknownAngleTypeError(f"Unknown angle unit: {text!r}") from None

    @classmethod
    def of(cls, angle: UnitFloat | type[UnitFloat]) -> AngleType:
        """Return the member describing an angle or an angle class.

        Args:
            angle: Angle instance or concrete unit class.

        Returns:
            AngleType: Member whose unit_type is the angle's class.

        Raises:
            UnknownAngleTypeError: If the class is not one of the six units.
        """
        unit_type = angle if isinstance(angle, type) else type(angle)
        for member in cls:
            if member.unit_type is unit_type:
                return member
        raise UnknownAngleTypeError(f"Not a known angle unit: {unit_type.__name__}")

    @property
    def unit_type(self) -> type[UnitFloat]:
        """type[UnitFloat]: Concrete class implementing this unit."""
        match self:
            case AngleType.DEGREES:
                return Degrees
            case AngleType.RADIANS:
                return Radians
            case AngleType.GRADIANS:
                return Gradians
            case AngleType.REVOLUTIONS:
                return Revolutions
            case AngleType.ARC_MINUTES:
                return ArcMinutes
            case AngleType.ARC_SECONDS:
                return ArcSeconds

    @property
    def description(self) -> str:
        """str: Human-readable unit name, for diagnostics only."""
        match self:
            case AngleType.DEGREES:
                return "degrees"
            case AngleType.RADIANS:
                return "radians"
            case AngleType.GRADIANS:
                return "gradians"
            case AngleType.REVOLUTIONS:
                return "revolutions"
            case AngleType.ARC_MINUTES:
                return "arc minutes"
            case AngleType.ARC_SECONDS:
                return "arc seconds"

    def init_angle(self, value: Number | UnitFloat, tolerance: float | None = None) -> UnitFloat:
        """Build an angle of this unit.

        Args:
            value: Raw number in this unit, or an angle of any unit to convert.
            tolerance: Optional comparison tolerance for the new angle.

        Returns:
            UnitFloat: Instance of unit_type.
        """
        return self.unit_type(value, tolerance=tolerance)

    def __str__(self) -> str:
        return self.value
