"""Structured encoding of angles.

An angle is encoded as a mapping holding its unit (the AngleType value
string), its raw value and its tolerance::

    {"unit": "degrees", "value": 450.0, "tolerance": 1e-12}

The JSON helpers rely on the json module's native handling of non-finite
floats (the NaN, Infinity and -Infinity tokens), so NaN and infinite raw
values survive a round trip unchanged. AngleType members are str enums and
therefore encode as their plain value string wherever they appear.

Example:
    >>> text = dumps(Degrees(450))
    >>> text
    '{"unit": "degrees", "value": 450.0, "tolerance": 1e-12}'
    >>> loads(text)
    <Degrees: 450.0 ° (normalized 90.0, tolerance 1e-12)>
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from anglekit.angle_type import AngleType
from anglekit.config import TOLERANCE_FIELD, UNIT_FIELD, VALUE_FIELD
from anglekit.exceptions import AngleDecodeError, UnknownAngleTypeError
from anglekit.unit import UnitFloat

logger = logging.getLogger(__name__)


def to_dict(angle: UnitFloat) -> dict[str, Any]:
    """Encode an angle as a plain mapping.

    Args:
        angle: Angle of any unit.

    Returns:
        dict[str, Any]: Unit name, raw value and tolerance.
    """
    return {
        UNIT_FIELD: AngleType.of(angle).value,
        VALUE_FIELD: float(angle),
        TOLERANCE_FIELD: angle.tolerance,
    }


def from_dict(data: Mapping[str, Any]) -> UnitFloat:
    """Decode an angle from a mapping produced by to_dict.

    The tolerance field is optional; a missing one yields the unit default.

    Args:
        data: Mapping with "unit", "value" and optionally "tolerance".

    Returns:
        UnitFloat: Decoded angle of the encoded unit.

    Raises:
        AngleDecodeError: If a field is missing, has the wrong type or names
            an unknown unit.
    """
    if not isinstance(data, Mapping):
        raise AngleDecodeError(f"Expected a mapping, got {type(data).__name__}")
    try:
        unit = AngleType.parse(data[UNIT_FIELD])
        value = _number(data[VALUE_FIELD], VALUE_FIELD)
    except KeyError as exc:
        raise AngleDecodeError(f"Missing field {exc.args[0]!r}") from None
    except UnknownAngleTypeError as exc:
        raise AngleDecodeError(str(exc)) from exc

    tolerance = data.get(TOLERANCE_FIELD)
    if tolerance is not None:
        tolerance = _number(tolerance, TOLERANCE_FIELD)
    logger.debug("Decoded %s angle %r", unit.value, value)
    return unit.init_angle(value, tolerance=tolerance)


def _number(value: Any, field: str) -> float:
    # bool is an int subclass but never a valid raw value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AngleDecodeError(f"Field {field!r} must be a number, got {type(value).__name__}")
    return float(value)


def dumps(angle: UnitFloat, **kwargs) -> str:
    """Encode an angle as a JSON document.

    Args:
        angle: Angle of any unit.
        **kwargs: Extra keyword arguments forwarded to json.dumps.

    Returns:
        str: JSON text; non-finite values use the NaN/Infinity tokens.
    """
    return json.dumps(to_dict(angle), **kwargs)


def loads(text: str | bytes) -> UnitFloat:
    """Decode an angle from a JSON document produced by dumps.

    Args:
        text: JSON text.

    Returns:
        UnitFloat: Decoded angle.

    Raises:
        AngleDecodeError: If the text is not valid JSON or not a valid payload.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AngleDecodeError(f"Invalid JSON: {exc.msg}") from exc
    return from_dict(data)
