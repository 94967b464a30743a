"""Exceptions raised at the boundaries of the angle library.

Numeric operations never raise; failures there surface as NaN raw values or
False comparisons. The exceptions below are reserved for the places where
input comes from outside the numeric model: parsing unit names, decoding
serialized payloads and the explicit unit check of a typed binding.
"""


class AngleError(Exception):
    """Base class for all angle library errors."""


class UnknownAngleTypeError(AngleError, ValueError):
    """Raised when a unit name or measurement tag is not recognized."""


class AngleDecodeError(AngleError, ValueError):
    """Raised when a serialized angle payload is malformed."""


class AngleTypeMismatchError(AngleError, TypeError):
    """Raised when an explicit unit annotation contradicts the storage unit."""
