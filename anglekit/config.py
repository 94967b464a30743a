"""Global configuration and type definitions for the angle library.

This module centralizes the numeric type aliases and library-wide constants
used by every angle unit. Values here are plain module-level constants; unit
classes read them at class-definition time, so subclasses override behaviour
by redefining the corresponding class attribute rather than by mutating this
module at runtime.

Type Definitions:
    Number: Union type of the scalar types accepted as raw angle values and
            as arithmetic operands. Supports Python native types (int, float)
            and NumPy integer/floating scalars, so values pulled out of NumPy
            arrays can be used directly.

Constants:
    DEFAULT_TOLERANCE: Floor for every instance tolerance.
    UNIT_FIELD, VALUE_FIELD, TOLERANCE_FIELD: Keys of the serialized form.
    DISPLAY_PRECISION: Significant digits used by the command line tables.

Example:
    >>> from anglekit.config import Number
    >>> import numpy as np
    >>> isinstance(np.float32(1.5), Number)
    True
"""

from numpy import floating, integer

Number = int | float | integer | floating

DEFAULT_TOLERANCE = 1e-12

# Serialized form
UNIT_FIELD = "unit"
VALUE_FIELD = "value"
TOLERANCE_FIELD = "tolerance"

# Command line output
DISPLAY_PRECISION = 12
