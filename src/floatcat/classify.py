"""
Float Classification
====================
Maps any IEEE-754 binary64 value to exactly one Category.

Decision order (first match wins):
    1. Infinity       (+inf, -inf)
    2. Nan
    3. IntegerLike               fractional part == 0   (0.0 and -0.0 land here)
    4. FractionLike              integer part == 0
    5. IntegerAndFractionalPart  otherwise

Special values are checked before truncation; trunc() of NaN or inf
is NaN or inf again.
"""

import math
import numbers

import numpy as np

from floatcat.category import (
    Category,
    FractionLike,
    Infinity,
    IntegerAndFractionalPart,
    IntegerLike,
    Nan,
)


# =================================================================
# Public API
# =================================================================

def classify(value: float) -> Category:
    """
    Classify a float by the shape of its integer and fractional parts.

    Args:
        value: Any real number. Converted to binary64 with float().

    Returns:
        One of IntegerLike, FractionLike, IntegerAndFractionalPart,
        Nan, Infinity.

    Raises:
        TypeError: value is not a real number (str, None, complex, ...).
        OverflowError: value is an int outside the binary64 range.
    """
    if not is_real(value):
        raise TypeError(
            f"classify() expects a real number, got {type(value).__name__}"
        )
    value = float(value)

    if math.isinf(value):
        return Infinity()
    if math.isnan(value):
        return Nan()

    int_part = float(np.trunc(value))
    return from_parts(int_part, value - int_part)


def is_real(value) -> bool:
    """True for inputs classify() accepts: numbers.Real and numpy booleans."""
    return isinstance(value, (numbers.Real, np.bool_))


def from_parts(int_part: float, fract_part: float) -> Category:
    """
    Pick the finite variant for already-split parts.
    Callers must have ruled out NaN and infinity.
    """
    if fract_part == 0.0:
        return IntegerLike(int_part)
    if int_part == 0.0:
        return FractionLike(fract_part)
    return IntegerAndFractionalPart(int_part, fract_part)
