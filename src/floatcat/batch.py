"""
Array Classification
====================
Classifies every element of an array-like in one pass. Pure numpy for the
split, then the same decision order as floatcat.classify() per element.

Usage:
    from floatcat.batch import classify_array, tally

    classify_array([1.5, 2.0, np.nan])
    # → [IntegerAndFractionalPart(1.0, 0.5), IntegerLike(2.0), Nan()]

    tally(np.array([[0.25, 3.0], [np.inf, -7.5]]))
    # → {'integer_like': 1, 'fraction_like': 1,
    #    'integer_and_fractional_part': 1, 'nan': 0, 'infinity': 1}
"""

import logging
from typing import Dict, List

import numpy as np

from floatcat.category import Category, Infinity, Kind, Nan
from floatcat.classify import from_parts, is_real

logger = logging.getLogger(__name__)

# bool, signed int, unsigned int, float
_NUMERIC_KINDS = 'biuf'


def classify_array(values) -> List[Category]:
    """
    Classify each element of `values`.

    Args:
        values: Array-like of real numbers, any shape. Flattened in C order.

    Returns:
        List of Category, one per element, equal to classify() on each.

    Raises:
        TypeError: values holds anything classify() rejects
            (strings, None, complex).
    """
    arr = np.asarray(values)
    if arr.dtype.kind == 'O' and all(is_real(v) for v in arr.flat):
        # Fraction or oversized int: float() each, as classify() does
        arr = arr.astype(np.float64)
    elif arr.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"classify_array() expects real numbers, got dtype {arr.dtype}")

    arr = arr.astype(np.float64).ravel()
    logger.debug("classifying %d values", arr.size)
    if arr.size == 0:
        return []

    is_inf = np.isinf(arr)
    is_nan = np.isnan(arr)
    int_parts = np.trunc(arr)
    with np.errstate(invalid='ignore'):
        fract_parts = arr - int_parts

    results = []
    for i in range(arr.size):
        if is_inf[i]:
            results.append(Infinity())
        elif is_nan[i]:
            results.append(Nan())
        else:
            results.append(from_parts(float(int_parts[i]), float(fract_parts[i])))
    return results


def tally(values) -> Dict[str, int]:
    """
    Count categories over `values`.

    Returns:
        {kind value: count} for every Kind, in declaration order.
    """
    counts = {kind.value: 0 for kind in Kind}
    for category in classify_array(values):
        counts[category.kind.value] += 1
    logger.debug("tally: %s", counts)
    return counts
