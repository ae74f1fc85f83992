"""
floatcat: Float Shape Classification
====================================

One entry point, plus an array helper:

    floatcat.classify(value)
        Any real number → exactly one Category. Never fails on a float;
        NaN and infinity are results, not errors.

    floatcat.classify_array(values) / floatcat.tally(values)
        Same classification over an array-like, element by element.

Usage:
    import floatcat

    floatcat.classify(1.5)
    # → IntegerAndFractionalPart(integer=1.0, fraction=0.5)

    floatcat.classify(-100.0).is_integer_like()
    # → True

    match floatcat.classify(x):
        case floatcat.IntegerLike(value):
            ...
        case floatcat.FractionLike(value):
            ...
        case floatcat.IntegerAndFractionalPart(integer, fraction):
            ...
        case floatcat.Nan() | floatcat.Infinity():
            ...
"""

__version__ = '0.1.0'

from floatcat.category import (
    Category,
    FractionLike,
    Infinity,
    IntegerAndFractionalPart,
    IntegerLike,
    Kind,
    Nan,
)
from floatcat.classify import classify
from floatcat.batch import classify_array, tally
from floatcat.config import CONFIG, get as get_config

__all__ = [
    'classify', 'classify_array', 'tally',
    'Category', 'Kind', 'IntegerLike', 'FractionLike',
    'IntegerAndFractionalPart', 'Nan', 'Infinity',
    'CONFIG', 'get_config',
]
