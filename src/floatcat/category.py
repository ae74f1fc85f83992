"""
Float Categories
================
The closed set of results produced by floatcat.classify().

Variants:
    IntegerLike(value)                          : 1.0, -100.0, 0.0
    FractionLike(value)                         : 0.5, -0.002
    IntegerAndFractionalPart(integer, fraction) : 1.5 → (1.0, 0.5)
    Nan()                                       : NaN
    Infinity()                                  : +inf or -inf

All variants are frozen dataclasses, so they compare structurally:
Nan() == Nan() holds even though float('nan') != float('nan').
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple

from floatcat.config import get as get_config


class Kind(str, Enum):
    """Tag of a Category variant."""
    INTEGER_LIKE = "integer_like"
    FRACTION_LIKE = "fraction_like"
    INTEGER_AND_FRACTIONAL_PART = "integer_and_fractional_part"
    NAN = "nan"
    INFINITY = "infinity"


@dataclass(frozen=True)
class Category:
    """Base of the five float categories. Not instantiated directly."""
    kind: ClassVar[Kind]

    def __new__(cls, *args, **kwargs):
        if cls is Category:
            raise TypeError("Category cannot be instantiated; use one of its variants")
        return super().__new__(cls)

    def is_integer_like(self) -> bool:
        return isinstance(self, IntegerLike)

    def is_fraction_like(self) -> bool:
        return isinstance(self, FractionLike)

    def is_integer_and_fractional_part(self) -> bool:
        return isinstance(self, IntegerAndFractionalPart)

    def is_nan(self) -> bool:
        return isinstance(self, Nan)

    def is_infinity(self) -> bool:
        return isinstance(self, Infinity)

    def parts(self) -> Optional[Tuple[float, float]]:
        """
        (integer_part, fractional_part) of the classified value.

        Returns None for Nan and Infinity, which have no finite parts.
        """
        return None

    def describe(self) -> str:
        return get_config(f'descriptions.{self.kind.value}', '')

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class IntegerLike(Category):
    """Zero fractional part. `value` is the truncated value, sign included."""
    kind: ClassVar[Kind] = Kind.INTEGER_LIKE
    value: float

    def parts(self) -> Optional[Tuple[float, float]]:
        return (self.value, 0.0)


@dataclass(frozen=True)
class FractionLike(Category):
    """Zero integer part. `value` is the signed fractional remainder."""
    kind: ClassVar[Kind] = Kind.FRACTION_LIKE
    value: float

    def parts(self) -> Optional[Tuple[float, float]]:
        return (math.copysign(0.0, self.value), self.value)


@dataclass(frozen=True)
class IntegerAndFractionalPart(Category):
    """Integer and fractional parts, in that order. integer + fraction == input."""
    kind: ClassVar[Kind] = Kind.INTEGER_AND_FRACTIONAL_PART
    integer: float
    fraction: float

    def parts(self) -> Optional[Tuple[float, float]]:
        return (self.integer, self.fraction)


@dataclass(frozen=True)
class Nan(Category):
    kind: ClassVar[Kind] = Kind.NAN


@dataclass(frozen=True)
class Infinity(Category):
    kind: ClassVar[Kind] = Kind.INFINITY
