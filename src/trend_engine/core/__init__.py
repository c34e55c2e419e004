"""
Core building blocks: Q16.16 fixed-point arithmetic and the error hierarchy.
"""

from .exceptions import (
    TrendEngineError,
    FixedPointDomainError,
    FixedPointDivisionError,
    EmptyBookError,
)
from .fixed_point import (
    Q16_16,
    SCALE,
    FRACTIONAL_BITS,
    SAFE_MAGNITUDE,
    to_fixed,
    to_float,
    qadd,
    qsub,
    qmul,
    qdiv,
)

__all__ = [
    'TrendEngineError',
    'FixedPointDomainError',
    'FixedPointDivisionError',
    'EmptyBookError',
    'Q16_16',
    'SCALE',
    'FRACTIONAL_BITS',
    'SAFE_MAGNITUDE',
    'to_fixed',
    'to_float',
    'qadd',
    'qsub',
    'qmul',
    'qdiv',
]
