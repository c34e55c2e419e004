"""
Q16.16 Fixed-Point Arithmetic

Deterministic signal arithmetic independent of floating-point rounding:
- Values are signed 32-bit integers scaled by 2^16
- Multiplication widens to 64 bits before rescaling
- Division widens and pre-shifts the numerator before dividing
- Results are narrowed back to 32 bits with two's-complement wrap

Safe operating range:
    No saturation is performed. Inputs, intermediate sums and results must
    stay well under SAFE_MAGNITUDE (2^15) in absolute value. Prices around
    100, smoothing factors in [0, 1] and EMA differences are far inside it.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import NewType

import numpy as np

from .exceptions import FixedPointDomainError, FixedPointDivisionError

Q16_16 = NewType("Q16_16", int)

FRACTIONAL_BITS = 16
SCALE = 1 << FRACTIONAL_BITS
SAFE_MAGNITUDE = 1 << 15


def _narrow(value: int) -> Q16_16:
    """Narrow a 64-bit intermediate to int32 the way a C cast does (wrap)."""
    try:
        wide = np.int64(value)
    except OverflowError as e:
        raise FixedPointDomainError(f"Intermediate {value} exceeds 64 bits") from e
    return Q16_16(int(wide.astype(np.int32)))


def to_fixed(x: float) -> Q16_16:
    """
    Convert a float to Q16.16, rounding half away from zero.

    Args:
        x: Real value; |x| must stay below SAFE_MAGNITUDE

    Returns:
        Q16.16 value

    Raises:
        FixedPointDomainError: If x is NaN or infinite
    """
    product = x * SCALE
    if not math.isfinite(product):
        raise FixedPointDomainError(f"Cannot convert {x!r} to Q16.16")

    # Decimal(float) is exact, so this is llround() on the scaled product
    scaled = Decimal(product).to_integral_value(rounding=ROUND_HALF_UP)
    return _narrow(int(scaled))


def to_float(q: Q16_16) -> float:
    """Convert a Q16.16 value back to float (exact division by 2^16)."""
    return q / SCALE


def qadd(a: Q16_16, b: Q16_16) -> Q16_16:
    return _narrow(a + b)


def qsub(a: Q16_16, b: Q16_16) -> Q16_16:
    return _narrow(a - b)


def qmul(a: Q16_16, b: Q16_16) -> Q16_16:
    """
    Multiply two Q16.16 values.

    The product is formed at full width and then shifted right arithmetically,
    so the fractional remainder is dropped toward negative infinity.
    """
    return _narrow((int(a) * int(b)) >> FRACTIONAL_BITS)


def qdiv(a: Q16_16, b: Q16_16) -> Q16_16:
    """
    Divide two Q16.16 values.

    The numerator is shifted left by 16 before dividing. The quotient
    truncates toward zero (C integer division), not toward negative infinity.

    Raises:
        FixedPointDivisionError: If b is zero
    """
    if b == 0:
        raise FixedPointDivisionError("Q16.16 division by zero")

    numerator = int(a) << FRACTIONAL_BITS
    quotient = abs(numerator) // abs(int(b))
    if (numerator < 0) != (b < 0):
        quotient = -quotient
    return _narrow(quotient)
