"""
Unit tests for Q16.16 fixed-point arithmetic.

Tests:
- Float conversion and rounding direction
- Round-trip accuracy
- Multiplication/division truncation rules
- Domain errors
"""

import math
import random

import pytest

from trend_engine.core.exceptions import FixedPointDivisionError, FixedPointDomainError
from trend_engine.core.fixed_point import (
    SCALE,
    qadd,
    qdiv,
    qmul,
    qsub,
    to_fixed,
    to_float,
)

ULP = 2.0 ** -16
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


# ============================================================================
# Conversion Tests
# ============================================================================

def test_to_fixed_exact_values():
    assert SCALE == 65536
    assert to_fixed(0.0) == 0
    assert to_fixed(1.0) == 65536
    assert to_fixed(-1.0) == -65536
    assert to_fixed(100.5) == 100 * 65536 + 32768


def test_to_fixed_rounds_to_nearest():
    """0.1 * 65536 = 6553.6 rounds up, not truncates."""
    assert to_fixed(0.1) == 6554
    assert to_fixed(-0.1) == -6554
    assert to_fixed(0.7) == 45875  # 45875.2


def test_to_fixed_ties_round_away_from_zero():
    assert to_fixed(0.5 / SCALE) == 1
    assert to_fixed(-0.5 / SCALE) == -1
    assert to_fixed(2.5 / SCALE) == 3
    assert to_fixed(-2.5 / SCALE) == -3


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 1e308])
def test_to_fixed_rejects_unrepresentable(value):
    with pytest.raises(FixedPointDomainError):
        to_fixed(value)


def test_to_fixed_wraps_outside_safe_range():
    """2^15 does not fit in Q16.16 and wraps like a C int32 cast."""
    assert to_fixed(32768.0) == INT32_MIN


def test_to_float_is_exact_division():
    assert to_float(65536) == 1.0
    assert to_float(1) == ULP
    assert to_float(-98304) == -1.5


def test_round_trip_within_one_unit():
    for i in range(-100000, 100001):
        x = i / 100.0
        assert abs(to_float(to_fixed(x)) - x) <= ULP


# ============================================================================
# Add / Subtract Tests
# ============================================================================

def test_add_and_sub():
    a = to_fixed(100.25)
    b = to_fixed(0.75)
    assert qadd(a, b) == to_fixed(101.0)
    assert qsub(a, b) == to_fixed(99.5)
    assert qsub(b, a) == to_fixed(-99.5)


def test_add_overflow_wraps():
    assert qadd(INT32_MAX, 1) == INT32_MIN
    assert qsub(INT32_MIN, 1) == INT32_MAX


# ============================================================================
# Multiplication Tests
# ============================================================================

def test_mul_exact_products():
    assert qmul(to_fixed(2.0), to_fixed(3.5)) == to_fixed(7.0)
    assert qmul(to_fixed(-1.5), to_fixed(2.0)) == to_fixed(-3.0)
    assert qmul(to_fixed(-4.0), to_fixed(-0.25)) == to_fixed(1.0)


def test_mul_shift_rounds_toward_negative_infinity():
    assert qmul(1, 1) == 0
    assert qmul(-1, 1) == -1
    assert qmul(to_fixed(0.5), 3) == 1     # 1.5 -> 1
    assert qmul(to_fixed(-0.5), 3) == -2   # -1.5 -> -2


def test_mul_widens_before_shifting():
    """Both operands near 100: a 32-bit intermediate would overflow."""
    a = to_fixed(99.75)
    b = to_fixed(100.25)
    assert qmul(a, b) == to_fixed(99.75 * 100.25)


def test_mul_approximates_real_product():
    rng = random.Random(1234)
    for _ in range(5000):
        a = rng.uniform(-100.0, 100.0)
        b = rng.uniform(-100.0, 100.0)
        fa, fb = to_fixed(a), to_fixed(b)
        product = to_float(qmul(fa, fb))

        # One unit of truncation against the quantized operands
        exact = to_float(fa) * to_float(fb)
        assert exact - ULP < product <= exact

        # Quantizing the inputs adds at most half a unit per operand
        assert abs(product - a * b) <= (abs(a) + abs(b) + 2) * ULP


# ============================================================================
# Division Tests
# ============================================================================

def test_div_basic():
    assert qdiv(to_fixed(7.0), to_fixed(2.0)) == to_fixed(3.5)
    assert qdiv(to_fixed(1.0), to_fixed(4.0)) == to_fixed(0.25)


def test_div_truncates_toward_zero():
    assert qdiv(to_fixed(1.0), to_fixed(3.0)) == 21845
    assert qdiv(to_fixed(-1.0), to_fixed(3.0)) == -21845
    assert qdiv(to_fixed(1.0), to_fixed(-3.0)) == -21845
    assert qdiv(to_fixed(-1.0), to_fixed(-3.0)) == 21845


def test_div_by_zero_is_domain_error():
    with pytest.raises(FixedPointDivisionError):
        qdiv(to_fixed(1.0), 0)

    # Also catchable as the builtin error
    with pytest.raises(ZeroDivisionError):
        qdiv(0, 0)
