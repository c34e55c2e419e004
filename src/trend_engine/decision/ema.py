"""
Fixed-point EMA state machine.

Two states:
- Uninitialized: no observation yet
- Running: fast and slow EMAs in Q16.16

The first observation seeds both EMAs with the mid price (no decay from
zero); afterwards each update applies new = a*x + (1 - a)*old in Q16.16.
"""

from dataclasses import dataclass
from typing import Union

from ..core.fixed_point import Q16_16, qadd, qmul, qsub, to_fixed

ONE_FX = to_fixed(1.0)


@dataclass(frozen=True)
class Uninitialized:
    """No mid price observed yet."""
    pass


@dataclass(frozen=True)
class Running:
    """Seeded EMA pair."""
    fast: Q16_16
    slow: Q16_16

    @property
    def diff(self) -> Q16_16:
        """Fast minus slow, in Q16.16."""
        return qsub(self.fast, self.slow)


EmaState = Union[Uninitialized, Running]


def _step(ema: Q16_16, observation: Q16_16, alpha: Q16_16) -> Q16_16:
    return qadd(qmul(alpha, observation), qmul(qsub(ONE_FX, alpha), ema))


def update_emas(
    state: EmaState,
    mid_fx: Q16_16,
    alpha_fast_fx: Q16_16,
    alpha_slow_fx: Q16_16
) -> Running:
    """
    Advance the EMA pair with a new mid price.

    Args:
        state: Current EMA state
        mid_fx: Mid price in Q16.16
        alpha_fast_fx: Fast smoothing factor in Q16.16
        alpha_slow_fx: Slow smoothing factor in Q16.16

    Returns:
        Running state after the update
    """
    if isinstance(state, Uninitialized):
        return Running(fast=mid_fx, slow=mid_fx)

    return Running(
        fast=_step(state.fast, mid_fx, alpha_fast_fx),
        slow=_step(state.slow, mid_fx, alpha_slow_fx),
    )
