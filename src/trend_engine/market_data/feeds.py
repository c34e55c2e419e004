"""
Synthetic Order Book Feeds

Deterministic price processes used to exercise the decision engine:
1. triangle_wave - clean triangle between 99.5 and 100.5
2. noisy_triangle_wave - triangle with drift, per-cycle amplitude jitter
   and per-tick noise from a fixed-seed LCG

Both feeds bias the book toward the bid on the rising leg and toward the
ask on the falling leg, so imbalance agrees with the trend.
"""

import logging
from typing import Callable, Dict, Iterator

from .models import Snapshot

logger = logging.getLogger(__name__)

FeedGenerator = Callable[[int], Snapshot]

PERIOD = 40
SPREAD = 0.05
BASE_QTY = 10.0
QTY_SKEW = 5.0


def _skewed_quantities(rising: bool):
    """Bid/ask quantities: bid-heavy while rising, ask-heavy while falling."""
    direction = 1 if rising else -1
    return BASE_QTY + QTY_SKEW * direction, BASE_QTY - QTY_SKEW * direction


def _quote(t: int, base: float, rising: bool) -> Snapshot:
    bid_qty, ask_qty = _skewed_quantities(rising)
    return Snapshot.top_of_book(
        timestamp=t,
        bid_price=base - SPREAD,
        bid_qty=bid_qty,
        ask_price=base + SPREAD,
        ask_qty=ask_qty,
    )


def triangle_wave(t: int) -> Snapshot:
    """
    Clean triangle wave: 99.5 -> 100.5 over 20 ticks, then back down.

    Args:
        t: Tick number (also used as the snapshot timestamp)
    """
    half = PERIOD // 2
    phase = t % PERIOD

    if phase < half:
        base = 99.5 + (phase / half) * 1.0
    else:
        base = 100.5 - ((phase - half) / half) * 1.0

    return _quote(t, base, rising=phase < half)


def rand01(key: int) -> float:
    """Deterministic pseudo-random value in [0, 1] (32-bit LCG step)."""
    x = (key * 1103515245 + 12345) & 0xFFFFFFFF
    return (x & 0x7FFF) / 32767.0


def noisy_triangle_wave(t: int) -> Snapshot:
    """
    Triangle wave with slow drift, amplitude jitter and tick noise.

    - Centre drifts up by 0.0005 per tick
    - Amplitude is 0.5 +/- 0.1, redrawn once per cycle
    - Each tick adds up to +/- 0.02 of noise
    """
    phase = t % PERIOD
    half = PERIOD / 2.0

    drift = 0.0005 * t

    cycle = t // PERIOD
    amp = 0.5 + (rand01(cycle + 1000) - 0.5) * 0.2

    if phase < half:
        u = phase / half
    else:
        u = 2.0 - (phase / half)
    tri_norm = 2.0 * u - 1.0

    base = (100.0 + drift) + amp * tri_norm
    base += (rand01(t + 5000) - 0.5) * 0.04

    return _quote(t, base, rising=phase < half)


FEEDS: Dict[str, FeedGenerator] = {
    'triangle': triangle_wave,
    'noisy_triangle': noisy_triangle_wave,
}


def generate_feed(generator: FeedGenerator, ticks: int, start: int = 1) -> Iterator[Snapshot]:
    """
    Lazily yield snapshots for ticks start .. start + ticks - 1.

    Args:
        generator: Feed function mapping a tick number to a snapshot
        ticks: Number of snapshots to produce
        start: First tick number
    """
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")

    logger.debug(f"Generating {ticks} ticks from {generator.__name__} starting at t={start}")
    for t in range(start, start + ticks):
        yield generator(t)
