"""
Unit tests for the synthetic order book feeds.
"""

import pytest

from trend_engine.analytics.order_book import imbalance, mid_price
from trend_engine.market_data.feeds import (
    FEEDS,
    PERIOD,
    generate_feed,
    noisy_triangle_wave,
    rand01,
    triangle_wave,
)


# ============================================================================
# Triangle Wave Tests
# ============================================================================

@pytest.mark.parametrize("t, expected_mid", [
    (0, 99.5),
    (10, 100.0),
    (20, 100.5),
    (30, 100.0),
    (40, 99.5),
])
def test_triangle_wave_prices(t, expected_mid):
    snapshot = triangle_wave(t)
    assert snapshot.timestamp == t
    assert mid_price(snapshot) == pytest.approx(expected_mid)
    assert snapshot.best_ask.price - snapshot.best_bid.price == pytest.approx(0.1)


def test_triangle_wave_imbalance_follows_leg():
    rising = triangle_wave(5)
    falling = triangle_wave(25)
    assert (rising.best_bid.qty, rising.best_ask.qty) == (15.0, 5.0)
    assert (falling.best_bid.qty, falling.best_ask.qty) == (5.0, 15.0)
    assert imbalance(rising) == pytest.approx(0.5)
    assert imbalance(falling) == pytest.approx(-0.5)


def test_triangle_wave_is_periodic():
    for t in range(PERIOD):
        assert mid_price(triangle_wave(t)) == pytest.approx(mid_price(triangle_wave(t + PERIOD)))


# ============================================================================
# Noisy Triangle Wave Tests
# ============================================================================

def test_rand01_is_deterministic_and_bounded():
    assert rand01(0) == 12345 / 32767.0
    assert rand01(1000) == rand01(1000)
    for key in range(-50, 5000):
        assert 0.0 <= rand01(key) <= 1.0


def test_noisy_triangle_wave_stays_in_band():
    for t in range(1, 401):
        snapshot = noisy_triangle_wave(t)
        assert snapshot.timestamp == t
        # centre 100 + drift (<= 0.2), amplitude <= 0.6, noise <= 0.02
        assert 99.35 < mid_price(snapshot) < 100.85


def test_noisy_triangle_wave_is_reproducible():
    assert noisy_triangle_wave(123) == noisy_triangle_wave(123)


def test_noisy_triangle_wave_quantities():
    assert noisy_triangle_wave(41).best_bid.qty == 15.0
    assert noisy_triangle_wave(61).best_ask.qty == 15.0


# ============================================================================
# Feed Generation Tests
# ============================================================================

def test_generate_feed_yields_consecutive_ticks():
    feed = generate_feed(triangle_wave, 5, start=3)
    assert [s.timestamp for s in feed] == [3, 4, 5, 6, 7]


def test_generate_feed_is_lazy():
    calls = []

    def recording(t):
        calls.append(t)
        return triangle_wave(t)

    feed = generate_feed(recording, 1000)
    next(feed)
    assert calls == [1]


def test_generate_feed_rejects_negative_ticks():
    with pytest.raises(ValueError):
        list(generate_feed(triangle_wave, -1))


def test_feed_registry():
    assert FEEDS == {'triangle': triangle_wave, 'noisy_triangle': noisy_triangle_wave}
