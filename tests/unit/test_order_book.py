"""
Unit tests for order book metrics and snapshot models.
"""

import random

import pytest

from trend_engine.analytics.order_book import imbalance, mid_price
from trend_engine.core.exceptions import EmptyBookError
from trend_engine.market_data.models import PriceLevel, Snapshot


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def balanced_book():
    return Snapshot.top_of_book(1, 99.95, 10.0, 100.05, 10.0)


@pytest.fixture
def deep_book():
    """Three bid levels, two ask levels, best-first."""
    return Snapshot(
        timestamp=7,
        bids=[PriceLevel(99.9, 4.0), PriceLevel(99.8, 6.0), PriceLevel(99.7, 5.0)],
        asks=[PriceLevel(100.1, 3.0), PriceLevel(100.2, 2.0)],
    )


# ============================================================================
# Snapshot Tests
# ============================================================================

def test_snapshot_is_immutable(balanced_book):
    with pytest.raises(AttributeError):
        balanced_book.timestamp = 2
    assert isinstance(balanced_book.bids, tuple)


def test_snapshot_best_levels(deep_book):
    assert deep_book.best_bid == PriceLevel(99.9, 4.0)
    assert deep_book.best_ask == PriceLevel(100.1, 3.0)


def test_snapshot_empty_side_fails_fast():
    snapshot = Snapshot(timestamp=3, bids=[], asks=[PriceLevel(100.0, 1.0)])
    with pytest.raises(EmptyBookError):
        snapshot.best_bid
    assert snapshot.best_ask.price == 100.0


# ============================================================================
# Mid Price Tests
# ============================================================================

def test_mid_price_balanced(balanced_book):
    assert mid_price(balanced_book) == pytest.approx(100.0)


def test_mid_price_uses_best_levels_only(deep_book):
    assert mid_price(deep_book) == pytest.approx(100.0)


@pytest.mark.parametrize("bids, asks", [
    ([], [PriceLevel(100.0, 1.0)]),
    ([PriceLevel(100.0, 1.0)], []),
])
def test_mid_price_requires_both_sides(bids, asks):
    with pytest.raises(EmptyBookError):
        mid_price(Snapshot(timestamp=1, bids=bids, asks=asks))


# ============================================================================
# Imbalance Tests
# ============================================================================

def test_imbalance_balanced_is_zero(balanced_book):
    assert imbalance(balanced_book) == 0.0


def test_imbalance_sums_all_levels(deep_book):
    # bids 15, asks 5
    assert imbalance(deep_book) == pytest.approx(0.5)


def test_imbalance_sign():
    bid_heavy = Snapshot.top_of_book(1, 99.95, 15.0, 100.05, 5.0)
    ask_heavy = Snapshot.top_of_book(1, 99.95, 5.0, 100.05, 15.0)
    assert imbalance(bid_heavy) > 0
    assert imbalance(ask_heavy) < 0
    assert imbalance(bid_heavy) == pytest.approx(-imbalance(ask_heavy))


def test_imbalance_zero_quantity_is_guarded():
    empty_qty = Snapshot.top_of_book(1, 99.95, 0.0, 100.05, 0.0)
    assert imbalance(empty_qty) == 0.0


def test_imbalance_one_sided_quantity_stays_below_one():
    assert 0.999 < imbalance(Snapshot.top_of_book(1, 99.95, 10.0, 100.05, 0.0)) < 1.0
    assert -1.0 < imbalance(Snapshot.top_of_book(1, 99.95, 0.0, 100.05, 10.0)) < -0.999


def test_imbalance_requires_both_sides():
    with pytest.raises(EmptyBookError):
        imbalance(Snapshot(timestamp=1, bids=[PriceLevel(99.0, 1.0)], asks=[]))


def test_imbalance_bounds_on_random_books():
    rng = random.Random(42)
    for _ in range(2000):
        bids = [PriceLevel(99.0 - i * 0.01, rng.uniform(0.0, 1000.0)) for i in range(rng.randint(1, 5))]
        asks = [PriceLevel(101.0 + i * 0.01, rng.uniform(0.0, 1000.0)) for i in range(rng.randint(1, 5))]
        snapshot = Snapshot(timestamp=1, bids=bids, asks=asks)
        total = sum(level.qty for level in bids) + sum(level.qty for level in asks)
        if total <= 0:
            continue
        assert -1.0 < imbalance(snapshot) < 1.0
