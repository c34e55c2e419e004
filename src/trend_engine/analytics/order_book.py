"""
Order Book Metrics - mid price and volume imbalance.

Calculates:
1. Mid price - midpoint of best bid and best ask
2. Imbalance - normalized bid/ask quantity difference across all levels

    Imbalance = (Bid Qty - Ask Qty) / (Bid Qty + Ask Qty + eps)
    - Positive = bid-heavy (buy pressure)
    - Negative = ask-heavy (sell pressure)
"""

from ..core.exceptions import EmptyBookError
from ..market_data.models import Snapshot

IMBALANCE_EPSILON = 1e-9


def mid_price(snapshot: Snapshot) -> float:
    """Midpoint of the best bid and best ask prices."""
    return 0.5 * (snapshot.best_bid.price + snapshot.best_ask.price)


def imbalance(snapshot: Snapshot) -> float:
    """
    Volume imbalance over every supplied level, approximately in [-1, 1].

    Raises:
        EmptyBookError: If either side has no levels
    """
    if not snapshot.bids or not snapshot.asks:
        raise EmptyBookError(
            f"Snapshot t={snapshot.timestamp} needs both sides for imbalance "
            f"(bids={len(snapshot.bids)}, asks={len(snapshot.asks)})"
        )

    # Naive left-to-right accumulation; builtin sum() compensates on 3.12+
    bid_qty = 0.0
    for level in snapshot.bids:
        bid_qty += level.qty
    ask_qty = 0.0
    for level in snapshot.asks:
        ask_qty += level.qty

    return (bid_qty - ask_qty) / (bid_qty + ask_qty + IMBALANCE_EPSILON)
