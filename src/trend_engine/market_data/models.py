"""
Order book snapshot data models.

Snapshots are transient value objects: one per tick, immutable, with levels
already sorted best-first by the producer (index 0 = best bid / best ask).
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.exceptions import EmptyBookError


@dataclass(frozen=True)
class PriceLevel:
    """A single book level (price, quantity)."""
    price: float
    qty: float


@dataclass(frozen=True)
class Snapshot:
    """
    Top-of-book observation at one logical tick.

    Bids and asks are stored as tuples so the snapshot stays hashable and
    cannot be mutated after it is handed to the engine.
    """
    timestamp: int
    bids: Tuple[PriceLevel, ...]
    asks: Tuple[PriceLevel, ...]

    def __post_init__(self):
        object.__setattr__(self, 'bids', tuple(self.bids))
        object.__setattr__(self, 'asks', tuple(self.asks))

    @property
    def best_bid(self) -> PriceLevel:
        if not self.bids:
            raise EmptyBookError(f"Snapshot t={self.timestamp} has no bid levels")
        return self.bids[0]

    @property
    def best_ask(self) -> PriceLevel:
        if not self.asks:
            raise EmptyBookError(f"Snapshot t={self.timestamp} has no ask levels")
        return self.asks[0]

    @classmethod
    def top_of_book(
        cls,
        timestamp: int,
        bid_price: float,
        bid_qty: float,
        ask_price: float,
        ask_qty: float
    ) -> "Snapshot":
        """Build a one-level-per-side snapshot."""
        return cls(
            timestamp=timestamp,
            bids=(PriceLevel(bid_price, bid_qty),),
            asks=(PriceLevel(ask_price, ask_qty),),
        )
