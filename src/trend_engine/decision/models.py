"""
Decision output data structures.
"""

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    """Trade side emitted for a tick."""
    BUY = "BUY"
    SELL = "SELL"
    NONE = "NONE"


@dataclass(frozen=True)
class TradeResult:
    """
    Outcome of processing one snapshot.

    price is the execution price (0.0 when side is NONE); pnl is the
    mark-to-market P&L against starting capital after this tick.
    """
    timestamp: int
    side: Side
    price: float
    pnl: float

    @property
    def is_trade(self) -> bool:
        return self.side is not Side.NONE
