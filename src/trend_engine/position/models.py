"""
Position data models and bookkeeping.

The engine trades a single unit and never pyramids, so the net position is
always one of SHORT (-1), FLAT (0) or LONG (+1). A buy is allowed from FLAT
or SHORT, a sell from FLAT or LONG; a repeated signal in the direction
already held is ignored.
"""

from dataclasses import dataclass, replace
from enum import Enum

DEFAULT_STARTING_CAPITAL = 100000.0


class PositionState(int, Enum):
    """Net position states."""
    SHORT = -1
    FLAT = 0
    LONG = 1


@dataclass(frozen=True)
class PositionLedger:
    """
    Cash and net position after a sequence of single-unit fills.

    Ledgers are immutable; buy() and sell() return the updated ledger.
    """
    cash: float = DEFAULT_STARTING_CAPITAL
    position: int = 0

    @property
    def state(self) -> PositionState:
        return PositionState(self.position)

    @property
    def can_buy(self) -> bool:
        return self.position <= 0

    @property
    def can_sell(self) -> bool:
        return self.position >= 0

    def buy(self, price: float) -> "PositionLedger":
        """Buy one unit at price (pay cash, position + 1)."""
        if not self.can_buy:
            raise ValueError(f"Cannot buy while {self.state.name}: position cap is one unit")
        return replace(self, cash=self.cash - price, position=self.position + 1)

    def sell(self, price: float) -> "PositionLedger":
        """Sell one unit at price (receive cash, position - 1)."""
        if not self.can_sell:
            raise ValueError(f"Cannot sell while {self.state.name}: position cap is one unit")
        return replace(self, cash=self.cash + price, position=self.position - 1)

    def mark_to_market(self, mid: float, starting_capital: float) -> float:
        """P&L = cash + position * mid - starting capital."""
        return self.cash + self.position * mid - starting_capital
