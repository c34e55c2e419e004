"""
Trend Engine - EMA crossover + order book imbalance decision engine.

Consumes top-of-book snapshots, tracks fast/slow EMAs of the mid price in
Q16.16 fixed point, and emits BUY/SELL/NONE with a single-unit position and
mark-to-market P&L.
"""

from .core.exceptions import (
    EmptyBookError,
    FixedPointDivisionError,
    FixedPointDomainError,
    TrendEngineError,
)
from .decision import DecisionEngine, Side, TradeResult
from .market_data import PriceLevel, Snapshot

__version__ = "0.1.0"

__all__ = [
    'DecisionEngine',
    'Side',
    'TradeResult',
    'PriceLevel',
    'Snapshot',
    'TrendEngineError',
    'FixedPointDomainError',
    'FixedPointDivisionError',
    'EmptyBookError',
]
