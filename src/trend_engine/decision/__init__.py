"""
Decision Engine - Signal generation and position tracking.

This module implements the decision-making layer that:
1. Reads mid price and imbalance from each order book snapshot
2. Tracks fast/slow EMAs of the mid price in Q16.16 fixed point
3. Combines the EMA crossover with the imbalance into BUY/SELL/NONE
4. Keeps a single-unit position and reports mark-to-market P&L

Components:
- DecisionEngine: Owner of the engine state, one process() call per tick
- advance: Pure state transition used by DecisionEngine
- EngineParams / EngineState: Configuration and carried state
- Uninitialized / Running: EMA seeding state machine
- Side / TradeResult: Per-tick output
"""

from .engine import (
    EMA_DEADBAND,
    DecisionEngine,
    EngineParams,
    EngineState,
    advance,
)
from .ema import EmaState, Running, Uninitialized, update_emas
from .models import Side, TradeResult

__all__ = [
    # Core engine
    'DecisionEngine',
    'EngineParams',
    'EngineState',
    'advance',
    'EMA_DEADBAND',

    # EMA state machine
    'EmaState',
    'Running',
    'Uninitialized',
    'update_emas',

    # Data structures
    'Side',
    'TradeResult',
]
