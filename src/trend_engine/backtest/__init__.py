"""
Backtest harness: run synthetic feeds through the decision engine.
"""

from .runner import (
    ProfitTestResult,
    TradeRow,
    max_drawdown,
    run_default_suite,
    run_profit_test,
)

__all__ = [
    'ProfitTestResult',
    'TradeRow',
    'max_drawdown',
    'run_default_suite',
    'run_profit_test',
]
