"""
Utilities: structured logging and report formatting.
"""

from .logger import (
    JSONFormatter,
    PerformanceLogger,
    TradingLogger,
    get_performance_logger,
    get_trading_logger,
    setup_logging,
)
from .formatters import format_summary, format_trade_table

__all__ = [
    'JSONFormatter',
    'PerformanceLogger',
    'TradingLogger',
    'get_performance_logger',
    'get_trading_logger',
    'setup_logging',
    'format_summary',
    'format_trade_table',
]
