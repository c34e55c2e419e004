"""
Enhanced Logging Utilities

Provides structured logging with:
- JSON formatting for machine-readable runs
- Trade and position event helpers
- Operation timing
"""

import logging
import json
import sys
import time
from datetime import datetime
from typing import Optional
from pathlib import Path
from contextlib import contextmanager

# Extra record attributes copied into JSON output when present
_EXTRA_FIELDS = (
    'timestamp_tick',
    'side',
    'price',
    'position',
    'cash',
    'pnl',
    'imbalance',
    'ema_diff',
    'operation',
    'execution_time',
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class PerformanceLogger:
    """Logger for tracking operation timings."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @contextmanager
    def timer(self, operation: str, **context):
        """Context manager that logs the elapsed wall time of a block."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            execution_time = time.perf_counter() - start_time
            extra = {'operation': operation, 'execution_time': execution_time, **context}
            self.logger.debug(f"Operation completed: {operation} in {execution_time * 1e6:.0f} us", extra=extra)


class TradingLogger:
    """Specialized logger for signal and position events."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def trade_signal(self, tick: int, side: str, price: float, **context):
        """Log an executed trade decision."""
        extra = {
            'timestamp_tick': tick,
            'side': side,
            'price': price,
            **context
        }
        self.logger.info(f"Signal: {side} @ {price:.4f} (t={tick})", extra=extra)

    def position_event(self, tick: int, event: str, position: int, cash: float, **context):
        """Log a change of net position."""
        extra = {
            'timestamp_tick': tick,
            'position': position,
            'cash': cash,
            **context
        }
        self.logger.info(f"Position {event}: position={position} cash={cash:.4f} (t={tick})", extra=extra)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON formatting

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Console output belongs to the report, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_trading_logger(name: str) -> TradingLogger:
    """Get a trading-specific logger instance."""
    return TradingLogger(name)


def get_performance_logger(name: str) -> PerformanceLogger:
    """Get a performance logger instance."""
    return PerformanceLogger(logging.getLogger(name))
