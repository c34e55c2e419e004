"""
Profit-test harness.

Feeds a synthetic snapshot stream through a fresh DecisionEngine and
collects one row per tick. A test passes when the engine actually traded
and finished with positive P&L.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..config.settings import AppConfig, EngineConfig
from ..decision.engine import DecisionEngine
from ..decision.models import Side
from ..market_data.feeds import FEEDS, FeedGenerator, generate_feed
from ..utils.logger import get_performance_logger

logger = logging.getLogger(__name__)
perf = get_performance_logger(__name__)


@dataclass(frozen=True)
class TradeRow:
    """One logged tick (including NONE)."""
    timestamp: int
    side: Side
    price: float
    pnl: float


@dataclass
class ProfitTestResult:
    """Outcome of one profit test."""
    name: str
    passed: bool = False
    final_pnl: float = 0.0
    num_trades: int = 0
    micros: int = 0
    max_drawdown: float = 0.0
    rows: List[TradeRow] = field(default_factory=list)


def max_drawdown(pnls: List[float]) -> float:
    """Largest peak-to-trough fall of a P&L series (0.0 if it never falls)."""
    if not pnls:
        return 0.0
    series = np.asarray(pnls, dtype=float)
    running_peak = np.maximum.accumulate(series)
    return float(np.max(running_peak - series))


def run_profit_test(
    name: str,
    generator: FeedGenerator,
    ticks: int,
    engine_config: Optional[EngineConfig] = None
) -> ProfitTestResult:
    """
    Run one feed through a new engine.

    The feed is materialised before timing so only processing is measured.

    Args:
        name: Test name for reporting
        generator: Feed function (tick -> snapshot)
        ticks: Number of ticks, starting at t=1
        engine_config: Engine parameters (defaults: 0.7 / 0.1 / 0.1)

    Returns:
        ProfitTestResult with per-tick rows
    """
    engine = DecisionEngine.from_config(engine_config or EngineConfig(), name=name)
    feed = list(generate_feed(generator, ticks))

    result = ProfitTestResult(name=name)

    with perf.timer("profit_test", test=name, ticks=ticks):
        start = time.perf_counter()
        for snapshot in feed:
            trade = engine.process(snapshot)
            if trade.is_trade:
                result.num_trades += 1
            result.rows.append(TradeRow(trade.timestamp, trade.side, trade.price, trade.pnl))
            result.final_pnl = trade.pnl
        result.micros = int((time.perf_counter() - start) * 1e6)

    result.max_drawdown = max_drawdown([row.pnl for row in result.rows])
    result.passed = result.num_trades > 0 and result.final_pnl > 0.0

    logger.info(
        f"{name}: {'PASS' if result.passed else 'FAIL'} | pnl={result.final_pnl:.4f} "
        f"trades={result.num_trades} time={result.micros}us"
    )
    return result


def run_default_suite(config: Optional[AppConfig] = None) -> List[ProfitTestResult]:
    """
    Run a profit test for every enabled feed.

    Args:
        config: Application configuration (defaults if omitted)

    Returns:
        One result per enabled feed, in configured order
    """
    config = config or AppConfig()
    results = []
    for feed_name in config.feeds.enabled_feeds:
        test_name = f"{_camel(feed_name)}Wave_Test"
        results.append(
            run_profit_test(test_name, FEEDS[feed_name], config.feeds.ticks, config.engine)
        )
    return results


def _camel(name: str) -> str:
    return ''.join(part.capitalize() for part in name.split('_'))
