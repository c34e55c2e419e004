"""
Decision Engine - EMA crossover + order book imbalance strategy.

Per snapshot:
1. Compute mid price and imbalance from the book
2. Update fast/slow EMAs in Q16.16 (first tick seeds both)
3. Arm BUY when imbalance > threshold and fast - slow > deadband,
   SELL when imbalance < -threshold and fast - slow < -deadband
4. Fill one unit at the touch if the position cap allows it
5. Mark the position to the mid price

State is an explicit immutable value: advance() is a pure transition from
(state, snapshot) to (new state, result), and DecisionEngine owns the single
current state. The engine is not reentrant; callers feeding it from several
threads must serialise calls to process().
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from ..analytics.order_book import imbalance, mid_price
from ..config.settings import EngineConfig
from ..core.fixed_point import Q16_16, to_fixed, to_float
from ..market_data.models import Snapshot
from ..position.models import DEFAULT_STARTING_CAPITAL, PositionLedger
from ..utils.logger import get_trading_logger
from .ema import EmaState, Running, Uninitialized, update_emas
from .models import Side, TradeResult

logger = logging.getLogger(__name__)

# Absolute EMA spread required before a signal can fire
EMA_DEADBAND = 0.01


@dataclass(frozen=True)
class EngineParams:
    """Immutable engine configuration, kept both as float and as Q16.16."""
    alpha_fast: float
    alpha_slow: float
    imbalance_threshold: float
    starting_capital: float
    alpha_fast_fx: Q16_16
    alpha_slow_fx: Q16_16
    threshold_fx: Q16_16

    @classmethod
    def create(
        cls,
        alpha_fast: float,
        alpha_slow: float,
        imbalance_threshold: float,
        starting_capital: float = DEFAULT_STARTING_CAPITAL
    ) -> "EngineParams":
        for name, alpha in (('alpha_fast', alpha_fast), ('alpha_slow', alpha_slow)):
            if not 0.0 <= alpha <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {alpha}")
        if imbalance_threshold < 0.0:
            raise ValueError(f"imbalance_threshold must be >= 0, got {imbalance_threshold}")

        return cls(
            alpha_fast=alpha_fast,
            alpha_slow=alpha_slow,
            imbalance_threshold=imbalance_threshold,
            starting_capital=starting_capital,
            alpha_fast_fx=to_fixed(alpha_fast),
            alpha_slow_fx=to_fixed(alpha_slow),
            threshold_fx=to_fixed(imbalance_threshold),
        )

    @property
    def effective_threshold(self) -> float:
        """Threshold as actually compared: quantized through Q16.16."""
        return to_float(self.threshold_fx)


@dataclass(frozen=True)
class EngineState:
    """Everything the engine carries from one tick to the next."""
    ema: EmaState = field(default_factory=Uninitialized)
    ledger: PositionLedger = field(default_factory=PositionLedger)
    last_timestamp: Optional[int] = None

    @classmethod
    def initial(cls, starting_capital: float = DEFAULT_STARTING_CAPITAL) -> "EngineState":
        return cls(ledger=PositionLedger(cash=starting_capital, position=0))

    @property
    def initialized(self) -> bool:
        return isinstance(self.ema, Running)

    @property
    def cash(self) -> float:
        return self.ledger.cash

    @property
    def position(self) -> int:
        return self.ledger.position


def advance(
    params: EngineParams,
    state: EngineState,
    snapshot: Snapshot
) -> Tuple[EngineState, TradeResult]:
    """
    Apply one snapshot to the engine state.

    Args:
        params: Engine configuration
        state: State before this tick
        snapshot: Book observation with at least one level per side

    Returns:
        Tuple of (state after this tick, trade result)

    Raises:
        EmptyBookError: If the snapshot is missing a side
    """
    mid = mid_price(snapshot)
    imb = imbalance(snapshot)

    ema = update_emas(state.ema, to_fixed(mid), params.alpha_fast_fx, params.alpha_slow_fx)
    ema_diff = to_float(ema.diff)
    threshold = params.effective_threshold

    buy_signal = imb > threshold and ema_diff > EMA_DEADBAND
    sell_signal = imb < -threshold and ema_diff < -EMA_DEADBAND

    ledger = state.ledger
    if buy_signal and ledger.can_buy:
        price = snapshot.best_ask.price
        ledger = ledger.buy(price)
        side = Side.BUY
    elif sell_signal and ledger.can_sell:
        price = snapshot.best_bid.price
        ledger = ledger.sell(price)
        side = Side.SELL
    else:
        price = 0.0
        side = Side.NONE

    pnl = ledger.mark_to_market(mid, params.starting_capital)

    logger.debug(
        f"t={snapshot.timestamp} mid={mid:.4f} imb={imb:+.4f} "
        f"ema_diff={ema_diff:+.6f} side={side.value} pos={ledger.position} pnl={pnl:.4f}",
        extra={'timestamp_tick': snapshot.timestamp, 'imbalance': imb, 'ema_diff': ema_diff}
    )

    new_state = EngineState(ema=ema, ledger=ledger, last_timestamp=snapshot.timestamp)
    return new_state, TradeResult(timestamp=snapshot.timestamp, side=side, price=price, pnl=pnl)


class DecisionEngine:
    """
    Stateful trend-following decision engine.

    Holds fast/slow EMAs, cash and a single-unit position. Each call to
    process() consumes one snapshot and returns one TradeResult; the state is
    created once per run and never reset.
    """

    def __init__(
        self,
        alpha_fast: float,
        alpha_slow: float,
        imbalance_threshold: float,
        starting_capital: float = DEFAULT_STARTING_CAPITAL,
        name: str = "DecisionEngine"
    ):
        """
        Initialize decision engine.

        Args:
            alpha_fast: Fast EMA smoothing factor (higher = more reactive)
            alpha_slow: Slow EMA smoothing factor (baseline trend)
            imbalance_threshold: Minimum |imbalance| to arm a signal
            starting_capital: Initial cash balance (default: 100000)
            name: Engine name for logging
        """
        self.params = EngineParams.create(
            alpha_fast=alpha_fast,
            alpha_slow=alpha_slow,
            imbalance_threshold=imbalance_threshold,
            starting_capital=starting_capital,
        )
        self.name = name
        self._state = EngineState.initial(starting_capital)

        self.logger = logging.getLogger(f"{__name__}.{name}")
        self.trading_logger = get_trading_logger(f"{__name__}.{name}.trades")
        self.logger.info(
            f"DecisionEngine initialized: alpha_fast={alpha_fast}, alpha_slow={alpha_slow}, "
            f"threshold={imbalance_threshold} (effective {self.params.effective_threshold:.6f}), "
            f"capital={starting_capital:,.2f}"
        )

    @classmethod
    def from_config(cls, config: EngineConfig, name: str = "DecisionEngine") -> "DecisionEngine":
        """Build an engine from a validated EngineConfig."""
        return cls(
            alpha_fast=config.alpha_fast,
            alpha_slow=config.alpha_slow,
            imbalance_threshold=config.imbalance_threshold,
            starting_capital=config.starting_capital,
            name=name,
        )

    @property
    def state(self) -> EngineState:
        """Current engine state (immutable snapshot)."""
        return self._state

    def process(self, snapshot: Snapshot) -> TradeResult:
        """
        Consume one snapshot and return the trade decision and P&L.

        Args:
            snapshot: Book observation, timestamps non-decreasing

        Returns:
            TradeResult for this tick
        """
        previous = self._state
        if previous.last_timestamp is not None and snapshot.timestamp < previous.last_timestamp:
            self.logger.warning(
                f"Out-of-order snapshot: t={snapshot.timestamp} after t={previous.last_timestamp}"
            )

        self._state, result = advance(self.params, previous, snapshot)

        if result.is_trade:
            ledger = self._state.ledger
            self.trading_logger.trade_signal(
                snapshot.timestamp, result.side.value, result.price, pnl=result.pnl
            )
            self.trading_logger.position_event(
                snapshot.timestamp, ledger.state.name, ledger.position, ledger.cash
            )

        return result

    def get_stats(self) -> dict:
        """
        Get decision engine configuration and current state.

        Returns:
            Dict with engine configuration and state
        """
        state = self._state
        return {
            'name': self.name,
            'alpha_fast': self.params.alpha_fast,
            'alpha_slow': self.params.alpha_slow,
            'imbalance_threshold': self.params.imbalance_threshold,
            'starting_capital': self.params.starting_capital,
            'initialized': state.initialized,
            'position': state.position,
            'cash': state.cash,
            'last_timestamp': state.last_timestamp,
        }
