"""
Decision Engine Demo

Demonstrates how to:
1. Create and configure the decision engine
2. Feed it hand-built order book snapshots
3. Drive the pure state transition directly
4. Run a synthetic feed and inspect the engine state
"""

from trend_engine.decision import DecisionEngine, EngineParams, EngineState, advance
from trend_engine.market_data import Snapshot, generate_feed, noisy_triangle_wave


def quote(t: int, mid: float, bid_qty: float, ask_qty: float) -> Snapshot:
    return Snapshot.top_of_book(t, mid - 0.05, bid_qty, mid + 0.05, ask_qty)


def demo_round_trip():
    """Demo 1: seed, buy on an up-move, then flip on a sharp drop."""
    print("\n" + "=" * 60)
    print("DEMO 1: Round trip")
    print("=" * 60)

    engine = DecisionEngine(alpha_fast=0.7, alpha_slow=0.1, imbalance_threshold=0.1)
    ticks = [
        quote(1, 100.00, 10, 10),   # seed, balanced book
        quote(2, 100.05, 15, 5),    # up-move, bid-heavy -> BUY
        quote(3, 99.00, 5, 15),     # drop, ask-heavy -> SELL (flat)
        quote(4, 99.00, 5, 15),     # still falling -> SELL (short)
        quote(5, 99.00, 5, 15),     # already short -> NONE
    ]

    for snapshot in ticks:
        result = engine.process(snapshot)
        print(
            f"  t={result.timestamp:<3} {result.side.value:<5} "
            f"price={result.price:<9.4f} pnl={result.pnl:+.4f} "
            f"position={engine.state.position:+d}"
        )


def demo_pure_transition():
    """Demo 2: the same logic as a pure function over explicit state."""
    print("\n" + "=" * 60)
    print("DEMO 2: Pure transition")
    print("=" * 60)

    params = EngineParams.create(alpha_fast=0.7, alpha_slow=0.1, imbalance_threshold=0.1)
    state = EngineState.initial()

    for snapshot in (quote(1, 100.0, 15, 5), quote(2, 100.1, 15, 5)):
        state, result = advance(params, state, snapshot)
        print(f"  t={result.timestamp} side={result.side.value} cash={state.cash:.2f} ema={state.ema}")


def demo_noisy_feed():
    """Demo 3: 400 ticks of the noisy triangle feed."""
    print("\n" + "=" * 60)
    print("DEMO 3: Noisy triangle feed")
    print("=" * 60)

    engine = DecisionEngine(alpha_fast=0.7, alpha_slow=0.1, imbalance_threshold=0.1)
    trades = 0
    result = None
    for snapshot in generate_feed(noisy_triangle_wave, 400):
        result = engine.process(snapshot)
        trades += result.is_trade

    print(f"  trades={trades} final_pnl={result.pnl:+.4f}")
    print(f"  stats={engine.get_stats()}")


if __name__ == '__main__':
    demo_round_trip()
    demo_pure_transition()
    demo_noisy_feed()
