"""
Moving-average crossover demo on a seeded random walk.

Demonstrates: generate prices → run strategy → ledger updates → report,
with an observer collecting the trade log and a per-day result frame.
"""

from macross import MovingAverageCrossoverStrategy, Portfolio, RandomWalk, generate_prices
from macross_sim import SimulationEngine, print_report


def main() -> None:
    # Seeded so repeated runs print the same report
    prices = generate_prices(250, RandomWalk(start_price=100.0, step_std=1.5), seed=7)

    fills = []
    engine = SimulationEngine(
        strategy=MovingAverageCrossoverStrategy(short_window=10, long_window=30),
        portfolio=Portfolio(cash=10_000.0),
        observers=[lambda trade, portfolio: fills.append(trade)],
    )
    result = engine.run(prices)

    print_report(result, show_metrics=True)
    print(f"\nObserved {len(fills)} trades")
    print(result.to_frame().tail())


if __name__ == "__main__":
    main()
