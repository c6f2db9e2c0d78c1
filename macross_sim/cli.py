"""
Command line entry point: simulate a random walk and print the crossover report.

Defaults come from SimulationConfig, then MACROSS_* environment variables,
then command line options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from macross import ConfigurationError, SimulationConfig
from macross_sim.engine import run_simulation
from macross_sim.report import print_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="macross",
        description="Backtest a moving-average crossover rule on a synthetic random walk.",
    )
    p.add_argument("--days", dest="n_days", type=int, default=None, help="Number of simulated days (default 200).")
    p.add_argument("--short", dest="short_window", type=int, default=None, help="Short SMA window (default 10).")
    p.add_argument("--long", dest="long_window", type=int, default=None, help="Long SMA window (default 30).")
    p.add_argument("--cash", dest="initial_cash", type=float, default=None, help="Starting cash (default 10000).")
    p.add_argument("--start-price", dest="start_price", type=float, default=None, help="Random walk start (default 100).")
    p.add_argument("--step-std", dest="step_std", type=float, default=None, help="Daily step std dev (default 1.5).")
    p.add_argument("--floor", dest="price_floor", type=float, default=None, help="Price floor (default 10).")
    p.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run.")
    p.add_argument("--metrics", action="store_true", help="Print a run summary before the final value.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default WARNING).",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        config = SimulationConfig.from_env().with_overrides(
            n_days=args.n_days,
            short_window=args.short_window,
            long_window=args.long_window,
            initial_cash=args.initial_cash,
            start_price=args.start_price,
            step_std=args.step_std,
            price_floor=args.price_floor,
            seed=args.seed,
        )
    except ConfigurationError as e:
        print(f"macross: configuration error: {e}", file=sys.stderr)
        return 2
    logger.debug("Config: %s", config)

    result = run_simulation(config)
    print_report(result, show_metrics=args.metrics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
