"""
Textual report: trade log in day order and the final portfolio value.
"""

from __future__ import annotations

from collections.abc import Callable

from macross import TradeKind, TradeRecord
from macross_sim.engine import SimulationResult
from macross_sim.metrics import Metrics, compute_metrics


def format_trade(trade: TradeRecord) -> str:
    """One report line (or paragraph, for the forced close) per trade."""
    if trade.kind is TradeKind.BUY:
        return (
            f"Day {trade.day} | Price: ${trade.price:.2f} | BUY SIGNAL (Golden Cross)"
            f" | Bought {trade.shares} shares."
        )
    if trade.kind is TradeKind.SELL:
        return (
            f"Day {trade.day} | Price: ${trade.price:.2f} | SELL SIGNAL (Death Cross)"
            f" | Sold {trade.shares} shares. Portfolio: ${trade.cash:.2f}"
        )
    return (
        f"\nEnd of simulation. Selling remaining {trade.shares} shares"
        f" at final price ${trade.price:.2f}"
    )


def format_metrics(metrics: Metrics) -> list[str]:
    return [
        "--- Run Summary ---",
        f"Initial value:   {metrics.initial_value:,.2f}",
        f"Final value:     {metrics.final_value:,.2f}",
        f"Total PnL:       {metrics.total_pnl:,.2f}",
        f"Total return:    {metrics.total_return_pct:.2f}%",
        f"Max drawdown:    {metrics.max_drawdown:,.2f} ({metrics.max_drawdown_pct:.2f}%)",
        f"Round trips:     {metrics.round_trips}",
    ]


def print_report(
    result: SimulationResult,
    *,
    show_metrics: bool = False,
    write: Callable[[str], None] = print,
) -> Metrics:
    """
    Print the trade log and final portfolio value.

    Parameters
    ----------
    result : SimulationResult
        Output of SimulationEngine.run().
    show_metrics : bool
        Also print the run summary before the completion banner.
    write : callable
        Line sink (default: print to stdout).

    Returns
    -------
    Metrics
        The computed metrics (e.g. for programmatic use).
    """
    metrics = compute_metrics(result.initial_cash, result.equity_curve, result.trades)
    write("--- Starting Algorithmic Trading Simulation ---")
    if result.short_window is not None and result.long_window is not None:
        write(
            f"Strategy: Moving Average Crossover ({result.short_window}-day"
            f" vs {result.long_window}-day SMA)"
        )
    write("")
    for trade in result.trades:
        write(format_trade(trade))
    if show_metrics:
        write("")
        for line in format_metrics(metrics):
            write(line)
    write("\n--- Simulation Complete ---")
    write(f"Final Portfolio Value: ${result.final_value:.2f}")
    return metrics
