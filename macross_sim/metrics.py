"""
Run summary: PnL, return and drawdown from the equity curve.

Descriptive only; no annualization or risk-adjusted ratios.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from macross import TradeKind, TradeRecord


@dataclass
class Metrics:
    """Summary figures for one simulation run."""

    initial_value: float
    final_value: float
    total_pnl: float
    total_return_pct: float
    max_drawdown: float
    max_drawdown_pct: float
    round_trips: int


def compute_metrics(
    initial_value: float,
    equity_curve: Sequence[tuple[int, float]],
    trades: Sequence[TradeRecord] = (),
) -> Metrics:
    """
    Compute summary metrics from starting cash and the per-day equity curve.

    Parameters
    ----------
    initial_value : float
        Starting cash.
    equity_curve : sequence of (day, value)
        Day-ordered portfolio values.
    trades : sequence of TradeRecord
        Trade log; every closing trade (SELL or END_OF_RUN) ends a round trip.

    Returns
    -------
    Metrics
    """
    round_trips = sum(1 for t in trades if t.kind is not TradeKind.BUY)
    if not equity_curve:
        return Metrics(
            initial_value=initial_value,
            final_value=initial_value,
            total_pnl=0.0,
            total_return_pct=0.0,
            max_drawdown=0.0,
            max_drawdown_pct=0.0,
            round_trips=round_trips,
        )

    values = np.array([v for _, v in equity_curve], dtype=float)
    final_value = float(values[-1])
    total_pnl = final_value - initial_value
    total_return_pct = (total_pnl / initial_value * 100.0) if initial_value else 0.0

    # Drawdown measured from the running peak, starting capital included.
    peak = np.maximum.accumulate(np.concatenate(([initial_value], values)))[1:]
    drawdowns = peak - values
    worst = int(np.argmax(drawdowns))
    max_drawdown = float(drawdowns[worst])
    max_dd_pct = (max_drawdown / peak[worst] * 100.0) if peak[worst] > 0 else 0.0

    return Metrics(
        initial_value=initial_value,
        final_value=final_value,
        total_pnl=total_pnl,
        total_return_pct=total_return_pct,
        max_drawdown=max_drawdown,
        max_drawdown_pct=float(max_dd_pct),
        round_trips=round_trips,
    )
