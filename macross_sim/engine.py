"""
Simulation engine: runs one price series through the crossover strategy.

Price series → Events → EventLoop → Strategy → Portfolio ledger → Observers.
After the last day an open position is liquidated at the final price.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Protocol

import numpy as np
import pandas as pd

from macross import (
    Event,
    EventLoop,
    MovingAverageCrossoverStrategy,
    Portfolio,
    RandomWalk,
    SimulationConfig,
    Strategy,
    TradeRecord,
    generate_prices,
    rolling_sma,
)
from macross.signal import Side

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Post-trade hook: called after every realized trade (including END_OF_RUN)."""

    def __call__(self, trade: TradeRecord, portfolio: Portfolio) -> None:
        ...


@dataclass
class SimulationResult:
    """Result of a run: final ledger, trade log, equity curve and the prices used."""

    portfolio: Portfolio
    prices: pd.Series
    initial_cash: float
    trades: list[TradeRecord] = field(default_factory=list)
    equity_curve: list[tuple[int, float]] = field(default_factory=list)
    short_window: int | None = None
    long_window: int | None = None

    @property
    def final_value(self) -> float:
        """Cash after forced liquidation (no position can remain open)."""
        if self.portfolio.position_open and len(self.prices):
            return self.portfolio.value(float(self.prices.iloc[-1]))
        return self.portfolio.cash

    def to_frame(self) -> pd.DataFrame:
        """
        One row per day: price, short/long SMA (when windows are known),
        equity after the day, and the trade kind realized that day ("" if none).
        """
        frame = pd.DataFrame({"price": self.prices})
        if self.short_window is not None:
            frame["short_sma"] = rolling_sma(self.prices, self.short_window)
        if self.long_window is not None:
            frame["long_sma"] = rolling_sma(self.prices, self.long_window)
        equity = dict(self.equity_curve)
        frame["equity"] = [equity.get(day, np.nan) for day in frame.index]
        kinds: dict[int, list[str]] = {}
        for t in self.trades:
            kinds.setdefault(t.day, []).append(t.kind.value)
        frame["trade"] = ["+".join(kinds.get(day, [])) for day in frame.index]
        return frame


class SimulationEngine:
    """
    Drives a single deterministic pass over a price series.
    Strategy signals are applied to the ledger on the same day's price.
    Every run starts from the portfolio as it was handed to the constructor.
    """

    def __init__(
        self,
        strategy: Strategy,
        portfolio: Portfolio,
        *,
        observers: Sequence[Observer] = (),
    ) -> None:
        self.strategy = strategy
        self.portfolio = portfolio
        self._start = replace(portfolio)
        self.observers: list[Observer] = list(observers)
        self._trades: list[TradeRecord] = []
        self._equity_curve: list[tuple[int, float]] = []

    def _record(self, trade: TradeRecord | None) -> None:
        if trade is None:
            return
        self._trades.append(trade)
        logger.info(
            "Day %d: %s %d shares at %.2f (cash %.2f)",
            trade.day,
            trade.kind.value,
            trade.shares,
            trade.price,
            trade.cash,
        )
        for obs in self.observers:
            obs(trade, self.portfolio)

    def _handle_event(self, event: Event) -> None:
        """Process one day: strategy → ledger → observers → equity snapshot."""
        for sig in self.strategy.on_event(event, self.portfolio):
            if sig.side is Side.BUY:
                self._record(self.portfolio.open_position(sig.day, sig.price))
            elif sig.side is Side.SELL:
                self._record(self.portfolio.close_position(sig.day, sig.price))
        self._equity_curve.append((event.day, self.portfolio.value(event.price)))

    def run(self, prices: pd.Series) -> SimulationResult:
        """
        Run the strategy over `prices` (day-indexed Series, oldest first).

        Returns
        -------
        SimulationResult
            Final portfolio, trade log and equity curve.
        """
        self._trades = []
        self._equity_curve = []
        self.strategy.reset()
        self.portfolio.cash = self._start.cash
        self.portfolio.shares = self._start.shares
        self.portfolio.position_open = self._start.position_open
        initial_cash = self.portfolio.cash
        logger.debug("Simulation start: %d days, cash %.2f", len(prices), initial_cash)

        loop = EventLoop()
        loop.subscribe(self._handle_event)
        loop.run(Event(day=int(day), price=float(price)) for day, price in prices.items())

        if self.portfolio.position_open and len(prices):
            last_day = int(prices.index[-1])
            last_price = float(prices.iloc[-1])
            self._record(self.portfolio.liquidate(last_day, last_price))
            self._equity_curve[-1] = (last_day, self.portfolio.cash)

        return SimulationResult(
            portfolio=Portfolio(
                cash=self.portfolio.cash,
                shares=self.portfolio.shares,
                position_open=self.portfolio.position_open,
            ),
            prices=prices,
            initial_cash=initial_cash,
            trades=list(self._trades),
            equity_curve=list(self._equity_curve),
            short_window=getattr(self.strategy, "short_window", None),
            long_window=getattr(self.strategy, "long_window", None),
        )


def run_simulation(
    config: SimulationConfig | None = None,
    *,
    rng: np.random.Generator | None = None,
    prices: pd.Series | None = None,
    observers: Sequence[Observer] = (),
) -> SimulationResult:
    """
    Wire generator, strategy and ledger from `config` and run once.

    `prices` replaces the random walk entirely (scripted run); otherwise
    prices come from `rng`, or from a Generator seeded with config.seed.
    """
    config = config or SimulationConfig()
    if prices is None:
        walk = RandomWalk(
            start_price=config.start_price,
            step_std=config.step_std,
            floor=config.price_floor,
        )
        prices = generate_prices(config.n_days, walk, rng=rng, seed=config.seed)
    strategy = MovingAverageCrossoverStrategy(config.short_window, config.long_window)
    engine = SimulationEngine(strategy, Portfolio(cash=config.initial_cash), observers=observers)
    return engine.run(prices)
