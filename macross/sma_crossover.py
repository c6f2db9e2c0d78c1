"""
Moving-average crossover strategy.

Keeps the price history seen so far, computes the short and long simple
moving averages each day, and emits a BUY on a golden cross and a SELL on a
death cross. Inert until both averages are available.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from macross.crossover import CrossoverState, detect_crossover
from macross.errors import ConfigurationError
from macross.events import Event
from macross.indicators import simple_moving_average
from macross.portfolio import Portfolio
from macross.signal import Side, Signal
from macross.strategy import Strategy

logger = logging.getLogger(__name__)


class MovingAverageCrossoverStrategy(Strategy):
    """
    Long-only crossover rule, one position at a time.
    Intended configuration is short_window < long_window; other combinations
    run without error but rarely produce meaningful crosses.
    """

    def __init__(self, short_window: int = 10, long_window: int = 30) -> None:
        if short_window <= 0 or long_window <= 0:
            raise ConfigurationError(
                f"windows must be > 0, got short={short_window} long={long_window}"
            )
        if short_window >= long_window:
            logger.warning(
                "short_window %d >= long_window %d: crossover rule is degenerate",
                short_window,
                long_window,
            )
        self.short_window = short_window
        self.long_window = long_window
        self.history: list[float] = []
        self.state = CrossoverState()

    @property
    def warmup_days(self) -> int:
        """Prices needed before both averages exist."""
        return max(self.short_window, self.long_window)

    @property
    def warmed_up(self) -> bool:
        return len(self.history) >= self.warmup_days

    def reset(self) -> None:
        self.history = []
        self.state = CrossoverState()

    def on_event(
        self,
        event: Event,
        portfolio: Portfolio | None = None,
    ) -> list[Signal]:
        self.history.append(event.price)
        if not self.warmed_up:
            return []
        if len(self.history) == self.warmup_days:
            logger.debug("Warm-up complete on day %d", event.day)

        if portfolio is not None and portfolio.position_open != self.state.position_open:
            # The ledger is authoritative; it may have refused the last fill.
            self.state = replace(self.state, position_open=portfolio.position_open)
        short = simple_moving_average(self.history, self.short_window)
        long = simple_moving_average(self.history, self.long_window)
        side, self.state = detect_crossover(self.state, short, long)
        if side is Side.NONE:
            return []
        return [Signal(day=event.day, price=event.price, side=side)]
