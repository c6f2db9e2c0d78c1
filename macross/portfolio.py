"""
Portfolio: the single-asset ledger. Cash, whole shares, and trade records.

All-in / all-out: a buy spends as much cash as whole shares allow, a sell
liquidates every share held. At most one position is open at a time.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class TradeKind(Enum):
    BUY = "buy"
    SELL = "sell"
    END_OF_RUN = "end_of_run"


@dataclass(frozen=True)
class TradeRecord:
    """One realized trade. cash is the ledger balance right after the trade."""

    kind: TradeKind
    day: int
    price: float
    shares: int
    cash: float


@dataclass
class Portfolio:
    """
    Cash and shares for one asset. Mutable; updated by the engine when a
    signal is applied. Cash and shares never go negative.
    """

    cash: float = 10_000.0
    shares: int = 0
    position_open: bool = False

    def value(self, price: float) -> float:
        """Mark-to-market value at price."""
        return self.cash + self.shares * price

    def open_position(self, day: int, price: float) -> TradeRecord | None:
        """Buy floor(cash / price) shares. None if already open or price is unusable."""
        if self.position_open:
            logger.warning("Day %d: buy ignored, position already open (%d shares)", day, self.shares)
            return None
        if price <= 0:
            logger.warning("Day %d: buy ignored, non-positive price %.2f", day, price)
            return None
        shares = math.floor(self.cash / price)
        # cash / price can round up to the next whole share.
        if shares > 0 and shares * price > self.cash:
            shares -= 1
        self.cash -= shares * price
        self.shares = shares
        self.position_open = True
        return TradeRecord(kind=TradeKind.BUY, day=day, price=price, shares=shares, cash=self.cash)

    def close_position(self, day: int, price: float) -> TradeRecord | None:
        """Sell every share held. None if no position is open."""
        return self._close(TradeKind.SELL, day, price)

    def liquidate(self, day: int, price: float) -> TradeRecord | None:
        """Forced close after the last day; recorded as END_OF_RUN."""
        return self._close(TradeKind.END_OF_RUN, day, price)

    def _close(self, kind: TradeKind, day: int, price: float) -> TradeRecord | None:
        if not self.position_open:
            logger.warning("Day %d: %s ignored, no open position", day, kind.value)
            return None
        if price < 0:
            logger.warning("Day %d: %s ignored, negative price %.2f", day, kind.value, price)
            return None
        sold = self.shares
        self.cash += sold * price
        self.shares = 0
        self.position_open = False
        return TradeRecord(kind=kind, day=day, price=price, shares=sold, cash=self.cash)
