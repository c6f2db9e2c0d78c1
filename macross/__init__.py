"""
macross: deterministic moving-average crossover core.

Synthetic prices, simple moving averages, an explicit crossover state
machine and an all-in/all-out single-asset ledger. No market data feeds.
"""

__version__ = "0.1.0"

from macross.config import SimulationConfig
from macross.crossover import CrossoverState, detect_crossover
from macross.errors import ConfigurationError, MacrossError
from macross.events import Event
from macross.event_loop import EventLoop
from macross.indicators import rolling_sma, simple_moving_average
from macross.portfolio import Portfolio, TradeKind, TradeRecord
from macross.prices import RandomWalk, generate_prices, scripted_prices
from macross.signal import Side, Signal
from macross.sma_crossover import MovingAverageCrossoverStrategy
from macross.strategy import Strategy

__all__ = [
    "ConfigurationError",
    "CrossoverState",
    "Event",
    "EventLoop",
    "MacrossError",
    "MovingAverageCrossoverStrategy",
    "Portfolio",
    "RandomWalk",
    "Side",
    "Signal",
    "SimulationConfig",
    "Strategy",
    "TradeKind",
    "TradeRecord",
    "detect_crossover",
    "generate_prices",
    "rolling_sma",
    "scripted_prices",
    "simple_moving_average",
]
