"""
Strategy: interface for signal generation.

Strategies consume price events and optional portfolio context and produce
Signals. The engine feeds events in day order and applies the signals.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from macross.events import Event
    from macross.portfolio import Portfolio
    from macross.signal import Signal


class Strategy(ABC):
    """
    Base class for strategies. Receives events; may emit signals.
    The engine is responsible for passing events and applying signals.
    """

    @abstractmethod
    def on_event(
        self,
        event: "Event",
        portfolio: "Portfolio | None" = None,
    ) -> list["Signal"]:
        """
        React to one day's price. Return zero or more signals.
        Portfolio is optional read-only context.
        """
        ...

    def reset(self) -> None:
        """Forget per-run state before a new run. Stateless strategies need not override."""
