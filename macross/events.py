"""
Price events for the day-by-day simulation.

Events are immutable data carriers: one per simulated trading day. The
engine and strategy react to them; they hold no logic of their own.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """One observed price. Days are 1-based and strictly increasing within a run."""

    day: int
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.price, float):
            object.__setattr__(self, "price", float(self.price))
