"""
Signal: trading intent produced by the crossover strategy.

Immutable. No execution, just direction plus the day and price that
triggered it. Sizing is the ledger's job.
"""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"
    NONE = "none"


@dataclass(frozen=True)
class Signal:
    """Trading intent for one day: what to do, not a fill."""

    day: int
    price: float
    side: Side
