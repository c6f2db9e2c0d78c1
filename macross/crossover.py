"""
Crossover detection as an explicit state machine.

The state is the previous day's (short, long) averages plus whether a
position is open. detect_crossover is pure: it never mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from macross.signal import Side


@dataclass(frozen=True)
class CrossoverState:
    """What the detector remembers between days."""

    prev_short: float = 0.0
    prev_long: float = 0.0
    position_open: bool = False


def detect_crossover(state: CrossoverState, short: float, long: float) -> tuple[Side, CrossoverState]:
    """
    Evaluate one warmed-up day.

    Golden cross (BUY): short moves from <= long to > long while flat.
    Death cross (SELL): short moves from >= long to < long while holding.
    The returned state always carries today's averages as the new "previous".
    """
    side = Side.NONE
    position_open = state.position_open
    if short > long and state.prev_short <= state.prev_long and not position_open:
        side = Side.BUY
        position_open = True
    elif short < long and state.prev_short >= state.prev_long and position_open:
        side = Side.SELL
        position_open = False
    return side, replace(state, prev_short=short, prev_long=long, position_open=position_open)
