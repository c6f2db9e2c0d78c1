"""
Tests for crossover detection: the pure state machine and the windowed strategy.
"""

import pytest

from macross import (
    ConfigurationError,
    CrossoverState,
    Event,
    MovingAverageCrossoverStrategy,
    Portfolio,
    Side,
    detect_crossover,
)


def _golden_then_death_prices() -> list[float]:
    """Flat at 100 through day 34, 101 on days 35-49, collapse to 50 on day 50."""
    return [100.0] * 34 + [101.0] * 15 + [50.0]


def _feed(strategy, prices):
    """Feed prices as days 1..n; return {day: side} for every emitted signal."""
    fired = {}
    for day, price in enumerate(prices, start=1):
        for sig in strategy.on_event(Event(day=day, price=price)):
            fired[day] = sig.side
    return fired


# --- detect_crossover ---


def test_golden_cross_from_below():
    state = CrossoverState(prev_short=99.0, prev_long=100.0)
    side, new = detect_crossover(state, short=101.0, long=100.0)
    assert side is Side.BUY
    assert new.position_open
    assert (new.prev_short, new.prev_long) == (101.0, 100.0)


def test_golden_cross_from_equal():
    side, _ = detect_crossover(CrossoverState(100.0, 100.0), short=100.5, long=100.0)
    assert side is Side.BUY


def test_no_buy_while_position_open():
    state = CrossoverState(prev_short=99.0, prev_long=100.0, position_open=True)
    side, new = detect_crossover(state, short=101.0, long=100.0)
    assert side is Side.NONE
    assert new.position_open


def test_no_buy_without_cross():
    state = CrossoverState(prev_short=101.0, prev_long=100.0)
    side, new = detect_crossover(state, short=102.0, long=100.0)
    assert side is Side.NONE
    assert (new.prev_short, new.prev_long) == (102.0, 100.0)


def test_death_cross_closes_position():
    state = CrossoverState(prev_short=101.0, prev_long=100.0, position_open=True)
    side, new = detect_crossover(state, short=99.0, long=100.0)
    assert side is Side.SELL
    assert not new.position_open


def test_no_sell_when_flat():
    state = CrossoverState(prev_short=101.0, prev_long=100.0)
    side, _ = detect_crossover(state, short=99.0, long=100.0)
    assert side is Side.NONE


def test_equal_averages_emit_nothing():
    for open_ in (False, True):
        side, _ = detect_crossover(CrossoverState(100.0, 100.0, open_), short=100.0, long=100.0)
        assert side is Side.NONE


def test_initial_state_lets_first_valid_day_buy():
    side, _ = detect_crossover(CrossoverState(), short=105.0, long=100.0)
    assert side is Side.BUY


def test_detect_crossover_does_not_mutate_input():
    state = CrossoverState(prev_short=1.0, prev_long=2.0)
    detect_crossover(state, short=3.0, long=2.0)
    assert state == CrossoverState(prev_short=1.0, prev_long=2.0)


# --- MovingAverageCrossoverStrategy ---


def test_strategy_inert_during_warmup():
    strategy = MovingAverageCrossoverStrategy(short_window=10, long_window=30)
    fired = _feed(strategy, [100.0 + d for d in range(1, 30)])
    assert fired == {}
    assert strategy.state == CrossoverState()
    assert not strategy.warmed_up


def test_strategy_buys_exactly_on_day_35():
    strategy = MovingAverageCrossoverStrategy(10, 30)
    fired = _feed(strategy, _golden_then_death_prices()[:49])
    assert fired == {35: Side.BUY}


def test_strategy_sells_exactly_on_day_50():
    strategy = MovingAverageCrossoverStrategy(10, 30)
    fired = _feed(strategy, _golden_then_death_prices())
    assert fired == {35: Side.BUY, 50: Side.SELL}
    assert not strategy.state.position_open


def test_strategy_monotonic_series_buys_once_on_first_valid_day():
    strategy = MovingAverageCrossoverStrategy(10, 30)
    fired = _feed(strategy, [100.0 + d for d in range(1, 201)])
    assert fired == {30: Side.BUY}


def test_strategy_updates_previous_averages_every_day():
    strategy = MovingAverageCrossoverStrategy(2, 3)
    _feed(strategy, [1.0, 2.0, 3.0, 4.0])
    assert strategy.state.prev_short == pytest.approx(3.5)
    assert strategy.state.prev_long == pytest.approx(3.0)


def test_strategy_reset_clears_window_and_state():
    strategy = MovingAverageCrossoverStrategy(10, 30)
    _feed(strategy, [100.0 + d for d in range(1, 41)])
    strategy.reset()
    assert strategy.history == []
    assert strategy.state == CrossoverState()


def test_degenerate_windows_do_not_fail():
    strategy = MovingAverageCrossoverStrategy(short_window=30, long_window=10)
    assert strategy.warmup_days == 30
    fired = _feed(strategy, [100.0 + (d % 7) for d in range(1, 120)])
    assert set(fired.values()) <= {Side.BUY, Side.SELL}


def test_equal_windows_never_cross():
    strategy = MovingAverageCrossoverStrategy(short_window=10, long_window=10)
    fired = _feed(strategy, [100.0 + (d % 5) * 3 for d in range(1, 100)])
    assert fired == {}


def test_strategy_rejects_non_positive_windows():
    with pytest.raises(ConfigurationError):
        MovingAverageCrossoverStrategy(short_window=0, long_window=30)
    with pytest.raises(ConfigurationError):
        MovingAverageCrossoverStrategy(short_window=10, long_window=-1)


def test_strategy_follows_ledger_position():
    # The ledger never fills, so the day-50 death cross has nothing to sell
    # and the next golden cross buys again.
    strategy = MovingAverageCrossoverStrategy(10, 30)
    flat = Portfolio(cash=10_000.0)
    prices = _golden_then_death_prices() + [120.0] * 3
    fired = {}
    for day, price in enumerate(prices, start=1):
        for sig in strategy.on_event(Event(day=day, price=price), flat):
            fired[day] = sig.side
    assert fired == {35: Side.BUY, 53: Side.BUY}
