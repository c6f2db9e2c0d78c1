"""
Synthetic price series: a random walk with a hard price floor.

Randomness comes from an injectable numpy Generator so runs can be
reproduced from a seed or driven by a scripted sequence instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import pandas as pd

from macross.errors import ConfigurationError


@dataclass(frozen=True)
class RandomWalk:
    """Additive Gaussian walk: price += N(0, step_std), clamped at floor."""

    start_price: float = 100.0
    step_std: float = 1.5
    floor: float = 10.0


def _day_indexed(values: np.ndarray) -> pd.Series:
    index = pd.RangeIndex(start=1, stop=len(values) + 1, name="day")
    return pd.Series(values, index=index, dtype=float, name="price")


def generate_prices(
    n_days: int = 200,
    walk: RandomWalk = RandomWalk(),
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> pd.Series:
    """
    Generate `n_days` prices, indexed by day 1..n_days.

    The first price is one step away from walk.start_price. Pass `rng` to
    control the draws directly; otherwise a Generator is built from `seed`
    (fresh OS entropy when seed is None).
    """
    if n_days < 0:
        raise ConfigurationError(f"n_days must be >= 0, got {n_days}")
    if rng is None:
        rng = np.random.default_rng(seed)
    steps = rng.normal(0.0, walk.step_std, size=n_days)
    prices = np.empty(n_days, dtype=float)
    last = walk.start_price
    # Clamping makes each price depend on the clamped previous one; no cumsum.
    for i, step in enumerate(steps):
        last = max(last + step, walk.floor)
        prices[i] = last
    return _day_indexed(prices)


def scripted_prices(values: Iterable[float]) -> pd.Series:
    """Wrap a fixed sequence of prices in the same day-indexed shape."""
    return _day_indexed(np.fromiter(values, dtype=float))
