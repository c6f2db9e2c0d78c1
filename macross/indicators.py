"""
Moving averages over an observed price history.

simple_moving_average is stateless: it recomputes from the visible history
on every call. "Not enough data" is None, never a number.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from macross.errors import ConfigurationError


def _check_period(period: int) -> None:
    if period <= 0:
        raise ConfigurationError(f"period must be > 0, got {period}")


def simple_moving_average(prices: Sequence[float] | np.ndarray, period: int) -> float | None:
    """
    Unweighted mean of the last `period` prices.

    Parameters
    ----------
    prices : sequence of float
        Price history observed so far, oldest first.
    period : int
        Window length. Must be positive.

    Returns
    -------
    float or None
        The mean, or None when fewer than `period` prices are available.
    """
    _check_period(period)
    values = np.asarray(prices, dtype=float)
    if len(values) < period:
        return None
    return float(values[-period:].mean())


def rolling_sma(prices: pd.Series, period: int) -> pd.Series:
    """Rolling mean over a whole price series; NaN until `period` prices exist."""
    _check_period(period)
    return prices.rolling(window=period, min_periods=period).mean()
