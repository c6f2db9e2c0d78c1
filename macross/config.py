"""
SimulationConfig: every knob of a single simulation run.

Immutable. Validated on construction so a bad window or cash amount is
reported before any price is generated.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from macross.errors import ConfigurationError

ENV_PREFIX = "MACROSS_"


@dataclass(frozen=True)
class SimulationConfig:
    """Random-walk, strategy and ledger parameters for one run."""

    n_days: int = 200
    short_window: int = 10
    long_window: int = 30
    initial_cash: float = 10_000.0
    start_price: float = 100.0
    step_std: float = 1.5
    price_floor: float = 10.0
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("n_days", "short_window", "long_window"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.n_days < 0:
            raise ConfigurationError(f"n_days must be >= 0, got {self.n_days}")
        if self.short_window <= 0:
            raise ConfigurationError(f"short_window must be > 0, got {self.short_window}")
        if self.long_window <= 0:
            raise ConfigurationError(f"long_window must be > 0, got {self.long_window}")
        for name in _FLOAT_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value!r}")
        if self.initial_cash < 0:
            raise ConfigurationError(f"initial_cash must be >= 0, got {self.initial_cash}")
        if self.start_price <= 0:
            raise ConfigurationError(f"start_price must be > 0, got {self.start_price}")
        if self.step_std < 0:
            raise ConfigurationError(f"step_std must be >= 0, got {self.step_std}")
        if self.price_floor <= 0:
            raise ConfigurationError(f"price_floor must be > 0, got {self.price_floor}")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise ConfigurationError(f"seed must be an integer, got {self.seed!r}")
            if self.seed < 0:
                raise ConfigurationError(f"seed must be >= 0, got {self.seed}")

    def with_overrides(self, **overrides: Any) -> SimulationConfig:
        """Return a copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SimulationConfig:
        """
        Build a config from MACROSS_* environment variables.

        Variable names are the upper-cased field names (MACROSS_N_DAYS,
        MACROSS_SHORT_WINDOW, ...). Unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw.strip() == "":
                continue
            convert = float if f.name in _FLOAT_FIELDS else int
            try:
                values[f.name] = convert(raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_PREFIX}{f.name.upper()}={raw!r} is not a valid {convert.__name__}"
                ) from e
        return cls(**values)


_FLOAT_FIELDS = ("initial_cash", "start_price", "step_std", "price_floor")
