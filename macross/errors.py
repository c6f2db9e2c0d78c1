"""
Error types raised by the simulator.

Configuration problems fail fast, before any price is generated.
"""


class MacrossError(Exception):
    """Base class for simulator errors."""


class ConfigurationError(MacrossError, ValueError):
    """Invalid simulation parameter (window, day count, cash, walk parameters)."""
