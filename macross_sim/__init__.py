"""
Simulation driver on top of the macross core.

Runs a price series through the crossover strategy and ledger, forces the
final liquidation, and reports trades, metrics and the final value.
"""

from macross_sim.engine import Observer, SimulationEngine, SimulationResult, run_simulation
from macross_sim.metrics import Metrics, compute_metrics
from macross_sim.report import format_trade, print_report

__all__ = [
    "Metrics",
    "Observer",
    "SimulationEngine",
    "SimulationResult",
    "compute_metrics",
    "format_trade",
    "print_report",
    "run_simulation",
]
