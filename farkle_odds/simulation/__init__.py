"""Simulation module for reroll odds."""
from .simulator import RerollSimulator, SimulationResult

__all__ = [
    "RerollSimulator",
    "SimulationResult",
]
