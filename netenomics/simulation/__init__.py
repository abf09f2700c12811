"""Stochastic price simulators with injectable random sources."""

from netenomics.simulation.batch import SimulationBatch
from netenomics.simulation.gbm import gbm_path
from netenomics.simulation.monte_carlo import monte_carlo_terminal, simulate_paths
from netenomics.simulation.path_generator import PathGenerator
from netenomics.simulation.random_source import (
    RandomSource,
    SequenceRandomSource,
    default_random_source,
)
from netenomics.simulation.reduction import TerminalAccumulator, TerminalStats

__all__ = [
    "SimulationBatch",
    "gbm_path",
    "monte_carlo_terminal",
    "simulate_paths",
    "PathGenerator",
    "RandomSource",
    "SequenceRandomSource",
    "default_random_source",
    "TerminalAccumulator",
    "TerminalStats",
]
