"""
Monte Carlo price simulation with uniform multiplicative shocks.

Each step multiplies the price by ``1 + (U - 0.5) * k * volatility`` where
``U`` is uniform on [0, 1). This is a uniform-noise approximation, not a
lognormal model, and is kept that way so results match the reference
formulas exactly for a given random source.
"""

from typing import Optional
import numpy as np

from netenomics.exceptions import InvalidArgumentError
from netenomics.simulation.batch import SimulationBatch
from netenomics.simulation.random_source import RandomSource, resolve_random_source
from netenomics.simulation.reduction import TerminalAccumulator, TerminalStats


def _check_counts(steps: int, simulations: int, volatility: float) -> None:
    if steps < 0:
        raise InvalidArgumentError(f"number of steps must be non-negative, got {steps}")
    if simulations < 1:
        raise InvalidArgumentError(f"simulations must be at least 1, got {simulations}")
    if volatility < 0:
        raise InvalidArgumentError(f"volatility must be non-negative, got {volatility}")


def monte_carlo_terminal(
    start_price: float,
    days: int,
    volatility: float,
    simulations: int = 1000,
    rng: Optional[RandomSource] = None,
) -> TerminalStats:
    """
    Simulate terminal prices and summarise their distribution.

    Each trial applies ``days`` shocks
    ``price *= 1 + (U - 0.5) * 2 * volatility``. Random draws are consumed
    trial by trial, step by step.

    Parameters
    ----------
    start_price : float
        Price at the start of every trial
    days : int
        Number of shocks per trial
    volatility : float
        Maximum fractional move per step
    simulations : int, default=1000
        Number of independent trials
    rng : RandomSource, optional
        Source of uniform draws. A fresh NumPy generator when omitted.

    Returns
    -------
    TerminalStats
        Mean, max, min and loss probability of the terminal prices

    Raises
    ------
    InvalidArgumentError
        If ``days`` is negative, ``simulations`` is below 1 or
        ``volatility`` is negative
    """
    _check_counts(days, simulations, volatility)
    rng = resolve_random_source(rng)

    accumulator = TerminalAccumulator(start_price)
    for _ in range(simulations):
        price = start_price
        for _ in range(days):
            price *= 1 + (rng.random() - 0.5) * 2 * volatility
        accumulator.add(price)

    return accumulator.result()


def simulate_paths(
    start_price: float,
    volatility: float,
    steps: int,
    simulations: int = 10,
    rng: Optional[RandomSource] = None,
) -> SimulationBatch:
    """
    Simulate full price paths with uniform shocks.

    Each step multiplies the previous price by
    ``1 + (U - 0.5) * volatility``.

    Parameters
    ----------
    start_price : float
        First value of every path
    volatility : float
        Width of the per-step multiplicative shock
    steps : int
        Number of steps; each path has ``steps + 1`` values
    simulations : int, default=10
        Number of paths
    rng : RandomSource, optional
        Source of uniform draws

    Returns
    -------
    SimulationBatch
        The simulated paths
    """
    _check_counts(steps, simulations, volatility)
    rng = resolve_random_source(rng)

    paths = []
    for _ in range(simulations):
        path = np.empty(steps + 1)
        path[0] = start_price
        for i in range(1, steps + 1):
            path[i] = path[i - 1] * (1 + (rng.random() - 0.5) * volatility)
        paths.append(path)

    return SimulationBatch(paths, start_price=start_price)
