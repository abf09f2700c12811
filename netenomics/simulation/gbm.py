"""Geometric Brownian Motion path discretisation."""

from typing import Optional
import math
import numpy as np

from netenomics.exceptions import InvalidArgumentError
from netenomics.simulation.random_source import RandomSource, resolve_random_source


def gbm_path(
    s0: float,
    mu: float,
    sigma: float,
    t: float,
    steps: int,
    rng: Optional[RandomSource] = None,
) -> np.ndarray:
    """
    Simulate one Geometric Brownian Motion path.

    The horizon ``t`` is split into ``steps`` intervals of ``dt = t / steps``.
    Each step applies

        S(k+1) = S(k) * exp((mu - 0.5*sigma^2)*dt + sigma*sqrt(dt)*(2U - 1))

    with ``U`` uniform on [0, 1). The uniform increment stands in for the
    Gaussian Wiener increment and is kept for compatibility with the
    reference formulas.

    Parameters
    ----------
    s0 : float
        Initial price
    mu : float
        Drift coefficient (annualized expected return)
    sigma : float
        Volatility coefficient (annualized)
    t : float
        Horizon in years
    steps : int
        Number of intervals
    rng : RandomSource, optional
        Source of uniform draws. A fresh NumPy generator when omitted.

    Returns
    -------
    np.ndarray
        Prices of length ``steps + 1``, starting with ``s0``

    Raises
    ------
    InvalidArgumentError
        If ``steps`` < 1, ``t`` <= 0 or ``sigma`` < 0
    """
    if steps < 1:
        raise InvalidArgumentError(f"steps must be at least 1, got {steps}")
    if t <= 0:
        raise InvalidArgumentError(f"horizon t must be positive, got {t}")
    if sigma < 0:
        raise InvalidArgumentError(f"sigma must be non-negative, got {sigma}")

    rng = resolve_random_source(rng)

    dt = t / steps
    drift = (mu - 0.5 * sigma * sigma) * dt
    scale = sigma * math.sqrt(dt)

    path = np.empty(steps + 1)
    path[0] = s0
    current = s0
    for i in range(1, steps + 1):
        diffusion = scale * (rng.random() * 2 - 1)
        current = current * math.exp(drift + diffusion)
        path[i] = current

    return path
