"""Monte Carlo path generator using Geometric Brownian Motion."""

from datetime import datetime
from typing import Optional
import pandas as pd

from netenomics.exceptions import InvalidArgumentError
from netenomics.simulation.batch import SimulationBatch
from netenomics.simulation.gbm import gbm_path
from netenomics.simulation.random_source import RandomSource, resolve_random_source


class PathGenerator:
    """Generates multiple Monte Carlo paths using GBM.

    Creates independent price paths from a starting price over a forecast
    horizon using Geometric Brownian Motion with drift and volatility.

    Parameters
    ----------
    starting_price : float
        Initial price from which all paths start
    mu : float
        Drift coefficient (annualized expected return)
    sigma : float
        Volatility coefficient (annualized)
    horizon : float, default=1.0
        Forecast horizon in years
    num_steps : int, default=252
        Number of steps per path (default: one trading year of days)
    num_paths : int, default=500
        Number of independent paths to generate
    rng : RandomSource, optional
        Source of uniform draws shared by all paths, consumed path by path
    """

    def __init__(
        self,
        starting_price: float,
        mu: float,
        sigma: float,
        horizon: float = 1.0,
        num_steps: int = 252,
        num_paths: int = 500,
        rng: Optional[RandomSource] = None,
    ):
        if num_steps < 1:
            raise InvalidArgumentError(f"num_steps must be at least 1, got {num_steps}")
        if num_paths < 1:
            raise InvalidArgumentError(f"num_paths must be at least 1, got {num_paths}")

        self.starting_price = starting_price
        self.mu = mu
        self.sigma = sigma
        self.horizon = horizon
        self.num_steps = num_steps
        self.num_paths = num_paths
        self.rng = resolve_random_source(rng)

    def generate_paths(self) -> SimulationBatch:
        """Generate ``num_paths`` independent GBM paths.

        Returns
        -------
        SimulationBatch
            Batch of paths, each of length ``num_steps + 1``
        """
        paths = [
            gbm_path(
                self.starting_price,
                self.mu,
                self.sigma,
                self.horizon,
                self.num_steps,
                rng=self.rng,
            )
            for _ in range(self.num_paths)
        ]
        return SimulationBatch(paths, start_price=self.starting_price)

    def generate_frame(
        self,
        start_time: datetime,
        freq: str = "B",
    ) -> pd.DataFrame:
        """Generate paths indexed by calendar time.

        Parameters
        ----------
        start_time : datetime
            Timestamp of the starting price
        freq : str, default='B'
            Pandas frequency of one step (business days by default)

        Returns
        -------
        pd.DataFrame
            One column per path, indexed by ``num_steps + 1`` timestamps
        """
        time_index = pd.date_range(
            start=start_time,
            periods=self.num_steps + 1,
            freq=freq,
        )
        return self.generate_paths().to_frame(time_index)
