"""
Geometric Brownian Motion model for price forecasting.

This module estimates the GBM drift and volatility from a price history
and forecasts a future path with the uniform-increment GBM simulator.
"""

from typing import Optional, Sequence, Tuple
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from netenomics.exceptions import InsufficientDataError
from netenomics.simulation.gbm import gbm_path
from netenomics.simulation.random_source import default_random_source

TRADING_DAYS = 252


class GBM:
    """
    Geometric Brownian Motion model for price forecasting.

    The GBM model uses a historical price series to calculate drift (mu)
    and volatility (sigma) parameters, then simulates a future price path.

    Parameters
    ----------
    prices : sequence of float or pd.Series
        Historical closing prices, oldest first
    forecast_period : int, default=252
        Number of trading days to forecast
    seed : int, default=20
        Seed for the NumPy generator driving the simulation
    name : str, default='asset'
        Label used in plot titles

    Attributes
    ----------
    stock_price : pd.DataFrame
        History with a 'Close' column and, after calculate_mu_sigma(),
        a 'Daily return' column
    mu : float
        Annualized mean return (drift coefficient)
    sigma : float
        Annualized volatility (diffusion coefficient)
    So : float
        Initial forecast price (last historical price)
    S : np.ndarray
        Forecasted prices, starting with So
    x_axis : np.ndarray
        X-axis values for plotting the forecast
    """

    def __init__(
        self,
        prices: Sequence[float],
        forecast_period: int = 252,
        seed: int = 20,
        name: str = "asset",
    ):
        close = pd.Series(prices, dtype=float).reset_index(drop=True)
        if len(close) < 2:
            raise InsufficientDataError(
                f"at least 2 prices are needed to estimate returns, got {len(close)}"
            )

        self.stock_price = pd.DataFrame({"Close": close})
        self.forecast_period = forecast_period
        self.seed = seed
        self.name = name

        self.mu: Optional[float] = None
        self.sigma: Optional[float] = None
        self.So: Optional[float] = None
        self.S: Optional[np.ndarray] = None
        self.x_axis: Optional[np.ndarray] = None

    def calculate_mu_sigma(self) -> Tuple[pd.DataFrame, float, float]:
        """
        Calculate annualized mean return (mu) and volatility (sigma).

        Returns
        -------
        Tuple[pd.DataFrame, float, float]
            Price DataFrame with daily returns, mu, and sigma
        """
        self.stock_price["Daily return"] = self.stock_price["Close"].pct_change(1)

        daily = self.stock_price["Daily return"]
        self.mu = float(daily.mean() * TRADING_DAYS)

        # a single return has no sample deviation
        std = daily.std()
        self.sigma = 0.0 if pd.isna(std) else float(std * np.sqrt(TRADING_DAYS))

        return self.stock_price, self.mu, self.sigma

    def simulate(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Forecast prices over ``forecast_period`` trading days.

        The horizon is one unit of time split into ``forecast_period``
        steps, matching the annualized parameters.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            Forecasted prices (S) and x-axis values for plotting

        Raises
        ------
        ValueError
            If mu and sigma have not been calculated
        """
        if self.mu is None or self.sigma is None:
            raise ValueError(
                "Mu and sigma not calculated. Call calculate_mu_sigma() first."
            )

        self.So = float(self.stock_price["Close"].iloc[-1])
        history_length = len(self.stock_price)

        self.S = gbm_path(
            self.So,
            self.mu,
            self.sigma,
            1.0,
            self.forecast_period,
            rng=default_random_source(self.seed),
        )

        # Forecast starts where the history ends
        self.x_axis = np.linspace(
            history_length,
            history_length + self.forecast_period,
            self.forecast_period + 1,
        )

        return self.S, self.x_axis

    def plot(
        self,
        output_path: Optional[str] = None,
        show_plot: bool = True,
    ) -> None:
        """
        Plot historical and forecasted prices.

        Parameters
        ----------
        output_path : str, optional
            Path to save the plot. If None, plot is not saved.
        show_plot : bool, default=True
            Whether to display the plot

        Raises
        ------
        ValueError
            If forecasted prices are not available
        """
        if self.S is None or self.x_axis is None:
            raise ValueError(
                "Forecasted prices not available. Call simulate() first."
            )

        history_length = len(self.stock_price)
        pt = np.linspace(0, history_length, history_length)

        plt.figure(figsize=(12, 8), dpi=300)
        plt.plot(pt, self.stock_price["Close"], label="Actual")
        plt.plot(self.x_axis, self.S, label="Forecast")
        plt.legend()
        plt.ylabel("Price")
        plt.xlabel("Trading Days")
        plt.title(
            f"Geometric Brownian Motion of {self.name} "
            f"over next {self.forecast_period} trading days"
        )
        plt.grid(True, alpha=0.3)

        if output_path:
            plt.savefig(output_path, dpi=300, bbox_inches="tight")

        if show_plot:
            plt.show()
        else:
            plt.close()

    def run(self, show_plot: bool = True, output_path: Optional[str] = None) -> None:
        """
        Run the complete pipeline: estimate parameters, simulate, plot.

        Parameters
        ----------
        show_plot : bool, default=True
            Whether to display the plot
        output_path : str, optional
            Path to save the plot
        """
        self.calculate_mu_sigma()
        self.simulate()
        if show_plot or output_path:
            self.plot(output_path=output_path, show_plot=show_plot)
