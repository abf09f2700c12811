"""Netenomics: numeric routines for market and game-economy analysis.

Statistics primitives, moving-window indicators, regression, inequality,
risk measures, option pricing and stochastic price simulation. All routines
are pure functions over in-memory numeric sequences.
"""

from netenomics.exceptions import (
    EmptyInputError,
    InsufficientDataError,
    InvalidArgumentError,
    NetenomicsError,
)
from netenomics.stats import mean, percentile, population_std
from netenomics.indicators import BollingerBand, MovingAverage, bollinger_bands, rsi, sma
from netenomics.regression import LinearForecast, TrendStrength, linear_predict
from netenomics.inequality import gini
from netenomics.risk import (
    MarketState,
    analyze_market_state,
    clean_outliers,
    sharpe_ratio,
    value_at_risk,
)
from netenomics.pricing import black_scholes
from netenomics.simulation import (
    PathGenerator,
    SequenceRandomSource,
    SimulationBatch,
    TerminalStats,
    default_random_source,
    gbm_path,
    monte_carlo_terminal,
    simulate_paths,
)
from netenomics.model import GBM

__version__ = "2.1.0"
__all__ = [
    "NetenomicsError",
    "EmptyInputError",
    "InvalidArgumentError",
    "InsufficientDataError",
    "mean",
    "population_std",
    "percentile",
    "sma",
    "rsi",
    "bollinger_bands",
    "MovingAverage",
    "BollingerBand",
    "linear_predict",
    "LinearForecast",
    "TrendStrength",
    "gini",
    "analyze_market_state",
    "value_at_risk",
    "sharpe_ratio",
    "clean_outliers",
    "MarketState",
    "black_scholes",
    "monte_carlo_terminal",
    "simulate_paths",
    "gbm_path",
    "PathGenerator",
    "SimulationBatch",
    "SequenceRandomSource",
    "TerminalStats",
    "default_random_source",
    "GBM",
]
