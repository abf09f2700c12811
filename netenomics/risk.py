"""
Portfolio risk measures and history diagnostics.

Value at Risk uses historical simulation over simple returns; the Sharpe
ratio and outlier filter use the population standard deviation.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import math
import numpy as np

from netenomics.exceptions import InvalidArgumentError
from netenomics.stats import mean, population_std

# Minimum history length for analyze_market_state
MARKET_STATE_MIN_HISTORY = 5

# Width of the overbought/oversold envelope in standard deviations
MARKET_STATE_BAND = 2.0


@dataclass(frozen=True)
class MarketState:
    """Snapshot classification of the latest price against its history.

    Attributes
    ----------
    state : str
        "OVERBOUGHT", "OVERSOLD" or "STABLE"
    trend : str
        "BULLISH" if the last change is positive, else "BEARISH"
    volatility : float
        Coefficient of variation of the history (sd / mean)
    momentum : float
        Last step change in percent
    signal : str
        "BUY_DIP" if the last price is below the mean, else "HOLD"
    """

    state: str
    trend: str
    volatility: float
    momentum: float
    signal: str


def analyze_market_state(history: Sequence[float]) -> Optional[MarketState]:
    """
    Classify the latest price against the mean and standard deviation.

    Parameters
    ----------
    history : sequence of float
        Prices ordered oldest to newest

    Returns
    -------
    MarketState or None
        None when fewer than ``MARKET_STATE_MIN_HISTORY`` prices are given

    Notes
    -----
    A zero previous price or a zero mean is divided as 1, so flat or
    zero-priced histories report a finite momentum and volatility.
    """
    values = np.asarray(history, dtype=float).ravel()
    if values.size < MARKET_STATE_MIN_HISTORY:
        return None

    current = float(values[-1])
    previous = float(values[-2])
    avg = mean(values)
    sd = population_std(values)
    change = (current - previous) / (previous or 1.0) * 100

    state = "STABLE"
    if current > avg + sd * MARKET_STATE_BAND:
        state = "OVERBOUGHT"
    if current < avg - sd * MARKET_STATE_BAND:
        state = "OVERSOLD"

    return MarketState(
        state=state,
        trend="BULLISH" if change > 0 else "BEARISH",
        volatility=sd / (avg or 1.0),
        momentum=change,
        signal="BUY_DIP" if current < avg else "HOLD",
    )


def value_at_risk(history: Sequence[float], confidence: float = 0.95) -> float:
    """
    Historical Value at Risk.

    Simple returns of consecutive prices are sorted ascending and the
    return at index ``floor((1 - confidence) * len(returns))`` is reported.
    A zero price is divided as 1 when forming the following return.

    Parameters
    ----------
    history : sequence of float
        Prices ordered oldest to newest
    confidence : float, default=0.95
        Confidence level in [0, 1]

    Returns
    -------
    float
        The loss-quantile return (negative for a loss), or 0.0 when there
        are fewer than two prices or the index falls past the last return

    Raises
    ------
    InvalidArgumentError
        If ``confidence`` is outside [0, 1]
    """
    if not 0.0 <= confidence <= 1.0:
        raise InvalidArgumentError(
            f"confidence must be within [0, 1], got {confidence}"
        )

    prices = np.asarray(history, dtype=float).ravel()
    if prices.size < 2:
        return 0.0

    base = prices[:-1]
    returns = np.sort(np.diff(prices) / np.where(base == 0, 1.0, base))
    index = math.floor((1 - confidence) * returns.size)
    if index >= returns.size:
        return 0.0
    return float(returns[index])


def sharpe_ratio(returns: Sequence[float], risk_free_rate: float = 0.02) -> float:
    """
    Risk-adjusted return.

    A zero standard deviation is replaced by 1 so that flat series yield
    the plain excess return instead of dividing by zero.

    Raises
    ------
    EmptyInputError
        If ``returns`` is empty
    """
    avg_return = mean(returns)
    sd = population_std(returns)
    return (avg_return - risk_free_rate) / (sd or 1.0)


def clean_outliers(history: Sequence[float], sigma_threshold: float = 3.0) -> List[float]:
    """
    Drop values further than ``sigma_threshold`` deviations from the mean.

    Parameters
    ----------
    history : sequence of float
        Input values
    sigma_threshold : float, default=3.0
        Allowed distance from the mean in population standard deviations

    Returns
    -------
    list of float
        Retained values in their original order
    """
    if sigma_threshold < 0:
        raise InvalidArgumentError(
            f"sigma_threshold must be non-negative, got {sigma_threshold}"
        )

    values = np.asarray(history, dtype=float).ravel()
    avg = mean(values)
    limit = sigma_threshold * population_std(values)
    return [float(v) for v in values if abs(v - avg) <= limit]
