"""Ordinary least squares forecasting over index positions."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence
import numpy as np

from netenomics.exceptions import InsufficientDataError

# Absolute slope above which a series is labelled as trending
TREND_THRESHOLD = 0.1


class TrendStrength(str, Enum):
    """Qualitative label for the fitted slope."""

    HIGH_TREND = "HIGH_TREND"
    STAGNANT = "STAGNANT"


@dataclass(frozen=True)
class LinearForecast:
    """One-step-ahead forecast from a fitted line.

    Attributes
    ----------
    next_value : float
        Fitted value at index ``n`` (one step beyond the series)
    confidence : TrendStrength
        HIGH_TREND when ``|slope| > TREND_THRESHOLD``, else STAGNANT
    slope : float
        Fitted slope per index step
    intercept : float
        Fitted value at index 0
    """

    next_value: float
    confidence: TrendStrength
    slope: float
    intercept: float


def linear_predict(series: Sequence[float]) -> LinearForecast:
    """
    Fit ``value = slope * index + intercept`` and predict the next value.

    The slope comes from the closed-form normal equations over the sums of
    x, y, xy and x squared, with ``x = 0..n-1``.

    Parameters
    ----------
    series : sequence of float
        Observations ordered oldest to newest

    Returns
    -------
    LinearForecast
        Forecast for index ``n`` with its trend label

    Raises
    ------
    InsufficientDataError
        If fewer than two observations are given
    """
    y = np.asarray(series, dtype=float).ravel()
    n = y.size
    if n < 2:
        raise InsufficientDataError(
            f"linear regression needs at least 2 points, got {n}"
        )

    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    if abs(slope) > TREND_THRESHOLD:
        confidence = TrendStrength.HIGH_TREND
    else:
        confidence = TrendStrength.STAGNANT

    return LinearForecast(
        next_value=slope * n + intercept,
        confidence=confidence,
        slope=slope,
        intercept=intercept,
    )
