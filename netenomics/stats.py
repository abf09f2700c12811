"""
Statistics primitives shared by the indicator and risk routines.

All functions accept any sequence of numbers (list, tuple, numpy array or
pandas Series) and return plain Python floats.
"""

from typing import Sequence
import numpy as np

from netenomics.exceptions import EmptyInputError, InvalidArgumentError


def _as_array(series: Sequence[float], name: str = "series") -> np.ndarray:
    """Convert *series* to a 1-D float array, rejecting empty input."""
    values = np.asarray(series, dtype=float).ravel()
    if values.size == 0:
        raise EmptyInputError(f"{name} must contain at least one value")
    return values


def mean(series: Sequence[float]) -> float:
    """
    Arithmetic mean of a series.

    Parameters
    ----------
    series : sequence of float
        Input samples

    Returns
    -------
    float
        Mean of the samples

    Raises
    ------
    EmptyInputError
        If the series is empty
    """
    return float(np.mean(_as_array(series)))


def population_std(series: Sequence[float]) -> float:
    """
    Population standard deviation (divides by ``n``, not ``n - 1``).

    Raises
    ------
    EmptyInputError
        If the series is empty
    """
    values = _as_array(series)
    deviations = values - np.mean(values)
    return float(np.sqrt(np.mean(deviations ** 2)))


def percentile(series: Sequence[float], p: float) -> float:
    """
    Linear-interpolation percentile.

    The series is sorted ascending and the value at fractional rank
    ``(n - 1) * p`` is interpolated between its two neighbours.

    Parameters
    ----------
    series : sequence of float
        Input samples
    p : float
        Quantile in [0, 1]

    Returns
    -------
    float
        Interpolated percentile value

    Raises
    ------
    EmptyInputError
        If the series is empty
    InvalidArgumentError
        If ``p`` is outside [0, 1]
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"p must be within [0, 1], got {p}")

    ordered = np.sort(_as_array(series))
    pos = (ordered.size - 1) * p
    base = int(np.floor(pos))
    rest = pos - base

    if base + 1 < ordered.size:
        return float(ordered[base] + rest * (ordered[base + 1] - ordered[base]))
    return float(ordered[base])
