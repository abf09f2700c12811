"""
Moving-window technical indicators.

Every indicator reads a series of prices ordered oldest to newest. Outputs
are aligned to the tail of the input: the first value belongs to the first
complete window.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union
import numpy as np

from netenomics.exceptions import InvalidArgumentError
from netenomics.stats import mean, population_std

# RSI returned when there is not enough history to produce a signal
NEUTRAL_RSI = 50.0


def _check_period(period: int) -> None:
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)) or period < 1:
        raise InvalidArgumentError(f"period must be a positive integer, got {period!r}")


class MovingAverage:
    """Lazy simple moving average over a fixed series.

    Window means are computed on iteration, so iterating twice recomputes
    the same values. Supports ``len()``, integer indexing and slicing;
    a slice returns a list of window means.

    Parameters
    ----------
    series : sequence of float
        Input prices
    period : int
        Window length
    """

    def __init__(self, series: Sequence[float], period: int):
        self.values = np.asarray(series, dtype=float).ravel()
        self.period = period

    def __len__(self) -> int:
        return self.values.size - self.period + 1

    def __iter__(self) -> Iterator[float]:
        for start in range(len(self)):
            yield mean(self.values[start:start + self.period])

    def __getitem__(self, index: Union[int, slice]) -> Union[float, List[float]]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("moving average index out of range")
        return mean(self.values[index:index + self.period])

    def window(self, index: int) -> np.ndarray:
        """Return the window backing output position *index*."""
        return self.values[index:index + self.period]

    def __repr__(self) -> str:
        return f"MovingAverage(period={self.period}, length={len(self)})"


@dataclass(frozen=True)
class BollingerBand:
    """Bollinger band values for one window position."""

    middle: float
    upper: float
    lower: float


def sma(series: Sequence[float], period: int) -> Optional[MovingAverage]:
    """
    Simple moving average.

    Parameters
    ----------
    series : sequence of float
        Input prices
    period : int
        Window length

    Returns
    -------
    MovingAverage or None
        Lazy sequence of ``len(series) - period + 1`` window means, or None
        when the series is shorter than ``period``

    Raises
    ------
    InvalidArgumentError
        If ``period`` is not a positive integer
    """
    _check_period(period)
    if len(series) < period:
        return None
    return MovingAverage(series, period)


def rsi(series: Sequence[float], period: int = 14) -> float:
    """
    Relative Strength Index using Wilder smoothing.

    The first ``period`` price changes seed the average gain and loss as
    simple averages; every later change is folded in with
    ``avg = (avg * (period - 1) + current) / period``.

    Parameters
    ----------
    series : sequence of float
        Input prices
    period : int, default=14
        Smoothing period

    Returns
    -------
    float
        RSI in [0, 100]. 50 when ``len(series) <= period``, 100 when the
        average loss is zero.
    """
    _check_period(period)
    values = np.asarray(series, dtype=float).ravel()
    if values.size <= period:
        return NEUTRAL_RSI

    diffs = np.diff(values)
    gains = np.where(diffs > 0, diffs, 0.0)
    losses = np.where(diffs < 0, -diffs, 0.0)

    avg_gain = float(np.sum(gains[:period])) / period
    avg_loss = float(np.sum(losses[:period])) / period

    for gain, loss in zip(gains[period:], losses[period:]):
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return float(100.0 - 100.0 / (1.0 + rs))


def bollinger_bands(
    series: Sequence[float],
    period: int = 20,
    std_dev_mult: float = 2.0,
) -> Optional[List[BollingerBand]]:
    """
    Bollinger Bands around the simple moving average.

    The standard deviation is the population deviation of each window,
    not of the whole series.

    Parameters
    ----------
    series : sequence of float
        Input prices
    period : int, default=20
        Window length
    std_dev_mult : float, default=2.0
        Band width in standard deviations

    Returns
    -------
    list of BollingerBand or None
        One band per SMA position, or None with insufficient data

    Raises
    ------
    InvalidArgumentError
        If ``period`` is invalid or ``std_dev_mult`` is negative
    """
    if std_dev_mult < 0:
        raise InvalidArgumentError(
            f"std_dev_mult must be non-negative, got {std_dev_mult}"
        )

    averages = sma(series, period)
    if averages is None:
        return None

    bands = []
    for idx, middle in enumerate(averages):
        sd = population_std(averages.window(idx))
        bands.append(
            BollingerBand(
                middle=middle,
                upper=middle + sd * std_dev_mult,
                lower=middle - sd * std_dev_mult,
            )
        )
    return bands
