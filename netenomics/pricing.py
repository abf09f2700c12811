"""Closed-form option pricing."""

import math
from scipy.stats import norm

from netenomics.exceptions import InvalidArgumentError


def black_scholes(
    s: float,
    k: float,
    t: float,
    r: float,
    v: float,
    option_type: str = "call",
) -> float:
    """
    Black-Scholes price of a European option.

    Parameters
    ----------
    s : float
        Spot price
    k : float
        Strike price
    t : float
        Time to expiry in years
    r : float
        Continuously compounded risk-free rate
    v : float
        Annualized volatility
    option_type : str, default='call'
        'call' or 'put'

    Returns
    -------
    float
        Option fair value

    Raises
    ------
    InvalidArgumentError
        If a price, time or volatility is not positive, or
        ``option_type`` is unknown
    """
    for name, value in (("s", s), ("k", k), ("t", t), ("v", v)):
        if value <= 0:
            raise InvalidArgumentError(f"{name} must be positive, got {value}")
    if option_type not in ("call", "put"):
        raise InvalidArgumentError(
            f"option_type must be 'call' or 'put', got {option_type!r}"
        )

    d1 = (math.log(s / k) + (r + v * v / 2) * t) / (v * math.sqrt(t))
    d2 = d1 - v * math.sqrt(t)
    discount = math.exp(-r * t)

    if option_type == "call":
        return float(s * norm.cdf(d1) - k * discount * norm.cdf(d2))
    return float(k * discount * norm.cdf(-d2) - s * norm.cdf(-d1))
