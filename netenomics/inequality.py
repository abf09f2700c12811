"""Wealth inequality measures."""

from typing import Sequence
import numpy as np

from netenomics.exceptions import InvalidArgumentError


def gini(wealths: Sequence[float]) -> float:
    """
    Gini coefficient of a wealth distribution.

    Computed on the ascending-sorted values as
    ``(n + 1 - 2 * sum((n + 1 - i) * w_i) / sum(w_i)) / n`` with 1-indexed
    ``i``.

    Parameters
    ----------
    wealths : sequence of float
        Non-negative holdings, one per participant

    Returns
    -------
    float
        Coefficient in [0, 1]; 0 for fewer than two participants or when
        every holding is zero

    Raises
    ------
    InvalidArgumentError
        If any holding is negative
    """
    values = np.sort(np.asarray(wealths, dtype=float).ravel())
    if np.any(values < 0):
        raise InvalidArgumentError("wealths must be non-negative")

    n = values.size
    if n < 2:
        return 0.0

    total = float(np.sum(values))
    if total == 0:
        return 0.0

    ranks = np.arange(n, 0, -1, dtype=float)  # n + 1 - i for i = 1..n
    weighted = float(np.sum(ranks * values))
    coefficient = (n + 1 - 2 * (weighted / total)) / n

    # floating-point residue can push equal holdings slightly below zero
    return min(max(coefficient, 0.0), 1.0)
