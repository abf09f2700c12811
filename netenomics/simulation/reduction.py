"""Order-independent reduction of simulated terminal prices."""

from dataclasses import dataclass
from typing import Iterable
import math

from netenomics.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class TerminalStats:
    """Aggregate statistics over simulated terminal prices.

    Attributes
    ----------
    average_end_price : float
        Mean terminal price
    max_potential : float
        Highest terminal price
    min_potential : float
        Lowest terminal price
    probability_of_loss : float
        Fraction (0 to 1) of trials ending below the start price
    """

    average_end_price: float
    max_potential: float
    min_potential: float
    probability_of_loss: float


class TerminalAccumulator:
    """Order-independent reduction of terminal prices.

    Keeps a count, sum, min, max and loss count. Two accumulators built
    from disjoint sets of trials can be merged in any order and yield the
    same statistics.

    Parameters
    ----------
    start_price : float
        Price a trial must end below to count as a loss
    """

    def __init__(self, start_price: float):
        self.start_price = start_price
        self.count = 0
        self.total = 0.0
        self.minimum = math.inf
        self.maximum = -math.inf
        self.losses = 0

    def add(self, price: float) -> None:
        self.count += 1
        self.total += price
        self.minimum = min(self.minimum, price)
        self.maximum = max(self.maximum, price)
        if price < self.start_price:
            self.losses += 1

    def extend(self, prices: Iterable[float]) -> "TerminalAccumulator":
        for price in prices:
            self.add(float(price))
        return self

    def merge(self, other: "TerminalAccumulator") -> "TerminalAccumulator":
        """Return a new accumulator combining this one with *other*."""
        if other.start_price != self.start_price:
            raise InvalidArgumentError(
                "cannot merge accumulators with different start prices"
            )
        merged = TerminalAccumulator(self.start_price)
        merged.count = self.count + other.count
        merged.total = self.total + other.total
        merged.minimum = min(self.minimum, other.minimum)
        merged.maximum = max(self.maximum, other.maximum)
        merged.losses = self.losses + other.losses
        return merged

    def result(self) -> TerminalStats:
        if self.count == 0:
            raise InvalidArgumentError("no terminal prices accumulated")
        return TerminalStats(
            average_end_price=self.total / self.count,
            max_potential=self.maximum,
            min_potential=self.minimum,
            probability_of_loss=self.losses / self.count,
        )
