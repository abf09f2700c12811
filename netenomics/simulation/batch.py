"""Container for a batch of independently simulated price paths."""

from typing import Dict, List, Optional, Sequence
import numpy as np
import pandas as pd

from netenomics.exceptions import InvalidArgumentError
from netenomics.simulation.reduction import TerminalAccumulator, TerminalStats


class SimulationBatch:
    """A set of simulated paths sharing the same starting parameters.

    Paths are independent of each other and carry no ordering meaning.
    Every path has the same number of steps.

    Parameters
    ----------
    paths : list of np.ndarray
        Simulated paths, each of length ``steps + 1``
    start_price : float, optional
        Common first value. Taken from the first path when omitted.
    """

    def __init__(
        self,
        paths: Sequence[np.ndarray],
        start_price: Optional[float] = None,
    ):
        if len(paths) == 0:
            raise InvalidArgumentError("a simulation batch needs at least one path")

        self.paths: List[np.ndarray] = [np.asarray(p, dtype=float) for p in paths]
        lengths = {p.size for p in self.paths}
        if len(lengths) != 1:
            raise InvalidArgumentError("all paths in a batch must have the same length")

        self.num_paths = len(self.paths)
        self.num_steps = self.paths[0].size - 1
        self.start_price = (
            float(self.paths[0][0]) if start_price is None else start_price
        )

    def __len__(self) -> int:
        return self.num_paths

    def __iter__(self):
        return iter(self.paths)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.paths[index]

    def as_array(self) -> np.ndarray:
        """Stack paths into an array of shape ``(num_paths, num_steps + 1)``."""
        return np.vstack(self.paths)

    def terminal_prices(self) -> np.ndarray:
        """Last value of every path."""
        return np.array([p[-1] for p in self.paths])

    def terminal_stats(self) -> TerminalStats:
        """Summarise terminal prices relative to the start price."""
        accumulator = TerminalAccumulator(self.start_price)
        return accumulator.extend(self.terminal_prices()).result()

    def prices_at(self, step: int) -> np.ndarray:
        """Value of every path at *step*.

        Raises
        ------
        InvalidArgumentError
            If *step* is outside ``0..num_steps``
        """
        if step < 0 or step > self.num_steps:
            raise InvalidArgumentError(
                f"step must be within [0, {self.num_steps}], got {step}"
            )
        return np.array([p[step] for p in self.paths])

    def bounds_at(self, step: int) -> Dict[str, float]:
        """Get min/max/mean/std/median across paths at a step.

        Parameters
        ----------
        step : int
            Step index, 0 being the start price

        Returns
        -------
        dict
            Dictionary with 'min', 'max', 'mean', 'std' and 'median' keys
        """
        prices = self.prices_at(step)

        return {
            "min": float(np.min(prices)),
            "max": float(np.max(prices)),
            "mean": float(np.mean(prices)),
            "std": float(np.std(prices)),
            "median": float(np.median(prices)),
        }

    def statistics(self) -> Dict[str, float]:
        """Get summary statistics about the batch.

        Returns
        -------
        dict
            Dictionary with statistics:
            - num_paths: Number of paths
            - num_steps: Steps per path
            - start_price: Common starting price
            - average_end_price, max_potential, min_potential,
              probability_of_loss: terminal price summary
        """
        terminal = self.terminal_stats()
        return {
            "num_paths": self.num_paths,
            "num_steps": self.num_steps,
            "start_price": self.start_price,
            "average_end_price": terminal.average_end_price,
            "max_potential": terminal.max_potential,
            "min_potential": terminal.min_potential,
            "probability_of_loss": terminal.probability_of_loss,
        }

    def to_frame(self, index: Optional[pd.Index] = None) -> pd.DataFrame:
        """Paths as a DataFrame with one column per path.

        Parameters
        ----------
        index : pd.Index, optional
            Row index of length ``num_steps + 1``, e.g. a DatetimeIndex.
            Defaults to the step number.
        """
        if index is None:
            index = pd.RangeIndex(self.num_steps + 1, name="step")
        elif len(index) != self.num_steps + 1:
            raise InvalidArgumentError(
                f"index must have {self.num_steps + 1} entries, got {len(index)}"
            )
        columns = [f"path_{i}" for i in range(self.num_paths)]
        return pd.DataFrame(self.as_array().T, index=index, columns=columns)
