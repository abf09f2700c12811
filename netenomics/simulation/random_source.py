"""Injectable sources of uniform random numbers for the simulators."""

from typing import Iterable, Optional, Protocol
import numpy as np

from netenomics.exceptions import InvalidArgumentError


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1).

    ``random.Random``, ``numpy.random.Generator`` and
    :class:`SequenceRandomSource` all satisfy this protocol.
    """

    def random(self) -> float:
        ...


class SequenceRandomSource:
    """Replays a fixed cycle of values.

    Useful for deterministic tests: the same values produce the same
    simulation output bit for bit.

    Parameters
    ----------
    values : iterable of float
        Values in [0, 1) to return, repeated cyclically
    """

    def __init__(self, values: Iterable[float]):
        self.values = [float(v) for v in values]
        if not self.values:
            raise InvalidArgumentError("SequenceRandomSource needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise InvalidArgumentError(
                    f"random values must be within [0, 1), got {value}"
                )
        self.position = 0

    def random(self) -> float:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value

    def reset(self) -> None:
        """Restart the cycle from the first value."""
        self.position = 0


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create an independent NumPy generator, seeded when *seed* is given."""
    return np.random.default_rng(seed)


def resolve_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """Return *rng*, or a fresh unseeded generator when it is None."""
    return default_random_source() if rng is None else rng
