"""
Weighted Distribution Module
============================

Replicates an empirical distribution of integer values recorded as a
two-column table::

    <value> <number of occurrences>

Draws return each value with probability proportional to its
occurrence count. Used to reproduce measured degree distributions.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np

from ..graph.random_source import RandomSource

logger = logging.getLogger(__name__)


class WeightedDistribution:
    """
    Discrete distribution built from (value, occurrences) pairs.

    Parameters
    ----------
    events : Iterable[Tuple[int, int]]
        (value, occurrences) pairs
    rng : RandomSource
        Randomness source for draws

    Examples
    --------
    >>> dist = WeightedDistribution([(10, 1), (20, 3), (30, 1)], RandomSource.from_seed(1))
    >>> dist.random_value() in (10, 20, 30)
    True
    """

    def __init__(self, events: Iterable[Tuple[int, int]], rng: RandomSource):
        events = list(events)
        if not events:
            raise ValueError("Distribution has no events")
        for value, occurrences in events:
            if occurrences < 0:
                raise ValueError(f"Negative occurrence count {occurrences} for value {value}")

        self.values = np.array([value for value, _ in events], dtype=np.int64)
        self.occurrences = np.array([count for _, count in events], dtype=np.int64)
        self._cumulative = np.cumsum(self.occurrences)
        self.total_occurrences = int(self._cumulative[-1])
        if self.total_occurrences <= 0:
            raise ValueError("Distribution has no occurrences")
        self.rng = rng

    @classmethod
    def from_file(cls, filepath: Union[str, Path], rng: RandomSource) -> "WeightedDistribution":
        """
        Load a distribution from a whitespace-separated two-column file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        ValueError
            If a line does not hold exactly two integers
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Distribution file not found: {path}")

        events: List[Tuple[int, int]] = []
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                tokens = line.split()
                if not tokens or tokens[0].startswith("#"):
                    continue
                if len(tokens) != 2:
                    raise ValueError(
                        f"{path}:{line_number}: expected '<value> <occurrences>', got {line.strip()!r}"
                    )
                try:
                    events.append((int(tokens[0]), int(tokens[1])))
                except ValueError as e:
                    raise ValueError(f"{path}:{line_number}: {e}") from e

        logger.info(f"Loaded {len(events)} events from {path}")
        return cls(events, rng)

    def random_value(self) -> int:
        """
        Draw a value with probability proportional to its occurrences.

        Returns
        -------
        int
            Selected value
        """
        r = self.rng.uniform_int(self.total_occurrences)
        idx = int(np.searchsorted(self._cumulative, r, side="right"))
        return int(self.values[idx])

    def probabilities(self) -> np.ndarray:
        """Normalized probability of each value, in table order."""
        return self.occurrences / self.total_occurrences
