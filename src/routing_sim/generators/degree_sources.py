"""
Degree Sources
==============

Strategies that assign each node its target degree at placement time.
Builders only call ``next_degree()``.
"""

from abc import ABC, abstractmethod

from ..data.weighted_distribution import WeightedDistribution
from ..graph.random_source import RandomSource


class DegreeSource(ABC):
    """Source of per-node target degrees."""

    @abstractmethod
    def next_degree(self) -> int:
        """Target degree for the next node placed."""


class FixedDegreeSource(DegreeSource):
    """Every node gets the same target degree."""

    def __init__(self, degree: int):
        if degree < 0:
            raise ValueError(f"Degree must be non-negative, got {degree}")
        self.degree = degree

    def next_degree(self) -> int:
        return self.degree


class PoissonDegreeSource(DegreeSource):
    """
    Target degrees drawn from a Poisson distribution.

    Parameters
    ----------
    mean : float
        Mean target degree
    rng : RandomSource
        Randomness source for the draws
    """

    def __init__(self, mean: float, rng: RandomSource):
        if mean <= 0:
            raise ValueError(f"Mean degree must be positive, got {mean}")
        self.mean = mean
        self.rng = rng

    def next_degree(self) -> int:
        return self.rng.poisson(self.mean)


class ConformingDegreeSource(DegreeSource):
    """Target degrees following an empirical degree distribution."""

    def __init__(self, distribution: WeightedDistribution):
        self.distribution = distribution

    def next_degree(self) -> int:
        return self.distribution.random_value()
