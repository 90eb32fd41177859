"""
Weighted Index Sampling
=======================

Weighted discrete sampling by nearest-value lookup in a cumulative
weight table. A uniform draw scaled to the table total lands in a
steep part of the CDF more often, so nodes with more weight are picked
more often.

The lookup returns the index whose cumulative value is closest to the
draw, not the first greater element. Index i therefore receives the
draws between the midpoints to its neighbors.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from ..graph.location import ring_distances
from ..graph.random_source import RandomSource

logger = logging.getLogger(__name__)


def closest_index(values: NDArray[np.float64], x: float) -> int:
    """
    Index of the element of a sorted array closest to ``x``.

    Parameters
    ----------
    values : NDArray[np.float64]
        Non-decreasing array
    x : float
        Value to look up

    Returns
    -------
    int
        Index i minimizing |values[i] - x|. On a tie between the two
        neighbors of the insertion point the greater one is kept.

    Examples
    --------
    >>> closest_index(np.array([1.0, 2.0, 4.0]), 2.9)
    1
    >>> closest_index(np.array([1.0, 2.0, 4.0]), 3.0)
    2
    """
    n = len(values)
    if n == 0:
        raise ValueError("Cannot search an empty array")

    # first index with values[idx] >= x; equal to the match on an exact hit
    idx = int(np.searchsorted(values, x, side="left"))
    if idx >= n:
        idx = n - 1

    if idx > 0 and abs(x - values[idx - 1]) < abs(x - values[idx]):
        idx -= 1

    if idx > 0:
        assert abs(x - values[idx]) <= abs(x - values[idx - 1])
    if idx < n - 1:
        assert abs(x - values[idx]) <= abs(x - values[idx + 1])

    return idx


def cumulative_weights(source_index: int, locations: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Build the 1/distance cumulative weight table for one source node.

    Parameters
    ----------
    source_index : int
        Index of the node links are drawn from
    locations : NDArray[np.float64]
        Locations of all nodes, in index order

    Returns
    -------
    NDArray[np.float64]
        S with S[j] = S[j-1] + 1 / d(source, j), and S[source] = S[source-1]
        so the source keeps its slot with zero weight. S[-1] is the total.

    Raises
    ------
    ValueError
        If another node shares the source's location
    """
    locations = np.asarray(locations, dtype=float)
    distances = ring_distances(locations[source_index], locations)

    others = np.ones(len(locations), dtype=bool)
    others[source_index] = False
    if np.any(distances[others] == 0.0):
        raise ValueError(f"Node {source_index} shares its location with another node")

    weights = np.zeros(len(locations))
    weights[others] = 1.0 / distances[others]
    sum_prob = np.cumsum(weights)

    # CDF must be non-decreasing
    assert np.all(np.diff(sum_prob) >= 0.0)
    return sum_prob


def sample_index(sum_prob: NDArray[np.float64], rng: RandomSource) -> int:
    """Draw a uniform value up to the table total and return the closest index."""
    norm = sum_prob[-1]
    x = rng.uniform_double() * norm
    assert x <= norm
    return closest_index(sum_prob, x)
