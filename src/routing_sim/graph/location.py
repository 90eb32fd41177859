"""
Ring Location Module
====================

Locations are points on the unit ring [0, 1). Distances wrap around,
so the largest possible distance between two locations is 0.5.
"""

import numpy as np
from numpy.typing import NDArray


def ring_distance(a: float, b: float) -> float:
    """
    Distance between two ring locations.

    Parameters
    ----------
    a, b : float
        Locations in [0, 1)

    Returns
    -------
    float
        min(|a - b|, 1 - |a - b|), in [0, 0.5]

    Examples
    --------
    >>> ring_distance(0.125, 0.875)
    0.25
    """
    d = abs(a - b)
    return min(d, 1.0 - d)


def ring_distances(location: float, locations: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vectorized ring distance from one location to an array of locations."""
    d = np.abs(np.asarray(locations, dtype=float) - location)
    return np.minimum(d, 1.0 - d)


def is_valid_location(location: float) -> bool:
    return 0.0 <= location < 1.0
