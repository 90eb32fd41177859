"""
Link Length Sources
===================

Strategies deciding how far a new link reaches.

Continuous sources return a ring distance via ``sample_length`` that
the generic builder matches against a node's sorted distance table.
Peer sources skip the length step and return a node directly;
``KleinbergLinkSource`` samples from the exact 1/d distribution over
all other nodes.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List

import numpy as np
from numpy.typing import NDArray

from ..graph.node import SimpleNode
from ..graph.random_source import RandomSource
from .sampling import cumulative_weights, sample_index

logger = logging.getLogger(__name__)


class LinkLengthSource(ABC):
    """Source of link lengths on the unit ring."""

    @abstractmethod
    def sample_length(self, rng: RandomSource) -> float:
        """Draw a link length in [0, 0.5]."""


class KleinbergLengthSource(LinkLengthSource):
    """
    Continuous 1/d link length distribution.

    Lengths follow a density proportional to 1/L on [1/n, 1/2], drawn by
    inverse transform: L = (1/n) * (n/2) ** U.

    Parameters
    ----------
    n : int
        Network size; sets the shortest length to one node spacing
    """

    def __init__(self, n: int):
        if n < 2:
            raise ValueError(f"Need at least two nodes, got n={n}")
        self.min_length = 1.0 / n
        self.max_length = 0.5

    def sample_length(self, rng: RandomSource) -> float:
        return self.min_length * (self.max_length / self.min_length) ** rng.uniform_double()


class UniformLengthSource(LinkLengthSource):
    """Lengths uniform on [0, 0.5]: random links with no distance bias."""

    def sample_length(self, rng: RandomSource) -> float:
        return 0.5 * rng.uniform_double()


class PeerSource(ABC):
    """Source of link endpoints drawn directly from the node set."""

    @abstractmethod
    def sample_peer(self, source: SimpleNode, rng: RandomSource) -> SimpleNode:
        """Draw a peer for ``source``; may return ``source`` itself."""


class KleinbergLinkSource(PeerSource):
    """
    Draws peers with probability proportional to 1 / ring distance.

    The cumulative weight table for a source node is built on first use
    and kept for the lifetime of this instance, keyed by node index. The
    node set must not change while the cache is in use; ``clear_cache``
    drops every table.

    Parameters
    ----------
    nodes : List[SimpleNode]
        All nodes that may be chosen as peers, in index order
    """

    def __init__(self, nodes: List[SimpleNode]):
        self.nodes = nodes
        self._locations = np.array([node.location for node in nodes], dtype=float)
        self._sum_probs: Dict[int, NDArray[np.float64]] = {}

    def cumulative_table(self, source: SimpleNode) -> NDArray[np.float64]:
        sum_prob = self._sum_probs.get(source.index)
        if sum_prob is None:
            sum_prob = cumulative_weights(source.index, self._locations)
            self._sum_probs[source.index] = sum_prob
        return sum_prob

    def sample_peer(self, source: SimpleNode, rng: RandomSource) -> SimpleNode:
        """
        Draw a peer for ``source``.

        May return ``source`` itself only when it is the sole node with
        weight at the drawn position; callers reject self-links.
        """
        return self.nodes[sample_index(self.cumulative_table(source), rng)]

    def cache_size(self) -> int:
        return len(self._sum_probs)

    def clear_cache(self) -> None:
        self._sum_probs.clear()
