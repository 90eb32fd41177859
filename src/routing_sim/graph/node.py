"""
Node Module
===========

A node on the location ring together with its peer connections.

Connections are undirected: ``connect`` always updates both ends.
``connect_outgoing`` is the one deliberate exception, used only when
seeding the Sandberg ring, where the caller establishes symmetry (or
deliberately leaves a shortcut one-sided) with separate calls.
"""

import logging
import math
from typing import List, Optional, Set

from .location import ring_distance
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Floor for distances in the swap rule; two peers at the same location
# would otherwise give log(0).
_MIN_LOG_DISTANCE = 1e-300


class SimpleNode:
    """
    Node with a ring location, a target degree and a peer list.

    Parameters
    ----------
    location : float
        Location in [0, 1)
    rng : RandomSource
        Randomness used by the node's own decentralized operations
    target_degree : int
        Degree the generators try to reach
    index : int, optional
        Position of the node in its graph
    """

    def __init__(
        self,
        location: float,
        rng: Optional[RandomSource],
        target_degree: int,
        index: int = -1,
    ):
        self.location = location
        self.rng = rng
        self.target_degree = target_degree
        self.index = index
        self._connections: List["SimpleNode"] = []
        self._peer_indices: Set[int] = set()

    def __repr__(self) -> str:
        return (
            f"SimpleNode(index={self.index}, location={self.location:.6f}, "
            f"degree={self.degree()}/{self.target_degree})"
        )

    def degree(self) -> int:
        return len(self._connections)

    def at_degree(self) -> bool:
        """True once the node has at least its target degree."""
        return len(self._connections) >= self.target_degree

    def is_connected(self, other: "SimpleNode") -> bool:
        return other.index in self._peer_indices

    def get_connections(self) -> List["SimpleNode"]:
        """Peers in the order they were connected."""
        return self._connections

    def connect(self, other: "SimpleNode") -> None:
        """
        Add an undirected edge between this node and ``other``.

        Raises
        ------
        ValueError
            If ``other`` is this node or the two are already connected
        """
        if other is self or other.index == self.index:
            raise ValueError(f"Node {self.index} cannot connect to itself")
        if self.is_connected(other) or other.is_connected(self):
            raise ValueError(f"Nodes {self.index} and {other.index} are already connected")
        self.connect_outgoing(other)
        other.connect_outgoing(self)

    def connect_outgoing(self, other: "SimpleNode") -> None:
        """One-sided connection. Only the ring seeding step uses this."""
        if other is self:
            raise ValueError(f"Node {self.index} cannot connect to itself")
        if other.index in self._peer_indices:
            raise ValueError(f"Node {self.index} already has {other.index} as a peer")
        self._connections.append(other)
        self._peer_indices.add(other.index)

    def distance_to(self, other: "SimpleNode") -> float:
        return ring_distance(self.location, other.location)

    def distance_to_loc(self, location: float) -> float:
        return ring_distance(self.location, location)

    def closed_triplets(self) -> int:
        """Number of neighbor pairs that are themselves connected."""
        closed = 0
        peers = self._connections
        for i in range(len(peers)):
            for j in range(i + 1, len(peers)):
                if peers[i].is_connected(peers[j]):
                    closed += 1
        return closed

    def local_cluster_coeff(self) -> float:
        """
        Fraction of neighbor pairs that are connected.

        Nodes with fewer than two peers have a coefficient of 0.
        """
        d = self.degree()
        if d < 2:
            return 0.0
        return self.closed_triplets() / (d * (d - 1) / 2.0)

    def random_walk(self, hops: int, uniform: bool, rng: RandomSource) -> "SimpleNode":
        """
        Walk ``hops`` steps over the graph and return the final node.

        Parameters
        ----------
        hops : int
            Number of steps to take
        uniform : bool
            If True, each step moves to a uniformly chosen peer, so the
            walk ends on nodes in proportion to their degree. If False,
            a step from u to v is accepted with probability
            min(1, deg(u) / deg(v)) and otherwise the walk stays put
            (Metropolis-Hastings), which removes the high-degree bias
            at the cost of rejected hops.
        rng : RandomSource
            Randomness source for the walk

        Returns
        -------
        SimpleNode
            Node the walk terminated on
        """
        current = self
        for _ in range(hops):
            peers = current.get_connections()
            if not peers:
                break
            candidate = peers[rng.uniform_int(len(peers))]
            if uniform:
                current = candidate
            elif rng.uniform_double() < current.degree() / candidate.degree():
                current = candidate
        return current

    def _log_distance_sum(self, location: float, exclude: "SimpleNode") -> float:
        total = 0.0
        for peer in self._connections:
            if peer is exclude:
                continue
            total += math.log(max(ring_distance(location, peer.location), _MIN_LOG_DISTANCE))
        return total

    def attempt_swap(self, other: "SimpleNode") -> bool:
        """
        Try to exchange locations with ``other``.

        The swap is always accepted when it does not increase the product
        of the distances from both nodes to their peers, and otherwise
        accepted with probability before / after. The edge between the two
        nodes, if any, is left out of both products since its length does
        not change.

        Returns
        -------
        bool
            True if the locations were exchanged
        """
        if other is self:
            return False

        before = (
            self._log_distance_sum(self.location, other)
            + other._log_distance_sum(other.location, self)
        )
        after = (
            self._log_distance_sum(other.location, other)
            + other._log_distance_sum(self.location, self)
        )

        if after > before and self.rng.uniform_double() >= math.exp(before - after):
            return False

        self.location, other.location = other.location, self.location
        return True
