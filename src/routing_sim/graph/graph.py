"""
Graph Module
============

Container for a small-world ring topology: an ordered list of nodes
whose positions are their indices. Generation lives in
``routing_sim.generators`` and analysis in ``routing_sim.metrics``.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np
from numpy.typing import NDArray

from .node import SimpleNode

logger = logging.getLogger(__name__)


@dataclass
class GraphParam:
    """
    Graph generation parameters.

    Parameters
    ----------
    n : int
        Number of nodes. Must be positive.
    fast_generation : bool
        If True, nodes are evenly spaced on the ring and the Kleinberg
        generator uses its continuous approximation. If False, locations
        are drawn uniformly at random and link selection is exact.
    """

    n: int
    fast_generation: bool = False

    def __post_init__(self):
        if self.n <= 0:
            raise ValueError(f"Must have positive nodes, got n={self.n}")


class Graph:
    """
    Ordered collection of ring nodes.

    Parameters
    ----------
    nodes : List[SimpleNode], optional
        Nodes in index order. Node ``i`` must have ``index == i``.
    symmetric : bool, optional
        False only for graphs that carry one-sided edges (Sandberg
        shortcuts). Symmetric graphs assert an even degree sum.
    """

    def __init__(self, nodes: Optional[List[SimpleNode]] = None, symmetric: bool = True):
        self.nodes: List[SimpleNode] = nodes if nodes is not None else []
        self.symmetric = symmetric

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[SimpleNode]:
        return iter(self.nodes)

    def get_node(self, i: int) -> SimpleNode:
        return self.nodes[i]

    def add_node(self, node: SimpleNode) -> None:
        node.index = len(self.nodes)
        self.nodes.append(node)

    def size(self) -> int:
        return len(self.nodes)

    @property
    def locations(self) -> NDArray[np.float64]:
        """Node locations in index order (ascending right after a build)."""
        return np.array([node.location for node in self.nodes], dtype=float)

    def n_edges(self) -> int:
        """
        Count undirected edges.

        Symmetric graphs use half the degree sum. Graphs with one-sided
        links count each distinct unordered pair once, so a link held by
        one end only still counts as one edge.

        Returns
        -------
        int
            Number of edges
        """
        if not self.symmetric:
            return len({
                (min(node.index, peer.index), max(node.index, peer.index))
                for node in self.nodes
                for peer in node.get_connections()
            })

        total = sum(node.degree() for node in self.nodes)
        # every undirected edge is counted from both ends
        assert total % 2 == 0, f"Odd degree sum {total} in a symmetric graph"
        return total // 2
