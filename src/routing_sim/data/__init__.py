"""
Data Module
===========

Graph persistence, NetworkX interop and empirical distributions.

Submodules
----------
graph_io
    Text graph format, reader/writer and ``to_networkx``
weighted_distribution
    Value/occurrence tables drawn in proportion to frequency
"""

from .graph_io import (
    GraphFormatError,
    edge_pairs,
    write_graph,
    read_graph,
    to_networkx,
)
from .weighted_distribution import WeightedDistribution

__all__ = [
    "GraphFormatError",
    "edge_pairs",
    "write_graph",
    "read_graph",
    "to_networkx",
    "WeightedDistribution",
]
