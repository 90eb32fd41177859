"""
Graph Module
============

Core data model: ring locations, nodes, graphs and the random source.

Submodules
----------
location
    Ring metric on [0, 1)
node
    Node with location, target degree and peer connections
graph
    Ordered node container and generation parameters
random_source
    Seedable numpy-backed random source
"""

from .location import ring_distance, ring_distances, is_valid_location
from .node import SimpleNode
from .graph import Graph, GraphParam
from .random_source import RandomSource

__all__ = [
    "ring_distance",
    "ring_distances",
    "is_valid_location",
    "SimpleNode",
    "Graph",
    "GraphParam",
    "RandomSource",
]
