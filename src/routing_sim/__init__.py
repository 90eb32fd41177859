"""
Routing Topology Simulator
==========================

Generation and analysis of Kleinberg-style ring small-world networks
for studying decentralized peer-to-peer routing.

Modules
-------
graph
    Ring locations, nodes, graphs and the random source
generators
    Sandberg, length-distribution, 1D Kleinberg and peer-sampled builders
metrics
    Degree, edge length and clustering statistics
simulation
    Darknet location swapping and random-walk sampling
validation
    Statistical checks of topologies and walk sampling
data
    Graph persistence and empirical distributions
visualization
    Plotting and table generation utilities
"""

__version__ = "0.1.0"

from . import graph
from . import generators
from . import metrics
from . import simulation
from . import validation
from . import data
from . import visualization

__all__ = [
    "graph",
    "generators",
    "metrics",
    "simulation",
    "validation",
    "data",
    "visualization",
    "__version__",
]
