"""
Generators Module
=================

This module provides ring small-world graph generators and the
sampling strategies they are built from.

Submodules
----------
builders
    Sandberg, length-distribution, 1D Kleinberg and peer-sampled builders
sampling
    Cumulative weight tables and closest-value index lookup
link_length
    Continuous link length sources and the cached 1/d peer sampler
degree_sources
    Fixed, Poisson and empirical target degree sources
from_config
    Degree sources and graphs built from simulation config dictionaries
"""

from .builders import (
    GenerationStalledError,
    generate_nodes,
    generate_sandberg,
    generate_graph,
    generate_1d_kleinberg_graph,
    generate_peer_source_graph,
)
from .sampling import closest_index, cumulative_weights, sample_index
from .link_length import (
    LinkLengthSource,
    KleinbergLengthSource,
    UniformLengthSource,
    PeerSource,
    KleinbergLinkSource,
)
from .from_config import (
    GRAPH_MODES,
    degree_source_from_config,
    link_length_source_from_config,
    build_graph_from_config,
)
from .degree_sources import (
    DegreeSource,
    FixedDegreeSource,
    PoissonDegreeSource,
    ConformingDegreeSource,
)

__all__ = [
    # Builders
    "GenerationStalledError",
    "generate_nodes",
    "generate_sandberg",
    "generate_graph",
    "generate_1d_kleinberg_graph",
    "generate_peer_source_graph",
    # Sampling
    "closest_index",
    "cumulative_weights",
    "sample_index",
    # Link lengths
    "LinkLengthSource",
    "KleinbergLengthSource",
    "UniformLengthSource",
    "PeerSource",
    "KleinbergLinkSource",
    # Degree sources
    "DegreeSource",
    "FixedDegreeSource",
    "PoissonDegreeSource",
    "ConformingDegreeSource",
    # Config-driven generation
    "GRAPH_MODES",
    "degree_source_from_config",
    "link_length_source_from_config",
    "build_graph_from_config",
]
