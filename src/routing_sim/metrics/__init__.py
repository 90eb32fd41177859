"""
Metrics Module
==============

This module provides structural statistics for ring small-world
graphs.

Submodules
----------
topology
    Degree, edge length and clustering statistics
"""

from .topology import (
    GRAPH_STATS_COLUMNS,
    degree,
    degrees,
    min_degree,
    max_degree,
    degree_variance,
    edge_lengths,
    local_cluster_coeffs,
    mean_local_cluster_coeff,
    global_cluster_coeff,
    array_stats,
    graph_stats,
    graph_stats_header,
    format_graph_stats,
)

__all__ = [
    "GRAPH_STATS_COLUMNS",
    "degree",
    "degrees",
    "min_degree",
    "max_degree",
    "degree_variance",
    "edge_lengths",
    "local_cluster_coeffs",
    "mean_local_cluster_coeff",
    "global_cluster_coeff",
    "array_stats",
    "graph_stats",
    "graph_stats_header",
    "format_graph_stats",
]
