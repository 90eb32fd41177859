"""
Experiments Module
==================

This module provides scripts for running topology experiments.

Scripts
-------
run_graph_stats
    Generate graphs, report topology statistics, optional darknet swapping
run_walk_distribution
    Compare random walk endpoint distributions against uniform sampling
"""

__all__ = [
    "run_graph_stats",
    "run_walk_distribution",
]
