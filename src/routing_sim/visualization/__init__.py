"""
Visualization Module
====================

This module provides plotting and table generation utilities
for topology statistics and walk experiments.

Submodules
----------
plots
    Matplotlib-based plotting functions
tables
    Summary table generation
"""

from .plots import (
    plot_degree_distribution,
    plot_edge_length_distribution,
    plot_walk_distributions,
    save_figure,
)
from .tables import (
    stats_table,
    walk_pdf_table,
    results_to_markdown,
)

__all__ = [
    # Plots
    "plot_degree_distribution",
    "plot_edge_length_distribution",
    "plot_walk_distributions",
    "save_figure",
    # Tables
    "stats_table",
    "walk_pdf_table",
    "results_to_markdown",
]
