"""
Plotting Module
===============

This module provides matplotlib-based plotting functions for
visualizing generated topologies and random-walk experiments.

All functions return matplotlib Figure objects for flexibility.
"""

import logging
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import NDArray
import seaborn as sns

from ..validation.statistical_tests import kleinberg_length_cdf

logger = logging.getLogger(__name__)

# Set default style
plt.style.use("seaborn-v0_8-whitegrid")
sns.set_palette("colorblind")


def plot_degree_distribution(
    degrees: NDArray[np.int64],
    title: str = "Degree Distribution",
    log_scale: bool = False,
    figsize: Tuple[int, int] = (10, 5),
) -> plt.Figure:
    """
    Plot degree histogram and complementary CDF.

    Parameters
    ----------
    degrees : NDArray[np.int64]
        Array of node degrees
    title : str, optional
        Plot title
    log_scale : bool, optional
        If True, use log-log scale for the CCDF
    figsize : Tuple[int, int], optional
        Figure size

    Returns
    -------
    plt.Figure
        Matplotlib figure object
    """
    degrees = np.asarray(degrees)
    fig, axes = plt.subplots(1, 2, figsize=figsize)

    ax1 = axes[0]
    bins = np.arange(degrees.min(), degrees.max() + 2) - 0.5
    sns.histplot(degrees, bins=bins, stat="density", ax=ax1)
    ax1.set_xlabel("Degree", fontsize=12)
    ax1.set_ylabel("Density", fontsize=12)
    ax1.set_title("Degree Histogram", fontsize=12)

    ax2 = axes[1]
    sorted_degrees = np.sort(degrees)[::-1]
    ccdf = np.arange(1, len(sorted_degrees) + 1) / len(sorted_degrees)
    ax2.scatter(sorted_degrees, ccdf, alpha=0.5, s=10)
    if log_scale:
        ax2.set_xscale("log")
        ax2.set_yscale("log")
    ax2.set_xlabel("Degree", fontsize=12)
    ax2.set_ylabel("P(D >= d)", fontsize=12)
    ax2.set_title("CCDF", fontsize=12)

    fig.suptitle(title, fontsize=14)
    fig.tight_layout()
    return fig


def plot_edge_length_distribution(
    lengths: NDArray[np.float64],
    n: Optional[int] = None,
    title: str = "Edge Length Distribution",
    figsize: Tuple[int, int] = (8, 6),
) -> plt.Figure:
    """
    Plot the empirical CDF of edge lengths on a log x-axis.

    Parameters
    ----------
    lengths : NDArray[np.float64]
        Edge lengths
    n : int, optional
        Network size. If given, the ideal 1/d CDF is overlaid.
    title : str, optional
        Plot title
    figsize : Tuple[int, int], optional
        Figure size

    Returns
    -------
    plt.Figure
        Matplotlib figure object
    """
    lengths = np.sort(np.asarray(lengths))
    ecdf = np.arange(1, len(lengths) + 1) / len(lengths)

    fig, ax = plt.subplots(figsize=figsize)
    ax.step(lengths, ecdf, where="post", linewidth=2, label="Observed")

    if n is not None:
        x = np.logspace(np.log10(1.0 / n), np.log10(0.5), 200)
        ax.plot(x, kleinberg_length_cdf(x, n), "--", linewidth=2, label="1/d law")

    ax.set_xscale("log")
    ax.set_xlabel("Edge length", fontsize=12)
    ax.set_ylabel("Cumulative fraction", fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend()
    fig.tight_layout()
    return fig


def plot_walk_distributions(
    pdfs: Dict[str, NDArray[np.int64]],
    title: str = "Random Walk Endpoint Distribution",
    figsize: Tuple[int, int] = (10, 6),
) -> plt.Figure:
    """
    Plot bucketed endpoint PDFs from ``walk_distribution_pdfs``.

    Parameters
    ----------
    pdfs : Dict[str, NDArray]
        Must contain 'reference', 'uniform' and 'weighted'
    title : str, optional
        Plot title
    figsize : Tuple[int, int], optional
        Figure size

    Returns
    -------
    plt.Figure
        Matplotlib figure object
    """
    fig, ax = plt.subplots(figsize=figsize)
    for key, label in [
        ("reference", "Reference (uniform draw)"),
        ("uniform", "Uniform walk"),
        ("weighted", "Degree-corrected walk"),
    ]:
        ax.plot(np.arange(len(pdfs[key])), pdfs[key], linewidth=2, label=label)

    ax.set_xlabel("Bucket (least to most sampled)", fontsize=12)
    ax.set_ylabel("Walk endpoints", fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend()
    fig.tight_layout()
    return fig


def save_figure(
    fig: plt.Figure,
    filepath: str,
    dpi: int = 300,
    bbox_inches: str = "tight",
) -> None:
    """
    Save figure to file.

    Parameters
    ----------
    fig : plt.Figure
        Figure to save
    filepath : str
        Output path (extension determines format)
    dpi : int, optional
        Resolution (default: 300)
    bbox_inches : str, optional
        Bounding box (default: 'tight')
    """
    fig.savefig(filepath, dpi=dpi, bbox_inches=bbox_inches)
    plt.close(fig)
    logger.info(f"Saved figure to {filepath}")
