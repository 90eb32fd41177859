"""
Darknet Simulation Module
=========================

Location swapping on a fixed topology, and the random-walk sampling it
relies on.

In a darknet nodes cannot pick arbitrary swap partners; they find one
by a short random walk. ``random_walk_distribution_test`` checks how
closely such walks approximate the intended target distribution.
"""

import logging
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray

from ..graph.graph import Graph
from ..graph.random_source import RandomSource
from ..validation.statistical_tests import bucketed_pdf

logger = logging.getLogger(__name__)


def darknet_swap(
    graph: Graph,
    n_attempts: int,
    uniform: bool,
    walk_dist: int,
    uniform_walk: bool,
    rng: RandomSource,
) -> int:
    """
    Perform the darknet location swapping algorithm repeatedly.

    Parameters
    ----------
    graph : Graph
        Graph whose node locations are swapped in place
    n_attempts : int
        Number of swaps to attempt
    uniform : bool
        If True, choose both nodes uniformly (centralized baseline);
        otherwise the target is the end of a random walk from the origin
    walk_dist : int
        Hops per walk when using decentralized walks
    uniform_walk : bool
        Whether to walk uniformly or correct for the high-degree bias.
        Corrected walks reject some hops, so they take twice as many.
    rng : RandomSource
        Randomness source

    Returns
    -------
    int
        Number of swap requests accepted
    """
    n = graph.size()
    n_accepted = 0
    for _ in range(n_attempts):
        origin = graph.get_node(rng.uniform_int(n))
        if uniform:
            target = graph.get_node(rng.uniform_int(n))
        else:
            hops = walk_dist if uniform_walk else 2 * walk_dist
            target = origin.random_walk(hops, uniform_walk, rng)
        if origin.attempt_swap(target):
            n_accepted += 1

    logger.info(f"Accepted {n_accepted} of {n_attempts} swap attempts")
    return n_accepted


def random_walk_distribution_test(
    graph: Graph,
    n_walks: int,
    hops_per_walk: int,
    uniform: bool,
    rng: RandomSource,
) -> Tuple[NDArray[np.int64], int]:
    """
    Tally where random walks from uniformly chosen origins terminate.

    Parameters
    ----------
    graph : Graph
        Graph to walk on
    n_walks : int
        Number of independent walks
    hops_per_walk : int
        Hops per walk
    uniform : bool
        Uniform walk (True) or degree-corrected walk (False)
    rng : RandomSource
        Randomness source

    Returns
    -------
    Tuple[NDArray[np.int64], int]
        (terminal count per node index, number of walks ending on their origin)
    """
    choice_freq = np.zeros(graph.size(), dtype=np.int64)
    dup_count = 0
    for _ in range(n_walks):
        origin = graph.get_node(rng.uniform_int(graph.size()))
        dest = origin.random_walk(hops_per_walk, uniform, rng)
        choice_freq[dest.index] += 1
        if dest is origin:
            dup_count += 1

    logger.info(f"Origin selected as dest on {dup_count} walks out of {n_walks}")
    return choice_freq, dup_count


def walk_distribution_pdfs(
    graph: Graph,
    n_walks: int,
    n_buckets: int,
    hops_uniform: int,
    hops_corrected: int,
    rng: RandomSource,
) -> Dict[str, NDArray[np.int64]]:
    """
    Bucketed walk-endpoint distributions next to a uniform reference.

    The reference draws ``n_walks`` node indices uniformly; the other two
    run uniform and degree-corrected walks. Each per-node count array is
    sorted and summed into ``n_buckets`` buckets so the shapes can be
    compared regardless of which nodes are over-sampled.

    Returns
    -------
    Dict[str, NDArray[np.int64]]
        'reference', 'uniform' and 'weighted' bucketed PDFs, plus the raw
        per-node counts under 'reference_counts', 'uniform_counts' and
        'weighted_counts'
    """
    n = graph.size()
    reference = np.zeros(n, dtype=np.int64)
    for _ in range(n_walks):
        reference[rng.uniform_int(n)] += 1

    logger.info("Computing uniform walks...")
    uniform_counts, _ = random_walk_distribution_test(graph, n_walks, hops_uniform, True, rng)
    logger.info("Computing weighted walks...")
    weighted_counts, _ = random_walk_distribution_test(graph, n_walks, hops_corrected, False, rng)

    return {
        "reference": bucketed_pdf(reference, n_buckets),
        "uniform": bucketed_pdf(uniform_counts, n_buckets),
        "weighted": bucketed_pdf(weighted_counts, n_buckets),
        "reference_counts": reference,
        "uniform_counts": uniform_counts,
        "weighted_counts": weighted_counts,
    }
