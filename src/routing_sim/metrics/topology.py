"""
Topology Metrics Module
=======================

Read-only structural statistics over a built graph: degree
distribution, edge lengths and clustering coefficients.

Two clustering measures are provided and they are not the same thing:

- ``mean_local_cluster_coeff`` is the unweighted mean of the per-node
  coefficients, giving low-degree nodes as much weight as hubs
- ``global_cluster_coeff`` is the transitivity ratio, closed triplets
  over possible triplets summed across all nodes
"""

import logging
from typing import Any, Dict, Union

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from ..graph.graph import Graph
from ..graph.node import SimpleNode

logger = logging.getLogger(__name__)

GRAPH_STATS_COLUMNS = [
    "nNodes",
    "nEdges",
    "minDegree",
    "maxDegree",
    "globalClusterCoeff",
    "localCCMean",
    "localCCStdDev",
    "localCCSkew",
    "localCCKurtosis",
    "degreeMean",
    "degreeStdDev",
    "degreeSkew",
    "degreeKurtosis",
]


def degree(node: SimpleNode) -> int:
    return node.degree()


def degrees(graph: Graph) -> NDArray[np.int64]:
    """Degree of every node, in index order."""
    return np.array([node.degree() for node in graph], dtype=np.int64)


def min_degree(graph: Graph) -> int:
    if graph.size() == 0:
        return 0
    return min(node.degree() for node in graph)


def max_degree(graph: Graph) -> int:
    if graph.size() == 0:
        return 0
    return max(node.degree() for node in graph)


def degree_variance(graph: Graph) -> float:
    """
    Population variance of node degree, E[d^2] - E[d]^2.

    Computed from running integer sums so the result is exact up to the
    final division.
    """
    n = graph.size()
    if n == 0:
        return 0.0
    sum_degrees = 0
    sum_square_degrees = 0
    for node in graph:
        d = node.degree()
        sum_degrees += d
        sum_square_degrees += d * d
    return (n * sum_square_degrees - sum_degrees * sum_degrees) / (n * n)


def edge_lengths(graph: Graph) -> NDArray[np.float64]:
    """
    Ring length of every edge, each counted once.

    An edge is emitted from the first end scanned in index order, which
    is its lower-index end unless the link is one-sided.

    Returns
    -------
    NDArray[np.float64]
        One length per edge
    """
    lengths = []
    seen = set()
    for i, node in enumerate(graph):
        assert node.index == i
        for peer in node.get_connections():
            assert peer.index != i
            pair = (min(i, peer.index), max(i, peer.index))
            if pair in seen:
                continue
            seen.add(pair)
            lengths.append(node.distance_to_loc(peer.location))

    assert len(lengths) == graph.n_edges()
    return np.array(lengths, dtype=float)


def local_cluster_coeffs(graph: Graph) -> NDArray[np.float64]:
    return np.array([node.local_cluster_coeff() for node in graph], dtype=float)


def mean_local_cluster_coeff(graph: Graph) -> float:
    """
    Unweighted mean of the local clustering coefficients.

    This is *not* the global clustering coefficient; see
    ``global_cluster_coeff``.

    Returns
    -------
    float
        Mean local clustering coefficient in [0, 1]
    """
    n = graph.size()
    if n == 0:
        return 0.0
    mean = float(sum(node.local_cluster_coeff() for node in graph) / n)
    assert 0.0 <= mean <= 1.0
    return mean


def global_cluster_coeff(graph: Graph) -> float:
    """
    Global clustering coefficient (transitivity).

    Returns
    -------
    float
        Sum of closed triplets over sum of d(d-1)/2 across nodes, or 0.0
        when no node has two peers
    """
    n_closed = 0
    n_total = 0
    for node in graph:
        d = node.degree()
        n_closed += node.closed_triplets()
        n_total += (d * (d - 1)) // 2

    if n_total == 0:
        return 0.0
    return n_closed / n_total


def array_stats(values: Union[NDArray, list]) -> Dict[str, float]:
    """
    Descriptive moments of an array.

    Parameters
    ----------
    values : array-like
        Input values

    Returns
    -------
    Dict[str, float]
        'mean', 'std' (population), 'skewness' and 'kurtosis' (excess).
        Higher moments are NaN for constant or empty input.
    """
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        return {"mean": np.nan, "std": np.nan, "skewness": np.nan, "kurtosis": np.nan}

    result = {
        "mean": float(np.mean(values)),
        "std": float(np.std(values)),
        "skewness": np.nan,
        "kurtosis": np.nan,
    }
    if np.ptp(values) > 0:
        result["skewness"] = float(stats.skew(values))
        result["kurtosis"] = float(stats.kurtosis(values))
    else:
        logger.debug("Constant array: skewness and kurtosis undefined")
    return result


def graph_stats(graph: Graph) -> Dict[str, Any]:
    """
    Bundle of topology statistics.

    Parameters
    ----------
    graph : Graph
        Input graph

    Returns
    -------
    Dict[str, Any]
        Keys follow ``GRAPH_STATS_COLUMNS``: size, edge count, degree
        extremes, global clustering, and the mean, standard deviation,
        skewness and kurtosis of the local clustering coefficients and
        of the degrees.

    Examples
    --------
    >>> from routing_sim.generators import generate_sandberg
    >>> from routing_sim.graph import GraphParam, RandomSource
    >>> g = generate_sandberg(GraphParam(50, True), RandomSource.from_seed(3))
    >>> graph_stats(g)["maxDegree"]
    3
    """
    cc_stats = array_stats(local_cluster_coeffs(graph))
    deg_stats = array_stats(degrees(graph))
    return {
        "nNodes": graph.size(),
        "nEdges": graph.n_edges(),
        "minDegree": min_degree(graph),
        "maxDegree": max_degree(graph),
        "globalClusterCoeff": global_cluster_coeff(graph),
        "localCCMean": cc_stats["mean"],
        "localCCStdDev": cc_stats["std"],
        "localCCSkew": cc_stats["skewness"],
        "localCCKurtosis": cc_stats["kurtosis"],
        "degreeMean": deg_stats["mean"],
        "degreeStdDev": deg_stats["std"],
        "degreeSkew": deg_stats["skewness"],
        "degreeKurtosis": deg_stats["kurtosis"],
    }


def graph_stats_header() -> str:
    """Column headers for ``format_graph_stats(graph, verbose=False)``."""
    return "\t".join(GRAPH_STATS_COLUMNS)


def format_graph_stats(graph: Graph, verbose: bool = True) -> str:
    """
    Render topology statistics as text.

    Parameters
    ----------
    graph : Graph
        Input graph
    verbose : bool, optional
        If True, a labelled multi-line summary; otherwise one
        tab-separated row matching ``graph_stats_header()``

    Returns
    -------
    str
        Formatted statistics
    """
    if not verbose:
        row = graph_stats(graph)
        return "\t".join(str(row[column]) for column in GRAPH_STATS_COLUMNS)

    n_edges = graph.n_edges()
    mean_degree = float(np.mean(degrees(graph))) if graph.size() else 0.0
    lines = [
        "Graph stats:",
        f"Size:                              {graph.size()}",
        f"Edges:                             {n_edges}",
        f"Min degree:                        {min_degree(graph)}",
        f"Max degree:                        {max_degree(graph)}",
        f"Mean degree:                       {mean_degree}",
        f"Degree stddev:                     {np.sqrt(degree_variance(graph))}",
        f"Mean local clustering coefficient: {mean_local_cluster_coeff(graph)}",
        f"Global clustering coefficient:     {global_cluster_coeff(graph)}",
    ]
    return "\n".join(lines)
