"""
Config-driven Generation
========================

Build degree sources and graphs from the dictionaries loaded out of
``config/simulation_config.yaml``.
"""

import logging
from typing import Any, Dict

from ..config import DEFAULT_MAX_ATTEMPTS
from ..data.weighted_distribution import WeightedDistribution
from ..graph.graph import Graph, GraphParam
from ..graph.random_source import RandomSource
from .builders import (
    generate_1d_kleinberg_graph,
    generate_graph,
    generate_peer_source_graph,
    generate_sandberg,
)
from .degree_sources import (
    ConformingDegreeSource,
    DegreeSource,
    FixedDegreeSource,
    PoissonDegreeSource,
)
from .link_length import KleinbergLengthSource, LinkLengthSource, UniformLengthSource

logger = logging.getLogger(__name__)

GRAPH_MODES = ("sandberg", "length", "kleinberg", "peer")


def degree_source_from_config(config: Dict[str, Any], rng: RandomSource) -> DegreeSource:
    """
    Build a degree source from the ``degree`` config section.

    Parameters
    ----------
    config : Dict[str, Any]
        Keys: 'model' ('fixed', 'poisson' or 'conforming'), and 'degree',
        'mean' or 'distribution_file' for the chosen model
    rng : RandomSource
        Randomness source for stochastic models

    Returns
    -------
    DegreeSource
        Configured degree source
    """
    model = config.get("model", "fixed")
    if model == "fixed":
        return FixedDegreeSource(int(config["degree"]))
    elif model == "poisson":
        return PoissonDegreeSource(float(config["mean"]), rng)
    elif model == "conforming":
        if not config.get("distribution_file"):
            raise ValueError("Conforming degree model needs a distribution_file")
        return ConformingDegreeSource(WeightedDistribution.from_file(config["distribution_file"], rng))
    else:
        raise ValueError(f"Unknown degree model: {model}")


def link_length_source_from_config(config: Dict[str, Any], n: int) -> LinkLengthSource:
    model = config.get("model", "kleinberg")
    if model == "kleinberg":
        return KleinbergLengthSource(n)
    elif model == "uniform":
        return UniformLengthSource()
    else:
        raise ValueError(f"Unknown link length model: {model}")


def build_graph_from_config(config: Dict[str, Any], rng: RandomSource) -> Graph:
    """
    Build a graph as described by a simulation config.

    Parameters
    ----------
    config : Dict[str, Any]
        Full simulation config with 'graph', 'degree' and (for the
        length mode) 'link_length' sections
    rng : RandomSource
        Randomness source

    Returns
    -------
    Graph
        Generated graph
    """
    graph_config = config["graph"]
    mode = graph_config.get("mode", "kleinberg")
    if mode not in GRAPH_MODES:
        raise ValueError(f"Unknown graph mode: {mode} (expected one of {GRAPH_MODES})")

    param = GraphParam(int(graph_config["n"]), bool(graph_config.get("fast_generation", False)))
    max_attempts = graph_config.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    logger.info(f"Building {mode} graph: n={param.n}, fast={param.fast_generation}")

    if mode == "sandberg":
        return generate_sandberg(param, rng)

    degree_source = degree_source_from_config(config.get("degree", {"model": "fixed", "degree": 4}), rng)
    if mode == "length":
        length_source = link_length_source_from_config(config.get("link_length", {}), param.n)
        return generate_graph(param, rng, degree_source, length_source, max_attempts=max_attempts)
    elif mode == "kleinberg":
        return generate_1d_kleinberg_graph(param, rng, degree_source, max_attempts=max_attempts)
    else:
        return generate_peer_source_graph(param, rng, degree_source, max_attempts=max_attempts)
