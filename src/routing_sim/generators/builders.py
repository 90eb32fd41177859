"""
Graph Builders
==============

Generators for ring small-world topologies.

- ``generate_sandberg``: ring plus one random shortcut per node
- ``generate_graph``: degree targets with link lengths from a
  ``LinkLengthSource``
- ``generate_1d_kleinberg_graph``: links with probability proportional
  to 1/d, fast (evenly spaced approximation) or slow (exact)
- ``generate_peer_source_graph``: degree targets with peers drawn by a
  ``PeerSource`` such as ``KleinbergLinkSource``

All degree-driven builders use the same acceptance rule: a candidate is
skipped if it is the source itself or already a peer, and a candidate
that already has its target degree is skipped with probability
``REJECT_PROBABILITY``. Occasionally accepting a saturated peer keeps
generation from stalling once every reachable peer is full.

References
----------
.. [1] J. Kleinberg, "The Small-World Phenomenon: An Algorithmic
   Perspective", 1999.
.. [2] O. Sandberg, "Searching in a Small World", 2005.
"""

import logging
import math
from typing import Callable, List, Optional

import numpy as np

from ..config import DEFAULT_MAX_ATTEMPTS, REJECT_PROBABILITY, SANDBERG_DEGREE
from ..graph.graph import Graph, GraphParam
from ..graph.location import ring_distances
from ..graph.node import SimpleNode
from ..graph.random_source import RandomSource
from .degree_sources import DegreeSource, FixedDegreeSource
from .link_length import KleinbergLinkSource, LinkLengthSource, PeerSource
from .sampling import closest_index, cumulative_weights, sample_index

logger = logging.getLogger(__name__)


class GenerationStalledError(RuntimeError):
    """A source node exhausted its connection attempts."""


def generate_nodes(param: GraphParam, rng: RandomSource, degree_source: DegreeSource) -> Graph:
    """
    Place ``param.n`` nodes on the ring in ascending location order.

    Parameters
    ----------
    param : GraphParam
        Size and spacing. Fast generation spaces nodes evenly at i/n,
        otherwise locations are uniform random draws.
    rng : RandomSource
        Randomness for locations; also handed to every node
    degree_source : DegreeSource
        Queried once per node, in index order

    Returns
    -------
    Graph
        Graph with nodes and no edges
    """
    n = param.n
    if param.fast_generation:
        locations = np.arange(n, dtype=float) / n
    else:
        locations = np.array([rng.uniform_double() for _ in range(n)])
    locations.sort()

    graph = Graph()
    for location in locations:
        graph.add_node(SimpleNode(float(location), rng, degree_source.next_degree()))
    return graph


def _check_degree_targets(graph: Graph) -> None:
    max_reachable = graph.size() - 1
    for node in graph:
        if node.target_degree > max_reachable:
            raise ValueError(
                f"Node {node.index} has target degree {node.target_degree} "
                f"but only {max_reachable} other nodes exist"
            )


def _connect_to_degree(
    src: SimpleNode,
    draw_peer: Callable[[], SimpleNode],
    rng: RandomSource,
    max_attempts: Optional[int],
) -> int:
    """
    Connect ``src`` to drawn peers until it reaches its target degree.

    Returns
    -------
    int
        Number of candidates drawn
    """
    attempts = 0
    while not src.at_degree():
        if max_attempts is not None and attempts >= max_attempts:
            raise GenerationStalledError(
                f"Node {src.index} reached {src.degree()}/{src.target_degree} "
                f"peers after {attempts} attempts"
            )
        attempts += 1
        dest = draw_peer()
        if dest is src or src.is_connected(dest):
            continue
        if dest.at_degree() and rng.uniform_double() < REJECT_PROBABILITY:
            continue
        src.connect(dest)
    return attempts


def _finish(graph: Graph, name: str) -> Graph:
    for node in graph:
        assert node.at_degree(), f"Node {node.index} below target degree after build"
    logger.info(
        f"Generated {name}: {graph.size()} nodes, {graph.n_edges()} edges"
    )
    return graph


def generate_sandberg(param: GraphParam, rng: RandomSource) -> Graph:
    """
    Generate a ring with one random shortcut per node.

    Every node links to its predecessor and successor (index order,
    wrapping at 0) and adds one shortcut to a uniformly chosen node it
    is not yet linked to. Shortcuts are one-sided, so every node ends up
    with exactly three peers of its own; the returned graph is marked
    non-symmetric.

    Parameters
    ----------
    param : GraphParam
        Size and spacing; degree targets are not used
    rng : RandomSource
        Randomness source

    Returns
    -------
    Graph
        Graph where every node has degree 3

    Examples
    --------
    >>> g = generate_sandberg(GraphParam(100, True), RandomSource.from_seed(1))
    >>> {node.degree() for node in g}
    {3}
    """
    n = param.n
    if n < 4:
        raise ValueError(f"Sandberg graphs need at least 4 nodes, got n={n}")

    graph = generate_nodes(param, rng, FixedDegreeSource(SANDBERG_DEGREE))
    graph.symmetric = False

    # Base ring: X <-> X - 1 mod N, built from two one-sided links.
    for i in range(n):
        node = graph.get_node(i)
        predecessor = graph.get_node((i - 1) % n)
        node.connect_outgoing(predecessor)
        predecessor.connect_outgoing(node)

    for i in range(n):
        node = graph.get_node(i)
        while True:
            other = rng.uniform_int(n)
            if other != i and not node.is_connected(graph.get_node(other)):
                break
        node.connect_outgoing(graph.get_node(other))

    return _finish(graph, "Sandberg graph")


def generate_graph(
    param: GraphParam,
    rng: RandomSource,
    degree_source: DegreeSource,
    link_length_source: LinkLengthSource,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> Graph:
    """
    Generate a graph following given degree and link length distributions.

    For each node below its target degree, the distances to every node
    are sorted once; each drawn length then selects the node whose
    distance is closest to it.

    Parameters
    ----------
    param : GraphParam
        Size and spacing
    rng : RandomSource
        Randomness source
    degree_source : DegreeSource
        Target degree per node
    link_length_source : LinkLengthSource
        Link length distribution
    max_attempts : int, optional
        Candidates drawn per node before giving up (None for no limit)

    Returns
    -------
    Graph
        Graph where every node has at least its target degree
    """
    graph = generate_nodes(param, rng, degree_source)
    _check_degree_targets(graph)
    locations = graph.locations

    for src in graph:
        if src.at_degree():
            continue

        distances = ring_distances(src.location, locations)
        order = np.argsort(distances, kind="stable")
        sorted_distances = distances[order]

        def draw_peer() -> SimpleNode:
            length = link_length_source.sample_length(rng)
            return graph.get_node(int(order[closest_index(sorted_distances, length)]))

        attempts = _connect_to_degree(src, draw_peer, rng, max_attempts)
        logger.debug(f"Node {src.index}: {src.degree()} peers after {attempts} draws")

    return _finish(graph, "length-distribution graph")


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def generate_1d_kleinberg_graph(
    param: GraphParam,
    rng: RandomSource,
    degree_source: DegreeSource,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> Graph:
    """
    Generate a one-dimensional Kleinberg graph with undirected edges.

    Links are chosen with probability proportional to 1/d until every
    node reaches its target degree.

    Parameters
    ----------
    param : GraphParam
        Size and generation mode. With ``fast_generation`` nodes are
        evenly spaced and link offsets come from a continuous
        approximation, accurate for large n: steps = round((n/2) ** U)
        in a random direction. Otherwise nodes are placed randomly and
        every link is drawn from the exact cumulative 1/d table of its
        source node.
    rng : RandomSource
        Randomness source for locations and links
    degree_source : DegreeSource
        Target degree per node
    max_attempts : int, optional
        Candidates drawn per node before giving up (None for no limit)

    Returns
    -------
    Graph
        Graph where every node has at least its target degree

    Examples
    --------
    >>> rng = RandomSource.from_seed(42)
    >>> g = generate_1d_kleinberg_graph(GraphParam(200, True), rng, FixedDegreeSource(4))
    >>> min(node.degree() for node in g) >= 4
    True
    """
    n = param.n
    graph = generate_nodes(param, rng, degree_source)
    _check_degree_targets(graph)

    if param.fast_generation:
        max_steps = n / 2.0

        for i, src in enumerate(graph):
            if src.at_degree():
                continue

            def draw_peer() -> SimpleNode:
                # Nodes are sorted and evenly spaced, so an index offset
                # is a fixed ring distance.
                steps = _round_half_up(max_steps ** rng.uniform_double())
                assert 0 <= steps <= max_steps + 0.5
                idx = i + steps if rng.uniform_bool() else i - steps
                return graph.get_node(idx % n)

            _connect_to_degree(src, draw_peer, rng, max_attempts)
    else:
        locations = graph.locations

        for i, src in enumerate(graph):
            if src.at_degree():
                continue
            sum_prob = cumulative_weights(i, locations)

            def draw_peer() -> SimpleNode:
                return graph.get_node(sample_index(sum_prob, rng))

            _connect_to_degree(src, draw_peer, rng, max_attempts)

    mode = "fast" if param.fast_generation else "exact"
    return _finish(graph, f"1D Kleinberg graph ({mode})")


def generate_peer_source_graph(
    param: GraphParam,
    rng: RandomSource,
    degree_source: DegreeSource,
    peer_source_factory: Callable[[List[SimpleNode]], PeerSource] = KleinbergLinkSource,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> Graph:
    """
    Generate a graph whose peers are drawn by a node sampler.

    Parameters
    ----------
    param : GraphParam
        Size and spacing
    rng : RandomSource
        Randomness source
    degree_source : DegreeSource
        Target degree per node
    peer_source_factory : callable, optional
        Builds a ``PeerSource`` from the placed nodes. Defaults to the cached
        1/d ``KleinbergLinkSource``.
    max_attempts : int, optional
        Candidates drawn per node before giving up (None for no limit)

    Returns
    -------
    Graph
        Graph where every node has at least its target degree
    """
    graph = generate_nodes(param, rng, degree_source)
    _check_degree_targets(graph)
    peer_source = peer_source_factory(graph.nodes)

    for src in graph:
        if src.at_degree():
            continue
        _connect_to_degree(src, lambda: peer_source.sample_peer(src, rng), rng, max_attempts)

    return _finish(graph, "peer-sampled graph")
