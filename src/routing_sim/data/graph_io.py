"""
Graph I/O Module
================

Persist graphs to a plain text format and convert them to NetworkX.

File layout::

    # routing_sim graph v1
    nodes <N>
    <location> <target degree>        one line per node, index order
    edges <E>
    <low index> <high index>          one line per edge, low < high

Each undirected edge is written exactly once. Graphs with one-sided
links (Sandberg shortcuts) are written as their undirected closure, and
read back with every edge symmetric.
"""

import logging
from pathlib import Path
from typing import List, Set, Tuple, Union

import networkx as nx

from ..config import GRAPH_FILE_HEADER
from ..graph.graph import Graph
from ..graph.location import is_valid_location
from ..graph.node import SimpleNode
from ..graph.random_source import RandomSource

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Persisted graph is malformed or truncated."""


def edge_pairs(graph: Graph) -> List[Tuple[int, int]]:
    """
    Every edge as a (low, high) index pair, each listed once.

    Pairs appear in order of their first sighting while scanning nodes
    in index order.
    """
    seen: Set[Tuple[int, int]] = set()
    pairs = []
    for node in graph:
        for peer in node.get_connections():
            pair = (min(node.index, peer.index), max(node.index, peer.index))
            if pair not in seen:
                seen.add(pair)
                pairs.append(pair)
    return pairs


def write_graph(graph: Graph, filepath: Union[str, Path]) -> int:
    """
    Write a graph to a file.

    Parameters
    ----------
    graph : Graph
        Graph to write
    filepath : str or Path
        Destination file

    Returns
    -------
    int
        Number of edges written
    """
    path = Path(filepath)
    pairs = edge_pairs(graph)
    assert len(pairs) == graph.n_edges()

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{GRAPH_FILE_HEADER}\n")
            f.write(f"nodes {graph.size()}\n")
            for node in graph:
                f.write(f"{node.location!r} {node.target_degree}\n")
            f.write(f"edges {len(pairs)}\n")
            for low, high in pairs:
                f.write(f"{low} {high}\n")
    except OSError as e:
        logger.error(f"Could not write to {path}: {e}")
        raise

    logger.info(f"Wrote {graph.size()} nodes and {len(pairs)} edges to {path}")
    return len(pairs)


def _parse_count(line: str, keyword: str, line_number: int) -> int:
    tokens = line.split()
    if len(tokens) != 2 or tokens[0] != keyword:
        raise GraphFormatError(f"line {line_number}: expected '{keyword} <count>', got {line.strip()!r}")
    try:
        count = int(tokens[1])
    except ValueError as e:
        raise GraphFormatError(f"line {line_number}: {e}") from e
    if count < 0:
        raise GraphFormatError(f"line {line_number}: negative {keyword} count {count}")
    return count


def read_graph(filepath: Union[str, Path], rng: RandomSource) -> Graph:
    """
    Construct a graph from a file written by ``write_graph``.

    Parameters
    ----------
    filepath : str or Path
        File to read
    rng : RandomSource
        Randomness source handed to every node

    Returns
    -------
    Graph
        Graph defined by the file

    Raises
    ------
    GraphFormatError
        If the file is malformed or truncated
    """
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line for line in f if line.strip() and not line.startswith("#")]
    except OSError as e:
        logger.error(f"Could not read from {path}: {e}")
        raise

    cursor = 0

    def next_line() -> Tuple[str, int]:
        nonlocal cursor
        if cursor >= len(lines):
            raise GraphFormatError(f"{path}: unexpected end of file")
        cursor += 1
        return lines[cursor - 1], cursor

    line, number = next_line()
    network_size = _parse_count(line, "nodes", number)
    if network_size <= 0:
        raise GraphFormatError(f"{path}: must have positive nodes, got {network_size}")

    graph = Graph()
    for _ in range(network_size):
        line, number = next_line()
        tokens = line.split()
        try:
            location, target_degree = float(tokens[0]), int(tokens[1])
        except (IndexError, ValueError) as e:
            raise GraphFormatError(f"node record {number}: {line.strip()!r}") from e
        if len(tokens) != 2 or not is_valid_location(location):
            raise GraphFormatError(f"node record {number}: {line.strip()!r}")
        graph.add_node(SimpleNode(location, rng, target_degree))

    line, number = next_line()
    written_connections = _parse_count(line, "edges", number)
    logger.info(f"Reading {written_connections} connections from {path}")
    for _ in range(written_connections):
        line, number = next_line()
        tokens = line.split()
        try:
            low, high = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError) as e:
            raise GraphFormatError(f"edge record {number}: {line.strip()!r}") from e
        if len(tokens) != 2 or not 0 <= low < high < network_size:
            raise GraphFormatError(f"edge record {number}: invalid pair {line.strip()!r}")
        try:
            graph.get_node(low).connect(graph.get_node(high))
        except ValueError as e:
            raise GraphFormatError(f"edge record {number}: {e}") from e

    if cursor != len(lines):
        raise GraphFormatError(f"{path}: {len(lines) - cursor} unexpected trailing lines")

    return graph


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Convert to an undirected NetworkX graph.

    Node keys are indices; 'location' and 'target_degree' are stored as
    node attributes and 'length' as an edge attribute.
    """
    G = nx.Graph()
    for node in graph:
        G.add_node(node.index, location=node.location, target_degree=node.target_degree)
    for low, high in edge_pairs(graph):
        G.add_edge(low, high, length=graph.get_node(low).distance_to(graph.get_node(high)))
    return G
