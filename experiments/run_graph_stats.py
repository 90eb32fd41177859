#!/usr/bin/env python3
"""
Graph Statistics Runner
=======================

Builds ring small-world graphs, prints their topology statistics and
optionally runs darknet location swapping on them.

Usage:
    python run_graph_stats.py [--mode MODE] [--n N] [--trials T] [--output OUTPUT]
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import load_simulation_config
from routing_sim.config import RANDOM_SEED
from routing_sim.data import write_graph
from routing_sim.generators import GRAPH_MODES, build_graph_from_config
from routing_sim.graph import RandomSource
from routing_sim.metrics import degrees, edge_lengths, format_graph_stats, graph_stats, graph_stats_header
from routing_sim.simulation import darknet_swap
from routing_sim.visualization import (
    plot_degree_distribution,
    plot_edge_length_distribution,
    results_to_markdown,
    save_figure,
    stats_table,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate small-world graphs and report topology statistics"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=GRAPH_MODES,
        default=None,
        help="Generation mode (default: from config)",
    )
    parser.add_argument("--n", type=int, default=None, help="Number of nodes")
    parser.add_argument(
        "--slow",
        action="store_true",
        help="Random locations and exact link selection",
    )
    parser.add_argument("--trials", type=int, default=1, help="Graphs to generate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--swaps",
        action="store_true",
        help="Run darknet swapping after each build and report again",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Human-readable stats instead of tab-separated rows",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Directory for graphs, figures and the stats table",
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    config = load_simulation_config()

    if args.mode is not None:
        config["graph"]["mode"] = args.mode
    if args.n is not None:
        config["graph"]["n"] = args.n
    if args.slow:
        config["graph"]["fast_generation"] = False
    seed = args.seed if args.seed is not None else config.get("seed", RANDOM_SEED)

    output_dir = Path(args.output) if args.output else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    if not args.verbose:
        print(graph_stats_header())

    rows = []
    for trial in range(args.trials):
        rng = RandomSource.from_seed(seed + trial)
        graph = build_graph_from_config(config, rng)
        print(format_graph_stats(graph, verbose=args.verbose))
        rows.append({"trial": trial, "stage": "built", **graph_stats(graph)})

        if args.swaps:
            darknet = config["darknet"]
            accepted = darknet_swap(
                graph,
                darknet["n_attempts"],
                darknet["uniform"],
                darknet["walk_hops"],
                darknet["uniform_walk"],
                rng,
            )
            logger.info(f"Trial {trial}: {accepted} swaps accepted")
            rows.append({"trial": trial, "stage": "swapped", **graph_stats(graph)})

        if output_dir is not None:
            stem = f"{config['graph']['mode']}_n{graph.size()}_t{trial}"
            write_graph(graph, output_dir / f"{stem}.graph")
            save_figure(plot_degree_distribution(degrees(graph)), str(output_dir / f"{stem}_degrees.png"))
            save_figure(
                plot_edge_length_distribution(edge_lengths(graph), n=graph.size()),
                str(output_dir / f"{stem}_lengths.png"),
            )

    df = stats_table(rows)
    logger.info("\n" + results_to_markdown(df))

    if output_dir is not None:
        df.to_csv(output_dir / f"graph_stats_{timestamp}.csv", index=False)
        with open(output_dir / f"config_{timestamp}.json", "w") as f:
            json.dump(config, f, indent=2, default=lambda o: o.item() if isinstance(o, np.generic) else str(o))
        logger.info(f"Results saved to: {output_dir}")


if __name__ == "__main__":
    main()
