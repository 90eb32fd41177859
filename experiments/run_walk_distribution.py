#!/usr/bin/env python3
"""
Random Walk Distribution Runner
===============================

Checks whether random walks on a 1D Kleinberg graph with Poisson
target degrees sample nodes uniformly. For each trial a fresh graph is
built and three per-node count arrays are collected: a reference of
uniform draws, uniform walks, and degree-corrected walks. Each array
is sorted and bucketed, and the bucketed PDFs are printed side by side.

Usage:
    python run_walk_distribution.py [--quick] [--output OUTPUT]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import load_simulation_config
from routing_sim.config import DEFAULT_N_BUCKETS, DEFAULT_WALK_HOPS_CORRECTED, DEFAULT_WALK_HOPS_UNIFORM
from routing_sim.generators import PoissonDegreeSource, generate_1d_kleinberg_graph
from routing_sim.graph import GraphParam, RandomSource
from routing_sim.metrics import degrees, format_graph_stats
from routing_sim.simulation import walk_distribution_pdfs
from routing_sim.validation import test_degree_proportional, test_walk_uniformity
from routing_sim.visualization import plot_walk_distributions, save_figure, walk_pdf_table

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare random walk endpoint distributions against uniform sampling"
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Small graph and few walks",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Directory for the PDF table and figures",
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    config = load_simulation_config()
    walks = config["walks"]

    n_nodes = walks["n_nodes"]
    n_walks = walks["n_walks"]
    n_buckets = walks.get("n_buckets", DEFAULT_N_BUCKETS)
    n_trials = walks["n_trials"]
    hops_uniform = walks.get("hops_uniform", DEFAULT_WALK_HOPS_UNIFORM)
    hops_corrected = walks.get("hops_corrected", DEFAULT_WALK_HOPS_CORRECTED)
    if args.quick:
        n_nodes, n_walks, n_buckets, n_trials = 400, 100_000, 40, 1

    output_dir = Path(args.output) if args.output else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    pdfs_by_trial = []
    for trial in range(n_trials):
        logger.info("Creating test graph...")
        rng = RandomSource.from_seed(trial)
        graph = generate_1d_kleinberg_graph(
            GraphParam(n_nodes, fast_generation=True),
            rng,
            PoissonDegreeSource(walks["degree_mean"], rng),
        )
        logger.info("\n" + format_graph_stats(graph, verbose=True))

        pdfs = walk_distribution_pdfs(
            graph, n_walks, n_buckets, hops_uniform, hops_corrected, rng
        )
        pdfs_by_trial.append(pdfs)

        uniform_fit = test_degree_proportional(pdfs["uniform_counts"], degrees(graph))
        weighted_fit = test_walk_uniformity(pdfs["weighted_counts"])
        logger.info(
            f"Trial {trial}: uniform walk vs degree chi2={uniform_fit['chi2']:.1f} "
            f"(p={uniform_fit['p_value']:.3g}); corrected walk vs uniform "
            f"chi2={weighted_fit['chi2']:.1f} (p={weighted_fit['p_value']:.3g})"
        )

        if output_dir is not None:
            save_figure(plot_walk_distributions(pdfs), str(output_dir / f"walk_pdfs_t{trial}.png"))

    table = walk_pdf_table(pdfs_by_trial)
    print("Distribution PDFs:")
    print(table.to_csv(sep="\t", index=False))

    if output_dir is not None:
        table.to_csv(output_dir / "walk_pdfs.tsv", sep="\t", index=False)
        logger.info(f"Results saved to: {output_dir}")


if __name__ == "__main__":
    main()
