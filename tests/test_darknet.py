"""
Tests for darknet location swapping and random-walk sampling.
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from routing_sim.generators import FixedDegreeSource, PoissonDegreeSource, generate_1d_kleinberg_graph
from routing_sim.graph import GraphParam, RandomSource
from routing_sim.metrics import degrees, edge_lengths
from routing_sim.simulation import (
    darknet_swap,
    random_walk_distribution_test,
    walk_distribution_pdfs,
)


def shuffle_locations(graph, seed):
    """Permute locations among nodes, destroying the link length bias."""
    locations = graph.locations
    np.random.default_rng(seed).shuffle(locations)
    for node, location in zip(graph, locations):
        node.location = float(location)


@pytest.fixture
def kleinberg_graph():
    return generate_1d_kleinberg_graph(GraphParam(200, True), RandomSource.from_seed(31), FixedDegreeSource(4))


@pytest.fixture(scope="module")
def poisson_graph():
    rng = RandomSource.from_seed(8)
    return generate_1d_kleinberg_graph(GraphParam(200, True), rng, PoissonDegreeSource(8, rng))


@pytest.fixture(scope="module")
def pdfs(poisson_graph):
    return walk_distribution_pdfs(poisson_graph, 4000, 20, 10, 20, RandomSource.from_seed(4))


class TestDarknetSwap:
    """Tests for repeated location swapping."""

    def test_accepted_count_bounded(self, kleinberg_graph):
        accepted = darknet_swap(kleinberg_graph, 500, True, 10, False, RandomSource.from_seed(1))
        assert 0 <= accepted <= 500

    @pytest.mark.parametrize("uniform,uniform_walk", [(True, False), (False, True), (False, False)])
    def test_locations_stay_a_permutation(self, kleinberg_graph, uniform, uniform_walk):
        """Test that swapping only moves existing locations between nodes."""
        before = np.sort(kleinberg_graph.locations)
        darknet_swap(kleinberg_graph, 1000, uniform, 5, uniform_walk, RandomSource.from_seed(2))
        assert np.array_equal(np.sort(kleinberg_graph.locations), before)

    def test_topology_unchanged(self, kleinberg_graph):
        edges_before = kleinberg_graph.n_edges()
        degrees_before = degrees(kleinberg_graph).copy()
        darknet_swap(kleinberg_graph, 1000, True, 10, False, RandomSource.from_seed(3))
        assert kleinberg_graph.n_edges() == edges_before
        assert np.array_equal(degrees(kleinberg_graph), degrees_before)

    def test_swapping_restores_short_links(self, kleinberg_graph):
        """Test that swapping on scrambled locations shortens links again."""
        shuffle_locations(kleinberg_graph, seed=4)
        scrambled = edge_lengths(kleinberg_graph).mean()
        darknet_swap(kleinberg_graph, 20000, True, 10, False, RandomSource.from_seed(5))
        assert edge_lengths(kleinberg_graph).mean() < 0.8 * scrambled

    def test_zero_attempts(self, kleinberg_graph):
        before = kleinberg_graph.locations
        assert darknet_swap(kleinberg_graph, 0, True, 10, False, RandomSource.from_seed(6)) == 0
        assert np.array_equal(kleinberg_graph.locations, before)


class TestRandomWalkDistribution:
    """Tests for walk endpoint tallies."""

    def test_counts_sum_to_walks(self, kleinberg_graph):
        counts, dup = random_walk_distribution_test(kleinberg_graph, 2000, 10, True, RandomSource.from_seed(1))
        assert len(counts) == kleinberg_graph.size()
        assert counts.sum() == 2000
        assert 0 <= dup <= 2000

    def test_zero_hops_returns_origin(self, kleinberg_graph):
        """Test that walks of length zero always end on their origin."""
        counts, dup = random_walk_distribution_test(kleinberg_graph, 500, 0, False, RandomSource.from_seed(1))
        assert dup == 500
        assert counts.sum() == 500

    def test_uniform_walk_favors_high_degree(self, poisson_graph):
        """Test that uniform walk endpoints track node degree."""
        counts, _ = random_walk_distribution_test(poisson_graph, 20000, 20, True, RandomSource.from_seed(2))
        assert np.corrcoef(counts, degrees(poisson_graph))[0, 1] > 0.5

    def test_corrected_walk_ignores_degree(self, poisson_graph):
        """Test that corrected walk endpoints are uncorrelated with degree."""
        counts, _ = random_walk_distribution_test(poisson_graph, 20000, 40, False, RandomSource.from_seed(3))
        assert abs(np.corrcoef(counts, degrees(poisson_graph))[0, 1]) < 0.3


class TestWalkDistributionPdfs:
    """Tests for the bucketed endpoint distributions."""

    def test_keys(self, pdfs):
        assert set(pdfs) == {
            "reference",
            "uniform",
            "weighted",
            "reference_counts",
            "uniform_counts",
            "weighted_counts",
        }

    def test_bucket_shapes(self, pdfs):
        for key in ("reference", "uniform", "weighted"):
            assert len(pdfs[key]) == 20
            assert pdfs[key].sum() == 4000
            assert np.all(np.diff(pdfs[key]) >= 0)

    def test_raw_counts(self, pdfs):
        for key in ("reference_counts", "uniform_counts", "weighted_counts"):
            assert len(pdfs[key]) == 200
            assert pdfs[key].sum() == 4000

    def test_uneven_buckets_rejected(self, poisson_graph):
        with pytest.raises(ValueError):
            walk_distribution_pdfs(poisson_graph, 100, 30, 5, 10, RandomSource.from_seed(5))
