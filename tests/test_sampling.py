"""
Tests for weighted index sampling and link sources.
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from routing_sim.generators.sampling import (
    closest_index,
    cumulative_weights,
    sample_index,
)
from routing_sim.generators.link_length import (
    KleinbergLengthSource,
    KleinbergLinkSource,
    UniformLengthSource,
)
from routing_sim.generators.builders import generate_nodes
from routing_sim.generators.degree_sources import FixedDegreeSource
from routing_sim.graph import GraphParam, RandomSource


class TestClosestIndex:
    """Tests for nearest cumulative value lookup."""

    def test_exact_match(self):
        """Test that a value equal to an element returns its index."""
        values = np.array([0.5, 1.5, 3.0, 7.0])
        assert closest_index(values, 3.0) == 2

    def test_interior_boundary_resolves_to_boundary(self):
        """Test that an interior boundary value maps to that boundary."""
        values = np.cumsum([1.0, 2.0, 3.0, 4.0])
        for i, v in enumerate(values):
            assert closest_index(values, v) == i

    def test_prefers_lesser_when_closer(self):
        """Test that the lower neighbor wins when it is closer."""
        values = np.array([1.0, 2.0, 4.0])
        assert closest_index(values, 2.9) == 1

    def test_tie_keeps_greater(self):
        """Test that an exact midpoint keeps the insertion point."""
        values = np.array([1.0, 2.0, 4.0])
        assert closest_index(values, 3.0) == 2

    def test_clamps_beyond_end(self):
        """Test that values past the end clamp to the last index."""
        values = np.array([1.0, 2.0, 4.0])
        assert closest_index(values, 100.0) == 2

    def test_below_start(self):
        """Test that values below the first element return 0."""
        values = np.array([1.0, 2.0, 4.0])
        assert closest_index(values, 0.0) == 0

    def test_total_returns_last(self):
        """Test that drawing exactly the total returns the last index."""
        weights = np.array([0.3, 1.2, 0.7, 2.5, 0.1])
        S = np.cumsum(weights)
        assert closest_index(S, S[-1]) == len(S) - 1

    def test_empty_raises(self):
        """Test that an empty array is rejected."""
        with pytest.raises(ValueError):
            closest_index(np.array([]), 1.0)

    def test_result_is_nearest(self):
        """Test that no other index is strictly closer, for random draws."""
        rng = np.random.default_rng(7)
        S = np.cumsum(rng.random(50) + 0.01)
        for x in rng.random(2000) * S[-1]:
            idx = closest_index(S, x)
            best = np.min(np.abs(S - x))
            assert abs(S[idx] - x) <= best


class TestCumulativeWeights:
    """Tests for the 1/d cumulative weight table."""

    @pytest.fixture
    def locations(self):
        return np.array([0.0, 0.1, 0.25, 0.5, 0.8])

    def test_non_decreasing(self, locations):
        """Test that the table is non-decreasing."""
        S = cumulative_weights(2, locations)
        assert np.all(np.diff(S) >= 0)

    def test_total_is_sum_of_weights(self, locations):
        """Test that the last entry is the sum of 1/d over other nodes."""
        S = cumulative_weights(0, locations)
        expected = 1 / 0.1 + 1 / 0.25 + 1 / 0.5 + 1 / 0.2
        assert abs(S[-1] - expected) < 1e-9

    def test_source_slot_has_zero_weight(self, locations):
        """Test that the source occupies a slot with no weight."""
        S = cumulative_weights(2, locations)
        assert len(S) == len(locations)
        assert S[2] == S[1]

    def test_source_first(self, locations):
        """Test that a source at index 0 starts the table at zero."""
        S = cumulative_weights(0, locations)
        assert S[0] == 0.0

    def test_coincident_locations_rejected(self):
        """Test that two nodes at the same location are rejected."""
        with pytest.raises(ValueError):
            cumulative_weights(0, np.array([0.3, 0.3, 0.6]))


class TestSampleIndex:
    """Tests for weighted draws from a cumulative table."""

    def test_heavy_step_captures_draws(self):
        """Test that draws concentrate on both ends of a heavy step."""
        S = np.cumsum([1.0, 1.0, 100.0, 1.0, 1.0])
        rng = RandomSource.from_seed(3)
        draws = [sample_index(S, rng) for _ in range(2000)]
        counts = np.bincount(draws, minlength=5)
        assert counts[1] + counts[2] > 0.95 * len(draws)

    def test_frequencies_follow_nearest_value_regions(self):
        """Test that each index gets the mass of the draws nearest its value."""
        S = np.cumsum([2.0, 1.0, 4.0, 0.5, 2.5])
        rng = RandomSource.from_seed(9)
        n_draws = 20000
        counts = np.bincount([sample_index(S, rng) for _ in range(n_draws)], minlength=len(S))

        midpoints = (S[:-1] + S[1:]) / 2
        edges = np.concatenate([[0.0], midpoints, [S[-1]]])
        expected = np.diff(edges) / S[-1]
        assert np.allclose(counts / n_draws, expected, atol=0.02)

    def test_within_bounds(self):
        """Test that every draw is a valid index."""
        S = np.cumsum(np.linspace(0.1, 1.0, 20))
        rng = RandomSource.from_seed(11)
        for _ in range(500):
            assert 0 <= sample_index(S, rng) < 20


class TestLengthSources:
    """Tests for continuous link length sources."""

    def test_kleinberg_length_range(self):
        """Test that lengths stay within [1/n, 1/2]."""
        source = KleinbergLengthSource(1000)
        rng = RandomSource.from_seed(5)
        lengths = np.array([source.sample_length(rng) for _ in range(5000)])
        assert lengths.min() >= 1 / 1000
        assert lengths.max() <= 0.5

    def test_kleinberg_length_is_log_uniform(self):
        """Test that log lengths are roughly uniform (median at geometric mean)."""
        n = 1000
        source = KleinbergLengthSource(n)
        rng = RandomSource.from_seed(6)
        lengths = np.array([source.sample_length(rng) for _ in range(20000)])
        geometric_mid = np.sqrt((1 / n) * 0.5)
        assert abs(np.mean(lengths < geometric_mid) - 0.5) < 0.02

    def test_kleinberg_length_needs_two_nodes(self):
        with pytest.raises(ValueError):
            KleinbergLengthSource(1)

    def test_uniform_length_range(self):
        source = UniformLengthSource()
        rng = RandomSource.from_seed(8)
        lengths = np.array([source.sample_length(rng) for _ in range(2000)])
        assert lengths.min() >= 0.0
        assert lengths.max() <= 0.5
        assert abs(lengths.mean() - 0.25) < 0.02


class TestKleinbergLinkSource:
    """Tests for the cached 1/d peer sampler."""

    @pytest.fixture
    def nodes(self):
        graph = generate_nodes(GraphParam(200, fast_generation=True), RandomSource.from_seed(1), FixedDegreeSource(4))
        return graph.nodes

    def test_table_built_once(self, nodes):
        """Test that a source's table is memoized across draws."""
        source = KleinbergLinkSource(nodes)
        rng = RandomSource.from_seed(2)
        source.sample_peer(nodes[10], rng)
        table = source.cumulative_table(nodes[10])
        for _ in range(50):
            source.sample_peer(nodes[10], rng)
        assert source.cumulative_table(nodes[10]) is table
        assert source.cache_size() == 1

    def test_cache_per_source(self, nodes):
        """Test that every source gets its own table."""
        source = KleinbergLinkSource(nodes)
        rng = RandomSource.from_seed(2)
        for node in nodes[:5]:
            source.sample_peer(node, rng)
        assert source.cache_size() == 5
        source.clear_cache()
        assert source.cache_size() == 0

    def test_nearby_peers_favored(self, nodes):
        """Test that close peers are drawn more often than distant ones."""
        source = KleinbergLinkSource(nodes)
        rng = RandomSource.from_seed(4)
        src = nodes[100]
        distances = np.array([src.distance_to(source.sample_peer(src, rng)) for _ in range(4000)])
        assert np.mean(distances < 0.05) > np.mean(distances > 0.45)
        # 1/d puts roughly half the mass within sqrt(n)/n of the source
        assert np.median(distances) < 0.1
