"""
Tests for configuration loading and config-driven graph building.
"""

import copy

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import load_config, load_simulation_config
from routing_sim.generators import (
    GRAPH_MODES,
    ConformingDegreeSource,
    FixedDegreeSource,
    KleinbergLengthSource,
    PoissonDegreeSource,
    UniformLengthSource,
    build_graph_from_config,
    degree_source_from_config,
    link_length_source_from_config,
)
from routing_sim.graph import RandomSource


@pytest.fixture
def config():
    return copy.deepcopy(load_simulation_config())


class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_sections_present(self, config):
        for section in ("seed", "graph", "degree", "link_length", "walks", "darknet"):
            assert section in config

    def test_default_mode_is_known(self, config):
        assert config["graph"]["mode"] in GRAPH_MODES

    def test_walk_buckets_divide_nodes(self, config):
        walks = config["walks"]
        assert walks["n_nodes"] % walks["n_buckets"] == 0

    def test_missing_config(self):
        with pytest.raises(FileNotFoundError):
            load_config("no_such_config")


class TestDegreeSourceFromConfig:
    """Tests for degree source selection."""

    def test_fixed(self):
        source = degree_source_from_config({"model": "fixed", "degree": 5}, RandomSource.from_seed(1))
        assert isinstance(source, FixedDegreeSource)
        assert source.next_degree() == 5

    def test_poisson(self):
        source = degree_source_from_config({"model": "poisson", "mean": 7}, RandomSource.from_seed(1))
        assert isinstance(source, PoissonDegreeSource)
        assert source.mean == 7.0

    def test_conforming(self, tmp_path):
        path = tmp_path / "degrees.txt"
        path.write_text("4 1\n")
        source = degree_source_from_config(
            {"model": "conforming", "distribution_file": str(path)}, RandomSource.from_seed(1)
        )
        assert isinstance(source, ConformingDegreeSource)
        assert source.next_degree() == 4

    def test_conforming_needs_file(self):
        with pytest.raises(ValueError):
            degree_source_from_config({"model": "conforming", "distribution_file": None}, RandomSource.from_seed(1))

    def test_unknown_model(self):
        with pytest.raises(ValueError):
            degree_source_from_config({"model": "zipf"}, RandomSource.from_seed(1))


class TestLinkLengthSourceFromConfig:
    """Tests for link length source selection."""

    def test_models(self):
        assert isinstance(link_length_source_from_config({"model": "kleinberg"}, 100), KleinbergLengthSource)
        assert isinstance(link_length_source_from_config({"model": "uniform"}, 100), UniformLengthSource)

    def test_unknown_model(self):
        with pytest.raises(ValueError):
            link_length_source_from_config({"model": "pareto"}, 100)


class TestBuildGraphFromConfig:
    """Tests for building graphs from a config dictionary."""

    @pytest.mark.parametrize("mode", GRAPH_MODES)
    def test_every_mode(self, config, mode):
        config["graph"].update({"mode": mode, "n": 100})
        graph = build_graph_from_config(config, RandomSource.from_seed(3))
        assert graph.size() == 100
        assert all(node.degree() >= node.target_degree for node in graph)

    def test_sandberg_degree(self, config):
        config["graph"].update({"mode": "sandberg", "n": 50})
        graph = build_graph_from_config(config, RandomSource.from_seed(3))
        assert all(node.degree() == 3 for node in graph)

    def test_slow_generation(self, config):
        config["graph"].update({"mode": "kleinberg", "n": 80, "fast_generation": False})
        config["degree"] = {"model": "poisson", "mean": 5}
        graph = build_graph_from_config(config, RandomSource.from_seed(3))
        assert graph.size() == 80

    def test_unknown_mode(self, config):
        config["graph"]["mode"] = "lattice"
        with pytest.raises(ValueError):
            build_graph_from_config(config, RandomSource.from_seed(3))
