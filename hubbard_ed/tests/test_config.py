"""
Test Configuration and Lattice Geometry
=======================================
Author: Masamichi Iizumi, Tamaki Iizumi
"""

import pytest

from hubbard_ed import ModelConfig, SolverConfig, SpectrumDriver
from hubbard_ed.core.lattice import create_chain, create_complete, create_geometry, SystemGeometry
from hubbard_ed.core.exceptions import BlockSizeError, ConfigError, HubbardEDError


class TestLattice:
    """Hopping pairs per geometry."""

    def test_complete(self):
        geom = create_complete(3)
        assert geom.n_bonds == 3
        assert geom.hopping_pairs() == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]

    def test_chain(self):
        assert create_chain(3).hopping_pairs() == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_ring(self):
        geom = create_chain(4, periodic=True)
        assert geom.name == "ring"
        assert geom.n_bonds == 4
        assert (3, 0) in geom.hopping_pairs()
        assert (0, 2) not in geom.hopping_pairs()

    def test_two_site_ring_has_one_bond(self):
        assert create_chain(2, periodic=True).n_bonds == 1

    def test_bad_bonds(self):
        with pytest.raises(ConfigError):
            SystemGeometry(n_sites=2, bonds=[(0, 0)])
        with pytest.raises(ConfigError):
            SystemGeometry(n_sites=2, bonds=[(0, 2)])

    def test_unknown_geometry(self):
        with pytest.raises(ConfigError):
            create_geometry("torus", 3)


class TestModelConfig:

    def test_build_model(self):
        model = ModelConfig(3, 0.5, 4.0, "chain").build_model()
        assert model.site_count == 3
        assert model.hopping_amplitude == 0.5
        assert model.interaction_strength == 4.0
        assert model.geometry.name == "chain"

    def test_invalid(self):
        with pytest.raises(ConfigError):
            ModelConfig(site_count=0).validate()
        with pytest.raises(ConfigError):
            ModelConfig(geometry="torus").validate()

    def test_errors_share_base(self):
        with pytest.raises(HubbardEDError):
            ModelConfig(site_count=-1).build_model()


class TestSolverConfig:

    def test_build_driver(self):
        model = ModelConfig(2).build_model()
        driver = SolverConfig(method="dense", on_failure="skip").build_driver(model)
        assert isinstance(driver, SpectrumDriver)
        assert driver.method == "dense"
        assert driver.on_failure == "skip"

    def test_invalid(self):
        with pytest.raises(ConfigError):
            SolverConfig(method="lanczos").validate()
        with pytest.raises(ConfigError):
            SolverConfig(on_failure="retry").validate()
        with pytest.raises(ConfigError):
            SolverConfig(max_block_size=0).validate()
        with pytest.raises(ConfigError):
            SolverConfig(max_full_sites=0).validate()

    def test_to_dict(self):
        assert SolverConfig().to_dict()["method"] == "packed"

    def test_full_hamiltonian_limit(self):
        model = ModelConfig(3).build_model()
        assert SolverConfig(max_full_sites=3).full_hamiltonian(model).shape == (64, 64)
        with pytest.raises(BlockSizeError):
            SolverConfig(max_full_sites=2).full_hamiltonian(model)
