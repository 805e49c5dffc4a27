"""
Test Hubbard Model Matrix Elements
==================================
Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
import pytest

from hubbard_ed.core.hubbard_model import HubbardModel
from hubbard_ed.core.lattice import create_chain
from hubbard_ed.core.exceptions import BlockSizeError, ConfigError, LabelRangeError


class TestInteraction:
    """Diagonal U n_up n_down term."""

    def test_reference_values(self, hubbard_2site):
        assert hubbard_2site.interaction(15) == 4.0
        assert hubbard_2site.interaction(5) == 2.0
        assert hubbard_2site.interaction(1) == 0.0
        assert hubbard_2site.interaction(0) == 0.0

    def test_counts_double_occupancy(self, hubbard_3site):
        for label in range(hubbard_3site.basis_size):
            bits = hubbard_3site.state(label).to_bits()
            doubles = sum(bits[i] * bits[i + 3] for i in range(3))
            assert hubbard_3site.interaction(label) == 2.0 * doubles

    def test_signed_label(self, hubbard_2site):
        assert hubbard_2site.interaction(-15) == 4.0


class TestKinetic:
    """Hopping connectivity and fermionic sign."""

    def test_reference_values(self, hubbard_2site):
        assert hubbard_2site.kinetic(0) == []
        assert hubbard_2site.kinetic(1) == [2]
        assert hubbard_2site.kinetic(5) == [6, 9]

    def test_full_state_is_frozen(self, hubbard_2site):
        assert hubbard_2site.kinetic(15) == []

    def test_sign_propagates(self, hubbard_2site):
        assert hubbard_2site.kinetic(-5) == [-6, -9]

    def test_jordan_wigner_sign(self, hubbard_3site):
        # Up electrons on sites 0 and 1; moving site 0 -> 2 crosses site 1
        assert hubbard_3site.kinetic(48) == [-24, 40]

    def test_sorted_and_unique(self, hubbard_3site):
        for label in range(hubbard_3site.basis_size):
            linked = hubbard_3site.kinetic(label)
            mags = [abs(s) for s in linked]
            assert mags == sorted(set(mags))
            assert label not in mags

    def test_conserves_spin_populations(self, hubbard_3site):
        def populations(label):
            bits = hubbard_3site.state(label).to_bits()
            return sum(bits[:3]), sum(bits[3:])

        for label in range(hubbard_3site.basis_size):
            for target in hubbard_3site.kinetic(label):
                assert populations(abs(target)) == populations(label)

    def test_hopping_terms(self, hubbard_3site):
        assert hubbard_3site.hopping_terms(48) == [(24, -1.0), (40, 1.0)]

    def test_label_out_of_range(self, hubbard_2site):
        with pytest.raises(LabelRangeError):
            hubbard_2site.kinetic(16)


class TestGeometry:
    """Restricting hops to a chain."""

    def test_chain_hops_to_neighbor_only(self):
        model = HubbardModel(3, geometry=create_chain(3))
        assert model.kinetic(32) == [16]

    def test_complete_hops_everywhere(self, hubbard_3site):
        assert hubbard_3site.kinetic(32) == [8, 16]

    def test_ring_wraparound_sign(self):
        model = HubbardModel(3, geometry=create_chain(3, periodic=True))
        assert model.kinetic(48) == [-24, 40]

    def test_geometry_size_mismatch(self):
        with pytest.raises(ConfigError):
            HubbardModel(2, geometry=create_chain(3))

    def test_invalid_site_count(self):
        with pytest.raises(ConfigError):
            HubbardModel(0)


class TestFullHamiltonian:
    """build_hamiltonian() and matrix_element()."""

    def test_matrix_elements(self, hubbard_2site):
        assert hubbard_2site.matrix_element(5, 5) == 2.0
        assert hubbard_2site.matrix_element(6, 5) == 1.0
        assert hubbard_2site.matrix_element(9, 5) == 1.0
        assert hubbard_2site.matrix_element(10, 5) == 0.0
        assert hubbard_2site.matrix_element(-6, 5) == -1.0

    def test_hermitian(self, hubbard_3site):
        H = hubbard_3site.build_hamiltonian().toarray()
        assert H.shape == (64, 64)
        np.testing.assert_array_equal(H, H.T)

    def test_matches_matrix_element(self, hubbard_2site):
        H = hubbard_2site.build_hamiltonian().toarray()
        for a in range(16):
            for b in range(16):
                assert H[a, b] == hubbard_2site.matrix_element(a, b)

    def test_size_limit(self, hubbard_2site):
        with pytest.raises(BlockSizeError):
            hubbard_2site.build_hamiltonian(max_sites=1)
