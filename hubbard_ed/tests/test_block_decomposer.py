"""
Test Block Decomposer
=====================
Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
import pytest

from hubbard_ed.solvers.block_decomposer import BlockDecomposer, find_sub_block
from hubbard_ed.core.packed import dimension_of, expand_to_dense
from hubbard_ed.core.exceptions import BlockSizeError


# 3 sites, one up and one down electron, t=1, U=2
BLOCK_9_STATES = [9, 10, 12, 17, 18, 20, 33, 34, 36]
BLOCK_9_ELEMENTS = [
    2,
    1, 0,
    1, 1, 0,
    1, 0, 0, 0,
    0, 1, 0, 1, 2,
    0, 0, 1, 1, 1, 0,
    1, 0, 0, 1, 0, 0, 0,
    0, 1, 0, 0, 1, 0, 1, 0,
    0, 0, 1, 0, 0, 1, 1, 1, 2,
]


class TestThreeSiteBlock:
    """Reference block seeded at label 9."""

    def test_states(self, hubbard_3site):
        block = find_sub_block(hubbard_3site, 9)
        assert set(block.states) == set(BLOCK_9_STATES)
        assert block.states == sorted(block.states)

    def test_packed_elements(self, hubbard_3site):
        block = find_sub_block(hubbard_3site, 9)
        assert len(block.elements) == 45
        assert dimension_of(len(block.elements)) == block.size == 9
        np.testing.assert_array_equal(block.elements, BLOCK_9_ELEMENTS)
        print("✅ 3-site reference block test passed")

    def test_diagonal(self, hubbard_3site):
        block = find_sub_block(hubbard_3site, 9)
        np.testing.assert_array_equal(
            np.diag(expand_to_dense(block.elements)),
            [2, 0, 0, 0, 2, 0, 0, 0, 2],
        )

    def test_any_member_seeds_same_block(self, hubbard_3site):
        decomposer = BlockDecomposer(hubbard_3site)
        for seed in BLOCK_9_STATES + [-36]:
            block = decomposer.find_sub_block(seed)
            assert block.states == BLOCK_9_STATES
            np.testing.assert_array_equal(block.elements, BLOCK_9_ELEMENTS)


class TestSmallBlocks:
    """Two-site blocks."""

    def test_vacuum(self, hubbard_2site):
        block = find_sub_block(hubbard_2site, 0)
        assert block.states == [0]
        np.testing.assert_array_equal(block.elements, [0.0])

    def test_single_electron(self, hubbard_2site):
        block = find_sub_block(hubbard_2site, 1)
        assert block.states == [1, 2]
        np.testing.assert_array_equal(block.elements, [0.0, 1.0, 0.0])

    def test_half_filling(self, hubbard_2site):
        block = find_sub_block(hubbard_2site, 5)
        assert block.states == [5, 6, 9, 10]
        dense = block.to_dense()
        np.testing.assert_array_equal(dense, dense.T)
        np.testing.assert_array_equal(np.diag(dense), [2, 0, 0, 2])


class TestAgainstFullHamiltonian:
    """Packed block equals the restriction of the full H."""

    def test_blocks_are_submatrices(self, hubbard_3site):
        H = hubbard_3site.build_hamiltonian().toarray()
        decomposer = BlockDecomposer(hubbard_3site)
        for seed in (0, 1, 9, 27, 48, 63):
            block = decomposer.find_sub_block(seed)
            idx = np.array(block.states)
            np.testing.assert_array_equal(block.to_dense(), H[np.ix_(idx, idx)])

    def test_block_is_closed(self, hubbard_3site):
        H = hubbard_3site.build_hamiltonian().toarray()
        block = find_sub_block(hubbard_3site, 48)
        outside = np.setdiff1d(np.arange(64), block.states)
        assert np.all(H[np.ix_(outside, block.states)] == 0)


def test_max_block_size(hubbard_3site):
    decomposer = BlockDecomposer(hubbard_3site, max_block_size=4)
    with pytest.raises(BlockSizeError):
        decomposer.find_sub_block(9)
